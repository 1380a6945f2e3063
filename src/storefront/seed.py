"""Demo catalogue, banners and admin account.

Seeding goes through the regular commands, so ids come from the same
sequences as everything else. Running it twice changes nothing.
"""

from protean.utils.globals import current_domain

from storefront.catalogue.banner.banner import Banner
from storefront.catalogue.banner.management import CreateBanner
from storefront.catalogue.category.category import Category
from storefront.catalogue.category.management import CreateCategory
from storefront.catalogue.product.management import CreateProduct
from storefront.catalogue.product.product import Product
from storefront.identity.user.registration import RegisterUser
from storefront.identity.user.user import Role, User
from storefront.utils.logging import get_logger

logger = get_logger(__name__)

UNSPLASH = "https://images.unsplash.com"

CATEGORIES = [
    {"name": "Electronics", "slug": "electronics", "image_url": f"{UNSPLASH}/photo-1546868871-7041f2a55e12"},
    {"name": "Fashion", "slug": "fashion", "image_url": f"{UNSPLASH}/photo-1551488831-00ddcb6c6bd3"},
    {"name": "Accessories", "slug": "accessories", "image_url": f"{UNSPLASH}/photo-1470309864661-68328b2cd0a5"},
    {"name": "Sports", "slug": "sports", "image_url": f"{UNSPLASH}/photo-1511556532299-8f662fc26c06"},
]

PRODUCTS = [
    {
        "name": "Bluetooth Premium Headphones",
        "slug": "bluetooth-premium-headphones",
        "description": "High-quality wireless headphones with noise cancellation and premium sound",
        "price": 299.90,
        "compare_price": 349.90,
        "category": "electronics",
        "image_url": f"{UNSPLASH}/photo-1505740420928-5e560c06d30e",
        "rating": 4.5,
        "review_count": 128,
        "is_featured": True,
    },
    {
        "name": "Smartwatch Pro Series",
        "slug": "smartwatch-pro-series",
        "description": "Advanced smartwatch with health tracking, GPS, and long battery life",
        "price": 599.90,
        "category": "electronics",
        "image_url": f"{UNSPLASH}/photo-1523275335684-37898b6baf30",
        "rating": 5.0,
        "review_count": 94,
        "is_featured": True,
    },
    {
        "name": "Ultra Runner Shoes",
        "slug": "ultra-runner-shoes",
        "description": "Professional running shoes with advanced cushioning and stability",
        "price": 349.90,
        "category": "sports",
        "image_url": f"{UNSPLASH}/photo-1598327105666-5b89351aff97",
        "rating": 4.0,
        "review_count": 56,
        "is_featured": True,
        "is_new": True,
    },
    {
        "name": "Premium Leather Jacket",
        "slug": "premium-leather-jacket",
        "description": "Genuine leather jacket with stylish design and comfortable fit",
        "price": 719.90,
        "compare_price": 899.90,
        "category": "fashion",
        "image_url": f"{UNSPLASH}/photo-1591047139829-d91aecb6caea",
        "rating": 4.5,
        "review_count": 112,
        "is_featured": True,
    },
    {
        "name": "Air Max Sports Shoes",
        "slug": "air-max-sports-shoes",
        "description": "Comfortable and stylish sports shoes for everyday use",
        "price": 499.90,
        "category": "sports",
        "image_url": f"{UNSPLASH}/photo-1542291026-7eec264c27ff",
        "rating": 4.0,
        "review_count": 89,
    },
    {
        "name": "Premium Fit T-Shirt",
        "slug": "premium-fit-t-shirt",
        "description": "High-quality cotton t-shirt with perfect fit",
        "price": 89.90,
        "category": "fashion",
        "image_url": f"{UNSPLASH}/photo-1546938576-6e6a64f317cc",
        "rating": 3.5,
        "review_count": 42,
    },
    {
        "name": "RGB Gaming Headset",
        "slug": "rgb-gaming-headset",
        "description": "Professional gaming headset with RGB lighting and surround sound",
        "price": 359.90,
        "compare_price": 399.90,
        "category": "electronics",
        "image_url": f"{UNSPLASH}/photo-1583394838336-acd977736f90",
        "rating": 4.0,
        "review_count": 76,
    },
    {
        "name": "Vintage Gold Watch",
        "slug": "vintage-gold-watch",
        "description": "Elegant gold watch with vintage design and premium craftsmanship",
        "price": 799.90,
        "category": "accessories",
        "image_url": f"{UNSPLASH}/photo-1620799140188-3b2a02fd9a77",
        "rating": 4.5,
        "review_count": 32,
    },
]

BANNERS = [
    {
        "title": "Cutting-edge Technology for Your Daily Life",
        "subtitle": "Discover the most innovative devices at special prices",
        "image_url": f"{UNSPLASH}/photo-1607082348824-0a96f2a4b9da",
        "button_text": "See offers",
        "button_link": "/products",
        "display_order": 0,
    },
    {
        "title": "New Spring/Summer Collection",
        "subtitle": "Renew your wardrobe with the latest trends",
        "image_url": f"{UNSPLASH}/photo-1483985988355-763728e1935b",
        "button_text": "Shop now",
        "button_link": "/products?category=fashion",
        "display_order": 1,
    },
]

ADMIN = {
    "username": "admin",
    "email": "admin@storefront.example",
    "password": "admin123",
    "name": "Admin User",
}


def seed() -> dict[str, int]:
    """Load the demo data into the current domain. Returns how many records were created."""
    created = {"categories": 0, "products": 0, "banners": 0, "users": 0}

    category_repo = current_domain.repository_for(Category)
    for data in CATEGORIES:
        if category_repo.find_by_slug(data["slug"]) is None:
            current_domain.process(CreateCategory(**data), asynchronous=False)
            created["categories"] += 1

    product_repo = current_domain.repository_for(Product)
    for data in PRODUCTS:
        if product_repo.find_by_slug(data["slug"]) is not None:
            continue
        fields = {k: v for k, v in data.items() if k != "category"}
        category = category_repo.find_by_slug(data["category"])
        current_domain.process(
            CreateProduct(category_id=category.id if category else None, **fields),
            asynchronous=False,
        )
        created["products"] += 1

    if not current_domain.repository_for(Banner).in_display_order():
        for data in BANNERS:
            current_domain.process(CreateBanner(**data), asynchronous=False)
            created["banners"] += 1

    if current_domain.repository_for(User).find_by_username(ADMIN["username"]) is None:
        current_domain.process(RegisterUser(role=Role.ADMIN.value, **ADMIN), asynchronous=False)
        created["users"] += 1

    logger.info("seed.completed", **created)
    return created
