"""FastAPI endpoints for the Catalogue: categories, products and banners.

Reads are public. Writes require an admin session.
"""

import json

from fastapi import APIRouter, Depends
from protean.exceptions import ObjectNotFoundError
from protean.utils.globals import current_domain

from storefront.api.schemas import StatusResponse
from storefront.catalogue.api.schemas import (
    BannerResponse,
    CategoryResponse,
    CreateBannerRequest,
    CreateCategoryRequest,
    CreateProductRequest,
    ProductResponse,
    UpdateBannerRequest,
    UpdateCategoryRequest,
    UpdateProductRequest,
)
from storefront.catalogue.banner.banner import Banner
from storefront.catalogue.banner.management import CreateBanner, DeleteBanner, UpdateBanner
from storefront.catalogue.category.category import Category
from storefront.catalogue.category.management import CreateCategory, DeleteCategory, UpdateCategory
from storefront.catalogue.product.management import CreateProduct, DeleteProduct, UpdateProduct
from storefront.catalogue.product.product import Product
from storefront.identity.api.dependencies import require_admin

category_router = APIRouter(prefix="/api/categories", tags=["categories"])
product_router = APIRouter(prefix="/api/products", tags=["products"])
banner_router = APIRouter(prefix="/api/banners", tags=["banners"])


def product_response(product: Product) -> ProductResponse:
    return ProductResponse(
        id=product.id,
        name=product.name,
        slug=product.slug,
        description=product.description,
        price=product.price,
        compare_price=product.compare_price,
        discount_percent=product.discount_percent,
        category_id=product.category_id,
        image_url=product.image_url,
        rating=product.rating,
        review_count=product.review_count,
        in_stock=product.in_stock,
        is_featured=product.is_featured,
        is_new=product.is_new,
        created_at=product.created_at,
    )


def category_response(category: Category) -> CategoryResponse:
    return CategoryResponse(
        id=category.id,
        name=category.name,
        slug=category.slug,
        image_url=category.image_url,
    )


def banner_response(banner: Banner) -> BannerResponse:
    return BannerResponse(
        id=banner.id,
        title=banner.title,
        subtitle=banner.subtitle,
        image_url=banner.image_url,
        button_text=banner.button_text,
        button_link=banner.button_link,
        display_order=banner.display_order,
        is_active=banner.is_active,
    )


def _category_by_slug(slug: str) -> Category:
    category = current_domain.repository_for(Category).find_by_slug(slug)
    if category is None:
        raise ObjectNotFoundError(f"Category '{slug}' not found")
    return category


# --- Category endpoints ---


@category_router.get("", response_model=list[CategoryResponse])
async def list_categories() -> list[CategoryResponse]:
    return [category_response(c) for c in current_domain.repository_for(Category).list_all()]


@category_router.get("/{slug}", response_model=CategoryResponse)
async def get_category(slug: str) -> CategoryResponse:
    return category_response(_category_by_slug(slug))


@category_router.post("", status_code=201, response_model=CategoryResponse, dependencies=[Depends(require_admin)])
async def create_category(body: CreateCategoryRequest) -> CategoryResponse:
    command = CreateCategory(name=body.name, slug=body.slug, image_url=body.image_url)
    category_id = current_domain.process(command, asynchronous=False)
    return category_response(current_domain.repository_for(Category).get(category_id))


@category_router.put("/{category_id}", response_model=CategoryResponse, dependencies=[Depends(require_admin)])
async def update_category(category_id: int, body: UpdateCategoryRequest) -> CategoryResponse:
    command = UpdateCategory(
        category_id=category_id,
        changes=json.dumps(body.model_dump(exclude_unset=True)),
    )
    current_domain.process(command, asynchronous=False)
    return category_response(current_domain.repository_for(Category).get(category_id))


@category_router.delete("/{category_id}", response_model=StatusResponse, dependencies=[Depends(require_admin)])
async def delete_category(category_id: int) -> StatusResponse:
    current_domain.process(DeleteCategory(category_id=category_id), asynchronous=False)
    return StatusResponse()


# --- Product endpoints ---


@product_router.get("", response_model=list[ProductResponse])
async def list_products(
    category: str | None = None,
    featured: bool | None = None,
    new: bool | None = None,
) -> list[ProductResponse]:
    """List products, optionally narrowed to one category slug, featured or new arrivals."""
    repo = current_domain.repository_for(Product)

    if category:
        products = repo.in_category(_category_by_slug(category).id)
    elif featured:
        products = repo.featured()
    elif new:
        products = repo.new_arrivals()
    else:
        products = repo.list_all()

    return [product_response(p) for p in products]


@product_router.get("/slug/{slug}", response_model=ProductResponse)
async def get_product_by_slug(slug: str) -> ProductResponse:
    product = current_domain.repository_for(Product).find_by_slug(slug)
    if product is None:
        raise ObjectNotFoundError(f"Product '{slug}' not found")
    return product_response(product)


@product_router.get("/{product_id}", response_model=ProductResponse)
async def get_product(product_id: int) -> ProductResponse:
    return product_response(current_domain.repository_for(Product).get(product_id))


@product_router.post("", status_code=201, response_model=ProductResponse, dependencies=[Depends(require_admin)])
async def create_product(body: CreateProductRequest) -> ProductResponse:
    command = CreateProduct(**body.model_dump())
    product_id = current_domain.process(command, asynchronous=False)
    return product_response(current_domain.repository_for(Product).get(product_id))


@product_router.put("/{product_id}", response_model=ProductResponse, dependencies=[Depends(require_admin)])
async def update_product(product_id: int, body: UpdateProductRequest) -> ProductResponse:
    command = UpdateProduct(
        product_id=product_id,
        changes=json.dumps(body.model_dump(exclude_unset=True)),
    )
    current_domain.process(command, asynchronous=False)
    return product_response(current_domain.repository_for(Product).get(product_id))


@product_router.delete("/{product_id}", response_model=StatusResponse, dependencies=[Depends(require_admin)])
async def delete_product(product_id: int) -> StatusResponse:
    current_domain.process(DeleteProduct(product_id=product_id), asynchronous=False)
    return StatusResponse()


# --- Banner endpoints ---


@banner_router.get("", response_model=list[BannerResponse])
async def list_banners(active: bool = False) -> list[BannerResponse]:
    banners = current_domain.repository_for(Banner).in_display_order(active_only=active)
    return [banner_response(b) for b in banners]


@banner_router.post("", status_code=201, response_model=BannerResponse, dependencies=[Depends(require_admin)])
async def create_banner(body: CreateBannerRequest) -> BannerResponse:
    banner_id = current_domain.process(CreateBanner(**body.model_dump()), asynchronous=False)
    return banner_response(current_domain.repository_for(Banner).get(banner_id))


@banner_router.put("/{banner_id}", response_model=BannerResponse, dependencies=[Depends(require_admin)])
async def update_banner(banner_id: int, body: UpdateBannerRequest) -> BannerResponse:
    command = UpdateBanner(
        banner_id=banner_id,
        changes=json.dumps(body.model_dump(exclude_unset=True)),
    )
    current_domain.process(command, asynchronous=False)
    return banner_response(current_domain.repository_for(Banner).get(banner_id))


@banner_router.delete("/{banner_id}", response_model=StatusResponse, dependencies=[Depends(require_admin)])
async def delete_banner(banner_id: int) -> StatusResponse:
    current_domain.process(DeleteBanner(banner_id=banner_id), asynchronous=False)
    return StatusResponse()
