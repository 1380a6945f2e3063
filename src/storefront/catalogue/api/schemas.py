"""Pydantic request/response schemas for the Catalogue API."""

from __future__ import annotations

from datetime import datetime

from pydantic import Field

from storefront.api.schemas import CamelModel

# --- Product schemas ---


class CreateProductRequest(CamelModel):
    model_config = {
        "json_schema_extra": {
            "examples": [
                {
                    "name": "Wireless Headphones",
                    "slug": "wireless-headphones",
                    "description": "Over-ear headphones with active noise cancellation.",
                    "price": 299.90,
                    "comparePrice": 349.90,
                    "categoryId": 1,
                    "imageUrl": "https://images.example.com/headphones.jpg",
                    "isFeatured": True,
                }
            ]
        }
    }

    name: str = Field(..., max_length=200)
    slug: str | None = Field(None, max_length=220)
    description: str | None = None
    price: float = Field(..., ge=0)
    compare_price: float | None = Field(None, ge=0)
    category_id: int | None = None
    image_url: str | None = Field(None, max_length=500)
    rating: float = Field(0.0, ge=0, le=5)
    review_count: int = Field(0, ge=0)
    in_stock: bool = True
    is_featured: bool = False
    is_new: bool = False


class UpdateProductRequest(CamelModel):
    """Partial update: only the attributes present in the body are changed."""

    name: str | None = Field(None, max_length=200)
    slug: str | None = Field(None, max_length=220)
    description: str | None = None
    price: float | None = Field(None, ge=0)
    compare_price: float | None = Field(None, ge=0)
    category_id: int | None = None
    image_url: str | None = Field(None, max_length=500)
    rating: float | None = Field(None, ge=0, le=5)
    review_count: int | None = Field(None, ge=0)
    in_stock: bool | None = None
    is_featured: bool | None = None
    is_new: bool | None = None


class ProductResponse(CamelModel):
    id: int
    name: str
    slug: str
    description: str | None = None
    price: float
    compare_price: float | None = None
    discount_percent: int | None = None
    category_id: int | None = None
    image_url: str | None = None
    rating: float = 0.0
    review_count: int = 0
    in_stock: bool = True
    is_featured: bool = False
    is_new: bool = False
    created_at: datetime | None = None


# --- Category schemas ---


class CreateCategoryRequest(CamelModel):
    model_config = {
        "json_schema_extra": {
            "examples": [
                {
                    "name": "Electronics",
                    "slug": "electronics",
                    "imageUrl": "https://images.example.com/electronics.jpg",
                }
            ]
        }
    }

    name: str = Field(..., max_length=100)
    slug: str | None = Field(None, max_length=120)
    image_url: str | None = Field(None, max_length=500)


class UpdateCategoryRequest(CamelModel):
    name: str | None = Field(None, max_length=100)
    slug: str | None = Field(None, max_length=120)
    image_url: str | None = Field(None, max_length=500)


class CategoryResponse(CamelModel):
    id: int
    name: str
    slug: str
    image_url: str | None = None


# --- Banner schemas ---


class CreateBannerRequest(CamelModel):
    title: str = Field(..., max_length=200)
    subtitle: str | None = Field(None, max_length=300)
    image_url: str = Field(..., max_length=500)
    button_text: str | None = Field(None, max_length=50)
    button_link: str | None = Field(None, max_length=500)
    display_order: int = 0
    is_active: bool = True


class UpdateBannerRequest(CamelModel):
    title: str | None = Field(None, max_length=200)
    subtitle: str | None = Field(None, max_length=300)
    image_url: str | None = Field(None, max_length=500)
    button_text: str | None = Field(None, max_length=50)
    button_link: str | None = Field(None, max_length=500)
    display_order: int | None = None
    is_active: bool | None = None


class BannerResponse(CamelModel):
    id: int
    title: str
    subtitle: str | None = None
    image_url: str
    button_text: str | None = None
    button_link: str | None = None
    display_order: int = 0
    is_active: bool = True
