"""Pydantic request/response schemas for the Identity API."""

from __future__ import annotations

from datetime import datetime

from pydantic import Field

from storefront.api.schemas import CamelModel


class RegisterRequest(CamelModel):
    model_config = {
        "json_schema_extra": {
            "examples": [
                {
                    "username": "jane",
                    "email": "jane@example.com",
                    "password": "s3cret-pass",
                    "name": "Jane Doe",
                }
            ]
        }
    }

    username: str = Field(..., min_length=3, max_length=50)
    email: str = Field(..., max_length=254)
    password: str = Field(..., min_length=6, max_length=128)
    name: str = Field(..., max_length=100)


class LoginRequest(CamelModel):
    username: str
    password: str


class UserResponse(CamelModel):
    id: int
    username: str
    email: str
    name: str
    role: str
    created_at: datetime | None = None
