"""Faker-based data generators for Locust load test scenarios.

Payloads use the camelCase field names the storefront API expects and pass
its validation rules (url-safe slugs, non-negative prices, passwords of at
least six characters).
"""

import json
import random
import uuid

from faker import Faker

fake = Faker()

# ---------- Identity ----------


def registration_data() -> dict:
    """Generate RegisterRequest payload with a unique username and email."""
    suffix = uuid.uuid4().hex[:6]
    username = f"{fake.user_name()[:30]}_{suffix}"
    return {
        "username": username,
        "email": f"{username}@{fake.free_email_domain()}",
        "password": fake.password(length=12),
        "name": fake.name()[:100],
    }


ADMIN_CREDENTIALS = {"username": "admin", "password": "admin123"}


# ---------- Catalogue ----------


def category_data() -> dict:
    """Generate CreateCategoryRequest payload; slug is derived server-side."""
    return {
        "name": f"{fake.word().capitalize()} {fake.word().capitalize()} {uuid.uuid4().hex[:4]}"[:100],
        "imageUrl": f"https://cdn.example.com/categories/{uuid.uuid4().hex}.jpg",
    }


def product_data(category_id: int | None = None) -> dict:
    """Generate CreateProductRequest payload, sometimes with a compare price."""
    price = round(random.uniform(9.99, 899.99), 2)
    word = fake.word().capitalize()
    payload = {
        "name": f"{word} {fake.word().capitalize()} {uuid.uuid4().hex[:6]}"[:200],
        "description": fake.paragraph(nb_sentences=3),
        "price": price,
        "categoryId": category_id,
        "imageUrl": f"https://cdn.example.com/products/{uuid.uuid4().hex}.jpg",
        "isFeatured": random.random() < 0.2,
        "isNew": random.random() < 0.3,
    }
    if random.random() < 0.4:
        payload["comparePrice"] = round(price * random.uniform(1.1, 1.5), 2)
    return payload


def price_change() -> dict:
    """Generate UpdateProductRequest payload touching only the price."""
    return {"price": round(random.uniform(9.99, 899.99), 2)}


# ---------- Ordering ----------


def cart_item(product_id: int) -> dict:
    return {"productId": product_id, "quantity": random.randint(1, 3)}


def order_status() -> str:
    return random.choice(["processing", "shipped", "delivered"])


# ---------- Payments ----------


def webhook_event(event_type: str, intent_id: str, failure_message: str | None = None) -> str:
    """Generate a processor webhook body for a payment intent."""
    intent = {"id": intent_id, "object": "payment_intent"}
    if failure_message:
        intent["last_payment_error"] = {"message": failure_message}
    return json.dumps(
        {
            "id": f"evt_{uuid.uuid4().hex[:16]}",
            "type": event_type,
            "data": {"object": intent},
        }
    )
