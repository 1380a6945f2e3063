"""User aggregate root: storefront accounts for customers and administrators."""

from datetime import datetime
from enum import Enum

from protean.fields import DateTime, Integer, String

from storefront.domain import storefront
from storefront.identity.user.events import UserRegistered


class Role(Enum):
    CUSTOMER = "customer"
    ADMIN = "admin"


@storefront.aggregate
class User:
    """A registered account.

    Only the password hash is stored; the plain password never leaves the
    registration and login handlers.
    """

    id: Integer(identifier=True)
    username: String(required=True, max_length=50)
    email: String(required=True, max_length=254)
    password_hash: String(required=True, max_length=255)
    name: String(required=True, max_length=100)
    role: String(max_length=20, choices=Role, default=Role.CUSTOMER.value)
    created_at: DateTime(default=datetime.now)

    @property
    def is_admin(self) -> bool:
        return self.role == Role.ADMIN.value

    @classmethod
    def register(cls, id, username, email, password_hash, name, role=Role.CUSTOMER.value):
        user = cls(
            id=id,
            username=username,
            email=email.lower(),
            password_hash=password_hash,
            name=name,
            role=role,
            created_at=datetime.now(),
        )
        user.raise_(
            UserRegistered(
                user_id=user.id,
                username=user.username,
                email=user.email,
                role=user.role,
            )
        )
        return user
