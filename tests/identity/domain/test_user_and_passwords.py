import pytest
from protean.exceptions import ValidationError
from storefront.identity.user.events import UserRegistered
from storefront.identity.user.passwords import hash_password, verify_password
from storefront.identity.user.user import Role, User


class TestPasswords:
    def test_hash_is_not_plaintext(self):
        hashed = hash_password("s3cret-pass")
        assert hashed != "s3cret-pass"
        assert hashed.startswith("$pbkdf2-sha256$")

    def test_verify(self):
        hashed = hash_password("s3cret-pass")
        assert verify_password("s3cret-pass", hashed) is True
        assert verify_password("wrong", hashed) is False

    def test_same_password_hashes_differently(self):
        assert hash_password("s3cret-pass") != hash_password("s3cret-pass")


class TestUser:
    def _register(self, **overrides):
        data = {
            "id": 1,
            "username": "jane",
            "email": "Jane@Example.com",
            "password_hash": hash_password("s3cret-pass"),
            "name": "Jane Doe",
        }
        data.update(overrides)
        return User.register(**data)

    def test_register_defaults_to_customer(self):
        user = self._register()
        assert user.role == Role.CUSTOMER.value
        assert user.is_admin is False
        assert user.email == "jane@example.com"

    def test_register_raises_event_without_password(self):
        user = self._register(role="admin")
        event = user._events[0]
        assert isinstance(event, UserRegistered)
        assert event.user_id == 1
        assert event.role == "admin"
        assert not hasattr(event, "password_hash")

    def test_unknown_role_rejected(self):
        with pytest.raises(ValidationError):
            self._register(role="superuser")
