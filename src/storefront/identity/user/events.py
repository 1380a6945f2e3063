"""Domain events for the User aggregate."""

from protean.fields import Integer, String

from storefront.domain import storefront


@storefront.event(part_of="User")
class UserRegistered:
    """A new storefront account was created."""

    __version__ = 1

    user_id: Integer(required=True)
    username: String(required=True)
    email: String(required=True)
    role: String(required=True)
