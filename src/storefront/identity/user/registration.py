"""User registration: command and handler."""

from protean import handle
from protean.exceptions import ValidationError
from protean.fields import String
from protean.utils.globals import current_domain

from storefront.domain import storefront
from storefront.identity.user.passwords import hash_password
from storefront.identity.user.user import Role, User
from storefront.sequence import next_id
from storefront.utils.logging import get_logger

logger = get_logger(__name__)


@storefront.command(part_of="User")
class RegisterUser:
    username: String(required=True, min_length=3, max_length=50)
    email: String(required=True, max_length=254)
    password: String(required=True, min_length=6, max_length=128)
    name: String(required=True, max_length=100)
    role: String(choices=Role, default=Role.CUSTOMER.value)


@storefront.command_handler(part_of=User)
class RegisterUserHandler:
    @handle(RegisterUser)
    def register_user(self, command):
        repo = current_domain.repository_for(User)

        if repo.find_by_username(command.username) is not None:
            raise ValidationError({"username": ["Username already exists"]})
        if repo.find_by_email(command.email) is not None:
            raise ValidationError({"email": ["Email already registered"]})

        user = User.register(
            id=next_id("users"),
            username=command.username,
            email=command.email,
            password_hash=hash_password(command.password),
            name=command.name,
            role=command.role,
        )
        repo.add(user)

        logger.info("user.registered", user_id=user.id, role=user.role)
        return user.id
