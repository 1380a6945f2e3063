"""Credential checks for session login."""

from protean.utils.globals import current_domain

from storefront.identity.user.passwords import verify_password
from storefront.identity.user.user import User
from storefront.utils.logging import get_logger

logger = get_logger(__name__)


def authenticate(username: str, password: str) -> User | None:
    """Return the user when the credentials match, otherwise None.

    Unknown usernames and wrong passwords are indistinguishable to the caller.
    """
    user = current_domain.repository_for(User).find_by_username(username)
    if user is None or not verify_password(password, user.password_hash):
        logger.info("user.login_rejected", username=username)
        return None

    logger.info("user.logged_in", user_id=user.id)
    return user
