"""Session-based authentication dependencies for FastAPI routes.

The signed session cookie carries only the user id; the user is loaded
from the repository on every request.
"""

from fastapi import Depends, HTTPException, Request
from protean.exceptions import ObjectNotFoundError
from protean.utils.globals import current_domain

from storefront.identity.user.user import User

SESSION_USER_KEY = "user_id"


def login_session(request: Request, user: User) -> None:
    request.session[SESSION_USER_KEY] = user.id


def logout_session(request: Request) -> None:
    request.session.pop(SESSION_USER_KEY, None)


async def current_user(request: Request) -> User | None:
    user_id = request.session.get(SESSION_USER_KEY)
    if user_id is None:
        return None
    try:
        return current_domain.repository_for(User).get(user_id)
    except ObjectNotFoundError:
        # Account removed since login; drop the stale session
        logout_session(request)
        return None


async def require_user(user: User | None = Depends(current_user)) -> User:
    if user is None:
        raise HTTPException(status_code=401, detail="Not authenticated")
    return user


async def require_admin(user: User = Depends(require_user)) -> User:
    if not user.is_admin:
        raise HTTPException(status_code=403, detail="Admin access required")
    return user
