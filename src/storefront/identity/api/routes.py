"""FastAPI endpoints for registration, login and the current session."""

from fastapi import APIRouter, Depends, HTTPException, Request
from protean.utils.globals import current_domain

from storefront.api.schemas import StatusResponse
from storefront.identity.api.dependencies import login_session, logout_session, require_user
from storefront.identity.api.schemas import LoginRequest, RegisterRequest, UserResponse
from storefront.identity.user.authentication import authenticate
from storefront.identity.user.registration import RegisterUser
from storefront.identity.user.user import User

router = APIRouter(prefix="/api", tags=["identity"])


def user_response(user: User) -> UserResponse:
    return UserResponse(
        id=user.id,
        username=user.username,
        email=user.email,
        name=user.name,
        role=user.role,
        created_at=user.created_at,
    )


@router.post("/register", status_code=201, response_model=UserResponse)
async def register(body: RegisterRequest, request: Request) -> UserResponse:
    command = RegisterUser(
        username=body.username,
        email=body.email,
        password=body.password,
        name=body.name,
    )
    user_id = current_domain.process(command, asynchronous=False)
    user = current_domain.repository_for(User).get(user_id)
    login_session(request, user)
    return user_response(user)


@router.post("/login", response_model=UserResponse)
async def login(body: LoginRequest, request: Request) -> UserResponse:
    user = authenticate(body.username, body.password)
    if user is None:
        raise HTTPException(status_code=401, detail="Invalid username or password")
    login_session(request, user)
    return user_response(user)


@router.post("/logout", response_model=StatusResponse)
async def logout(request: Request) -> StatusResponse:
    logout_session(request)
    return StatusResponse()


@router.get("/user", response_model=UserResponse)
async def get_user(user: User = Depends(require_user)) -> UserResponse:
    return user_response(user)
