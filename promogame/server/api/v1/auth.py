"""
Registration and Login Endpoints.

Players register with name, email and password, then log in once an admin
has approved their payment. The configured admin credentials log in through
the same endpoint and receive ``isAdmin: true``.
"""

from fastapi import APIRouter, status

from promogame.core.models.io import (
    LoginRequest,
    LoginResponse,
    RegisterRequest,
    RegisterResponse,
    to_summary,
)
from promogame.server.services.deps import PromotionServiceDep

router = APIRouter()


@router.post(
    "/register",
    response_model=RegisterResponse,
    status_code=status.HTTP_201_CREATED,
    summary="Register User",
    description="Create a player account with zero game chances and a pending payment.",
    responses={
        400: {"description": "Name, email or password missing"},
        409: {"description": "Email already registered"},
    },
)
async def register(body: RegisterRequest, service: PromotionServiceDep):
    user = await service.register(body.name, body.email, body.password, body.age_consent)
    return RegisterResponse(message="User registered successfully", user=to_summary(user))


@router.post(
    "/login",
    response_model=LoginResponse,
    response_model_exclude_none=True,
    summary="Login",
    description="Authenticate a player (payment must be approved) or the administrator.",
    responses={
        400: {"description": "Email or password missing"},
        401: {"description": "Invalid email or password"},
        403: {"description": "Payment not approved"},
    },
)
async def login(body: LoginRequest, service: PromotionServiceDep):
    """
    Login.

    Returns ``isAdmin: true`` without a user object for the admin account.
    """
    user = await service.login(body.email, body.password)
    if user is None:
        return LoginResponse(message="Admin login successful", is_admin=True)
    return LoginResponse(message="Login successful", is_admin=False, user=to_summary(user))
