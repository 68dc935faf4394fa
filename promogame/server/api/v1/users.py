"""
Player Endpoints.

Game-progress updates issued by the frontend (remaining chances, wins),
payment proof submission and the payment status lookup.
"""

from typing import Optional

from fastapi import APIRouter

from promogame.core.models.io import (
    PaymentRequest,
    PaymentResponse,
    UpdateChancesRequest,
    UserIdRequest,
    UserStatusResponse,
    UserUpdateResponse,
    to_record,
    to_summary,
)
from promogame.server.services.deps import PromotionServiceDep

router = APIRouter()


@router.post(
    "/user/update-chances",
    response_model=UserUpdateResponse,
    summary="Update Game Chances",
    description="Overwrite the number of game chances a user has left.",
    responses={
        400: {"description": "User ID or game chances missing"},
        404: {"description": "User not found"},
    },
)
async def update_game_chances(body: UpdateChancesRequest, service: PromotionServiceDep):
    user = await service.update_game_chances(body.user_id, body.game_chances)
    return UserUpdateResponse(message="Game chances updated successfully", user=to_record(user))


@router.post(
    "/user/win",
    response_model=UserUpdateResponse,
    summary="Record Win",
    responses={
        400: {"description": "User ID missing"},
        404: {"description": "User not found"},
    },
)
async def record_win(body: UserIdRequest, service: PromotionServiceDep):
    user = await service.record_win(body.user_id)
    return UserUpdateResponse(message="Win recorded successfully", user=to_record(user))


@router.get(
    "/user/status",
    response_model=UserStatusResponse,
    summary="Payment Status",
    description="Look up a user's payment status by email.",
    responses={
        400: {"description": "Email missing"},
        404: {"description": "User not found"},
    },
)
async def user_status(service: PromotionServiceDep, email: Optional[str] = None):
    user = await service.get_user_status(email)
    return UserStatusResponse(status=user.payment_status, user=to_summary(user))


@router.post(
    "/payment",
    response_model=PaymentResponse,
    summary="Submit Payment",
    description="Attach UPI payment proof to a user and queue it for admin review.",
    responses={
        400: {"description": "Email, UPI ID or UTR number missing"},
        404: {"description": "User not found"},
    },
)
async def submit_payment(body: PaymentRequest, service: PromotionServiceDep):
    user = await service.submit_payment(body.email, body.upi_id, body.utr_number)
    return PaymentResponse(message="Payment submitted successfully", user=to_summary(user))
