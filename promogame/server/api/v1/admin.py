"""
Admin API Endpoints.

This module provides endpoints for reviewing submitted payments.
It allows listing payment requests and approving or denying them; approval
grants the user their game chances.
"""

from fastapi import APIRouter

from promogame.core.models.io import (
    PaymentRequestsResponse,
    UserIdRequest,
    UserUpdateResponse,
    to_record,
)
from promogame.server.services.deps import AdminGuard, PromotionServiceDep

router = APIRouter(dependencies=[AdminGuard])


@router.get(
    "/requests",
    response_model=PaymentRequestsResponse,
    summary="List Payment Requests",
    description="Users who submitted a payment (any status except pending), most recently updated first.",
    responses={401: {"description": "Missing or wrong X-Admin-Key"}},
)
async def list_requests(service: PromotionServiceDep):
    users = await service.list_payment_requests()
    return PaymentRequestsResponse(requests=[to_record(user) for user in users])


@router.post(
    "/approve",
    response_model=UserUpdateResponse,
    summary="Approve Payment",
    description="Mark the payment approved and grant the configured number of game chances.",
    responses={
        400: {"description": "User ID missing"},
        401: {"description": "Missing or wrong X-Admin-Key"},
        404: {"description": "User not found"},
    },
)
async def approve_request(body: UserIdRequest, service: PromotionServiceDep):
    user = await service.approve_payment(body.user_id)
    return UserUpdateResponse(message="Payment approved successfully", user=to_record(user))


@router.post(
    "/deny",
    response_model=UserUpdateResponse,
    summary="Deny Payment",
    responses={
        400: {"description": "User ID missing"},
        401: {"description": "Missing or wrong X-Admin-Key"},
        404: {"description": "User not found"},
    },
)
async def deny_request(body: UserIdRequest, service: PromotionServiceDep):
    user = await service.deny_payment(body.user_id)
    return UserUpdateResponse(message="Payment denied successfully", user=to_record(user))
