"""
Game Settings Endpoints.

Read and write the game's speed and precision knobs for trial and
logged-in play.
"""

from fastapi import APIRouter

from promogame.core.models.io import (
    GameSettingsPayload,
    GameSettingsUpdate,
    GameSettingsUpdateResponse,
)
from promogame.server.services.deps import PromotionServiceDep

router = APIRouter()


@router.get(
    "/settings",
    response_model=GameSettingsPayload,
    summary="Get Game Settings",
    description="Return the saved game settings, or the defaults when none were saved.",
)
async def get_game_settings(service: PromotionServiceDep):
    return GameSettingsPayload.from_values(await service.get_game_settings())


@router.post(
    "/settings",
    response_model=GameSettingsUpdateResponse,
    summary="Update Game Settings",
    responses={400: {"description": "A settings field is missing"}},
)
async def update_game_settings(body: GameSettingsUpdate, service: PromotionServiceDep):
    saved = await service.update_game_settings(
        body.trial_speed,
        body.trial_precision,
        body.logged_in_speed,
        body.logged_in_precision,
    )
    return GameSettingsUpdateResponse(
        message="Game settings updated successfully",
        settings=GameSettingsPayload.from_values(saved),
    )
