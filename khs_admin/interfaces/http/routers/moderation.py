"""Moderation configuration endpoints."""
from fastapi import APIRouter, Depends
from sqlalchemy.ext.asyncio import AsyncSession

from khs_admin.interfaces.http.deps import get_db_session, get_moderation_service
from khs_admin.modules.moderation import UNSET, ModerationService, ModerationSettingsUpdateInput
from khs_admin.schemas import ModerationSettingsData, ModerationSettingsResponse, ModerationSettingsUpdate

router = APIRouter()


@router.get("/settings", response_model=ModerationSettingsResponse)
async def get_moderation_settings(
    service: ModerationService = Depends(get_moderation_service),
    db: AsyncSession = Depends(get_db_session),
) -> ModerationSettingsResponse:
    settings = await service.get_settings()
    await db.commit()
    return ModerationSettingsResponse(
        message="Moderation settings retrieved successfully.",
        data=ModerationSettingsData.model_validate(settings),
    )


@router.put("/settings", response_model=ModerationSettingsResponse)
async def update_moderation_settings(
    payload: ModerationSettingsUpdate,
    service: ModerationService = Depends(get_moderation_service),
    db: AsyncSession = Depends(get_db_session),
) -> ModerationSettingsResponse:
    # only the threshold is nullable; null elsewhere means "leave as is"
    update_data = {
        key: value
        for key, value in payload.model_dump(exclude_unset=True).items()
        if value is not None or key == "review_flag_threshold"
    }
    settings = await service.update_settings(
        ModerationSettingsUpdateInput(
            banned_words=update_data.get("banned_words", UNSET),
            auto_flag_reviews=update_data.get("auto_flag_reviews", UNSET),
            notify_admin=update_data.get("notify_admin", UNSET),
            review_flag_threshold=update_data.get("review_flag_threshold", UNSET),
        )
    )
    await db.commit()
    return ModerationSettingsResponse(
        message="Moderation settings updated successfully.",
        data=ModerationSettingsData.model_validate(settings),
    )
