"""Moderation dependency providers."""

from fastapi import Depends
from sqlalchemy.ext.asyncio import AsyncSession

from khs_admin.modules.moderation import ModerationService

from .database import get_db_session


def get_moderation_service(db: AsyncSession = Depends(get_db_session)) -> ModerationService:
    return ModerationService.with_session(db)


__all__ = ["get_moderation_service"]
