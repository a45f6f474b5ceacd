"""Storage for the moderation configuration row."""

from __future__ import annotations

import logging
from dataclasses import dataclass

from sqlalchemy.ext.asyncio import AsyncSession

from khs_admin.db.models import ModerationSettings as ModerationSettingsModel
from khs_admin.infrastructure.database.repositories.moderation_repository import SqlModerationSettingsRepository

from .models import UNSET, ModerationSettings, ModerationSettingsUpdateInput
from .repository import ModerationSettingsRepository

logger = logging.getLogger(__name__)


@dataclass(slots=True)
class ModerationService:
    repository: ModerationSettingsRepository

    @classmethod
    def with_session(cls, session: AsyncSession) -> "ModerationService":
        return cls(SqlModerationSettingsRepository(session))

    async def get_settings(self) -> ModerationSettings:
        row = await self._ensure_row()
        return self._to_domain(row)

    async def update_settings(self, payload: ModerationSettingsUpdateInput) -> ModerationSettings:
        row = await self._ensure_row()
        current = self._to_domain(row)

        banned_words = (
            list(payload.banned_words)
            if payload.banned_words is not UNSET
            else current.banned_words
        )
        auto_flag_reviews = (
            payload.auto_flag_reviews
            if payload.auto_flag_reviews is not UNSET
            else current.auto_flag_reviews
        )
        notify_admin = (
            payload.notify_admin
            if payload.notify_admin is not UNSET
            else current.notify_admin
        )
        review_flag_threshold = (
            payload.review_flag_threshold
            if payload.review_flag_threshold is not UNSET
            else current.review_flag_threshold
        )

        row = await self.repository.save_settings(
            row,
            banned_words=banned_words,
            auto_flag_reviews=auto_flag_reviews,
            notify_admin=notify_admin,
            review_flag_threshold=review_flag_threshold,
        )
        logger.info("Moderation settings updated (%d banned words)", len(banned_words))
        return self._to_domain(row)

    async def _ensure_row(self) -> ModerationSettingsModel:
        row = await self.repository.get_settings()
        if row is None:
            defaults = ModerationSettings(id="")
            row = await self.repository.create_settings(
                banned_words=defaults.banned_words,
                auto_flag_reviews=defaults.auto_flag_reviews,
                notify_admin=defaults.notify_admin,
                review_flag_threshold=defaults.review_flag_threshold,
            )
        return row

    @staticmethod
    def _to_domain(model: ModerationSettingsModel) -> ModerationSettings:
        return ModerationSettings.from_orm(model)
