"""Repository protocol for moderation settings."""

from __future__ import annotations

from typing import Protocol

from khs_admin.db.models import ModerationSettings as ModerationSettingsModel


class ModerationSettingsRepository(Protocol):
    async def get_settings(self) -> ModerationSettingsModel | None:
        ...

    async def create_settings(
        self,
        *,
        banned_words: list[str],
        auto_flag_reviews: bool,
        notify_admin: bool,
        review_flag_threshold: int | None,
    ) -> ModerationSettingsModel:
        ...

    async def save_settings(
        self,
        row: ModerationSettingsModel,
        *,
        banned_words: list[str],
        auto_flag_reviews: bool,
        notify_admin: bool,
        review_flag_threshold: int | None,
    ) -> ModerationSettingsModel:
        ...
