"""SQLAlchemy implementation for moderation settings"""

from __future__ import annotations

from sqlalchemy import select
from sqlalchemy.ext.asyncio import AsyncSession

from khs_admin.db.models import ModerationSettings


class SqlModerationSettingsRepository:
    def __init__(self, session: AsyncSession) -> None:
        self.session = session

    async def get_settings(self) -> ModerationSettings | None:
        stmt = select(ModerationSettings).order_by(ModerationSettings.id).limit(1)
        result = await self.session.execute(stmt)
        return result.scalars().first()

    async def create_settings(
        self,
        *,
        banned_words: list[str],
        auto_flag_reviews: bool,
        notify_admin: bool,
        review_flag_threshold: int | None,
    ) -> ModerationSettings:
        row = ModerationSettings(
            banned_words=banned_words,
            auto_flag_reviews=auto_flag_reviews,
            notify_admin=notify_admin,
            review_flag_threshold=review_flag_threshold,
        )
        self.session.add(row)
        await self.session.flush()
        await self.session.refresh(row)
        return row

    async def save_settings(
        self,
        row: ModerationSettings,
        *,
        banned_words: list[str],
        auto_flag_reviews: bool,
        notify_admin: bool,
        review_flag_threshold: int | None,
    ) -> ModerationSettings:
        row.banned_words = banned_words
        row.auto_flag_reviews = auto_flag_reviews
        row.notify_admin = notify_admin
        row.review_flag_threshold = review_flag_threshold
        await self.session.flush()
        await self.session.refresh(row)
        return row
