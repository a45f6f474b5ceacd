"""
Initialise the moderation settings row with its defaults
(no banned words, auto-flagging off, admin notifications on).
"""
import asyncio

from khs_admin.infrastructure.database import get_session, init_db
from khs_admin.modules.moderation import ModerationService


async def create_default_settings():
    await init_db()

    async for db in get_session():
        service = ModerationService.with_session(db)
        settings = await service.get_settings()
        await db.commit()

        print("=" * 50)
        print("Moderation settings ready")
        print("=" * 50)
        print(f"banned words: {len(settings.banned_words)}")
        print(f"auto flag reviews: {settings.auto_flag_reviews}")
        print(f"notify admin: {settings.notify_admin}")
        print(f"review flag threshold: {settings.review_flag_threshold}")
        print("=" * 50)


if __name__ == "__main__":
    asyncio.run(create_default_settings())
