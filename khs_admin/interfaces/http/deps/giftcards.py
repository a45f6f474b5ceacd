"""Gift card dependency providers."""

from functools import partial

from fastapi import Depends
from sqlalchemy.ext.asyncio import AsyncSession

from khs_admin.core.clock import Clock
from khs_admin.core.config import get_settings
from khs_admin.modules.giftcards import GiftCardService, generate_gift_card_code

from .clock import get_clock
from .database import get_db_session


def get_gift_card_service(
    db: AsyncSession = Depends(get_db_session),
    clock: Clock = Depends(get_clock),
) -> GiftCardService:
    code_factory = partial(generate_gift_card_code, get_settings().gift_card_code_prefix)
    return GiftCardService.with_session(db, clock, code_factory)


__all__ = ["get_gift_card_service"]
