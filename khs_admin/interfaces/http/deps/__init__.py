"""Reusable FastAPI dependencies."""

from .clock import get_clock
from .database import get_db_session
from .giftcards import get_gift_card_service
from .moderation import get_moderation_service
from .wallet import get_wallet_service

__all__ = [
    "get_clock",
    "get_db_session",
    "get_gift_card_service",
    "get_moderation_service",
    "get_wallet_service",
]
