"""Gift card domain exports."""

from .codes import generate_gift_card_code
from .exceptions import GiftCardError, GiftCardNotFoundError, GiftCardStateError
from .models import GiftCard, GiftCardCohort, GiftCardIssueInput, GiftCardStatus, GiftCardUsage
from .service import GiftCardService

__all__ = [
    "GiftCard",
    "GiftCardCohort",
    "GiftCardIssueInput",
    "GiftCardStatus",
    "GiftCardUsage",
    "GiftCardService",
    "GiftCardError",
    "GiftCardNotFoundError",
    "GiftCardStateError",
    "generate_gift_card_code",
]
