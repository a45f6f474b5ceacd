"""SQLAlchemy-backed repository implementations."""

from .giftcard_repository import SqlGiftCardRepository
from .moderation_repository import SqlModerationSettingsRepository
from .payment_repository import SqlPaymentRepository
from .withdrawal_repository import SqlWithdrawalRepository

__all__ = [
    "SqlGiftCardRepository",
    "SqlModerationSettingsRepository",
    "SqlPaymentRepository",
    "SqlWithdrawalRepository",
]
