"""Wallet domain exports"""

from .models import (
    EarningsSummary,
    PendingWithdrawalSummary,
    PlatformFeeSummary,
    WalletBalanceSummary,
    WalletTransactionRecord,
)
from .service import WalletService, percent_change

__all__ = [
    "EarningsSummary",
    "PendingWithdrawalSummary",
    "PlatformFeeSummary",
    "WalletBalanceSummary",
    "WalletTransactionRecord",
    "WalletService",
    "percent_change",
]
