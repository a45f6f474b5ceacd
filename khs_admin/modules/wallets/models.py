"""Domain models for wallet aggregation."""

from __future__ import annotations

from dataclasses import dataclass
from datetime import datetime
from typing import Optional


@dataclass(slots=True)
class WalletTransactionRecord:
    id: str
    user: str
    type: str
    amount_cents: int
    description: str
    status: str
    balance_cents: int
    date: str
    time: str
    occurred_at: Optional[datetime]


@dataclass(slots=True)
class WalletBalanceSummary:
    total_balance_cents: int
    yesterday_balance_cents: int
    percent_change: str


@dataclass(slots=True)
class PendingWithdrawalSummary:
    total_pending_amount_cents: int
    total_requests: int


@dataclass(slots=True)
class EarningsSummary:
    today_total_cents: int
    yesterday_total_cents: int
    percent_change: str


@dataclass(slots=True)
class PlatformFeeSummary:
    """``avg_fee_rate`` is the mean payment amount over fee-bearing payments."""

    total_fee_amount_cents: int
    fee_payment_count: int
    avg_fee_rate: str
