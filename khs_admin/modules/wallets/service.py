"""Wallet domain service"""

from __future__ import annotations

import logging
from dataclasses import dataclass, field
from datetime import datetime, timedelta, timezone
from typing import Iterable, Optional

from sqlalchemy.ext.asyncio import AsyncSession

from khs_admin.core.clock import Clock, SystemClock, day_window, today
from khs_admin.db.models import GiftCard as GiftCardModel, Payment as PaymentModel, Withdrawal as WithdrawalModel
from khs_admin.infrastructure.database.repositories import (
    SqlGiftCardRepository,
    SqlPaymentRepository,
    SqlWithdrawalRepository,
)

from .models import (
    EarningsSummary,
    PendingWithdrawalSummary,
    PlatformFeeSummary,
    WalletBalanceSummary,
    WalletTransactionRecord,
)
from .repository import GiftCardReader, PaymentRepository, WithdrawalRepository

logger = logging.getLogger(__name__)

PENDING_WITHDRAWAL_STATUS = "Pending"
_EPOCH = datetime.min.replace(tzinfo=timezone.utc)


@dataclass(slots=True)
class WalletService:
    payments: PaymentRepository
    withdrawals: WithdrawalRepository
    gift_cards: GiftCardReader
    clock: Clock = field(default_factory=SystemClock)

    @classmethod
    def with_session(cls, session: AsyncSession, clock: Optional[Clock] = None) -> "WalletService":
        return cls(
            SqlPaymentRepository(session),
            SqlWithdrawalRepository(session),
            SqlGiftCardRepository(session),
            clock or SystemClock(),
        )

    async def get_all_wallet_transactions(self) -> list[WalletTransactionRecord]:
        payments = await self.payments.list_payments()
        withdrawals = await self.withdrawals.list_withdrawals()
        gift_cards = await self.gift_cards.list_cards()

        records = [self._payment_to_transaction(row) for row in payments]
        records.extend(self._withdrawal_to_transaction(row) for row in withdrawals)
        records.extend(self._gift_card_to_transaction(row) for row in gift_cards)

        # newest first; type then id break ties so the order is total
        records.sort(key=lambda record: (record.type, record.id))
        records.sort(key=lambda record: _as_utc(record.occurred_at), reverse=True)
        return records

    async def get_total_wallet_balance(self) -> WalletBalanceSummary:
        total_balance = self._balance(
            await self.payments.list_payments(),
            await self.gift_cards.list_cards(),
            await self.withdrawals.list_withdrawals(),
        )

        start, end = day_window(today(self.clock) - timedelta(days=1))
        yesterday_balance = self._balance(
            await self.payments.list_created_between(start, end),
            await self.gift_cards.list_created_between(start, end),
            await self.withdrawals.list_created_between(start, end),
        )

        logger.debug("Wallet balance %d cents, yesterday %d cents", total_balance, yesterday_balance)
        return WalletBalanceSummary(
            total_balance_cents=total_balance,
            yesterday_balance_cents=yesterday_balance,
            percent_change=percent_change(total_balance, yesterday_balance),
        )

    async def get_pending_withdrawals(self) -> PendingWithdrawalSummary:
        pending = await self.withdrawals.list_withdrawals(PENDING_WITHDRAWAL_STATUS)
        return PendingWithdrawalSummary(
            total_pending_amount_cents=sum(row.amount_cents or 0 for row in pending),
            total_requests=len(pending),
        )

    async def get_todays_earnings(self) -> EarningsSummary:
        current_day = today(self.clock)
        today_start, today_end = day_window(current_day)
        yesterday_start, yesterday_end = day_window(current_day - timedelta(days=1))

        today_total = _sum_amounts(await self.payments.list_created_between(today_start, today_end))
        yesterday_total = _sum_amounts(await self.payments.list_created_between(yesterday_start, yesterday_end))

        return EarningsSummary(
            today_total_cents=today_total,
            yesterday_total_cents=yesterday_total,
            percent_change=percent_change(today_total, yesterday_total),
        )

    async def get_platform_fees(self) -> PlatformFeeSummary:
        # averages payment amounts, not fee values
        with_fees = await self.payments.list_with_fees()
        total = _sum_amounts(with_fees)
        average = total / len(with_fees) if with_fees else 0
        return PlatformFeeSummary(
            total_fee_amount_cents=total,
            fee_payment_count=len(with_fees),
            avg_fee_rate=f"{average:.2f}",
        )

    @staticmethod
    def _balance(
        payments: Iterable[PaymentModel],
        gift_cards: Iterable[GiftCardModel],
        withdrawals: Iterable[WithdrawalModel],
    ) -> int:
        return (
            _sum_amounts(payments)
            + sum(_gift_card_balance(card) for card in gift_cards)
            - _sum_amounts(withdrawals)
        )

    @staticmethod
    def _payment_to_transaction(model: PaymentModel) -> WalletTransactionRecord:
        if model.refund_type:
            kind, description = "Refund", f"Refund to {model.client}"
        elif model.fee_cents:
            kind, description = "Fee", f"Fee charged for {model.business}"
        else:
            kind, description = "Earning", f"Payment from {model.client}"
        return WalletTransactionRecord(
            id=str(model.id),
            user=model.client,
            type=kind,
            amount_cents=model.amount_cents or 0,
            description=description,
            status=_capitalize(model.status),
            balance_cents=0,
            date=_format_date(model.created_at),
            time=_format_time(model.created_at),
            occurred_at=model.created_at,
        )

    @staticmethod
    def _withdrawal_to_transaction(model: WithdrawalModel) -> WalletTransactionRecord:
        return WalletTransactionRecord(
            id=str(model.id),
            user=model.business_name,
            type="Withdrawal",
            amount_cents=model.amount_cents or 0,
            description=f"Withdrawal request by {model.business_name}",
            status=_capitalize(model.status),
            balance_cents=model.current_balance_cents or 0,
            date=_format_date(model.created_at),
            time=_format_time(model.created_at),
            occurred_at=model.created_at,
        )

    @staticmethod
    def _gift_card_to_transaction(model: GiftCardModel) -> WalletTransactionRecord:
        return WalletTransactionRecord(
            id=str(model.id),
            user=model.purchaser,
            type="Earning",
            amount_cents=model.original_value_cents or 0,
            description=f"Gift card purchased for {model.recipient}",
            status=_capitalize(model.status),
            balance_cents=model.current_balance_cents or 0,
            date=_format_date(model.created_at),
            time=_format_time(model.created_at),
            occurred_at=model.created_at,
        )


def percent_change(current: int, baseline: int) -> str:
    """Format the change from ``baseline`` to ``current``; ``0.00%`` without a positive baseline."""
    if baseline <= 0:
        return "0.00%"
    return f"{(current - baseline) / baseline * 100:.2f}%"


def _sum_amounts(rows: Iterable[PaymentModel | WithdrawalModel]) -> int:
    return sum(row.amount_cents or 0 for row in rows)


def _gift_card_balance(card: GiftCardModel) -> int:
    # a spent card (zero balance) counts at its original value
    return card.current_balance_cents or card.original_value_cents or 0


def _capitalize(value: Optional[str]) -> str:
    if not value:
        return ""
    return value[:1].upper() + value[1:]


def _format_date(moment: Optional[datetime]) -> str:
    return moment.date().isoformat() if moment else ""


def _format_time(moment: Optional[datetime]) -> str:
    return moment.strftime("%I:%M %p") if moment else ""


def _as_utc(moment: Optional[datetime]) -> datetime:
    if moment is None:
        return _EPOCH
    if moment.tzinfo is None:
        return moment.replace(tzinfo=timezone.utc)
    return moment.astimezone(timezone.utc)
