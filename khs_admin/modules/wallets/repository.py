"""Repository protocols for the stores the wallet reads."""

from __future__ import annotations

from datetime import datetime
from typing import Protocol, Sequence

from khs_admin.db.models import GiftCard as GiftCardModel, Payment as PaymentModel, Withdrawal as WithdrawalModel


class PaymentRepository(Protocol):
    async def list_payments(self) -> Sequence[PaymentModel]:
        ...

    async def list_created_between(self, start: datetime, end: datetime) -> Sequence[PaymentModel]:
        ...

    async def list_with_fees(self) -> Sequence[PaymentModel]:
        ...


class WithdrawalRepository(Protocol):
    async def list_withdrawals(self, status: str | None = None) -> Sequence[WithdrawalModel]:
        ...

    async def list_created_between(self, start: datetime, end: datetime) -> Sequence[WithdrawalModel]:
        ...


class GiftCardReader(Protocol):
    async def list_cards(self, status: str | None = None) -> Sequence[GiftCardModel]:
        ...

    async def list_created_between(self, start: datetime, end: datetime) -> Sequence[GiftCardModel]:
        ...
