"""Repository protocol for gift cards."""

from __future__ import annotations

from datetime import date, datetime
from typing import Iterable, Protocol, Sequence

from khs_admin.db.models import GiftCard as GiftCardModel


class GiftCardRepository(Protocol):
    async def get_by_id(self, card_id: str) -> GiftCardModel | None:
        ...

    async def get_by_code(self, code: str) -> GiftCardModel | None:
        ...

    async def get_by_identifier(self, identifier: str) -> GiftCardModel | None:
        ...

    async def list_cards(self, status: str | None = None) -> Sequence[GiftCardModel]:
        ...

    async def list_created_between(self, start: datetime, end: datetime) -> Sequence[GiftCardModel]:
        ...

    async def list_expirable(self, today: date) -> Sequence[GiftCardModel]:
        ...

    async def create_card(
        self,
        *,
        code: str,
        original_value_cents: int,
        current_balance_cents: int,
        status: str,
        purchase_date: date,
        expiry_date: date | None,
        purchaser: str,
        recipient: str,
        created_at: datetime,
    ) -> GiftCardModel:
        ...

    async def update_card(
        self,
        card_id: str,
        *,
        status: str | None = None,
        current_balance_cents: int | None = None,
        last_used_date: date | None = None,
    ) -> GiftCardModel:
        ...

    async def mark_expired(self, card_ids: Iterable[str]) -> int:
        ...

    async def delete_all(self) -> int:
        ...
