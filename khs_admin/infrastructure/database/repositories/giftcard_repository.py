"""SQLAlchemy implementation of the gift card repository."""

from __future__ import annotations

from datetime import date, datetime
from typing import Iterable, Sequence

from sqlalchemy import delete, or_, select, update
from sqlalchemy.ext.asyncio import AsyncSession

from khs_admin.db.models import GiftCard


class SqlGiftCardRepository:
    """Gift card repository backed by SQLAlchemy models."""

    def __init__(self, session: AsyncSession) -> None:
        self.session = session

    async def get_by_id(self, card_id: str) -> GiftCard | None:
        stmt = select(GiftCard).where(GiftCard.id == card_id)
        result = await self.session.execute(stmt)
        return result.scalars().first()

    async def get_by_code(self, code: str) -> GiftCard | None:
        stmt = select(GiftCard).where(GiftCard.code == code)
        result = await self.session.execute(stmt)
        return result.scalars().first()

    async def get_by_identifier(self, identifier: str) -> GiftCard | None:
        stmt = select(GiftCard).where(or_(GiftCard.id == identifier, GiftCard.code == identifier))
        result = await self.session.execute(stmt)
        return result.scalars().first()

    async def list_cards(self, status: str | None = None) -> Sequence[GiftCard]:
        stmt = select(GiftCard)
        if status:
            stmt = stmt.where(GiftCard.status == status)
        stmt = stmt.order_by(GiftCard.created_at.desc(), GiftCard.code)
        result = await self.session.execute(stmt)
        return result.scalars().all()

    async def list_created_between(self, start: datetime, end: datetime) -> Sequence[GiftCard]:
        stmt = select(GiftCard).where(GiftCard.created_at >= start, GiftCard.created_at < end)
        result = await self.session.execute(stmt)
        return result.scalars().all()

    async def list_expirable(self, today: date) -> Sequence[GiftCard]:
        stmt = select(GiftCard).where(
            GiftCard.status == "active",
            GiftCard.expiry_date.is_not(None),
            GiftCard.expiry_date < today,
        )
        result = await self.session.execute(stmt)
        return result.scalars().all()

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
    ) -> GiftCard:
        card = GiftCard(
            code=code,
            original_value_cents=original_value_cents,
            current_balance_cents=current_balance_cents,
            status=status,
            purchase_date=purchase_date,
            expiry_date=expiry_date,
            purchaser=purchaser,
            recipient=recipient,
            created_at=created_at,
        )
        self.session.add(card)
        await self.session.flush()
        await self.session.refresh(card)
        return card

    async def update_card(
        self,
        card_id: str,
        *,
        status: str | None = None,
        current_balance_cents: int | None = None,
        last_used_date: date | None = None,
    ) -> GiftCard:
        card = await self.get_by_id(card_id)
        if card is None:
            raise LookupError(card_id)

        if status is not None:
            card.status = status
        if current_balance_cents is not None:
            card.current_balance_cents = current_balance_cents
        if last_used_date is not None:
            card.last_used_date = last_used_date

        await self.session.flush()
        await self.session.refresh(card)
        return card

    async def mark_expired(self, card_ids: Iterable[str]) -> int:
        ids = list(card_ids)
        if not ids:
            return 0
        stmt = (
            update(GiftCard)
            .where(GiftCard.id.in_(ids), GiftCard.status == "active")
            .values(status="expired")
            .execution_options(synchronize_session="fetch")
        )
        result = await self.session.execute(stmt)
        return result.rowcount

    async def delete_all(self) -> int:
        result = await self.session.execute(delete(GiftCard).execution_options(synchronize_session="fetch"))
        return result.rowcount
