"""SQLAlchemy implementation for payment reads"""

from __future__ import annotations

from datetime import datetime
from typing import Sequence

from sqlalchemy import select
from sqlalchemy.ext.asyncio import AsyncSession

from khs_admin.db.models import Payment


class SqlPaymentRepository:
    def __init__(self, session: AsyncSession) -> None:
        self.session = session

    async def list_payments(self) -> Sequence[Payment]:
        result = await self.session.execute(select(Payment))
        return result.scalars().all()

    async def list_created_between(self, start: datetime, end: datetime) -> Sequence[Payment]:
        stmt = select(Payment).where(Payment.created_at >= start, Payment.created_at < end)
        result = await self.session.execute(stmt)
        return result.scalars().all()

    async def list_with_fees(self) -> Sequence[Payment]:
        stmt = select(Payment).where(Payment.fee_cents > 0)
        result = await self.session.execute(stmt)
        return result.scalars().all()
