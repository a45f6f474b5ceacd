"""SQLAlchemy implementation for withdrawal reads"""

from __future__ import annotations

from datetime import datetime
from typing import Sequence

from sqlalchemy import select
from sqlalchemy.ext.asyncio import AsyncSession

from khs_admin.db.models import Withdrawal


class SqlWithdrawalRepository:
    def __init__(self, session: AsyncSession) -> None:
        self.session = session

    async def list_withdrawals(self, status: str | None = None) -> Sequence[Withdrawal]:
        stmt = select(Withdrawal)
        if status:
            stmt = stmt.where(Withdrawal.status == status)
        result = await self.session.execute(stmt)
        return result.scalars().all()

    async def list_created_between(self, start: datetime, end: datetime) -> Sequence[Withdrawal]:
        stmt = select(Withdrawal).where(Withdrawal.created_at >= start, Withdrawal.created_at < end)
        result = await self.session.execute(stmt)
        return result.scalars().all()
