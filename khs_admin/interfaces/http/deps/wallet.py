"""Wallet dependency providers."""

from fastapi import Depends
from sqlalchemy.ext.asyncio import AsyncSession

from khs_admin.core.clock import Clock
from khs_admin.modules.wallets import WalletService

from .clock import get_clock
from .database import get_db_session


def get_wallet_service(
    db: AsyncSession = Depends(get_db_session),
    clock: Clock = Depends(get_clock),
) -> WalletService:
    return WalletService.with_session(db, clock)


__all__ = ["get_wallet_service"]
