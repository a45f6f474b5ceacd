"""Read-only wallet aggregates across payments, withdrawals and gift cards."""
from fastapi import APIRouter, Depends

from khs_admin.interfaces.http.deps import get_wallet_service
from khs_admin.modules.wallets import WalletService
from khs_admin.schemas import (
    PendingWithdrawalsResponse,
    PlatformFeesResponse,
    TodaysEarningsResponse,
    WalletBalanceResponse,
    WalletTransactionListResponse,
    WalletTransactionResponse,
)

router = APIRouter()


@router.get("/transactions", response_model=WalletTransactionListResponse)
async def wallet_transactions(
    service: WalletService = Depends(get_wallet_service),
) -> WalletTransactionListResponse:
    rows = await service.get_all_wallet_transactions()
    return WalletTransactionListResponse(
        message=f"Found {len(rows)} wallet transaction(s).",
        total=len(rows),
        transactions=[WalletTransactionResponse.model_validate(row) for row in rows],
    )


@router.get("/total-balance", response_model=WalletBalanceResponse)
async def wallet_total_balance(service: WalletService = Depends(get_wallet_service)) -> WalletBalanceResponse:
    summary = await service.get_total_wallet_balance()
    return WalletBalanceResponse(
        message="Total wallet balance retrieved successfully.",
        total_balance_cents=summary.total_balance_cents,
        yesterday_balance_cents=summary.yesterday_balance_cents,
        percent_change=summary.percent_change,
    )


@router.get("/pending-withdrawals", response_model=PendingWithdrawalsResponse)
async def wallet_pending_withdrawals(
    service: WalletService = Depends(get_wallet_service),
) -> PendingWithdrawalsResponse:
    summary = await service.get_pending_withdrawals()
    return PendingWithdrawalsResponse(
        message="Pending withdrawals retrieved successfully.",
        total_pending_amount_cents=summary.total_pending_amount_cents,
        total_requests=summary.total_requests,
    )


@router.get("/todays-earnings", response_model=TodaysEarningsResponse)
async def wallet_todays_earnings(service: WalletService = Depends(get_wallet_service)) -> TodaysEarningsResponse:
    summary = await service.get_todays_earnings()
    return TodaysEarningsResponse(
        message="Today's earnings retrieved successfully.",
        today_total_cents=summary.today_total_cents,
        yesterday_total_cents=summary.yesterday_total_cents,
        percent_change=summary.percent_change,
    )


@router.get("/platform-fees", response_model=PlatformFeesResponse)
async def wallet_platform_fees(service: WalletService = Depends(get_wallet_service)) -> PlatformFeesResponse:
    summary = await service.get_platform_fees()
    return PlatformFeesResponse(
        message="Platform fees retrieved successfully.",
        total_fee_amount_cents=summary.total_fee_amount_cents,
        fee_payment_count=summary.fee_payment_count,
        avg_fee_rate=summary.avg_fee_rate,
    )
