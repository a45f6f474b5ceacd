"""Pydantic schemas used across the project."""
from datetime import date, datetime
from typing import Optional

from pydantic import BaseModel, ConfigDict, Field


class MessageResponse(BaseModel):
    message: str


# --- gift cards -------------------------------------------------------------


class GiftCardIssueRequest(BaseModel):
    original_value_cents: int = Field(..., gt=0)
    purchaser: str = Field(..., min_length=1, max_length=100)
    recipient: str = Field(..., min_length=1, max_length=100)
    expiry_date: Optional[date] = None


class GiftCardRefundRequest(BaseModel):
    amount_cents: int = Field(..., gt=0)


class GiftCardResponse(BaseModel):
    id: str
    code: str
    original_value_cents: int
    current_balance_cents: int
    status: str
    purchase_date: date
    expiry_date: Optional[date] = None
    last_used_date: Optional[date] = None
    purchaser: str
    recipient: str
    created_at: Optional[datetime] = None


class GiftCardEnvelope(MessageResponse):
    data: GiftCardResponse


class GiftCardListResponse(MessageResponse):
    total: int
    data: list[GiftCardResponse]


class GiftCardRefundResponse(MessageResponse):
    updated_balance_cents: int
    data: GiftCardResponse


class GiftCardUsageData(BaseModel):
    last_used_date: Optional[date] = None
    note: str


class GiftCardUsageResponse(MessageResponse):
    data: GiftCardUsageData


class GiftCardDeleteResponse(MessageResponse):
    deleted: int


class GiftCardTotalValueResponse(MessageResponse):
    total_cards: int
    total_value_cents: int


class GiftCardActiveResponse(MessageResponse):
    total_active_cards: int
    total_active_value_cents: int
    data: list[GiftCardResponse]


class GiftCardExpiredResponse(MessageResponse):
    total_expired_cards: int
    total_expired_value_cents: int
    data: list[GiftCardResponse]


# --- wallet -----------------------------------------------------------------


class WalletTransactionResponse(BaseModel):
    id: str
    user: str
    type: str
    amount_cents: int
    description: str
    status: str
    balance_cents: int
    date: str
    time: str

    model_config = ConfigDict(from_attributes=True)


class WalletTransactionListResponse(MessageResponse):
    total: int
    transactions: list[WalletTransactionResponse]


class WalletBalanceResponse(MessageResponse):
    total_balance_cents: int
    yesterday_balance_cents: int
    percent_change: str


class PendingWithdrawalsResponse(MessageResponse):
    total_pending_amount_cents: int
    total_requests: int


class TodaysEarningsResponse(MessageResponse):
    today_total_cents: int
    yesterday_total_cents: int
    percent_change: str


class PlatformFeesResponse(MessageResponse):
    total_fee_amount_cents: int
    fee_payment_count: int
    avg_fee_rate: str


# --- moderation -------------------------------------------------------------


class ModerationSettingsData(BaseModel):
    banned_words: list[str]
    auto_flag_reviews: bool
    notify_admin: bool
    review_flag_threshold: Optional[int] = None
    updated_at: Optional[datetime] = None

    model_config = ConfigDict(from_attributes=True)


class ModerationSettingsResponse(MessageResponse):
    data: ModerationSettingsData


class ModerationSettingsUpdate(BaseModel):
    banned_words: Optional[list[str]] = None
    auto_flag_reviews: Optional[bool] = None
    notify_admin: Optional[bool] = None
    review_flag_threshold: Optional[int] = Field(default=None, ge=1)
