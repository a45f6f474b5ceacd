"""Domain models for gift cards."""

from __future__ import annotations

from dataclasses import dataclass, field
from datetime import date, datetime
from enum import Enum
from typing import Optional

from khs_admin.db import models as orm


class GiftCardStatus(str, Enum):
    ACTIVE = "active"
    INACTIVE = "inactive"
    EXPIRED = "expired"


@dataclass(slots=True)
class GiftCard:
    id: str
    code: str
    original_value_cents: int
    current_balance_cents: int
    status: GiftCardStatus
    purchase_date: date
    purchaser: str
    recipient: str
    expiry_date: Optional[date] = None
    last_used_date: Optional[date] = None
    created_at: Optional[datetime] = None

    @classmethod
    def from_orm(cls, instance: orm.GiftCard) -> "GiftCard":
        return cls(
            id=str(instance.id),
            code=instance.code,
            original_value_cents=instance.original_value_cents,
            current_balance_cents=instance.current_balance_cents,
            status=GiftCardStatus(instance.status),
            purchase_date=instance.purchase_date,
            purchaser=instance.purchaser,
            recipient=instance.recipient,
            expiry_date=instance.expiry_date,
            last_used_date=instance.last_used_date,
            created_at=instance.created_at,
        )

    def is_active(self) -> bool:
        return self.status is GiftCardStatus.ACTIVE


@dataclass(slots=True)
class GiftCardIssueInput:
    original_value_cents: int
    purchaser: str
    recipient: str
    expiry_date: Optional[date] = None


@dataclass(slots=True)
class GiftCardUsage:
    card: GiftCard
    last_used_date: Optional[date]
    note: str = "Transactions feature not yet implemented."


@dataclass(slots=True)
class GiftCardCohort:
    """Count and value of a group of cards, optionally with the cards themselves."""

    total_cards: int
    total_value_cents: int
    cards: list[GiftCard] = field(default_factory=list)
