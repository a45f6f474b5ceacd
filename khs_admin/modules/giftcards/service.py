"""Domain service for gift card issuance and lifecycle."""

from __future__ import annotations

import logging
from typing import Callable, Sequence

from sqlalchemy.ext.asyncio import AsyncSession

from khs_admin.core.clock import Clock, SystemClock, today
from khs_admin.db.models import GiftCard as GiftCardModel
from khs_admin.infrastructure.database.repositories.giftcard_repository import SqlGiftCardRepository

from .codes import generate_gift_card_code
from .exceptions import GiftCardNotFoundError, GiftCardStateError
from .models import GiftCard, GiftCardCohort, GiftCardIssueInput, GiftCardStatus, GiftCardUsage
from .repository import GiftCardRepository

logger = logging.getLogger(__name__)


class GiftCardService:
    """Encapsulates gift card use cases.

    Aggregate reads (``get_total_value``, ``get_active_cards`` and
    ``get_expired_cards``) expire stale cards first so the cohorts always
    reflect today's date as reported by the injected clock.
    """

    def __init__(
        self,
        repository: GiftCardRepository,
        clock: Clock | None = None,
        code_factory: Callable[[], str] = generate_gift_card_code,
    ) -> None:
        self._repository = repository
        self._clock = clock or SystemClock()
        self._code_factory = code_factory

    @classmethod
    def with_session(
        cls,
        session: AsyncSession,
        clock: Clock | None = None,
        code_factory: Callable[[], str] = generate_gift_card_code,
    ) -> "GiftCardService":
        return cls(SqlGiftCardRepository(session), clock, code_factory)

    async def issue_gift_card(self, payload: GiftCardIssueInput) -> GiftCard:
        code = await self._generate_unique_code()
        model = await self._repository.create_card(
            code=code,
            original_value_cents=payload.original_value_cents,
            current_balance_cents=payload.original_value_cents,
            status=GiftCardStatus.ACTIVE.value,
            purchase_date=today(self._clock),
            expiry_date=payload.expiry_date,
            purchaser=payload.purchaser,
            recipient=payload.recipient,
            created_at=self._clock.now(),
        )
        logger.info("Issued gift card %s worth %d cents", model.code, model.original_value_cents)
        return self._to_domain(model)

    async def find_all(self) -> list[GiftCard]:
        rows = await self._repository.list_cards()
        return self._to_domain_list(rows)

    async def find_one(self, identifier: str) -> GiftCard:
        model = await self._repository.get_by_identifier(identifier)
        if model is None:
            raise GiftCardNotFoundError(f"Gift card not found for ID/code: {identifier}")
        return self._to_domain(model)

    async def deactivate_gift_card(self, card_id: str) -> GiftCard:
        card = await self._get_existing(card_id)
        if not card.is_active():
            raise GiftCardStateError("Gift card is already inactive or used.")

        model = await self._repository.update_card(
            card.id,
            status=GiftCardStatus.INACTIVE.value,
            last_used_date=today(self._clock),
        )
        logger.info("Deactivated gift card %s", model.code)
        return self._to_domain(model)

    async def refund_gift_card(self, card_id: str, amount_cents: int) -> GiftCard:
        card = await self._get_existing(card_id)
        if not card.is_active():
            raise GiftCardStateError("Gift card is not active. Cannot refund.")

        model = await self._repository.update_card(
            card.id,
            current_balance_cents=card.current_balance_cents + amount_cents,
        )
        logger.info(
            "Refunded %d cents to gift card %s, balance now %d cents",
            amount_cents,
            model.code,
            model.current_balance_cents,
        )
        return self._to_domain(model)

    async def get_usage_history(self, card_id: str) -> GiftCardUsage:
        card = await self._get_existing(card_id)
        return GiftCardUsage(card=card, last_used_date=card.last_used_date)

    async def delete_all_gift_cards(self) -> int:
        deleted = await self._repository.delete_all()
        logger.warning("Deleted all gift cards (%d rows)", deleted)
        return deleted

    async def auto_expire_cards(self) -> int:
        """Mark ACTIVE cards whose expiry date is before today as EXPIRED."""
        stale = await self._repository.list_expirable(today(self._clock))
        if not stale:
            return 0
        expired = await self._repository.mark_expired([model.id for model in stale])
        logger.info("Auto-expired %d gift card(s)", expired)
        return expired

    async def get_total_value(self) -> GiftCardCohort:
        await self.auto_expire_cards()
        cards = self._to_domain_list(await self._repository.list_cards())
        return GiftCardCohort(
            total_cards=len(cards),
            total_value_cents=sum(card.original_value_cents for card in cards),
        )

    async def get_active_cards(self) -> GiftCardCohort:
        await self.auto_expire_cards()
        cards = self._to_domain_list(await self._repository.list_cards(GiftCardStatus.ACTIVE.value))
        return GiftCardCohort(
            total_cards=len(cards),
            total_value_cents=sum(card.current_balance_cents for card in cards),
            cards=cards,
        )

    async def get_expired_cards(self) -> GiftCardCohort:
        await self.auto_expire_cards()
        cards = self._to_domain_list(await self._repository.list_cards(GiftCardStatus.EXPIRED.value))
        return GiftCardCohort(
            total_cards=len(cards),
            total_value_cents=sum(card.original_value_cents for card in cards),
            cards=cards,
        )

    async def _get_existing(self, card_id: str) -> GiftCard:
        model = await self._repository.get_by_id(card_id)
        if model is None:
            raise GiftCardNotFoundError("Gift card not found.")
        return self._to_domain(model)

    async def _generate_unique_code(self) -> str:
        while True:
            code = self._code_factory()
            if await self._repository.get_by_code(code) is None:
                return code
            logger.debug("Gift card code %s already taken, retrying", code)

    @staticmethod
    def _to_domain(model: GiftCardModel) -> GiftCard:
        return GiftCard.from_orm(model)

    @classmethod
    def _to_domain_list(cls, rows: Sequence[GiftCardModel]) -> list[GiftCard]:
        return [cls._to_domain(row) for row in rows]
