"""Administrative endpoints for issuing and managing gift cards."""
from typing import Iterable

from fastapi import APIRouter, Depends, HTTPException, status
from sqlalchemy.ext.asyncio import AsyncSession

from khs_admin.interfaces.http.deps import get_db_session, get_gift_card_service
from khs_admin.modules.giftcards import (
    GiftCard,
    GiftCardIssueInput,
    GiftCardNotFoundError,
    GiftCardService,
    GiftCardStateError,
)
from khs_admin.schemas import (
    GiftCardActiveResponse,
    GiftCardDeleteResponse,
    GiftCardEnvelope,
    GiftCardExpiredResponse,
    GiftCardIssueRequest,
    GiftCardListResponse,
    GiftCardRefundRequest,
    GiftCardRefundResponse,
    GiftCardResponse,
    GiftCardTotalValueResponse,
    GiftCardUsageData,
    GiftCardUsageResponse,
)

router = APIRouter()


@router.post("", response_model=GiftCardEnvelope, status_code=status.HTTP_201_CREATED)
async def issue_gift_card(
    payload: GiftCardIssueRequest,
    service: GiftCardService = Depends(get_gift_card_service),
    db: AsyncSession = Depends(get_db_session),
) -> GiftCardEnvelope:
    card = await service.issue_gift_card(
        GiftCardIssueInput(
            original_value_cents=payload.original_value_cents,
            purchaser=payload.purchaser,
            recipient=payload.recipient,
            expiry_date=payload.expiry_date,
        )
    )
    await db.commit()
    return GiftCardEnvelope(message="Gift card issued successfully.", data=_card_to_response(card))


@router.get("", response_model=GiftCardListResponse)
async def list_gift_cards(service: GiftCardService = Depends(get_gift_card_service)) -> GiftCardListResponse:
    cards = await service.find_all()
    return GiftCardListResponse(
        message=f"Found {len(cards)} gift card(s).",
        total=len(cards),
        data=_cards_to_response(cards),
    )


@router.delete("", response_model=GiftCardDeleteResponse)
async def delete_all_gift_cards(
    service: GiftCardService = Depends(get_gift_card_service),
    db: AsyncSession = Depends(get_db_session),
) -> GiftCardDeleteResponse:
    deleted = await service.delete_all_gift_cards()
    await db.commit()
    return GiftCardDeleteResponse(message="All gift cards have been permanently deleted.", deleted=deleted)


@router.get("/total-value", response_model=GiftCardTotalValueResponse)
async def gift_card_total_value(
    service: GiftCardService = Depends(get_gift_card_service),
    db: AsyncSession = Depends(get_db_session),
) -> GiftCardTotalValueResponse:
    cohort = await service.get_total_value()
    await db.commit()
    return GiftCardTotalValueResponse(
        message="Total value of all issued gift cards retrieved successfully.",
        total_cards=cohort.total_cards,
        total_value_cents=cohort.total_value_cents,
    )


@router.get("/active", response_model=GiftCardActiveResponse)
async def active_gift_cards(
    service: GiftCardService = Depends(get_gift_card_service),
    db: AsyncSession = Depends(get_db_session),
) -> GiftCardActiveResponse:
    cohort = await service.get_active_cards()
    await db.commit()
    return GiftCardActiveResponse(
        message="Active gift cards retrieved successfully.",
        total_active_cards=cohort.total_cards,
        total_active_value_cents=cohort.total_value_cents,
        data=_cards_to_response(cohort.cards),
    )


@router.get("/expired", response_model=GiftCardExpiredResponse)
async def expired_gift_cards(
    service: GiftCardService = Depends(get_gift_card_service),
    db: AsyncSession = Depends(get_db_session),
) -> GiftCardExpiredResponse:
    cohort = await service.get_expired_cards()
    await db.commit()
    return GiftCardExpiredResponse(
        message="Expired gift cards retrieved successfully.",
        total_expired_cards=cohort.total_cards,
        total_expired_value_cents=cohort.total_value_cents,
        data=_cards_to_response(cohort.cards),
    )


@router.get("/{identifier}", response_model=GiftCardEnvelope)
async def get_gift_card(
    identifier: str,
    service: GiftCardService = Depends(get_gift_card_service),
) -> GiftCardEnvelope:
    try:
        card = await service.find_one(identifier)
    except GiftCardNotFoundError as exc:
        raise HTTPException(status_code=status.HTTP_404_NOT_FOUND, detail=str(exc)) from exc
    return GiftCardEnvelope(message="Gift card fetched successfully.", data=_card_to_response(card))


@router.patch("/{card_id}/deactivate", response_model=GiftCardEnvelope)
async def deactivate_gift_card(
    card_id: str,
    service: GiftCardService = Depends(get_gift_card_service),
    db: AsyncSession = Depends(get_db_session),
) -> GiftCardEnvelope:
    try:
        card = await service.deactivate_gift_card(card_id)
    except GiftCardNotFoundError as exc:
        raise HTTPException(status_code=status.HTTP_404_NOT_FOUND, detail=str(exc)) from exc
    except GiftCardStateError as exc:
        raise HTTPException(status_code=status.HTTP_400_BAD_REQUEST, detail=str(exc)) from exc

    await db.commit()
    return GiftCardEnvelope(
        message=f"Gift card ({card.code}) has been deactivated.",
        data=_card_to_response(card),
    )


@router.patch("/{card_id}/refund", response_model=GiftCardRefundResponse)
async def refund_gift_card(
    card_id: str,
    payload: GiftCardRefundRequest,
    service: GiftCardService = Depends(get_gift_card_service),
    db: AsyncSession = Depends(get_db_session),
) -> GiftCardRefundResponse:
    try:
        card = await service.refund_gift_card(card_id, payload.amount_cents)
    except GiftCardNotFoundError as exc:
        raise HTTPException(status_code=status.HTTP_404_NOT_FOUND, detail=str(exc)) from exc
    except GiftCardStateError as exc:
        raise HTTPException(status_code=status.HTTP_400_BAD_REQUEST, detail=str(exc)) from exc

    await db.commit()
    return GiftCardRefundResponse(
        message=f"Refund of {payload.amount_cents} applied successfully to card ({card.code}).",
        updated_balance_cents=card.current_balance_cents,
        data=_card_to_response(card),
    )


@router.get("/{card_id}/usage-history", response_model=GiftCardUsageResponse)
async def gift_card_usage_history(
    card_id: str,
    service: GiftCardService = Depends(get_gift_card_service),
) -> GiftCardUsageResponse:
    try:
        usage = await service.get_usage_history(card_id)
    except GiftCardNotFoundError as exc:
        raise HTTPException(status_code=status.HTTP_404_NOT_FOUND, detail=str(exc)) from exc
    return GiftCardUsageResponse(
        message=f"Usage history for gift card ({usage.card.code}) retrieved successfully.",
        data=GiftCardUsageData(last_used_date=usage.last_used_date, note=usage.note),
    )


def _card_to_response(card: GiftCard) -> GiftCardResponse:
    return GiftCardResponse(
        id=card.id,
        code=card.code,
        original_value_cents=card.original_value_cents,
        current_balance_cents=card.current_balance_cents,
        status=card.status.value,
        purchase_date=card.purchase_date,
        expiry_date=card.expiry_date,
        last_used_date=card.last_used_date,
        purchaser=card.purchaser,
        recipient=card.recipient,
        created_at=card.created_at,
    )


def _cards_to_response(cards: Iterable[GiftCard]) -> list[GiftCardResponse]:
    return [_card_to_response(card) for card in cards]
