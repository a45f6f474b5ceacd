from datetime import date, datetime, timedelta, timezone

import pytest

from khs_admin.db.models import GiftCard, Payment, Withdrawal
from khs_admin.modules.wallets import WalletService, percent_change


def at(day, hour=9, minute=0):
    return datetime(2026, 10, day, hour, minute, tzinfo=timezone.utc)


def payment(amount, created_at, **extra):
    extra.setdefault("client", "Carol")
    extra.setdefault("business", "Bakery")
    extra.setdefault("status", "completed")
    return Payment(amount_cents=amount, created_at=created_at, **extra)


def withdrawal(amount, created_at, status="Pending", **extra):
    extra.setdefault("business_name", "Bakery")
    extra.setdefault("current_balance_cents", 0)
    return Withdrawal(amount_cents=amount, created_at=created_at, status=status, **extra)


def gift_card(code, balance, created_at, original=None, status="active"):
    return GiftCard(
        code=code,
        original_value_cents=original if original is not None else balance,
        current_balance_cents=balance,
        status=status,
        purchase_date=created_at.date(),
        purchaser="Alice",
        recipient="Bob",
        created_at=created_at,
    )


@pytest.fixture
def service(session, clock):
    return WalletService.with_session(session, clock)


async def test_total_balance_combines_all_stores(service, add_rows):
    await add_rows(
        payment(60, at(18)),
        payment(40, at(18)),
        gift_card("KHS-0000-0000-0001", 20, at(18), original=80),
        gift_card("KHS-0000-0000-0002", 30, at(18)),
        withdrawal(10, at(18)),
        withdrawal(20, at(18), status="Approved"),
    )

    summary = await service.get_total_wallet_balance()

    assert summary.total_balance_cents == 120
    assert summary.yesterday_balance_cents == 0
    assert summary.percent_change == "0.00%"


async def test_total_balance_percent_change_against_yesterday(service, add_rows):
    await add_rows(
        payment(100, at(17, 23, 59)),
        payment(50, at(18)),
        payment(999, at(16)),
    )

    summary = await service.get_total_wallet_balance()

    assert summary.total_balance_cents == 1149
    assert summary.yesterday_balance_cents == 100
    assert summary.percent_change == "1049.00%"


async def test_total_balance_negative_baseline_reports_zero_change(service, add_rows):
    await add_rows(payment(10, at(17)), withdrawal(50, at(17)), payment(500, at(18)))

    summary = await service.get_total_wallet_balance()

    assert summary.yesterday_balance_cents == -40
    assert summary.percent_change == "0.00%"


async def test_total_balance_counts_spent_card_at_original_value(service, add_rows):
    await add_rows(gift_card("KHS-0000-0000-0004", 0, at(18), original=50))

    summary = await service.get_total_wallet_balance()

    assert summary.total_balance_cents == 50


async def test_pending_withdrawals_empty(service):
    summary = await service.get_pending_withdrawals()

    assert summary.total_pending_amount_cents == 0
    assert summary.total_requests == 0


async def test_pending_withdrawals_only_counts_pending(service, add_rows):
    await add_rows(
        withdrawal(300, at(18)),
        withdrawal(200, at(17)),
        withdrawal(1000, at(17), status="Approved"),
    )

    summary = await service.get_pending_withdrawals()

    assert summary.total_pending_amount_cents == 500
    assert summary.total_requests == 2


async def test_todays_earnings_compares_with_yesterday(service, add_rows):
    await add_rows(
        payment(100, at(18, 0, 0)),
        payment(50, at(18, 23, 30)),
        payment(100, at(17)),
        payment(700, at(16)),
    )

    summary = await service.get_todays_earnings()

    assert summary.today_total_cents == 150
    assert summary.yesterday_total_cents == 100
    assert summary.percent_change == "50.00%"


async def test_todays_earnings_without_yesterday(service, add_rows):
    await add_rows(payment(100, at(18)))

    summary = await service.get_todays_earnings()

    assert summary.today_total_cents == 100
    assert summary.percent_change == "0.00%"


async def test_todays_earnings_uses_utc_day_for_offset_timestamps(service, add_rows):
    plus_five = timezone(timedelta(hours=5))
    await add_rows(payment(100, datetime(2026, 10, 18, 1, 0, tzinfo=plus_five)))

    summary = await service.get_todays_earnings()

    assert summary.today_total_cents == 0
    assert summary.yesterday_total_cents == 100


async def test_transaction_timestamps_are_reported_in_utc(service, add_rows):
    plus_five = timezone(timedelta(hours=5))
    await add_rows(payment(100, datetime(2026, 10, 18, 1, 0, tzinfo=plus_five)))

    [row] = await service.get_all_wallet_transactions()

    assert (row.date, row.time) == ("2026-10-17", "08:00 PM")
    assert row.occurred_at == datetime(2026, 10, 17, 20, 0, tzinfo=timezone.utc)


async def test_platform_fees_average_payment_amount(service, add_rows):
    await add_rows(
        payment(100, at(18), fee_cents=5),
        payment(50, at(18), fee_cents=3),
        payment(70, at(18)),
        payment(30, at(18), fee_cents=0),
    )

    summary = await service.get_platform_fees()

    assert summary.total_fee_amount_cents == 150
    assert summary.fee_payment_count == 2
    assert summary.avg_fee_rate == "75.00"


async def test_platform_fees_without_fee_payments(service):
    summary = await service.get_platform_fees()

    assert summary.total_fee_amount_cents == 0
    assert summary.avg_fee_rate == "0.00"


async def test_transactions_classify_and_order_newest_first(service, add_rows):
    await add_rows(
        payment(100, at(16, 9, 5), client="Dan", id="p-earning"),
        payment(20, at(17, 14, 30), business="Bakery", fee_cents=2, id="p-fee"),
        payment(40, at(18, 8), client="Erin", refund_type="partial", status="refunded", id="p-refund"),
        withdrawal(300, at(17, 10), business_name="Bakery", current_balance_cents=900, id="w-1"),
        gift_card("KHS-0000-0000-0003", 250, at(15, 16, 45), original=400),
    )

    rows = await service.get_all_wallet_transactions()

    assert [row.type for row in rows] == ["Refund", "Fee", "Withdrawal", "Earning", "Earning"]

    refund = rows[0]
    assert refund.user == "Erin"
    assert refund.description == "Refund to Erin"
    assert refund.status == "Refunded"
    assert refund.balance_cents == 0
    assert (refund.date, refund.time) == ("2026-10-18", "08:00 AM")

    assert rows[1].description == "Fee charged for Bakery"
    assert rows[2].description == "Withdrawal request by Bakery"
    assert rows[2].balance_cents == 900
    assert rows[2].status == "Pending"
    assert rows[3].description == "Payment from Dan"
    assert rows[3].time == "09:05 AM"

    card = rows[4]
    assert card.user == "Alice"
    assert card.description == "Gift card purchased for Bob"
    assert card.amount_cents == 400
    assert card.balance_cents == 250
    assert card.status == "Active"
    assert (card.date, card.time) == ("2026-10-15", "04:45 PM")


@pytest.mark.parametrize(
    ("current", "baseline", "expected"),
    [
        (150, 100, "50.00%"),
        (50, 100, "-50.00%"),
        (100, 0, "0.00%"),
        (100, -20, "0.00%"),
        (1, 3, "-66.67%"),
    ],
)
def test_percent_change(current, baseline, expected):
    assert percent_change(current, baseline) == expected
