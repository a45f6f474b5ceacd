from datetime import datetime, timezone

from khs_admin.db.models import Payment, Withdrawal
from khs_admin.modules.giftcards.codes import code_pattern


async def _issue(client, value=5000, expiry_date=None):
    payload = {"original_value_cents": value, "purchaser": "Alice", "recipient": "Bob"}
    if expiry_date:
        payload["expiry_date"] = expiry_date
    response = await client.post("/api/giftcards", json=payload)
    assert response.status_code == 201
    return response.json()["data"]


async def test_health(client):
    response = await client.get("/health")

    assert response.status_code == 200
    assert response.json() == {"status": "ok"}


async def test_issue_and_fetch_gift_card(client):
    card = await _issue(client)

    assert code_pattern().match(card["code"])
    assert card["status"] == "active"
    assert card["current_balance_cents"] == 5000
    assert card["purchase_date"] == "2026-10-18"

    by_code = await client.get(f"/api/giftcards/{card['code']}")
    assert by_code.status_code == 200
    assert by_code.json()["data"]["id"] == card["id"]

    listing = await client.get("/api/giftcards")
    body = listing.json()
    assert body["total"] == 1
    assert body["message"] == "Found 1 gift card(s)."


async def test_get_missing_gift_card_returns_404(client):
    response = await client.get("/api/giftcards/KHS-FFFF-FFFF-FFFF")

    assert response.status_code == 404
    assert "KHS-FFFF-FFFF-FFFF" in response.json()["detail"]


async def test_deactivate_then_refund_is_rejected(client):
    card = await _issue(client)

    deactivated = await client.patch(f"/api/giftcards/{card['id']}/deactivate")
    assert deactivated.status_code == 200
    assert deactivated.json()["data"]["status"] == "inactive"
    assert deactivated.json()["data"]["last_used_date"] == "2026-10-18"

    again = await client.patch(f"/api/giftcards/{card['id']}/deactivate")
    assert again.status_code == 400
    assert again.json()["detail"] == "Gift card is already inactive or used."

    refund = await client.patch(f"/api/giftcards/{card['id']}/refund", json={"amount_cents": 100})
    assert refund.status_code == 400


async def test_refund_active_card(client):
    card = await _issue(client, value=1000)

    response = await client.patch(f"/api/giftcards/{card['id']}/refund", json={"amount_cents": 250})

    assert response.status_code == 200
    assert response.json()["updated_balance_cents"] == 1250


async def test_refund_requires_positive_amount(client):
    card = await _issue(client)

    response = await client.patch(f"/api/giftcards/{card['id']}/refund", json={"amount_cents": 0})

    assert response.status_code == 422


async def test_usage_history_for_missing_card(client):
    response = await client.get("/api/giftcards/missing/usage-history")

    assert response.status_code == 404


async def test_cohort_endpoints_expire_stale_cards(client):
    await _issue(client, value=1000)
    await _issue(client, value=3000, expiry_date="2026-10-01")

    total = (await client.get("/api/giftcards/total-value")).json()
    assert total["total_cards"] == 2
    assert total["total_value_cents"] == 4000

    active = (await client.get("/api/giftcards/active")).json()
    assert active["total_active_cards"] == 1
    assert active["total_active_value_cents"] == 1000

    expired = (await client.get("/api/giftcards/expired")).json()
    assert expired["total_expired_cards"] == 1
    assert expired["data"][0]["status"] == "expired"


async def test_delete_all_gift_cards(client):
    await _issue(client)

    response = await client.delete("/api/giftcards")

    assert response.status_code == 200
    assert response.json()["deleted"] == 1
    assert (await client.get("/api/giftcards")).json()["total"] == 0


async def test_wallet_endpoints(client, add_rows):
    today = datetime(2026, 10, 18, 9, 0, tzinfo=timezone.utc)
    await add_rows(
        Payment(client="Carol", business="Bakery", amount_cents=100, fee_cents=4, status="completed", created_at=today),
        Withdrawal(business_name="Bakery", amount_cents=30, current_balance_cents=70, status="Pending", created_at=today),
    )
    await _issue(client, value=50)

    balance = (await client.get("/api/wallet/total-balance")).json()
    assert balance["total_balance_cents"] == 120
    assert balance["percent_change"] == "0.00%"
    assert balance["message"]

    pending = (await client.get("/api/wallet/pending-withdrawals")).json()
    assert pending["total_pending_amount_cents"] == 30
    assert pending["total_requests"] == 1

    earnings = (await client.get("/api/wallet/todays-earnings")).json()
    assert earnings["today_total_cents"] == 100

    fees = (await client.get("/api/wallet/platform-fees")).json()
    assert fees["avg_fee_rate"] == "100.00"

    transactions = (await client.get("/api/wallet/transactions")).json()
    assert transactions["total"] == 3
    assert {row["type"] for row in transactions["transactions"]} == {"Fee", "Withdrawal", "Earning"}


async def test_moderation_settings_round_trip(client):
    initial = await client.get("/api/moderation/settings")
    assert initial.status_code == 200
    assert initial.json()["data"]["banned_words"] == []

    updated = await client.put(
        "/api/moderation/settings",
        json={"banned_words": ["spam"], "review_flag_threshold": 2, "notify_admin": None},
    )
    data = updated.json()["data"]
    assert data["banned_words"] == ["spam"]
    assert data["review_flag_threshold"] == 2
    assert data["notify_admin"] is True
    assert data["auto_flag_reviews"] is False
