from datetime import date, datetime, timezone

import pytest
from sqlalchemy import select

from khs_admin.core.clock import SystemClock, day_window, today
from khs_admin.core.config import Settings
from khs_admin.db.models import Payment
from khs_admin.infrastructure.database import session as database_session
from khs_admin.modules.giftcards import generate_gift_card_code
from khs_admin.modules.giftcards.codes import code_pattern


def test_day_window_is_half_open_utc_day():
    start, end = day_window(date(2026, 10, 17))

    assert start == datetime(2026, 10, 17, tzinfo=timezone.utc)
    assert end == datetime(2026, 10, 18, tzinfo=timezone.utc)


def test_system_clock_is_timezone_aware():
    clock = SystemClock()

    assert clock.now().tzinfo is not None
    assert isinstance(today(clock), date)


def test_generated_codes_match_format():
    codes = {generate_gift_card_code() for _ in range(50)}

    assert all(code_pattern().match(code) for code in codes)
    assert len(codes) == 50


def test_generated_codes_use_prefix():
    code = generate_gift_card_code("GFT")

    assert code_pattern("GFT").match(code)
    assert not code_pattern().match(code)


def test_settings_read_nested_environment(monkeypatch):
    monkeypatch.setenv("GIFTCARDS__CODE_PREFIX", "abc")
    monkeypatch.setenv("LOGGING__LEVEL", "DEBUG")
    monkeypatch.setenv("DATABASE__URL", "sqlite+aiosqlite:///./test.db")

    settings = Settings(_env_file=None)

    assert settings.gift_card_code_prefix == "ABC"
    assert settings.log_level == "DEBUG"
    assert settings.database_url == "sqlite+aiosqlite:///./test.db"


async def test_get_session_commits_on_success(monkeypatch, session_factory):
    monkeypatch.setattr(database_session, "AsyncSessionFactory", session_factory)

    sessions = database_session.get_session()
    db = await sessions.__anext__()
    db.add(Payment(client="Carol", business="Bakery", amount_cents=100, status="completed"))
    with pytest.raises(StopAsyncIteration):
        await sessions.__anext__()

    async with session_factory() as check:
        rows = (await check.execute(select(Payment))).scalars().all()

    assert [row.amount_cents for row in rows] == [100]
