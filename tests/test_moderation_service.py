from khs_admin.modules.moderation import ModerationService, ModerationSettingsUpdateInput


async def test_get_settings_creates_defaults_once(session):
    service = ModerationService.with_session(session)

    first = await service.get_settings()
    second = await service.get_settings()

    assert first.id == second.id
    assert first.banned_words == []
    assert first.auto_flag_reviews is False
    assert first.notify_admin is True
    assert first.review_flag_threshold is None


async def test_update_settings_keeps_unset_fields(session):
    service = ModerationService.with_session(session)
    await service.update_settings(
        ModerationSettingsUpdateInput(banned_words=["spam", "scam"], review_flag_threshold=3)
    )

    updated = await service.update_settings(ModerationSettingsUpdateInput(auto_flag_reviews=True))

    assert updated.banned_words == ["spam", "scam"]
    assert updated.auto_flag_reviews is True
    assert updated.notify_admin is True
    assert updated.review_flag_threshold == 3


async def test_update_settings_clears_threshold_with_none(session):
    service = ModerationService.with_session(session)
    await service.update_settings(ModerationSettingsUpdateInput(review_flag_threshold=5))

    updated = await service.update_settings(ModerationSettingsUpdateInput(review_flag_threshold=None))

    assert updated.review_flag_threshold is None
