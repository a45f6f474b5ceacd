"""Domain models for moderation settings."""

from __future__ import annotations

from dataclasses import dataclass, field
from datetime import datetime
from typing import Optional

from khs_admin.db import models as orm


@dataclass(slots=True)
class ModerationSettings:
    id: str
    banned_words: list[str] = field(default_factory=list)
    auto_flag_reviews: bool = False
    notify_admin: bool = True
    review_flag_threshold: Optional[int] = None
    updated_at: Optional[datetime] = None

    @classmethod
    def from_orm(cls, instance: orm.ModerationSettings) -> "ModerationSettings":
        return cls(
            id=str(instance.id),
            banned_words=list(instance.banned_words or []),
            auto_flag_reviews=bool(instance.auto_flag_reviews),
            notify_admin=bool(instance.notify_admin),
            review_flag_threshold=instance.review_flag_threshold,
            updated_at=instance.updated_at,
        )


# Sentinel used to differentiate between "not provided" and explicit None.
UNSET = object()


@dataclass(slots=True)
class ModerationSettingsUpdateInput:
    banned_words: list[str] | object = UNSET
    auto_flag_reviews: bool | object = UNSET
    notify_admin: bool | object = UNSET
    review_flag_threshold: Optional[int] | object = UNSET
