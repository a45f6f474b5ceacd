"""Moderation settings domain exports."""

from .models import UNSET, ModerationSettings, ModerationSettingsUpdateInput
from .service import ModerationService

__all__ = [
    "UNSET",
    "ModerationSettings",
    "ModerationSettingsUpdateInput",
    "ModerationService",
]
