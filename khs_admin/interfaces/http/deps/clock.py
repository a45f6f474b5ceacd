"""Clock dependency provider."""

from khs_admin.core.clock import Clock
from khs_admin.core.container import get_container


def get_clock() -> Clock:
    return get_container().clock


__all__ = ["get_clock"]
