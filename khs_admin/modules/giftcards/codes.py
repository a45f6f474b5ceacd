"""Gift card code generation."""

from __future__ import annotations

import re
import secrets

DEFAULT_PREFIX = "KHS"
SEGMENT_COUNT = 3
SEGMENT_BYTES = 2


def generate_gift_card_code(prefix: str = DEFAULT_PREFIX) -> str:
    """Return a code such as ``KHS-1A2B-3C4D-5E6F`` (uppercase hex segments)."""
    segments = [secrets.token_hex(SEGMENT_BYTES).upper() for _ in range(SEGMENT_COUNT)]
    return "-".join([prefix, *segments])


def code_pattern(prefix: str = DEFAULT_PREFIX) -> re.Pattern[str]:
    hex_segment = "[0-9A-F]{%d}" % (SEGMENT_BYTES * 2)
    return re.compile("^%s(-%s){%d}$" % (re.escape(prefix), hex_segment, SEGMENT_COUNT))


__all__ = ["generate_gift_card_code", "code_pattern", "DEFAULT_PREFIX"]
