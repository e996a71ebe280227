"""Tag domain logic — label validation and normalization.

Tags and hairdresser specialisations share the same label rules.
"""

from __future__ import annotations

import re

TAG_PATTERN = re.compile(r"^[A-Za-z0-9_-]{1,30}$")


def validate_tag(label: str) -> str:
    """Return *label* stripped of surrounding whitespace, or raise ValueError.

    Examples:
        >>> validate_tag(" colour ")
        'colour'
        >>> validate_tag("long-hair")
        'long-hair'
    """
    cleaned = label.strip()
    if not TAG_PATTERN.match(cleaned):
        msg = f"Tag {label!r} must be 1-30 letters, digits, '-' or '_'"
        raise ValueError(msg)
    return cleaned


def parse_tag_list(raw: str) -> list[str]:
    """Split a comma-separated tag string, dropping empty entries.

    Examples:
        >>> parse_tag_list("vip, colour,,")
        ['vip', 'colour']
    """
    return [part.strip() for part in raw.split(",") if part.strip()]
