"""Record ID contracts.

Clients and hairdressers carry a positive integer ID assigned at creation.
INVARIANT: IDs are permanent. Once assigned, an ID is never changed or reused
while its record exists.
"""

from __future__ import annotations

import re
from collections.abc import Iterable

FIRST_ID = 1

_ID_RE = re.compile(r"[0-9]+")


def next_id(existing: Iterable[int]) -> int:
    """Return one past the largest ID in *existing* (``FIRST_ID`` when empty)."""
    return max(existing, default=FIRST_ID - 1) + 1


def parse_id(raw: str) -> int | None:
    """Parse a user-supplied ID; returns None unless it is a positive integer."""
    text = raw.strip()
    if not _ID_RE.fullmatch(text):
        return None
    value = int(text)
    return value if value >= FIRST_ID else None
