"""JSON snapshot persistence.

INVARIANT: Loads are all-or-nothing. A data file that is not valid JSON, or
that holds any record failing validation, raises :class:`DataLoadError`;
nothing is ever partially loaded.

Layout::

    {
      "persons": [...],
      "clients": [...],
      "hairdressers": [...]
    }

Each record is the pydantic dump of its entity model. Tags are written
sorted so unchanged data produces byte-identical files.
"""

from __future__ import annotations

import logging
import os
import tempfile
from pathlib import Path

from pydantic import ValidationError

from hairstylex.domain.entities import Snapshot

logger = logging.getLogger(__name__)


class StorageError(Exception):
    """Base class for persistence failures."""

    def __init__(self, message: str, path: Path) -> None:
        super().__init__(message)
        self.path = path


class DataLoadError(StorageError):
    """The data file exists but cannot be read or parsed."""


class DataSaveError(StorageError):
    """The snapshot could not be written."""


def load_snapshot(path: Path) -> Snapshot:
    """Read a snapshot from *path*. A missing file yields an empty snapshot."""
    if not path.exists():
        logger.debug("No data file at %s; starting empty", path)
        return Snapshot()

    try:
        raw = path.read_text(encoding="utf-8")
    except UnicodeDecodeError as exc:
        msg = f"Invalid data file {path}: not UTF-8 text ({exc.reason} at byte {exc.start})"
        raise DataLoadError(msg, path) from exc
    except OSError as exc:
        msg = f"Cannot read data file {path}: {exc}"
        raise DataLoadError(msg, path) from exc

    try:
        snapshot = Snapshot.model_validate_json(raw)
    except ValidationError as exc:
        msg = f"Invalid data file {path}: {_summarize(exc)}"
        raise DataLoadError(msg, path) from exc

    logger.debug("Loaded %s from %s", snapshot.counts(), path)
    return snapshot


def save_snapshot(snapshot: Snapshot, path: Path) -> None:
    """Write *snapshot* to *path* atomically (temp file + rename).

    Parent directories are created as needed. A failure leaves any existing
    file untouched.
    """
    payload = snapshot.model_dump_json(indent=2) + "\n"
    tmp_name: str | None = None
    try:
        path.parent.mkdir(parents=True, exist_ok=True)
        with tempfile.NamedTemporaryFile(
            "w",
            encoding="utf-8",
            dir=path.parent,
            prefix=f".{path.name}.",
            suffix=".tmp",
            delete=False,
        ) as tmp:
            tmp_name = tmp.name
            tmp.write(payload)
        os.replace(tmp_name, path)
    except OSError as exc:
        if tmp_name is not None:
            Path(tmp_name).unlink(missing_ok=True)
        msg = f"Cannot write data file {path}: {exc}"
        raise DataSaveError(msg, path) from exc

    logger.debug("Saved %s to %s", snapshot.counts(), path)


def _summarize(exc: ValidationError, limit: int = 3) -> str:
    """First few validation errors as ``loc: message`` strings."""
    parts: list[str] = []
    for err in exc.errors()[:limit]:
        loc = ".".join(str(p) for p in err["loc"])
        parts.append(f"{loc}: {err['msg']}" if loc else err["msg"])
    more = exc.error_count() - limit
    if more > 0:
        parts.append(f"... and {more} more")
    return "; ".join(parts)
