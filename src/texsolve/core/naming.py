"""Filesystem-safe naming helpers for delivered artifacts."""

from __future__ import annotations

from datetime import datetime
import re


MAX_FILENAME_LENGTH = 50
DEFAULT_TITLE = "solution"

_RESERVED_CHARS = re.compile(r'[<>:"/\\|?*\x00-\x08\x0e-\x1f]')
_WHITESPACE = re.compile(r"\s+")


def sanitize_filename(text: str) -> str:
    """Return ``text`` reduced to a bounded, filesystem-safe token.

    Reserved characters are dropped, whitespace runs become a single
    underscore, the result is cut to :data:`MAX_FILENAME_LENGTH` characters
    and stray underscores at either end are stripped.
    """
    candidate = _RESERVED_CHARS.sub("", text or "")
    candidate = _WHITESPACE.sub("_", candidate)
    candidate = candidate[:MAX_FILENAME_LENGTH]
    return candidate.strip("_")


def timestamp(now: datetime | None = None) -> str:
    """Return a ``YYYYMMDD_HHMMSS`` stamp for ``now`` (local time by default)."""
    moment = now or datetime.now()
    return moment.strftime("%Y%m%d_%H%M%S")


def artifact_name(title: str, extension: str, stamp: str | None = None) -> str:
    """Combine a date stamp, a title and an extension into a filename."""
    safe_title = sanitize_filename(title) or DEFAULT_TITLE
    suffix = extension.strip().lstrip(".")
    prefix = stamp if stamp is not None else timestamp()
    return f"{prefix}_{safe_title}.{suffix}" if suffix else f"{prefix}_{safe_title}"


__all__ = [
    "DEFAULT_TITLE",
    "MAX_FILENAME_LENGTH",
    "artifact_name",
    "sanitize_filename",
    "timestamp",
]
