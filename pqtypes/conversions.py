"""Helpers that turn zero values into SQL NULL (None)."""

from __future__ import annotations

import datetime
from typing import Optional

_INT32_MIN, _INT32_MAX = -(1 << 31), (1 << 31) - 1
_INT64_MIN, _INT64_MAX = -(1 << 63), (1 << 63) - 1


def _check_range(src: int, low: int, high: int, kind: str) -> int:
    if isinstance(src, bool) or not isinstance(src, int):
        raise TypeError(f"{kind}: expected int, got {type(src).__name__}")
    if not low <= src <= high:
        raise OverflowError(f"{kind}: {src} does not fit")
    return src


def null_string(src: str) -> Optional[str]:
    """Return ``src``, or None when it is the empty string."""
    if not isinstance(src, str):
        raise TypeError(f"null_string: expected str, got {type(src).__name__}")
    return src if src != "" else None


def null_int32(src: int) -> Optional[int]:
    """Return ``src`` as a 32-bit integer, or None when it is zero."""
    _check_range(src, _INT32_MIN, _INT32_MAX, "null_int32")
    return src if src != 0 else None


def null_int64(src: int) -> Optional[int]:
    """Return ``src`` as a 64-bit integer, or None when it is zero."""
    _check_range(src, _INT64_MIN, _INT64_MAX, "null_int64")
    return src if src != 0 else None


def null_timestamp(src: Optional[datetime.datetime]) -> Optional[datetime.datetime]:
    """Return the timestamp, or None when there is none."""
    if src is None:
        return None
    if not isinstance(src, datetime.datetime):
        raise TypeError(f"null_timestamp: expected datetime, got {type(src).__name__}")
    return src