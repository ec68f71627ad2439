"""Integer arrays for PostgreSQL int[] (intarray compatible) and bigint[]."""

from __future__ import annotations

import operator
import re
from typing import Iterable, Optional

_DIGITS = re.compile(r"[+-]?[0-9]+")
_ATOI_MIN, _ATOI_MAX = -(1 << 63), (1 << 63) - 1


def _scan_text(name: str, value: object) -> str:
    if isinstance(value, (bytes, bytearray, memoryview)):
        raw = bytes(value)
        try:
            return raw.decode("utf-8")
        except UnicodeDecodeError as exc:
            raise ValueError(f"{name}.scan: unexpected data {raw!r}") from exc
    if isinstance(value, str):
        return value
    raise TypeError(
        f"{name}.scan: expected bytes or str, got {type(value).__name__} ({value!r})"
    )


def _atoi(token: str) -> int:
    if not _DIGITS.fullmatch(token):
        raise ValueError(f"invalid integer literal {token!r}")
    number = int(token)
    if not _ATOI_MIN <= number <= _ATOI_MAX:
        raise ValueError(f"integer literal {token!r} out of range")
    return number


def _wrap(number: int, bits: int) -> int:
    span = 1 << bits
    number &= span - 1
    if number >= span >> 1:
        number -= span
    return number


def _checked(name: str, item: object, bits: int) -> int:
    number = operator.index(item)
    half = 1 << (bits - 1)
    if not -half <= number < half:
        raise OverflowError(f"{name}.value: {number} does not fit in {bits} bits")
    return number


def _encode(name: str, items: Iterable[int], bits: int) -> bytes:
    body = ",".join(str(_checked(name, v, bits)) for v in items)
    return ("{" + body + "}").encode("ascii")


def _decode(name: str, value: object, bits: int) -> list[int]:
    text = _scan_text(name, value)
    if len(text) < 2 or text[0] != "{" or text[-1] != "}":
        raise ValueError(f"{name}.scan: unexpected data {text!r}")
    return [_wrap(_atoi(tok), bits) for tok in text[1:-1].split(",") if tok]


def _same_elements(left: Iterable[int], right: Iterable[int]) -> bool:
    left, right = list(left), list(right)
    if len(left) != len(right):
        return False
    return sorted(left) == sorted(right)


class _IntList(list):
    """A list with a readable repr naming its concrete type."""

    def __init__(self, items: Iterable[int] = ()) -> None:
        super().__init__(items)

    def __repr__(self) -> str:
        return f"{type(self).__name__}({list(self)!r})"


class Int32Array(_IntList):
    """Array of int32 values, compatible with PostgreSQL int[] and intarray."""

    def value(self) -> bytes:
        """Encode the array as PostgreSQL array text, e.g. ``b"{1,0,-3}"``."""
        return _encode("Int32Array", self, 32)

    @classmethod
    def scan(cls, value: object) -> Optional["Int32Array"]:
        """Decode PostgreSQL array text; None stays None."""
        if value is None:
            return None
        return cls(_decode(cls.__name__, value, 32))

    def equal_without_order(self, other: Iterable[int]) -> bool:
        """Return True if both arrays hold the same elements in any order."""
        return _same_elements(self, other)


class Int64Array(_IntList):
    """Array of int64 values, compatible with PostgreSQL bigint[]."""

    def value(self) -> bytes:
        """Encode the array as PostgreSQL array text, e.g. ``b"{1,0,-3}"``."""
        return _encode("Int64Array", self, 64)

    @classmethod
    def scan(cls, value: object) -> Optional["Int64Array"]:
        """Decode PostgreSQL array text; None stays None."""
        if value is None:
            return None
        return cls(_decode(cls.__name__, value, 64))

    def equal_without_order(self, other: Iterable[int]) -> bool:
        """Return True if both arrays hold the same elements in any order."""
        return _same_elements(self, other)