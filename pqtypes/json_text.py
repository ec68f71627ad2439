"""Raw JSON text, compatible with PostgreSQL varchar, text, json and jsonb."""

from __future__ import annotations

import json
from typing import Optional, Union

_HTML_ESCAPES = {
    "<": "\\u003c",
    ">": "\\u003e",
    "&": "\\u0026",
    "\u2028": "\\u2028",
    "\u2029": "\\u2029",
}
_WHITESPACE = " \t\r\n"


def _reject_constant(name: str) -> None:
    raise ValueError(f"invalid character {name[0]!r} looking for beginning of value")


def _validated_text(data: bytes) -> str:
    text = data.decode("utf-8", errors="replace")
    if not text.strip(_WHITESPACE):
        raise ValueError("unexpected end of JSON input")
    try:
        json.loads(text, parse_constant=_reject_constant)
    except json.JSONDecodeError as exc:
        raise ValueError(f"invalid JSON: {exc}") from exc
    return text


def _compact(text: str) -> str:
    out: list[str] = []
    in_string = False
    escaped = False
    for ch in text:
        if in_string:
            if escaped:
                escaped = False
            elif ch == "\\":
                escaped = True
            elif ch == '"':
                in_string = False
            out.append(_HTML_ESCAPES.get(ch, ch))
            continue
        if ch in _WHITESPACE:
            continue
        if ch == '"':
            in_string = True
        out.append(ch)
    return "".join(out)


class JSONText(bytes):
    """Raw encoded JSON value; decoding is delayed until the caller wants it."""

    def __new__(cls, data: Union[bytes, bytearray, memoryview, str] = b"") -> "JSONText":
        if isinstance(data, str):
            data = data.encode("utf-8")
        elif not isinstance(data, (bytes, bytearray, memoryview)):
            raise TypeError(f"JSONText: expected bytes or str, got {type(data).__name__}")
        return super().__new__(cls, data)

    def __str__(self) -> str:
        return self.decode("utf-8", errors="replace")

    def __repr__(self) -> str:
        return f"JSONText({bytes(self)!r})"

    def to_json(self) -> bytes:
        """Return the compact JSON encoding; raise ValueError if it is not valid JSON."""
        return _compact(_validated_text(bytes(self))).encode("utf-8")

    @classmethod
    def from_json(cls, data: Union[bytes, bytearray, memoryview, str]) -> "JSONText":
        """Return a copy of ``data`` as JSONText."""
        return cls(data)

    def value(self) -> bytes:
        """Return the raw bytes for the database after checking they are valid JSON."""
        _validated_text(bytes(self))
        return bytes(self)

    @classmethod
    def scan(cls, value: object) -> Optional["JSONText"]:
        """Store a database value as-is; None stays None. No validation is done."""
        if value is None:
            return None
        if isinstance(value, (bytes, bytearray, memoryview, str)):
            return cls(value)
        raise TypeError(
            f"JSONText.scan: expected bytes or str, got {type(value).__name__} ({value!r})"
        )