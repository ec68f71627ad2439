"""String array for PostgreSQL varchar[]."""

from __future__ import annotations

from typing import Iterable, Optional

_REPLACEMENT = "\ufffd"


def _scan_text(value: object) -> str:
    if isinstance(value, (bytes, bytearray, memoryview)):
        raw = bytes(value)
        try:
            return raw.decode("utf-8")
        except UnicodeDecodeError as exc:
            raise ValueError("StringArray.scan: invalid rune") from exc
    if isinstance(value, str):
        return value
    raise TypeError(
        f"StringArray.scan: expected bytes or str, got {type(value).__name__} ({value!r})"
    )


class StringArray(list):
    """A list of strings, compatible with PostgreSQL varchar[]."""

    def __init__(self, items: Iterable[str] = ()) -> None:
        super().__init__(items)

    def __repr__(self) -> str:
        return f"StringArray({list(self)!r})"

    def value(self) -> bytes:
        """Encode as PostgreSQL array text with every element quoted."""
        quoted = (
            '"' + item.replace("\\", "\\\\").replace('"', '\\"') + '"' for item in self
        )
        return ("{" + ",".join(quoted) + "}").encode("utf-8")

    @classmethod
    def scan(cls, value: object) -> Optional["StringArray"]:
        """Decode PostgreSQL array text; None stays None."""
        if value is None:
            return None
        text = _scan_text(value)
        if len(text) < 2 or text[0] != "{" or text[-1] != "}":
            raise ValueError(f"StringArray.scan: unexpected data {text!r}")
        if text == "{}":
            return cls()

        body = text[1:-1]
        if _REPLACEMENT in body:
            raise ValueError("StringArray.scan: invalid rune")

        result = cls()
        element: list[str] = []
        quoted = False
        chars = iter(body)
        for ch in chars:
            if ch == '"':
                quoted = not quoted
                continue
            if ch == "," and not quoted:
                result.append("".join(element))
                element.clear()
                continue
            if ch == "\\":
                try:
                    ch = next(chars)
                except StopIteration:
                    raise ValueError("StringArray.scan: unexpected end after escape") from None
            element.append(ch)

        if quoted:
            raise ValueError("StringArray.scan: unterminated quoted element")
        result.append("".join(element))
        return result