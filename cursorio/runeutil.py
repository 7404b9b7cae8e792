"""Small helpers for scanners that work on decoded characters."""

from __future__ import annotations

HEX_UPPER = "0123456789ABCDEF"
HEX_LOWER = "0123456789abcdef"

_HEX_VALUES = {c: i for i, c in enumerate(HEX_LOWER)} | {c: i for i, c in enumerate(HEX_UPPER)}

_SIMPLE_ESCAPES = {
    "\a": "\\a",
    "\b": "\\b",
    "\f": "\\f",
    "\n": "\\n",
    "\r": "\\r",
    "\t": "\\t",
    "\v": "\\v",
    "\\": "\\\\",
    "'": "\\'",
}


def _quote_rune_ascii(rune: str) -> str:
    code = ord(rune)
    if code > 0x10FFFF or 0xD800 <= code <= 0xDFFF:
        code = 0xFFFD
        rune = "\ufffd"
    if rune in _SIMPLE_ESCAPES:
        body = _SIMPLE_ESCAPES[rune]
    elif code < 0x20 or code == 0x7F:
        body = f"\\x{code:02x}"
    elif code < 0x80:
        body = rune
    elif code < 0x10000:
        body = f"\\u{code:04x}"
    else:
        body = f"\\U{code:08x}"
    return f"'{body}'"


class UnexpectedRuneError(ValueError):
    """A character that the scanner did not expect at this point."""

    def __init__(self, rune: str) -> None:
        super().__init__(rune)
        self.rune = rune

    def __str__(self) -> str:
        return f"unexpected rune ({_quote_rune_ascii(self.rune)})"


def hex_decode(c: str) -> int | None:
    """Return the value of a hex digit, or None if ``c`` is not one."""
    return _HEX_VALUES.get(c)