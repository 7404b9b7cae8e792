"""Byte and text cursor offsets, ranges, a position-tracking text writer and parser helpers."""

__version__ = "0.1.0"

__all__ = [
    "decoded_runes",
    "errors",
    "line_dump",
    "offsets",
    "rune_buffer",
    "runeutil",
    "text_writer",
]