"""Byte and text positions within a stream, with their string forms."""

from __future__ import annotations

import re
from abc import ABC, abstractmethod
from dataclasses import dataclass, field
from typing import NamedTuple

_INT64_MIN = -(2**63)
_INT64_MAX = 2**63 - 1

_HEX_DIGITS = re.compile(r"[+-]?[0-9a-fA-F]+")
_LINE_COLUMN = re.compile(r"L([0-9]+)C([0-9]+)")


def _parse_int64(text: str, base: int) -> int:
    value = int(text, base)
    if not _INT64_MIN <= value <= _INT64_MAX:
        raise ValueError(f"value out of range: {text!r}")
    return value


class Offset(ABC):
    """A position within a stream."""

    @abstractmethod
    def byte_offset(self) -> ByteOffset:
        """Return the byte position of this offset."""

    @abstractmethod
    def offset_string(self) -> str:
        """Return the string form of this offset."""


class OffsetRange(ABC):
    """A span between two offsets of a stream."""

    @abstractmethod
    def offset_range_from(self) -> Offset:
        """Return the offset the range starts at."""

    @abstractmethod
    def offset_range_until(self) -> Offset:
        """Return the offset the range ends at."""

    @abstractmethod
    def offset_range_string(self) -> str:
        """Return the string form of this range."""


class ByteOffset(int, Offset):
    """The n-th byte of a stream, written as ``0x`` followed by hex digits."""

    def byte_offset(self) -> ByteOffset:
        return self

    def byte_offset_string(self) -> str:
        return "0x" + format(int(self), "x")

    def offset_string(self) -> str:
        return self.byte_offset_string()

    def __str__(self) -> str:
        return self.byte_offset_string()

    def __repr__(self) -> str:
        return f"ByteOffset({int(self)})"


def parse_byte_offset(s: str) -> ByteOffset:
    """Parse a string such as ``0x1f`` into a ByteOffset."""
    if len(s) < 3 or not s.startswith("0x"):
        raise ValueError("invalid cursor")
    digits = s[2:]
    if not _HEX_DIGITS.fullmatch(digits):
        raise ValueError(f"invalid hex number: {digits!r}")
    return ByteOffset(_parse_int64(digits, 16))


@dataclass(frozen=True)
class ByteOffsetRange(OffsetRange):
    """A span of bytes, written as ``0x<from>:0x<until>``."""

    from_: ByteOffset = ByteOffset(0)
    until: ByteOffset = ByteOffset(0)

    def offset_range_from(self) -> ByteOffset:
        return self.from_

    def offset_range_until(self) -> ByteOffset:
        return self.until

    def byte_offset_range_string(self) -> str:
        return (
            ByteOffset(self.from_).byte_offset_string()
            + ":"
            + ByteOffset(self.until).byte_offset_string()
        )

    def offset_range_string(self) -> str:
        return self.byte_offset_range_string()

    def __str__(self) -> str:
        return self.byte_offset_range_string()


def parse_byte_offset_range(s: str) -> ByteOffsetRange:
    """Parse a string such as ``0x0:0x10`` into a ByteOffsetRange."""
    parts = s.split(":", 1)
    if len(parts) != 2:
        raise ValueError("invalid cursor range")
    return ByteOffsetRange(parse_byte_offset(parts[0]), parse_byte_offset(parts[1]))


class TextLineColumn(NamedTuple):
    """Zero-based line and column of a text; shown to humans one-based as ``L<n>C<n>``."""

    line: int = 0
    column: int = 0

    def __str__(self) -> str:
        return f"L{self.line + 1}C{self.column + 1}"


def parse_text_line_column(v: str) -> TextLineColumn:
    """Parse a human-friendly ``L{line}C{column}`` string into a TextLineColumn."""
    match = _LINE_COLUMN.fullmatch(v)
    if match is None:
        raise ValueError("invalid text position")
    try:
        line = _parse_int64(match.group(1), 10)
    except ValueError as exc:
        raise ValueError(f"parse line: {exc}") from exc
    try:
        column = _parse_int64(match.group(2), 10)
    except ValueError as exc:
        raise ValueError(f"parse line column: {exc}") from exc
    return TextLineColumn(line - 1, column - 1)


@dataclass(frozen=True)
class TextLineColumnRange:
    """A span between two line and column positions, written as ``L1C1:L2C3``."""

    from_: TextLineColumn = TextLineColumn()
    until: TextLineColumn = TextLineColumn()

    def __str__(self) -> str:
        return f"{self.from_}:{self.until}"


def parse_text_line_column_range(v: str) -> TextLineColumnRange:
    """Parse a string such as ``L1C1:L2C3`` into a TextLineColumnRange."""
    parts = v.split(":", 1)
    if len(parts) != 2:
        raise ValueError("invalid text range")
    try:
        start = parse_text_line_column(parts[0])
    except ValueError as exc:
        raise ValueError(f"parse from: {exc}") from exc
    try:
        until = parse_text_line_column(parts[1])
    except ValueError as exc:
        raise ValueError(f"parse until: {exc}") from exc
    return TextLineColumnRange(start, until)


@dataclass(frozen=True)
class TextOffset(Offset):
    """A position in a text: its byte offset together with its line and column."""

    byte: ByteOffset = ByteOffset(0)
    line_column: TextLineColumn = field(default_factory=TextLineColumn)

    def byte_offset(self) -> ByteOffset:
        return ByteOffset(self.byte)

    def offset_string(self) -> str:
        return f"{TextLineColumn(*self.line_column)};{ByteOffset(self.byte).offset_string()}"

    def __str__(self) -> str:
        return self.offset_string()

    def is_zero(self) -> bool:
        return self.byte == 0 and self.line_column[0] == 0 and self.line_column[1] == 0


@dataclass(frozen=True)
class TextOffsetRange(OffsetRange):
    """A span of text, written as ``L1C1:L2C3;0x0:0x9``."""

    from_: TextOffset = field(default_factory=TextOffset)
    until: TextOffset = field(default_factory=TextOffset)

    def offset_range_from(self) -> TextOffset:
        return self.from_

    def offset_range_until(self) -> TextOffset:
        return self.until

    def byte_offset_range_string(self) -> str:
        return (
            ByteOffset(self.from_.byte).byte_offset_string()
            + ":"
            + ByteOffset(self.until.byte).byte_offset_string()
        )

    def text_offset_range_string(self) -> str:
        return (
            str(TextLineColumn(*self.from_.line_column))
            + ":"
            + str(TextLineColumn(*self.until.line_column))
        )

    def offset_range_string(self) -> str:
        return self.text_offset_range_string() + ";" + self.byte_offset_range_string()

    def __str__(self) -> str:
        return self.offset_range_string()


def parse_text_offset_range(v: str) -> TextOffsetRange:
    """Parse a string such as ``L1C1:L2C3;0x0:0x9`` into a TextOffsetRange."""
    fields = v.split(";", 1)
    if len(fields) != 2:
        raise ValueError("invalid text cursor range")
    try:
        text_range = parse_text_line_column_range(fields[0])
    except ValueError as exc:
        raise ValueError(f"text range: {exc}") from exc
    try:
        byte_range = parse_byte_offset_range(fields[1])
    except ValueError as exc:
        raise ValueError(f"byte range: {exc}") from exc
    return TextOffsetRange(
        TextOffset(byte=byte_range.from_, line_column=text_range.from_),
        TextOffset(byte=byte_range.until, line_column=text_range.until),
    )