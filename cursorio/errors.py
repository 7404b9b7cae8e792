"""Exceptions that tie an underlying error to a position in a stream."""

from __future__ import annotations

from cursorio.offsets import Offset, OffsetRange


class OffsetError(Exception):
    """An error that happened at an offset of a stream."""

    def __init__(self, offset: Offset, err: BaseException) -> None:
        super().__init__(offset, err)
        self.offset = offset
        self.err = err
        self.__cause__ = err

    def __str__(self) -> str:
        return f"offset {self.offset.offset_string()}: {self.err}"


class OffsetRangeError(Exception):
    """An error that happened over a range of a stream."""

    def __init__(self, offset_range: OffsetRange, err: BaseException) -> None:
        super().__init__(offset_range, err)
        self.offset_range = offset_range
        self.err = err
        self.__cause__ = err

    def __str__(self) -> str:
        return f"offset {self.offset_range.offset_range_string()}: {self.err}"