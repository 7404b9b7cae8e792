"""A UTF-8 character reader that tracks byte offsets and supports backtracking."""

from __future__ import annotations

from collections.abc import Iterator
from typing import BinaryIO

from cursorio.decoded_runes import DecodedRune
from cursorio.offsets import ByteOffset

_REPLACEMENT = "\ufffd"


def _expected_length(lead: int) -> int:
    if lead < 0x80:
        return 1
    if 0xC2 <= lead <= 0xDF:
        return 2
    if 0xE0 <= lead <= 0xEF:
        return 3
    if 0xF0 <= lead <= 0xF4:
        return 4
    return 1


def _decode_rune(data: bytes) -> DecodedRune:
    for size in range(1, min(4, len(data)) + 1):
        try:
            text = data[:size].decode("utf-8")
        except UnicodeDecodeError:
            continue
        return DecodedRune(size=size, rune=text)
    return DecodedRune(size=1, rune=_REPLACEMENT)


class RuneBuffer:
    """Read decoded characters from a binary stream, one at a time.

    Invalid UTF-8 yields U+FFFD with a size of one byte. Characters handed back with
    :meth:`backtrack_runes` are returned again before any new input is read.
    """

    def __init__(self, reader: BinaryIO) -> None:
        self._reader = reader
        self._offset = 0
        self._pending = bytearray()
        self._eof = False
        self._backtracked: list[DecodedRune] = []

    def byte_offset(self) -> ByteOffset:
        return ByteOffset(self._offset)

    def next_rune(self) -> DecodedRune:
        """Return the next character; raise EOFError when the input is exhausted."""
        if self._backtracked:
            rune = self._backtracked.pop(0)
        else:
            rune = self._read_rune()
        self._offset += rune.size
        return rune

    def backtrack_runes(self, *runes: DecodedRune) -> None:
        """Put characters back so they are read again, in the order given."""
        self._backtracked[:0] = runes
        self._offset -= sum(r.size for r in runes)

    def __iter__(self) -> Iterator[DecodedRune]:
        while True:
            try:
                yield self.next_rune()
            except EOFError:
                return

    def _fill(self, count: int) -> None:
        while len(self._pending) < count and not self._eof:
            chunk = self._reader.read(count - len(self._pending))
            if not chunk:
                self._eof = True
                break
            self._pending += chunk

    def _read_rune(self) -> DecodedRune:
        self._fill(1)
        if not self._pending:
            raise EOFError("end of input")
        self._fill(_expected_length(self._pending[0]))
        rune = _decode_rune(bytes(self._pending[:4]))
        del self._pending[: rune.size]
        return rune