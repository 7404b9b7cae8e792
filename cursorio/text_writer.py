"""Track byte, line and column positions while text is written."""

from __future__ import annotations

import codecs
from collections.abc import Iterable

import regex

from cursorio.offsets import ByteOffset, TextLineColumn, TextOffset, TextOffsetRange

_GRAPHEME = regex.compile(r"\X")
_LINE_BREAKS = frozenset({"\n", "\r\n"})


def _new_decoder() -> codecs.IncrementalDecoder:
    return codecs.getincrementaldecoder("utf-8")(errors="surrogateescape")


class TextWriter:
    """A sink that counts bytes, lines and grapheme-cluster columns of what is written.

    A line break is LF or CR LF; a lone CR is treated as hidden and takes no column.
    Bytes that end a write in the middle of a UTF-8 sequence are held until more data
    arrives or until :meth:`write_eof` is called.
    """

    def __init__(self, offset: TextOffset | None = None) -> None:
        self._offset = offset if offset is not None else TextOffset()
        self._decoder = _new_decoder()

    def clone(self) -> TextWriter:
        """Return an independent writer in the same state."""
        other = TextWriter(self._offset)
        other._decoder.setstate(self._decoder.getstate())
        return other

    def byte_offset(self) -> ByteOffset:
        return ByteOffset(self._offset.byte)

    def text_offset(self) -> TextOffset:
        return self._offset

    def write_runes(self, runes: Iterable[str], size: int) -> int:
        """Write decoded characters that took ``size`` bytes in their source."""
        self._write_text(runes, size)
        return size

    def write_runes_for_offset(self, runes: Iterable[str], size: int) -> TextOffset:
        self._write_text(runes, size)
        return self._offset

    def write_runes_for_offset_range(self, runes: Iterable[str], size: int) -> TextOffsetRange:
        start = self._offset
        self._write_text(runes, size)
        return TextOffsetRange(start, self._offset)

    def write_for_offset(self, data: bytes) -> TextOffset:
        self._write(bytes(data), len(data), final=False)
        return self._offset

    def write_for_offset_range(self, data: bytes) -> TextOffsetRange:
        start = self._offset
        self._write(bytes(data), len(data), final=False)
        return TextOffsetRange(start, self._offset)

    def write(self, data: bytes) -> int:
        self._write(bytes(data), len(data), final=False)
        return len(data)

    def write_eof(self) -> None:
        """Account for any bytes still held from an incomplete UTF-8 sequence."""
        pending, _ = self._decoder.getstate()
        if not pending:
            return
        self._write(b"", 0, final=True)

    def _write_text(self, runes: Iterable[str], size: int) -> None:
        data = "".join(runes).encode("utf-8", errors="replace")
        self._write(data, size, final=False)

    def _write(self, data: bytes, size: int, *, final: bool) -> None:
        text = self._decoder.decode(data, final)
        line, column = self._offset.line_column
        for cluster in _GRAPHEME.findall(text):
            if cluster in _LINE_BREAKS:
                line += 1
                column = 0
            elif cluster == "\r":
                continue
            else:
                column += 1
        self._offset = TextOffset(
            byte=ByteOffset(self._offset.byte + size),
            line_column=TextLineColumn(line, column),
        )