import pytest

from cursorio.offsets import ByteOffset, TextLineColumn, TextOffset, TextOffsetRange
from cursorio.text_writer import TextWriter


def _columns_after(data: bytes) -> TextLineColumn:
    writer = TextWriter()
    writer.write(data)
    writer.write_eof()
    return writer.text_offset().line_column


def test_new_writer_starts_at_zero():
    writer = TextWriter()
    assert writer.text_offset().is_zero()
    assert writer.byte_offset() == 0


def test_ascii_advances_byte_and_column():
    data = b"hello"
    writer = TextWriter()
    assert writer.write(data) == len(data)
    assert writer.byte_offset() == len(data)
    assert writer.text_offset().line_column == TextLineColumn(0, len(data))


def test_newline_moves_to_next_line():
    writer = TextWriter()
    writer.write(b"a\nbc")
    assert writer.text_offset().line_column == TextLineColumn(1, 2)
    assert writer.byte_offset() == 4


def test_crlf_counts_like_lf():
    assert _columns_after(b"ab\r\ncd\r\ne") == _columns_after(b"ab\ncd\ne")


def test_crlf_split_across_writes():
    writer = TextWriter()
    writer.write(b"ab\r")
    writer.write(b"\ncd")
    assert writer.text_offset().line_column == _columns_after(b"ab\ncd")


def test_lone_carriage_return_is_hidden():
    assert _columns_after(b"a\rb") == _columns_after(b"ab")


@pytest.mark.parametrize(
    "cluster",
    ["e\u0301", "\U0001F1FA\U0001F1F8", "\u00e9", "\u20ac", "\U0001F600"],
)
def test_grapheme_cluster_takes_one_column(cluster):
    data = cluster.encode("utf-8")
    writer = TextWriter()
    writer.write(data)
    assert writer.text_offset().line_column == _columns_after(b"x")
    assert writer.byte_offset() == len(data)


def test_incomplete_sequence_held_until_completed():
    data = "\u00e9".encode("utf-8")
    writer = TextWriter()
    writer.write(data[:1])
    assert writer.byte_offset() == 1
    assert writer.text_offset().line_column == TextLineColumn(0, 0)
    writer.write(data[1:])
    assert writer.byte_offset() == len(data)
    assert writer.text_offset().line_column == _columns_after(data)


def test_write_eof_flushes_incomplete_sequence():
    writer = TextWriter()
    writer.write(b"\xc3")
    assert writer.text_offset().line_column == TextLineColumn(0, 0)
    writer.write_eof()
    assert writer.text_offset().line_column == _columns_after(b"x")
    assert writer.byte_offset() == 1


def test_write_eof_without_pending_changes_nothing():
    writer = TextWriter()
    writer.write(b"abc")
    before = writer.text_offset()
    writer.write_eof()
    assert writer.text_offset() == before


def test_invalid_byte_takes_a_column():
    assert _columns_after(b"\xff") == _columns_after(b"x")


def test_write_for_offset_range_spans_the_write():
    writer = TextWriter()
    writer.write(b"ab")
    start = writer.text_offset()
    span = writer.write_for_offset_range(b"cd\ne")
    assert span.from_ == start
    assert span.until == writer.text_offset()
    assert span.until.byte - span.from_.byte == 5


def test_write_for_offset_returns_new_offset():
    writer = TextWriter()
    offset = writer.write_for_offset(b"xyz")
    assert offset == writer.text_offset()
    assert offset.byte == 3


def test_write_runes_uses_given_size():
    writer = TextWriter()
    assert writer.write_runes(["a", "b"], 7) == 7
    assert writer.byte_offset() == 7
    assert writer.text_offset().line_column == TextLineColumn(0, 2)


def test_write_runes_for_offset_range_matches_bytes_write():
    text = "\u00e9\u20ac"
    runes_writer = TextWriter()
    span = runes_writer.write_runes_for_offset_range(text, len(text.encode("utf-8")))
    bytes_writer = TextWriter()
    expected = bytes_writer.write_for_offset_range(text.encode("utf-8"))
    assert span == expected
    assert isinstance(span, TextOffsetRange)


def test_write_runes_for_offset():
    writer = TextWriter()
    offset = writer.write_runes_for_offset("ab", 2)
    assert offset == writer.text_offset()
    assert offset.line_column == TextLineColumn(0, 2)


def test_initial_offset_is_continued():
    start = TextOffset(byte=ByteOffset(10), line_column=TextLineColumn(3, 4))
    writer = TextWriter(start)
    writer.write(b"ab")
    assert writer.byte_offset() == 12
    assert writer.text_offset().line_column == TextLineColumn(3, 6)


def test_clone_is_independent():
    writer = TextWriter()
    writer.write(b"ab\xc3")
    copy = writer.clone()
    assert copy.text_offset() == writer.text_offset()
    copy.write(b"\xa9")
    assert writer.text_offset().line_column == TextLineColumn(0, 2)
    assert copy.text_offset().line_column == TextLineColumn(0, 3)
    writer.write(b"\xa9")
    assert writer.text_offset() == copy.text_offset()