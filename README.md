# cursorio

Track where you are in a stream of bytes or text. `cursorio` provides:

- byte offsets and byte offset ranges,
- zero-based line/column positions, shown to people one-based as `L1C1`,
- text offsets that hold both a byte offset and a line/column position,
- a writer that moves a text offset forward as data passes through it. It
  counts columns in grapheme clusters, treats `\n` and `\r\n` as line breaks,
  and treats a lone `\r` as hidden (it takes no column).

It also has a few helpers for hand-written parsers: a rune buffer that supports
backtracking, hex digit decoding, and an error type for unexpected characters.

## Installation

```
pip install cursorio
```

## String forms

Every offset type has a compact text form:

| Type                  | Example                 |
|-----------------------|-------------------------|
| `ByteOffset`          | `0x1f`                  |
| `ByteOffsetRange`     | `0x0:0x1f`              |
| `TextLineColumn`      | `L3C7`                  |
| `TextLineColumnRange` | `L1C1:L3C7`             |
| `TextOffset`          | `L3C7;0x1f`             |
| `TextOffsetRange`     | `L1C1:L3C7;0x0:0x1f`    |

All of them except `TextOffset` have a parser in `cursorio.offsets`:
`parse_byte_offset`, `parse_byte_offset_range`, `parse_text_line_column`,
`parse_text_line_column_range` and `parse_text_offset_range`.

```python
from cursorio.offsets import (
    parse_byte_offset,
    parse_text_line_column,
    parse_text_offset_range,
)

offset = parse_byte_offset("0x1f")
print(offset.byte_offset_string())          # 0x1f

position = parse_text_line_column("L3C7")   # stored zero-based as line 2, column 6
print(position)                             # L3C7

span = parse_text_offset_range("L1C1:L1C6;0x0:0x5")
print(span.text_offset_range_string())      # L1C1:L1C6
print(span.byte_offset_range_string())      # 0x0:0x5
```

A malformed string raises `ValueError`.

`ByteOffset` is an `int`, `TextLineColumn` is a named tuple of `line` and
`column`, and the range and text offset types are frozen dataclasses. Their
start fields are named `from_`.

## Tracking position while writing

```python
from cursorio.offsets import TextOffset
from cursorio.text_writer import TextWriter

writer = TextWriter(TextOffset())

span = writer.write_for_offset_range("héllo\nworld".encode())
print(span)                   # L1C1:L2C6;0x0:0xc

print(writer.text_offset())   # L2C6;0xc
print(writer.byte_offset())   # 0xc

writer.write_eof()
```

Bytes that end a write in the middle of a UTF-8 sequence are held until more
data arrives; `write_eof()` accounts for any that are still held. `clone()`
returns an independent writer in the same state.

If you have already decoded the characters and know how many source bytes they
took up, use `write_runes(runes, size)`, `write_runes_for_offset(runes, size)`
or `write_runes_for_offset_range(runes, size)`.

## Errors that carry a position

`cursorio.errors.OffsetError(offset, err)` and
`cursorio.errors.OffsetRangeError(offset_range, err)` wrap an underlying
exception (kept as `err` and as `__cause__`) and add an offset or a range to
it. The message reads `offset <position>: <message>`.

## Parser helpers

- `cursorio.rune_buffer.RuneBuffer` reads characters from a binary stream one
  at a time with `next_rune()`, which raises `EOFError` at the end of input.
  Iterating over it yields characters until the end. `backtrack_runes(...)`
  puts characters back to be read again, and `byte_offset()` stays accurate
  through both. Invalid UTF-8 comes out as U+FFFD with a size of one byte.
- `cursorio.decoded_runes` holds `DecodedRune`, `DecodedRuneList` and
  `DecodedRunes`, which pair decoded characters with their size in bytes, and
  `new_decoded_runes(...)` to combine them.
- `cursorio.runeutil.hex_decode(c)` returns the value of a hex digit character,
  or `None` if it is not one. `UnexpectedRuneError` reports a character that a
  parser did not expect, e.g. `unexpected rune ('\u00e9')`.

## Command line

`cursorio-line-dump` reads the first line from standard input. For each
character it prints the byte offset, the byte count and the text range, and,
once more than three characters have been read, a rolling range covering the
last four:

```
echo "héllo" | cursorio-line-dump
```

## Running the tests

```
pip install -e ".[test]"
pytest
```