"""Show the positions of each character of the first line read from standard input."""

from __future__ import annotations

import argparse
import sys
from collections import deque

from cursorio.offsets import TextOffsetRange
from cursorio.rune_buffer import RuneBuffer
from cursorio.text_writer import TextWriter


def main(argv: list[str] | None = None) -> int:
    parser = argparse.ArgumentParser(
        prog="line-dump",
        description="Print the byte and text ranges of each character of the first input line.",
    )
    parser.parse_args(argv)

    out = sys.stdout
    seen = ""
    cursor = TextWriter()
    trailing: deque[TextOffsetRange] = deque()
    exiting = False

    for decoded in RuneBuffer(sys.stdin.buffer):
        if exiting:
            sys.stderr.write("Exiting after first line...\n")
            break
        if decoded.rune == "\n":
            exiting = True
            continue

        seen += decoded.rune
        out.write(f"{seen}\n")

        pos = cursor.write_runes_for_offset_range(decoded.rune, decoded.size)
        out.write(
            f"{' ' * pos.from_.line_column[1]}^ byte-offset {int(pos.from_.byte)}; "
            f"byte-count {int(pos.until.byte - pos.from_.byte)}; "
            f"text-range {pos.text_offset_range_string()}\n"
        )

        trailing.append(pos)
        if len(trailing) > 3:
            first = trailing.popleft()
            out.write(
                f"{' ' * first.from_.line_column[1]}==== range "
                f"{TextOffsetRange(first.from_, pos.until)}\n"
            )

        out.write("\n")

    out.flush()
    return 0


if __name__ == "__main__":
    sys.exit(main())