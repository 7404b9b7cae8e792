"""Decoded characters that remember how many bytes they came from."""

from __future__ import annotations

from dataclasses import dataclass


@dataclass(frozen=True)
class DecodedRune:
    """A single decoded character and the byte size of its encoding."""

    size: int
    rune: str

    def as_decoded_runes(self) -> DecodedRunes:
        return DecodedRunes(size=self.size, runes=self.rune)


class DecodedRuneList(list):
    """A list of DecodedRune values."""

    def as_decoded_runes(self) -> DecodedRunes:
        return new_decoded_runes(*self)

    def __str__(self) -> str:
        return "".join(r.rune for r in self)


@dataclass(frozen=True)
class DecodedRunes:
    """A run of decoded characters and the total byte size of their encoding."""

    size: int = 0
    runes: str = ""

    def append(self, *runes: DecodedRune) -> DecodedRunes:
        """Return a new value with the given runes added at the end."""
        if not runes:
            return self
        return DecodedRunes(
            size=self.size + sum(r.size for r in runes),
            runes=self.runes + "".join(r.rune for r in runes),
        )

    def __str__(self) -> str:
        return self.runes


def new_decoded_runes(*runes: DecodedRune) -> DecodedRunes:
    """Combine decoded runes into one DecodedRunes value."""
    return DecodedRunes(
        size=sum(r.size for r in runes),
        runes="".join(r.rune for r in runes),
    )