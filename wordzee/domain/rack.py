"""
Rack matching: which stored words can be spelled with seven available letters.

The server only filters formable words; scoring and bonuses stay on the client.
"""
from __future__ import annotations

from collections import Counter
from typing import Iterable, Iterator, Mapping, Sequence

from .words import InvalidInput

RACK_SIZE = 7


class LetterMultiset(Mapping[str, int]):
    """Immutable count of the letters available on a rack (upper-case keys)."""

    __slots__ = ("_counts",)

    def __init__(self, letters: Iterable[str] = ()) -> None:
        self._counts = Counter(letter.upper() for letter in letters)

    def __getitem__(self, letter: str) -> int:
        return self._counts[letter]

    def __iter__(self) -> Iterator[str]:
        return iter(self._counts)

    def __len__(self) -> int:
        return len(self._counts)

    def __repr__(self) -> str:
        return f"LetterMultiset({dict(self._counts)!r})"

    @property
    def total(self) -> int:
        return sum(self._counts.values())

    def scratch(self) -> dict[str, int]:
        """Independent working copy for a single word check."""
        return dict(self._counts)


def parse_letters(raw: str | None) -> list[str]:
    """Split the comma separated wire form ("a,r,b,o,l,e,s") into trimmed letters."""
    if not raw:
        return []
    return [piece.strip() for piece in raw.split(",")]


def build_rack(letters: Sequence[str]) -> LetterMultiset:
    if len(letters) != RACK_SIZE:
        raise InvalidInput(f"The rack must have exactly {RACK_SIZE} letters.")
    cleaned = []
    for letter in letters:
        value = (letter or "").strip() if isinstance(letter, str) else ""
        if len(value) != 1:
            raise InvalidInput(f"Each rack entry must be a single letter (got {letter!r}).")
        cleaned.append(value)
    return LetterMultiset(cleaned)


def can_form(word: str, rack: LetterMultiset) -> bool:
    """
    True when every letter of ``word`` can be drawn from ``rack`` without
    exceeding its counts. Stops at the first missing or exhausted letter.
    """
    if len(word) > rack.total:
        return False
    remaining = rack.scratch()
    for letter in word:
        key = letter.upper()
        if remaining.get(key, 0) > 0:
            remaining[key] -= 1
        else:
            return False
    return True


def iter_matches(rack: LetterMultiset, source: Iterable[str]) -> Iterator[str]:
    """Lazily yield the formable words of ``source`` in source order."""
    for word in source:
        if can_form(word, rack):
            yield word


def search(rack: LetterMultiset, source: Iterable[str]) -> list[str]:
    return list(iter_matches(rack, source))
