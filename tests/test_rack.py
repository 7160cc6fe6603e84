from __future__ import annotations

import itertools
import random
from collections import Counter

import pytest

from wordzee.domain.rack import (
    RACK_SIZE,
    LetterMultiset,
    build_rack,
    can_form,
    iter_matches,
    parse_letters,
    search,
)
from wordzee.domain.words import InvalidInput


def _oracle(word: str, letters: str) -> bool:
    need = Counter(word.upper())
    have = Counter(letters.upper())
    return all(count <= have[letter] for letter, count in need.items())


def test_build_rack_counts_upper_case():
    rack = build_rack(list("arbOLes"))
    assert dict(rack) == {"A": 1, "R": 1, "B": 1, "O": 1, "L": 1, "E": 1, "S": 1}
    assert rack.total == RACK_SIZE


def test_build_rack_counts_repeated_letters():
    rack = build_rack(list("AAABCDE"))
    assert rack["A"] == 3
    assert rack["Z"] == 0
    assert rack.total == 7


@pytest.mark.parametrize("size", [0, 1, 6, 8, 14])
def test_build_rack_rejects_wrong_size(size):
    with pytest.raises(InvalidInput):
        build_rack(["A"] * size)


@pytest.mark.parametrize("letters", [["A", "B", "C", "D", "E", "F", "GH"], ["A", "B", "C", "D", "E", "F", ""]])
def test_build_rack_rejects_entries_that_are_not_single_letters(letters):
    with pytest.raises(InvalidInput):
        build_rack(letters)


def test_build_rack_trims_entries():
    assert build_rack([" a", "r ", "b", "o", "l", "e", "s"]) == build_rack(list("ARBOLES"))


def test_parse_letters():
    assert parse_letters("a, r,b ,o,l,e,s") == ["a", "r", "b", "o", "l", "e", "s"]
    assert parse_letters("") == []
    assert parse_letters(None) == []


def test_every_case_permutation_builds_the_same_rack():
    base = "arboles"
    expected = build_rack(list(base.upper()))
    for mask in itertools.product((str.lower, str.upper), repeat=len(base)):
        letters = [fold(ch) for fold, ch in zip(mask, base)]
        assert build_rack(letters) == expected


def test_can_form_scenarios():
    arboles = build_rack(list("ARBOLES"))
    assert can_form("ARBOL", arboles)
    assert can_form("ARBOLES", arboles)
    assert not can_form("REALES", arboles)  # needs two E's

    assert can_form("AAA", build_rack(list("AAABCDE")))
    assert not can_form("AAA", build_rack(list("ABCDEFG")))


def test_can_form_folds_word_case():
    assert can_form("arbol", build_rack(list("ARBOLES")))


def test_can_form_edge_cases():
    rack = build_rack(list("ABCDEFG"))
    assert can_form("", rack)
    assert not can_form("ABCDEFGA", rack)
    assert not can_form("XYZ", rack)


def test_can_form_does_not_touch_rack():
    rack = build_rack(list("AAABCDE"))
    before = dict(rack)
    assert can_form("AAAB", rack) is True
    assert can_form("AAAB", rack) is True
    assert dict(rack) == before


def test_can_form_matches_letter_count_definition():
    rng = random.Random(1234)
    alphabet = "ABCDEÑ"
    for _ in range(500):
        letters = "".join(rng.choice(alphabet) for _ in range(RACK_SIZE))
        word = "".join(rng.choice(alphabet) for _ in range(rng.randint(0, 9)))
        assert can_form(word, LetterMultiset(letters)) is _oracle(word, letters)


def test_search_keeps_source_order_and_duplicates():
    rack = build_rack(list("ARBOLES"))
    source = ["SOL", "ZETA", "ARBOL", "BOLA", "SOL", "REALES"]
    assert search(rack, source) == ["SOL", "ARBOL", "BOLA", "SOL"]


def test_iter_matches_is_lazy():
    rack = build_rack(list("ARBOLES"))
    consumed = []

    def source():
        for word in ("SOL", "ARBOL"):
            consumed.append(word)
            yield word

    matches = iter_matches(rack, source())
    assert consumed == []
    assert next(matches) == "SOL"
    assert consumed == ["SOL"]
