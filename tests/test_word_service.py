from __future__ import annotations

import pytest

from wordzee.domain.words import DuplicateWord, InvalidInput, InvalidLength, WordNotFound
from wordzee.repositories.memory_repository import InMemoryWordRepository
from wordzee.repositories.sql_repository import SQLWordRepository
from wordzee.services.word_service import WordRename, WordService


@pytest.fixture(params=["memory", "sql"])
def service(request):
    if request.param == "memory":
        return WordService(InMemoryWordRepository())
    request.getfixturevalue("temp_db")
    return WordService(SQLWordRepository())


def test_create_then_search_finds_word(service):
    assert service.create("test") == "TEST"
    assert service.search(list("tsexyze")) == []
    assert service.search(list("TESTXYZ")) == ["TEST"]
    assert service.search(list("tEsTxYz")) == ["TEST"]


def test_create_duplicate_fails(service):
    service.create("test")
    with pytest.raises(DuplicateWord):
        service.create("TEST")
    with pytest.raises(DuplicateWord):
        service.create("  Test ")


@pytest.mark.parametrize("word", ["", "ab", "  ab  ", "abcdefgh"])
def test_create_rejects_length(service, word):
    with pytest.raises(InvalidLength):
        service.create(word)
    assert service.count() == 0


def test_update_missing_word_fails(service):
    with pytest.raises(WordNotFound):
        service.update("OLD", "NEW")


def test_update_validates_new_length_first(service):
    service.create("OLD")
    with pytest.raises(InvalidLength):
        service.update("OLD", "NO")


def test_update_renames(service):
    service.create("sol")
    service.create("bola")
    assert service.update("sol", "sal") == WordRename(old_word="SOL", new_word="SAL")
    assert service.search(list("SALBOXY")) == ["SAL", "BOLA"]


def test_update_same_word_is_accepted(service):
    service.create("SOL")
    assert service.update("sol", "SOL") == WordRename(old_word="SOL", new_word="SOL")


def test_update_onto_existing_word_fails(service):
    service.create("SOL")
    service.create("BOLA")
    with pytest.raises(DuplicateWord):
        service.update("SOL", "bola")


def test_delete(service):
    service.create("arbol")
    assert service.delete("Arbol") == "ARBOL"
    with pytest.raises(WordNotFound):
        service.delete("GHOST")
    with pytest.raises(WordNotFound):
        service.delete("ARBOL")


def test_search_requires_seven_letters(service):
    service.create("SOL")
    with pytest.raises(InvalidInput):
        service.search(list("SOL"))


def test_search_case_insensitive_over_store(service):
    for word in ("ARBOL", "SOL", "REALES", "BOLAS", "AAA"):
        service.create(word)
    expected = service.search(list("ARBOLES"))
    assert expected == ["ARBOL", "SOL", "BOLAS"]
    assert service.search(list("arboles")) == expected
    assert service.search(list("ArBoLeS")) == expected


def test_last_modified(service):
    assert service.last_modified() == 0
    service.create("SOL")
    assert service.last_modified() > 0
