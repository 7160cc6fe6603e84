from __future__ import annotations

import importlib.util
from pathlib import Path

import pytest

from wordzee.repositories.sql_repository import SQLWordRepository

SCRIPT = Path(__file__).resolve().parents[1] / "scripts" / "import_words.py"


@pytest.fixture(scope="module")
def import_words():
    spec = importlib.util.spec_from_file_location("import_words", SCRIPT)
    module = importlib.util.module_from_spec(spec)
    spec.loader.exec_module(module)
    return module


def test_read_words_normalizes_and_skips_out_of_range(import_words, tmp_path):
    source = tmp_path / "palabras.txt"
    source.write_text("sol\nab\n\nabcdefgh\n  Arbol \n", encoding="utf-8")

    words, skipped = import_words.read_words(source)

    assert words == ["SOL", "ARBOL"]
    assert skipped == 2


def test_read_words_keeps_duplicates_for_the_store_to_drop(import_words, tmp_path, temp_db):
    source = tmp_path / "palabras.txt"
    source.write_text("sol\nSOL\nbola\n", encoding="utf-8")

    words, skipped = import_words.read_words(source)
    assert (words, skipped) == (["SOL", "SOL", "BOLA"], 0)

    repo = SQLWordRepository()
    assert repo.insert_many(words) == 2
    assert repo.list_words() == ["SOL", "BOLA"]


def test_main_imports_file(import_words, tmp_path, temp_db, monkeypatch, capsys):
    source = tmp_path / "palabras.txt"
    source.write_text("sol\nab\nbola\nsol\n", encoding="utf-8")
    SQLWordRepository().insert_word("BOLA")
    monkeypatch.setattr("sys.argv", ["import_words.py", str(source), "--batch", "1"])

    import_words.main()

    out = capsys.readouterr().out
    assert "OK: 1 words added, 2 already present, 1 out of range" in out
    assert SQLWordRepository().list_words() == ["BOLA", "SOL"]
