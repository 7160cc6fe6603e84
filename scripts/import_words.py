#!/usr/bin/env python3
"""
Bulk load a word list (one word per line) into the configured database.

Words are upper-cased; duplicates and words outside 3-7 letters are skipped.

Usage:
  python scripts/import_words.py palabras.txt [--batch 1000]
"""
from __future__ import annotations

import argparse
import sys
from pathlib import Path

ROOT = Path(__file__).resolve().parents[1]
if str(ROOT) not in sys.path:
    sys.path.insert(0, str(ROOT))

from wordzee.db.create_tables import create_all  # noqa: E402
from wordzee.domain.words import MAX_WORD_LENGTH, MIN_WORD_LENGTH, normalize_word  # noqa: E402
from wordzee.repositories.sql_repository import SQLWordRepository  # noqa: E402


def read_words(path: Path) -> tuple[list[str], int]:
    """Return (valid canonical words in file order, skipped line count)."""
    words: list[str] = []
    skipped = 0
    with path.open("r", encoding="utf-8") as fh:
        for line in fh:
            word = normalize_word(line)
            if not word:
                continue
            if not MIN_WORD_LENGTH <= len(word) <= MAX_WORD_LENGTH:
                skipped += 1
                continue
            words.append(word)
    return words, skipped


def main() -> None:
    ap = argparse.ArgumentParser(description="Import a word list into Wordzee")
    ap.add_argument("path", type=Path, help="UTF-8 text file, one word per line")
    ap.add_argument("--batch", type=int, default=1000, help="Rows per transaction")
    args = ap.parse_args()

    if not args.path.exists():
        raise SystemExit(f"File not found: {args.path}")
    words, skipped = read_words(args.path)
    create_all()
    repo = SQLWordRepository()
    added = 0
    batch = max(1, args.batch)
    for start in range(0, len(words), batch):
        added += repo.insert_many(words[start : start + batch])
    print(f"OK: {added} words added, {len(words) - added} already present, {skipped} out of range")


if __name__ == "__main__":
    try:
        main()
    except Exception as exc:  # pragma: no cover - CLI usage
        sys.stderr.write(f"Error: {exc}\n")
        raise SystemExit(1)
