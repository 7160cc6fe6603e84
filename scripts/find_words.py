#!/usr/bin/env python3
"""
Print the stored words formable with a rack.

Usage:
  python scripts/find_words.py a,r,b,o,l,e,s
"""
from __future__ import annotations

import argparse
import sys
from pathlib import Path

ROOT = Path(__file__).resolve().parents[1]
if str(ROOT) not in sys.path:
    sys.path.insert(0, str(ROOT))

from wordzee.domain.rack import parse_letters  # noqa: E402
from wordzee.domain.words import WordError  # noqa: E402
from wordzee.services.word_service import WordService  # noqa: E402


def main() -> None:
    ap = argparse.ArgumentParser(description="Search words for a 7-letter rack")
    ap.add_argument("letters", help="Seven comma separated letters (e.g. a,r,b,o,l,e,s)")
    args = ap.parse_args()

    try:
        words = WordService().search(parse_letters(args.letters))
    except WordError as exc:
        raise SystemExit(f"Error: {exc.message}")
    for word in words:
        print(word)
    print(f"-- {len(words)} words", file=sys.stderr)


if __name__ == "__main__":
    main()
