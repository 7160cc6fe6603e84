#!/usr/bin/env python3
"""
Add, rename or remove a word directly in the configured database.

Usage:
  python scripts/add_word.py ARBOL
  python scripts/add_word.py --rename ARBOL --to ARBOLES
  python scripts/add_word.py --delete ARBOL
"""
from __future__ import annotations

import argparse
import sys
from pathlib import Path

ROOT = Path(__file__).resolve().parents[1]
if str(ROOT) not in sys.path:
    sys.path.insert(0, str(ROOT))

from wordzee.db.create_tables import create_all  # noqa: E402
from wordzee.domain.words import WordError  # noqa: E402
from wordzee.services.word_service import WordService  # noqa: E402


def main() -> None:
    ap = argparse.ArgumentParser(description="Manage the Wordzee word list")
    ap.add_argument("word", nargs="?", help="Word to create (3-7 letters)")
    ap.add_argument("--rename", metavar="OLD", help="Existing word to rename")
    ap.add_argument("--to", metavar="NEW", help="New value used with --rename")
    ap.add_argument("--delete", metavar="WORD", help="Word to remove")
    args = ap.parse_args()

    create_all()
    svc = WordService()
    try:
        if args.delete:
            print(f"OK: deleted {svc.delete(args.delete)}")
        elif args.rename:
            if not args.to:
                raise SystemExit("--rename requires --to")
            renamed = svc.update(args.rename, args.to)
            print(f"OK: {renamed.old_word} -> {renamed.new_word}")
        elif args.word:
            print(f"OK: created {svc.create(args.word)}")
        else:
            ap.error("nothing to do")
    except WordError as exc:
        raise SystemExit(f"Error: {exc.message}")


if __name__ == "__main__":
    main()
