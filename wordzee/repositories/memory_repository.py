"""Dict-backed word store, insertion ordered."""
from __future__ import annotations

import threading
from datetime import datetime, timezone
from typing import Iterable, Iterator, Optional

from wordzee.domain.words import DuplicateWord


class InMemoryWordRepository:
    def __init__(self, words: Iterable[str] = ()) -> None:
        # dict keeps insertion order; values are unused
        self._words: dict[str, None] = dict.fromkeys(words)
        self._modified_at: Optional[datetime] = None
        self._lock = threading.Lock()

    def _touch(self) -> None:
        self._modified_at = datetime.now(timezone.utc)

    def iter_words(self) -> Iterator[str]:
        with self._lock:
            snapshot = list(self._words)
        return iter(snapshot)

    def word_exists(self, word: str) -> bool:
        with self._lock:
            return word in self._words

    def insert_word(self, word: str) -> None:
        with self._lock:
            if word in self._words:
                raise DuplicateWord("Word already exists")
            self._words[word] = None
            self._touch()

    def rename_word(self, old: str, new: str) -> bool:
        with self._lock:
            if old not in self._words:
                return False
            if new != old and new in self._words:
                raise DuplicateWord("Word already exists")
            # rebuild to keep the renamed entry in its original position
            self._words = {(new if key == old else key): None for key in self._words}
            self._touch()
            return True

    def delete_word(self, word: str) -> bool:
        with self._lock:
            if word not in self._words:
                return False
            del self._words[word]
            self._touch()
            return True

    def count_words(self) -> int:
        with self._lock:
            return len(self._words)

    def last_modified(self) -> Optional[datetime]:
        return self._modified_at
