"""Word list use cases: rack search plus administrative create/update/delete."""

from __future__ import annotations

import logging
from dataclasses import dataclass
from typing import Optional, Sequence

from wordzee.domain.rack import build_rack, search
from wordzee.domain.words import (
    DuplicateWord,
    WordNotFound,
    normalize_word,
    validate_word_length,
)
from wordzee.repositories.base import WordRepository
from wordzee.repositories.sql_repository import SQLWordRepository

logger = logging.getLogger(__name__)


@dataclass(frozen=True)
class WordRename:
    old_word: str
    new_word: str


class WordService:
    """Orchestrates the injected word repository; holds no per-request state."""

    def __init__(self, repository: Optional[WordRepository] = None) -> None:
        self.repository = repository if repository is not None else SQLWordRepository()

    def search(self, letters: Sequence[str]) -> list[str]:
        rack = build_rack(letters)
        matches = search(rack, self.repository.iter_words())
        logger.debug("%r matched %d words", rack, len(matches))
        return matches

    def create(self, word: str) -> str:
        candidate = validate_word_length(normalize_word(word))
        if self.repository.word_exists(candidate):
            raise DuplicateWord("Word already exists")
        self.repository.insert_word(candidate)
        logger.info("Word created: %s", candidate)
        return candidate

    def update(self, old_word: str, new_word: str) -> WordRename:
        old = normalize_word(old_word)
        new = validate_word_length(normalize_word(new_word))
        if not self.repository.word_exists(old):
            raise WordNotFound("Word does not exist")
        if new != old and self.repository.word_exists(new):
            raise DuplicateWord("Word already exists")
        if not self.repository.rename_word(old, new):
            # removed between the check and the write
            raise WordNotFound("Word does not exist")
        logger.info("Word updated: %s -> %s", old, new)
        return WordRename(old_word=old, new_word=new)

    def delete(self, word: str) -> str:
        candidate = normalize_word(word)
        if not self.repository.delete_word(candidate):
            raise WordNotFound("Word does not exist")
        logger.info("Word deleted: %s", candidate)
        return candidate

    def last_modified(self) -> int:
        """Unix timestamp of the latest change to the word list (0 when unknown)."""
        moment = self.repository.last_modified()
        return int(moment.timestamp()) if moment else 0

    def count(self) -> int:
        return self.repository.count_words()
