"""Interface every word store must honor."""
from __future__ import annotations

from datetime import datetime
from typing import Iterator, Optional, Protocol


class WordRepository(Protocol):
    """Read-only iteration plus the CRUD primitives the word service relies on.

    Words arrive already normalized; stores compare them verbatim.
    """

    def iter_words(self) -> Iterator[str]:
        """Yield every stored word in storage order (consistent snapshot per call)."""

    def word_exists(self, word: str) -> bool: ...

    def insert_word(self, word: str) -> None:
        """Store ``word``; raise DuplicateWord when it is already present."""

    def rename_word(self, old: str, new: str) -> bool:
        """Replace ``old`` by ``new``; False when ``old`` is absent."""

    def delete_word(self, word: str) -> bool:
        """Remove ``word``; False when it is absent."""

    def count_words(self) -> int: ...

    def last_modified(self) -> Optional[datetime]: ...
