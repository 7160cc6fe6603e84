"""High-level data access helpers backed by SQLAlchemy."""
from __future__ import annotations

from datetime import datetime, timezone
from typing import Iterator, Optional

from sqlalchemy import delete, func, select, update
from sqlalchemy.exc import IntegrityError

from wordzee.db.models import Word, WordStoreMeta
from wordzee.db.session import get_session
from wordzee.domain.words import DuplicateWord

_META_ID = 1
_STREAM_BATCH = 500


def _as_utc(value: datetime | None) -> datetime | None:
    # SQLite drops tzinfo on the way back
    if value is None:
        return None
    if value.tzinfo is None:
        return value.replace(tzinfo=timezone.utc)
    return value


class SQLWordRepository:
    """CRUD helpers wrapping the SQLAlchemy session."""

    def _touch(self, session, now: datetime) -> None:
        meta = session.get(WordStoreMeta, _META_ID)
        if meta is None:
            session.add(WordStoreMeta(id=_META_ID, modified_at=now))
        else:
            meta.modified_at = now

    # -------------------------- reads --------------------------
    def iter_words(self) -> Iterator[str]:
        with get_session() as session:
            stmt = select(Word.word).order_by(Word.id).execution_options(yield_per=_STREAM_BATCH)
            for word in session.execute(stmt).scalars():
                yield word

    def list_words(self) -> list[str]:
        return list(self.iter_words())

    def word_exists(self, word: str) -> bool:
        with get_session() as session:
            stmt = select(Word.id).where(Word.word == word).limit(1)
            return session.execute(stmt).first() is not None

    def count_words(self) -> int:
        with get_session() as session:
            return int(session.execute(select(func.count(Word.id))).scalar_one())

    def last_modified(self) -> Optional[datetime]:
        with get_session() as session:
            latest = _as_utc(session.execute(select(func.max(Word.updated_at))).scalar_one_or_none())
            meta = session.get(WordStoreMeta, _META_ID)
            marker = _as_utc(meta.modified_at) if meta else None
        candidates = [value for value in (latest, marker) if value is not None]
        return max(candidates) if candidates else None

    # -------------------------- writes --------------------------
    def insert_word(self, word: str) -> None:
        now = datetime.now(timezone.utc)
        with get_session() as session:
            session.add(Word(word=word, created_at=now, updated_at=now))
            self._touch(session, now)
            try:
                session.commit()
            except IntegrityError as exc:
                session.rollback()
                raise DuplicateWord("Word already exists") from exc

    def insert_many(self, words: list[str]) -> int:
        """Bulk insert, skipping words already stored. Returns how many were added."""
        if not words:
            return 0
        now = datetime.now(timezone.utc)
        with get_session() as session:
            existing = set(session.execute(select(Word.word).where(Word.word.in_(words))).scalars())
            fresh = [w for w in dict.fromkeys(words) if w not in existing]
            session.add_all(Word(word=w, created_at=now, updated_at=now) for w in fresh)
            if fresh:
                self._touch(session, now)
            session.commit()
            return len(fresh)

    def rename_word(self, old: str, new: str) -> bool:
        now = datetime.now(timezone.utc)
        with get_session() as session:
            stmt = update(Word).where(Word.word == old).values(word=new, updated_at=now)
            try:
                result = session.execute(stmt)
                if result.rowcount == 0:
                    session.rollback()
                    return False
                self._touch(session, now)
                session.commit()
            except IntegrityError as exc:
                session.rollback()
                raise DuplicateWord("Word already exists") from exc
            return True

    def delete_word(self, word: str) -> bool:
        now = datetime.now(timezone.utc)
        with get_session() as session:
            result = session.execute(delete(Word).where(Word.word == word))
            if result.rowcount == 0:
                session.rollback()
                return False
            self._touch(session, now)
            session.commit()
            return True
