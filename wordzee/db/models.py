"""SQLAlchemy models for the word list."""
from __future__ import annotations

from sqlalchemy import Column, DateTime, Integer, String, func

from .session import Base


class Word(Base):
    __tablename__ = "words"

    # id keeps insertion order; a rename updates ``word`` in place
    id = Column(Integer, primary_key=True, autoincrement=True)
    word = Column(String(64), unique=True, nullable=False)
    created_at = Column(DateTime(timezone=True), server_default=func.now(), nullable=False)
    updated_at = Column(DateTime(timezone=True), server_default=func.now(), onupdate=func.now(), nullable=False)


class WordStoreMeta(Base):
    """Single-row bookkeeping (last modification, deletions included)."""

    __tablename__ = "word_store_meta"

    id = Column(Integer, primary_key=True)
    modified_at = Column(DateTime(timezone=True), nullable=True)
