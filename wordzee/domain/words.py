"""Word normalization, length bounds and the word-list error kinds."""
from __future__ import annotations

MIN_WORD_LENGTH = 3
MAX_WORD_LENGTH = 7


class WordError(Exception):
    """Base error for the word workflow; carries an HTTP-friendly code/status."""

    code = "invalid"
    status_code = 400

    def __init__(self, message: str, code: str | None = None, status_code: int | None = None):
        super().__init__(message)
        self.message = message
        if code is not None:
            self.code = code
        if status_code is not None:
            self.status_code = status_code


class InvalidInput(WordError):
    """Raised when the rack does not have exactly seven single letters."""

    code = "invalid_input"


class InvalidLength(WordError):
    """Raised when a word to store falls outside [MIN_WORD_LENGTH, MAX_WORD_LENGTH]."""

    code = "invalid_length"


class DuplicateWord(WordError):
    code = "duplicate"
    status_code = 409


class WordNotFound(WordError):
    code = "not_found"
    status_code = 404


def normalize_word(value: str | None) -> str:
    """Canonical form shared by storage and search: trimmed, upper case."""
    return (value or "").strip().upper()


def validate_word_length(word: str) -> str:
    if not MIN_WORD_LENGTH <= len(word) <= MAX_WORD_LENGTH:
        raise InvalidLength(f"Word must have between {MIN_WORD_LENGTH} and {MAX_WORD_LENGTH} letters")
    return word
