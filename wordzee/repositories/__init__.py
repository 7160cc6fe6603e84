"""
Persistence adapters for the word list.

Services depend on the WordRepository protocol; SQL is the production store,
the in-memory variant backs tests and local experiments.
"""

from .base import WordRepository
from .memory_repository import InMemoryWordRepository
from .sql_repository import SQLWordRepository

__all__ = ["WordRepository", "InMemoryWordRepository", "SQLWordRepository"]
