"""
High-level use cases for the Wordzee API.

Routers (FastAPI endpoints) call these services instead of touching the
repositories directly.
"""
