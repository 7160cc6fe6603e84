"""
Core utilities shared across the Wordzee API.

Configuration, logging setup, admin API-key checks and the JSON response
envelope. Routers/services depend on these primitives instead of reading the
environment directly.
"""
