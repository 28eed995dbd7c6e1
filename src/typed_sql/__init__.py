"""
typed-sql: type-aware SQL literal and clause generation for MySQL and SQLite.
"""

__version__ = "0.1.0"
