"""Configuration management for typed-sql.

Usage:
    >>> from typed_sql.config import get_settings
    >>> settings = get_settings()
    >>> print(settings.dialect)
"""

from typed_sql.config.settings import SUPPORTED_DIALECTS, Settings, get_settings

__all__ = [
    "Settings",
    "get_settings",
    "SUPPORTED_DIALECTS",
]
