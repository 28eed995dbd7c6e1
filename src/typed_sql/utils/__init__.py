"""Shared utilities for typed-sql."""

from typed_sql.utils.logging import bind_context, get_logger

__all__ = ["get_logger", "bind_context"]
