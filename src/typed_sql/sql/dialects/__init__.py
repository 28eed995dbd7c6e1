"""Dialect adapters: one module per database engine."""

from .mysql import MysqlExpressionBuilder, MysqlParameterBuilder, MysqlQueryBuilder
from .sqlite import SqliteExpressionBuilder, SqliteParameterBuilder, SqliteQueryBuilder

__all__ = [
    "MysqlExpressionBuilder",
    "MysqlParameterBuilder",
    "MysqlQueryBuilder",
    "SqliteExpressionBuilder",
    "SqliteParameterBuilder",
    "SqliteQueryBuilder",
]
