"""
SQL module for type-aware SQL fragment generation.

This module converts application values into dialect-correct SQL literals,
builds type-aware select-list expressions and assembles clauses and
statements from table metadata.
"""

from .core import (
    MAX,
    MIN,
    NOW,
    ColumnDescriptor,
    InvalidValueError,
    LogicalType,
    MetadataProvider,
    QueryBuilder,
    QueryBuilderError,
    Quoter,
    UnimplementedTypeError,
    UnknownColumnError,
    UnknownDialectError,
    UnsupportedTypeError,
)
from .dialects import MysqlQueryBuilder, SqliteQueryBuilder
from .drivers import SqlAlchemyMetadataProvider, SqlAlchemyQuoter
from .factory import create_assembler, create_assembler_from_engine, create_query_builder
from .operations import ClauseAssembler

__all__ = [
    "NOW",
    "MIN",
    "MAX",
    "ColumnDescriptor",
    "LogicalType",
    "MetadataProvider",
    "Quoter",
    "QueryBuilder",
    "MysqlQueryBuilder",
    "SqliteQueryBuilder",
    "ClauseAssembler",
    "SqlAlchemyMetadataProvider",
    "SqlAlchemyQuoter",
    "create_query_builder",
    "create_assembler",
    "create_assembler_from_engine",
    "QueryBuilderError",
    "UnsupportedTypeError",
    "UnimplementedTypeError",
    "InvalidValueError",
    "UnknownColumnError",
    "UnknownDialectError",
]
