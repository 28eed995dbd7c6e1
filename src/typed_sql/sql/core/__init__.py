"""Core SQL building blocks shared by every dialect."""

from .builder import UNBOUNDED_LIMIT, QueryBuilder, is_page_bound
from .exceptions import (
    InvalidValueError,
    QueryBuilderError,
    UnimplementedTypeError,
    UnknownColumnError,
    UnknownDialectError,
    UnsupportedTypeError,
)
from .expressions import ExpressionBuilder
from .identifier import qualify_column, quote_identifier
from .interfaces import ColumnDescriptor, MetadataProvider, Quoter
from .naming import camelize, underscore
from .parameters import NULL, ParameterBuilder
from .sentinels import MAX, MIN, NOW, PREFIX_NEGATIVE, PREFIX_NO_CONVERT
from .types import LogicalType, TypeRegistry

__all__ = [
    "QueryBuilder",
    "ExpressionBuilder",
    "ParameterBuilder",
    "LogicalType",
    "TypeRegistry",
    "ColumnDescriptor",
    "MetadataProvider",
    "Quoter",
    "QueryBuilderError",
    "UnsupportedTypeError",
    "UnimplementedTypeError",
    "InvalidValueError",
    "UnknownColumnError",
    "UnknownDialectError",
    "quote_identifier",
    "qualify_column",
    "camelize",
    "underscore",
    "is_page_bound",
    "NULL",
    "UNBOUNDED_LIMIT",
    "NOW",
    "MIN",
    "MAX",
    "PREFIX_NEGATIVE",
    "PREFIX_NO_CONVERT",
]
