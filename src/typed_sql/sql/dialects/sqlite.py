"""
SQLite-specific SQL dialect implementation.

SQLite's date functions take fixed-format strings, so literals are wrapped
in date()/datetime() and columns are read through strftime().
"""

from typing import Dict, Optional

from ..core.builder import UNBOUNDED_LIMIT, QueryBuilder, is_page_bound
from ..core.expressions import ExpressionBuilder, Formatter
from ..core.parameters import Encoder, ParameterBuilder
from ..core.types import LogicalType


class SqliteExpressionBuilder(ExpressionBuilder):
    """SQLite read expressions."""

    dialect = "sqlite"

    def formatters(self) -> Dict[LogicalType, Formatter]:
        return {
            LogicalType.DATE: self.as_date,
            LogicalType.TIMESTAMP: self.as_timestamp,
        }

    def as_date(self, name: str) -> str:
        d = self.DATE_DELIMITER
        return f"strftime('%Y{d}%m{d}%d', {name})"

    def as_timestamp(self, name: str) -> str:
        d, t = self.DATE_DELIMITER, self.TIME_DELIMITER
        fmt = f"%Y{d}%m{d}%d{self.DATETIME_DELIMITER}%H{t}%M{t}%S"
        return f"strftime('{fmt}', {name})"


class SqliteParameterBuilder(ParameterBuilder):
    """SQLite literal encoder."""

    INTEGER_WIDTHS = {
        "smallint": 2,
        "int2": 2,
        "bigint": 8,
        "int8": 8,
    }

    # REAL is stored in 8 bytes
    FLOAT_MIN = "-9223372036854775808"
    FLOAT_MAX = "9223372036854775807"

    MIN_DATE = (0, 1, 1)
    MAX_DATE = (9999, 12, 31)

    CURRENT_DATE = "date('now')"
    CURRENT_TIMESTAMP = "datetime('now')"

    def encoders(self) -> Dict[LogicalType, Encoder]:
        return {
            LogicalType.TEXT: self.to_text,
            LogicalType.INT: self.to_int,
            LogicalType.FLOAT: self.to_float,
            LogicalType.BOOL: self.to_bool,
            LogicalType.DATE: self.to_date,
            LogicalType.TIMESTAMP: self.to_timestamp,
        }

    def date_literal(self, text: str) -> str:
        return f"date('{text}')"

    def timestamp_literal(self, text: str) -> str:
        return f"datetime('{text}')"


class SqliteQueryBuilder(QueryBuilder):
    """SQLite query builder."""

    name = "sqlite"

    TYPES = {
        LogicalType.TEXT: (
            "character",
            "varchar",
            "varying character",
            "nchar",
            "native character",
            "nvarchar",
            "text",
            "clob",
        ),
        LogicalType.INT: (
            "int",
            "integer",
            "tinyint",
            "smallint",
            "mediumint",
            "bigint",
            "int2",
            "int8",
        ),
        LogicalType.FLOAT: ("real", "double", "double precision", "float"),
        LogicalType.BOOL: ("boolean",),
        LogicalType.DATE: ("date",),
        LogicalType.TIMESTAMP: ("datetime",),
    }

    def __init__(
        self,
        expression_builder: SqliteExpressionBuilder,
        parameter_builder: SqliteParameterBuilder,
    ):
        super().__init__(expression_builder, parameter_builder)

    def limit_offset(
        self, sql: str, limit: Optional[int] = None, offset: Optional[int] = None
    ) -> str:
        """
        Append ``LIMIT count`` and, when given, ``OFFSET n``.

        SQLite requires a LIMIT before OFFSET, so an unset limit becomes the
        largest unsigned 64-bit value.
        """
        sql += " LIMIT {}".format(
            self.parameter_builder.to_int(limit) if is_page_bound(limit) else UNBOUNDED_LIMIT
        )
        if is_page_bound(offset):
            sql += f" OFFSET {self.parameter_builder.to_int(offset)}"
        return sql


__all__ = ["SqliteExpressionBuilder", "SqliteParameterBuilder", "SqliteQueryBuilder"]
