"""
MySQL-specific SQL dialect implementation.

Provides MySQL literal syntax (STR_TO_DATE), DATE_FORMAT read expressions,
backtick-quoted aliases and the ``LIMIT offset,count`` pagination form.
"""

from typing import Any, Dict, Optional

from ..core.builder import UNBOUNDED_LIMIT, QueryBuilder, is_page_bound
from ..core.expressions import ExpressionBuilder, Formatter
from ..core.parameters import Encoder, ParameterBuilder
from ..core.types import LogicalType


class MysqlExpressionBuilder(ExpressionBuilder):
    """MySQL read expressions."""

    dialect = "mysql"

    def formatters(self) -> Dict[LogicalType, Formatter]:
        return {
            LogicalType.DATE: self.as_date,
            LogicalType.TIMESTAMP: self.as_timestamp,
            LogicalType.GEOMETRY: self.as_geometry,
        }

    def as_date(self, name: str) -> str:
        d = self.DATE_DELIMITER
        return f"DATE_FORMAT({name}, '%Y{d}%m{d}%d')"

    def as_timestamp(self, name: str) -> str:
        d, t = self.DATE_DELIMITER, self.TIME_DELIMITER
        fmt = f"%Y{d}%m{d}%d{self.DATETIME_DELIMITER}%H{t}%i{t}%s"
        return f"DATE_FORMAT({name}, '{fmt}')"

    def as_geometry(self, name: str) -> str:
        """Read a GEOMETRY column as WKT text."""
        return f"ASTEXT({name})"


class MysqlParameterBuilder(ParameterBuilder):
    """MySQL literal encoder."""

    INTEGER_WIDTHS = {
        "tinyint": 1,
        "smallint": 2,
        "mediumint": 3,
        "bigint": 8,
    }

    # FLOAT range as documented by MySQL, passed as a string literal
    FLOAT_MIN = "'-3.402823466E+38'"
    FLOAT_MAX = "'3.402823466E+38'"

    MIN_DATE = (1000, 1, 1)
    MAX_DATE = (9999, 12, 31)

    CURRENT_DATE = "CURDATE()"
    CURRENT_TIMESTAMP = "NOW()"
    CURRENT_TIME = "TIME(NOW())"

    def encoders(self) -> Dict[LogicalType, Encoder]:
        # GEOMETRY is a known type without a literal encoder
        return {
            LogicalType.TEXT: self.to_text,
            LogicalType.INT: self.to_int,
            LogicalType.FLOAT: self.to_float,
            LogicalType.BOOL: self.to_bool,
            LogicalType.DATE: self.to_date,
            LogicalType.TIMESTAMP: self.to_timestamp,
            LogicalType.TIME: self.to_time,
        }

    def date_literal(self, text: str) -> str:
        d = self.DATE_DELIMITER
        return f"STR_TO_DATE('{text}', '%Y{d}%m{d}%d')"

    def timestamp_literal(self, text: str) -> str:
        d, t = self.DATE_DELIMITER, self.TIME_DELIMITER
        fmt = f"%Y{d}%m{d}%d{self.DATETIME_DELIMITER}%H{t}%i{t}%s"
        return f"STR_TO_DATE('{text}', '{fmt}')"

    def to_tiny_int(self, value: Any) -> str:
        return self.to_int1(value)

    def to_small_int(self, value: Any) -> str:
        return self.to_int2(value)

    def to_medium_int(self, value: Any) -> str:
        return self.to_int3(value)

    def to_big_int(self, value: Any) -> str:
        return self.to_int8(value)


class MysqlQueryBuilder(QueryBuilder):
    """MySQL query builder."""

    name = "mysql"

    TYPES = {
        LogicalType.TEXT: ("text", "char", "varchar", "tinytext", "longtext", "mediumtext"),
        LogicalType.INT: ("int", "integer", "tinyint", "int4", "smallint", "mediumint", "bigint"),
        LogicalType.FLOAT: ("float", "double", "real"),
        LogicalType.BOOL: ("bool", "boolean"),
        LogicalType.DATE: ("date",),
        LogicalType.TIME: ("time",),
        LogicalType.TIMESTAMP: ("timestamp", "datetime"),
        LogicalType.GEOMETRY: ("geometry",),
    }

    def __init__(
        self,
        expression_builder: MysqlExpressionBuilder,
        parameter_builder: MysqlParameterBuilder,
    ):
        super().__init__(expression_builder, parameter_builder)

    def limit_offset(
        self, sql: str, limit: Optional[int] = None, offset: Optional[int] = None
    ) -> str:
        """
        Append ``LIMIT [offset,]count``.

        Examples:
            >>> builder.limit_offset("SELECT * FROM test", 10, 1)
            'SELECT * FROM test LIMIT 1,10'
        """
        offset_part = (
            f"{self.parameter_builder.to_int(offset)}," if is_page_bound(offset) else ""
        )
        limit_part = (
            self.parameter_builder.to_int(limit) if is_page_bound(limit) else UNBOUNDED_LIMIT
        )
        return f"{sql} LIMIT {offset_part}{limit_part}"

    def count(self, sql: str) -> str:
        """
        Build a row-counting query.

        Statements using SQL_CALC_FOUND_ROWS are answered with FOUND_ROWS().
        The check is a plain substring search, so the token inside a string
        literal also triggers it.
        """
        if "SQL_CALC_FOUND_ROWS" in sql:
            return "SELECT FOUND_ROWS()"
        return super().count(sql)


__all__ = ["MysqlExpressionBuilder", "MysqlParameterBuilder", "MysqlQueryBuilder"]
