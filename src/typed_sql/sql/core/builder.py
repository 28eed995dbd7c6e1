"""
Dialect query builder base.

A QueryBuilder resolves raw type names through the dialect's TypeRegistry and
routes values and column references to the matching encoder or formatter.
Pagination and row counting are left to each dialect.
"""

import re
from abc import ABC, abstractmethod
from typing import Any, ClassVar, Mapping, Optional, Sequence

from typed_sql.config import get_settings
from typed_sql.utils.logging import get_logger

from .exceptions import UnimplementedTypeError, UnsupportedTypeError
from .expressions import ExpressionBuilder
from .parameters import ParameterBuilder
from .types import LogicalType, TypeRegistry

logger = get_logger(__name__)

# Page size used when no limit is given: the largest unsigned 64-bit value
UNBOUNDED_LIMIT = "18446744073709551615"


def is_page_bound(value: Any) -> bool:
    """Negative or missing LIMIT/OFFSET values count as unset."""
    return value is not None and int(value) >= 0


class QueryBuilder(ABC):
    """
    Base class for per-dialect query builders.

    Subclasses set ``name`` and ``TYPES`` and implement ``limit_offset``.

    Example:
        >>> builder = SqliteQueryBuilder(SqliteExpressionBuilder(), SqliteParameterBuilder(quoter))
        >>> builder.parameter("2013-01-02", "date")
        "date('2013-01-02')"
    """

    name: ClassVar[str] = ""

    # Logical type -> raw type names that resolve to it
    TYPES: ClassVar[Mapping[LogicalType, Sequence[str]]] = {}

    def __init__(
        self,
        expression_builder: ExpressionBuilder,
        parameter_builder: ParameterBuilder,
    ):
        self.expression_builder = expression_builder
        self.parameter_builder = parameter_builder
        self.type_registry = TypeRegistry(self.TYPES)

    def parameter_type(self, type_name: str) -> Optional[LogicalType]:
        """
        Resolve a raw type name to its logical type.

        Returns:
            The LogicalType, or None if the dialect does not know the type
        """
        return self.type_registry.resolve(type_name)

    def _resolve(self, type_name: str) -> LogicalType:
        logical_type = self.parameter_type(type_name)
        if logical_type is None:
            logger.warning(
                "query_builder.unsupported_type", dialect=self.name, type_name=type_name
            )
            raise UnsupportedTypeError(type_name)
        return logical_type

    def parameter(self, value: Any, type_name: str) -> str:
        """
        Convert a value to a SQL literal according to a raw column type.

        Args:
            value: Application value
            type_name: Raw type name (see ``TYPES``)

        Returns:
            SQL literal text

        Raises:
            UnsupportedTypeError: If the type has no mapping
            UnimplementedTypeError: If the dialect has no encoder for the type
            InvalidValueError: If the value shape is not accepted by the encoder
        """
        logical_type = self._resolve(type_name)
        encoder = self.parameter_builder.encoders().get(logical_type)
        if encoder is None:
            logger.warning(
                "query_builder.unimplemented_type",
                dialect=self.name,
                type_name=type_name,
                logical_type=logical_type.value,
            )
            raise UnimplementedTypeError(type_name, logical_type.value)
        return encoder(value, type_name)

    def expression(
        self,
        expr: str,
        type_name: Optional[str] = None,
        alias: Optional[str] = None,
    ) -> str:
        """
        Build a select-list entry reading ``expr`` in a type-appropriate format.

        When a formatting function applies and ``alias`` is None, the result is
        aliased to ``expr`` itself. Pass an empty alias to suppress aliasing.
        """
        if type_name is not None:
            logical_type = self._resolve(type_name)
            formatter = self.expression_builder.formatters().get(logical_type)
            if formatter is not None:
                if alias is None:
                    alias = expr
                expr = formatter(expr)
        return self.expression_builder.result_column(expr, alias)

    @abstractmethod
    def limit_offset(
        self, sql: str, limit: Optional[int] = None, offset: Optional[int] = None
    ) -> str:
        """Append the dialect's LIMIT/OFFSET syntax to a SELECT statement."""
        pass

    def count(self, sql: str) -> str:
        """Wrap a SELECT statement in a row-counting query."""
        return f"SELECT COUNT(*) FROM ({sql}) AS __SUBQUERY"

    def escape_like_pattern(self, pattern: str, escape_char: Optional[str] = None) -> str:
        """
        Escape ``_``, ``%`` and the escape character for use in a LIKE pattern.

        Args:
            pattern: Text to match literally
            escape_char: Escape character, defaults to the configured one (``\\``)

        Examples:
            >>> builder.escape_like_pattern("%Foo%")
            '\\\\%Foo\\\\%'
        """
        if escape_char is None:
            escape_char = get_settings().like_escape_char
        table = {
            "_": f"{escape_char}_",
            "%": f"{escape_char}%",
            escape_char: f"{escape_char}{escape_char}",
        }
        keys = sorted(table, key=len, reverse=True)
        regex = re.compile("|".join(re.escape(key) for key in keys))
        return regex.sub(lambda m: table[m.group(0)], pattern)


__all__ = ["QueryBuilder", "UNBOUNDED_LIMIT", "is_page_bound"]
