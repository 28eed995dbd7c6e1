"""
SQL clause assembly driven by table metadata.

ClauseAssembler builds SELECT lists, WHERE predicates, ORDER BY and GROUP BY
keys and INSERT/UPDATE/DELETE statements from the column metadata returned
by a MetadataProvider. Metadata is fetched on every call.
"""

import re
from typing import Any, Dict, List, Mapping, Optional, Sequence

from typed_sql.utils.logging import get_logger

from ..core.builder import QueryBuilder
from ..core.exceptions import UnknownColumnError
from ..core.identifier import qualify_column
from ..core.interfaces import ColumnDescriptor, MetadataProvider
from ..core.naming import camelize, underscore
from ..core.parameters import NULL
from ..core.sentinels import PREFIX_NEGATIVE, PREFIX_NO_CONVERT

logger = get_logger(__name__)

_ORDER_ENTRY = re.compile(r"\s*([a-zA-Z0-9_]+)(?:\s+(desc|asc))?\s*", re.IGNORECASE)

_SEQUENCE_TYPES = (list, tuple, set, frozenset)


def _has_text(value: Optional[str]) -> bool:
    return isinstance(value, str) and len(value) >= 1


class ClauseAssembler:
    """
    High-level builder for SQL clauses and statements.

    Example:
        >>> assembler = ClauseAssembler(builder, metadata)
        >>> print(assembler.select("test", "t01", "t01.id = 1"))
        SELECT
        t01.id AS "id",
        t01.name AS "name"
        FROM
        test t01
        WHERE
        t01.id = 1
    """

    def __init__(
        self,
        builder: QueryBuilder,
        metadata: MetadataProvider,
        camelize: bool = False,
    ):
        """
        Initialize the ClauseAssembler.

        Args:
            builder: Dialect query builder used for literals and expressions
            metadata: Source of column definitions per table
            camelize: Expose column names as camelCase instead of snake_case
        """
        self.builder = builder
        self.metadata = metadata
        self.camelize_enabled = bool(camelize)

    def enable_camelize(self, enabled: bool = True) -> None:
        """Set whether column names are translated to/from camelCase."""
        self.camelize_enabled = bool(enabled)

    def _external_name(self, name: str) -> str:
        return camelize(name) if self.camelize_enabled else name

    def _physical_name(self, name: str) -> str:
        return underscore(name) if self.camelize_enabled else name

    def _columns(self, table_name: str) -> Mapping[str, ColumnDescriptor]:
        columns = self.metadata.get_columns(table_name)
        logger.debug("assembler.metadata_fetched", table=table_name, columns=len(columns))
        return columns

    # ------------------------------------------------------------------
    # delegation to the dialect builder
    # ------------------------------------------------------------------

    def expression(
        self, expr: str, type_name: Optional[str] = None, alias: Optional[str] = None
    ) -> str:
        return self.builder.expression(expr, type_name, alias)

    def parameter(self, value: Any, type_name: str) -> str:
        return self.builder.parameter(value, type_name)

    def count(self, sql: str) -> str:
        return self.builder.count(sql)

    def limit_offset(
        self, sql: str, limit: Optional[int] = None, offset: Optional[int] = None
    ) -> str:
        return self.builder.limit_offset(sql, limit, offset)

    def escape_like_pattern(self, pattern: str, escape_char: Optional[str] = None) -> str:
        return self.builder.escape_like_pattern(pattern, escape_char)

    # ------------------------------------------------------------------
    # column lists and values
    # ------------------------------------------------------------------

    def expressions(
        self,
        table_name: str,
        table_alias: Optional[str] = None,
        exclude_keys: Optional[Sequence[str]] = None,
        column_aliases: Optional[Mapping[str, str]] = None,
    ) -> Dict[str, str]:
        """
        Build select-list entries for every column of a table.

        Args:
            table_name: Table to read metadata for
            table_alias: Qualifier used instead of the table name
            exclude_keys: External column names to leave out
            column_aliases: External column name -> result alias

        Returns:
            Ordered mapping of physical column name -> select-list entry
        """
        exclude_keys = exclude_keys or ()
        column_aliases = column_aliases or {}
        expressions: Dict[str, str] = {}
        for column in self._columns(table_name).values():
            column_name = self._external_name(column.name)
            if column_name in exclude_keys:
                continue
            expressions[column.name] = self.expression(
                qualify_column(column.name, table_alias or table_name),
                column.type,
                column_aliases.get(column_name, column_name),
            )
        return expressions

    def parameters(self, table_name: str, columns: Mapping[str, Any]) -> Dict[str, Any]:
        """
        Convert values to SQL literals using the table's column types.

        Keys that are not columns of the table are ignored. A key prefixed
        with ``#`` passes its value through unconverted.

        Returns:
            Ordered mapping of physical column name -> literal text
        """
        meta_columns = self._columns(table_name)
        parameters: Dict[str, Any] = {}
        for name, value in columns.items():
            column_name = self._physical_name(name)
            no_convert = False
            if column_name.startswith(PREFIX_NO_CONVERT):
                column_name = column_name[1:]
                no_convert = True
            if column_name not in meta_columns:
                continue
            parameters[column_name] = (
                value
                if no_convert
                else self.parameter(value, meta_columns[column_name].type)
            )
        return parameters

    # ------------------------------------------------------------------
    # statements
    # ------------------------------------------------------------------

    def insert(self, table_name: str, columns: Mapping[str, Any]) -> str:
        """Build an INSERT statement."""
        parameters = self.parameters(table_name, columns)
        insert_column_names = ", ".join(parameters.keys())
        insert_column_values = ", ".join(str(value) for value in parameters.values())
        return (
            "INSERT INTO\n"
            f"{table_name}\n"
            f"({insert_column_names})\n"
            "VALUES\n"
            f"({insert_column_values})"
        )

    def update(
        self, table_name: str, columns: Mapping[str, Any], where: Optional[str] = None
    ) -> str:
        """Build an UPDATE statement with an optional raw WHERE condition."""
        parameters = self.parameters(table_name, columns)
        update_field = ",\n".join(
            f"{column} = {value}" for column, value in parameters.items()
        )
        sql = f"UPDATE\n{table_name}\nSET\n{update_field}"
        return f"{sql}\nWHERE\n{where}" if _has_text(where) else sql

    def delete(self, table_name: str, where: Optional[str] = None) -> str:
        """Build a DELETE statement with an optional raw WHERE condition."""
        sql = f"DELETE FROM\n{table_name}"
        return f"{sql}\nWHERE\n{where}" if _has_text(where) else sql

    def select_syntax(
        self,
        table_name: str,
        table_alias: Optional[str] = None,
        exclude_keys: Optional[Sequence[str]] = None,
        column_aliases: Optional[Mapping[str, str]] = None,
    ) -> str:
        expressions = self.expressions(table_name, table_alias, exclude_keys, column_aliases)
        if not expressions:
            return ""
        return "SELECT\n" + ",\n".join(expressions.values())

    def from_syntax(self, table_name: str, table_alias: Optional[str] = None) -> str:
        if table_alias:
            return f"FROM\n{table_name} {table_alias}"
        return f"FROM\n{table_name}"

    def select(
        self,
        table_name: str,
        table_alias: Optional[str] = None,
        where: Optional[str] = None,
        exclude_keys: Optional[Sequence[str]] = None,
        column_aliases: Optional[Mapping[str, str]] = None,
    ) -> str:
        """Build a SELECT statement over every column of a table."""
        sql = "\n".join(
            [
                self.select_syntax(table_name, table_alias, exclude_keys, column_aliases),
                self.from_syntax(table_name, table_alias),
            ]
        )
        return f"{sql}\nWHERE\n{where}" if _has_text(where) else sql

    # ------------------------------------------------------------------
    # WHERE / ORDER BY / GROUP BY
    # ------------------------------------------------------------------

    def where_expressions(
        self,
        table_name: str,
        table_alias: Optional[str] = None,
        columns: Optional[Mapping[str, Any]] = None,
    ) -> List[str]:
        """
        Build WHERE predicates from a condition map.

        Keys may be qualified as ``table.column`` (conditions for other tables
        are skipped) and prefixed with ``!`` to negate or ``#`` to append the
        value as raw SQL. Sequence values become IN lists, values encoding to
        NULL become IS NULL tests. Conditions whose value is None are skipped.

        Raises:
            UnknownColumnError: If a key names a column the table does not have
        """
        if not columns:
            return []
        meta_columns = self._columns(table_name)
        qualifier = table_alias or table_name
        expressions: List[str] = []
        for key, value in columns.items():
            if value is None:
                continue
            column_name = key
            keys = key.split(".")
            if len(keys) > 1:
                if keys[0] != table_name:
                    continue
                column_name = keys[1]

            negative = False
            no_convert = False
            if column_name.startswith(PREFIX_NEGATIVE):
                column_name = column_name[1:]
                negative = True
            elif column_name.startswith(PREFIX_NO_CONVERT):
                column_name = column_name[1:]
                no_convert = True

            column_name = self._physical_name(column_name)
            if column_name not in meta_columns:
                logger.warning(
                    "assembler.unknown_column", table=table_name, column=column_name
                )
                raise UnknownColumnError(column_name, table_name)

            if no_convert:
                where = f"{column_name} {value}"
            else:
                type_name = meta_columns[column_name].type
                if type_name is None:
                    continue
                if isinstance(value, _SEQUENCE_TYPES):
                    column_values = [self.parameter(item, type_name) for item in value]
                    if not column_values:
                        continue
                    operator = "NOT IN" if negative else "IN"
                    where = f"{column_name} {operator} ({','.join(column_values)})"
                else:
                    column_value = self.parameter(value, type_name)
                    if column_value != NULL:
                        operator = "<>" if negative else "="
                        where = f"{column_name} {operator} {column_value}"
                    else:
                        test = "IS NOT NULL" if negative else "IS NULL"
                        where = f"{column_name} {test}"

            expressions.append(qualify_column(where, qualifier))

        logger.debug("assembler.where_built", table=table_name, predicates=len(expressions))
        return expressions

    def order_by_expressions(
        self,
        table_name: Optional[str] = None,
        table_alias: Optional[str] = None,
        orders: Optional[Sequence[str]] = None,
    ) -> List[str]:
        """
        Build ORDER BY keys.

        Entries of the form ``column [ASC|DESC]`` are qualified and read
        through the column's type formatter when ``table_name`` is given.
        Anything else, such as ``RAND()``, is passed through unchanged.
        Blank entries are skipped.
        """
        if not orders:
            return []
        meta_columns = self._columns(table_name) if table_name is not None else {}
        expressions: List[str] = []
        for order in orders:
            if len(order.strip()) == 0:
                continue
            match = _ORDER_ENTRY.fullmatch(order) if table_name is not None else None
            if match is None:
                expressions.append(order)
                continue
            column_name = self._physical_name(match.group(1))
            direction = match.group(2) or ""
            sort_key = qualify_column(column_name, table_alias or table_name)
            column = meta_columns.get(column_name)
            if column is not None and column.type is not None:
                sort_key = self.expression(sort_key, column.type, "")
            expressions.append(f"{sort_key} {direction}" if direction else sort_key)
        return expressions

    def group_by_expressions(
        self,
        table_name: str,
        table_alias: Optional[str] = None,
        exclude_keys: Optional[Sequence[str]] = None,
        append_keys: Optional[Sequence[str]] = None,
    ) -> List[str]:
        """
        Build GROUP BY keys for every column of a table plus extra keys.

        Returns:
            Qualified column references followed by ``append_keys`` verbatim
        """
        exclude_keys = exclude_keys or ()
        expressions: List[str] = []
        for column in self._columns(table_name).values():
            if self._external_name(column.name) in exclude_keys:
                continue
            expressions.append(qualify_column(column.name, table_alias or table_name))
        if append_keys:
            expressions.extend(append_keys)
        return expressions

    def where_syntax(
        self,
        table_name: str,
        table_alias: Optional[str] = None,
        columns: Optional[Mapping[str, Any]] = None,
    ) -> str:
        expressions = self.where_expressions(table_name, table_alias, columns)
        return "WHERE\n" + " AND\n".join(expressions) if expressions else ""

    def order_by_syntax(
        self,
        table_name: Optional[str] = None,
        table_alias: Optional[str] = None,
        orders: Optional[Sequence[str]] = None,
    ) -> str:
        expressions = self.order_by_expressions(table_name, table_alias, orders)
        return "ORDER BY\n" + " ,\n".join(expressions) if expressions else ""

    def group_by_syntax(
        self,
        table_name: str,
        table_alias: Optional[str] = None,
        exclude_keys: Optional[Sequence[str]] = None,
        append_keys: Optional[Sequence[str]] = None,
    ) -> str:
        expressions = self.group_by_expressions(
            table_name, table_alias, exclude_keys, append_keys
        )
        return "GROUP BY\n" + " ,\n".join(expressions) if expressions else ""


__all__ = ["ClauseAssembler"]
