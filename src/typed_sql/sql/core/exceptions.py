"""
Exception hierarchy for SQL literal and clause generation.

Type and column resolution fail fast with these exceptions; they signal a
programming or configuration mistake rather than a transient condition.
"""

from typing import Optional


class QueryBuilderError(Exception):
    """Base exception for all query builder errors."""

    pass


class UnsupportedTypeError(QueryBuilderError, ValueError):
    """
    Raised when a raw column type has no mapping in the dialect's type table.

    Args:
        type_name: The raw type name that could not be resolved
        message: Optional error description overriding the default
    """

    def __init__(self, type_name: str, message: Optional[str] = None):
        self.type_name = type_name
        super().__init__(message or f'Unsupported type:"{type_name}"')


class UnimplementedTypeError(UnsupportedTypeError):
    """
    Raised when a raw type resolves to a logical type that the dialect's
    parameter or expression builder has no routine for.

    Args:
        type_name: The raw type name requested by the caller
        logical_type: The logical type it resolved to
    """

    def __init__(self, type_name: str, logical_type: str):
        self.logical_type = logical_type
        super().__init__(
            type_name,
            f'No encoder for logical type "{logical_type}", '
            f'Unsupported type:"{type_name}"',
        )


class InvalidValueError(QueryBuilderError, ValueError):
    """
    Raised when a value has a shape the target logical type cannot encode.

    Args:
        logical_type: Logical type being encoded (e.g. "date")
        value_type: Name of the runtime type actually received
    """

    def __init__(self, logical_type: str, value_type: str):
        self.logical_type = logical_type
        self.value_type = value_type
        super().__init__(
            f"The value is invalid for type '{logical_type}' (type={value_type})"
        )


class UnknownColumnError(QueryBuilderError, LookupError):
    """
    Raised when a condition references a column absent from table metadata.

    Args:
        column_name: Physical column name after prefix stripping
        table_name: Table whose metadata was consulted
    """

    def __init__(self, column_name: str, table_name: str):
        self.column_name = column_name
        self.table_name = table_name
        super().__init__(
            f'columnName "{column_name}" is not defined in tableName "{table_name}"'
        )


class UnknownDialectError(QueryBuilderError, ValueError):
    """Raised when no adapter is registered under the requested dialect name."""

    def __init__(self, dialect: Optional[str]):
        self.dialect = dialect
        super().__init__(f"Could not create QueryBuilder, unknown dialect: {dialect!r}")
