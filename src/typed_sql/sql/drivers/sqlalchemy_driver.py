"""
SQLAlchemy-backed collaborators for the query builders.

SqlAlchemyMetadataProvider reads column definitions through the SQLAlchemy
inspector and SqlAlchemyQuoter renders string literals with the target
dialect's own literal processor. Connection lifecycle stays with the caller.
"""

from typing import Any, Dict, Optional, Union

from sqlalchemy import String, inspect, literal
from sqlalchemy.dialects import registry
from sqlalchemy.engine import Connection, Dialect, Engine
from sqlalchemy.types import NullType, TypeEngine

from typed_sql.utils.logging import get_logger

from ..core.interfaces import ColumnDescriptor

logger = get_logger(__name__)

_TYPE_MODIFIERS = (" unsigned", " zerofill")


def raw_type_name(column_type: Optional[TypeEngine]) -> Optional[str]:
    """
    Reduce a reflected SQLAlchemy type to its bare lowercase type name.

    Length, precision and MySQL sign modifiers are dropped, so
    ``VARCHAR(255)`` becomes ``varchar`` and ``INTEGER(11) UNSIGNED``
    becomes ``integer``. Untyped columns yield None.
    """
    if column_type is None or isinstance(column_type, NullType):
        return None
    name = str(column_type).split("(", 1)[0].lower()
    for modifier in _TYPE_MODIFIERS:
        name = name.replace(modifier, "")
    return name.strip() or None


class SqlAlchemyMetadataProvider:
    """
    MetadataProvider reading column metadata from a live database.

    Example:
        >>> engine = create_engine("sqlite://")
        >>> provider = SqlAlchemyMetadataProvider(engine)
        >>> provider.get_columns("test")["id"]
        ColumnDescriptor(name='id', type='integer')
    """

    def __init__(self, bind: Union[Engine, Connection], schema: Optional[str] = None):
        """
        Args:
            bind: Engine or Connection used for introspection
            schema: Schema to read tables from, None for the default schema
        """
        self.bind = bind
        self.schema = schema

    def get_columns(self, table_name: str) -> Dict[str, ColumnDescriptor]:
        # A fresh inspector per call so schema changes are always visible
        inspector = inspect(self.bind)
        columns: Dict[str, ColumnDescriptor] = {}
        for column in inspector.get_columns(table_name, schema=self.schema):
            columns[column["name"]] = ColumnDescriptor(
                name=column["name"], type=raw_type_name(column.get("type"))
            )
        logger.debug(
            "sqlalchemy_driver.columns_reflected",
            table=table_name,
            schema=self.schema,
            columns=list(columns),
        )
        return columns


def _load_dialect(dialect: Union[str, Dialect, Engine, Connection]) -> Dialect:
    if isinstance(dialect, Dialect):
        return dialect
    if isinstance(dialect, (Engine, Connection)):
        dialect = dialect.dialect.name
    # Named paramstyle keeps literal percent signs undoubled
    dialect_cls = registry.load(dialect.lower())
    return dialect_cls(paramstyle="named")


class SqlAlchemyQuoter:
    """
    Quoter using the dialect's string literal rendering.

    Example:
        >>> SqlAlchemyQuoter("sqlite").quote("O'Reilly")
        "'O''Reilly'"
    """

    def __init__(self, dialect: Union[str, Dialect, Engine, Connection]):
        """
        Args:
            dialect: Dialect name ("sqlite", "mysql"), Dialect, Engine or Connection
        """
        self.dialect = _load_dialect(dialect)

    def quote(self, value: Any) -> str:
        # Compiled so dialect escapes such as MySQL backslashes apply
        compiled = literal(str(value), String()).compile(
            dialect=self.dialect, compile_kwargs={"literal_binds": True}
        )
        return str(compiled)


__all__ = ["SqlAlchemyMetadataProvider", "SqlAlchemyQuoter", "raw_type_name"]
