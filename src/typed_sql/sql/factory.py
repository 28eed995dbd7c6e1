"""
Dialect selection by name.

Wires a dialect's ExpressionBuilder, ParameterBuilder and QueryBuilder
together, and optionally a ClauseAssembler on top of them. Arguments left as
None fall back to the configured defaults (see ``typed_sql.config``).
"""

from typing import Dict, Optional, Tuple, Type

from sqlalchemy.engine import Engine

from typed_sql.config import get_settings
from typed_sql.utils.logging import get_logger

from .core.builder import QueryBuilder
from .core.exceptions import UnknownDialectError
from .core.expressions import ExpressionBuilder
from .core.interfaces import MetadataProvider, Quoter
from .core.parameters import ParameterBuilder
from .dialects.mysql import MysqlExpressionBuilder, MysqlParameterBuilder, MysqlQueryBuilder
from .dialects.sqlite import SqliteExpressionBuilder, SqliteParameterBuilder, SqliteQueryBuilder
from .drivers.sqlalchemy_driver import SqlAlchemyMetadataProvider, SqlAlchemyQuoter
from .operations.assembler import ClauseAssembler

logger = get_logger(__name__)

DialectClasses = Tuple[Type[QueryBuilder], Type[ExpressionBuilder], Type[ParameterBuilder]]

DIALECTS: Dict[str, DialectClasses] = {
    "mysql": (MysqlQueryBuilder, MysqlExpressionBuilder, MysqlParameterBuilder),
    "sqlite": (SqliteQueryBuilder, SqliteExpressionBuilder, SqliteParameterBuilder),
}

DIALECT_ALIASES = {"mariadb": "mysql"}


def normalize_dialect(dialect: Optional[str]) -> str:
    """
    Return the registered name for a dialect, or the configured default.

    Raises:
        UnknownDialectError: If the name is not registered
    """
    if dialect is None:
        return get_settings().dialect
    name = dialect.strip().lower()
    name = DIALECT_ALIASES.get(name, name)
    if name not in DIALECTS:
        logger.warning("factory.unknown_dialect", dialect=dialect)
        raise UnknownDialectError(dialect)
    return name


def create_query_builder(dialect: Optional[str], quoter: Quoter) -> QueryBuilder:
    """
    Build the QueryBuilder for a dialect.

    Args:
        dialect: Dialect name ("mysql", "mariadb", "sqlite"), None for the default
        quoter: String literal quoter for the same dialect

    Returns:
        QueryBuilder with its ExpressionBuilder and ParameterBuilder attached

    Raises:
        UnknownDialectError: If the dialect is not registered
    """
    name = normalize_dialect(dialect)
    builder_cls, expression_cls, parameter_cls = DIALECTS[name]
    logger.debug("factory.query_builder_created", dialect=name)
    return builder_cls(expression_cls(), parameter_cls(quoter))


def create_assembler(
    metadata: MetadataProvider,
    quoter: Quoter,
    dialect: Optional[str] = None,
    camelize: Optional[bool] = None,
) -> ClauseAssembler:
    """Build a ClauseAssembler for a dialect over the given collaborators."""
    if camelize is None:
        camelize = get_settings().camelize
    return ClauseAssembler(create_query_builder(dialect, quoter), metadata, camelize=camelize)


def create_assembler_from_engine(
    engine: Engine,
    schema: Optional[str] = None,
    camelize: Optional[bool] = None,
) -> ClauseAssembler:
    """
    Build a ClauseAssembler backed by a SQLAlchemy engine.

    The dialect is taken from ``engine.dialect.name``.

    Example:
        >>> engine = create_engine("sqlite://")
        >>> assembler = create_assembler_from_engine(engine)
        >>> assembler.select("test")
    """
    return create_assembler(
        SqlAlchemyMetadataProvider(engine, schema=schema),
        SqlAlchemyQuoter(engine),
        dialect=engine.dialect.name,
        camelize=camelize,
    )


__all__ = [
    "DIALECTS",
    "normalize_dialect",
    "create_query_builder",
    "create_assembler",
    "create_assembler_from_engine",
]
