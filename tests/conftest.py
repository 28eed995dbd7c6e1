"""Shared fixtures: in-memory collaborators and per-dialect builders."""

from __future__ import annotations

from typing import Dict, Iterable, Mapping, Optional, Tuple

import pytest

from typed_sql.config import get_settings
from typed_sql.sql.core.interfaces import ColumnDescriptor
from typed_sql.sql.dialects import (
    MysqlExpressionBuilder,
    MysqlParameterBuilder,
    MysqlQueryBuilder,
    SqliteExpressionBuilder,
    SqliteParameterBuilder,
    SqliteQueryBuilder,
)
from typed_sql.sql.operations import ClauseAssembler


class FakeQuoter:
    """Quotes like ANSI SQL: wrap in single quotes, double embedded ones."""

    def quote(self, value) -> str:
        text = str(value).replace("'", "''")
        return f"'{text}'"


class FakeMetadataProvider:
    """Serves column metadata from a dict and counts lookups per table."""

    def __init__(self, tables: Mapping[str, Iterable[Tuple[str, Optional[str]]]]):
        self.tables = {
            table: [ColumnDescriptor(name, type_name) for name, type_name in columns]
            for table, columns in tables.items()
        }
        self.calls: Dict[str, int] = {}

    def get_columns(self, table_name: str) -> Dict[str, ColumnDescriptor]:
        self.calls[table_name] = self.calls.get(table_name, 0) + 1
        return {column.name: column for column in self.tables[table_name]}


MYSQL_TABLES = {
    "test": [
        ("id", "int"),
        ("name", "varchar"),
        ("birthday", "date"),
        ("created_at", "datetime"),
        ("updated_at", "datetime"),
    ],
    "users": [
        ("user_id", "int"),
        ("user_name", "varchar"),
        ("location", "geometry"),
        ("memo", None),
    ],
}

SQLITE_TABLES = {
    "test": [
        ("id", "integer"),
        ("name", "text"),
        ("updated_at", "datetime"),
    ],
    "users": [
        ("user_id", "integer"),
        ("user_name", "text"),
        ("updated_at", "datetime"),
        ("this_column_name_is_very_long", "text"),
    ],
    "addresses": [
        ("address_id", "integer"),
        ("address_2", "text"),
        ("line_1_text", "text"),
    ],
    "notes": [
        ("note_id", "integer"),
        ("body", None),
    ],
}


@pytest.fixture(autouse=True)
def fresh_settings():
    """Drop cached settings so environment changes in a test take effect."""
    get_settings.cache_clear()
    yield
    get_settings.cache_clear()


@pytest.fixture
def quoter() -> FakeQuoter:
    return FakeQuoter()


@pytest.fixture
def mysql_parameters(quoter) -> MysqlParameterBuilder:
    return MysqlParameterBuilder(quoter)


@pytest.fixture
def mysql_expressions() -> MysqlExpressionBuilder:
    return MysqlExpressionBuilder()


@pytest.fixture
def mysql_builder(mysql_expressions, mysql_parameters) -> MysqlQueryBuilder:
    return MysqlQueryBuilder(mysql_expressions, mysql_parameters)


@pytest.fixture
def sqlite_parameters(quoter) -> SqliteParameterBuilder:
    return SqliteParameterBuilder(quoter)


@pytest.fixture
def sqlite_expressions() -> SqliteExpressionBuilder:
    return SqliteExpressionBuilder()


@pytest.fixture
def sqlite_builder(sqlite_expressions, sqlite_parameters) -> SqliteQueryBuilder:
    return SqliteQueryBuilder(sqlite_expressions, sqlite_parameters)


@pytest.fixture
def mysql_metadata() -> FakeMetadataProvider:
    return FakeMetadataProvider(MYSQL_TABLES)


@pytest.fixture
def sqlite_metadata() -> FakeMetadataProvider:
    return FakeMetadataProvider(SQLITE_TABLES)


@pytest.fixture
def mysql_assembler(mysql_builder, mysql_metadata) -> ClauseAssembler:
    return ClauseAssembler(mysql_builder, mysql_metadata)


@pytest.fixture
def sqlite_assembler(sqlite_builder, sqlite_metadata) -> ClauseAssembler:
    return ClauseAssembler(sqlite_builder, sqlite_metadata)
