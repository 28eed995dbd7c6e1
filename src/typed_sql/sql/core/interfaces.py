"""
Contracts for the collaborators consumed by the builders.

The database driver owns connections, raw string quoting and schema
introspection; the builders only see it through these two protocols.
"""

from dataclasses import dataclass
from typing import Any, Mapping, Optional, Protocol, runtime_checkable


@dataclass(frozen=True)
class ColumnDescriptor:
    """A column as reported by a MetadataProvider."""

    name: str
    type: Optional[str]


@runtime_checkable
class Quoter(Protocol):
    """Quotes a raw value as a dialect-correct, injection-safe string literal."""

    def quote(self, value: Any) -> str: ...


@runtime_checkable
class MetadataProvider(Protocol):
    """
    Supplies column metadata for a table.

    ``get_columns`` must return columns in a stable order keyed by column
    name and be callable repeatedly without side effects.
    """

    def get_columns(self, table_name: str) -> Mapping[str, ColumnDescriptor]: ...


__all__ = ["ColumnDescriptor", "Quoter", "MetadataProvider"]
