"""
Logical column types and per-dialect type tables.

A dialect declares, for each logical type, the set of raw type names that
resolve to it. Lookup is case-insensitive and never raises: callers decide
how to report an unresolved type.
"""

from enum import Enum
from typing import Dict, Iterable, Mapping, Optional


class LogicalType(str, Enum):
    """Canonical dialect-independent categories driving encoding and formatting."""

    TEXT = "text"
    INT = "int"
    FLOAT = "float"
    BOOL = "bool"
    DATE = "date"
    TIME = "time"
    TIMESTAMP = "timestamp"
    GEOMETRY = "geometry"


class TypeRegistry:
    """
    Resolve raw type names to LogicalType values.

    Example:
        >>> registry = TypeRegistry({LogicalType.TEXT: ["char", "varchar"]})
        >>> registry.resolve("VARCHAR")
        <LogicalType.TEXT: 'text'>
        >>> registry.resolve("blob") is None
        True
    """

    def __init__(self, aliases: Mapping[LogicalType, Iterable[str]]):
        self._aliases: Dict[LogicalType, frozenset] = {
            logical_type: frozenset(name.lower() for name in names)
            for logical_type, names in aliases.items()
        }

    def resolve(self, raw_type: str) -> Optional[LogicalType]:
        """
        Resolve a raw type name.

        Args:
            raw_type: Native type name as reported by the metadata provider

        Returns:
            The matching LogicalType, or None when the dialect has no mapping
        """
        name = raw_type.lower()
        for logical_type, names in self._aliases.items():
            if name == logical_type.value or name in names:
                return logical_type
        return None

    @property
    def logical_types(self) -> frozenset:
        return frozenset(self._aliases)


__all__ = ["LogicalType", "TypeRegistry"]
