"""
Read expressions for result columns.

An ExpressionBuilder wraps column references in the dialect's formatting
functions and appends result aliases.
"""

from abc import ABC, abstractmethod
from typing import Callable, Dict, Optional

from .identifier import quote_identifier
from .types import LogicalType

Formatter = Callable[[str], str]


class ExpressionBuilder(ABC):
    """Base class for per-dialect expression builders."""

    # Identifier quoting style passed to quote_identifier
    dialect = "sqlite"

    DATE_DELIMITER = "-"
    TIME_DELIMITER = ":"
    DATETIME_DELIMITER = " "

    def result_column(self, expr: str, alias: Optional[str] = None) -> str:
        """
        Append ``AS <alias>`` when a non-empty alias is given.

        Args:
            expr: Column name or expression
            alias: Result alias, quoted with the dialect's identifier quote

        Returns:
            The select-list entry
        """
        if alias:
            return f"{expr} AS {quote_identifier(alias, self.dialect)}"
        return expr

    @abstractmethod
    def formatters(self) -> Dict[LogicalType, Formatter]:
        """Return the logical types that are read through a formatting function."""
        pass


__all__ = ["ExpressionBuilder", "Formatter"]
