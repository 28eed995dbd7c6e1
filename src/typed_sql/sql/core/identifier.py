"""
Identifier quoting and column qualification.

Result aliases are the only identifiers the builders quote; table and
column references are emitted as given and qualified with a table name or
alias.
"""

from typing import Optional

# Identifier quote character per dialect; anything else uses ANSI quotes
IDENTIFIER_QUOTES = {"mysql": "`"}
DEFAULT_IDENTIFIER_QUOTE = '"'


def quote_identifier(name: str, dialect: str = "sqlite") -> str:
    """
    Quote an identifier, doubling any embedded quote character.

    Examples:
        >>> quote_identifier("updated_at")
        '"updated_at"'
        >>> quote_identifier("user`Name", dialect="mysql")
        '`user``Name`'
    """
    quote = IDENTIFIER_QUOTES.get(dialect, DEFAULT_IDENTIFIER_QUOTE)
    return quote + name.replace(quote, quote * 2) + quote


def qualify_column(column: str, table: Optional[str] = None) -> str:
    """
    Prefix a column name with a table name or alias.

    Examples:
        >>> qualify_column("id", "t01")
        't01.id'
        >>> qualify_column("id")
        'id'
    """
    if table:
        return f"{table}.{column}"
    return column
