"""Lexical translation between snake_case column names and camelCase keys."""

import re

# An underscore between an alphanumeric and a lowercase letter. Underscores
# before digits, runs of underscores and leading underscores are kept so that
# underscore() restores the name exactly.
_UNDERSCORE_SEGMENT = re.compile(r"(?<=[a-zA-Z0-9])_([a-z])")
_UPPERCASE = re.compile(r"[A-Z]")


def camelize(name: str) -> str:
    """
    Convert a snake_case name to lowerCamelCase.

    Examples:
        >>> camelize("this_column_name_is_very_long")
        'thisColumnNameIsVeryLong'
        >>> camelize("address_2")
        'address_2'
    """
    camel = _UNDERSCORE_SEGMENT.sub(lambda m: m.group(1).upper(), name)
    return camel[:1].lower() + camel[1:]


def underscore(name: str) -> str:
    """
    Convert a lowerCamelCase name to snake_case.

    Examples:
        >>> underscore("userName")
        'user_name'
    """
    name = name[:1].lower() + name[1:]
    return _UPPERCASE.sub(lambda m: "_" + m.group(0), name).lower()


__all__ = ["camelize", "underscore"]
