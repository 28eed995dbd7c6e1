"""
Conversion of application values into SQL literal text.

The base ParameterBuilder implements the rules shared by every dialect:
NULL for absent and empty values, fixed integer ranges for the MIN/MAX
sentinels, and normalisation of the four accepted date/time input shapes
(Unix timestamp, date/time object, string, component sequence). Dialects
supply the literal syntax and their LogicalType -> encoder mapping.
"""

import math
from abc import ABC, abstractmethod
from datetime import date, datetime, time
from decimal import Decimal
from typing import Any, Callable, Dict, Mapping, Optional, Sequence, Tuple

from .exceptions import InvalidValueError
from .interfaces import Quoter
from .sentinels import MAX, MIN, NOW
from .types import LogicalType

NULL = "NULL"

# Signed range by storage width in bytes
INTEGER_RANGES: Dict[int, Tuple[int, int]] = {
    1: (-128, 127),
    2: (-32768, 32767),
    3: (-8388608, 8388607),
    4: (-2147483648, 2147483647),
    8: (-9223372036854775808, 9223372036854775807),
}

Encoder = Callable[..., str]


def _is_number(value: Any) -> bool:
    return isinstance(value, (int, float, Decimal))


def _is_blank(value: Any) -> bool:
    return value is None or (isinstance(value, str) and len(value) == 0)


def _check_finite(value: Any, logical_type: LogicalType) -> None:
    # NaN and infinities have no SQL literal
    if isinstance(value, int):
        return
    finite = value.is_finite() if isinstance(value, Decimal) else math.isfinite(value)
    if not finite:
        raise InvalidValueError(logical_type.value, type(value).__name__)


def format_float(number: Any) -> str:
    """
    Format a number as the shortest decimal text, dropping a trailing ``.0``.

    Examples:
        >>> format_float(1)
        '1'
        >>> format_float(0.1)
        '0.1'
    """
    text = repr(float(number))
    if text.endswith(".0"):
        text = text[:-2]
    return text


def _components(
    values: Sequence[Any], defaults: Sequence[int], logical_type: LogicalType
) -> Optional[Tuple[int, ...]]:
    """
    Read date/time components from a sequence, filling gaps with defaults.

    Returns None when the leading component is missing or blank.

    Raises:
        InvalidValueError: If a component is not an integer or integer text
    """
    if len(values) == 0 or _is_blank(values[0]):
        return None
    components = []
    for index, default in enumerate(defaults):
        item = values[index] if index < len(values) else None
        if _is_blank(item):
            components.append(default)
            continue
        try:
            components.append(int(item))
        except (TypeError, ValueError) as e:
            raise InvalidValueError(logical_type.value, type(item).__name__) from e
    return tuple(components)


class ParameterBuilder(ABC):
    """
    Base class for per-dialect literal encoders.

    Subclasses declare the date/time literal syntax through the ``*_literal``
    hooks and class constants, and the supported logical types through
    ``encoders()``.
    """

    DATE_DELIMITER = "-"
    TIME_DELIMITER = ":"
    DATETIME_DELIMITER = " "

    # Raw type name -> integer width in bytes; anything else is 4 bytes
    INTEGER_WIDTHS: Mapping[str, int] = {}

    FLOAT_MIN = "-9223372036854775808"
    FLOAT_MAX = "9223372036854775807"

    MIN_DATE: Tuple[int, int, int] = (1000, 1, 1)
    MAX_DATE: Tuple[int, int, int] = (9999, 12, 31)

    CURRENT_DATE = "CURRENT_DATE"
    CURRENT_TIMESTAMP = "CURRENT_TIMESTAMP"
    CURRENT_TIME = "CURRENT_TIME"

    def __init__(self, quoter: Quoter):
        self.quoter = quoter

    @abstractmethod
    def encoders(self) -> Dict[LogicalType, Encoder]:
        """Return the logical types this dialect can encode, with their encoders."""
        pass

    @abstractmethod
    def date_literal(self, text: str) -> str:
        """Wrap a ``YYYY-MM-DD`` string in the dialect's date syntax."""
        pass

    @abstractmethod
    def timestamp_literal(self, text: str) -> str:
        """Wrap a ``YYYY-MM-DD HH:MM:SS`` string in the dialect's timestamp syntax."""
        pass

    def time_literal(self, text: str) -> str:
        return f"'{text}'"

    # ------------------------------------------------------------------
    # text
    # ------------------------------------------------------------------

    def to_text(self, value: Any, type_name: Optional[str] = None) -> str:
        if _is_blank(value):
            return NULL
        return self.quoter.quote(value)

    # ------------------------------------------------------------------
    # numbers
    # ------------------------------------------------------------------

    def _to_integer(self, value: Any, width: int) -> str:
        if value is None:
            return NULL
        if _is_number(value):
            _check_finite(value, LogicalType.INT)
            return str(int(value))
        if isinstance(value, str):
            if len(value) == 0:
                return NULL
            low, high = INTEGER_RANGES[width]
            if value == MIN:
                return str(low)
            if value == MAX:
                return str(high)
            # Caller is responsible for pre-formatted literal text
            return value
        return str(value)

    def to_int1(self, value: Any) -> str:
        return self._to_integer(value, 1)

    def to_int2(self, value: Any) -> str:
        return self._to_integer(value, 2)

    def to_int3(self, value: Any) -> str:
        return self._to_integer(value, 3)

    def to_int4(self, value: Any) -> str:
        return self._to_integer(value, 4)

    def to_int8(self, value: Any) -> str:
        return self._to_integer(value, 8)

    def integer_width(self, type_name: Optional[str]) -> int:
        if type_name is None:
            return 4
        return self.INTEGER_WIDTHS.get(type_name.lower(), 4)

    def to_int(self, value: Any, type_name: Optional[str] = None) -> str:
        """
        Encode an integer, sizing MIN/MAX by the raw type name.

        Unknown or missing type names use the 4-byte range, so on MySQL
        ``to_int("MIN", "tinyint")`` is ``-128`` while ``to_int("MIN")`` is
        ``-2147483648``.
        """
        return self._to_integer(value, self.integer_width(type_name))

    def to_float(self, value: Any, type_name: Optional[str] = None) -> str:
        if value is None:
            return NULL
        if _is_number(value):
            _check_finite(value, LogicalType.FLOAT)
            return format_float(value)
        if isinstance(value, str):
            if len(value) == 0:
                return NULL
            if value == MIN:
                return self.FLOAT_MIN
            if value == MAX:
                return self.FLOAT_MAX
            return value
        return str(value)

    def to_bool(self, value: Any, type_name: Optional[str] = None) -> str:
        if value is None:
            return NULL
        if value == MIN:
            return "0"
        if value == MAX:
            return "1"
        if isinstance(value, str):
            if len(value) == 0:
                return NULL
            # "0" from form input is false
            if value == "0":
                return "0"
        return "1" if value else "0"

    # ------------------------------------------------------------------
    # date / time
    # ------------------------------------------------------------------

    def format_date(self, year: int, month: int, day: int) -> str:
        d = self.DATE_DELIMITER
        return f"{year:04d}{d}{month:02d}{d}{day:02d}"

    def format_time(self, hour: int, minute: int, second: int) -> str:
        t = self.TIME_DELIMITER
        return f"{hour:02d}{t}{minute:02d}{t}{second:02d}"

    def format_timestamp(
        self, year: int, month: int, day: int, hour: int, minute: int, second: int
    ) -> str:
        return (
            self.format_date(year, month, day)
            + self.DATETIME_DELIMITER
            + self.format_time(hour, minute, second)
        )

    @staticmethod
    def _from_unix_timestamp(value: Any) -> Any:
        # Unix timestamps are rendered in the local time zone
        if isinstance(value, int) and not isinstance(value, bool):
            return datetime.fromtimestamp(value)
        return value

    def to_date(self, value: Any, type_name: Optional[str] = None) -> str:
        if value is None:
            return NULL

        value = self._from_unix_timestamp(value)

        if isinstance(value, date):
            return self.date_literal(self.format_date(value.year, value.month, value.day))

        if isinstance(value, str):
            if len(value) == 0:
                return NULL
            if value == NOW:
                return self.CURRENT_DATE
            if value == MIN:
                return self.date_literal(self.format_date(*self.MIN_DATE))
            if value == MAX:
                return self.date_literal(self.format_date(*self.MAX_DATE))
            return self.date_literal(value)

        if isinstance(value, (list, tuple)):
            components = _components(value, (0, 1, 1), LogicalType.DATE)
            if components is None:
                return NULL
            return self.date_literal(self.format_date(*components))

        raise InvalidValueError(LogicalType.DATE.value, type(value).__name__)

    def to_timestamp(self, value: Any, type_name: Optional[str] = None) -> str:
        if value is None:
            return NULL

        value = self._from_unix_timestamp(value)

        if isinstance(value, datetime):
            return self.timestamp_literal(
                self.format_timestamp(
                    value.year, value.month, value.day,
                    value.hour, value.minute, value.second,
                )
            )
        if isinstance(value, date):
            return self.timestamp_literal(
                self.format_timestamp(value.year, value.month, value.day, 0, 0, 0)
            )

        if isinstance(value, str):
            if len(value) == 0:
                return NULL
            if value == NOW:
                return self.CURRENT_TIMESTAMP
            if value == MIN:
                return self.timestamp_literal(
                    self.format_timestamp(*self.MIN_DATE, 0, 0, 0)
                )
            if value == MAX:
                return self.timestamp_literal(
                    self.format_timestamp(*self.MAX_DATE, 23, 59, 59)
                )
            return self.timestamp_literal(value)

        if isinstance(value, (list, tuple)):
            components = _components(value, (0, 1, 1, 0, 0, 0), LogicalType.TIMESTAMP)
            if components is None:
                return NULL
            return self.timestamp_literal(self.format_timestamp(*components))

        raise InvalidValueError(LogicalType.TIMESTAMP.value, type(value).__name__)

    def to_time(self, value: Any, type_name: Optional[str] = None) -> str:
        if value is None:
            return NULL

        value = self._from_unix_timestamp(value)

        if isinstance(value, datetime):
            value = value.time()
        elif isinstance(value, date):
            value = time()

        if isinstance(value, time):
            return self.time_literal(
                self.format_time(value.hour, value.minute, value.second)
            )

        if isinstance(value, str):
            if len(value) == 0:
                return NULL
            if value == NOW:
                return self.CURRENT_TIME
            if value == MIN:
                return self.time_literal(self.format_time(0, 0, 0))
            if value == MAX:
                return self.time_literal(self.format_time(23, 59, 59))
            return self.time_literal(value)

        # (hour, minute, second)
        if isinstance(value, (list, tuple)):
            components = _components(value, (0, 0, 0), LogicalType.TIME)
            if components is None:
                return NULL
            return self.time_literal(self.format_time(*components))

        raise InvalidValueError(LogicalType.TIME.value, type(value).__name__)


__all__ = ["NULL", "INTEGER_RANGES", "ParameterBuilder", "format_float"]
