"""
Unit tests for the MySQL dialect: literals, read expressions, pagination.
"""

from datetime import date, datetime, time
from decimal import Decimal

import pytest

from typed_sql.sql.core.exceptions import (
    InvalidValueError,
    UnimplementedTypeError,
    UnsupportedTypeError,
)
from typed_sql.sql.core.sentinels import MAX, MIN, NOW
from typed_sql.sql.core.types import LogicalType

DATE_FORMAT = "'%Y-%m-%d'"
TIMESTAMP_FORMAT = "'%Y-%m-%d %H:%i:%s'"


def mysql_date(text):
    return f"STR_TO_DATE('{text}', {DATE_FORMAT})"


def mysql_timestamp(text):
    return f"STR_TO_DATE('{text}', {TIMESTAMP_FORMAT})"


@pytest.mark.unit
class TestMysqlTextAndNumbers:
    """Text, integer, float and boolean literals."""

    def test_text_is_quoted(self, mysql_parameters):
        assert mysql_parameters.to_text("Foo") == "'Foo'"
        assert mysql_parameters.to_text("O'Reilly") == "'O''Reilly'"

    def test_text_empty_and_none_are_null(self, mysql_parameters):
        assert mysql_parameters.to_text("") == "NULL"
        assert mysql_parameters.to_text(None) == "NULL"

    def test_int_values(self, mysql_parameters):
        assert mysql_parameters.to_int(1) == "1"
        assert mysql_parameters.to_int("10") == "10"
        assert mysql_parameters.to_int(None) == "NULL"
        assert mysql_parameters.to_int("") == "NULL"

    @pytest.mark.parametrize(
        "type_name,low,high",
        [
            ("tinyint", "-128", "127"),
            ("smallint", "-32768", "32767"),
            ("mediumint", "-8388608", "8388607"),
            ("int", "-2147483648", "2147483647"),
            ("integer", "-2147483648", "2147483647"),
            ("bigint", "-9223372036854775808", "9223372036854775807"),
        ],
    )
    def test_int_range_by_type(self, mysql_builder, type_name, low, high):
        assert mysql_builder.parameter(MIN, type_name) == low
        assert mysql_builder.parameter(MAX, type_name) == high

    def test_int_without_type_uses_four_bytes(self, mysql_parameters):
        assert mysql_parameters.to_int(MIN) == "-2147483648"

    def test_named_width_encoders(self, mysql_parameters):
        assert mysql_parameters.to_tiny_int(MAX) == "127"
        assert mysql_parameters.to_small_int(MIN) == "-32768"
        assert mysql_parameters.to_medium_int(MAX) == "8388607"
        assert mysql_parameters.to_big_int(MIN) == "-9223372036854775808"

    def test_float_values(self, mysql_parameters):
        assert mysql_parameters.to_float(1) == "1"
        assert mysql_parameters.to_float(0.5) == "0.5"
        assert mysql_parameters.to_float("1.25") == "1.25"
        assert mysql_parameters.to_float("") == "NULL"

    def test_float_range(self, mysql_builder):
        assert mysql_builder.parameter(MIN, "float") == "'-3.402823466E+38'"
        assert mysql_builder.parameter(MAX, "double") == "'3.402823466E+38'"

    @pytest.mark.parametrize("value", [float("inf"), float("-inf"), float("nan"), Decimal("NaN")])
    def test_non_finite_numbers_are_invalid(self, mysql_parameters, value):
        with pytest.raises(InvalidValueError) as int_error:
            mysql_parameters.to_int(value)
        assert int_error.value.logical_type == "int"
        with pytest.raises(InvalidValueError) as float_error:
            mysql_parameters.to_float(value)
        assert float_error.value.logical_type == "float"

    def test_large_integers_are_kept(self, mysql_parameters):
        assert mysql_parameters.to_int(10**20) == "100000000000000000000"

    @pytest.mark.parametrize(
        "value,expected",
        [
            (True, "1"),
            (False, "0"),
            (1, "1"),
            (0, "0"),
            ("1", "1"),
            ("0", "0"),
            ("yes", "1"),
            (MIN, "0"),
            (MAX, "1"),
            ("", "NULL"),
            (None, "NULL"),
        ],
    )
    def test_bool(self, mysql_builder, value, expected):
        assert mysql_builder.parameter(value, "boolean") == expected


@pytest.mark.unit
class TestMysqlDateTime:
    """DATE, DATETIME/TIMESTAMP and TIME literals."""

    def test_date_from_date_object(self, mysql_parameters):
        assert mysql_parameters.to_date(date(2013, 1, 2)) == mysql_date("2013-01-02")

    def test_date_from_datetime_object(self, mysql_parameters):
        assert mysql_parameters.to_date(datetime(2013, 1, 2, 3, 4, 5)) == mysql_date("2013-01-02")

    def test_date_from_unix_timestamp(self, mysql_parameters):
        epoch = int(datetime(2013, 1, 2, 3, 4, 5).timestamp())
        assert mysql_parameters.to_date(epoch) == mysql_date("2013-01-02")

    def test_date_from_string_passes_through(self, mysql_parameters):
        assert mysql_parameters.to_date("2013-01-02") == mysql_date("2013-01-02")

    def test_date_sentinels(self, mysql_parameters):
        assert mysql_parameters.to_date(NOW) == "CURDATE()"
        assert mysql_parameters.to_date(MIN) == mysql_date("1000-01-01")
        assert mysql_parameters.to_date(MAX) == mysql_date("9999-12-31")

    def test_date_from_sequence(self, mysql_parameters):
        assert mysql_parameters.to_date([2013, 1, 2]) == mysql_date("2013-01-02")
        assert mysql_parameters.to_date(("2013", "12")) == mysql_date("2013-12-01")
        assert mysql_parameters.to_date([2013]) == mysql_date("2013-01-01")

    def test_date_null_values(self, mysql_parameters):
        assert mysql_parameters.to_date(None) == "NULL"
        assert mysql_parameters.to_date("") == "NULL"
        assert mysql_parameters.to_date([]) == "NULL"
        assert mysql_parameters.to_date([None, 1, 2]) == "NULL"

    def test_date_invalid_value(self, mysql_parameters):
        with pytest.raises(InvalidValueError) as exc_info:
            mysql_parameters.to_date(1.5)
        assert exc_info.value.logical_type == "date"
        assert exc_info.value.value_type == "float"

    def test_timestamp_from_datetime(self, mysql_parameters):
        result = mysql_parameters.to_timestamp(datetime(2013, 1, 2, 3, 4, 5))
        assert result == mysql_timestamp("2013-01-02 03:04:05")

    def test_timestamp_from_unix_timestamp(self, mysql_parameters):
        epoch = int(datetime(2013, 1, 2, 3, 4, 5).timestamp())
        assert mysql_parameters.to_timestamp(epoch) == mysql_timestamp("2013-01-02 03:04:05")

    def test_timestamp_from_sequence(self, mysql_parameters):
        assert mysql_parameters.to_timestamp([2013, 1, 2, 3, 4, 5]) == mysql_timestamp(
            "2013-01-02 03:04:05"
        )
        assert mysql_parameters.to_timestamp([2013, 1, 2]) == mysql_timestamp(
            "2013-01-02 00:00:00"
        )

    def test_timestamp_sentinels(self, mysql_parameters):
        assert mysql_parameters.to_timestamp(NOW) == "NOW()"
        assert mysql_parameters.to_timestamp(MIN) == mysql_timestamp("1000-01-01 00:00:00")
        assert mysql_parameters.to_timestamp(MAX) == mysql_timestamp("9999-12-31 23:59:59")

    def test_timestamp_invalid_value(self, mysql_parameters):
        with pytest.raises(InvalidValueError):
            mysql_parameters.to_timestamp({"year": 2013})

    def test_time_values(self, mysql_parameters):
        assert mysql_parameters.to_time(time(3, 4, 5)) == "'03:04:05'"
        assert mysql_parameters.to_time(datetime(2013, 1, 2, 3, 4, 5)) == "'03:04:05'"
        assert mysql_parameters.to_time("03:04:05") == "'03:04:05'"
        assert mysql_parameters.to_time([3, 4]) == "'03:04:00'"

    def test_time_sentinels(self, mysql_parameters):
        assert mysql_parameters.to_time(NOW) == "TIME(NOW())"
        assert mysql_parameters.to_time(MIN) == "'00:00:00'"
        assert mysql_parameters.to_time(MAX) == "'23:59:59'"

    @pytest.mark.parametrize("blank", [None, ""])
    def test_timestamp_and_time_blank_values_are_null(self, mysql_parameters, blank):
        assert mysql_parameters.to_timestamp(blank) == "NULL"
        assert mysql_parameters.to_time(blank) == "NULL"

    def test_blank_component_sequences_are_null(self, mysql_parameters):
        assert mysql_parameters.to_date(["", "", ""]) == "NULL"
        assert mysql_parameters.to_timestamp(["", "", "", "", "", ""]) == "NULL"
        assert mysql_parameters.to_time(("", "")) == "NULL"

    def test_blank_trailing_components_use_defaults(self, mysql_parameters):
        assert mysql_parameters.to_date(["2013", "", ""]) == mysql_date("2013-01-01")
        assert mysql_parameters.to_time(["3", ""]) == "'03:00:00'"

    @pytest.mark.parametrize(
        "encoder,value,logical_type",
        [
            ("to_date", ["2013.0"], "date"),
            ("to_date", [2013, "x"], "date"),
            ("to_timestamp", [2013, 1, 2, "noon"], "timestamp"),
            ("to_time", [object()], "time"),
        ],
    )
    def test_invalid_components(self, mysql_parameters, encoder, value, logical_type):
        with pytest.raises(InvalidValueError) as exc_info:
            getattr(mysql_parameters, encoder)(value)
        assert exc_info.value.logical_type == logical_type


@pytest.mark.unit
class TestMysqlQueryBuilder:
    """Type dispatch, read expressions, pagination and counting."""

    @pytest.mark.parametrize(
        "type_name,logical_type",
        [
            ("varchar", LogicalType.TEXT),
            ("MEDIUMTEXT", LogicalType.TEXT),
            ("int4", LogicalType.INT),
            ("real", LogicalType.FLOAT),
            ("bool", LogicalType.BOOL),
            ("date", LogicalType.DATE),
            ("time", LogicalType.TIME),
            ("datetime", LogicalType.TIMESTAMP),
            ("geometry", LogicalType.GEOMETRY),
        ],
    )
    def test_parameter_type(self, mysql_builder, type_name, logical_type):
        assert mysql_builder.parameter_type(type_name) is logical_type

    def test_parameter_type_unknown(self, mysql_builder):
        assert mysql_builder.parameter_type("blob") is None

    def test_parameter_dispatches_by_type(self, mysql_builder):
        assert mysql_builder.parameter("Foo", "varchar") == "'Foo'"
        assert mysql_builder.parameter(date(2013, 1, 2), "DATE") == mysql_date("2013-01-02")
        assert mysql_builder.parameter(NOW, "timestamp") == "NOW()"

    def test_parameter_unsupported_type(self, mysql_builder):
        with pytest.raises(UnsupportedTypeError) as exc_info:
            mysql_builder.parameter("Foo", "blob")
        assert str(exc_info.value) == 'Unsupported type:"blob"'

    def test_parameter_geometry_has_no_encoder(self, mysql_builder):
        with pytest.raises(UnimplementedTypeError):
            mysql_builder.parameter("POINT(1 1)", "geometry")

    def test_expression_plain_column(self, mysql_builder):
        assert mysql_builder.expression("test.id") == "test.id"
        assert mysql_builder.expression("test.id", "int", "id") == "test.id AS `id`"

    def test_expression_date(self, mysql_builder):
        assert mysql_builder.expression("test.birthday", "date", "birthday") == (
            "DATE_FORMAT(test.birthday, '%Y-%m-%d') AS `birthday`"
        )

    def test_expression_timestamp(self, mysql_builder):
        assert mysql_builder.expression("updated_at", "datetime", "updatedAt") == (
            "DATE_FORMAT(updated_at, '%Y-%m-%d %H:%i:%s') AS `updatedAt`"
        )

    def test_expression_defaults_alias_to_column(self, mysql_builder):
        assert mysql_builder.expression("birthday", "date") == (
            "DATE_FORMAT(birthday, '%Y-%m-%d') AS `birthday`"
        )

    def test_expression_empty_alias_suppresses_alias(self, mysql_builder):
        assert mysql_builder.expression("birthday", "date", "") == (
            "DATE_FORMAT(birthday, '%Y-%m-%d')"
        )

    def test_expression_geometry(self, mysql_builder):
        assert mysql_builder.expression("location", "geometry", "location") == (
            "ASTEXT(location) AS `location`"
        )

    def test_expression_unsupported_type(self, mysql_builder):
        with pytest.raises(UnsupportedTypeError):
            mysql_builder.expression("test.data", "blob")

    @pytest.mark.parametrize(
        "limit,offset,expected",
        [
            (10, 1, "SELECT * FROM test LIMIT 1,10"),
            (10, None, "SELECT * FROM test LIMIT 10"),
            (None, 5, "SELECT * FROM test LIMIT 5,18446744073709551615"),
            (None, None, "SELECT * FROM test LIMIT 18446744073709551615"),
            (-1, -1, "SELECT * FROM test LIMIT 18446744073709551615"),
            (0, 0, "SELECT * FROM test LIMIT 0,0"),
        ],
    )
    def test_limit_offset(self, mysql_builder, limit, offset, expected):
        assert mysql_builder.limit_offset("SELECT * FROM test", limit, offset) == expected

    def test_count(self, mysql_builder):
        assert mysql_builder.count("SELECT * FROM test") == (
            "SELECT COUNT(*) FROM (SELECT * FROM test) AS __SUBQUERY"
        )

    def test_count_found_rows(self, mysql_builder):
        sql = "SELECT SQL_CALC_FOUND_ROWS * FROM test LIMIT 10"
        assert mysql_builder.count(sql) == "SELECT FOUND_ROWS()"
