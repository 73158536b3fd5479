"""Tests for format_value()."""

from datetime import date, datetime, time
from decimal import Decimal
from uuid import UUID

import pytest

from tabseed.values import format_value


class TestFormatValue:
    """One case per supported value kind."""

    def test_none(self) -> None:
        assert format_value(None) == ""

    def test_bool(self) -> None:
        assert format_value(True) == "true"
        assert format_value(False) == "false"

    def test_int(self) -> None:
        assert format_value(0) == "0"
        assert format_value(-17) == "-17"

    def test_float(self) -> None:
        assert format_value(0.1) == "0.1"
        assert format_value(2.0) == "2.0"
        assert format_value(1e16) == "1e+16"

    def test_str(self) -> None:
        assert format_value("hi, there") == "hi, there"

    def test_bytes(self) -> None:
        assert format_value(b"id\n1\n") == "id\n1\n"

    def test_dates(self) -> None:
        assert format_value(date(2024, 2, 29)) == "2024-02-29"
        assert format_value(datetime(2024, 2, 29, 13, 5, 0)) == "2024-02-29T13:05:00"
        assert format_value(time(8, 30)) == "08:30:00"

    def test_decimal_and_uuid(self) -> None:
        assert format_value(Decimal("48.858844")) == "48.858844"
        uuid = UUID("01234521-0000-4000-8000-000000000001")
        assert format_value(uuid) == "01234521-0000-4000-8000-000000000001"

    def test_structured(self) -> None:
        assert format_value([1, "a", True]) == '[1,"a",true]'
        assert format_value((1, 2)) == "[1,2]"
        assert format_value({"k": date(2024, 1, 1)}) == '{"k":"2024-01-01"}'

    def test_unsupported(self) -> None:
        with pytest.raises(TypeError, match="set"):
            format_value({1, 2})
