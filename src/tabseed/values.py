"""Conversion of generated values to cell text."""

import json
from datetime import date, datetime, time
from decimal import Decimal
from typing import Any
from uuid import UUID


def format_value(value: Any) -> str:
    """
    Convert a generated value to its cell text.

    Supported values and their text:
        - None: empty string
        - bool: "true" / "false"
        - int: decimal digits
        - float: shortest round-tripping repr ("0.1", "1e+16")
        - str: unchanged
        - bytes: decoded as UTF-8
        - date, datetime, time: ISO 8601
        - Decimal, UUID: str()
        - list, tuple, dict: compact JSON

    Raises:
        TypeError: If the value is of any other type
    """
    if value is None:
        return ""
    # bool before int, bool is an int subclass
    if isinstance(value, bool):
        return "true" if value else "false"
    if isinstance(value, int):
        return str(value)
    if isinstance(value, float):
        return repr(value)
    if isinstance(value, str):
        return value
    if isinstance(value, (bytes, bytearray)):
        return bytes(value).decode("utf-8")
    if isinstance(value, (datetime, date, time)):
        return value.isoformat()
    if isinstance(value, (Decimal, UUID)):
        return str(value)
    if isinstance(value, (list, tuple, dict)):
        return json.dumps(value, separators=(",", ":"), default=_json_default)
    raise TypeError(f"Cannot format value of type {type(value).__name__}")


def _json_default(value: Any) -> Any:
    if isinstance(value, (bytes, bytearray, datetime, date, time, Decimal, UUID)):
        return format_value(value)
    raise TypeError(f"Cannot format value of type {type(value).__name__}")
