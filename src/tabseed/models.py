"""Data models for table generation."""

from __future__ import annotations

from dataclasses import dataclass, field
from enum import Enum
from typing import Any

# Generator parameters: each key maps to one or more raw string values
ParamMap = dict[str, list[str]]

AUTOINCREMENT = "autoincrement"

COMMA = ","
TAB = "\t"


class RowCountMode(str, Enum):
    """
    How a requested row count maps to emitted body rows.

    LITERAL keeps the historical loop bound and emits ``row_count - 1`` body
    rows. EXACT emits ``row_count`` body rows.
    """

    LITERAL = "literal"
    EXACT = "exact"

    def body_rows(self, row_count: int) -> int:
        """Number of body rows produced for a requested row count."""
        if self is RowCountMode.EXACT:
            return row_count
        return row_count - 1


@dataclass
class Field:
    """
    One output column.

    Attributes:
        name: Header label (duplicates allowed)
        function: Registered generator name, or "autoincrement"
        params: Generator parameters, passed through untouched
    """

    name: str
    function: str
    params: ParamMap = field(default_factory=dict)

    @property
    def is_autoincrement(self) -> bool:
        """Check if this column emits the row index."""
        return self.function == AUTOINCREMENT


@dataclass
class CSVOptions:
    """
    A single table generation request.

    Attributes:
        delimiter: "," or a tab ("tab" accepted, empty means comma)
        row_count: Requested row count, must be positive
        fields: Ordered column definitions
        row_count_mode: Mapping of row_count to emitted body rows
    """

    delimiter: str = COMMA
    row_count: int = 100
    fields: list[Field] = field(default_factory=list)
    row_count_mode: RowCountMode = RowCountMode.LITERAL

    @property
    def headers(self) -> list[str]:
        """Field names in column order."""
        return [f.name for f in self.fields]


def to_param_values(value: Any) -> list[str]:
    """
    Coerce a decoded parameter value into its list-of-strings form.

    Scalars become one-element lists; lists are stringified element-wise.

    Raises:
        TypeError: If the value (or a list element) is not a scalar
    """
    if isinstance(value, (list, tuple)):
        return [_scalar_to_str(v) for v in value]
    return [_scalar_to_str(value)]


def _scalar_to_str(value: Any) -> str:
    if isinstance(value, bool):
        return "true" if value else "false"
    if isinstance(value, (str, int, float)):
        return str(value)
    raise TypeError(f"unsupported parameter value {value!r}")
