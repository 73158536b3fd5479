"""Typed access to generator parameters."""

from __future__ import annotations

from typing import TYPE_CHECKING

from tabseed.exceptions import ParameterError
from tabseed.models import ParamMap

if TYPE_CHECKING:
    from tabseed.generators.base import GeneratorInfo

_TRUE = {"true", "1", "yes", "on"}
_FALSE = {"false", "0", "no", "off"}


class ParamReader:
    """
    Read typed parameters from a ParamMap.

    Missing keys fall back to the default declared in the generator's
    metadata. A key that is missing and has no default is an error.

    Example:
        >>> reader = ParamReader({"min": ["5"]}, info)
        >>> reader.get_int("min")
        5
        >>> reader.get_int("max")  # declared default "100"
        100
    """

    def __init__(self, params: ParamMap | None, info: GeneratorInfo | None = None):
        self.params = params or {}
        self.info = info

    def _default(self, field: str) -> list[str] | None:
        if self.info is None:
            return None
        param = self.info.get_param(field)
        if param is None:
            return None
        if param.default is None:
            return [] if param.optional else None
        if param.type == "[]string":
            return [v for v in param.default.split(",") if v] if param.default else []
        return [param.default]

    def get_values(self, field: str) -> list[str]:
        """Get raw values for a field, falling back to its default."""
        values = self.params.get(field)
        if values:
            return values
        default = self._default(field)
        if default is None:
            raise ParameterError(field, "could not find field")
        return default

    def has(self, field: str) -> bool:
        """Check if a field was supplied or has a default."""
        return bool(self.params.get(field)) or self._default(field) is not None

    def get_string(self, field: str) -> str:
        values = self.get_values(field)
        if not values:
            raise ParameterError(field, "could not find field")
        return values[0]

    def get_string_array(self, field: str) -> list[str]:
        return list(self.get_values(field))

    def get_int(self, field: str) -> int:
        value = self.get_string(field)
        try:
            return int(value)
        except ValueError as e:
            raise ParameterError(field, f"{value!r} is not an integer") from e

    def get_float(self, field: str) -> float:
        value = self.get_string(field)
        try:
            return float(value)
        except ValueError as e:
            raise ParameterError(field, f"{value!r} is not a number") from e

    def get_bool(self, field: str) -> bool:
        value = self.get_string(field).strip().lower()
        if value in _TRUE:
            return True
        if value in _FALSE:
            return False
        raise ParameterError(field, f"{value!r} is not a boolean")
