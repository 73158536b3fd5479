"""Tests for ParamReader."""

import pytest

from tabseed import GeneratorInfo, Param, ParameterError, ParamReader

INFO = GeneratorInfo(
    display="Test",
    category="test",
    description="Parameter decoding fixture",
    params=[
        Param("min", "Min", "int", default="0"),
        Param("max", "Max", "int", default="100"),
        Param("ratio", "Ratio", "float", default="0.5"),
        Param("special", "Special", "bool", default="true"),
        Param("strs", "Strings", "[]string", default="a,b"),
        Param("required", "Required", "string"),
        Param("extras", "Extras", "[]string", optional=True),
    ],
)


class TestParamReader:
    """Tests for typed access and defaults."""

    def test_supplied_values(self) -> None:
        reader = ParamReader(
            {"min": ["5"], "ratio": ["1.25"], "special": ["false"], "strs": ["x", "y", "z"]},
            INFO,
        )

        assert reader.get_int("min") == 5
        assert reader.get_float("ratio") == 1.25
        assert reader.get_bool("special") is False
        assert reader.get_string_array("strs") == ["x", "y", "z"]

    def test_defaults(self) -> None:
        reader = ParamReader({}, INFO)

        assert reader.get_int("max") == 100
        assert reader.get_float("ratio") == 0.5
        assert reader.get_bool("special") is True
        assert reader.get_string_array("strs") == ["a", "b"]

    def test_first_value_wins_for_scalars(self) -> None:
        reader = ParamReader({"min": ["1", "2"]}, INFO)
        assert reader.get_int("min") == 1

    def test_missing_required(self) -> None:
        reader = ParamReader({}, INFO)

        with pytest.raises(ParameterError, match="could not find field") as exc_info:
            reader.get_string("required")

        assert exc_info.value.field == "required"

    def test_optional_without_default(self) -> None:
        reader = ParamReader(None, INFO)
        assert reader.get_string_array("extras") == []

    def test_unknown_param_without_info(self) -> None:
        with pytest.raises(ParameterError):
            ParamReader({}).get_int("anything")

    @pytest.mark.parametrize(
        "getter, value",
        [("get_int", "ten"), ("get_float", "1.2.3"), ("get_bool", "maybe")],
    )
    def test_unparseable(self, getter: str, value: str) -> None:
        reader = ParamReader({"min": [value]}, INFO)

        with pytest.raises(ParameterError, match="Parameter 'min'"):
            getattr(reader, getter)("min")

    def test_has(self) -> None:
        reader = ParamReader({"required": ["x"]}, INFO)

        assert reader.has("required")
        assert reader.has("min")
        assert not reader.has("nope")
