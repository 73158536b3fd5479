"""Pytest configuration and shared fixtures."""

import pytest

from tabseed import clear_generators
from tabseed.generators.base import BaseGenerator, FunctionGenerator, GeneratorInfo, Param
from tabseed.generators.registry import GeneratorRegistry


class CountingGenerator(BaseGenerator):
    """Returns 1, 2, 3, ... and fails once it reaches fail_at."""

    info = GeneratorInfo(display="Counter", category="test", description="Counts calls")

    def __init__(self, fail_at: int | None = None):
        self.calls = 0
        self.fail_at = fail_at

    def generate(self, params):
        self.calls += 1
        if self.fail_at is not None and self.calls >= self.fail_at:
            raise RuntimeError(f"counter exploded at call {self.calls}")
        return self.calls


@pytest.fixture
def fake_registry() -> GeneratorRegistry:
    """
    Registry with deterministic generators.

    - literal: returns params["value"]
    - counter: 1, 2, 3, ...
    - exploding: fails on its second call
    - typed: returns params["kind"] shaped values (int, float, bool, list)
    """
    registry = GeneratorRegistry()

    literal_info = GeneratorInfo(
        display="Literal",
        category="misc",
        description="Same value every row",
        params=[Param("value", "Value", "string")],
    )
    registry.register(
        "literal", FunctionGenerator(lambda r: r.get_string("value"), literal_info)
    )
    registry.register("counter", CountingGenerator())
    registry.register("exploding", CountingGenerator(fail_at=2))

    typed_values = {"int": 42, "float": 2.5, "bool": True, "list": [1, "a"], "none": None}
    typed_info = GeneratorInfo(
        display="Typed",
        category="test",
        description="Values of assorted types",
        params=[Param("kind", "Kind", "string", default="int")],
    )
    registry.register(
        "typed", FunctionGenerator(lambda r: typed_values[r.get_string("kind")], typed_info)
    )
    return registry


@pytest.fixture(autouse=True)
def _reset_custom_generators():
    """Drop custom registrations between tests."""
    yield
    clear_generators()
