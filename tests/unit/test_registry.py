"""Tests for the generator registry and plugin API."""

import pytest

from tabseed import (
    BaseGenerator,
    CSVOptions,
    Field,
    GeneratorRegistry,
    UnknownFunctionError,
    clear_generators,
    generate_grid,
    list_generators,
    register_generator,
)
from tabseed.exceptions import RegistryFrozenError
from tabseed.generators.registry import default_registry, get_generator


class SKUGenerator(BaseGenerator):
    def __init__(self):
        self.counter = 0

    def generate(self, params):
        self.counter += 1
        return f"SKU-{self.counter:06d}"


class TestGeneratorRegistry:
    """Tests for GeneratorRegistry."""

    def test_register_and_get(self) -> None:
        registry = GeneratorRegistry()
        sku = SKUGenerator()

        registry.register("sku", sku)

        assert registry.get("sku") is sku
        assert "sku" in registry
        assert registry.get("missing") is None

    def test_rejects_object_without_generate(self) -> None:
        registry = GeneratorRegistry()

        with pytest.raises(ValueError, match="must have 'generate' method"):
            registry.register("bad", object())

    def test_lookup_unknown(self) -> None:
        with pytest.raises(UnknownFunctionError):
            GeneratorRegistry().lookup("missing")

    def test_frozen_rejects_registration(self) -> None:
        registry = GeneratorRegistry().freeze()

        assert registry.frozen
        with pytest.raises(RegistryFrozenError, match="frozen"):
            registry.register("sku", SKUGenerator())

    def test_parent_fallthrough(self) -> None:
        parent = GeneratorRegistry()
        parent.register("sku", SKUGenerator())
        child = GeneratorRegistry(parent=parent)
        child.register("other", SKUGenerator())

        assert child.get("sku") is parent.get("sku")
        assert child.list_generators() == ["other", "sku"]
        assert parent.list_generators() == ["sku"]

    def test_child_overrides_parent(self) -> None:
        parent = GeneratorRegistry()
        parent.register("sku", SKUGenerator())
        child = GeneratorRegistry(parent=parent)
        replacement = SKUGenerator()
        child.register("sku", replacement)

        assert child.get("sku") is replacement

    def test_categories(self, fake_registry) -> None:
        grouped = fake_registry.categories()

        assert grouped["misc"] == ["literal"]
        assert grouped["test"] == ["counter", "exploding", "typed"]

    def test_clear(self) -> None:
        registry = GeneratorRegistry()
        registry.register("sku", SKUGenerator())
        registry.freeze()

        registry.clear()

        assert registry.list_generators() == []
        assert not registry.frozen


class TestDefaultRegistry:
    """Tests for the built-in catalog registry."""

    def test_built_once_and_frozen(self) -> None:
        registry = default_registry()

        assert registry is default_registry()
        assert registry.frozen

    def test_contains_catalog_and_csv(self) -> None:
        names = default_registry().list_generators()

        for name in ("firstname", "email", "number", "literal", "randomstring", "csv"):
            assert name in names
        assert "autoincrement" not in names


class TestPluginApi:
    """Tests for register_generator() and friends."""

    def test_register_custom_generator(self) -> None:
        register_generator("sku", SKUGenerator())

        assert "sku" in list_generators()
        assert "firstname" in list_generators()

        grid = generate_grid(CSVOptions(row_count=4, fields=[Field("sku", "sku")]))

        assert [row[0] for row in grid[1:]] == ["SKU-000001", "SKU-000002", "SKU-000003"]

    def test_clear_keeps_builtins(self) -> None:
        register_generator("sku", SKUGenerator())

        clear_generators()

        assert get_generator("sku") is None
        assert get_generator("email") is not None
