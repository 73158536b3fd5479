"""Generator registry for name based lookup."""

import logging
import threading
from typing import Any

from tabseed.exceptions import RegistryFrozenError, UnknownFunctionError

logger = logging.getLogger(__name__)


class GeneratorRegistry:
    """
    Registry mapping generator names to generator objects.

    A registry is populated once, then frozen. A frozen registry is
    read-only and safe to share between concurrent generation requests.
    A registry may sit on top of a parent; lookups fall through to it.
    """

    def __init__(self, parent: "GeneratorRegistry | None" = None):
        self._generators: dict[str, Any] = {}
        self._frozen = False
        self.parent = parent

    def register(self, name: str, generator: Any) -> None:
        """
        Register a generator.

        Args:
            name: Generator name (used as "function" in field descriptors)
            generator: Object with a generate(params) method

        Raises:
            ValueError: If generator doesn't have a generate method
            RegistryFrozenError: If the registry is frozen
        """
        if self._frozen:
            raise RegistryFrozenError(name)
        if not callable(getattr(generator, "generate", None)):
            raise ValueError(
                f"Generator must have 'generate' method. "
                f"{type(generator).__name__} is missing it."
            )
        self._generators[name] = generator

    def get(self, name: str) -> Any | None:
        """
        Get generator by name.

        Returns:
            Generator or None if not found
        """
        generator = self._generators.get(name)
        if generator is None and self.parent is not None:
            return self.parent.get(name)
        return generator

    def lookup(self, name: str) -> Any:
        """
        Get generator by name, failing if absent.

        Raises:
            UnknownFunctionError: If no generator is registered under name
        """
        generator = self.get(name)
        if generator is None:
            raise UnknownFunctionError(name)
        return generator

    def __contains__(self, name: str) -> bool:
        return self.get(name) is not None

    def list_generators(self) -> list[str]:
        """
        List all registered generators.

        Returns:
            Sorted generator names, parent entries included
        """
        names = set(self._generators)
        if self.parent is not None:
            names.update(self.parent.list_generators())
        return sorted(names)

    def categories(self) -> dict[str, list[str]]:
        """Group generator names by their info category."""
        grouped: dict[str, list[str]] = {}
        for name in self.list_generators():
            info = getattr(self.get(name), "info", None)
            category = getattr(info, "category", None) or "custom"
            grouped.setdefault(category, []).append(name)
        return grouped

    def freeze(self) -> "GeneratorRegistry":
        """Make the registry read-only. Returns self for chaining."""
        self._frozen = True
        return self

    @property
    def frozen(self) -> bool:
        return self._frozen

    def clear(self) -> None:
        """Clear all registered generators (for testing)."""
        self._generators.clear()
        self._frozen = False


_default_lock = threading.Lock()
_default_registry: GeneratorRegistry | None = None

# User registrations, layered over the built-in catalog
_registry = GeneratorRegistry()


def default_registry() -> GeneratorRegistry:
    """
    Built-in catalog registry, built on first use and frozen.

    Returns:
        Frozen registry with the Faker catalog and the "csv" command
    """
    global _default_registry
    if _default_registry is None:
        with _default_lock:
            if _default_registry is None:
                from tabseed.command import register_csv_command
                from tabseed.generators.faker_generator import register_catalog

                registry = GeneratorRegistry()
                register_catalog(registry)
                register_csv_command(registry)
                registry.freeze()
                logger.debug(
                    f"Built default registry with {len(registry.list_generators())} generators"
                )
                _default_registry = registry
    return _default_registry


def active_registry() -> GeneratorRegistry:
    """User registrations layered over the built-in catalog."""
    if _registry.parent is None:
        _registry.parent = default_registry()
    return _registry


def register_generator(name: str, generator: Any) -> None:
    """
    Register a custom generator (user-facing API).

    Args:
        name: Generator name
        generator: Object with a generate(params) method

    Example:
        >>> from tabseed import BaseGenerator, register_generator
        >>>
        >>> class ConstantGenerator(BaseGenerator):
        ...     def generate(self, params):
        ...         return "constant"
        >>>
        >>> register_generator('constant', ConstantGenerator())
    """
    active_registry().register(name, generator)


def get_generator(name: str) -> Any | None:
    """
    Get a registered generator.

    Returns:
        Generator or None if not found
    """
    return active_registry().get(name)


def list_generators() -> list[str]:
    """
    List all registered generators.

    Returns:
        List of generator names, built-ins included
    """
    return active_registry().list_generators()


def clear_generators() -> None:
    """Clear all custom generators (for testing). Built-ins are kept."""
    _registry.clear()
