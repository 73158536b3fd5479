"""Generator interface, registry and built-in catalog."""

from tabseed.generators.base import BaseGenerator, FunctionGenerator, GeneratorInfo, Param
from tabseed.generators.registry import GeneratorRegistry, default_registry

__all__ = [
    "BaseGenerator",
    "FunctionGenerator",
    "GeneratorInfo",
    "Param",
    "GeneratorRegistry",
    "default_registry",
]
