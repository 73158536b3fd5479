"""Base generator interface."""

from abc import ABC, abstractmethod
from collections.abc import Callable
from dataclasses import dataclass, field
from typing import Any

from tabseed.models import ParamMap
from tabseed.params import ParamReader


@dataclass
class Param:
    """
    Metadata for one generator parameter.

    Attributes:
        field: Key in the parameter map
        display: Human readable label
        type: One of "int", "float", "bool", "string", "[]string"
        default: Raw default value (comma separated for "[]string")
        optional: Parameter may be omitted even without a default
        description: Help text
    """

    field: str
    display: str
    type: str
    default: str | None = None
    optional: bool = False
    description: str = ""


@dataclass
class GeneratorInfo:
    """Descriptive metadata shown by 'tabseed list' and 'tabseed info'."""

    display: str
    category: str
    description: str
    example: str = ""
    output: str = "string"
    params: list[Param] = field(default_factory=list)

    def get_param(self, name: str) -> Param | None:
        for param in self.params:
            if param.field == name:
                return param
        return None


class BaseGenerator(ABC):
    """
    Base class for custom generators.

    Subclass this to create generators that can be registered and referenced
    by name from field descriptors.

    Example:
        >>> class SKUGenerator(BaseGenerator):
        ...     info = GeneratorInfo(
        ...         display="SKU", category="product", description="Product SKU",
        ...         params=[Param("prefix", "Prefix", "string", default="SKU")],
        ...     )
        ...     def generate(self, params):
        ...         reader = ParamReader(params, self.info)
        ...         return f"{reader.get_string('prefix')}-{random.randint(0, 999999):06d}"
        >>>
        >>> register_generator('sku', SKUGenerator())
        >>> Field(name="sku", function="sku", params={"prefix": ["ELEC"]})
    """

    info: GeneratorInfo = GeneratorInfo(display="", category="custom", description="")

    @abstractmethod
    def generate(self, params: ParamMap) -> Any:
        """
        Generate one value.

        Args:
            params: Raw parameter map from the field descriptor

        Returns:
            Generated value (stringified by the engine)

        Raises:
            GeneratorInvocationError: If parameters are invalid
        """
        pass


class FunctionGenerator(BaseGenerator):
    """Adapt a plain function taking a ParamReader into a generator."""

    def __init__(self, func: Callable[[ParamReader], Any], info: GeneratorInfo):
        self.func = func
        self.info = info

    def generate(self, params: ParamMap) -> Any:
        return self.func(ParamReader(params, self.info))

    def __repr__(self) -> str:
        return f"FunctionGenerator({self.info.display!r})"
