"""
tabseed - Synthetic Tabular Data Generation

Generates CSV/TSV tables from an ordered list of fields, each bound to a
named generator function (Faker backed catalog or custom generators).
"""

from tabseed.command import csv_command, generate_csv
from tabseed.encoder import encode_table
from tabseed.engine import generate_grid
from tabseed.exceptions import (
    EncodingError,
    FieldDecodeError,
    GeneratorInvocationError,
    InvalidDelimiterError,
    InvalidLocaleError,
    MissingFieldsError,
    MissingRowCountError,
    ParameterError,
    TabseedError,
    UnknownFunctionError,
)
from tabseed.fields import decode_fields, load_fields_file
from tabseed.generators.base import BaseGenerator, GeneratorInfo, Param
from tabseed.generators.registry import (
    GeneratorRegistry,
    clear_generators,
    list_generators,
    register_generator,
)
from tabseed.models import CSVOptions, Field, RowCountMode
from tabseed.params import ParamReader

__version__ = "0.1.0"

__all__ = [
    "CSVOptions",
    "Field",
    "RowCountMode",
    "generate_csv",
    "generate_grid",
    "encode_table",
    "csv_command",
    "decode_fields",
    "load_fields_file",
    "BaseGenerator",
    "GeneratorInfo",
    "Param",
    "ParamReader",
    "GeneratorRegistry",
    "register_generator",
    "list_generators",
    "clear_generators",
    "TabseedError",
    "InvalidDelimiterError",
    "MissingFieldsError",
    "MissingRowCountError",
    "UnknownFunctionError",
    "GeneratorInvocationError",
    "ParameterError",
    "FieldDecodeError",
    "EncodingError",
    "InvalidLocaleError",
]
