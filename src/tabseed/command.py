"""Table generation entry points.

``generate_csv`` runs a validated request through the engine and encoder.
``csv_command`` adapts a raw parameter map (rowcount, fields, delimiter) into
a request, and is also registered in the catalog as the "csv" function.
"""

import logging

from tabseed.encoder import encode_table
from tabseed.engine import generate_grid, validate_options
from tabseed.fields import decode_fields
from tabseed.generators.base import BaseGenerator, GeneratorInfo, Param
from tabseed.generators.registry import GeneratorRegistry
from tabseed.models import CSVOptions, ParamMap, RowCountMode
from tabseed.params import ParamReader

logger = logging.getLogger(__name__)

CSV_INFO = GeneratorInfo(
    display="CSV",
    category="file",
    description="Generates array of rows in csv format",
    example=(
        "id,first_name,last_name,password\n"
        "1,Markus,Moen,Dc0VYXjkWABx\n"
        "2,Osborne,Hilll,XPJ9OVNbs5lm"
    ),
    output="[]byte",
    params=[
        Param("rowcount", "Row Count", "int", default="100",
              description="Number of rows in CSV array"),
        Param("fields", "Fields", "[]string", optional=True,
              description="Fields containing key name and function to run in json format"),
        Param("delimiter", "Delimiter", "string", default=",",
              description="Separator in between row values"),
    ],
)


def generate_csv(options: CSVOptions, registry: GeneratorRegistry | None = None) -> bytes:
    """
    Generate a delimited table.

    Args:
        options: Generation request
        registry: Generator lookup (default: built-ins plus registered generators)

    Returns:
        UTF-8 encoded table, header first

    Raises:
        TabseedError: Validation, generation or encoding failure; no partial
            output is returned
    """
    delimiter = validate_options(options)
    grid = generate_grid(options, registry)
    return encode_table(grid, delimiter)


def csv_command(
    params: ParamMap,
    registry: GeneratorRegistry | None = None,
    row_count_mode: RowCountMode = RowCountMode.LITERAL,
) -> bytes:
    """
    Generate a table from a raw parameter map.

    Args:
        params: "rowcount" (int, default 100), "fields" (JSON field
            descriptors) and "delimiter" (default ",")
        registry: Generator lookup
        row_count_mode: Mapping of rowcount to emitted body rows

    Returns:
        UTF-8 encoded table

    Raises:
        ParameterError: If rowcount is not an integer
        FieldDecodeError: If a field descriptor is malformed
        TabseedError: Any generation failure

    Example:
        >>> csv_command({
        ...     "rowcount": ["3"],
        ...     "fields": ['{"name": "id", "function": "autoincrement"}'],
        ... })
        b'id\\n1\\n2\\n'
    """
    reader = ParamReader(params, CSV_INFO)

    options = CSVOptions(
        row_count=reader.get_int("rowcount"),
        fields=decode_fields(reader.get_string_array("fields")),
        delimiter=reader.get_string("delimiter"),
        row_count_mode=row_count_mode,
    )
    return generate_csv(options, registry)


class CSVGenerator(BaseGenerator):
    """The "csv" catalog function: a whole table as one value."""

    info = CSV_INFO

    def __init__(self, registry: GeneratorRegistry | None = None):
        self.registry = registry

    def generate(self, params: ParamMap) -> bytes:
        return csv_command(params, self.registry)


def register_csv_command(registry: GeneratorRegistry) -> None:
    """Register the "csv" function on a registry."""
    registry.register("csv", CSVGenerator())
