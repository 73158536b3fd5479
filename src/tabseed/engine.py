"""Row generation engine.

Turns field descriptors into a grid of cell strings: one header row with the
field names, then one body row per row index, each cell produced by the
field's generator.
"""

import logging

from tabseed.exceptions import (
    GeneratorInvocationError,
    InvalidDelimiterError,
    MissingFieldsError,
    MissingRowCountError,
    TabseedError,
)
from tabseed.generators.registry import GeneratorRegistry, active_registry
from tabseed.models import COMMA, TAB, CSVOptions, Field
from tabseed.values import format_value

logger = logging.getLogger(__name__)

Grid = list[list[str]]


def normalize_delimiter(delimiter: str | None) -> str:
    """
    Normalize a delimiter to "," or a tab character.

    Empty means comma; "tab" in any case means tab.

    Raises:
        InvalidDelimiterError: For anything else
    """
    if not delimiter:
        return COMMA
    if delimiter.lower() == "tab":
        return TAB
    if delimiter not in (COMMA, TAB):
        raise InvalidDelimiterError(delimiter)
    return delimiter


def validate_options(options: CSVOptions) -> str:
    """
    Validate a generation request.

    Checks run in order and the first failure wins: delimiter, fields,
    row count.

    Returns:
        Normalized delimiter

    Raises:
        InvalidDelimiterError: If delimiter is not comma/tab
        MissingFieldsError: If there are no fields
        MissingRowCountError: If row_count is not positive
    """
    delimiter = normalize_delimiter(options.delimiter)

    if not options.fields:
        raise MissingFieldsError()

    if options.row_count <= 0:
        raise MissingRowCountError(options.row_count)

    return delimiter


def resolve_cell(field: Field, row_index: int, registry: GeneratorRegistry) -> str:
    """
    Produce the text of one cell.

    Args:
        field: Column definition
        row_index: 1-based row index, shared by all cells of the row
        registry: Generator lookup

    Raises:
        UnknownFunctionError: If the function is not registered
        GeneratorInvocationError: If the generator fails
    """
    if field.is_autoincrement:
        return str(row_index)

    generator = registry.lookup(field.function)

    try:
        return format_value(generator.generate(field.params))
    except TabseedError:
        raise
    except Exception as e:
        raise GeneratorInvocationError(
            f"Function '{field.function}' failed for field '{field.name}' "
            f"on row {row_index}: {e}"
        ) from e


def generate_grid(options: CSVOptions, registry: GeneratorRegistry | None = None) -> Grid:
    """
    Generate the header and body rows for a request.

    Generation is all-or-nothing: the first failing cell aborts the request
    and no rows are returned.

    Args:
        options: Generation request
        registry: Generator lookup (default: built-ins plus registered generators)

    Returns:
        Grid of strings, header first

    Raises:
        InvalidDelimiterError: If delimiter is not comma/tab
        MissingFieldsError: If there are no fields
        MissingRowCountError: If row_count is not positive
        UnknownFunctionError: If a field's function is not registered
        GeneratorInvocationError: If a generator fails

    Example:
        >>> options = CSVOptions(row_count=3, fields=[
        ...     Field("id", "autoincrement"),
        ...     Field("greeting", "literal", {"value": ["hi, there"]}),
        ... ])
        >>> generate_grid(options)
        [['id', 'greeting'], ['1', 'hi, there'], ['2', 'hi, there']]
    """
    validate_options(options)

    if registry is None:
        registry = active_registry()

    body_rows = options.row_count_mode.body_rows(options.row_count)
    logger.debug(
        f"Generating {body_rows} rows x {len(options.fields)} fields "
        f"(row_count={options.row_count}, mode={options.row_count_mode.value})"
    )

    grid: Grid = [options.headers]
    for row_index in range(1, body_rows + 1):
        grid.append([resolve_cell(field, row_index, registry) for field in options.fields])

    return grid
