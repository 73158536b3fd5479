"""Field descriptor decoding.

Field descriptors arrive as JSON fragments (one per field, from the command
surface or the CLI) or as a JSON/YAML document listing every field.
"""

import json
import logging
from collections.abc import Iterable
from pathlib import Path
from typing import Any

from tabseed.exceptions import FieldDecodeError
from tabseed.models import Field, to_param_values

logger = logging.getLogger(__name__)

_FIELD_KEYS = {"name", "function", "params"}


def field_from_dict(data: Any, index: int | None = None) -> Field:
    """
    Build a Field from a decoded mapping.

    Args:
        data: Mapping with "name", "function" and optional "params"
        index: Position of the field, used in error messages

    Returns:
        Field instance

    Raises:
        FieldDecodeError: If the mapping is malformed
    """
    if not isinstance(data, dict):
        raise FieldDecodeError(f"expected an object, got {type(data).__name__}", index)

    unknown = set(data) - _FIELD_KEYS
    if unknown:
        logger.debug(f"Ignoring unknown field keys: {', '.join(sorted(unknown))}")

    name = data.get("name")
    if not isinstance(name, str):
        raise FieldDecodeError("'name' must be a string", index)

    function = data.get("function")
    if not isinstance(function, str) or not function:
        raise FieldDecodeError("'function' must be a non-empty string", index)

    raw_params = data.get("params") or {}
    if not isinstance(raw_params, dict):
        raise FieldDecodeError("'params' must be an object", index)

    params = {}
    for key, value in raw_params.items():
        try:
            params[str(key)] = to_param_values(value)
        except TypeError as e:
            raise FieldDecodeError(f"param '{key}': {e}", index) from e

    return Field(name=name, function=function, params=params)


def field_from_json(text: str, index: int | None = None) -> Field:
    """Decode one JSON field descriptor."""
    try:
        data = json.loads(text)
    except json.JSONDecodeError as e:
        raise FieldDecodeError(f"invalid JSON ({e.msg})", index) from e
    return field_from_dict(data, index)


def decode_fields(texts: Iterable[str]) -> list[Field]:
    """
    Decode an ordered sequence of JSON field descriptors.

    The first malformed descriptor aborts the whole decode.

    Raises:
        FieldDecodeError: If any descriptor is malformed
    """
    return [field_from_json(text, index) for index, text in enumerate(texts)]


def load_fields_file(path: str | Path) -> list[Field]:
    """
    Load field descriptors from a JSON or YAML file.

    The document is either a list of field objects or an object with a
    "fields" list. Files ending in .yaml/.yml are parsed as YAML.

    Args:
        path: Path to the fields file

    Returns:
        Ordered list of fields

    Raises:
        FileNotFoundError: If the file doesn't exist
        FieldDecodeError: If the document is malformed

    Example:
        >>> fields = load_fields_file("people.yaml")
        >>> [f.name for f in fields]
        ['id', 'first_name', 'email']
    """
    path = Path(path)
    if not path.exists():
        raise FileNotFoundError(f"Fields file not found: {path}")

    try:
        text = path.read_text(encoding="utf-8")
    except (UnicodeDecodeError, OSError) as e:
        raise FieldDecodeError(f"cannot read {path} ({e})") from e

    if path.suffix.lower() in (".yaml", ".yml"):
        import yaml

        logger.info(f"Loading fields from YAML: {path}")
        try:
            document = yaml.safe_load(text)
        except yaml.YAMLError as e:
            raise FieldDecodeError(f"invalid YAML in {path} ({e})") from e
    else:
        logger.info(f"Loading fields from JSON: {path}")
        try:
            document = json.loads(text)
        except json.JSONDecodeError as e:
            raise FieldDecodeError(f"invalid JSON in {path} ({e.msg})") from e

    if isinstance(document, dict):
        document = document.get("fields")

    if not isinstance(document, list):
        raise FieldDecodeError(f"{path} must contain a list of fields")

    return [field_from_dict(item, index) for index, item in enumerate(document)]
