"""Delimited text encoding."""

import csv
import io
from collections.abc import Iterable, Sequence

from tabseed.engine import normalize_delimiter
from tabseed.exceptions import EncodingError


def encode_table(rows: Iterable[Sequence[str]], delimiter: str = ",") -> bytes:
    """
    Encode rows as delimited text.

    Values containing the delimiter, a quote, CR or LF are quoted, with
    embedded quotes doubled. Rows end with "\\n". Output is UTF-8 without BOM.

    Args:
        rows: Header and body rows
        delimiter: "," or a tab ("tab" accepted)

    Returns:
        Encoded bytes

    Raises:
        InvalidDelimiterError: If delimiter is not comma/tab
        EncodingError: If a row cannot be written or encoded
    """
    delimiter = normalize_delimiter(delimiter)

    buffer = io.StringIO()
    writer = csv.writer(
        buffer,
        delimiter=delimiter,
        quotechar='"',
        doublequote=True,
        quoting=csv.QUOTE_MINIMAL,
        lineterminator="\n",
    )

    try:
        writer.writerows(rows)
        return buffer.getvalue().encode("utf-8")
    except (csv.Error, UnicodeEncodeError) as e:
        raise EncodingError(f"Unable to write delimited output: {e}") from e
