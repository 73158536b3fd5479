"""Tests for delimited text encoding."""

import csv
import io

import pytest

from tabseed import EncodingError, InvalidDelimiterError, encode_table


class TestEncodeTable:
    """Tests for encode_table()."""

    def test_plain_rows(self) -> None:
        data = encode_table([["id", "name"], ["1", "Markus"]], ",")
        assert data == b"id,name\n1,Markus\n"

    def test_tab_delimiter(self) -> None:
        data = encode_table([["id", "name"], ["1", "Markus"]], "\t")
        assert data == b"id\tname\n1\tMarkus\n"

    def test_tab_alias(self) -> None:
        assert encode_table([["a", "b"]], "tab") == b"a\tb\n"

    def test_quotes_embedded_delimiter(self) -> None:
        data = encode_table([["id", "greeting"], ["1", "hi, there"]], ",")
        assert data == b'id,greeting\n1,"hi, there"\n'

    def test_comma_not_quoted_with_tab_delimiter(self) -> None:
        assert encode_table([["hi, there"]], "\t") == b"hi, there\n"

    def test_tab_quoted_with_tab_delimiter(self) -> None:
        assert encode_table([["a\tb", "c"]], "\t") == b'"a\tb"\tc\n'

    def test_doubles_embedded_quotes(self) -> None:
        assert encode_table([['say "hi"']], ",") == b'"say ""hi"""\n'

    def test_quotes_newlines(self) -> None:
        assert encode_table([["line1\nline2", "x"]], ",") == b'"line1\nline2",x\n'

    def test_utf8_without_bom(self) -> None:
        data = encode_table([["café", "東京"]], ",")
        assert data == "café,東京\n".encode("utf-8")
        assert not data.startswith(b"\xef\xbb\xbf")

    def test_empty_grid(self) -> None:
        assert encode_table([], ",") == b""

    def test_unencodable_text(self) -> None:
        """A lone surrogate cannot be written as UTF-8."""
        with pytest.raises(EncodingError, match="Unable to write"):
            encode_table([["ok", "\ud800"]], ",")

    def test_invalid_delimiter(self) -> None:
        with pytest.raises(InvalidDelimiterError):
            encode_table([["a"]], "|")

    @pytest.mark.parametrize("delimiter", [",", "\t"])
    def test_standard_reader_recovers_values(self, delimiter: str) -> None:
        """A standard CSV reader gets every original value back."""
        rows = [
            ["id", "text"],
            ["1", "hi, there"],
            ["2", 'quoted "word"'],
            ["3", "tab\there"],
            ["4", "multi\nline"],
        ]

        data = encode_table(rows, delimiter)
        decoded = list(csv.reader(io.StringIO(data.decode("utf-8")), delimiter=delimiter))

        assert decoded == rows
