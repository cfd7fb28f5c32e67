"""Unit tests for galen.infra.properties.file_source."""

from __future__ import annotations

from typing import TYPE_CHECKING

import pytest

from galen.infra.properties.file_source import (
    FilePropertiesLoader,
    PropertiesSyntaxError,
    load_properties_file,
    parse_properties,
)

if TYPE_CHECKING:
    from pathlib import Path


class TestParseProperties:
    @pytest.mark.unit
    def test_separators(self) -> None:
        text = "a=1\nb: 2\nc 3\nd\t=\t4\n"
        assert parse_properties(text) == {"a": "1", "b": "2", "c": "3", "d": "4"}

    @pytest.mark.unit
    def test_comments_and_blank_lines(self) -> None:
        text = "# comment\n! also comment\n\n   \n  # indented comment\nkey=value\n"
        assert parse_properties(text) == {"key": "value"}

    @pytest.mark.unit
    def test_key_without_value(self) -> None:
        assert parse_properties("flag\n") == {"flag": ""}

    @pytest.mark.unit
    def test_empty_value_after_separator(self) -> None:
        assert parse_properties("key=\n") == {"key": ""}

    @pytest.mark.unit
    def test_value_keeps_trailing_whitespace_and_separators(self) -> None:
        assert parse_properties("url = http://host:8080/a=b  ") == {
            "url": "http://host:8080/a=b  "
        }

    @pytest.mark.unit
    def test_last_write_wins(self) -> None:
        assert parse_properties("k=1\nk=2\n") == {"k": "2"}

    @pytest.mark.unit
    def test_line_continuation(self) -> None:
        text = "listeners=a,\\\n    b,\\\n    c\n"
        assert parse_properties(text) == {"listeners": "a,b,c"}

    @pytest.mark.unit
    def test_escaped_backslash_is_not_continuation(self) -> None:
        text = "path=C:\\\\temp\\\\\nnext=1\n"
        assert parse_properties(text) == {"path": "C:\\temp\\", "next": "1"}

    @pytest.mark.unit
    def test_continuation_line_starting_with_hash(self) -> None:
        assert parse_properties("k=a\\\n#b\n") == {"k": "a#b"}

    @pytest.mark.unit
    def test_continuation_at_end_of_file(self) -> None:
        assert parse_properties("k=a\\") == {"k": "a"}

    @pytest.mark.unit
    def test_escapes(self) -> None:
        text = "k=tab\\there\\nnew\\u0041\\q\n"
        assert parse_properties(text) == {"k": "tab\there\nnewAq"}

    @pytest.mark.unit
    def test_escaped_separator_in_key(self) -> None:
        assert parse_properties("a\\=b\\ c=d\n") == {"a=b c": "d"}

    @pytest.mark.unit
    def test_windows_line_endings(self) -> None:
        assert parse_properties("a=1\r\nb=2\r\n") == {"a": "1", "b": "2"}

    @pytest.mark.unit
    def test_unicode_values(self) -> None:
        assert parse_properties("greeting=héllo\n") == {"greeting": "héllo"}

    @pytest.mark.unit
    @pytest.mark.parametrize("text", ["k=\\u12\n", "k=\\uZZZZ\n", "\\u00G1=v\n"])
    def test_malformed_unicode_escape(self, text: str) -> None:
        with pytest.raises(PropertiesSyntaxError, match="Malformed") as exc_info:
            parse_properties(text)
        assert exc_info.value.line_number == 1
        assert isinstance(exc_info.value, ValueError)

    @pytest.mark.unit
    def test_error_reports_logical_line_start(self) -> None:
        with pytest.raises(PropertiesSyntaxError) as exc_info:
            parse_properties("a=1\n# c\nb=x\\\n  \\u12")
        assert exc_info.value.line_number == 3

    @pytest.mark.unit
    def test_empty_text(self) -> None:
        assert parse_properties("") == {}


class TestLoadPropertiesFile:
    @pytest.mark.unit
    def test_reads_file(self, tmp_path: Path) -> None:
        path = tmp_path / "config"
        path.write_text("galen.default.browser=chrome\n", encoding="utf-8")
        assert load_properties_file(path) == {"galen.default.browser": "chrome"}

    @pytest.mark.unit
    def test_missing_file_raises(self, tmp_path: Path) -> None:
        with pytest.raises(OSError):
            load_properties_file(tmp_path / "absent")

    @pytest.mark.unit
    def test_undecodable_file_raises(self, tmp_path: Path) -> None:
        path = tmp_path / "config"
        path.write_bytes(b"k=\xff\xfe\n")
        with pytest.raises(UnicodeDecodeError):
            load_properties_file(path)

    @pytest.mark.unit
    def test_loader_honours_encoding(self, tmp_path: Path) -> None:
        path = tmp_path / "config"
        path.write_bytes("k=caf\xe9\n".encode("latin-1"))
        assert FilePropertiesLoader(encoding="latin-1").load(path) == {"k": "café"}
