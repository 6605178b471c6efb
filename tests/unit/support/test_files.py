"""Unit tests for the file helpers."""

from pathlib import Path

import pytest

from treewalk.errors import IOFailure
from treewalk.support.files import read_csv_file, read_file, write_file


class TestReadWriteFile:
    """Tests for whole-file helpers."""

    def test_write_then_read(self, tmp_path: Path) -> None:
        target = tmp_path / "out.txt"

        write_file(target, "  hello\n")

        assert read_file(target) == "  hello\n"
        assert read_file(target, trim=True) == "hello"

    def test_read_missing_file_raises(self, tmp_path: Path) -> None:
        missing = tmp_path / "missing.txt"

        with pytest.raises(IOFailure) as exc_info:
            read_file(missing)

        assert exc_info.value.operation == "read"
        assert exc_info.value.resource == str(missing)
        assert isinstance(exc_info.value.__cause__, FileNotFoundError)

    def test_read_undecodable_file_raises(self, tmp_path: Path) -> None:
        target = tmp_path / "binary.bin"
        target.write_bytes(b"\xff\xfe\xfa")

        with pytest.raises(IOFailure):
            read_file(target)

    def test_write_into_missing_directory_raises(self, tmp_path: Path) -> None:
        with pytest.raises(IOFailure) as exc_info:
            write_file(tmp_path / "nope" / "out.txt", "x")

        assert exc_info.value.operation == "write"

    def test_io_failure_is_os_error(self, tmp_path: Path) -> None:
        with pytest.raises(OSError):
            read_file(tmp_path / "missing.txt")


class TestReadCsvFile:
    """Tests for delimited-record parsing."""

    def test_reads_records(self, tmp_path: Path) -> None:
        target = tmp_path / "data.csv"
        target.write_text('name,value\n"a, b",1\nc,"say ""hi"""\n')

        assert read_csv_file(target) == [
            ["name", "value"],
            ["a, b", "1"],
            ["c", 'say "hi"'],
        ]

    def test_custom_delimiter_and_quote(self, tmp_path: Path) -> None:
        target = tmp_path / "data.tsv"
        target.write_text("x;'1;2'\n")

        assert read_csv_file(target, delimiter=";", quotechar="'") == [["x", "1;2"]]

    def test_empty_file(self, tmp_path: Path) -> None:
        target = tmp_path / "empty.csv"
        target.write_text("")

        assert read_csv_file(target) == []

    def test_missing_file_raises(self, tmp_path: Path) -> None:
        with pytest.raises(IOFailure) as exc_info:
            read_csv_file(tmp_path / "missing.csv")

        assert exc_info.value.operation == "read_csv"
