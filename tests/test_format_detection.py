"""Tests for format detection in mapping_audit/data_formats/format_detector.py."""

from __future__ import annotations

import pytest

from conftest import write_parquet
from mapping_audit.data_formats import (
    EXTENSION_MAP,
    SUPPORTED_FORMATS,
    DataFile,
    JSONLLoader,
    JSONLoader,
    ParquetLoader,
    detect_format,
    discover_data_files,
    format_file_size,
    get_loader,
    get_loader_for_format,
    sniff_format,
)
from mapping_audit.data_formats.format_detector import format_from_url


class TestDetectFormat:
    """Tests for detect_format() function."""

    @pytest.mark.parametrize(
        "name,expected",
        [
            ("data.json", "json"),
            ("data.jsonl", "jsonl"),
            ("data.parquet", "parquet"),
            ("data.pq", "parquet"),
            ("DATA.JSONL", "jsonl"),
            ("Data.Json", "json"),
        ],
    )
    def test_by_extension(self, name, expected):
        """Known extensions decide the format, case-insensitively."""
        assert detect_format(name) == expected

    def test_sniff_array_file(self, tmp_path):
        """A file without extension starting with '[' is JSON."""
        path = tmp_path / "mappings"
        path.write_text('  [{"title": "x"}]')
        assert detect_format(str(path)) == "json"

    def test_sniff_jsonl_file(self, tmp_path):
        """Several object lines without extension are JSONL."""
        path = tmp_path / "mappings.txt"
        path.write_text('{"a": 1}\n{"a": 2}\n')
        assert detect_format(str(path)) == "jsonl"

    def test_sniff_single_object_is_json(self, tmp_path):
        """A single object is JSON so that it fails the sequence check."""
        path = tmp_path / "mappings.data"
        path.write_text('{"a": 1}')
        assert detect_format(str(path)) == "json"

    def test_sniff_pretty_printed_object_is_json(self, tmp_path):
        """A multi-line object without extension is one JSON document."""
        path = tmp_path / "mappings"
        path.write_text('{\n  "title": "x"\n}\n')
        assert detect_format(str(path)) == "json"

    def test_sniff_parquet_file(self, tmp_path):
        """Parquet magic bytes are recognized without extension."""
        path = write_parquet(tmp_path / "mappings.bin", [{"a": "1"}])
        assert detect_format(str(path)) == "parquet"

    def test_missing_file_without_extension(self, tmp_path):
        """Unreadable files fall back to JSON."""
        assert detect_format(str(tmp_path / "missing")) == "json"


class TestSniffFormat:
    """Tests for sniff_format()."""

    def test_parquet_magic(self):
        assert sniff_format(b"PAR1\x00\x00") == "parquet"

    def test_bom_before_array(self):
        assert sniff_format(b"\xef\xbb\xbf[1]") == "json"

    def test_scalar_is_json(self):
        assert sniff_format(b"42") == "json"

    def test_pretty_printed_object_is_json(self):
        assert sniff_format(b'{\n  "title": "x",\n  "id": 1\n}\n') == "json"

    def test_object_lines_are_jsonl(self):
        assert sniff_format(b'{"title": "x"}\n{"title": "y"}\n') == "jsonl"


class TestLoaderFactory:
    """Tests for get_loader() and get_loader_for_format()."""

    def test_get_loader_types(self):
        """Each extension maps to its loader class."""
        assert isinstance(get_loader("a.json"), JSONLoader)
        assert isinstance(get_loader("a.jsonl"), JSONLLoader)
        assert isinstance(get_loader("a.parquet"), ParquetLoader)

    def test_unsupported_format(self):
        """Unknown format names raise ValueError."""
        with pytest.raises(ValueError, match="Unsupported format"):
            get_loader_for_format("csv")

    def test_supported_formats_cover_extensions(self):
        """Every extension maps to a supported format."""
        assert set(EXTENSION_MAP.values()) == set(SUPPORTED_FORMATS)


class TestFormatFromUrl:
    """Tests for format_from_url()."""

    def test_extension_in_path(self):
        assert format_from_url("https://example.com/data/mappings.jsonl?rev=2") == "jsonl"

    def test_no_extension(self):
        assert format_from_url("https://example.com/api/mappings") is None


class TestDiscoverDataFiles:
    """Tests for discover_data_files() and format_file_size()."""

    def test_lists_supported_files_sorted(self, tmp_path):
        """Only supported files are listed, sorted by name."""
        (tmp_path / "b.json").write_text("[]")
        (tmp_path / "A.JSONL").write_text('{"a": 1}\n')
        (tmp_path / "notes.txt").write_text("x")
        (tmp_path / "sub.json").mkdir()

        files = discover_data_files(str(tmp_path))

        assert [f.name for f in files] == ["A.JSONL", "b.json"]
        assert files[0].format == "jsonl"
        assert files[1].size == 2
        assert files[1].path == str((tmp_path / "b.json").absolute())

    def test_skips_files_that_cannot_be_audited(self, tmp_path):
        """Hidden and empty files are not offered."""
        (tmp_path / ".cache.json").write_text("[]")
        (tmp_path / "empty.json").write_text("")
        (tmp_path / "mappings.json").write_text("[]")

        files = discover_data_files(str(tmp_path))

        assert files == [
            DataFile(str((tmp_path / "mappings.json").absolute()), "mappings.json", "json", 2)
        ]

    def test_missing_directory(self, tmp_path):
        """A directory that cannot be read yields no files."""
        assert discover_data_files(str(tmp_path / "missing")) == []

    @pytest.mark.parametrize(
        "size,expected",
        [
            (0, "0 B"),
            (512, "512 B"),
            (2048, "2.0 KB"),
            (5 * 1024 * 1024, "5.0 MB"),
            (3 * 1024 ** 3, "3.0 GB"),
            (2 * 1024 ** 4, "2.0 TB"),
        ],
    )
    def test_format_file_size(self, size, expected):
        assert format_file_size(size) == expected
