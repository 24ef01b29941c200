"""
Tests for FileReader Primitive

Test coverage: path resolution (.geojson preferred, .json fallback) and
read error classification (NOT_FOUND vs IO_ERROR)
"""

import pytest

from file_geojson.primitives.errors import ErrorKind, FileNotFound, ReadError
from file_geojson.primitives.file_reader import FileReader


class TestFileReaderResolve:
    """Identifier to path resolution"""

    def test_resolve_prefers_geojson_extension(self, tmp_path):
        """resolve() returns <id>.geojson when it exists, even if <id>.json exists too"""
        (tmp_path / "parks.geojson").write_text("{}", encoding="utf-8")
        (tmp_path / "parks.json").write_text("{}", encoding="utf-8")

        result = FileReader().resolve(tmp_path, "parks")

        assert result == tmp_path / "parks.geojson"

    def test_resolve_falls_back_to_json_without_checking(self, tmp_path):
        """resolve() returns <id>.json whether or not it exists"""
        reader = FileReader()

        assert reader.resolve(tmp_path, "missing") == tmp_path / "missing.json"

        (tmp_path / "trails.json").write_text("{}", encoding="utf-8")
        assert reader.resolve(str(tmp_path), "trails") == tmp_path / "trails.json"

    def test_resolve_keeps_dots_in_identifier(self, tmp_path):
        (tmp_path / "parks.v2.geojson").write_text("{}", encoding="utf-8")

        assert FileReader().resolve(tmp_path, "parks.v2") == tmp_path / "parks.v2.geojson"


class TestFileReaderReadText:
    """Raw reads and error classification"""

    def test_read_text_returns_decoded_content(self, tmp_path):
        """
        read_text() decodes UTF-8 content, including non-ASCII characters
        """
        data_file = tmp_path / "cities.json"
        data_file.write_text('{"name": "Zürich 東京"}', encoding="utf-8")

        result = FileReader().read_text(data_file)

        assert result == '{"name": "Zürich 東京"}'

    def test_read_text_strips_byte_order_mark(self, tmp_path):
        data_file = tmp_path / "bom.json"
        data_file.write_bytes(b'\xef\xbb\xbf{"type": "Point"}')

        assert FileReader().read_text(str(data_file)) == '{"type": "Point"}'

    def test_read_text_missing_file_is_not_found(self, tmp_path):
        """
        A missing file raises FileNotFound with "<basename> not found"
        """
        with pytest.raises(FileNotFound) as exc_info:
            FileReader().read_text(tmp_path / "ghost.json")

        assert str(exc_info.value) == "ghost.json not found"
        assert exc_info.value.kind is ErrorKind.NOT_FOUND
        assert exc_info.value.filename == "ghost.json"
        assert isinstance(exc_info.value.__cause__, FileNotFoundError)

    def test_read_text_directory_is_io_error(self, tmp_path):
        """Reading a directory is a generic I/O failure, not a missing file"""
        (tmp_path / "folder.json").mkdir()

        with pytest.raises(ReadError) as exc_info:
            FileReader().read_text(tmp_path / "folder.json")

        assert exc_info.value.kind is ErrorKind.IO_ERROR
        assert exc_info.value.status_code == 500

    def test_read_text_replaces_undecodable_bytes(self, tmp_path):
        """
        Bytes that are not UTF-8 decode to U+FFFD instead of failing the read
        """
        data_file = tmp_path / "latin1.json"
        data_file.write_bytes(b'{"name": "Caf\xe9"}')

        result = FileReader().read_text(data_file)

        assert result == '{"name": "Caf\ufffd"}'


def test_exists_identifies_path_presence(tmp_path):
    existing = tmp_path / "exists.geojson"
    existing.write_text("{}", encoding="utf-8")
    reader = FileReader()

    assert reader.exists(existing) is True
    assert reader.exists(str(tmp_path)) is True
    assert reader.exists(tmp_path / "nope.geojson") is False
