"""
FileReader primitive for locating and reading GeoJSON data files.

Failures are classified into provider errors: a missing file is NOT_FOUND,
every other OS failure is IO_ERROR. Bytes that are not UTF-8
decode to U+FFFD.
"""

from pathlib import Path
from typing import Union

from file_geojson.primitives.errors import FileNotFound, ReadError

GEOJSON_EXTENSION = ".geojson"
JSON_EXTENSION = ".json"


class FileReader:
    """Resolves data file paths and reads them as text."""

    def _to_path(self, file_path: Union[str, Path]) -> Path:
        return Path(file_path)

    def resolve(self, data_dir: Union[str, Path], file_id: str) -> Path:
        """
        Resolve a file identifier to a data file path.

        Prefers `<id>.geojson`; otherwise returns `<id>.json` without checking
        it, leaving the read to report a missing file.

        Args:
            data_dir: Directory holding the data files
            file_id: File name without extension

        Returns:
            Path: Candidate data file path
        """
        path_with_no_ext = self._to_path(data_dir) / file_id
        geojson_path = Path(f"{path_with_no_ext}{GEOJSON_EXTENSION}")
        if geojson_path.exists():
            return geojson_path
        return Path(f"{path_with_no_ext}{JSON_EXTENSION}")

    def read_text(self, file_path: Union[str, Path]) -> str:
        """
        Read a file as raw bytes and decode it leniently as UTF-8 text.

        Args:
            file_path: Path to the data file

        Returns:
            str: Decoded file content

        Raises:
            FileNotFound: If the file doesn't exist
            ReadError: If the file can't be read
        """
        path = self._to_path(file_path)

        try:
            data = path.read_bytes()
        except FileNotFoundError as err:
            raise FileNotFound(f"{path.name} not found", filename=path.name) from err
        except OSError as err:
            raise ReadError(str(err), filename=path.name) from err

        # Invalid byte sequences become U+FFFD rather than failing the read
        return data.decode("utf-8-sig", errors="replace")

    def exists(self, file_path: Union[str, Path]) -> bool:
        """
        Check if a path exists.

        Args:
            file_path: Path to check

        Returns:
            bool: True if path exists, False otherwise
        """
        return self._to_path(file_path).exists()
