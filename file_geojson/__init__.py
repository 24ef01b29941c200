"""File GeoJSON provider: serves GeoJSON files from a local directory."""

from file_geojson.components.geojson_reader import FileGeoJsonReader
from file_geojson.primitives.errors import ErrorKind, ProviderError

__version__ = "0.1.0"

# Registration descriptor handed to the host framework
provider = {
    "name": "file-geojson",
    "type": "provider",
    "version": __version__,
    "Model": FileGeoJsonReader,
}

__all__ = ["ErrorKind", "FileGeoJsonReader", "ProviderError", "provider"]
