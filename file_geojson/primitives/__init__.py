"""Primitives package for the file GeoJSON provider."""

from file_geojson.primitives.config_loader import ConfigLoader, ReaderConfig
from file_geojson.primitives.file_reader import FileReader
from file_geojson.primitives.json_validator import JSONValidator
from file_geojson.primitives.logger import Logger

__all__ = ["ConfigLoader", "FileReader", "JSONValidator", "Logger", "ReaderConfig"]
