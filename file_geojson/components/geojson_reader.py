"""
FileGeoJsonReader Component

Reads a GeoJSON (or bare geometry) file from the data directory, normalizes it
into a FeatureCollection and attaches metadata for the host framework.

Composition:
- ConfigLoader (primitive) - Resolves dataDir and ttl
- FileReader (primitive) - Path resolution and raw reads
- Normalizer (primitive) - Shape coercion and metadata merge
- Logger (primitive) - Startup and request logging

Interface:
- fetch(file_id: str) -> dict (NormalizedFeatureCollection), async
- get_data(request: Mapping) -> dict, async

State: Immutable configuration only
"""

import asyncio
import json
from typing import Any, Mapping, Optional

from file_geojson.primitives import normalizer
from file_geojson.primitives.config_loader import ConfigLoader, ReaderConfig, lookup_option
from file_geojson.primitives.errors import (
    LOGGING_PREFIX,
    ConfigError,
    FileNotFound,
    ParseError,
    ProviderError,
)
from file_geojson.primitives.file_reader import FileReader
from file_geojson.primitives.logger import Logger


def _reject_constant(name: str) -> None:
    raise ValueError(f"{name} is not valid JSON")


class FileGeoJsonReader:
    """Serve GeoJSON files from a local directory as FeatureCollections"""

    def __init__(
        self,
        host: Any = None,
        options: Optional[Mapping] = None,
        logger: Any = None,
        config_path: Optional[str] = None,
    ):
        """
        Resolve configuration and verify the data directory.

        Args:
            host: Host framework object or mapping; may expose "dataDir" and "logger"
            options: Provider options ("dataDir", "ttl")
            logger: Logger to use; defaults to the host logger, then a new Logger
            config_path: JSON config file whose options sit below explicit options

        Raises:
            ConfigError: If the options are invalid or the data directory is missing
        """
        self._logger = logger or lookup_option(host, "logger") or Logger()
        self._file_reader = FileReader()
        loader = ConfigLoader()
        try:
            if config_path:
                options = {**loader.load(config_path), **(options or {})}
            self._config = loader.resolve(options=options, host=host)
        except ConfigError as err:
            raise err.with_prefix() from err.__cause__
        self._verify_data_directory_exists()

    @property
    def config(self) -> ReaderConfig:
        return self._config

    def _verify_data_directory_exists(self) -> None:
        if not self._file_reader.exists(self._config.data_dir_path):
            raise ConfigError(f'{LOGGING_PREFIX}data directory "{self._config.data_dir}" not found.')

        self._log("info", f"{LOGGING_PREFIX}will read data from {self._config.data_dir}")

    def _log(self, level: str, message: str, context: Optional[dict] = None) -> None:
        if isinstance(self._logger, Logger):
            getattr(self._logger, level)(message, context=context)
        elif context:
            # Host loggers take a plain message
            details = ", ".join(f"{key}={value}" for key, value in context.items())
            getattr(self._logger, level)(f"{message}: {details}")
        else:
            getattr(self._logger, level)(message)

    async def get_data(self, request: Mapping) -> dict:
        """
        Host entry point: fetch the file named by request["params"]["id"].

        Raises:
            ProviderError: See fetch()
        """
        file_id = (lookup_option(request, "params") or {}).get("id")
        if not file_id:
            raise FileNotFound(f"{LOGGING_PREFIX}file id not found")
        return await self.fetch(file_id)

    async def fetch(self, file_id: str) -> dict:
        """
        Read, normalize and annotate the data file named by file_id.

        Args:
            file_id: File name without extension

        Returns:
            dict: FeatureCollection with "metadata" and "ttl"

        Raises:
            FileNotFound: If neither <id>.geojson nor <id>.json exists
            ParseError: If the file is not a JSON object
            ReadError: For any other read failure
        """
        loop = asyncio.get_running_loop()
        file_path = await loop.run_in_executor(None, self._file_reader.resolve, self._config.data_dir_path, file_id)
        filename = file_path.name
        self._log("debug", "Fetching GeoJSON", {"id": file_id, "file": filename})

        try:
            text = await loop.run_in_executor(None, self._file_reader.read_text, file_path)
            metadata, payload = normalizer.split_metadata(self._parse(text, filename))
            geojson = normalizer.normalize_as_feature_collection(payload)
            return normalizer.merge_metadata(geojson, metadata, filename, self._config.ttl)
        except ProviderError as err:
            self._log(
                "error",
                "GeoJSON fetch failed",
                {"id": file_id, "file": filename, "kind": err.kind.name},
            )
            raise err.with_prefix() from err.__cause__

    def _parse(self, text: str, filename: str) -> dict:
        try:
            document = json.loads(text, parse_constant=_reject_constant)
        except (ValueError, RecursionError) as err:
            # ValueError covers JSONDecodeError and the NaN/Infinity rejection
            raise ParseError(f"unparsable JSON in {filename}", filename=filename) from err

        if not isinstance(document, dict):
            raise ParseError(f"unparsable JSON in {filename}", filename=filename)
        return document
