"""
ConfigLoader Primitive

Resolves provider configuration from explicit options, host defaults and the
environment, and loads optional JSON config files with environment variable
substitution.
"""

import json
import os
import re
from dataclasses import dataclass
from pathlib import Path
from typing import Any, Mapping, Optional, Union

from file_geojson.primitives.errors import ConfigError, ProviderError
from file_geojson.primitives.file_reader import FileReader
from file_geojson.primitives.json_validator import JSONValidator

DEFAULT_DATA_DIR = "./data"
DATA_DIR_ENV_VAR = "DATA_DIR"
CONFIG_SECTION = "file-geojson"
ENV_VAR_RE = re.compile(r"\$\{([^}]+)\}")


@dataclass(frozen=True)
class ReaderConfig:
    """Immutable provider configuration"""

    data_dir: str
    data_dir_path: Path
    ttl: int = 0


def lookup_option(source: Any, key: str) -> Any:
    """Read a key from a mapping or an attribute from a host object."""
    if source is None:
        return None
    if isinstance(source, Mapping):
        return source.get(key)
    return getattr(source, key, None)


class ConfigLoader:
    """Loads and validates provider configuration"""

    def __init__(self):
        self.file_reader = FileReader()
        self.validator = JSONValidator()

    def resolve(
        self,
        options: Optional[Mapping] = None,
        host: Any = None,
        env: Optional[Mapping[str, str]] = None,
    ) -> ReaderConfig:
        """
        Resolve the reader configuration.

        dataDir precedence: explicit option > host default > DATA_DIR
        environment variable > "./data". ttl comes from the options only.

        Args:
            options: Explicit provider options ("dataDir", "ttl")
            host: Host framework object or mapping exposing "dataDir"
            env: Environment mapping, defaults to os.environ

        Returns:
            ReaderConfig: Frozen configuration

        Raises:
            ConfigError: If a resolved value fails validation
        """
        env = os.environ if env is None else env

        data_dir = (
            lookup_option(options, "dataDir")
            or lookup_option(host, "dataDir")
            or env.get(DATA_DIR_ENV_VAR)
            or DEFAULT_DATA_DIR
        )
        ttl = lookup_option(options, "ttl") or 0

        is_valid, error_messages = self.validator.validate_config({"dataDir": data_dir, "ttl": ttl})
        if not is_valid:
            raise ConfigError(f"Config validation failed: {error_messages[0]}")

        return ReaderConfig(data_dir=data_dir, data_dir_path=Path.cwd() / data_dir, ttl=ttl)

    def load(self, config_path: Union[str, Path], env: Optional[Mapping[str, str]] = None) -> dict:
        """
        Read provider options from the host's JSON config file.

        Only the "file-geojson" section is used when the document has one.
        String values may reference the environment as ${VAR_NAME}.

        Args:
            config_path: Path to the JSON config file
            env: Environment mapping, defaults to os.environ

        Returns:
            dict: Options mapping accepted by resolve()

        Raises:
            ConfigError: If the file can't be read or parsed, names an unset
                variable, or holds invalid provider options
        """
        env = os.environ if env is None else env
        filename = Path(config_path).name

        try:
            document = json.loads(self.file_reader.read_text(config_path))
        except ProviderError as err:
            raise ConfigError(f"cannot load config: {err}", filename=err.filename) from err
        except ValueError as err:
            raise ConfigError(f"unparsable JSON in {filename}", filename=filename) from err

        section = document.get(CONFIG_SECTION) if isinstance(document, dict) else None
        options = self._expand(section if isinstance(section, dict) else document, env)

        is_valid, error_messages = self.validator.validate_config(options)
        if not is_valid:
            raise ConfigError(f"Config validation failed: {error_messages[0]}", filename=filename)

        return options

    def _expand(self, value: Any, env: Mapping[str, str]) -> Any:
        """Replace ${VAR_NAME} references in every string of a JSON value"""
        if isinstance(value, dict):
            return {key: self._expand(item, env) for key, item in value.items()}
        if isinstance(value, list):
            return [self._expand(item, env) for item in value]
        if not isinstance(value, str):
            return value

        def _lookup_var(match: "re.Match") -> str:
            name = match.group(1)
            if name not in env:
                raise ConfigError(f"Environment variable '{name}' is not defined")
            return env[name]

        return ENV_VAR_RE.sub(_lookup_var, value)
