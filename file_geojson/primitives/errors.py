"""
Provider error taxonomy.

Every failure surfaced by the provider carries an ErrorKind so the host can
map it to a response without parsing messages.
"""

from enum import Enum
from typing import Optional

LOGGING_PREFIX = "File GeoJSON provider: "


class ErrorKind(Enum):
    """Failure classes with their HTTP-equivalent status codes"""

    CONFIG_ERROR = "config_error"
    NOT_FOUND = "not_found"
    PARSE_ERROR = "parse_error"
    IO_ERROR = "io_error"

    @property
    def status_code(self) -> int:
        return _STATUS_CODES[self]


_STATUS_CODES = {
    ErrorKind.CONFIG_ERROR: 500,
    ErrorKind.NOT_FOUND: 404,
    ErrorKind.PARSE_ERROR: 400,
    ErrorKind.IO_ERROR: 500,
}


# Exception hierarchy
class ProviderError(Exception):
    """Base exception for provider errors"""

    kind = ErrorKind.IO_ERROR

    def __init__(self, message: str, filename: Optional[str] = None):
        super().__init__(message)
        self.message = message
        self.filename = filename

    @property
    def status_code(self) -> int:
        return self.kind.status_code

    def with_prefix(self, prefix: str = LOGGING_PREFIX) -> "ProviderError":
        """
        Return a copy of this error with the provider label prepended.

        The copy keeps the kind, the filename and the original cause.
        """
        if self.message.startswith(prefix):
            return self
        prefixed = type(self)(f"{prefix}{self.message}", filename=self.filename)
        prefixed.__cause__ = self.__cause__
        return prefixed

    def __str__(self) -> str:
        return self.message


class ConfigError(ProviderError):
    """Raised when the provider configuration is unusable"""

    kind = ErrorKind.CONFIG_ERROR


class FileNotFound(ProviderError):
    """Raised when the requested data file does not exist"""

    kind = ErrorKind.NOT_FOUND


class ParseError(ProviderError):
    """Raised when a data file is not valid JSON"""

    kind = ErrorKind.PARSE_ERROR


class ReadError(ProviderError):
    """Raised for any other filesystem failure"""

    kind = ErrorKind.IO_ERROR
