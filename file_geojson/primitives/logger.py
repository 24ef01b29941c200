"""
Logger Primitive

Structured provider logging with levels and context.

Interface:
- debug(message: str, context: dict = {}) → None
- info(message: str, context: dict = {}) → None
- warning(message: str, context: dict = {}) → None
- error(message: str, context: dict = {}) → None
"""

import logging
import sys
from pathlib import Path
from typing import Optional, Union

import structlog

PROVIDER_NAME = "file-geojson"


class Logger:
    """Structured logger with ISO 8601 timestamps, bound to the provider name."""

    def __init__(self, output_file: Optional[str] = None, level: Union[int, str] = logging.DEBUG):
        """
        Initialize logger.

        Args:
            output_file: Path to log file. If None, logs to stdout.
            level: Minimum level to emit, as a logging constant or name ("info").
        """
        self.output_file = output_file
        self.level = self._to_level(level)
        self._file_handle = None
        self._configure_structlog()

    @staticmethod
    def _to_level(level: Union[int, str]) -> int:
        if isinstance(level, str):
            resolved = logging.getLevelName(level.upper())
            if not isinstance(resolved, int):
                raise ValueError(f"Unknown log level: {level}")
            return resolved
        return level

    def _configure_structlog(self):
        """Configure structlog processors and output."""
        processors = [
            structlog.processors.add_log_level,
            structlog.processors.TimeStamper(fmt="iso", utc=True),
            structlog.processors.JSONRenderer(),
        ]

        if self.output_file:
            log_path = Path(self.output_file)
            log_path.parent.mkdir(parents=True, exist_ok=True)
            self._file_handle = open(log_path, "a", encoding="utf-8")
            stream = self._file_handle
        else:
            stream = sys.stdout

        # A dedicated logger per instance so the host's structlog setup is untouched
        self._logger = structlog.wrap_logger(
            structlog.PrintLogger(file=stream),
            processors=processors,
            wrapper_class=structlog.make_filtering_bound_logger(self.level),
            context_class=dict,
        ).bind(provider=PROVIDER_NAME)

    def _normalize_context(self, context: Optional[dict]) -> dict:
        """Normalize context parameter, returning empty dict if None."""
        return context if context is not None else {}

    def debug(self, message: str, context: Optional[dict] = None) -> None:
        """Log DEBUG level message."""
        self._logger.debug(message, **self._normalize_context(context))

    def info(self, message: str, context: Optional[dict] = None) -> None:
        """Log INFO level message."""
        self._logger.info(message, **self._normalize_context(context))

    def warning(self, message: str, context: Optional[dict] = None) -> None:
        """Log WARNING level message."""
        self._logger.warning(message, **self._normalize_context(context))

    def error(self, message: str, context: Optional[dict] = None) -> None:
        """Log ERROR level message."""
        self._logger.error(message, **self._normalize_context(context))

    def close(self) -> None:
        """Close file handle if open."""
        if self._file_handle is not None:
            self._file_handle.close()
            self._file_handle = None

    def __enter__(self):
        return self

    def __exit__(self, exc_type, exc_val, exc_tb):
        self.close()
        return False
