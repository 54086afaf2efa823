"""Production implementations of the collaborator protocols.

This module provides real implementations that wrap actual external dependencies
(console, stdlib logging, filesystem, YAML). These are used in production code.

For testing, use mocks or test doubles instead of these implementations.
"""

import logging
import sys
import yaml
from pathlib import Path
from typing import Any, List, Optional, Union

from autoinject.core.protocols import FileSystemService, Logger


class ConsoleLogger:
    """Production logger that prints to console (stdout/stderr)."""

    def info(self, message: str) -> None:
        """Print info message to stdout."""
        print(message)

    def warning(self, message: str) -> None:
        """Print warning message to stdout."""
        print(f"Warning: {message}")

    def error(self, message: str) -> None:
        """Print error message to stderr."""
        print(f"Error: {message}", file=sys.stderr)

    def debug(self, message: str) -> None:
        """Print debug message to stdout."""
        print(f"Debug: {message}")


class StandardLogger:
    """Logger that forwards to the stdlib ``logging`` module.

    Default for library use: nothing is printed unless the application
    configures logging.
    """

    def __init__(self, name: str = "autoinject"):
        self._logger = logging.getLogger(name)

    def info(self, message: str) -> None:
        self._logger.info(message)

    def warning(self, message: str) -> None:
        self._logger.warning(message)

    def error(self, message: str) -> None:
        self._logger.error(message)

    def debug(self, message: str) -> None:
        self._logger.debug(message)


class RealFileSystemService:
    """Production filesystem service using real pathlib operations."""

    def exists(self, path: Union[str, Path]) -> bool:
        """Check if path exists."""
        return Path(path).exists()

    def is_file(self, path: Union[str, Path]) -> bool:
        """Check if path is a file."""
        return Path(path).is_file()

    def read_file(self, path: Union[str, Path]) -> str:
        """Read entire file as string."""
        with open(path, 'r', encoding='utf-8') as f:
            return f.read()

    def write_file(self, path: Union[str, Path], content: str) -> None:
        """Write string content to file."""
        with open(path, 'w', encoding='utf-8') as f:
            f.write(content)


class YamlConfigLoader:
    """Production config loader using real YAML parser."""

    def __init__(self, filesystem: FileSystemService):
        """Initialize with filesystem service for reading files."""
        self.fs = filesystem

    def load_yaml(self, path: str) -> Any:
        """Load YAML file and return parsed document."""
        content = self.fs.read_file(path)
        return yaml.safe_load(content)


class LoggingObserver:
    """Writes one log line per injection through a ``Logger``."""

    def __init__(self, logger: Logger):
        self.log = logger

    def on_injected(self, record) -> None:
        self.log.info(
            f"[Injector] injected {record.owner}.{record.field} : "
            f"{record.abstraction} -> {record.implementation}"
        )


class RecordingObserver:
    """Keeps every injection record in memory, in emission order."""

    def __init__(self):
        self.records: List[Any] = []

    def on_injected(self, record) -> None:
        self.records.append(record)

    def last(self) -> Optional[Any]:
        """Return the most recent record, or None if nothing was injected."""
        return self.records[-1] if self.records else None
