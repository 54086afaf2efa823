"""Protocol definitions for the injector's collaborators.

This module defines Protocol-based abstractions for everything the injector
talks to outside its own algorithm: logging, file access, config parsing,
injection observers and implementation lookup.
Protocols use structural typing (duck typing with type hints) which means any
class implementing these methods satisfies the Protocol without explicit inheritance.

Benefits:
- Easy to mock in tests (just implement the methods)
- No inheritance required (more Pythonic)
- Type-safe with mypy/pyright
- Clear interface contracts
"""

from typing import Protocol, Any, Union, TYPE_CHECKING
from pathlib import Path

if TYPE_CHECKING:
    from autoinject.injection.injector import InjectionRecord
    from autoinject.injection.registry import Implementation


class Logger(Protocol):
    """Abstraction for logging operations.

    Replaces direct print() statements throughout the codebase.
    Enables structured logging and testability.
    """

    def info(self, message: str) -> None:
        """Log informational message."""
        ...

    def warning(self, message: str) -> None:
        """Log warning message."""
        ...

    def error(self, message: str) -> None:
        """Log error message."""
        ...

    def debug(self, message: str) -> None:
        """Log debug message."""
        ...


class FileSystemService(Protocol):
    """Abstraction for filesystem operations.

    Wraps the few file operations the mapping loaders and the bootstrapping
    helpers need, so both can be tested without touching the disk.
    """

    def exists(self, path: Union[str, Path]) -> bool:
        """Check if path exists."""
        ...

    def is_file(self, path: Union[str, Path]) -> bool:
        """Check if path is a file."""
        ...

    def read_file(self, path: Union[str, Path]) -> str:
        """Read entire file as UTF-8 string."""
        ...

    def write_file(self, path: Union[str, Path], content: str) -> None:
        """Write string content to file as UTF-8."""
        ...


class ConfigLoader(Protocol):
    """Abstraction for structured configuration file loading.

    Wraps YAML loading to enable testing with mock configurations
    without requiring actual config files.
    """

    def load_yaml(self, path: str) -> Any:
        """Load YAML file and return the parsed document."""
        ...


class InjectionObserver(Protocol):
    """Receives one record per successful field injection.

    Observers see injections in field declaration order. They must not
    raise; the injector does not guard against observer failures.
    """

    def on_injected(self, record: 'InjectionRecord') -> None:
        """Handle a completed injection."""
        ...


class ImplementationLocator(Protocol):
    """Maps an implementation identifier to something that can build it.

    Implementations:
        - ImplementationRegistry: explicit name -> factory table
        - ImportLocator: importlib-based dotted path lookup (opt-in)
    """

    def locate(self, identifier: str) -> 'Implementation':
        """Return the implementation registered under ``identifier``.

        Raises:
            ImplementationNotFoundError: If nothing matches the identifier
        """
        ...
