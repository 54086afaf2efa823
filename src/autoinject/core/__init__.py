"""Collaborator abstractions for autoinject.

This module provides Protocol-based abstractions for the injector's
collaborators (logging, filesystem, config parsing, observers, implementation
lookup) together with their production implementations.

Design:
- Protocol-based abstractions (typing.Protocol) for structural typing
- Production implementations for real-world use
- Easy mocking for unit tests
"""

from autoinject.core.protocols import (
    Logger,
    FileSystemService,
    ConfigLoader,
    InjectionObserver,
    ImplementationLocator,
)

from autoinject.core.implementations import (
    ConsoleLogger,
    StandardLogger,
    RealFileSystemService,
    YamlConfigLoader,
    LoggingObserver,
    RecordingObserver,
)

__all__ = [
    # Protocols
    "Logger",
    "FileSystemService",
    "ConfigLoader",
    "InjectionObserver",
    "ImplementationLocator",
    # Implementations
    "ConsoleLogger",
    "StandardLogger",
    "RealFileSystemService",
    "YamlConfigLoader",
    "LoggingObserver",
    "RecordingObserver",
]
