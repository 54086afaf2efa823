"""
Mapping store: abstraction identifier -> implementation identifier.

Two source formats are understood:
    injector.properties   key=value lines, '#' comments, blank lines ignored
    injector.yaml         flat YAML mapping of strings

Example properties file:
    # mapping: interface = implementation
    autoinject.demo.SomeInterface=autoinject.demo.SomeImpl
    autoinject.demo.SomeOtherInterface=autoinject.demo.SODoer
"""

import yaml
from pathlib import Path
from typing import Dict, Iterator, Optional, Tuple, Union

from autoinject.core.implementations import RealFileSystemService, YamlConfigLoader
from autoinject.core.protocols import ConfigLoader, FileSystemService
from .exceptions import ConfigLoadError

YAML_SUFFIXES = ('.yaml', '.yml')


def parse_properties(content: str, source: str = '<string>') -> Dict[str, str]:
    """Parse key=value lines into a dict.

    Whitespace around keys and values is stripped. Later duplicates win.

    Raises:
        ConfigLoadError: On a line without '=' or with a blank key
    """
    entries: Dict[str, str] = {}
    for lineno, raw in enumerate(content.lstrip('\ufeff').splitlines(), start=1):
        line = raw.strip()
        if not line or line.startswith('#'):
            continue
        if '=' not in line:
            raise ConfigLoadError(
                f"{source}:{lineno}: expected key=value, got {line!r}",
                path=source,
                line=lineno
            )
        key, value = line.split('=', 1)
        key = key.strip()
        if not key:
            raise ConfigLoadError(f"{source}:{lineno}: blank key", path=source, line=lineno)
        entries[key] = value.strip()
    return entries


def _flatten_yaml(document, source: str) -> Dict[str, str]:
    if document is None:
        return {}
    if not isinstance(document, dict):
        raise ConfigLoadError(
            f"{source}: expected a mapping at top level, got {type(document).__name__}",
            path=source
        )

    entries: Dict[str, str] = {}
    for key, value in document.items():
        if not isinstance(key, str) or not key.strip():
            raise ConfigLoadError(f"{source}: invalid key {key!r}", path=source)
        if value is None:
            value = ''
        if not isinstance(value, str):
            raise ConfigLoadError(
                f"{source}: value for {key!r} must be a string, got {type(value).__name__}",
                path=source
            )
        entries[key.strip()] = value.strip()
    return entries


class MappingStore:
    """Immutable view over a loaded mapping.

    Args:
        entries: Abstraction identifier -> implementation identifier
        source: Where the entries came from (for messages)
    """

    def __init__(self, entries: Optional[Dict[str, str]] = None, source: str = '<memory>'):
        cleaned: Dict[str, str] = {}
        for key, value in (entries or {}).items():
            if not key or not key.strip():
                raise ConfigLoadError(f"{source}: blank key", path=source)
            cleaned[key.strip()] = (value or '').strip()
        self._entries = cleaned
        self.source = source

    @classmethod
    def from_dict(cls, entries: Dict[str, str]) -> 'MappingStore':
        return cls(entries)

    @classmethod
    def load(
        cls,
        path: Union[str, Path],
        filesystem: Optional[FileSystemService] = None,
        config_loader: Optional[ConfigLoader] = None
    ) -> 'MappingStore':
        """Load a mapping file.

        Files ending in .yaml/.yml are parsed as YAML, everything else as
        key=value lines.

        Raises:
            ConfigLoadError: If the file cannot be read or parsed
        """
        fs = filesystem or RealFileSystemService()
        source = str(path)

        if not fs.exists(source) or not fs.is_file(source):
            raise ConfigLoadError(f"Cannot load mapping file: {source}", path=source)

        try:
            if source.lower().endswith(YAML_SUFFIXES):
                loader = config_loader or YamlConfigLoader(fs)
                entries = _flatten_yaml(loader.load_yaml(source), source)
            else:
                entries = parse_properties(fs.read_file(source), source)
        except (OSError, UnicodeDecodeError, yaml.YAMLError) as e:
            raise ConfigLoadError(f"Cannot load mapping file: {source} ({e})", path=source) from e

        return cls(entries, source=source)

    def get(self, key: str) -> Optional[str]:
        """Return the implementation identifier for ``key``.

        Blank values count as missing and return None.
        """
        value = self._entries.get(key)
        return value if value else None

    def with_entries(self, overrides: Dict[str, str]) -> 'MappingStore':
        """Return a new store with ``overrides`` applied; this store is unchanged."""
        merged = dict(self._entries)
        merged.update(overrides)
        return MappingStore(merged, source=self.source)

    def items(self) -> Iterator[Tuple[str, str]]:
        return iter(self._entries.items())

    def __contains__(self, key: object) -> bool:
        return key in self._entries

    def __len__(self) -> int:
        return len(self._entries)

    def __repr__(self) -> str:
        return f"MappingStore({self._entries!r}, source={self.source!r})"
