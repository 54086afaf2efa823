"""Mapping file location and default-file bootstrapping"""
import os
import yaml
from typing import Dict, Mapping, Optional

from autoinject.core.protocols import FileSystemService, Logger
from autoinject.injection.fields import type_identifier
from autoinject.injection.mapping import YAML_SUFFIXES

DEFAULT_MAPPING_PATH = "injector.properties"
CONFIG_ENV_VAR = "AUTOINJECT_CONFIG"


def resolve_mapping_path(
    explicit: Optional[str] = None,
    environ: Optional[Mapping[str, str]] = None
) -> str:
    """Pick the mapping file: explicit argument, then $AUTOINJECT_CONFIG, then the default."""
    if explicit:
        return explicit
    env = os.environ if environ is None else environ
    return env.get(CONFIG_ENV_VAR) or DEFAULT_MAPPING_PATH


def default_mapping_entries() -> Dict[str, str]:
    """Demo wiring: SomeInterface -> SomeImpl, SomeOtherInterface -> SODoer"""
    from autoinject.demo import SODoer, SomeImpl, SomeInterface, SomeOtherInterface

    return {
        type_identifier(SomeInterface): type_identifier(SomeImpl),
        type_identifier(SomeOtherInterface): type_identifier(SODoer),
    }


def default_mapping_content(path: str = DEFAULT_MAPPING_PATH) -> str:
    """Render the default mapping in the format implied by ``path``'s suffix."""
    entries = default_mapping_entries()

    if path.lower().endswith(YAML_SUFFIXES):
        body = yaml.safe_dump(entries, default_flow_style=False, sort_keys=False)
        return "# mapping: interface: implementation\n" + body

    lines = ["# mapping: interface = implementation"]
    lines.extend(f"{key}={value}" for key, value in entries.items())
    return "\n".join(lines) + "\n"


def ensure_mapping_file(
    path: str,
    filesystem: FileSystemService,
    logger: Logger,
    force: bool = False
) -> bool:
    """Write the default mapping to ``path`` unless it already exists.

    Args:
        path: Mapping file location
        filesystem: Filesystem abstraction
        logger: Logging abstraction
        force: Overwrite an existing file

    Returns:
        True if the file was written
    """
    if filesystem.exists(path) and not force:
        logger.debug(f"Mapping file already present: {path}")
        return False

    filesystem.write_file(path, default_mapping_content(path))
    logger.info(f"Created default {path}")
    logger.info("Edit it to switch implementations (A->B).")
    return True
