"""
Resolution of a project's Prettier configuration.

Searches upward from a directory for the first Prettier configuration file,
the way Prettier itself does, and applies `overrides` entries whose `files`
globs match the document being formatted.
"""

from __future__ import annotations

import fnmatch
import json
import logging
import tomllib
from pathlib import Path
from typing import Any

import yaml

from .base import ConfigResolutionError

logger = logging.getLogger(__name__)

# Searched in this order inside each directory
CONFIG_FILE_NAMES = (
    "package.json",
    ".prettierrc",
    ".prettierrc.json",
    ".prettierrc.yaml",
    ".prettierrc.yml",
    ".prettierrc.toml",
)


def find_config_file(directory: str | Path) -> Path | None:
    """Return the nearest configuration file at or above directory."""
    current = Path(directory).resolve()
    for folder in (current, *current.parents):
        for name in CONFIG_FILE_NAMES:
            candidate = folder / name
            if not candidate.is_file():
                continue
            if name == "package.json" and "prettier" not in _load_file(candidate):
                continue
            return candidate
    return None


def _load_file(path: Path) -> dict[str, Any]:
    try:
        content = path.read_text(encoding="utf-8")
    except OSError as e:
        raise ConfigResolutionError(f"Cannot read Prettier configuration {path}: {e}") from e

    try:
        if path.suffix == ".toml":
            data = tomllib.loads(content)
        elif path.suffix == ".json":
            data = json.loads(content)
        else:
            # .prettierrc may hold JSON or YAML; YAML is a superset of JSON
            data = yaml.safe_load(content)
    except (json.JSONDecodeError, tomllib.TOMLDecodeError, yaml.YAMLError) as e:
        raise ConfigResolutionError(f"Invalid Prettier configuration {path}: {e}") from e

    if data is None:
        return {}
    if not isinstance(data, dict):
        raise ConfigResolutionError(f"Prettier configuration {path} must be a mapping, got {type(data).__name__}")
    return data


def _matches(patterns: str | list[str], file_path: str, config_dir: Path) -> bool:
    """Match override globs the way prettier does, relative to the config directory.

    Patterns without a slash also match the bare file name; a `**/` segment
    may stand for no directory at all.
    """
    if isinstance(patterns, str):
        patterns = [patterns]
    path = Path(file_path).resolve()
    try:
        relative = path.relative_to(config_dir).as_posix()
    except ValueError:
        relative = path.as_posix()

    for pattern in patterns:
        if "/" not in pattern:
            if fnmatch.fnmatch(path.name, pattern):
                return True
            continue
        pattern = pattern.removeprefix("./")
        if fnmatch.fnmatch(relative, pattern) or fnmatch.fnmatch(relative, pattern.replace("**/", "")):
            return True
    return False


def resolve_project_config(directory: str | Path, file_path: str | None = None) -> dict[str, Any]:
    """
    Resolve the Prettier options that apply to a project directory.

    Args:
        directory: Directory to start searching from (the workspace root)
        file_path: Document path used to select `overrides` entries

    Returns:
        Resolved options; empty if no configuration file exists

    Raises:
        ConfigResolutionError: If a configuration file is malformed or unreadable
    """
    config_file = find_config_file(directory)
    if config_file is None:
        logger.debug("No Prettier configuration found from %s", directory)
        return {}

    data = _load_file(config_file)
    if config_file.name == "package.json":
        data = data["prettier"]
        if not isinstance(data, dict):
            # A string here references a shared config package we cannot load
            logger.warning("Ignoring non-inline prettier entry in %s", config_file)
            return {}

    logger.debug("Using Prettier configuration %s", config_file)
    options = {k: v for k, v in data.items() if k != "overrides"}
    config_dir = config_file.parent
    if file_path:
        for override in data.get("overrides", []):
            files = override.get("files", [])
            excluded = override.get("excludeFiles", [])
            if _matches(files, file_path, config_dir) and not (excluded and _matches(excluded, file_path, config_dir)):
                options.update(override.get("options", {}))
    return options
