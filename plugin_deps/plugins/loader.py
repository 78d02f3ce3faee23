"""Dependency file loader - reads root plugin declarations from JSON or YAML."""

import json
import logging
from pathlib import Path
from typing import Dict, Iterable, List, Tuple

import yaml
from pydantic import BaseModel, ConfigDict, Field, ValidationError

from plugin_deps.exceptions import DependencyFileError, FormatError
from plugin_deps.plugins.plugin import Plugin, new_plugin, parse_plugin

logger = logging.getLogger(__name__)

SUPPORTED_SUFFIXES = (".json", ".yaml", ".yml")


class DependencyEntry(BaseModel):
    """A root plugin and the plugins it requires."""

    plugin: str = Field(..., description="Root plugin as 'name:version'")
    download_url: str = Field(default="", alias="downloadURL", description="Optional root plugin URL")
    dependencies: List[str] = Field(default_factory=list, description="Required plugins as 'name:version'")


class DependencyFile(BaseModel):
    """Dependency declaration file: named sets of root plugin entries."""

    model_config = ConfigDict(extra="forbid")

    sets: Dict[str, List[DependencyEntry]] = Field(default_factory=dict)


def parse_plugin_list(values: Iterable[str]) -> Tuple[List[Plugin], List[FormatError]]:
    """Parse many "name:version" strings, collecting every failure.

    Returns:
        (valid plugins, errors) in input order
    """
    plugins: List[Plugin] = []
    errors: List[FormatError] = []
    for value in values:
        plugin, error = parse_plugin(value)
        if error is not None:
            errors.append(error)
        else:
            plugins.append(plugin)
    return plugins, errors


def _read_raw(path: Path) -> dict:
    suffix = path.suffix.lower()
    if suffix not in SUPPORTED_SUFFIXES:
        raise DependencyFileError(
            f"Unsupported dependency file type '{suffix}', expected one of {', '.join(SUPPORTED_SUFFIXES)}",
            path,
        )

    try:
        with open(path, "r", encoding="utf-8") as f:
            if suffix == ".json":
                data = json.load(f)
            else:
                data = yaml.safe_load(f)
    except OSError as e:
        raise DependencyFileError(f"Cannot read {path}: {e}", path) from e
    except (json.JSONDecodeError, yaml.YAMLError, UnicodeDecodeError) as e:
        raise DependencyFileError(f"Invalid {suffix.lstrip('.').upper()} in {path}: {e}", path) from e

    # Empty YAML document
    if data is None:
        return {}
    if not isinstance(data, dict):
        raise DependencyFileError(f"Expected a mapping at the top level of {path}", path)
    return data


def _build_mapping(set_name: str, entries: List[DependencyEntry], path: Path) -> Dict[Plugin, List[Plugin]]:
    mapping: Dict[Plugin, List[Plugin]] = {}
    for entry in entries:
        root, error = parse_plugin(entry.plugin)
        if error is None and entry.download_url:
            root, error = new_plugin(root.name, root.version, entry.download_url)
        if error is not None:
            raise DependencyFileError(f"Set '{set_name}': {error}", path) from error

        plugins, errors = parse_plugin_list(entry.dependencies)
        if errors:
            raise DependencyFileError(f"Set '{set_name}', root '{root}': {errors[0]}", path) from errors[0]

        if root in mapping:
            logger.warning(f"Root plugin '{root}' declared twice in set '{set_name}', merging dependencies")
            mapping[root].extend(plugins)
        else:
            mapping[root] = plugins
    return mapping


def load_dependency_file(path: Path) -> Dict[str, Dict[Plugin, List[Plugin]]]:
    """Load a dependency declaration file.

    Args:
        path: Path to a .json, .yaml or .yml file

    Returns:
        Set name -> (root plugin -> required plugins), one mapping per set

    Raises:
        DependencyFileError: if the file is missing, unparsable or invalid
    """
    path = Path(path)
    if not path.exists():
        raise DependencyFileError(f"Dependency file not found: {path}", path)

    data = _read_raw(path)
    try:
        declaration = DependencyFile.model_validate(data)
    except ValidationError as e:
        raise DependencyFileError(f"Invalid dependency file {path}: {e}", path) from e

    result: Dict[str, Dict[Plugin, List[Plugin]]] = {}
    for set_name, entries in declaration.sets.items():
        result[set_name] = _build_mapping(set_name, entries, path)
        logger.debug(f"Loaded set '{set_name}' with {len(entries)} root plugin(s) from {path}")

    logger.info(f"Loaded {len(result)} dependency set(s) from {path}")
    return result
