"""Dependency verifier - detects plugins required at different versions."""

import logging
from dataclasses import dataclass
from typing import Dict, List, Mapping, Sequence

from plugin_deps.plugins.plugin import Plugin

logger = logging.getLogger(__name__)


@dataclass(frozen=True)
class Requirement:
    """A required version of a plugin and the root that declared it."""

    version: str
    origin: str  # "<root name>:<root version>"


def _collect_requirements(*mappings: Mapping[Plugin, Sequence[Plugin]]) -> Dict[str, List[Requirement]]:
    """Group every declared requirement by plugin name.

    A root counts as a requirement on itself, so a root that shows up at two
    versions across mappings is checked like any dependency.
    """
    requirements: Dict[str, List[Requirement]] = {}

    for mapping in mappings:
        for root, plugins in mapping.items():
            origin = str(root)
            requirements.setdefault(root.name, []).append(Requirement(root.version, origin))
            for plugin in plugins:
                requirements.setdefault(plugin.name, []).append(Requirement(plugin.version, origin))

    return requirements


def verify_dependencies(*mappings: Mapping[Plugin, Sequence[Plugin]]) -> List[str]:
    """Check that every plugin is required at a single version.

    Args:
        mappings: Any number of root plugin -> required plugins mappings

    Returns:
        One message per ordered pair of requirements with different versions.
        Each conflict therefore appears once in both directions. The order of
        messages carries no meaning; an empty list means no conflicts.
    """
    messages: List[str] = []
    requirements = _collect_requirements(*mappings)
    logger.debug(f"Verifying {len(requirements)} plugin name(s) from {len(mappings)} mapping(s)")

    for plugin_name, records in requirements.items():
        if len(records) == 1:
            continue

        for first in records:
            for second in records:
                if first.version != second.version:
                    messages.append(
                        f"Plugin '{first.origin}' requires version '{first.version}' "
                        f"but plugin '{second.origin}' requires '{second.version}' "
                        f"for plugin '{plugin_name}'"
                    )

    if messages:
        logger.debug(f"Found {len(messages)} version conflict message(s)")
    return messages
