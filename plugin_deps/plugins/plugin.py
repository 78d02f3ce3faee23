"""Plugin identity - a named, versioned artifact with an optional download URL."""

import logging
import re
from typing import Optional, Tuple

from pydantic import AliasChoices, BaseModel, ConfigDict, Field, model_validator

from plugin_deps.exceptions import FormatError

logger = logging.getLogger(__name__)

# Plugin name regex pattern
NAME_PATTERN = re.compile(r"^[A-Za-z0-9_-]+$")
# Plugin version regex pattern (dots and plus for semver/qualifier suffixes)
VERSION_PATTERN = re.compile(r"^[A-Za-z0-9_+.-]+$")
# Plugin download URL regex pattern, searched rather than anchored
DOWNLOAD_URL_PATTERN = re.compile(
    r"https?://(www\.)?[-a-zA-Z0-9@:%._+~#=]{1,256}\.[a-zA-Z0-9()]{1,6}\b([-a-zA-Z0-9()@:%_+.~#?&/=]*)"
)


class Plugin(BaseModel):
    """A plugin required by a build, identified by name and version."""

    model_config = ConfigDict(frozen=True)

    name: str = Field(..., description="Plugin name, e.g. 'workflow-job'")
    version: str = Field(..., description="Plugin version, e.g. '2.39' or '1.0+build.5'")
    download_url: str = Field(
        default="",
        validation_alias=AliasChoices("download_url", "downloadURL"),
        serialization_alias="downloadURL",
        description="Optional URL the plugin archive is fetched from",
    )

    @model_validator(mode="after")
    def check_format(self):
        error = _validate_plugin(self.name, self.version, self.download_url)
        if error is not None:
            raise error
        return self

    def __str__(self) -> str:
        return f"{self.name}:{self.version}"


def _validate_plugin(name: str, version: str, download_url: str) -> Optional[FormatError]:
    """Check name, version and URL in that order, returning the first failure."""
    if not NAME_PATTERN.fullmatch(name):
        return FormatError(
            f"invalid plugin name '{name}:{version}', must follow pattern '{NAME_PATTERN.pattern}'"
        )
    if not VERSION_PATTERN.fullmatch(version):
        return FormatError(
            f"invalid plugin version '{name}:{version}', must follow pattern '{VERSION_PATTERN.pattern}'"
        )
    if download_url and not DOWNLOAD_URL_PATTERN.search(download_url):
        return FormatError(
            f"invalid download URL '{download_url}' for plugin name {name}:{version}, "
            f"must follow pattern '{DOWNLOAD_URL_PATTERN.pattern}'"
        )
    return None


def parse_plugin(name_with_version: str) -> Tuple[Optional[Plugin], Optional[FormatError]]:
    """Create a plugin from a string such as "name-of-plugin:0.0.1".

    Only the first colon separates name from version.

    Returns:
        (plugin, None) on success, (None, error) otherwise
    """
    parts = name_with_version.split(":", 1)
    if len(parts) != 2:
        return None, FormatError(f"invalid plugin format '{name_with_version}'")
    name, version = parts
    return new_plugin(name, version)


def new_plugin(
    name: str, version: str, download_url: str = ""
) -> Tuple[Optional[Plugin], Optional[FormatError]]:
    """Create a plugin from discrete fields.

    Returns:
        (plugin, None) on success, (None, error) for the first field that
        does not follow its pattern
    """
    error = _validate_plugin(name, version, download_url)
    if error is not None:
        return None, error
    return Plugin(name=name, version=version, download_url=download_url), None


def must_plugin(plugin: Optional[Plugin], error: Optional[Exception]) -> Plugin:
    """Unwrap a (plugin, error) pair, raising the error if one is set.

    For author-time constants and tests only; never pass user input here.
    """
    if error is not None:
        logger.critical(f"Invalid built-in plugin: {error}")
        raise error
    return plugin
