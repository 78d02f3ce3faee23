"""Plugin-specific error types."""

from pathlib import Path
from typing import Optional


class PluginError(Exception):
    """Base type for plugin-related failures."""


class FormatError(PluginError, ValueError):
    """Raised (or returned) when a plugin name, version or URL is malformed."""


class DependencyFileError(PluginError):
    """Raised when a dependency declaration file cannot be loaded or validated."""

    def __init__(self, message: str, path: Optional[Path] = None):
        super().__init__(message)
        self.path = path
