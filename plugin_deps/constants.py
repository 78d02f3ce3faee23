"""Global constants for plugin dependency checks."""

import os
from pathlib import Path

# Directory paths
PROJECT_ROOT = Path(__file__).resolve().parent.parent

# Dependency declaration file (supports PLUGIN_DEPENDENCY_FILE env var, relative paths resolve against PROJECT_ROOT)
_dependency_file_env = os.getenv("PLUGIN_DEPENDENCY_FILE", "")
if _dependency_file_env:
    _dependency_file_path = Path(_dependency_file_env)
    DEPENDENCY_FILE = (
        _dependency_file_path if _dependency_file_path.is_absolute() else (PROJECT_ROOT / _dependency_file_path).resolve()
    )
else:
    DEPENDENCY_FILE = PROJECT_ROOT / "plugins" / "dependencies.yaml"

LOG_LEVEL = os.getenv("LOG_LEVEL", "WARNING")

# Whether the bundled base plugins are checked together with user declarations
INCLUDE_BASE_PLUGINS = os.getenv("PLUGIN_INCLUDE_BASE", "true").lower() in ("1", "true", "yes", "on")
