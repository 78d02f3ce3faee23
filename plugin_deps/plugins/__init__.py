"""Plugin identity, bundled base set and dependency version checks.

Imports are lazy so that loading the plugin model does not pull in YAML
parsing, which only the dependency file loader needs.
"""

__all__ = [
    "Plugin",
    "NAME_PATTERN",
    "VERSION_PATTERN",
    "DOWNLOAD_URL_PATTERN",
    "parse_plugin",
    "new_plugin",
    "must_plugin",
    "verify_dependencies",
    "BASE_PLUGINS",
    "base_plugins",
    "load_dependency_file",
    "parse_plugin_list",
]


def __getattr__(name):
    if name in (
        "Plugin",
        "NAME_PATTERN",
        "VERSION_PATTERN",
        "DOWNLOAD_URL_PATTERN",
        "parse_plugin",
        "new_plugin",
        "must_plugin",
    ):
        from plugin_deps.plugins import plugin
        return getattr(plugin, name)
    if name == "verify_dependencies":
        from plugin_deps.plugins.verifier import verify_dependencies
        return verify_dependencies
    if name in ("BASE_PLUGINS", "base_plugins"):
        from plugin_deps.plugins import bundled
        return getattr(bundled, name)
    if name in ("load_dependency_file", "parse_plugin_list"):
        from plugin_deps.plugins import loader
        return getattr(loader, name)
    raise AttributeError(f"module 'plugin_deps.plugins' has no attribute {name!r}")
