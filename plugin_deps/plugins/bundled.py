"""Bundled base plugins - the pinned set every build starts from."""

from typing import Dict, List

from plugin_deps.plugins.plugin import Plugin, must_plugin, parse_plugin


def _plugin(name_with_version: str) -> Plugin:
    return must_plugin(*parse_plugin(name_with_version))


# Root plugin -> plugins it requires. Versions must agree across roots.
BASE_PLUGINS: Dict[Plugin, List[Plugin]] = {
    _plugin("configuration-as-code:1.38"): [
        _plugin("configuration-as-code-support:1.18"),
    ],
    _plugin("git:4.2.2"): [
        _plugin("apache-httpcomponents-client-4-api:4.5.10-2.0"),
        _plugin("credentials:2.3.7"),
        _plugin("display-url-api:2.3.2"),
        _plugin("git-client:3.2.1"),
        _plugin("jsch:0.1.55.2"),
        _plugin("junit:1.28"),
        _plugin("mailer:1.32"),
        _plugin("matrix-project:1.14"),
        _plugin("scm-api:2.6.3"),
        _plugin("script-security:1.71"),
        _plugin("ssh-credentials:1.18.1"),
        _plugin("structs:1.20"),
        _plugin("workflow-api:2.40"),
        _plugin("workflow-scm-step:2.11"),
        _plugin("workflow-step-api:2.22"),
    ],
    _plugin("job-dsl:1.77"): [
        _plugin("script-security:1.71"),
        _plugin("structs:1.20"),
    ],
    _plugin("kubernetes-credentials-provider:0.13"): [
        _plugin("credentials:2.3.7"),
        _plugin("structs:1.20"),
        _plugin("variant:1.3"),
    ],
    _plugin("kubernetes:1.25.2"): [
        _plugin("apache-httpcomponents-client-4-api:4.5.10-2.0"),
        _plugin("cloudbees-folder:6.12"),
        _plugin("credentials:2.3.7"),
        _plugin("durable-task:1.34"),
        _plugin("jackson2-api:2.11.0"),
        _plugin("kubernetes-client-api:4.9.2-1"),
        _plugin("kubernetes-credentials:0.6.2"),
        _plugin("plain-credentials:1.7"),
        _plugin("structs:1.20"),
        _plugin("variant:1.3"),
        _plugin("workflow-step-api:2.22"),
    ],
    _plugin("workflow-aggregator:2.6"): [
        _plugin("workflow-api:2.40"),
        _plugin("workflow-job:2.39"),
        _plugin("workflow-scm-step:2.11"),
        _plugin("workflow-step-api:2.22"),
    ],
    _plugin("workflow-job:2.39"): [
        _plugin("scm-api:2.6.3"),
        _plugin("structs:1.20"),
        _plugin("workflow-api:2.40"),
        _plugin("workflow-step-api:2.22"),
    ],
}


def base_plugins() -> Dict[Plugin, List[Plugin]]:
    """Get a copy of the bundled base plugin set."""
    return {root: list(plugins) for root, plugins in BASE_PLUGINS.items()}
