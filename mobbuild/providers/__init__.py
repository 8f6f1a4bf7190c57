"""mobbuild tool providers.

Each provider stands in for a real generation/deployment backend and exposes a
fixed menu of named operations.

Quick usage::

    from mobbuild.providers import default_providers
    from mobbuild.registry import ProviderRegistry

    registry = ProviderRegistry()
    for provider in default_providers():
        await registry.register(provider)
"""

from mobbuild.providers.backend import BACKEND_SERVICE, BackendProvider
from mobbuild.providers.base import ToolOperation, ToolProvider
from mobbuild.providers.database import DATABASE_SERVICE, DatabaseProvider
from mobbuild.providers.frontend import FRONTEND_SERVICE, FrontendProvider
from mobbuild.providers.github import GITHUB_SERVICE, GitHubProvider


def default_providers() -> list[ToolProvider]:
    """Return one fresh, uninitialised instance of every built-in provider."""
    return [
        BackendProvider(),
        FrontendProvider(),
        DatabaseProvider(),
        GitHubProvider(),
    ]


__all__ = [
    "BACKEND_SERVICE",
    "DATABASE_SERVICE",
    "FRONTEND_SERVICE",
    "GITHUB_SERVICE",
    "BackendProvider",
    "DatabaseProvider",
    "FrontendProvider",
    "GitHubProvider",
    "ToolOperation",
    "ToolProvider",
    "default_providers",
]
