"""mobbuild -- scaffold a frontend, backend and database from an app requirement.

Quick usage::

    from mobbuild import Orchestrator, ProviderRegistry, default_providers

    registry = ProviderRegistry()
    for provider in default_providers():
        await registry.register(provider)

    orchestrator = Orchestrator(registry)
    requirement = await orchestrator.parse("Name: Blog\\nDescription: A blog\\nFeatures:\\n- posts")
    app = await orchestrator.generate(requirement)
"""

from mobbuild.config import Config
from mobbuild.models import AppRequirement, GeneratedApp, OrchestrationContext
from mobbuild.orchestrator import Orchestrator
from mobbuild.providers import default_providers
from mobbuild.registry import ProviderRegistry

__version__ = "0.1.0"

__all__ = [
    "AppRequirement",
    "Config",
    "GeneratedApp",
    "OrchestrationContext",
    "Orchestrator",
    "ProviderRegistry",
    "default_providers",
]
