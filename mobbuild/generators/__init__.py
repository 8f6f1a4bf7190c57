"""Domain code generators.

Each generator turns an ``AppRequirement`` into a bundle of
``relative path -> source text`` by calling the provider registry once per
table, endpoint or component.  ``ReactAppGenerator`` is an extension that is
registered with the orchestrator rather than run by it.

Quick usage::

    from mobbuild.generators import BackendGenerator

    files = await BackendGenerator(registry).generate(requirement)
"""

from mobbuild.generators.backend import BackendGenerator
from mobbuild.generators.base import CodeGenerator, DomainGenerator
from mobbuild.generators.database import DatabaseGenerator
from mobbuild.generators.defaults import (
    DEFAULT_COMPONENTS,
    DEFAULT_ENDPOINTS,
    DEFAULT_TABLES,
    with_defaults,
)
from mobbuild.generators.frontend import FrontendGenerator
from mobbuild.generators.react_app import ReactAppGenerator

__all__ = [
    "BackendGenerator",
    "CodeGenerator",
    "DEFAULT_COMPONENTS",
    "DEFAULT_ENDPOINTS",
    "DEFAULT_TABLES",
    "DatabaseGenerator",
    "DomainGenerator",
    "FrontendGenerator",
    "ReactAppGenerator",
    "with_defaults",
]
