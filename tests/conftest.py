"""Shared pytest fixtures for the mobbuild test suite.

Provides reusable fixtures for:
- Sample requirements (minimal and fully structured)
- Registries populated with the built-in providers
- Orchestrators wired to those registries
- Requirements text files on disk
"""

from __future__ import annotations

import textwrap
from pathlib import Path

import pytest

from mobbuild.config import Config
from mobbuild.models import (
    APIEndpointDefinition,
    AppRequirement,
    ColumnDefinition,
    TableDefinition,
    UIComponentDefinition,
)
from mobbuild.orchestrator import Orchestrator
from mobbuild.providers import default_providers
from mobbuild.registry import ProviderRegistry


# ---------------------------------------------------------------------------
# Requirements
# ---------------------------------------------------------------------------

@pytest.fixture
def blog_requirement() -> AppRequirement:
    """Valid requirement with no tables, endpoints or components."""
    return AppRequirement(name="Blog", description="A blog", features=["posts"])


@pytest.fixture
def shop_requirement() -> AppRequirement:
    """Valid requirement with every structured section supplied."""
    return AppRequirement(
        name="Shop",
        description="A small online shop",
        features=["catalogue", "orders"],
        database_tables=[
            TableDefinition(
                name="products",
                columns=[
                    ColumnDefinition(name="title", type="string", required=True),
                    ColumnDefinition(name="price", type="number", required=True),
                    ColumnDefinition(name="sku", type="string", unique=True),
                ],
            ),
            TableDefinition(
                name="orders",
                columns=[
                    ColumnDefinition(name="placed_at", type="date"),
                    ColumnDefinition(name="meta", type="json", required=False),
                ],
            ),
        ],
        api_endpoints=[
            APIEndpointDefinition(path="/api/products", method="GET", description="List products"),
            APIEndpointDefinition(
                path="/api/products",
                method="POST",
                description="Create product",
                request_body={"title": "string", "price": "number"},
            ),
            APIEndpointDefinition(
                path="/api/products/:id", method="DELETE", description="Delete product"
            ),
        ],
        ui_components=[
            UIComponentDefinition(
                name="ProductList", type="list", related_endpoints=["/api/products"]
            ),
            UIComponentDefinition(
                name="ProductForm",
                type="form",
                related_endpoints=["/api/products"],
                fields=["title", "price"],
            ),
            UIComponentDefinition(name="Dashboard", type="dashboard"),
        ],
    )


@pytest.fixture
def requirements_text() -> str:
    return textwrap.dedent(
        """\
        Name: Blog
        Description: A simple blog

        Features:
        - Posts
        - Comments
        """
    )


@pytest.fixture
def requirements_file(tmp_path: Path, requirements_text: str) -> Path:
    path = tmp_path / "requirements.txt"
    path.write_text(requirements_text, encoding="utf-8")
    return path


# ---------------------------------------------------------------------------
# Registry & orchestrator
# ---------------------------------------------------------------------------

@pytest.fixture
def make_registry():
    """Factory for registries populated with initialised providers.

    Usage:
        async def test_x(make_registry):
            registry = await make_registry()                 # built-ins
            registry = await make_registry(MyProvider())     # custom set
    """
    async def factory(*providers) -> ProviderRegistry:
        registry = ProviderRegistry()
        for provider in providers or default_providers():
            await registry.register(provider)
        return registry

    return factory


@pytest.fixture
def make_orchestrator(make_registry):
    """Factory for an ``Orchestrator`` over the built-in providers."""
    async def factory(config: Config | None = None) -> Orchestrator:
        registry = await make_registry()
        return Orchestrator(registry, config)

    return factory
