"""Unit tests for DatabaseGenerator (mobbuild.generators.database)."""

from __future__ import annotations

import pytest

from mobbuild.errors import GenerationError, ProviderNotFoundError
from mobbuild.generators.database import MIGRATION_VERSION, DatabaseGenerator
from mobbuild.providers.backend import BackendProvider


class TestDatabaseGenerator:
    @pytest.mark.unit
    @pytest.mark.asyncio
    async def test_default_users_table(self, make_registry, blog_requirement):
        registry = await make_registry()
        bundle = await DatabaseGenerator(registry).generate(blog_requirement)

        assert set(bundle) == {"schema", "migrations"}
        assert set(bundle["schema"]) == {"tables/users.sql", "schema.sql"}
        assert set(bundle["migrations"]) == {f"{MIGRATION_VERSION}_initial.sql"}
        users = bundle["schema"]["tables/users.sql"]
        assert "email VARCHAR(255) NOT NULL UNIQUE" in users
        assert "created_at TIMESTAMP NOT NULL" in users

    @pytest.mark.unit
    @pytest.mark.asyncio
    async def test_one_file_per_table(self, make_registry, shop_requirement):
        registry = await make_registry()
        bundle = await DatabaseGenerator(registry).generate(shop_requirement)

        assert set(bundle["schema"]) == {
            "tables/products.sql",
            "tables/orders.sql",
            "schema.sql",
        }
        assert "\\ir tables/orders.sql" in bundle["schema"]["schema.sql"]
        migration = bundle["migrations"]["001_initial.sql"]
        assert "CREATE TABLE IF NOT EXISTS products" in migration
        assert "CREATE TABLE IF NOT EXISTS orders" in migration

    @pytest.mark.unit
    @pytest.mark.asyncio
    async def test_empty_tables_still_produce_schema(self, make_registry, blog_requirement):
        registry = await make_registry()
        requirement = blog_requirement.model_copy(update={"database_tables": []})
        bundle = await DatabaseGenerator(registry).generate(requirement)
        assert list(bundle["schema"]) == ["schema.sql"]

    @pytest.mark.unit
    @pytest.mark.asyncio
    async def test_missing_provider_wrapped(self, make_registry, blog_requirement):
        registry = await make_registry(BackendProvider())
        with pytest.raises(GenerationError, match="database generation failed") as exc_info:
            await DatabaseGenerator(registry).generate(blog_requirement)
        assert isinstance(exc_info.value.__cause__, ProviderNotFoundError)
        assert exc_info.value.generator == "database"
