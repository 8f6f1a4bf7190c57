"""Database generator: table DDL, schema entry file and initial migration."""

from __future__ import annotations

import logging
from typing import Any

from ..models import AppRequirement
from ..providers.database import DATABASE_SERVICE
from ..utils import sanitize_identifier
from .base import DomainGenerator, claim_path

logger = logging.getLogger(__name__)

MIGRATION_VERSION = "001"


class DatabaseGenerator(DomainGenerator):
    """Produces ``{"schema": {...}, "migrations": {...}}``.

    Schema files: ``tables/<table>.sql`` per table plus ``schema.sql``.
    Migration files: ``001_initial.sql``.
    """

    name = "database"

    async def _generate(self, requirement: AppRequirement) -> dict[str, Any]:
        tables = [t.model_dump(mode="json") for t in requirement.database_tables or []]
        schema: dict[str, str] = {}

        for table in tables:
            result = await self.registry.invoke(
                DATABASE_SERVICE,
                "create-table",
                {"name": table["name"], "columns": table["columns"]},
            )
            path = f"tables/{sanitize_identifier(table['name'])}.sql"
            claim_path(schema, path, result.get("code") or f"-- table {table['name']}", self.name)

        result = await self.registry.invoke(
            DATABASE_SERVICE,
            "generate-schema",
            {"name": requirement.name, "tables": [t["name"] for t in tables]},
        )
        schema["schema.sql"] = result.get("code") or f"-- schema for {requirement.name}"

        result = await self.registry.invoke(
            DATABASE_SERVICE,
            "setup-migrations",
            {"version": MIGRATION_VERSION, "operation": "create_tables", "tables": tables},
        )
        migrations = {
            f"{MIGRATION_VERSION}_initial.sql": result.get("code") or "-- initial migration",
        }

        logger.info("Database bundle: %d schema file(s), %d migration(s)", len(schema), len(migrations))
        return {"schema": schema, "migrations": migrations}
