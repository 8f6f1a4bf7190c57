"""Database tool provider.

Renders PostgreSQL DDL for flat tables, a schema entry file, and migration
scripts.
"""

from __future__ import annotations

from typing import Any

from .base import Payload, ToolOperation, ToolProvider
from ..utils import sanitize_identifier

DATABASE_SERVICE = "database-service"

SQL_TYPES: dict[str, str] = {
    "string": "VARCHAR(255)",
    "number": "NUMERIC",
    "boolean": "BOOLEAN",
    "date": "TIMESTAMP",
    "text": "TEXT",
    "json": "JSONB",
}

_TABLE_TEMPLATE = """\
CREATE TABLE IF NOT EXISTS {{ table }} (
{% for column in columns %}
  {{ column }}{{ "," if not loop.last else "" }}
{% endfor %}
);
"""

_SCHEMA_TEMPLATE = """\
-- Schema for {{ name }}
-- Load with: psql -f schema.sql
{% for table in tables %}
\\ir tables/{{ table }}.sql
{% endfor %}
"""

_MIGRATION_TEMPLATE = """\
-- Migration {{ version }}: {{ operation }}
BEGIN;

{% for ddl in statements %}
{{ ddl }}
{% endfor %}
COMMIT;
"""


def _column_sql(column: dict[str, Any]) -> str:
    name = sanitize_identifier(str(column["name"]))
    if name == "id":
        return "id SERIAL PRIMARY KEY"
    sql_type = SQL_TYPES.get(str(column.get("type", "string")), "TEXT")
    parts = [name, sql_type]
    if column.get("required", True):
        parts.append("NOT NULL")
    if column.get("unique", False):
        parts.append("UNIQUE")
    return " ".join(parts)


def _table_name(table: Any) -> str:
    if isinstance(table, dict):
        return sanitize_identifier(str(table["name"]))
    return sanitize_identifier(str(table))


class DatabaseProvider(ToolProvider):
    """Generates table DDL, schema entry files, and migrations."""

    name = DATABASE_SERVICE

    def _build_operations(self) -> list[ToolOperation]:
        return [
            ToolOperation(
                name="generate-schema",
                description="Generate the schema entry file that loads every table",
                handler=self._generate_schema,
                input_schema={"name": "string", "tables": "array"},
                required=("tables",),
            ),
            ToolOperation(
                name="create-table",
                description="Generate CREATE TABLE DDL for one table",
                handler=self._create_table,
                input_schema={"name": "string", "columns": "array"},
                required=("name",),
            ),
            ToolOperation(
                name="setup-migrations",
                description="Generate a migration script",
                handler=self._setup_migrations,
                input_schema={"version": "string", "operation": "string", "tables": "array"},
                required=("version",),
            ),
        ]

    def _render_table(self, table: dict[str, Any]) -> str:
        columns = [_column_sql(c) for c in table.get("columns") or []]
        if not any(c.startswith("id ") for c in columns):
            columns.insert(0, "id SERIAL PRIMARY KEY")
        return self.renderer.render_string(
            _TABLE_TEMPLATE, {"table": _table_name(table), "columns": columns}
        )

    async def _create_table(self, payload: Payload) -> Payload:
        table = _table_name(payload["name"])
        code = self._render_table({"name": table, "columns": payload.get("columns") or []})
        return {
            "success": True,
            "file": f"tables/{table}.sql",
            "code": code,
            "table": table,
            "columns_count": len(payload.get("columns") or []),
        }

    async def _generate_schema(self, payload: Payload) -> Payload:
        tables = [_table_name(t) for t in payload["tables"]]
        code = self.renderer.render_string(
            _SCHEMA_TEMPLATE,
            {"name": payload.get("name") or "app", "tables": tables},
        )
        return {
            "success": True,
            "file": "schema.sql",
            "code": code,
            "tables": tables,
        }

    async def _setup_migrations(self, payload: Payload) -> Payload:
        version = str(payload["version"])
        operation = str(payload.get("operation") or "create_tables")
        tables = [t for t in payload.get("tables") or [] if isinstance(t, dict)]
        statements = [self._render_table(t) for t in tables]
        code = self.renderer.render_string(
            _MIGRATION_TEMPLATE,
            {"version": version, "operation": operation, "statements": statements},
        )
        return {
            "success": True,
            "file": f"{version}_initial.sql",
            "code": code,
            "version": version,
            "operation": operation,
        }
