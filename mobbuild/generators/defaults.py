"""Fallback configuration for requirements that omit structure.

A requirement parsed from free text carries no tables, endpoints or
components.  :func:`with_defaults` fills each absent section with the
synthetic ``users`` resource below so that the generators only ever see a
fully-specified requirement.  Sections that are present (even if empty) are
left alone.
"""

from __future__ import annotations

from ..models import (
    APIEndpointDefinition,
    AppRequirement,
    ColumnDefinition,
    ColumnType,
    ComponentType,
    HTTPMethod,
    TableDefinition,
    UIComponentDefinition,
)

DEFAULT_TABLES: tuple[TableDefinition, ...] = (
    TableDefinition(
        name="users",
        columns=[
            ColumnDefinition(name="id", type=ColumnType.NUMBER, required=True, unique=True),
            ColumnDefinition(name="email", type=ColumnType.STRING, required=True, unique=True),
            ColumnDefinition(name="name", type=ColumnType.STRING, required=True),
            ColumnDefinition(name="created_at", type=ColumnType.DATE, required=True),
        ],
    ),
)

DEFAULT_ENDPOINTS: tuple[APIEndpointDefinition, ...] = (
    APIEndpointDefinition(path="/api/users", method=HTTPMethod.GET, description="Get all users"),
    APIEndpointDefinition(
        path="/api/users/:id", method=HTTPMethod.GET, description="Get user by ID"
    ),
)

DEFAULT_COMPONENTS: tuple[UIComponentDefinition, ...] = (
    UIComponentDefinition(
        name="UserList", type=ComponentType.LIST, related_endpoints=["/api/users"]
    ),
    UIComponentDefinition(
        name="UserDetail", type=ComponentType.DETAIL, related_endpoints=["/api/users/:id"]
    ),
)


def with_defaults(requirement: AppRequirement) -> AppRequirement:
    """Return *requirement* with every ``None`` section replaced by its default."""
    update = {}
    if requirement.database_tables is None:
        update["database_tables"] = list(DEFAULT_TABLES)
    if requirement.api_endpoints is None:
        update["api_endpoints"] = list(DEFAULT_ENDPOINTS)
    if requirement.ui_components is None:
        update["ui_components"] = list(DEFAULT_COMPONENTS)
    if not update:
        return requirement
    return requirement.model_copy(update=update)
