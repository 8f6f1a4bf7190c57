"""Unit tests for the data model (mobbuild.models).

Tests cover:
- APIEndpointDefinition validation (path, method normalisation, description)
- UIComponentDefinition validation (name pattern, related endpoints)
- AppRequirement uniqueness invariants (endpoints, tables, components) and immutability
- GeneratedApp status transitions and all_files flattening
- OrchestrationContext phase transitions
"""

from __future__ import annotations

import pytest
from pydantic import ValidationError

from mobbuild.models import (
    APIEndpointDefinition,
    AppRequirement,
    AppStatus,
    ColumnDefinition,
    ColumnType,
    DatabaseBundle,
    GeneratedApp,
    HTTPMethod,
    OrchestrationContext,
    Phase,
    TableDefinition,
    UIComponentDefinition,
)

pytestmark = pytest.mark.unit


# ---------------------------------------------------------------------------
# Endpoints
# ---------------------------------------------------------------------------


class TestAPIEndpointDefinition:
    def test_method_is_normalised(self):
        endpoint = APIEndpointDefinition(path="/api/x", method="patch", description="Patch x")
        assert endpoint.method is HTTPMethod.PATCH

    def test_path_must_start_with_slash(self):
        with pytest.raises(ValidationError):
            APIEndpointDefinition(path="api/x", method="GET", description="x")

    def test_blank_description_rejected(self):
        with pytest.raises(ValidationError):
            APIEndpointDefinition(path="/api/x", method="GET", description="   ")

    def test_unknown_method_rejected(self):
        with pytest.raises(ValidationError):
            APIEndpointDefinition(path="/api/x", method="OPTIONS", description="x")

    def test_key(self):
        endpoint = APIEndpointDefinition(path="/api/x/:id", method="DELETE", description="x")
        assert endpoint.key == "DELETE /api/x/:id"


# ---------------------------------------------------------------------------
# Components
# ---------------------------------------------------------------------------


class TestUIComponentDefinition:
    @pytest.mark.parametrize("name", ["userList", "User List", "1User", "User-List", ""])
    def test_invalid_names_rejected(self, name: str):
        with pytest.raises(ValidationError):
            UIComponentDefinition(name=name, type="list", related_endpoints=["/api/users"])

    @pytest.mark.parametrize("component_type", ["list", "form", "detail"])
    def test_endpoints_required_for_data_components(self, component_type: str):
        with pytest.raises(ValidationError):
            UIComponentDefinition(name="Thing", type=component_type)

    @pytest.mark.parametrize("component_type", ["page", "dashboard"])
    def test_endpoints_optional_for_pages_and_dashboards(self, component_type: str):
        component = UIComponentDefinition(name="Home", type=component_type)
        assert component.related_endpoints == []


# ---------------------------------------------------------------------------
# AppRequirement
# ---------------------------------------------------------------------------


class TestAppRequirement:
    def test_blank_fields_accepted(self):
        requirement = AppRequirement()
        assert requirement.name == ""
        assert requirement.features == []
        assert requirement.api_endpoints is None

    def test_duplicate_method_path_rejected(self):
        with pytest.raises(ValidationError, match="duplicate endpoint"):
            AppRequirement(
                name="x",
                description="x",
                features=["x"],
                api_endpoints=[
                    {"path": "/api/a", "method": "GET", "description": "one"},
                    {"path": "/api/a", "method": "get", "description": "two"},
                ],
            )

    def test_same_path_different_methods_allowed(self):
        requirement = AppRequirement(
            name="x",
            description="x",
            features=["x"],
            api_endpoints=[
                {"path": "/api/a", "method": "GET", "description": "list"},
                {"path": "/api/a", "method": "POST", "description": "create"},
            ],
        )
        assert len(requirement.api_endpoints) == 2

    def test_duplicate_component_names_rejected(self):
        with pytest.raises(ValidationError, match="duplicate component"):
            AppRequirement(
                name="x",
                description="x",
                features=["x"],
                ui_components=[
                    {"name": "Home", "type": "page"},
                    {"name": "Home", "type": "dashboard"},
                ],
            )

    def test_repeated_table_name_rejected(self):
        with pytest.raises(ValidationError, match="duplicate table names: users"):
            AppRequirement(
                name="x",
                description="x",
                features=["x"],
                database_tables=[{"name": "users"}, {"name": "users"}],
            )

    def test_table_names_equal_after_sanitising_rejected(self):
        with pytest.raises(ValidationError, match="duplicate table names: user-s, user_s"):
            AppRequirement(
                name="x",
                description="x",
                features=["x"],
                database_tables=[{"name": "user-s"}, {"name": "user_s"}],
            )

    def test_distinct_table_names_accepted(self):
        requirement = AppRequirement(
            name="x",
            description="x",
            features=["x"],
            database_tables=[{"name": "users"}, {"name": "user_roles"}],
        )
        assert [t.name for t in requirement.database_tables] == ["users", "user_roles"]

    def test_column_names_equal_after_sanitising_rejected(self):
        with pytest.raises(ValidationError, match="duplicate column names in users"):
            TableDefinition(name="users", columns=[{"name": "first-name"}, {"name": "first_name"}])

    def test_frozen(self, blog_requirement: AppRequirement):
        with pytest.raises(ValidationError):
            blog_requirement.name = "Other"

    def test_column_defaults(self):
        column = ColumnDefinition(name="title")
        assert column.type is ColumnType.STRING
        assert column.required is True
        assert column.unique is False


# ---------------------------------------------------------------------------
# GeneratedApp
# ---------------------------------------------------------------------------


def _app(**kwargs) -> GeneratedApp:
    requirement = AppRequirement(name="Blog", description="A blog", features=["posts"])
    return GeneratedApp(id="app-1", name="Blog", requirement=requirement, **kwargs)


class TestGeneratedApp:
    def test_defaults(self):
        app = _app()
        assert app.status is AppStatus.GENERATED
        assert app.github.default_branch == "main"
        assert app.github.repository_url is None
        assert app.created_at.tzinfo is not None

    def test_forward_transitions(self):
        app = _app()
        app.advance_status(AppStatus.DEPLOYING)
        app.advance_status(AppStatus.DEPLOYED)
        assert app.status is AppStatus.DEPLOYED

    def test_backward_transition_rejected(self):
        app = _app()
        app.advance_status(AppStatus.DEPLOYING)
        with pytest.raises(ValueError):
            app.advance_status(AppStatus.GENERATED)

    def test_failed_is_terminal(self):
        app = _app()
        app.advance_status(AppStatus.FAILED)
        with pytest.raises(ValueError):
            app.advance_status(AppStatus.DEPLOYED)

    def test_deployed_is_terminal(self):
        app = _app(status=AppStatus.DEPLOYED)
        with pytest.raises(ValueError):
            app.advance_status(AppStatus.FAILED)

    def test_all_files_prefixes_every_bundle(self):
        app = _app(
            frontend={"code": {"App.tsx": "a"}},
            backend={"code": {"index.ts": "b"}},
            database=DatabaseBundle(schema={"schema.sql": "c"}, migrations={"001_initial.sql": "d"}),
        )
        assert app.all_files() == [
            {"path": "frontend/App.tsx", "content": "a"},
            {"path": "backend/index.ts", "content": "b"},
            {"path": "database/schema/schema.sql", "content": "c"},
            {"path": "database/migrations/001_initial.sql", "content": "d"},
        ]

    def test_database_bundle_dumps_schema_alias(self):
        bundle = DatabaseBundle(schema={"schema.sql": "x"})
        assert bundle.model_dump(by_alias=True)["schema"] == {"schema.sql": "x"}


# ---------------------------------------------------------------------------
# OrchestrationContext
# ---------------------------------------------------------------------------


class TestOrchestrationContext:
    def test_defaults(self, blog_requirement: AppRequirement):
        context = OrchestrationContext(app_id="app-1", requirement=blog_requirement)
        assert context.current_phase is Phase.PLANNING
        assert context.errors == []
        assert context.generated_app is None

    def test_phase_advances(self, blog_requirement: AppRequirement):
        context = OrchestrationContext(app_id="app-1", requirement=blog_requirement)
        context.advance_phase(Phase.GENERATING)
        context.advance_phase(Phase.DEPLOYING)
        assert context.current_phase is Phase.DEPLOYING

    def test_phase_never_regresses(self, blog_requirement: AppRequirement):
        context = OrchestrationContext(app_id="app-1", requirement=blog_requirement)
        context.advance_phase(Phase.DEPLOYING)
        with pytest.raises(ValueError):
            context.advance_phase(Phase.PLANNING)
