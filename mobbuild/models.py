"""Pydantic v2 models for mobbuild.

Defines the requirement records handed to the generators, the generated app
aggregate, and the orchestration context tracked per app-generation attempt.
"""

from __future__ import annotations

import re
from datetime import datetime, timezone
from enum import Enum
from typing import Any, Literal, Optional

from pydantic import BaseModel, ConfigDict, Field, field_validator, model_validator

from .utils import sanitize_identifier


# ---------------------------------------------------------------------------
# Enumerations
# ---------------------------------------------------------------------------

class ColumnType(str, Enum):
    """Semantic column types understood by the database provider."""
    STRING = "string"
    NUMBER = "number"
    BOOLEAN = "boolean"
    DATE = "date"
    TEXT = "text"
    JSON = "json"


class HTTPMethod(str, Enum):
    """Supported HTTP methods for API endpoints."""
    GET = "GET"
    POST = "POST"
    PUT = "PUT"
    PATCH = "PATCH"
    DELETE = "DELETE"


class ComponentType(str, Enum):
    """Kinds of UI component the frontend provider can render."""
    PAGE = "page"
    FORM = "form"
    LIST = "list"
    DETAIL = "detail"
    DASHBOARD = "dashboard"


class Phase(str, Enum):
    """Coarse progress marker of an orchestration context."""
    PLANNING = "planning"
    GENERATING = "generating"
    DEPLOYING = "deploying"


class AppStatus(str, Enum):
    """Progress marker of a generated app."""
    PLANNING = "planning"
    GENERATING = "generating"
    GENERATED = "generated"
    DEPLOYING = "deploying"
    DEPLOYED = "deployed"
    FAILED = "failed"


_PHASE_ORDER: list[Phase] = [Phase.PLANNING, Phase.GENERATING, Phase.DEPLOYING]

_STATUS_ORDER: list[AppStatus] = [
    AppStatus.PLANNING,
    AppStatus.GENERATING,
    AppStatus.GENERATED,
    AppStatus.DEPLOYING,
    AppStatus.DEPLOYED,
]

_TERMINAL_STATUSES = {AppStatus.DEPLOYED, AppStatus.FAILED}

_COMPONENT_NAME_PATTERN = re.compile(r"^[A-Z][A-Za-z0-9]*$")

# Component types that may be rendered without any backing endpoint.
_STANDALONE_COMPONENT_TYPES = {ComponentType.PAGE, ComponentType.DASHBOARD}


# ---------------------------------------------------------------------------
# Requirement models
# ---------------------------------------------------------------------------

def _colliding_identifiers(names) -> list[str]:
    """Names that clash once sanitised (``user-s`` and ``user_s`` both become ``user_s``)."""
    groups: dict[str, list[str]] = {}
    for name in names:
        groups.setdefault(sanitize_identifier(name), []).append(name)
    return sorted({n for group in groups.values() if len(group) > 1 for n in group})


class ColumnDefinition(BaseModel):
    """A single column of a flat table."""
    model_config = ConfigDict(frozen=True)

    name: str = Field(..., min_length=1, description="Column name")
    type: ColumnType = Field(default=ColumnType.STRING, description="Semantic column type")
    required: bool = Field(default=True, description="Whether the column is NOT NULL")
    unique: bool = Field(default=False, description="Whether values must be unique")


class TableDefinition(BaseModel):
    """A database table: a name plus its ordered columns."""
    model_config = ConfigDict(frozen=True)

    name: str = Field(..., min_length=1, description="Table name")
    columns: list[ColumnDefinition] = Field(default_factory=list, description="Ordered columns")

    @model_validator(mode="after")
    def _unique_columns(self) -> "TableDefinition":
        duplicates = _colliding_identifiers(c.name for c in self.columns)
        if duplicates:
            raise ValueError(f"duplicate column names in {self.name}: {', '.join(duplicates)}")
        return self


class APIEndpointDefinition(BaseModel):
    """A single REST endpoint the backend should expose."""
    model_config = ConfigDict(frozen=True)

    path: str = Field(..., description="URL path, e.g. '/api/users/:id'")
    method: HTTPMethod = Field(..., description="HTTP method")
    description: str = Field(..., description="What this endpoint does")
    request_body: Optional[dict[str, Any]] = Field(
        default=None, description="Shape hint for the request body"
    )
    response_body: Optional[dict[str, Any]] = Field(
        default=None, description="Shape hint for the response body"
    )

    @field_validator("method", mode="before")
    @classmethod
    def _normalise_method(cls, value: Any) -> Any:
        if isinstance(value, str):
            return value.strip().upper()
        return value

    @field_validator("path")
    @classmethod
    def _path_is_absolute(cls, value: str) -> str:
        if not value.startswith("/"):
            raise ValueError(f"endpoint path must start with '/': {value!r}")
        return value

    @field_validator("description")
    @classmethod
    def _description_not_blank(cls, value: str) -> str:
        if not value.strip():
            raise ValueError("endpoint description must not be blank")
        return value

    @property
    def key(self) -> str:
        """``"METHOD /path"`` -- unique within a requirement."""
        return f"{self.method.value} {self.path}"


class UIComponentDefinition(BaseModel):
    """A UI component the frontend should render."""
    model_config = ConfigDict(frozen=True)

    name: str = Field(..., description="PascalCase component name")
    type: ComponentType = Field(..., description="Component kind")
    related_endpoints: list[str] = Field(
        default_factory=list, description="Paths of the endpoints this component uses"
    )
    fields: Optional[list[str]] = Field(default=None, description="Explicit field list")

    @field_validator("name")
    @classmethod
    def _name_is_pascal_case(cls, value: str) -> str:
        if not _COMPONENT_NAME_PATTERN.match(value):
            raise ValueError(f"component name must be a capitalised identifier: {value!r}")
        return value

    @model_validator(mode="after")
    def _endpoints_required(self) -> "UIComponentDefinition":
        if not self.related_endpoints and self.type not in _STANDALONE_COMPONENT_TYPES:
            raise ValueError(
                f"component {self.name!r} of type {self.type.value!r} "
                "needs at least one related endpoint"
            )
        return self


class AppRequirement(BaseModel):
    """User-supplied intent for one application.

    Blank names, blank descriptions, and empty feature lists are accepted
    here; ``Orchestrator.plan`` reports them as accumulated errors.
    """
    model_config = ConfigDict(frozen=True)

    name: str = Field(default="", description="Application name")
    description: str = Field(default="", description="Application description")
    features: list[str] = Field(default_factory=list, description="Free-text feature list")
    database_tables: Optional[list[TableDefinition]] = Field(default=None)
    api_endpoints: Optional[list[APIEndpointDefinition]] = Field(default=None)
    ui_components: Optional[list[UIComponentDefinition]] = Field(default=None)

    @model_validator(mode="after")
    def _unique_definitions(self) -> "AppRequirement":
        seen: set[str] = set()
        for endpoint in self.api_endpoints or []:
            if endpoint.key in seen:
                raise ValueError(f"duplicate endpoint: {endpoint.key}")
            seen.add(endpoint.key)

        tables = _colliding_identifiers(t.name for t in self.database_tables or [])
        if tables:
            raise ValueError(f"duplicate table names: {', '.join(tables)}")

        names = [c.name for c in self.ui_components or []]
        duplicates = sorted({n for n in names if names.count(n) > 1})
        if duplicates:
            raise ValueError(f"duplicate component names: {', '.join(duplicates)}")
        return self


# ---------------------------------------------------------------------------
# Generated app
# ---------------------------------------------------------------------------

class FrontendBundle(BaseModel):
    language: Literal["typescript"] = "typescript"
    framework: Literal["react"] = "react"
    code: dict[str, str] = Field(default_factory=dict)


class BackendBundle(BaseModel):
    language: Literal["typescript"] = "typescript"
    framework: Literal["express"] = "express"
    code: dict[str, str] = Field(default_factory=dict)


class DatabaseBundle(BaseModel):
    type: Literal["postgresql"] = "postgresql"
    schema_files: dict[str, str] = Field(default_factory=dict, alias="schema")
    migrations: dict[str, str] = Field(default_factory=dict)

    model_config = ConfigDict(populate_by_name=True)


class GitHubRecord(BaseModel):
    repository_url: Optional[str] = None
    default_branch: str = "main"


class GeneratedApp(BaseModel):
    """The aggregate produced by a successful generation run."""

    id: str
    name: str
    requirement: AppRequirement
    frontend: FrontendBundle = Field(default_factory=FrontendBundle)
    backend: BackendBundle = Field(default_factory=BackendBundle)
    database: DatabaseBundle = Field(default_factory=DatabaseBundle)
    github: GitHubRecord = Field(default_factory=GitHubRecord)
    created_at: datetime = Field(default_factory=lambda: datetime.now(timezone.utc))
    status: AppStatus = AppStatus.GENERATED

    def advance_status(self, status: AppStatus) -> None:
        """Move the status forward.

        ``failed`` can be entered from any non-terminal status.  Nothing
        leaves ``deployed`` or ``failed``.

        Raises:
            ValueError: If the transition would move backwards.
        """
        if self.status in _TERMINAL_STATUSES:
            raise ValueError(f"app {self.id} is already {self.status.value}")
        if status is AppStatus.FAILED:
            self.status = status
            return
        if _STATUS_ORDER.index(status) < _STATUS_ORDER.index(self.status):
            raise ValueError(
                f"cannot move app {self.id} from {self.status.value} to {status.value}"
            )
        self.status = status

    def all_files(self) -> list[dict[str, str]]:
        """Flatten every bundle into ``{"path", "content"}`` entries.

        Paths are prefixed by bundle: ``frontend/``, ``backend/``,
        ``database/schema/`` and ``database/migrations/``.
        """
        files: list[dict[str, str]] = []
        for prefix, code in (
            ("frontend/", self.frontend.code),
            ("backend/", self.backend.code),
            ("database/schema/", self.database.schema_files),
            ("database/migrations/", self.database.migrations),
        ):
            for path, content in code.items():
                files.append({"path": f"{prefix}{path}", "content": content})
        return files


# ---------------------------------------------------------------------------
# Orchestration context
# ---------------------------------------------------------------------------

class OrchestrationContext(BaseModel):
    """Tracked record of one app-generation attempt."""

    app_id: str
    requirement: AppRequirement
    current_phase: Phase = Phase.PLANNING
    errors: list[str] = Field(default_factory=list)
    generated_app: Optional[GeneratedApp] = None

    def advance_phase(self, phase: Phase) -> None:
        """Move the phase forward; staying in place is allowed.

        Raises:
            ValueError: If *phase* is earlier than the current phase.
        """
        if _PHASE_ORDER.index(phase) < _PHASE_ORDER.index(self.current_phase):
            raise ValueError(
                f"cannot move context {self.app_id} from "
                f"{self.current_phase.value} back to {phase.value}"
            )
        self.current_phase = phase
