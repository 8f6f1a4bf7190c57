"""mobbuild configuration.

Centralised, typed configuration for the orchestrator, the providers and the
CLI.  All settings use Pydantic v2 models so they can be validated at
construction time and serialised to/from JSON or environment variables
without boiler-plate.
"""

from __future__ import annotations

import os
from pathlib import Path
from typing import Any

from pydantic import BaseModel, Field, field_validator


LOG_LEVELS: tuple[str, ...] = ("DEBUG", "INFO", "WARN", "ERROR")


class GitHubConfig(BaseModel):
    """Settings used when deploying a generated app to the github provider."""

    owner: str = Field(default="user", min_length=1, description="Account that owns new repositories")
    default_branch: str = Field(default="main", min_length=1)
    private: bool = Field(default=False, description="Create repositories as private")
    commit_message: str = Field(default="Initial commit: Generated app code")
    workflow: str = Field(default="ci-cd", description="Workflow template passed to setup-workflows")

    def repository_url(self, name: str) -> str:
        """Return the public URL a repository called *name* would live at."""
        return f"https://github.com/{self.owner}/{name}"


class BackendConfig(BaseModel):
    """Knobs for the generated Express backend."""

    port: int = Field(default=3000, ge=1, le=65535, description="Port the generated server listens on")


class Config(BaseModel):
    """Global mobbuild configuration.

    Instances are typically created once by the CLI entry point (or by
    ``Orchestrator`` when none is given) and then passed through the rest of
    the system.
    """

    log_level: str = Field(default="INFO", description="One of DEBUG, INFO, WARN, ERROR")
    github: GitHubConfig = Field(default_factory=GitHubConfig)
    backend: BackendConfig = Field(default_factory=BackendConfig)

    @field_validator("log_level", mode="before")
    @classmethod
    def _normalise_log_level(cls, value: Any) -> str:
        level = str(value).strip().upper()
        if level == "WARNING":
            level = "WARN"
        if level not in LOG_LEVELS:
            raise ValueError(f"log_level must be one of {', '.join(LOG_LEVELS)}, got {value!r}")
        return level

    # ------------------------------------------------------------------
    # Serialisation helpers
    # ------------------------------------------------------------------

    def save(self, path: Path) -> Path:
        """Persist the configuration to a JSON file.

        Args:
            path: Destination file.  Parent directories are created.

        Returns:
            The path where the file was written.
        """
        target = Path(path)
        target.parent.mkdir(parents=True, exist_ok=True)
        target.write_text(self.model_dump_json(indent=2), encoding="utf-8")
        return target

    @classmethod
    def load(cls, path: Path) -> "Config":
        """Load a previously-saved configuration from JSON."""
        raw = Path(path).read_text(encoding="utf-8")
        return cls.model_validate_json(raw)

    @classmethod
    def from_env(cls) -> "Config":
        """Build a ``Config`` from environment variables.

        Recognised variables (all optional):
            LOG_LEVEL, MOBBUILD_GITHUB_OWNER, MOBBUILD_DEFAULT_BRANCH,
            MOBBUILD_BACKEND_PORT.

        An unrecognised ``LOG_LEVEL`` falls back to ``INFO``.  A
        ``MOBBUILD_BACKEND_PORT`` that is not an integer in range raises
        ``pydantic.ValidationError``.
        """
        github_kwargs: dict[str, Any] = {}
        if os.environ.get("MOBBUILD_GITHUB_OWNER"):
            github_kwargs["owner"] = os.environ["MOBBUILD_GITHUB_OWNER"]
        if os.environ.get("MOBBUILD_DEFAULT_BRANCH"):
            github_kwargs["default_branch"] = os.environ["MOBBUILD_DEFAULT_BRANCH"]

        backend_kwargs: dict[str, Any] = {}
        if os.environ.get("MOBBUILD_BACKEND_PORT"):
            # Passed through as text; BackendConfig coerces and range-checks it.
            backend_kwargs["port"] = os.environ["MOBBUILD_BACKEND_PORT"]

        log_level = os.environ.get("LOG_LEVEL", "INFO").strip().upper()
        if log_level not in LOG_LEVELS and log_level != "WARNING":
            log_level = "INFO"

        return cls(
            log_level=log_level,
            github=GitHubConfig(**github_kwargs),
            backend=BackendConfig(**backend_kwargs),
        )
