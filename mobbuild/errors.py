"""Exception hierarchy for mobbuild.

Registry-level failures derive from ``ProviderError``; failures raised by the
orchestration workflow derive from ``OrchestrationError``.  Both share the
``MobBuildError`` base so the CLI can report any of them uniformly.
"""

from __future__ import annotations


class MobBuildError(Exception):
    """Base class for every error raised by mobbuild."""


# ---------------------------------------------------------------------------
# Provider / registry errors
# ---------------------------------------------------------------------------


class ProviderError(MobBuildError):
    """Raised when a tool provider cannot serve a request."""

    def __init__(self, provider: str, message: str) -> None:
        self.provider = provider
        super().__init__(f"{provider}: {message}")


class ProviderNotFoundError(ProviderError):
    """No provider is registered under the requested name."""

    def __init__(self, provider: str) -> None:
        super().__init__(provider, "provider not found")


class ProviderUnhealthyError(ProviderError):
    """The provider's liveness probe reported ``False``."""

    def __init__(self, provider: str) -> None:
        super().__init__(provider, "provider is not healthy")


class OperationNotFoundError(ProviderError):
    """The provider exposes no operation with the requested name."""

    def __init__(self, provider: str, operation: str) -> None:
        self.operation = operation
        super().__init__(provider, f"operation '{operation}' not found")


class ProviderNotInitializedError(ProviderError):
    """An operation was executed before ``initialize()`` completed."""

    def __init__(self, provider: str) -> None:
        super().__init__(provider, "provider is not initialized")


class OperationInputError(ProviderError):
    """The input mapping handed to an operation is missing required keys."""

    def __init__(self, provider: str, operation: str, missing: list[str]) -> None:
        self.operation = operation
        self.missing = missing
        super().__init__(
            provider,
            f"operation '{operation}' missing required input: {', '.join(missing)}",
        )


# ---------------------------------------------------------------------------
# Orchestration errors
# ---------------------------------------------------------------------------


class OrchestrationError(MobBuildError):
    """Raised when a plan/generate/deploy step fails."""


class PlanningError(OrchestrationError):
    """The requirement failed validation during planning."""

    def __init__(self, app_id: str, errors: list[str]) -> None:
        self.app_id = app_id
        self.errors = list(errors)
        super().__init__(f"Planning failed: {', '.join(errors)}")


class GenerationError(OrchestrationError):
    """A domain generator aborted because a provider call failed."""

    def __init__(self, generator: str, message: str) -> None:
        self.generator = generator
        super().__init__(f"{generator} generation failed: {message}")


class DeploymentError(OrchestrationError):
    """A github-service call failed while deploying a generated app."""

    def __init__(self, app_name: str, message: str) -> None:
        self.app_name = app_name
        super().__init__(f"Deployment of '{app_name}' failed: {message}")
