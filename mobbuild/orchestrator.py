"""mobbuild orchestration coordinator.

Implements the plan -> generate -> deploy workflow:

PLANNING   -- allocate an app id, track a context, validate the requirement.
GENERATING -- run the database, backend and frontend generators in sequence.
DEPLOYING  -- create a repository, commit every generated file, install CI.

Validation problems found while planning are accumulated on the context and
returned; every later failure is raised to the caller.

Usage::

    registry = ProviderRegistry()
    for provider in default_providers():
        await registry.register(provider)

    orchestrator = Orchestrator(registry)
    app = await orchestrator.orchestrate(requirement)
"""

from __future__ import annotations

import asyncio
import logging
import secrets
import string
import time
from collections.abc import Mapping
from types import MappingProxyType

from .config import Config
from .errors import DeploymentError, GenerationError, PlanningError
from .generators import BackendGenerator, CodeGenerator, DatabaseGenerator, FrontendGenerator
from .models import (
    AppRequirement,
    AppStatus,
    BackendBundle,
    DatabaseBundle,
    FrontendBundle,
    GeneratedApp,
    GitHubRecord,
    OrchestrationContext,
    Phase,
)
from .parser import parse_requirement
from .providers.github import GITHUB_SERVICE
from .registry import ProviderRegistry
from .store import AppContextStore

logger = logging.getLogger(__name__)

_ID_ALPHABET = string.digits + string.ascii_lowercase

ERROR_NAME_REQUIRED = "App name is required"
ERROR_DESCRIPTION_REQUIRED = "App description is required"
ERROR_FEATURES_REQUIRED = "At least one feature is required"


def generate_app_id() -> str:
    """Return ``app-<epoch ms>-<9 random base36 chars>``."""
    suffix = "".join(secrets.choice(_ID_ALPHABET) for _ in range(9))
    return f"app-{int(time.time() * 1000)}-{suffix}"


def validate_requirement(requirement: AppRequirement) -> list[str]:
    """Run every planning check and return one message per failed check."""
    errors: list[str] = []
    if not requirement.name.strip():
        errors.append(ERROR_NAME_REQUIRED)
    if not requirement.description.strip():
        errors.append(ERROR_DESCRIPTION_REQUIRED)
    if not requirement.features:
        errors.append(ERROR_FEATURES_REQUIRED)
    return errors


class Orchestrator:
    """Facade over parsing, planning, generation and deployment.

    Attributes:
        registry: Provider registry every generator and deploy call goes through.
        config: Global configuration.
        store: Contexts tracked by this orchestrator, keyed by app id.
    """

    def __init__(
        self,
        registry: ProviderRegistry,
        config: Config | None = None,
        store: AppContextStore | None = None,
    ) -> None:
        self.registry = registry
        self.config = config or Config()
        self.store = store if store is not None else AppContextStore()
        self.database_generator = DatabaseGenerator(registry, self.config)
        self.backend_generator = BackendGenerator(registry, self.config)
        self.frontend_generator = FrontendGenerator(registry, self.config)
        self._generators: dict[str, CodeGenerator] = {}
        logger.info("Orchestrator initialized")

    # ------------------------------------------------------------------
    # Parsing & planning
    # ------------------------------------------------------------------

    async def parse(self, text: str) -> AppRequirement:
        """Parse free text into an ``AppRequirement`` (see :mod:`mobbuild.parser`)."""
        logger.info("Parsing user requirement from input")
        await asyncio.sleep(0)
        requirement = parse_requirement(text)
        logger.info("Parsed requirement for app: %s", requirement.name)
        return requirement

    async def plan(self, requirement: AppRequirement) -> OrchestrationContext:
        """Create and track a context for *requirement*, then validate it.

        The context is returned whether or not validation passed; callers
        must inspect ``context.errors``.
        """
        logger.info("Planning generation for app: %s", requirement.name)
        context = OrchestrationContext(app_id=generate_app_id(), requirement=requirement)
        self.store.put(context)

        context.errors.extend(validate_requirement(requirement))
        await asyncio.sleep(0)

        logger.info(
            "Planning completed for app %s. Errors: %d", context.app_id, len(context.errors)
        )
        return context

    @staticmethod
    def _ensure_planned(context: OrchestrationContext) -> None:
        if context.errors:
            raise PlanningError(context.app_id, context.errors)

    # ------------------------------------------------------------------
    # Generation
    # ------------------------------------------------------------------

    async def generate(self, requirement: AppRequirement) -> GeneratedApp:
        """Plan, then generate every bundle for *requirement*.

        Raises:
            PlanningError: Validation failed; no generator was called.
            GenerationError: A generator failed; nothing is returned.
        """
        logger.info("Starting app generation for: %s", requirement.name)
        context = await self.plan(requirement)
        self._ensure_planned(context)
        return await self._generate_in_context(context)

    async def _generate_in_context(self, context: OrchestrationContext) -> GeneratedApp:
        requirement = context.requirement
        context.advance_phase(Phase.GENERATING)

        try:
            database = await self.database_generator.generate(requirement)
            backend = await self.backend_generator.generate(requirement)
            frontend = await self.frontend_generator.generate(requirement)
        except GenerationError as exc:
            context.errors.append(f"Generation failed: {exc}")
            logger.error("App generation failed for %s: %s", context.app_id, exc)
            raise

        app = GeneratedApp(
            id=context.app_id,
            name=requirement.name,
            requirement=requirement,
            frontend=FrontendBundle(code=frontend),
            backend=BackendBundle(code=backend),
            database=DatabaseBundle(schema=database["schema"], migrations=database["migrations"]),
            github=GitHubRecord(default_branch=self.config.github.default_branch),
            status=AppStatus.GENERATED,
        )
        context.generated_app = app
        logger.info("App generation completed for: %s", requirement.name)
        return app

    # ------------------------------------------------------------------
    # Full workflow & deployment
    # ------------------------------------------------------------------

    async def orchestrate(self, requirement: AppRequirement) -> GeneratedApp:
        """Plan, generate and deploy *requirement* under a single context.

        Nothing already done is rolled back when a later step fails.
        """
        logger.info("Starting full orchestration for: %s", requirement.name)
        context = await self.plan(requirement)
        self._ensure_planned(context)
        app = await self._generate_in_context(context)

        app.advance_status(AppStatus.DEPLOYING)
        try:
            repository_url = await self.deploy(app)
        except DeploymentError as exc:
            context.errors.append(f"Deployment failed: {exc}")
            app.advance_status(AppStatus.FAILED)
            raise

        app.advance_status(AppStatus.DEPLOYED)
        app.github.repository_url = repository_url
        context.advance_phase(Phase.DEPLOYING)
        logger.info("Full orchestration completed for: %s", requirement.name)
        return app

    async def deploy(self, app: GeneratedApp) -> str:
        """Push *app* to the github provider and return its repository URL.

        The URL is built from configuration, not taken from the provider's
        reply.

        Raises:
            DeploymentError: Any github-service call failed.
        """
        logger.info("Deploying app: %s", app.name)
        github = self.config.github
        try:
            repo = await self.registry.invoke(
                GITHUB_SERVICE,
                "create-repository",
                {
                    "name": app.name,
                    "description": app.requirement.description,
                    "private": github.private,
                    "default_branch": app.github.default_branch,
                },
            )
            logger.debug("GitHub repository created: %s", repo.get("repository"))

            files = app.all_files()
            await self.registry.invoke(
                GITHUB_SERVICE,
                "commit-code",
                {
                    "repository": app.name,
                    "files": files,
                    "message": github.commit_message,
                    "branch": app.github.default_branch,
                },
            )
            logger.info("Committed %d file(s) to %s", len(files), app.name)

            await self.registry.invoke(
                GITHUB_SERVICE,
                "setup-workflows",
                {
                    "repository": app.name,
                    "workflow": github.workflow,
                    "branch": app.github.default_branch,
                },
            )
            logger.info("CI/CD workflows configured")
        except Exception as exc:
            logger.error("Deployment failed for %s: %s", app.name, exc)
            raise DeploymentError(app.name, str(exc)) from exc

        repository_url = github.repository_url(app.name)
        logger.info("App deployed successfully: %s", repository_url)
        return repository_url

    # ------------------------------------------------------------------
    # Tracking
    # ------------------------------------------------------------------

    def status(self, app_id: str) -> OrchestrationContext | None:
        """Snapshot of the context tracked under *app_id*, or ``None``."""
        return self.store.snapshot(app_id)

    def list_all(self) -> list[OrchestrationContext]:
        """Snapshots of every tracked context, oldest first."""
        return self.store.snapshots()

    async def cancel(self, app_id: str) -> None:
        """Stop tracking *app_id*.  Unknown ids are logged and ignored."""
        logger.info("Cancelling app: %s", app_id)
        if self.store.remove(app_id) is None:
            logger.warning("App %s not found for cancellation", app_id)
        else:
            logger.info("App %s cancelled and removed", app_id)
        await asyncio.sleep(0)

    def register_generator(self, generator: CodeGenerator) -> None:
        """Add an extension generator; a later registration under the same name wins."""
        self._generators[generator.name] = generator
        logger.info("Generator registered: %s", generator.name)

    @property
    def generators(self) -> Mapping[str, CodeGenerator]:
        return MappingProxyType(self._generators)

    def close(self) -> None:
        """Forget every tracked context and registered generator."""
        self.store.clear()
        self._generators.clear()
