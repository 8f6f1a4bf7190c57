"""Unit tests for the Orchestrator (mobbuild.orchestrator).

Tests cover:
- App id format and requirement validation
- plan / generate / orchestrate / deploy
- Context tracking: status, list_all, cancel, close
- Extension generator registration
"""

from __future__ import annotations

import re
from unittest.mock import AsyncMock, patch

import pytest

from mobbuild.errors import DeploymentError, GenerationError, PlanningError
from mobbuild.models import AppRequirement, AppStatus, Phase
from mobbuild.orchestrator import (
    ERROR_DESCRIPTION_REQUIRED,
    ERROR_FEATURES_REQUIRED,
    ERROR_NAME_REQUIRED,
    generate_app_id,
    validate_requirement,
)
from mobbuild.providers.backend import BACKEND_SERVICE
from mobbuild.providers.github import GITHUB_SERVICE


def _fail_on(provider, operation: str, error: Exception):
    """Patch *provider* so that *operation* raises *error* and the rest run normally."""
    real_execute = provider.execute

    async def execute(name, payload):
        if name == operation:
            raise error
        return await real_execute(name, payload)

    return patch.object(provider, "execute", AsyncMock(side_effect=execute))


# ---------------------------------------------------------------------------
# Helpers
# ---------------------------------------------------------------------------


class TestHelpers:
    @pytest.mark.unit
    def test_app_id_format(self):
        assert re.fullmatch(r"app-\d+-[0-9a-z]{9}", generate_app_id())

    @pytest.mark.unit
    def test_app_ids_are_distinct(self):
        assert len({generate_app_id() for _ in range(50)}) == 50

    @pytest.mark.unit
    def test_validate_reports_every_problem(self):
        errors = validate_requirement(AppRequirement(name=" ", description="", features=[]))
        assert errors == [
            ERROR_NAME_REQUIRED,
            ERROR_DESCRIPTION_REQUIRED,
            ERROR_FEATURES_REQUIRED,
        ]


# ---------------------------------------------------------------------------
# Parse & plan
# ---------------------------------------------------------------------------


class TestPlan:
    @pytest.mark.unit
    @pytest.mark.asyncio
    async def test_parse(self, make_orchestrator, requirements_text):
        orchestrator = await make_orchestrator()
        requirement = await orchestrator.parse(requirements_text)
        assert requirement.name == "Blog"

    @pytest.mark.unit
    @pytest.mark.asyncio
    async def test_valid_plan(self, make_orchestrator, blog_requirement):
        orchestrator = await make_orchestrator()
        context = await orchestrator.plan(blog_requirement)
        assert context.errors == []
        assert context.current_phase is Phase.PLANNING
        assert orchestrator.status(context.app_id) is not None

    @pytest.mark.unit
    @pytest.mark.asyncio
    @pytest.mark.parametrize(
        "overrides, expected",
        [
            ({"name": ""}, ERROR_NAME_REQUIRED),
            ({"description": "  "}, ERROR_DESCRIPTION_REQUIRED),
            ({"features": []}, ERROR_FEATURES_REQUIRED),
        ],
    )
    async def test_invalid_plan_is_tracked(self, make_orchestrator, overrides, expected):
        orchestrator = await make_orchestrator()
        fields = {"name": "Blog", "description": "A blog", "features": ["posts"], **overrides}
        context = await orchestrator.plan(AppRequirement(**fields))
        assert context.errors == [expected]
        assert orchestrator.status(context.app_id).errors == [expected]


# ---------------------------------------------------------------------------
# Generate
# ---------------------------------------------------------------------------


class TestGenerate:
    @pytest.mark.unit
    @pytest.mark.asyncio
    async def test_blog_scenario(self, make_orchestrator, blog_requirement):
        orchestrator = await make_orchestrator()
        app = await orchestrator.generate(blog_requirement)

        assert app.status is AppStatus.GENERATED
        assert app.name == "Blog"
        assert set(app.database.schema_files) == {"tables/users.sql", "schema.sql"}
        assert len(app.backend.code) == 4
        assert len(app.frontend.code) == 6
        assert app.github.repository_url is None

        context = orchestrator.status(app.id)
        assert context.current_phase is Phase.GENERATING
        assert context.generated_app.id == app.id
        assert context.errors == []

    @pytest.mark.unit
    @pytest.mark.asyncio
    async def test_invalid_requirement_calls_no_provider(self, make_orchestrator):
        orchestrator = await make_orchestrator()
        backend = orchestrator.registry.get(BACKEND_SERVICE)
        with patch.object(backend, "execute", AsyncMock()) as execute:
            with pytest.raises(PlanningError) as exc_info:
                await orchestrator.generate(AppRequirement(name="Blog", description="x"))
        execute.assert_not_awaited()
        assert exc_info.value.errors == [ERROR_FEATURES_REQUIRED]
        assert orchestrator.status(exc_info.value.app_id).current_phase is Phase.PLANNING

    @pytest.mark.unit
    @pytest.mark.asyncio
    async def test_generation_failure_recorded(self, make_orchestrator, blog_requirement):
        orchestrator = await make_orchestrator()
        backend = orchestrator.registry.get(BACKEND_SERVICE)
        with _fail_on(backend, "generate-api", RuntimeError("render failed")):
            with pytest.raises(GenerationError, match="render failed"):
                await orchestrator.generate(blog_requirement)

        (context,) = orchestrator.list_all()
        assert context.generated_app is None
        assert context.current_phase is Phase.GENERATING
        assert context.errors == ["Generation failed: backend generation failed: render failed"]

    @pytest.mark.unit
    @pytest.mark.asyncio
    async def test_structured_requirement(self, make_orchestrator, shop_requirement):
        orchestrator = await make_orchestrator()
        app = await orchestrator.generate(shop_requirement)
        assert len(app.backend.code) == 5
        assert len(app.frontend.code) == 7
        assert "tables/orders.sql" in app.database.schema_files


# ---------------------------------------------------------------------------
# Deploy & orchestrate
# ---------------------------------------------------------------------------


class TestDeploy:
    @pytest.mark.unit
    @pytest.mark.asyncio
    async def test_commits_every_generated_file(self, make_orchestrator, blog_requirement):
        orchestrator = await make_orchestrator()
        app = await orchestrator.generate(blog_requirement)
        github = orchestrator.registry.get(GITHUB_SERVICE)

        with patch.object(github, "execute", AsyncMock(wraps=github.execute)) as execute:
            url = await orchestrator.deploy(app)

        assert url == "https://github.com/user/Blog"
        calls = [c.args[0] for c in execute.await_args_list]
        assert calls == ["create-repository", "commit-code", "setup-workflows"]

        files = execute.await_args_list[1].args[1]["files"]
        paths = [f["path"] for f in files]
        expected = (
            [f"frontend/{p}" for p in app.frontend.code]
            + [f"backend/{p}" for p in app.backend.code]
            + [f"database/schema/{p}" for p in app.database.schema_files]
            + [f"database/migrations/{p}" for p in app.database.migrations]
        )
        assert paths == expected
        assert len(set(paths)) == len(paths)

    @pytest.mark.unit
    @pytest.mark.asyncio
    async def test_deploy_failure_wrapped(self, make_orchestrator, blog_requirement):
        orchestrator = await make_orchestrator()
        app = await orchestrator.generate(blog_requirement)
        github = orchestrator.registry.get(GITHUB_SERVICE)
        with _fail_on(github, "setup-workflows", RuntimeError("quota")):
            with pytest.raises(DeploymentError, match="quota") as exc_info:
                await orchestrator.deploy(app)
        assert exc_info.value.app_name == "Blog"


class TestOrchestrate:
    @pytest.mark.unit
    @pytest.mark.asyncio
    async def test_success(self, make_orchestrator, blog_requirement):
        orchestrator = await make_orchestrator()
        app = await orchestrator.orchestrate(blog_requirement)

        assert app.status is AppStatus.DEPLOYED
        assert app.github.repository_url == "https://github.com/user/Blog"
        context = orchestrator.status(app.id)
        assert context.current_phase is Phase.DEPLOYING
        assert context.generated_app.status is AppStatus.DEPLOYED
        assert len(orchestrator.list_all()) == 1

    @pytest.mark.unit
    @pytest.mark.asyncio
    async def test_deploy_failure_marks_app_failed(self, make_orchestrator, blog_requirement):
        orchestrator = await make_orchestrator()
        github = orchestrator.registry.get(GITHUB_SERVICE)
        with _fail_on(github, "commit-code", RuntimeError("push rejected")):
            with pytest.raises(DeploymentError):
                await orchestrator.orchestrate(blog_requirement)

        (context,) = orchestrator.list_all()
        assert context.generated_app.status is AppStatus.FAILED
        assert context.generated_app.github.repository_url is None
        assert context.current_phase is Phase.GENERATING
        assert context.errors[0].startswith("Deployment failed: ")

    @pytest.mark.unit
    @pytest.mark.asyncio
    async def test_planning_failure_skips_generation(self, make_orchestrator):
        orchestrator = await make_orchestrator()
        with pytest.raises(PlanningError):
            await orchestrator.orchestrate(AppRequirement())
        (context,) = orchestrator.list_all()
        assert len(context.errors) == 3
        assert context.generated_app is None


# ---------------------------------------------------------------------------
# Tracking
# ---------------------------------------------------------------------------


class TestTracking:
    @pytest.mark.unit
    @pytest.mark.asyncio
    async def test_status_unknown(self, make_orchestrator):
        orchestrator = await make_orchestrator()
        assert orchestrator.status("app-0-missing") is None

    @pytest.mark.unit
    @pytest.mark.asyncio
    async def test_status_is_idempotent_snapshot(self, make_orchestrator, blog_requirement):
        orchestrator = await make_orchestrator()
        context = await orchestrator.plan(blog_requirement)

        first = orchestrator.status(context.app_id)
        first.errors.append("tampered")
        second = orchestrator.status(context.app_id)
        assert second.errors == []
        assert second == orchestrator.status(context.app_id)

    @pytest.mark.unit
    @pytest.mark.asyncio
    async def test_list_all_insertion_order(self, make_orchestrator, blog_requirement):
        orchestrator = await make_orchestrator()
        ids = [(await orchestrator.plan(blog_requirement)).app_id for _ in range(3)]
        assert [c.app_id for c in orchestrator.list_all()] == ids

    @pytest.mark.unit
    @pytest.mark.asyncio
    async def test_cancel(self, make_orchestrator, blog_requirement):
        orchestrator = await make_orchestrator()
        context = await orchestrator.plan(blog_requirement)
        await orchestrator.cancel(context.app_id)
        assert orchestrator.status(context.app_id) is None

    @pytest.mark.unit
    @pytest.mark.asyncio
    async def test_cancel_unknown_is_noop(self, make_orchestrator, blog_requirement):
        orchestrator = await make_orchestrator()
        await orchestrator.plan(blog_requirement)
        await orchestrator.cancel("app-0-missing")
        assert len(orchestrator.list_all()) == 1

    @pytest.mark.unit
    @pytest.mark.asyncio
    async def test_close_forgets_everything(self, make_orchestrator, blog_requirement):
        orchestrator = await make_orchestrator()
        await orchestrator.plan(blog_requirement)
        orchestrator.close()
        assert orchestrator.list_all() == []
        assert len(orchestrator.generators) == 0


class _NamedGenerator:
    def __init__(self, name: str, tag: str) -> None:
        self.name = name
        self.tag = tag

    async def generate(self, requirement):
        return {"tag": self.tag}


class TestRegisterGenerator:
    @pytest.mark.unit
    @pytest.mark.asyncio
    async def test_last_registration_wins(self, make_orchestrator):
        orchestrator = await make_orchestrator()
        orchestrator.register_generator(_NamedGenerator("docs", "first"))
        orchestrator.register_generator(_NamedGenerator("docs", "second"))
        assert list(orchestrator.generators) == ["docs"]
        assert orchestrator.generators["docs"].tag == "second"

    @pytest.mark.unit
    @pytest.mark.asyncio
    async def test_generators_view_is_read_only(self, make_orchestrator):
        orchestrator = await make_orchestrator()
        with pytest.raises(TypeError):
            orchestrator.generators["x"] = _NamedGenerator("x", "x")
