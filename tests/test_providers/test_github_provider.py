"""Unit tests for GitHubProvider (mobbuild.providers.github)."""

from __future__ import annotations

import pytest

from mobbuild.errors import OperationInputError
from mobbuild.providers.github import GITHUB_SERVICE, GitHubProvider


async def _ready(**kwargs) -> GitHubProvider:
    provider = GitHubProvider(**kwargs)
    await provider.initialize()
    return provider


class TestRepositories:
    @pytest.mark.unit
    @pytest.mark.asyncio
    async def test_create_repository(self):
        provider = await _ready(organisation="acme")
        result = await provider.execute("create-repository", {"name": "My Blog", "private": True})
        repo = result["repository"]
        assert repo["full_name"] == "acme/my-blog"
        assert repo["url"] == "https://github.com/acme/my-blog"
        assert repo["private"] is True
        assert repo["default_branch"] == "main"

    @pytest.mark.unit
    @pytest.mark.asyncio
    async def test_create_branch(self):
        provider = await _ready()
        result = await provider.execute(
            "create-branch", {"repository": "Blog", "branch": "feature"}
        )
        assert result["branch"]["from"] == "main"
        assert result["branch"]["url"] == "https://github.com/mobbuild/blog/tree/feature"


class TestCommitCode:
    @pytest.mark.unit
    @pytest.mark.asyncio
    async def test_commit_is_deterministic(self):
        provider = await _ready()
        payload = {
            "repository": "Blog",
            "files": [{"path": "a.txt", "content": "a"}, {"path": "b.txt", "content": "b"}],
            "message": "init",
            "branch": "main",
        }
        first = await provider.execute("commit-code", payload)
        second = await provider.execute("commit-code", payload)
        assert first["commit"]["sha"] == second["commit"]["sha"]
        assert len(first["commit"]["sha"]) == 40
        assert first["commit"]["files_count"] == 2

    @pytest.mark.unit
    @pytest.mark.asyncio
    async def test_commit_sha_changes_with_content(self):
        provider = await _ready()
        base = {"repository": "Blog", "message": "init"}
        one = await provider.execute("commit-code", {**base, "files": [{"path": "a", "content": "1"}]})
        two = await provider.execute("commit-code", {**base, "files": [{"path": "a", "content": "2"}]})
        assert one["commit"]["sha"] != two["commit"]["sha"]

    @pytest.mark.unit
    @pytest.mark.asyncio
    async def test_file_without_path_rejected(self):
        provider = await _ready()
        with pytest.raises(OperationInputError) as exc_info:
            await provider.execute(
                "commit-code", {"repository": "Blog", "files": [{"content": "x"}]}
            )
        assert exc_info.value.missing == ["files[0].path"]


class TestWorkflows:
    @pytest.mark.unit
    @pytest.mark.asyncio
    async def test_setup_workflows(self):
        provider = await _ready()
        assert provider.name == GITHUB_SERVICE
        result = await provider.execute(
            "setup-workflows", {"repository": "Blog", "workflow": "ci-cd"}
        )
        workflow = result["workflow"]
        assert workflow["file"] == ".github/workflows/ci-cd.yml"
        assert workflow["content"].startswith("name: ci-cd")
        assert "working-directory: backend" in workflow["content"]
