"""GitHub tool provider.

Fabricates repository, commit, branch and workflow records.  No network
calls are made; commit SHAs are derived from the committed content so the
same files always produce the same SHA.
"""

from __future__ import annotations

import hashlib
from typing import Any

from .base import Payload, ToolOperation, ToolProvider
from ..errors import OperationInputError
from ..utils import sanitize_name

GITHUB_SERVICE = "github-service"

_WORKFLOW_TEMPLATE = """\
name: {{ workflow }}

on:
  push:
    branches: [{{ branch }}]
  pull_request:
    branches: [{{ branch }}]

jobs:
  build:
    runs-on: ubuntu-latest
    steps:
      - uses: actions/checkout@v4
      - uses: actions/setup-node@v4
        with:
          node-version: 20
{% for project in projects %}
      - name: Build {{ project }}
        working-directory: {{ project }}
        run: npm ci && npm run build --if-present
{% endfor %}
"""


def _commit_sha(files: list[dict[str, Any]], message: str) -> str:
    digest = hashlib.sha1(message.encode("utf-8"))
    for entry in files:
        digest.update(str(entry["path"]).encode("utf-8"))
        digest.update(b"\0")
        digest.update(str(entry.get("content", "")).encode("utf-8"))
    return digest.hexdigest()


class GitHubProvider(ToolProvider):
    """Simulates repository management against GitHub."""

    name = GITHUB_SERVICE

    def __init__(self, organisation: str = "mobbuild", **kwargs: Any) -> None:
        self.organisation = organisation
        super().__init__(**kwargs)

    def _build_operations(self) -> list[ToolOperation]:
        return [
            ToolOperation(
                name="create-repository",
                description="Create a new GitHub repository",
                handler=self._create_repository,
                input_schema={"name": "string", "description": "string", "private": "boolean"},
                required=("name",),
            ),
            ToolOperation(
                name="commit-code",
                description="Commit files to a GitHub repository",
                handler=self._commit_code,
                input_schema={"repository": "string", "files": "array", "message": "string"},
                required=("repository", "files"),
            ),
            ToolOperation(
                name="create-branch",
                description="Create a branch from an existing one",
                handler=self._create_branch,
                input_schema={"repository": "string", "branch": "string", "from_branch": "string"},
                required=("repository", "branch"),
            ),
            ToolOperation(
                name="setup-workflows",
                description="Install a GitHub Actions workflow",
                handler=self._setup_workflows,
                input_schema={"repository": "string", "workflow": "string"},
                required=("repository",),
            ),
        ]

    def _repo_url(self, repository: str) -> str:
        return f"https://github.com/{self.organisation}/{sanitize_name(repository)}"

    async def _create_repository(self, payload: Payload) -> Payload:
        name = str(payload["name"])
        return {
            "success": True,
            "repository": {
                "name": name,
                "full_name": f"{self.organisation}/{sanitize_name(name)}",
                "description": payload.get("description") or "",
                "private": bool(payload.get("private", False)),
                "url": self._repo_url(name),
                "default_branch": str(payload.get("default_branch") or "main"),
            },
        }

    async def _commit_code(self, payload: Payload) -> Payload:
        repository = str(payload["repository"])
        files = payload["files"]
        bad = [i for i, f in enumerate(files) if not isinstance(f, dict) or "path" not in f]
        if bad:
            raise OperationInputError(
                self.name, "commit-code", [f"files[{i}].path" for i in bad]
            )
        message = str(payload.get("message") or "Update")
        return {
            "success": True,
            "commit": {
                "sha": _commit_sha(files, message),
                "message": message,
                "branch": str(payload.get("branch") or "main"),
                "files_count": len(files),
            },
            "repository": repository,
        }

    async def _create_branch(self, payload: Payload) -> Payload:
        repository = str(payload["repository"])
        branch = str(payload["branch"])
        return {
            "success": True,
            "branch": {
                "name": branch,
                "from": str(payload.get("from_branch") or "main"),
                "url": f"{self._repo_url(repository)}/tree/{branch}",
            },
            "repository": repository,
        }

    async def _setup_workflows(self, payload: Payload) -> Payload:
        repository = str(payload["repository"])
        workflow = str(payload.get("workflow") or "ci-cd")
        content = self.renderer.render_string(
            _WORKFLOW_TEMPLATE,
            {
                "workflow": workflow,
                "branch": str(payload.get("branch") or "main"),
                "projects": ["frontend", "backend"],
            },
        )
        return {
            "success": True,
            "workflow": {
                "name": workflow,
                "file": f".github/workflows/{workflow}.yml",
                "content": content,
            },
            "repository": repository,
        }
