"""Backend tool provider.

Renders Express + TypeScript route modules and fabricates deployment records.
"""

from __future__ import annotations

from typing import Any

from .base import Payload, ToolOperation, ToolProvider
from ..utils import path_to_identifier, to_pascal_case

BACKEND_SERVICE = "backend-service"

_BODY_METHODS = {"POST", "PUT", "PATCH"}

_API_TEMPLATE = """\
import { Router, Request, Response } from "express";

/**
 * {{ method }} {{ endpoint }}
{% if description %}
 * {{ description }}
{% endif %}
 */
const router = Router();

{% if request_fields %}
interface {{ handler | pascal_case }}Body {
{% for field in request_fields %}
  {{ field | identifier }}: unknown;
{% endfor %}
}

{% endif %}
export async function {{ handler }}(req: Request, res: Response): Promise<void> {
{% for param in params %}
  const {{ param | camel_case }} = req.params.{{ param }};
{% endfor %}
{% if method in body_methods %}
  const payload = req.body as {{ (handler | pascal_case) ~ "Body" if request_fields else "Record<string, unknown>" }};
  res.status({{ 201 if method == "POST" else 200 }}).json({ {% for param in params %}{{ param | camel_case }}, {% endfor %}...payload });
{% elif method == "DELETE" %}
  res.status(204).send();
{% else %}
  res.json({{ response_literal }});
{% endif %}
}

{% for extra in extra_handlers %}
export async function {{ extra }}(_req: Request, res: Response): Promise<void> {
  res.status(501).json({ error: "{{ extra }} is not implemented" });
}

{% endfor %}
router.{{ method | lower }}("{{ endpoint }}", {{ handler }});

export default router;
"""

_ENDPOINT_TEMPLATE = """\
import { Router } from "express";
import { {{ controller }} } from "../controllers/{{ controller }}";

const router = Router();

router.{{ method | lower }}("{{ path }}", {{ controller }});

export default router;
"""


def _path_params(path: str) -> list[str]:
    """``/api/users/:id/posts/:postId`` -> ``["id", "postId"]``."""
    return [segment[1:] for segment in path.split("/") if segment.startswith(":")]


def _response_literal(method: str, params: list[str], response_body: dict[str, Any] | None) -> str:
    if response_body:
        fields = ", ".join(f"{key}: null" for key in response_body)
        return "{ " + fields + " }"
    if params:
        return "{ " + ", ".join(params) + " }"
    return "[]"


class BackendProvider(ToolProvider):
    """Generates Express API code for individual endpoints."""

    name = BACKEND_SERVICE

    def _build_operations(self) -> list[ToolOperation]:
        return [
            ToolOperation(
                name="generate-api",
                description="Generate Node.js/Express API code",
                handler=self._generate_api,
                input_schema={"endpoint": "string", "method": "string", "handlers": "array"},
                required=("endpoint", "method"),
            ),
            ToolOperation(
                name="create-endpoint",
                description="Create a route module wired to a controller",
                handler=self._create_endpoint,
                input_schema={"path": "string", "method": "string", "controller": "string"},
                required=("path", "method", "controller"),
            ),
            ToolOperation(
                name="deploy-backend",
                description="Deploy backend to cloud",
                handler=self._deploy_backend,
                input_schema={"environment": "string", "config": "object"},
                required=("environment",),
            ),
        ]

    async def _generate_api(self, payload: Payload) -> Payload:
        endpoint = str(payload["endpoint"])
        method = str(payload["method"]).upper()
        handlers = [str(h) for h in payload.get("handlers") or []]
        handler = handlers[0] if handlers else f"handle{method.capitalize()}{to_pascal_case(path_to_identifier(endpoint))}"
        params = _path_params(endpoint)
        request_fields = list((payload.get("request_body") or {}).keys())

        code = self.renderer.render_string(
            _API_TEMPLATE,
            {
                "endpoint": endpoint,
                "method": method,
                "description": payload.get("description") or "",
                "handler": handler,
                "extra_handlers": handlers[1:],
                "params": params,
                "request_fields": request_fields if method in _BODY_METHODS else [],
                "body_methods": _BODY_METHODS,
                "response_literal": _response_literal(method, params, payload.get("response_body")),
            },
        )
        return {
            "success": True,
            "file": f"routes/{method.lower()}_{path_to_identifier(endpoint)}.ts",
            "code": code,
            "endpoint": endpoint,
            "method": method,
            "handlers_count": len(handlers),
        }

    async def _create_endpoint(self, payload: Payload) -> Payload:
        path = str(payload["path"])
        method = str(payload["method"]).upper()
        controller = str(payload["controller"])
        code = self.renderer.render_string(
            _ENDPOINT_TEMPLATE,
            {"path": path, "method": method, "controller": controller},
        )
        return {
            "success": True,
            "file": f"routes/{path_to_identifier(path)}.ts",
            "code": code,
            "path": path,
            "method": method,
            "controller": controller,
        }

    async def _deploy_backend(self, payload: Payload) -> Payload:
        environment = str(payload["environment"])
        config = payload.get("config") or {}
        return {
            "success": True,
            "deployed": {
                "environment": environment,
                "url": f"https://api-{environment}.example.com",
                "status": "deployed",
            },
            "environment": environment,
            "config_keys": len(config),
        }
