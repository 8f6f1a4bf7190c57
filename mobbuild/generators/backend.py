"""Backend generator: one Express route module per endpoint plus boilerplate."""

from __future__ import annotations

import json
import logging

from ..models import APIEndpointDefinition, AppRequirement
from ..providers.backend import BACKEND_SERVICE
from ..templates import get_renderer
from ..utils import path_to_identifier, sanitize_name, to_camel_case, unique_name
from .base import DomainGenerator, claim_path

logger = logging.getLogger(__name__)

_INDEX_TEMPLATE = """\
import express from "express";
{% for route in routes %}
import {{ route.var }} from "./{{ route.module }}";
{% endfor %}

const app = express();
app.use(express.json());

{% for route in routes %}
app.use({{ route.var }});
{% endfor %}

const port = Number(process.env.PORT ?? {{ port }});
app.listen(port, () => {
  console.log(`{{ name }} API listening on port ${port}`);
});

export default app;
"""


def route_file(endpoint: APIEndpointDefinition, taken: set[str] | None = None) -> str:
    """``GET /api/users/:id`` -> ``routes/get_api_users_by_id.ts``.

    When *taken* is given, stems already in it get a numeric suffix
    (``get_api_a_b_2``) and the chosen stem is added to it.
    """
    stem = f"{endpoint.method.value.lower()}_{path_to_identifier(endpoint.path)}"
    if taken is not None:
        stem = unique_name(stem, taken)
    return f"routes/{stem}.ts"


class BackendGenerator(DomainGenerator):
    """Produces ``routes/*.ts`` (one per endpoint), ``index.ts`` and ``package.json``."""

    name = "backend"

    async def _generate(self, requirement: AppRequirement) -> dict[str, str]:
        code: dict[str, str] = {}
        routes: list[dict[str, str]] = []
        taken_stems: set[str] = set()
        taken_vars: set[str] = set()

        for endpoint in requirement.api_endpoints or []:
            result = await self.registry.invoke(
                BACKEND_SERVICE,
                "generate-api",
                {
                    "endpoint": endpoint.path,
                    "method": endpoint.method.value,
                    "description": endpoint.description,
                    "request_body": endpoint.request_body,
                    "response_body": endpoint.response_body,
                },
            )
            path = route_file(endpoint, taken_stems)
            claim_path(code, path, result.get("code") or f"// {endpoint.description}", self.name)
            module = path[: -len(".ts")]
            var = unique_name(to_camel_case(module.split("/", 1)[1]), taken_vars, separator="")
            routes.append({"module": module, "var": var})

        code["index.ts"] = get_renderer().render_string(
            _INDEX_TEMPLATE,
            {"routes": routes, "port": self.config.backend.port, "name": requirement.name},
        )
        code["package.json"] = json.dumps(
            {
                "name": sanitize_name(requirement.name) or "app",
                "version": "1.0.0",
                "main": "index.ts",
                "scripts": {"start": "ts-node index.ts", "build": "tsc"},
                "dependencies": {"express": "^4.18.0"},
                "devDependencies": {
                    "@types/express": "^4.17.0",
                    "ts-node": "^10.9.0",
                    "typescript": "^5.0.0",
                },
            },
            indent=2,
        )

        logger.info("Backend bundle: %d endpoint file(s)", len(routes))
        return code
