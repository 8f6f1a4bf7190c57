"""Frontend generator: one React component per UI component plus a home page."""

from __future__ import annotations

import json
import logging

from ..models import AppRequirement, ComponentType, UIComponentDefinition
from ..providers.frontend import FRONTEND_SERVICE
from ..templates import get_renderer
from ..utils import sanitize_name, to_kebab_case, unique_name
from .base import DomainGenerator, claim_path

logger = logging.getLogger(__name__)

HOME_PAGE = "HomePage"

_APP_TEMPLATE = """\
import React from "react";
import { BrowserRouter, Route, Routes } from "react-router-dom";
import {{ home }} from "./pages/{{ home }}";
{% for component in components %}
import {{ component.name }} from "./components/{{ component.name }}";
{% endfor %}

export default function App(): JSX.Element {
  return (
    <BrowserRouter>
      <Routes>
        <Route path="/" element={<{{ home }} />} />
{% for component in components %}
{% if component.route %}
        <Route path="{{ component.route }}" element={<{{ component.name }} />} />
{% endif %}
{% endfor %}
      </Routes>
    </BrowserRouter>
  );
}
"""

_INDEX_TEMPLATE = """\
import React from "react";
import ReactDOM from "react-dom/client";
import App from "./App";

ReactDOM.createRoot(document.getElementById("root") as HTMLElement).render(
  <React.StrictMode>
    <App />
  </React.StrictMode>
);
"""


def component_route(component: UIComponentDefinition) -> str:
    """Client-side route for a component; pages and dashboards get none.

    ``UserDetail`` backed by ``/api/users/:id`` -> ``/user-detail/:id``.
    """
    if component.type in (ComponentType.PAGE, ComponentType.DASHBOARD):
        return ""
    route = f"/{to_kebab_case(component.name)}"
    if component.related_endpoints:
        params = [s for s in component.related_endpoints[0].split("/") if s.startswith(":")]
        route += "".join(f"/{p}" for p in params)
    return route


class FrontendGenerator(DomainGenerator):
    """Produces ``components/*.tsx``, ``pages/HomePage.tsx``, ``App.tsx``,
    ``index.tsx`` and ``package.json``."""

    name = "frontend"

    async def _generate(self, requirement: AppRequirement) -> dict[str, str]:
        components = list(requirement.ui_components or [])
        code: dict[str, str] = {}

        for component in components:
            result = await self.registry.invoke(
                FRONTEND_SERVICE,
                "generate-component",
                {
                    "name": component.name,
                    "props": {
                        "type": component.type.value,
                        "endpoints": list(component.related_endpoints),
                        "fields": list(component.fields or []),
                    },
                },
            )
            claim_path(
                code,
                f"components/{component.name}.tsx",
                result.get("code") or f"// {component.name} component",
                self.name,
            )

        home = unique_name(HOME_PAGE, {c.name for c in components}, separator="")
        result = await self.registry.invoke(
            FRONTEND_SERVICE,
            "create-page",
            {"path": "/", "name": home, "components": [c.name for c in components]},
        )
        claim_path(code, f"pages/{home}.tsx", result.get("code") or f"// {home}", self.name)

        renderer = get_renderer()
        code["App.tsx"] = renderer.render_string(
            _APP_TEMPLATE,
            {
                "home": home,
                "components": [
                    {"name": c.name, "route": component_route(c)} for c in components
                ],
            },
        )
        code["index.tsx"] = _INDEX_TEMPLATE
        code["package.json"] = json.dumps(
            {
                "name": f"{sanitize_name(requirement.name) or 'app'}-frontend",
                "version": "1.0.0",
                "dependencies": {
                    "react": "^18.2.0",
                    "react-dom": "^18.2.0",
                    "react-router-dom": "^6.22.0",
                },
            },
            indent=2,
        )

        logger.info("Frontend bundle: %d component file(s)", len(components))
        return code
