"""Frontend tool provider.

Renders React + TypeScript components and pages and fabricates deployment
records.
"""

from __future__ import annotations

from ..utils import unique_name
from .base import Payload, ToolOperation, ToolProvider

FRONTEND_SERVICE = "frontend-service"

_COMPONENT_TEMPLATE = """\
import React{% if endpoint %}, { useEffect, useState }{% endif %} from "react";
{% if type == "detail" %}
import { useParams } from "react-router-dom";
{% endif %}

{% if fields %}
export interface {{ name }}Item {
{% for field in fields %}
  {{ field | identifier }}: unknown;
{% endfor %}
}
{% else %}
export type {{ name }}Item = Record<string, unknown>;
{% endif %}

{% if type == "list" %}
export default function {{ name }}(): JSX.Element {
  const [items, setItems] = useState<{{ name }}Item[]>([]);

  useEffect(() => {
    fetch("{{ endpoint }}")
      .then((res) => res.json())
      .then((data: {{ name }}Item[]) => setItems(data));
  }, []);

  return (
    <ul className="{{ name | kebab_case }}">
      {items.map((item, index) => (
        <li key={index}>{JSON.stringify(item)}</li>
      ))}
    </ul>
  );
}
{% elif type == "detail" %}
export default function {{ name }}(): JSX.Element {
  const params = useParams();
  const [item, setItem] = useState<{{ name }}Item | null>(null);

  useEffect(() => {
    const url = "{{ endpoint }}"{% for param in params %}.replace(":{{ param }}", params.{{ param }} ?? ""){% endfor %};
    fetch(url)
      .then((res) => res.json())
      .then((data: {{ name }}Item) => setItem(data));
  }, [{% for param in params %}params.{{ param }}{% if not loop.last %}, {% endif %}{% endfor %}]);

  if (!item) {
    return <p>Loading...</p>;
  }
  return <pre className="{{ name | kebab_case }}">{JSON.stringify(item, null, 2)}</pre>;
}
{% elif type == "form" %}
export default function {{ name }}(): JSX.Element {
  const [values, setValues] = useState<Record<string, string>>({});

  const onSubmit = async (event: React.FormEvent) => {
    event.preventDefault();
    await fetch("{{ endpoint }}", {
      method: "POST",
      headers: { "Content-Type": "application/json" },
      body: JSON.stringify(values),
    });
  };

  return (
    <form className="{{ name | kebab_case }}" onSubmit={onSubmit}>
{% for field in fields %}
      <label>
        {{ field }}
        <input
          name="{{ field }}"
          value={values["{{ field }}"] ?? ""}
          onChange={(e) => setValues({ ...values, "{{ field }}": e.target.value })}
        />
      </label>
{% endfor %}
      <button type="submit">Save</button>
    </form>
  );
}
{% else %}
export default function {{ name }}(): JSX.Element {
  return (
    <section className="{{ name | kebab_case }}">
      <h2>{{ title }}</h2>
{% if endpoint %}
      <p>Data source: {{ endpoint }}</p>
{% endif %}
    </section>
  );
}
{% endif %}
"""

_PAGE_TEMPLATE = """\
import React from "react";
{% for component in components %}
import {{ component }} from "../components/{{ component }}";
{% endfor %}

/** Page mounted at {{ path }}. */
export default function {{ name }}(): JSX.Element {
  return (
    <main>
{% if layout %}
      <div className="layout-{{ layout | kebab_case }}">
{% endif %}
{% for component in components %}
      <{{ component }} />
{% endfor %}
{% if layout %}
      </div>
{% endif %}
    </main>
  );
}
"""


def _route_params(path: str) -> list[str]:
    return [segment[1:] for segment in path.split("/") if segment.startswith(":")]


class FrontendProvider(ToolProvider):
    """Generates React components and pages."""

    name = FRONTEND_SERVICE

    def _build_operations(self) -> list[ToolOperation]:
        return [
            ToolOperation(
                name="generate-component",
                description="Generate React component with TypeScript",
                handler=self._generate_component,
                input_schema={"name": "string", "props": "object", "styling": "string"},
                required=("name",),
            ),
            ToolOperation(
                name="create-page",
                description="Generate a page composed of components",
                handler=self._create_page,
                input_schema={"path": "string", "components": "array", "layout": "string"},
                required=("path",),
            ),
            ToolOperation(
                name="deploy-frontend",
                description="Deploy frontend to a static host",
                handler=self._deploy_frontend,
                input_schema={"environment": "string", "config": "object"},
                required=("environment",),
            ),
        ]

    async def _generate_component(self, payload: Payload) -> Payload:
        name = str(payload["name"])
        props = payload.get("props") or {}
        component_type = str(props.get("type", "page"))
        endpoints = [str(e) for e in props.get("endpoints") or []]
        endpoint = endpoints[0] if endpoints else ""
        fields = [str(f) for f in props.get("fields") or []]

        code = self.renderer.render_string(
            _COMPONENT_TEMPLATE,
            {
                "name": name,
                "type": component_type,
                "endpoint": endpoint,
                "params": _route_params(endpoint),
                "fields": fields,
                "title": props.get("title") or name,
            },
        )
        return {
            "success": True,
            "file": f"components/{name}.tsx",
            "code": code,
            "name": name,
            "type": component_type,
            "styling": payload.get("styling") or "css",
        }

    async def _create_page(self, payload: Payload) -> Payload:
        path = str(payload["path"])
        components = [str(c) for c in payload.get("components") or []]
        # The page function must not shadow one of the components it imports.
        name = unique_name(str(payload.get("name") or "HomePage"), set(components), separator="")
        code = self.renderer.render_string(
            _PAGE_TEMPLATE,
            {
                "name": name,
                "path": path,
                "components": components,
                "layout": payload.get("layout") or "",
            },
        )
        return {
            "success": True,
            "file": f"pages/{name}.tsx",
            "code": code,
            "path": path,
            "components": components,
        }

    async def _deploy_frontend(self, payload: Payload) -> Payload:
        environment = str(payload["environment"])
        return {
            "success": True,
            "deployed": {
                "environment": environment,
                "url": f"https://app-{environment}.example.com",
                "status": "deployed",
            },
            "environment": environment,
        }
