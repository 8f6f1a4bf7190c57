"""React app generator: a routed Vite + React + TypeScript project.

Unlike :class:`~mobbuild.generators.frontend.FrontendGenerator`, which
emits a flat component bundle, this generator lays out a complete
``src/`` tree:

- ``src/services/apiClient.ts``: a typed fetch client plus one exported
  function per endpoint
- ``src/hooks/``: one data hook per endpoint, one form hook per form component
- ``src/components/``: one component per UI component (via the frontend provider)
- ``src/pages/``: one page per UI component, plus ``DashboardPage`` when the
  requirement has no dashboard component
- ``src/routes.tsx`` and ``src/components/layout/Navigation.tsx`` built from
  the page routes

It is not part of the default orchestration; register it with
``Orchestrator.register_generator`` and call it directly::

    generator = ReactAppGenerator(registry, config)
    orchestrator.register_generator(generator)
    files = await generator.generate(requirement)
"""

from __future__ import annotations

import json
import logging
from typing import Any

from ..models import (
    APIEndpointDefinition,
    AppRequirement,
    ComponentType,
    HTTPMethod,
    TableDefinition,
    UIComponentDefinition,
)
from ..providers.frontend import FRONTEND_SERVICE
from ..templates import get_renderer
from ..utils import (
    pluralize,
    sanitize_identifier,
    sanitize_name,
    singularize,
    to_camel_case,
    to_kebab_case,
    to_pascal_case,
    to_snake_case,
    unique_name,
)
from .base import DomainGenerator, claim_path

logger = logging.getLogger(__name__)

DASHBOARD_PAGE = "DashboardPage"
DASHBOARD_ROUTE = "/dashboard"
MAX_DASHBOARD_METRICS = 6
MAX_INFERRED_FIELDS = 8

_FALLBACK_FIELDS: dict[ComponentType, tuple[str, ...]] = {
    ComponentType.FORM: ("name",),
    ComponentType.DETAIL: ("id", "name", "created_at"),
    ComponentType.LIST: ("id", "name"),
}

_BODY_METHODS = {HTTPMethod.POST, HTTPMethod.PUT, HTTPMethod.PATCH}

_VERBS = {
    HTTPMethod.POST: "create",
    HTTPMethod.PUT: "update",
    HTTPMethod.PATCH: "patch",
    HTTPMethod.DELETE: "delete",
}

_API_CLIENT_TEMPLATE = """\
import { API_BASE_URL } from "../config";

export class APIError extends Error {
  status: number;
  body: unknown;

  constructor(message: string, status: number, body: unknown) {
    super(message);
    this.status = status;
    this.body = body;
  }
}

export interface RequestOptions {
  signal?: AbortSignal;
  headers?: Record<string, string>;
}

export type QueryParams = Record<string, string | number | boolean | undefined>;

function buildQuery(params?: QueryParams): string {
  if (!params) return "";
  const search = new URLSearchParams();
  for (const [key, value] of Object.entries(params)) {
    if (value !== undefined) search.set(key, String(value));
  }
  const qs = search.toString();
  return qs ? `?${qs}` : "";
}

async function withRetry<T>(fn: () => Promise<T>, retries = 1, delayMs = 250): Promise<T> {
  try {
    return await fn();
  } catch (err) {
    if (retries <= 0) throw err;
    await new Promise((resolve) => setTimeout(resolve, delayMs));
    return withRetry(fn, retries - 1, delayMs * 2);
  }
}

async function request<T>(path: string, init: RequestInit, options?: RequestOptions): Promise<T> {
  const response = await fetch(`${API_BASE_URL}${path}`, {
    ...init,
    headers: { ...(options?.headers ?? {}), ...(init.headers ?? {}) },
    signal: options?.signal,
  });

  const contentType = response.headers.get("content-type") ?? "";
  const body = contentType.includes("application/json") ? await response.json() : await response.text();

  if (!response.ok) {
    throw new APIError(`API Error: ${response.status} ${response.statusText}`, response.status, body);
  }
  return body as T;
}

function send<T>(method: string, path: string, data: unknown, options?: RequestOptions): Promise<T> {
  return withRetry(() =>
    request<T>(
      path,
      { method, headers: { "Content-Type": "application/json" }, body: JSON.stringify(data) },
      options,
    ),
  );
}

export const apiClient = {
  get<T>(path: string, options?: RequestOptions): Promise<T> {
    return withRetry(() => request<T>(path, { method: "GET" }, options));
  },
  post<T>(path: string, data: unknown, options?: RequestOptions): Promise<T> {
    return send<T>("POST", path, data, options);
  },
  put<T>(path: string, data: unknown, options?: RequestOptions): Promise<T> {
    return send<T>("PUT", path, data, options);
  },
  patch<T>(path: string, data: unknown, options?: RequestOptions): Promise<T> {
    return send<T>("PATCH", path, data, options);
  },
  delete<T>(path: string, options?: RequestOptions): Promise<T> {
    return withRetry(() => request<T>(path, { method: "DELETE" }, options));
  },
};
{% for ep in endpoints %}

/** {{ ep.method }} {{ ep.path }}: {{ ep.description }} */
{% if ep.params %}
export interface {{ ep.pascal }}PathParams {
{% for param in ep.params %}
  {{ param }}: string;
{% endfor %}
}
{% endif %}
{% if ep.has_body %}

export interface {{ ep.pascal }}Request {
{% for field in ep.request_fields %}
  {{ field }}: unknown;
{% else %}
  [key: string]: unknown;
{% endfor %}
}
{% endif %}

export interface {{ ep.pascal }}Response {
{% for field in ep.response_fields %}
  {{ field }}: unknown;
{% else %}
  [key: string]: unknown;
{% endfor %}
}

function buildPath{{ ep.pascal }}({% if ep.params %}pathParams: {{ ep.pascal }}PathParams{% endif %}): string {
  return `{{ ep.path_expr }}`;
}

export async function {{ ep.fn }}(
{% if ep.params %}
  pathParams: {{ ep.pascal }}PathParams,
{% endif %}
{% if ep.has_body %}
  body: {{ ep.pascal }}Request,
{% endif %}
{% if ep.method == "GET" %}
  queryParams?: QueryParams,
{% endif %}
  options?: RequestOptions,
): Promise<{{ ep.pascal }}Response> {
  const path = buildPath{{ ep.pascal }}({% if ep.params %}pathParams{% endif %});
{% if ep.method == "GET" %}
  return apiClient.get<{{ ep.pascal }}Response>(path + buildQuery(queryParams), options);
{% elif ep.method == "DELETE" %}
  return apiClient.delete<{{ ep.pascal }}Response>(path, options);
{% else %}
  return apiClient.{{ ep.method | lower }}<{{ ep.pascal }}Response>(path, body, options);
{% endif %}
}
{% endfor %}
"""

_DATA_HOOK_TEMPLATE = """\
import { useCallback, {% if ep.method == "GET" %}useEffect, {% endif %}useState } from "react";

import {
  {{ ep.fn }},
{% if ep.params %}
  {{ ep.pascal }}PathParams,
{% endif %}
{% if ep.has_body %}
  {{ ep.pascal }}Request,
{% endif %}
  {{ ep.pascal }}Response,
} from "../services/apiClient";

/** Loading and error state around {{ ep.fn }} ({{ ep.method }} {{ ep.path }}). */
export function {{ ep.hook }}({% if ep.params %}pathParams: {{ ep.pascal }}PathParams{% endif %}) {
  const [data, setData] = useState<{{ ep.pascal }}Response | null>(null);
  const [loading, setLoading] = useState(false);
  const [error, setError] = useState<string | null>(null);
{% if ep.has_body %}
  const [body, setBody] = useState<{{ ep.pascal }}Request>({} as {{ ep.pascal }}Request);
{% endif %}

  const run = useCallback(async () => {
    try {
      setLoading(true);
      setError(null);
      setData(await {{ ep.fn }}({{ ep.args | join(", ") }}));
    } catch (err) {
      setError(err instanceof Error ? err.message : "Unknown error");
    } finally {
      setLoading(false);
    }
  }, [{{ ep.args | join(", ") }}]);
{% if ep.method == "GET" %}

  useEffect(() => {
    void run();
  }, [run]);

  return { data, loading, error, refresh: run };
{% elif ep.has_body %}

  return { data, loading, error, body, setBody, run };
{% else %}

  return { data, loading, error, run };
{% endif %}
}
"""

_FORM_HOOK_TEMPLATE = """\
import { useMemo, useState } from "react";

export interface {{ values }} {
{% for field in fields %}
  {{ field }}: string;
{% else %}
  [key: string]: string;
{% endfor %}
}

export function validate(values: {{ values }}): Record<string, string> {
  const errors: Record<string, string> = {};
{% for field in fields %}
  if (!values.{{ field }} || values.{{ field }}.trim() === "") {
    errors.{{ field }} = "This field is required";
  }
{% endfor %}
  return errors;
}

const defaultValues: {{ values }} = {
{% for field in fields %}
  {{ field }}: "",
{% endfor %}
};

/** Form state and validation for {{ component }}. */
export function {{ hook }}(initial?: Partial<{{ values }}>) {
  const [values, setValues] = useState<{{ values }}>({ ...defaultValues, ...(initial ?? {}) } as {{ values }});
  const [errors, setErrors] = useState<Record<string, string>>({});
  const isValid = useMemo(() => Object.keys(errors).length === 0, [errors]);

  const setField = (key: keyof {{ values }}, value: string) => {
    setValues((prev) => ({ ...prev, [key]: value }));
  };

  const validateForm = () => {
    const next = validate(values);
    setErrors(next);
    return next;
  };

  return { values, errors, isValid, setField, validateForm, setValues };
}
"""

_PAGE_TEMPLATE = """\
import React from "react";

import {{ component }} from "../components/{{ component }}";

/** {{ title }} ({{ path }}). */
export default function {{ page }}(): JSX.Element {
  return (
    <section className="page {{ page | kebab_case }}">
      <h1>{{ title }}</h1>
      <{{ component }} />
    </section>
  );
}
"""

_DASHBOARD_TEMPLATE = """\
import React from "react";
{% if component %}

import {{ component }} from "../components/{{ component }}";
{% endif %}

const metrics: string[] = {{ metrics | tojson }};

export default function {{ page }}(): JSX.Element {
  return (
    <section className="page dashboard">
      <h1>Dashboard</h1>
      <div className="dashboard-grid">
        {metrics.map((metric) => (
          <div className="dashboard-card" key={metric}>
            <div className="dashboard-card-label">{metric}</div>
            <div className="dashboard-card-value">--</div>
          </div>
        ))}
      </div>
{% if component %}
      <{{ component }} />
{% endif %}
    </section>
  );
}
"""

_ROUTES_TEMPLATE = """\
import React from "react";
import { Navigate, Route, Routes } from "react-router-dom";

{% for route in routes %}
import {{ route.page }} from "./pages/{{ route.page }}";
{% endfor %}

export default function AppRoutes(): JSX.Element {
  return (
    <Routes>
      <Route path="/" element={<Navigate to="{{ home }}" replace />} />
{% for route in routes %}
      <Route path="{{ route.path }}" element={<{{ route.page }} />} />
{% endfor %}
      <Route path="*" element={<p>Not Found</p>} />
    </Routes>
  );
}
"""

_NAVIGATION_TEMPLATE = """\
import React from "react";
import { Link } from "react-router-dom";

export default function Navigation(): JSX.Element {
  return (
    <header className="app-header">
      <strong>{ {{ app_name | tojson }} }</strong>
      <nav>
{% for link in links %}
        <Link to="{{ link.path }}">{{ link.label }}</Link>
{% endfor %}
      </nav>
    </header>
  );
}
"""

_LAYOUT = """\
import React from "react";

import Navigation from "./Navigation";

export default function AppLayout(props: { children: React.ReactNode }): JSX.Element {
  return (
    <div className="app-layout">
      <Navigation />
      <main>{props.children}</main>
    </div>
  );
}
"""

_APP = """\
import React from "react";
import { BrowserRouter } from "react-router-dom";

import AppLayout from "./components/layout/AppLayout";
import AppRoutes from "./routes";

export default function App(): JSX.Element {
  return (
    <BrowserRouter>
      <AppLayout>
        <AppRoutes />
      </AppLayout>
    </BrowserRouter>
  );
}
"""

_INDEX = """\
import React from "react";
import ReactDOM from "react-dom/client";

import App from "./App";

ReactDOM.createRoot(document.getElementById("root") as HTMLElement).render(
  <React.StrictMode>
    <App />
  </React.StrictMode>
);
"""

_CONFIG_TEMPLATE = """\
export const API_BASE_URL: string =
  import.meta.env.VITE_API_BASE_URL ?? "http://localhost:{{ port }}";
"""

_INDEX_HTML_TEMPLATE = """\
<!doctype html>
<html lang="en">
  <head>
    <meta charset="UTF-8" />
    <meta name="viewport" content="width=device-width, initial-scale=1.0" />
    <title>{{ name | e }}</title>
  </head>
  <body>
    <div id="root"></div>
    <script type="module" src="/src/index.tsx"></script>
  </body>
</html>
"""

_VITE_CONFIG = """\
import { defineConfig } from "vite";
import react from "@vitejs/plugin-react";

export default defineConfig({
  plugins: [react()],
});
"""


# ---------------------------------------------------------------------------
# Naming
# ---------------------------------------------------------------------------


def _path_params(path: str) -> list[str]:
    return [segment[1:] for segment in path.split("/") if segment.startswith(":")]


def endpoint_resource(path: str) -> str:
    """Last literal segment of *path*, ignoring a leading ``/api``.

    ``/api/users/:id/posts`` -> ``posts``; ``/api/users/:id`` -> ``users``.
    """
    segments = [s for s in path.strip("/").split("/") if s]
    if segments and segments[0] == "api":
        segments = segments[1:]
    literals = [s for s in segments if not s.startswith(":")]
    return literals[-1] if literals else "resource"


def endpoint_function_name(endpoint: APIEndpointDefinition) -> str:
    """Client function name for *endpoint*.

    ======  =================  ==========================
    GET     ``/api/users``     ``getUsers``
    GET     ``/api/users/:id`` ``getUserById``
    POST    ``/api/users``     ``createUser``
    PUT     ``/api/users/:id`` ``updateUser``
    PATCH   ``/api/users/:id`` ``patchUser``
    DELETE  ``/api/users/:id`` ``deleteUser``
    ======  =================  ==========================
    """
    singular = singularize(endpoint_resource(endpoint.path))
    if endpoint.method is HTTPMethod.GET:
        params = _path_params(endpoint.path)
        if params:
            return to_camel_case(f"get {singular} by {' and '.join(params)}")
        return to_camel_case(f"get {pluralize(singular)}")
    return to_camel_case(f"{_VERBS[endpoint.method]} {singular}")


def page_name(component_name: str) -> str:
    """``UserList`` -> ``UserListPage``; names already ending in ``Page`` are kept."""
    name = component_name if component_name.endswith("Page") else f"{component_name}Page"
    return to_pascal_case(name)


def _title(name: str) -> str:
    return " ".join(word.capitalize() for word in to_snake_case(name).split("_") if word)


# ---------------------------------------------------------------------------
# Field inference
# ---------------------------------------------------------------------------


def find_table(resource: str, tables: list[TableDefinition]) -> TableDefinition | None:
    """The table backing *resource*, matched by singular or plural name."""
    plural = pluralize(singularize(resource)).lower()
    singular = singularize(plural)
    for table in tables:
        name = table.name.lower()
        if name in (plural, singular) or pluralize(name) == plural:
            return table
    return None


def infer_fields(
    component: UIComponentDefinition, resource: str, requirement: AppRequirement
) -> list[str]:
    """Fields a component shows: its own list, else its table's columns, else a per-type fallback."""
    if component.fields:
        fields = [sanitize_identifier(f) for f in component.fields]
    else:
        table = find_table(resource, requirement.database_tables or [])
        if table is not None:
            columns = [c.name for c in table.columns]
            if component.type is ComponentType.FORM:
                columns = [c for c in columns if c != "id"]
            fields = [sanitize_identifier(c) for c in columns[:MAX_INFERRED_FIELDS]]
        elif component.type in _FALLBACK_FIELDS:
            fields = list(_FALLBACK_FIELDS[component.type])
        else:
            fields = [sanitize_identifier(f) for f in requirement.features[:3]] or ["id"]

    if component.type in (ComponentType.LIST, ComponentType.DETAIL) and "id" not in fields:
        fields.insert(0, "id")
    return list(dict.fromkeys(fields))


# ---------------------------------------------------------------------------
# Generator
# ---------------------------------------------------------------------------


class ReactAppGenerator(DomainGenerator):
    """Produces a routed React project under ``src/`` plus its build files."""

    name = "react-app"

    async def _generate(self, requirement: AppRequirement) -> dict[str, str]:
        renderer = get_renderer()
        files: dict[str, str] = {}
        taken_hooks: set[str] = set()

        endpoints = self._endpoint_contexts(requirement.api_endpoints or [], taken_hooks)
        files["src/services/apiClient.ts"] = renderer.render_string(
            _API_CLIENT_TEMPLATE, {"endpoints": endpoints}
        )
        for ep in endpoints:
            claim_path(
                files,
                f"src/hooks/{ep['hook']}.ts",
                renderer.render_string(_DATA_HOOK_TEMPLATE, {"ep": ep}),
                self.name,
            )

        components = list(requirement.ui_components or [])
        # Page names must not shadow the component imports.
        taken_pages = {c.name for c in components}
        routes: dict[str, dict[str, Any]] = {}
        metrics = [f.strip() for f in requirement.features[:MAX_DASHBOARD_METRICS]]

        if not any(c.type is ComponentType.DASHBOARD for c in components):
            page = unique_name(DASHBOARD_PAGE, taken_pages, separator="")
            files[f"src/pages/{page}.tsx"] = renderer.render_string(
                _DASHBOARD_TEMPLATE, {"page": page, "component": "", "metrics": metrics}
            )
            routes[DASHBOARD_ROUTE] = {
                "path": DASHBOARD_ROUTE, "page": page, "label": "Dashboard", "nav": True
            }

        for component in components:
            await self._component_files(
                component, requirement, files, routes, taken_pages, taken_hooks, metrics
            )

        route_list = list(routes.values())
        files["src/routes.tsx"] = renderer.render_string(
            _ROUTES_TEMPLATE, {"routes": route_list, "home": DASHBOARD_ROUTE}
        )
        files["src/components/layout/Navigation.tsx"] = renderer.render_string(
            _NAVIGATION_TEMPLATE,
            {"app_name": requirement.name, "links": [r for r in route_list if r["nav"]]},
        )
        files["src/components/layout/AppLayout.tsx"] = _LAYOUT
        files["src/App.tsx"] = _APP
        files["src/index.tsx"] = _INDEX
        files["src/config.ts"] = renderer.render_string(
            _CONFIG_TEMPLATE, {"port": self.config.backend.port}
        )
        files.update(self._project_files(requirement))

        logger.info(
            "React app bundle: %d file(s), %d route(s)", len(files), len(route_list)
        )
        return files

    def _endpoint_contexts(
        self, endpoints: list[APIEndpointDefinition], taken_hooks: set[str]
    ) -> list[dict[str, Any]]:
        taken_functions: set[str] = set()
        contexts = []
        for endpoint in endpoints:
            fn = unique_name(endpoint_function_name(endpoint), taken_functions, separator="")
            pascal = to_pascal_case(fn)
            params = _path_params(endpoint.path)
            has_body = endpoint.method in _BODY_METHODS
            path_expr = "/".join(
                f"${{encodeURIComponent(pathParams.{sanitize_identifier(s[1:])})}}"
                if s.startswith(":") else s
                for s in endpoint.path.split("/")
            )
            args = (["pathParams"] if params else []) + (["body"] if has_body else [])
            contexts.append(
                {
                    "fn": fn,
                    "pascal": pascal,
                    "hook": unique_name(f"use{pascal}", taken_hooks, separator=""),
                    "method": endpoint.method.value,
                    "path": endpoint.path,
                    "path_expr": path_expr,
                    "description": " ".join(endpoint.description.split()).replace("*/", "* /"),
                    "params": [sanitize_identifier(p) for p in params],
                    "has_body": has_body,
                    "request_fields": _body_fields(endpoint.request_body),
                    "response_fields": _body_fields(endpoint.response_body),
                    "args": args,
                }
            )
        return contexts

    async def _component_files(
        self,
        component: UIComponentDefinition,
        requirement: AppRequirement,
        files: dict[str, str],
        routes: dict[str, dict[str, Any]],
        taken_pages: set[str],
        taken_hooks: set[str],
        metrics: list[str],
    ) -> None:
        renderer = get_renderer()
        resource = (
            endpoint_resource(component.related_endpoints[0])
            if component.related_endpoints
            else to_kebab_case(component.name)
        )
        fields = infer_fields(component, resource, requirement)
        logger.debug("Component %s (%s) uses resource %s", component.name, component.type.value, resource)

        result = await self.registry.invoke(
            FRONTEND_SERVICE,
            "generate-component",
            {
                "name": component.name,
                "props": {
                    "type": component.type.value,
                    "endpoints": list(component.related_endpoints),
                    "fields": fields,
                },
            },
        )
        claim_path(
            files,
            f"src/components/{component.name}.tsx",
            result.get("code") or f"// {component.name} component",
            self.name,
        )

        page = unique_name(page_name(component.name), taken_pages, separator="")
        route = _component_route(component, resource)
        if component.type is ComponentType.DASHBOARD:
            content = renderer.render_string(
                _DASHBOARD_TEMPLATE,
                {"page": page, "component": component.name, "metrics": metrics},
            )
        else:
            if component.type is ComponentType.FORM:
                hook = unique_name(f"use{component.name}Form", taken_hooks, separator="")
                claim_path(
                    files,
                    f"src/hooks/{hook}.ts",
                    renderer.render_string(
                        _FORM_HOOK_TEMPLATE,
                        {
                            "hook": hook,
                            "values": f"{to_pascal_case(hook)}Values",
                            "component": component.name,
                            "fields": fields,
                        },
                    ),
                    self.name,
                )
            content = renderer.render_string(
                _PAGE_TEMPLATE,
                {"page": page, "component": component.name, "title": route["title"], "path": route["path"]},
            )
        claim_path(files, f"src/pages/{page}.tsx", content, self.name)

        if route["path"] in routes:
            logger.warning(
                "Route %s of %s replaces %s", route["path"], page, routes[route["path"]]["page"]
            )
        routes[route["path"]] = {
            "path": route["path"], "page": page, "label": route["label"], "nav": route["nav"]
        }

    def _project_files(self, requirement: AppRequirement) -> dict[str, str]:
        renderer = get_renderer()
        package = {
            "name": f"{sanitize_name(requirement.name) or 'app'}-web",
            "private": True,
            "version": "0.1.0",
            "type": "module",
            "scripts": {
                "dev": "vite",
                "build": "tsc -b && vite build",
                "preview": "vite preview",
            },
            "dependencies": {
                "react": "^18.2.0",
                "react-dom": "^18.2.0",
                "react-router-dom": "^6.22.0",
            },
            "devDependencies": {
                "@types/react": "^18.2.61",
                "@types/react-dom": "^18.2.19",
                "@vitejs/plugin-react": "^4.3.1",
                "typescript": "^5.5.4",
                "vite": "^5.4.0",
            },
        }
        tsconfig = {
            "compilerOptions": {
                "target": "ES2020",
                "lib": ["ES2020", "DOM", "DOM.Iterable"],
                "module": "ESNext",
                "moduleResolution": "Bundler",
                "jsx": "react-jsx",
                "strict": True,
                "noEmit": True,
                "skipLibCheck": True,
                "types": ["vite/client"],
            },
            "include": ["src"],
        }
        return {
            "package.json": json.dumps(package, indent=2),
            "tsconfig.json": json.dumps(tsconfig, indent=2),
            "vite.config.ts": _VITE_CONFIG,
            "index.html": renderer.render_string(_INDEX_HTML_TEMPLATE, {"name": requirement.name}),
        }


def _body_fields(shape: dict[str, Any] | None) -> list[str]:
    return list(dict.fromkeys(sanitize_identifier(key) for key in shape or {}))


def _component_route(component: UIComponentDefinition, resource: str) -> dict[str, Any]:
    """Route path, page title and navigation entry for a component's page."""
    plural = pluralize(singularize(resource))
    base = f"/{to_kebab_case(plural)}"
    if component.type is ComponentType.LIST:
        label = to_pascal_case(plural)
        return {"path": base, "title": label, "label": label, "nav": True}
    if component.type is ComponentType.DETAIL:
        params = _path_params(component.related_endpoints[0]) or ["id"]
        path = base + "".join(f"/:{p}" for p in params)
        return {"path": path, "title": to_pascal_case(singularize(plural)), "label": "", "nav": False}
    if component.type is ComponentType.FORM:
        title = f"New {to_pascal_case(singularize(plural))}"
        return {"path": f"{base}/new", "title": title, "label": title, "nav": False}
    if component.type is ComponentType.DASHBOARD:
        return {"path": DASHBOARD_ROUTE, "title": "Dashboard", "label": "Dashboard", "nav": True}
    return {
        "path": f"/{to_kebab_case(component.name)}",
        "title": _title(component.name),
        "label": _title(component.name),
        "nav": True,
    }
