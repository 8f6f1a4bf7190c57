"""Jinja2 template rendering for generated source files.

Provides the ``TemplateRenderer`` the providers use to turn their input
mappings into TypeScript, TSX and SQL text.  Templates are inline strings
owned by each provider; the naming helpers from :mod:`mobbuild.utils` are
registered as filters so templates can write ``{{ name | pascal_case }}``.
"""

from __future__ import annotations

from typing import Any

from jinja2 import Environment, StrictUndefined, Template

from .utils import (
    path_to_identifier,
    pluralize,
    sanitize_identifier,
    singularize,
    to_camel_case,
    to_kebab_case,
    to_pascal_case,
    to_snake_case,
)


class TemplateRenderer:
    """Renders inline Jinja2 templates with project-specific context.

    Compiled templates are cached by source string, so providers can call
    :meth:`render_string` with the same module-level template repeatedly.
    """

    def __init__(self) -> None:
        self.env = Environment(
            autoescape=False,
            keep_trailing_newline=True,
            trim_blocks=True,
            lstrip_blocks=True,
            undefined=StrictUndefined,
        )
        self.env.filters["pascal_case"] = to_pascal_case
        self.env.filters["camel_case"] = to_camel_case
        self.env.filters["snake_case"] = to_snake_case
        self.env.filters["kebab_case"] = to_kebab_case
        self.env.filters["pluralize"] = pluralize
        self.env.filters["singularize"] = singularize
        self.env.filters["identifier"] = sanitize_identifier
        self.env.filters["path_identifier"] = path_to_identifier
        self._cache: dict[str, Template] = {}

    def render_string(self, template_string: str, context: dict[str, Any]) -> str:
        """Render an inline template string with the provided context.

        Raises:
            jinja2.UndefinedError: If the template references a variable
                missing from *context*.
        """
        template = self._cache.get(template_string)
        if template is None:
            template = self.env.from_string(template_string)
            self._cache[template_string] = template
        return template.render(**context)


_default_renderer: TemplateRenderer | None = None


def get_renderer() -> TemplateRenderer:
    """Return the process-wide shared renderer, creating it on first use."""
    global _default_renderer
    if _default_renderer is None:
        _default_renderer = TemplateRenderer()
    return _default_renderer
