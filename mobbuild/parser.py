"""Line-oriented requirement parser.

Turns loosely formatted text such as::

    Name: Blog
    Description: A small blog
    Features:
    - posts
    - comments

into an ``AppRequirement``.  Only name, description and features are
extracted; tables, endpoints and components must be supplied directly.
"""

from __future__ import annotations

from .models import AppRequirement

DEFAULT_APP_NAME = "MyApp"
DEFAULT_DESCRIPTION = "A generated application"
DEFAULT_FEATURES: tuple[str, ...] = ("User management", "Data CRUD")


def _non_blank_lines(text: str) -> list[str]:
    return [line for line in text.splitlines() if line.strip()]


def _field_value(lines: list[str], marker: str) -> str | None:
    """Text after the first colon of the first line containing *marker*."""
    for line in lines:
        if marker in line.lower():
            return line.split(":", 1)[1].strip()
    return None


def extract_features(lines: list[str]) -> list[str]:
    """Collect ``- item`` lines that follow the first ``features:`` line.

    The section has no terminator; every dash line up to the end of the input
    counts.
    """
    features: list[str] = []
    in_section = False
    for line in lines:
        stripped = line.strip()
        if not in_section:
            in_section = "features:" in line.lower()
            continue
        if stripped.startswith("-"):
            features.append(stripped[1:].strip())
    return features


def parse_requirement(text: str) -> AppRequirement:
    """Parse free text into an ``AppRequirement``, applying fixed fallbacks."""
    lines = _non_blank_lines(text)
    name = _field_value(lines, "name:")
    description = _field_value(lines, "description:")
    features = extract_features(lines)

    return AppRequirement(
        name=name if name is not None else DEFAULT_APP_NAME,
        description=description if description is not None else DEFAULT_DESCRIPTION,
        features=features or list(DEFAULT_FEATURES),
    )
