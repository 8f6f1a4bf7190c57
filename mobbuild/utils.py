"""Shared utility functions for mobbuild.

Provides the naming helpers every generator relies on (case conversion,
pluralisation, identifier sanitisation), JSON I/O, and Rich-based console
reporting for the CLI.
"""

from __future__ import annotations

import asyncio
import json
import re
from pathlib import Path
from typing import Any

from rich.console import Console
from rich.table import Table

console = Console()

# ---------------------------------------------------------------------------
# Case conversion
# ---------------------------------------------------------------------------


def to_pascal_case(value: str) -> str:
    """Convert ``user-profile``, ``user_profile`` or ``user profile`` to ``UserProfile``.

    Existing inner capitals are kept, so ``userProfile`` becomes ``UserProfile``.
    """
    parts = re.split(r"[^a-zA-Z0-9]+", value)
    return "".join(part[0].upper() + part[1:] for part in parts if part)


def to_camel_case(value: str) -> str:
    """Convert ``some-thing`` or ``some_thing`` to ``someThing``."""
    pascal = to_pascal_case(value)
    if pascal:
        return pascal[0].lower() + pascal[1:]
    return ""


def to_snake_case(value: str) -> str:
    """Convert ``SomeThing`` or ``some-thing`` to ``some_thing``."""
    s1 = re.sub(r"(.)([A-Z][a-z]+)", r"\1_\2", value)
    s2 = re.sub(r"([a-z0-9])([A-Z])", r"\1_\2", s1)
    s3 = re.sub(r"[^a-zA-Z0-9]+", "_", s2)
    return s3.strip("_").lower()


def to_kebab_case(value: str) -> str:
    """Convert ``SomeThing`` or ``some_thing`` to ``some-thing``."""
    return to_snake_case(value).replace("_", "-")


# ---------------------------------------------------------------------------
# Pluralisation
# ---------------------------------------------------------------------------


def pluralize(word: str) -> str:
    """Naive English plural: ``category`` -> ``categories``, ``box`` -> ``boxes``."""
    if not word:
        return word
    lower = word.lower()
    if lower.endswith("y") and not lower.endswith(("ay", "ey", "oy", "uy")):
        return word[:-1] + "ies"
    if lower.endswith(("s", "sh", "ch", "x", "z")):
        return word + "es"
    return word + "s"


def singularize(word: str) -> str:
    """Inverse of :func:`pluralize` for the common cases."""
    lower = word.lower()
    if lower.endswith("ies") and len(word) > 3:
        return word[:-3] + "y"
    if lower.endswith(("ses", "shes", "ches", "xes", "zes")):
        return word[:-2]
    if lower.endswith("s") and not lower.endswith("ss") and len(word) > 1:
        return word[:-1]
    return word


# ---------------------------------------------------------------------------
# Identifier helpers
# ---------------------------------------------------------------------------


def sanitize_identifier(value: str) -> str:
    """Turn arbitrary text into a valid JS/SQL identifier.

    Examples::

        sanitize_identifier("first-name") -> "first_name"
        sanitize_identifier("2fa")        -> "_2fa"
    """
    result = re.sub(r"[^a-zA-Z0-9_]", "_", value.strip())
    if not result:
        return "_"
    if result[0].isdigit():
        result = f"_{result}"
    return result


def sanitize_name(name: str) -> str:
    """Convert an arbitrary app name to a safe directory/package name.

    Examples::

        sanitize_name("My Blog") -> "my-blog"
        sanitize_name("  2FA (TOTP)  ") -> "2fa-totp"
    """
    result = re.sub(r"[^a-zA-Z0-9_-]", "-", name.strip().lower())
    result = re.sub(r"-+", "-", result)
    return result.strip("-")


def path_to_identifier(path: str) -> str:
    """Flatten a URL path into an identifier fragment.

    Parameter segments keep a ``by_`` marker so that ``/users/:id`` and
    ``/users/id`` stay distinct.

    ``/api/users/:id`` -> ``api_users_by_id``; ``/`` -> ``root``.
    """
    parts: list[str] = []
    for segment in path.split("/"):
        if not segment:
            continue
        if segment.startswith(":") or (segment.startswith("{") and segment.endswith("}")):
            parts.append(f"by_{sanitize_identifier(segment.strip(':{}'))}")
        else:
            parts.append(sanitize_identifier(segment))
    return "_".join(parts) or "root"


def unique_name(base: str, taken: set[str], separator: str = "_") -> str:
    """Return *base*, or *base* plus the first free numeric suffix, and reserve it.

    Examples::

        unique_name("get_users", {"get_users"})          -> "get_users_2"
        unique_name("getUsers", {"getUsers"}, separator="") -> "getUsers2"
    """
    candidate = base
    counter = 2
    while candidate in taken:
        candidate = f"{base}{separator}{counter}"
        counter += 1
    taken.add(candidate)
    return candidate


# ---------------------------------------------------------------------------
# JSON I/O
# ---------------------------------------------------------------------------


def load_json(path: str | Path) -> dict[str, Any]:
    """Load and parse a JSON file.

    Raises:
        FileNotFoundError: If the file does not exist.
        json.JSONDecodeError: If the file is not valid JSON.
    """
    raw = Path(path).read_text(encoding="utf-8")
    data = json.loads(raw)
    if not isinstance(data, dict):
        return {"_root": data}
    return data


async def save_json(data: dict[str, Any] | list[Any], path: str | Path) -> None:
    """Save data as pretty-printed JSON.

    Parent directories are created automatically.  The write itself is
    performed in a worker thread to avoid blocking the event loop.
    """
    file_path = Path(path)
    file_path.parent.mkdir(parents=True, exist_ok=True)
    content = json.dumps(data, indent=2, ensure_ascii=False, default=str)
    await asyncio.to_thread(file_path.write_text, content, "utf-8")


# ---------------------------------------------------------------------------
# Rich output helpers
# ---------------------------------------------------------------------------


def print_summary_table(data: dict[str, str], title: str = "Summary") -> None:
    """Print a two-column key/value summary table."""
    table = Table(title=title, show_header=True, header_style="bold cyan")
    table.add_column("Item", style="dim", no_wrap=True)
    table.add_column("Value")

    for key, value in data.items():
        table.add_row(key, str(value))

    console.print(table)
    console.print()


def print_success(message: str) -> None:
    """Print a green success message."""
    console.print(f"[bold green]{message}[/bold green]")


def print_error(message: str) -> None:
    """Print a red error message."""
    console.print(f"[bold red]{message}[/bold red]")


def print_warning(message: str) -> None:
    """Print a yellow warning message."""
    console.print(f"[bold yellow]{message}[/bold yellow]")
