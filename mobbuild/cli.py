"""Command-line entry point.

Usage::

    python -m mobbuild requirements.txt
    python -m mobbuild requirements.txt --structured app.json --deploy
    python -m mobbuild requirements.txt --save generated.json --log-level DEBUG
"""

from __future__ import annotations

import argparse
import asyncio
import json
import sys
from pathlib import Path
from typing import Any

from pydantic import ValidationError

from .config import LOG_LEVELS, Config
from .errors import MobBuildError, PlanningError
from .log import configure_logging
from .models import AppRequirement, GeneratedApp
from .orchestrator import Orchestrator
from .providers import default_providers
from .registry import ProviderRegistry
from .utils import (
    console,
    load_json,
    print_error,
    print_success,
    print_summary_table,
    print_warning,
    save_json,
)


def build_parser() -> argparse.ArgumentParser:
    parser = argparse.ArgumentParser(
        prog="mobbuild",
        description="mobbuild -- scaffold a frontend, backend and database from a requirement",
        formatter_class=argparse.RawDescriptionHelpFormatter,
        epilog=(
            "Examples:\n"
            "  python -m mobbuild requirements.txt\n"
            "  python -m mobbuild requirements.txt --structured app.json --deploy\n"
        ),
    )
    parser.add_argument("requirements", help="Path to the requirements text file")
    parser.add_argument(
        "--structured",
        default=None,
        help="JSON file with database_tables / api_endpoints / ui_components (and optional overrides)",
    )
    parser.add_argument(
        "--deploy", action="store_true", help="Run the full plan -> generate -> deploy workflow"
    )
    parser.add_argument("--save", default=None, help="Write the generated app as JSON to this path")
    parser.add_argument("--config", default=None, help="Load configuration from a JSON file")
    parser.add_argument(
        "--log-level",
        default=None,
        type=str.upper,
        choices=LOG_LEVELS,
        help="Override LOG_LEVEL",
    )
    parser.add_argument("--github-owner", default=None, help="Owner used in repository URLs")
    return parser


def _load_config(args: argparse.Namespace) -> Config:
    config = Config.load(Path(args.config)) if args.config else Config.from_env()
    if args.log_level:
        config.log_level = args.log_level
    if args.github_owner:
        config.github.owner = args.github_owner
    return config


def merge_structured(requirement: AppRequirement, structured: dict[str, Any]) -> AppRequirement:
    """Overlay structured JSON on a parsed requirement and re-validate."""
    data = requirement.model_dump()
    data.update(structured)
    return AppRequirement.model_validate(data)


def _print_app(app: GeneratedApp) -> None:
    print_summary_table(
        {
            "App id": app.id,
            "Name": app.name,
            "Status": app.status.value,
            "Frontend files": str(len(app.frontend.code)),
            "Backend files": str(len(app.backend.code)),
            "Schema files": str(len(app.database.schema_files)),
            "Migrations": str(len(app.database.migrations)),
            "Repository": app.github.repository_url or "-",
        },
        title="Generated App",
    )


async def run(args: argparse.Namespace, config: Config) -> int:
    """Execute one CLI invocation; returns the process exit code."""
    req_path = Path(args.requirements)
    text = req_path.read_text(encoding="utf-8")

    structured: dict[str, Any] | None = None
    if args.structured:
        try:
            structured = load_json(args.structured)
        except OSError as exc:
            print_error(f"Cannot read structured requirement: {exc}")
            return 1
        except json.JSONDecodeError as exc:
            print_error(f"Structured requirement is not valid JSON: {exc}")
            return 1
        if "_root" in structured:
            print_error("Structured requirement must be a JSON object")
            return 1

    registry = ProviderRegistry()
    for provider in default_providers():
        await registry.register(provider)
    orchestrator = Orchestrator(registry, config)

    try:
        requirement = await orchestrator.parse(text)
        if structured is not None:
            requirement = merge_structured(requirement, structured)

        if args.deploy:
            app = await orchestrator.orchestrate(requirement)
        else:
            app = await orchestrator.generate(requirement)
    except PlanningError as exc:
        print_error("Planning failed:")
        for message in exc.errors:
            print_warning(f"  - {message}")
        return 1
    except ValidationError as exc:
        print_error(f"Invalid structured requirement: {exc}")
        return 1
    except MobBuildError as exc:
        print_error(str(exc))
        return 1
    finally:
        await registry.shutdown_all()

    _print_app(app)
    if args.save:
        await save_json(app.model_dump(mode="json", by_alias=True), args.save)
        console.print(f"  Saved generated app to [bold]{args.save}[/bold]")

    print_success(f"{app.name} {app.status.value}")
    return 0


def main(argv: list[str] | None = None) -> None:
    """CLI entry point for ``python -m mobbuild``."""
    parser = build_parser()
    args = parser.parse_args(argv)

    req_path = Path(args.requirements)
    if not req_path.exists():
        console.print(f"[bold red]Error:[/bold red] Requirements file not found: {req_path}")
        sys.exit(1)

    try:
        config = _load_config(args)
    except (OSError, ValueError) as exc:
        console.print(f"[bold red]Error:[/bold red] Invalid configuration: {exc}")
        sys.exit(1)

    configure_logging(config.log_level)
    sys.exit(asyncio.run(run(args, config)))


if __name__ == "__main__":
    main()
