"""Command-line entry point for creating a new Clarinet project.

Settings are resolved in this order: command-line flags, then a JSON file
given with ``--config``, then ``CLARINET_*`` environment variables.

Usage::

    python -m src.cli my-project
    python -m src.cli my-project --path ./work --telemetry --with scripts
    python -m src.cli my-project --dry-run --json > plan.json
    python -m src.cli --from-plan plan.json
"""

from __future__ import annotations

import argparse
import asyncio
import sys
from pathlib import Path
from typing import Any

from pydantic import ValidationError
from rich.markup import escape

from src.config import Config
from src.scaffolder import (
    Change,
    ExecutorError,
    OptionalDirectory,
    ProjectChangesBuilder,
    apply_changes,
    dump_changes,
    load_changes,
)
from src.utils import console, print_error, print_success, print_summary_table, print_warning


def build_parser() -> argparse.ArgumentParser:
    """Return the argument parser for ``clarinet-new``."""
    parser = argparse.ArgumentParser(
        prog="clarinet-new",
        description="Create a new Clarity smart-contract project",
        formatter_class=argparse.RawDescriptionHelpFormatter,
        epilog=(
            "Examples:\n"
            "  clarinet-new counter\n"
            "  clarinet-new counter --path ./work --with scripts --with clients\n"
            "  clarinet-new counter --dry-run --json > plan.json\n"
            "  clarinet-new --from-plan plan.json\n"
            "\n"
            "Unset options fall back to CLARINET_PROJECT_NAME, CLARINET_PROJECT_PATH,\n"
            "CLARINET_TELEMETRY, CLARINET_OPTIONAL_DIRS and CLARINET_OVERWRITE.\n"
        ),
    )
    parser.add_argument(
        "name",
        nargs="?",
        default=None,
        help="Name of the project (and of its directory)",
    )
    parser.add_argument(
        "--path", "-p",
        default=None,
        help="Parent directory for the project (default: current directory)",
    )
    parser.add_argument(
        "--telemetry",
        action=argparse.BooleanOptionalAction,
        default=None,
        help="Enable telemetry in Clarinet.toml",
    )
    parser.add_argument(
        "--with",
        dest="optional_directories",
        action="append",
        default=None,
        choices=[d.value for d in OptionalDirectory],
        help="Also create an auxiliary directory (repeatable)",
    )
    parser.add_argument(
        "--overwrite",
        action="store_true",
        default=None,
        help="Replace files that already exist",
    )
    parser.add_argument(
        "--dry-run",
        action="store_true",
        default=None,
        help="Print the planned changes without touching the filesystem",
    )
    parser.add_argument(
        "--json",
        action="store_true",
        help="With --dry-run, print the change list as JSON",
    )
    parser.add_argument(
        "--config",
        default=None,
        help="Read settings from a JSON file written by --save-config",
    )
    parser.add_argument(
        "--save-config",
        default=None,
        help="Write the resolved settings to a JSON file",
    )
    parser.add_argument(
        "--from-plan",
        default=None,
        help="Apply a change list written by --dry-run --json instead of building one",
    )
    return parser


def resolve_config(args: argparse.Namespace) -> Config:
    """Merge command-line flags, an optional config file and the environment.

    Raises:
        ValidationError: If the merged settings are invalid (e.g. no name).
        OSError: If the ``--config`` file cannot be read.
    """
    overrides: dict[str, Any] = {}
    if args.config:
        overrides.update(Config.load(Path(args.config)).model_dump())

    flags = {
        "project_name": args.name,
        "project_path": Path(args.path) if args.path is not None else None,
        "telemetry_enabled": args.telemetry,
        "optional_directories": args.optional_directories,
        "overwrite": args.overwrite,
        "dry_run": args.dry_run,
    }
    overrides.update({key: value for key, value in flags.items() if value is not None})
    return Config.from_env(**overrides)


def _load_plan(path: str) -> list[Change]:
    try:
        return load_changes(Path(path).read_bytes())
    except OSError as exc:
        print_error(f"Error: cannot read plan: {escape(str(exc))}")
    except ValidationError as exc:
        print_error(f"Invalid plan {escape(path)}: {escape(str(exc))}")
    sys.exit(1)


def _apply(changes: list[Change], overwrite: bool, title: str, location: str) -> None:
    try:
        report = asyncio.run(apply_changes(changes, overwrite=overwrite))
    except ExecutorError as exc:
        print_error(f"Error: {escape(str(exc))}")
        sys.exit(1)

    print_summary_table(
        {
            "Project": title,
            "Location": location,
            "Directories created": str(len(report.created_directories)),
            "Files created": str(len(report.created_files)),
            "Files skipped": str(len(report.skipped)),
        },
        title="New project",
    )
    if report.skipped:
        print_warning(
            f"{len(report.skipped)} existing file(s) left untouched; use --overwrite to replace them"
        )
    print_success(f"Project {escape(title)} created")


def main(argv: list[str] | None = None) -> None:
    """CLI entry point for ``python -m src.cli``."""
    args = build_parser().parse_args(argv)

    if args.from_plan:
        changes = _load_plan(args.from_plan)
        if not changes:
            print_error(f"Plan {escape(args.from_plan)} contains no changes")
            sys.exit(1)
        root = changes[0]
        _apply(changes, bool(args.overwrite), root.name, root.path)
        return

    try:
        config = resolve_config(args)
    except ValidationError as exc:
        print_error(f"Invalid configuration: {escape(str(exc))}")
        sys.exit(1)
    except OSError as exc:
        print_error(f"Error: cannot read config: {escape(str(exc))}")
        sys.exit(1)

    if args.save_config:
        config.save(Path(args.save_config))

    changes = ProjectChangesBuilder(
        str(config.project_path),
        config.project_name,
        config.telemetry_enabled,
        optional_directories=config.optional_directories,
    ).run()

    if config.dry_run:
        if args.json:
            # Rich would treat the comment markup inside the JSON as styling.
            print(dump_changes(changes))
        else:
            for change in changes:
                console.print(f"[dim]would apply:[/dim] {change.comment}")
        return

    _apply(changes, config.overwrite, config.project_name, str(config.project_root))


if __name__ == "__main__":
    main()
