"""Command-line entry point for ``cli-rt``.

Usage::

    cli-rt
    cli-rt --template tailwind --name my-app --firebase
    cli-rt -t react -n my-app -p lodash@4.0.0 axios
"""

from __future__ import annotations

import argparse
import asyncio
import sys
from collections.abc import Sequence

from rich.markup import escape
from rich.table import Table

from cli_rt.config import Settings
from cli_rt.copier import TemplateNotFoundError
from cli_rt.models import CliOptions
from cli_rt.pipeline import ScaffoldPipeline
from cli_rt.prompts import collect_answers
from cli_rt.templates import UnknownTemplateError
from cli_rt.utils import (
    console,
    print_error,
    print_success,
    print_title,
    print_warning,
)

HELP_ROWS: tuple[tuple[str, str], ...] = (
    ("cli-rt [-p | --packages] dependency1 dependency2...", "Install custom dependencies to the template"),
    ("cli-rt [-t | --template] [react, styled-components, tailwind]", "Select the template"),
    ("cli-rt [-f | --firebase]", "Install firebase to the template"),
    ("cli-rt [-n | --name]", "Set the name of the project"),
    ("cli-rt [-g | --test]", "Resolve templates from ./templates"),
    ("cli-rt [-h | --help]", "Display this help list"),
)


def build_parser() -> argparse.ArgumentParser:
    parser = argparse.ArgumentParser(
        prog="cli-rt",
        description="Scaffold a React project from a bundled template",
        add_help=False,
    )
    parser.add_argument("--packages", "-p", nargs="+", default=None, metavar="PACKAGE")
    parser.add_argument("--template", "-t", default=None)
    parser.add_argument("--firebase", "-f", action="store_true", default=None)
    parser.add_argument("--test", "-g", action="store_true", default=False)
    parser.add_argument("--name", "-n", default=None)
    parser.add_argument("--help", "-h", action="store_true", default=False)
    return parser


def parse_args(argv: Sequence[str] | None = None) -> CliOptions:
    """Parse *argv* into ``CliOptions``.

    Unknown flags are rejected: argparse prints usage and exits with status 2.
    """
    args = build_parser().parse_args(argv)
    return CliOptions(
        packages=args.packages,
        template=args.template,
        firebase=args.firebase,
        test=args.test,
        name=args.name,
        help=args.help,
    )


def print_help() -> None:
    table = Table(title="React template CLI help", show_header=False, title_style="bold magenta")
    table.add_column("Usage", style="cyan", no_wrap=True)
    table.add_column("Description", style="yellow")
    for usage, description in HELP_ROWS:
        table.add_row(usage, description)
    console.print(table)


def main(argv: Sequence[str] | None = None) -> None:
    """CLI entry point for ``cli-rt`` and ``python -m cli_rt``."""
    cli = parse_args(argv)
    print_title()

    if cli.help:
        print_help()
        return

    try:
        settings = Settings.from_env()
    except ValueError as exc:
        print_error(f"Invalid CLI_RT_* environment setting: {escape(str(exc))}")
        sys.exit(2)

    pipeline = ScaffoldPipeline(settings=settings)
    try:
        answers = collect_answers(cli, pipeline.prompter)
        result = asyncio.run(pipeline.run(cli, answers))
    except (UnknownTemplateError, TemplateNotFoundError) as exc:
        print_error(escape(str(exc)))
        sys.exit(1)
    except KeyboardInterrupt:
        console.print()
        print_error("Aborted.")
        sys.exit(130)

    if result.success:
        print_success(f"Project {escape(result.options.project_name)} is ready.")
    else:
        failed = ", ".join(key for key, status in result.installs.items() if status == "failure")
        print_warning(f"Project created, but these installs failed: {failed}")


if __name__ == "__main__":
    main()
