"""rails-subagents CLI entry point."""

from __future__ import annotations

import json
import logging
import sys
from pathlib import Path

import click

from rails_subagents import __version__
from rails_subagents.errors import ScaffoldError

_LOG_FORMAT = "%(levelname)s %(name)s: %(message)s"

_GUIDANCE_MESSAGES = {
    "created": "Created CLAUDE.md with Rails development guidance",
    "appended": "Added Rails subagent team section to CLAUDE.md",
    "already_integrated": "CLAUDE.md already references the Rails subagent team",
}

_EXAMPLE_PROMPTS = (
    '"Add user authentication with email confirmation"',
    '"Create a REST API for blog posts with comments"',
    '"Build a real-time chat feature using Turbo"',
)

_project_option = click.option(
    "--project",
    type=click.Path(file_okay=False, path_type=Path),
    default=None,
    help="Rails project root (default: current directory).",
)


@click.group()
@click.version_option(version=__version__, prog_name="rails-subagents")
@click.option("--verbose", "-v", is_flag=True, help="Verbose output.")
@click.option("--quiet", "-q", is_flag=True, help="Minimal output (errors only).")
@click.pass_context
def main(ctx: click.Context, *, verbose: bool, quiet: bool) -> None:
    """Rails subagents - scaffold Claude Code subagents for a Rails project."""
    ctx.ensure_object(dict)
    ctx.obj["verbose"] = verbose
    ctx.obj["quiet"] = quiet

    level = logging.WARNING
    if verbose:
        level = logging.DEBUG
    elif quiet:
        level = logging.ERROR
    logging.basicConfig(level=level, format=_LOG_FORMAT)


def _yes_no(value: bool) -> str:
    return "Yes" if value else "No"


@main.command()
@_project_option
@click.option(
    "--api-only/--no-api-only",
    default=None,
    help="Treat the project as API-only (auto-detected if omitted).",
)
@click.option(
    "--skip-tests/--no-skip-tests",
    default=None,
    help="Skip the test subagent.",
)
@click.option(
    "--graphql/--no-graphql",
    default=None,
    help="Include the GraphQL specialist (auto-detected if omitted).",
)
@click.option(
    "--turbo/--no-turbo",
    default=None,
    help="Include the Turbo/Stimulus specialist (auto-detected if omitted).",
)
@click.option("--dry-run", is_flag=True, help="Show what would be written without writing.")
@click.pass_context
def generate(
    ctx: click.Context,
    *,
    project: Path | None,
    api_only: bool | None,
    skip_tests: bool | None,
    graphql: bool | None,
    turbo: bool | None,
    dry_run: bool,
) -> None:
    """Generate Rails subagents in .claude/agents/ and update CLAUDE.md."""
    from rails_subagents.generator import generate as run_generator
    from rails_subagents.introspection.scanner import TestTool
    from rails_subagents.scaffold.catalog import get_artifact
    from rails_subagents.scaffold.resolver import Overrides

    project_root = project or Path.cwd()
    quiet = bool(ctx.obj and ctx.obj.get("quiet"))
    overrides = Overrides(
        api_only=api_only,
        skip_tests=skip_tests,
        include_query_layer=graphql,
        include_interactive_extras=turbo,
    )

    try:
        report = run_generator(project_root, overrides, dry_run=dry_run)
    except ScaffoldError as exc:
        click.echo(f"Error: {exc}", err=True)
        sys.exit(1)

    if quiet:
        return

    config = report.config
    click.echo(f"Project type: {config.project_type}")
    if config.test_tool is not TestTool.NONE:
        click.echo(f"Test framework: {config.test_tool.label}")
    click.echo(f"GraphQL detected: {_yes_no(config.include_query_layer)}")
    click.echo(f"Turbo/Stimulus: {_yes_no(config.include_interactive_extras)}")
    click.echo("")

    prefix = "would " if dry_run else ""
    for result in report.artifacts:
        click.echo(f"  {prefix}{result.status.value:<10} {result.path}")
    if report.guidance is not None:
        message = _GUIDANCE_MESSAGES[report.guidance.value]
        click.echo(f"  {'(dry run) ' if dry_run else ''}{message}")

    click.echo("\nAvailable specialists:")
    for identifier in report.identifiers:
        click.echo(f"  - {identifier}: {get_artifact(identifier).description}")

    click.echo("\nExample prompts:")
    for prompt in _EXAMPLE_PROMPTS:
        click.echo(f"  {prompt}")
    click.echo(
        "\nThe rails-architect will coordinate the right specialists for your task."
    )


@main.command()
@_project_option
@click.option("--json", "output_json", is_flag=True, help="Output as JSON.")
def scan(*, project: Path | None, output_json: bool) -> None:
    """Show the signals detected in a Rails project."""
    from rails_subagents.introspection.scanner import scan as scan_project

    project_root = project or Path.cwd()
    try:
        signals = scan_project(project_root)
    except ScaffoldError as exc:
        click.echo(f"Error: {exc}", err=True)
        sys.exit(1)

    data = {
        "app_name": signals.app_name,
        "api_only": signals.api_only,
        "has_query_layer": signals.has_query_layer,
        "has_component_frontend": signals.has_component_frontend,
        "test_tool": signals.test_tool.value,
    }

    if output_json:
        click.echo(json.dumps(data, ensure_ascii=False, indent=2))
        return

    from rich.console import Console
    from rich.table import Table

    table = Table(title=f"Signals: {signals.app_name}", show_header=False, box=None)
    table.add_column("signal", style="cyan")
    table.add_column("value", justify="right")
    table.add_row("API-only", _yes_no(signals.api_only))
    table.add_row("GraphQL schema", _yes_no(signals.has_query_layer))
    table.add_row("Turbo/Stimulus frontend", _yes_no(signals.has_component_frontend))
    table.add_row("Test framework", signals.test_tool.label)
    Console().print(table)
