"""Template renderer: bind resolved configuration values into catalog templates."""

from __future__ import annotations

import logging
from dataclasses import dataclass
from typing import TYPE_CHECKING

from rails_subagents.introspection.scanner import TestTool
from rails_subagents.scaffold.catalog import check_fields, select_artifacts

if TYPE_CHECKING:
    from rails_subagents.scaffold.catalog import ArtifactSpec
    from rails_subagents.scaffold.resolver import Configuration

logger = logging.getLogger(__name__)


@dataclass(frozen=True)
class GeneratedArtifact:
    """Rendered content for one artifact, ready to be written."""

    identifier: str
    path: str
    content: str


def _test_command(tool: TestTool) -> str:
    if tool is TestTool.RSPEC:
        return "bundle exec rspec"
    if tool is TestTool.MINITEST:
        return "bin/rails test"
    if tool is TestTool.NONE:
        return "# tests are disabled for this project"
    msg = f"Unhandled test tool: {tool!r}"
    raise AssertionError(msg)


def _test_guidance(tool: TestTool) -> str:
    if tool is TestTool.RSPEC:
        return (
            "- Specs live in `spec/`, mirroring `app/`.\n"
            "- Use request specs for endpoints and model specs for validations and scopes.\n"
            "- Build records with factories; prefer `build_stubbed` when persistence is not needed.\n"
            "- Use `let` and `subject` sparingly and keep examples readable top to bottom."
        )
    if tool is TestTool.MINITEST:
        return (
            "- Tests live in `test/`, mirroring `app/`.\n"
            "- Use integration tests for request flows and model tests for validations.\n"
            "- Keep fixtures in `test/fixtures` small and meaningful.\n"
            "- Use system tests only for critical user journeys."
        )
    if tool is TestTool.NONE:
        return "- No test framework is configured; do not add test files unless asked."
    msg = f"Unhandled test tool: {tool!r}"
    raise AssertionError(msg)


def _test_workflow(tool: TestTool) -> str:
    if tool is TestTool.NONE:
        return "- No test framework is configured; skip running tests unless asked."
    if tool in (TestTool.RSPEC, TestTool.MINITEST):
        return f"- Tests use {tool.label}; run them before finishing any task."
    msg = f"Unhandled test tool: {tool!r}"
    raise AssertionError(msg)


def _specialists_list(config: Configuration) -> str:
    """Markdown bullet list of every selected subagent."""
    return "\n".join(
        f"- `{spec.identifier}`: {spec.description}" for spec in select_artifacts(config)
    )


def template_fields(config: Configuration) -> dict[str, str]:
    """Return every field a template may reference, derived from *config*."""
    return {
        "app_name": config.app_name,
        "project_type": config.project_type,
        "test_tool": config.test_tool.label,
        "test_command": _test_command(config.test_tool),
        "test_guidance": _test_guidance(config.test_tool),
        "test_workflow": _test_workflow(config.test_tool),
        "specialists": _specialists_list(config),
    }


def render(spec: ArtifactSpec, config: Configuration) -> str:
    """Render *spec* for *config*.

    Raises
    ------
    TemplateContractViolation
        If the template references a field :func:`template_fields` does not produce.
    """
    return spec.render(template_fields(config))


def render_all(config: Configuration) -> list[GeneratedArtifact]:
    """Render every artifact selected for *config*, in catalog order.

    Every catalog template is checked against the resolved fields first, so a
    broken template fails the run even when its artifact is not selected.
    """
    fields = template_fields(config)
    check_fields(fields)
    artifacts = [
        GeneratedArtifact(
            identifier=spec.identifier,
            path=spec.relative_path,
            content=spec.render(fields),
        )
        for spec in select_artifacts(config)
    ]
    logger.debug("Rendered %d artifacts", len(artifacts))
    return artifacts
