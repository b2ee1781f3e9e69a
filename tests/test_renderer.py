"""Tests for rails_subagents.scaffold.renderer — template binding."""

from __future__ import annotations

import string

import pytest

from rails_subagents.introspection import TestTool
from rails_subagents.scaffold.catalog import CATALOG, get_artifact
from rails_subagents.scaffold.renderer import render, render_all, template_fields
from rails_subagents.scaffold.resolver import Configuration
from rails_subagents.scaffold.templates import CLAUDE_MD, GUIDANCE_SECTION


def _config(**kwargs: object) -> Configuration:
    base: dict[str, object] = {
        "api_only": False,
        "skip_tests": False,
        "include_query_layer": False,
        "include_interactive_extras": False,
        "test_tool": TestTool.RSPEC,
        "app_name": "Storefront",
    }
    base.update(kwargs)
    return Configuration(**base)  # type: ignore[arg-type]


class TestTemplateFields:
    def test_every_catalog_placeholder_is_resolved(self) -> None:
        fields = template_fields(_config())
        for spec in CATALOG:
            assert spec.placeholders() <= fields.keys(), spec.identifier

    def test_guidance_templates_are_resolved(self) -> None:
        fields = template_fields(_config())
        for template in (CLAUDE_MD, GUIDANCE_SECTION):
            names = {n for _, n, _, _ in string.Formatter().parse(template) if n}
            assert names <= fields.keys()

    @pytest.mark.parametrize("tool", list(TestTool))
    def test_every_test_tool_renders(self, tool: TestTool) -> None:
        fields = template_fields(_config(test_tool=tool))
        assert fields["test_command"]
        assert fields["test_guidance"]
        assert fields["test_workflow"]

    def test_workflow_without_tests(self) -> None:
        fields = template_fields(_config(skip_tests=True, test_tool=TestTool.NONE))
        assert "none" not in fields["test_workflow"]
        assert fields["test_workflow"].startswith("- No test framework")


class TestRender:
    def test_architect_lists_selected_team(self) -> None:
        text = render(get_artifact("rails-architect"), _config(include_query_layer=True))
        assert "**Storefront** (Full-stack Rails)" in text
        assert "- `rails-graphql`: GraphQL API development" in text
        assert "rails-stimulus" not in text

    def test_architect_api_only(self) -> None:
        text = render(get_artifact("rails-architect"), _config(api_only=True))
        assert "(API-only)" in text
        assert "- `rails-api`:" in text
        assert "- `rails-views`:" not in text

    def test_rspec_tests_agent(self) -> None:
        text = render(get_artifact("rails-tests"), _config())
        assert "description: Testing specialist using RSpec." in text
        assert "bundle exec rspec" in text
        assert "`spec/`" in text

    def test_minitest_tests_agent(self) -> None:
        text = render(get_artifact("rails-tests"), _config(test_tool=TestTool.MINITEST))
        assert "**Minitest**" in text
        assert "bin/rails test" in text
        assert "bundle exec rspec" not in text

    def test_static_template_unchanged(self) -> None:
        spec = get_artifact("rails-models")
        assert render(spec, _config()) == spec.template


class TestRenderAll:
    def test_paths_and_order_follow_selection(self) -> None:
        artifacts = render_all(_config(include_interactive_extras=True))
        assert [a.identifier for a in artifacts][0] == "rails-architect"
        assert artifacts[-1].path == ".claude/agents/rails-tests.md"
        assert any(a.identifier == "rails-stimulus" for a in artifacts)

    def test_deterministic(self) -> None:
        config = _config(include_query_layer=True, include_interactive_extras=True)
        assert render_all(config) == render_all(config)

    def test_no_unrendered_placeholders(self) -> None:
        for artifact in render_all(_config(include_query_layer=True)):
            assert "{" not in artifact.content
            assert "}" not in artifact.content
