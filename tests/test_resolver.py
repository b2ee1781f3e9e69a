"""Tests for rails_subagents.scaffold.resolver — override/signal resolution."""

from __future__ import annotations

import itertools
import logging
from typing import TYPE_CHECKING

import pytest

from rails_subagents.introspection import ProjectSignals, TestTool
from rails_subagents.scaffold.resolver import Configuration, Overrides, load_overrides, merge

if TYPE_CHECKING:
    from pathlib import Path


def _signals(**kwargs: object) -> ProjectSignals:
    base: dict[str, object] = {"app_name": "Demo", "test_tool": TestTool.RSPEC}
    base.update(kwargs)
    return ProjectSignals(**base)  # type: ignore[arg-type]


def _write_config(root: Path, content: str) -> None:
    path = root / ".claude" / "subagents.yml"
    path.parent.mkdir(parents=True, exist_ok=True)
    path.write_text(content, encoding="utf-8")


class TestFallbackToSignals:
    def test_unset_overrides_use_signals(self) -> None:
        signals = _signals(has_query_layer=True, has_component_frontend=True)
        config = merge(Overrides(), signals)
        assert config == Configuration(
            api_only=False,
            skip_tests=False,
            include_query_layer=True,
            include_interactive_extras=True,
            test_tool=TestTool.RSPEC,
            app_name="Demo",
        )

    def test_skip_tests_defaults_false(self) -> None:
        assert merge(Overrides(), _signals()).skip_tests is False


class TestOverridePrecedence:
    @pytest.mark.parametrize("flag", ["skip_tests", "include_query_layer"])
    @pytest.mark.parametrize("value", [True, False])
    def test_override_wins_over_signal(self, flag: str, value: bool) -> None:
        for query, frontend in itertools.product([True, False], repeat=2):
            signals = _signals(has_query_layer=query, has_component_frontend=frontend)
            config = merge(Overrides(**{flag: value}), signals)
            assert getattr(config, flag) is value

    @pytest.mark.parametrize("value", [True, False])
    @pytest.mark.parametrize("signal", [True, False])
    def test_api_only_override(self, value: bool, signal: bool) -> None:
        config = merge(Overrides(api_only=value), _signals(api_only=signal))
        assert config.api_only is value

    @pytest.mark.parametrize("value", [True, False])
    @pytest.mark.parametrize("signal", [True, False])
    def test_interactive_extras_override_without_api_mode(
        self, value: bool, signal: bool
    ) -> None:
        config = merge(
            Overrides(include_interactive_extras=value),
            _signals(has_component_frontend=signal),
        )
        assert config.include_interactive_extras is value

    def test_false_override_beats_true_signal(self) -> None:
        config = merge(Overrides(include_query_layer=False), _signals(has_query_layer=True))
        assert config.include_query_layer is False


class TestStructuralExclusion:
    def test_api_only_signal_disables_extras(self) -> None:
        config = merge(Overrides(), _signals(api_only=True, has_component_frontend=True))
        assert config.include_interactive_extras is False

    def test_api_only_beats_explicit_extras_override(self) -> None:
        config = merge(
            Overrides(api_only=True, include_interactive_extras=True),
            _signals(),
        )
        assert config.include_interactive_extras is False

    def test_api_only_override_false_keeps_extras(self) -> None:
        config = merge(
            Overrides(api_only=False),
            _signals(api_only=True, has_component_frontend=True),
        )
        assert config.include_interactive_extras is True


class TestTestTool:
    def test_scanned_tool_kept(self) -> None:
        assert merge(Overrides(), _signals()).test_tool is TestTool.RSPEC

    def test_skip_tests_resolves_none(self) -> None:
        assert merge(Overrides(skip_tests=True), _signals()).test_tool is TestTool.NONE


class TestConfigurationImmutable:
    def test_frozen(self) -> None:
        config = merge(Overrides(), _signals())
        with pytest.raises(AttributeError):
            config.api_only = True  # type: ignore[misc]

    def test_project_type(self) -> None:
        assert merge(Overrides(api_only=True), _signals()).project_type == "API-only"
        assert merge(Overrides(), _signals()).project_type == "Full-stack Rails"


class TestLayering:
    def test_own_values_win(self) -> None:
        cli = Overrides(api_only=False)
        file_values = Overrides(api_only=True, skip_tests=True)
        layered = cli.layered_over(file_values)
        assert layered == Overrides(api_only=False, skip_tests=True)

    def test_empty_over_empty(self) -> None:
        assert Overrides().layered_over(Overrides()) == Overrides()


class TestLoadOverrides:
    def test_missing_file(self, tmp_path: Path) -> None:
        assert load_overrides(tmp_path) == Overrides()

    def test_reads_flags(self, tmp_path: Path) -> None:
        _write_config(tmp_path, "skip_tests: true\ninclude_query_layer: false\n")
        assert load_overrides(tmp_path) == Overrides(
            skip_tests=True, include_query_layer=False
        )

    def test_empty_file(self, tmp_path: Path) -> None:
        _write_config(tmp_path, "")
        assert load_overrides(tmp_path) == Overrides()

    def test_invalid_yaml_ignored(
        self, tmp_path: Path, caplog: pytest.LogCaptureFixture
    ) -> None:
        _write_config(tmp_path, "api_only: [unclosed\n")
        with caplog.at_level(logging.WARNING):
            assert load_overrides(tmp_path) == Overrides()
        assert "Failed to read" in caplog.text

    def test_non_mapping_ignored(self, tmp_path: Path) -> None:
        _write_config(tmp_path, "- api_only\n")
        assert load_overrides(tmp_path) == Overrides()

    def test_unknown_and_non_boolean_keys_skipped(
        self, tmp_path: Path, caplog: pytest.LogCaptureFixture
    ) -> None:
        _write_config(tmp_path, "api_only: yes please\nturbo: true\nskip_tests: true\n")
        with caplog.at_level(logging.WARNING):
            overrides = load_overrides(tmp_path)
        assert overrides == Overrides(skip_tests=True)
        assert "unknown config key: turbo" in caplog.text
        assert "non-boolean value for api_only" in caplog.text
