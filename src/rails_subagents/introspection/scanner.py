"""Signal scanner: infer structural facts about a Rails project from its layout."""

from __future__ import annotations

import enum
import logging
import re
from dataclasses import dataclass
from typing import TYPE_CHECKING

from rails_subagents.errors import MissingRootError
from rails_subagents.introspection.gemfile import read_gem_names

if TYPE_CHECKING:
    from pathlib import Path

logger = logging.getLogger(__name__)


class TestTool(enum.Enum):
    """Test framework used by the project."""

    __test__ = False  # keep pytest from collecting the enum

    RSPEC = "rspec"
    MINITEST = "minitest"
    NONE = "none"

    @property
    def label(self) -> str:
        """Human-readable framework name."""
        return _TEST_TOOL_LABELS[self]


_TEST_TOOL_LABELS: dict[TestTool, str] = {
    TestTool.RSPEC: "RSpec",
    TestTool.MINITEST: "Minitest",
    TestTool.NONE: "none",
}

# Rails ships Minitest out of the box.
DEFAULT_TEST_TOOL = TestTool.MINITEST

_APPLICATION_RB = ("config", "application.rb")
_API_ONLY_RE = re.compile(r"^\s*config\.api_only\s*=\s*true\b", re.MULTILINE)
_APP_MODULE_RE = re.compile(r"^\s*module\s+([A-Z][A-Za-z0-9_]*)", re.MULTILINE)

_QUERY_SCHEMA_DIR = ("app", "graphql")
_STIMULUS_CONTROLLERS_DIR = ("app", "javascript", "controllers")
_FRONTEND_GEMS = frozenset({"turbo-rails", "stimulus-rails"})


@dataclass(frozen=True)
class ProjectSignals:
    """Facts inferred by scanning the project tree."""

    api_only: bool = False
    has_query_layer: bool = False
    has_component_frontend: bool = False
    test_tool: TestTool = DEFAULT_TEST_TOOL
    app_name: str = ""


def _safe_read(path: Path) -> str:
    """Read file text, returning empty string when missing or unreadable."""
    try:
        return path.read_text(encoding="utf-8")
    except (OSError, UnicodeDecodeError):
        return ""


def _detect_api_only(application_rb: str) -> bool:
    return bool(_API_ONLY_RE.search(application_rb))


def _detect_test_tool(project_root: Path, gems: frozenset[str]) -> TestTool:
    """Pick the test framework from gem declarations, then directory layout.

    RSpec wins when both frameworks are present; with no evidence at all
    the Rails default is returned.
    """
    if "rspec-rails" in gems or "rspec" in gems:
        return TestTool.RSPEC
    if (project_root / ".rspec").is_file() or (project_root / "spec").is_dir():
        return TestTool.RSPEC
    if "minitest" in gems or (project_root / "test").is_dir():
        return TestTool.MINITEST
    return DEFAULT_TEST_TOOL


def _detect_component_frontend(project_root: Path, gems: frozenset[str]) -> bool:
    if gems & _FRONTEND_GEMS:
        return True
    return project_root.joinpath(*_STIMULUS_CONTROLLERS_DIR).is_dir()


def _detect_app_name(project_root: Path, application_rb: str) -> str:
    """Application module name from ``config/application.rb``, else the dir name."""
    match = _APP_MODULE_RE.search(application_rb)
    if match:
        return match.group(1)
    return project_root.name


def scan(project_root: Path) -> ProjectSignals:
    """Scan *project_root* and return the detected :class:`ProjectSignals`.

    Any individual marker that is missing or unreadable simply leaves its
    signal at the default.  Only a missing root is an error.

    Raises
    ------
    MissingRootError
        If *project_root* does not exist or is not a directory.
    """
    if not project_root.is_dir():
        raise MissingRootError(project_root)

    application_rb = _safe_read(project_root.joinpath(*_APPLICATION_RB))
    gems = read_gem_names(project_root)

    signals = ProjectSignals(
        api_only=_detect_api_only(application_rb),
        has_query_layer=project_root.joinpath(*_QUERY_SCHEMA_DIR).is_dir(),
        has_component_frontend=_detect_component_frontend(project_root, gems),
        test_tool=_detect_test_tool(project_root, gems),
        app_name=_detect_app_name(project_root, application_rb),
    )
    logger.debug("Scanned %s: %s", project_root, signals)
    return signals
