"""Introspection domain — infer project signals from the directory layout."""

from rails_subagents.introspection.gemfile import parse_gem_names, read_gem_names
from rails_subagents.introspection.scanner import (
    DEFAULT_TEST_TOOL,
    ProjectSignals,
    TestTool,
    scan,
)

__all__ = [
    "DEFAULT_TEST_TOOL",
    "ProjectSignals",
    "TestTool",
    "parse_gem_names",
    "read_gem_names",
    "scan",
]
