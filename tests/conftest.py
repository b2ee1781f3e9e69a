"""Shared test fixtures for rails-subagents."""

from __future__ import annotations

from typing import TYPE_CHECKING

import pytest

if TYPE_CHECKING:
    from pathlib import Path

_APPLICATION_RB = """\
require_relative "boot"

require "rails/all"

module Storefront
  class Application < Rails::Application
    config.load_defaults 7.1
  end
end
"""

_GEMFILE = """\
source "https://rubygems.org"

gem "rails", "~> 7.1"
gem "pg"
"""


def _write_file(path: Path, content: str = "") -> Path:
    """Create parent dirs and write *content* to *path*."""
    path.parent.mkdir(parents=True, exist_ok=True)
    path.write_text(content, encoding="utf-8")
    return path


@pytest.fixture()
def rails_project(tmp_path: Path) -> Path:
    """Create a minimal full-stack Rails project layout."""
    root = tmp_path / "storefront"
    _write_file(root / "config" / "application.rb", _APPLICATION_RB)
    _write_file(root / "Gemfile", _GEMFILE)
    (root / "app" / "models").mkdir(parents=True)
    (root / "app" / "controllers").mkdir(parents=True)
    return root
