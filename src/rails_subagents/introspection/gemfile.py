"""Gemfile reader: extract declared gem names from a Rails project."""

from __future__ import annotations

import logging
import re
from typing import TYPE_CHECKING

if TYPE_CHECKING:
    from pathlib import Path

logger = logging.getLogger(__name__)

# Matches both quoting styles: gem "rspec-rails" and gem 'rspec-rails', "~> 6.0"
_GEM_RE = re.compile(r"""^\s*gem\s*\(?\s*['"]([A-Za-z0-9_.\-]+)['"]""")


def _strip_comment(line: str) -> str:
    """Drop a trailing ``#`` comment that is not inside a quoted string."""
    quote: str | None = None
    for idx, char in enumerate(line):
        if quote:
            if char == quote:
                quote = None
        elif char in ("'", '"'):
            quote = char
        elif char == "#":
            return line[:idx]
    return line


def parse_gem_names(text: str) -> frozenset[str]:
    """Return the set of gem names declared in Gemfile *text*.

    Group blocks (``group :test do ... end``) are flattened: a gem counts
    as declared regardless of the group it sits in.
    """
    names: set[str] = set()
    for raw_line in text.splitlines():
        match = _GEM_RE.match(_strip_comment(raw_line))
        if match:
            names.add(match.group(1))
    return frozenset(names)


def read_gem_names(project_root: Path) -> frozenset[str]:
    """Read the project's ``Gemfile`` and return declared gem names.

    A missing or unreadable Gemfile yields an empty set.
    """
    gemfile = project_root / "Gemfile"
    if not gemfile.is_file():
        return frozenset()
    try:
        text = gemfile.read_text(encoding="utf-8")
    except (OSError, UnicodeDecodeError):
        logger.debug("Could not read %s", gemfile)
        return frozenset()
    return parse_gem_names(text)
