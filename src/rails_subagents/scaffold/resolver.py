"""Configuration resolver: merge explicit overrides with scanned signals."""

from __future__ import annotations

import logging
from dataclasses import dataclass, fields
from typing import TYPE_CHECKING, Any

import yaml

from rails_subagents.introspection.scanner import TestTool

if TYPE_CHECKING:
    from collections.abc import Mapping
    from pathlib import Path

    from rails_subagents.introspection.scanner import ProjectSignals

logger = logging.getLogger(__name__)

CONFIG_FILE = (".claude", "subagents.yml")

# Flags without a corresponding signal fall back to these.
_UNSIGNALLED_DEFAULTS: dict[str, bool] = {
    "skip_tests": False,
}


@dataclass(frozen=True)
class Overrides:
    """Caller-supplied flags.  ``None`` means "not supplied"."""

    api_only: bool | None = None
    skip_tests: bool | None = None
    include_query_layer: bool | None = None
    include_interactive_extras: bool | None = None

    def layered_over(self, base: Overrides) -> Overrides:
        """Return overrides where every flag set on *self* wins over *base*."""
        values: dict[str, bool | None] = {}
        for f in fields(self):
            own = getattr(self, f.name)
            values[f.name] = own if own is not None else getattr(base, f.name)
        return Overrides(**values)

    @classmethod
    def from_mapping(cls, data: Mapping[str, Any]) -> Overrides:
        """Build overrides from a config mapping, skipping invalid entries."""
        known = {f.name for f in fields(cls)}
        values: dict[str, bool] = {}
        for key, value in data.items():
            if key not in known:
                logger.warning("Ignoring unknown config key: %s", key)
                continue
            if not isinstance(value, bool):
                logger.warning("Ignoring non-boolean value for %s: %r", key, value)
                continue
            values[key] = value
        return cls(**values)


@dataclass(frozen=True)
class Configuration:
    """Final resolved settings for one generation run."""

    api_only: bool
    skip_tests: bool
    include_query_layer: bool
    include_interactive_extras: bool
    test_tool: TestTool
    app_name: str

    @property
    def project_type(self) -> str:
        return "API-only" if self.api_only else "Full-stack Rails"


def merge(overrides: Overrides, signals: ProjectSignals) -> Configuration:
    """Resolve *overrides* against *signals* into a :class:`Configuration`.

    An explicitly supplied flag always wins over the scanned signal.  An
    API-only project never gets interactive frontend extras, whatever the
    overrides say.
    """

    def pick(override: bool | None, fallback: bool) -> bool:
        return fallback if override is None else override

    api_only = pick(overrides.api_only, signals.api_only)
    skip_tests = pick(overrides.skip_tests, _UNSIGNALLED_DEFAULTS["skip_tests"])
    include_query_layer = pick(overrides.include_query_layer, signals.has_query_layer)
    include_interactive_extras = pick(
        overrides.include_interactive_extras, signals.has_component_frontend
    )

    if api_only and include_interactive_extras:
        logger.debug("api_only is set; disabling interactive frontend extras")
        include_interactive_extras = False

    return Configuration(
        api_only=api_only,
        skip_tests=skip_tests,
        include_query_layer=include_query_layer,
        include_interactive_extras=include_interactive_extras,
        test_tool=TestTool.NONE if skip_tests else signals.test_tool,
        app_name=signals.app_name,
    )


def load_overrides(project_root: Path) -> Overrides:
    """Load overrides from ``.claude/subagents.yml`` if present.

    A missing file yields empty overrides.  Unreadable or malformed files
    are logged and ignored.
    """
    config_path = project_root.joinpath(*CONFIG_FILE)
    if not config_path.is_file():
        return Overrides()

    try:
        with config_path.open("r", encoding="utf-8") as fh:
            data = yaml.safe_load(fh)
    except (OSError, yaml.YAMLError):
        logger.warning("Failed to read %s, ignoring it", config_path)
        return Overrides()

    if data is None:
        return Overrides()
    if not isinstance(data, dict):
        logger.warning("Expected a mapping in %s, ignoring it", config_path)
        return Overrides()
    return Overrides.from_mapping(data)
