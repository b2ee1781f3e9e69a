"""Template catalog: the static table of subagent files that can be generated.

Each entry pairs an inclusion predicate over the resolved configuration with
an output path and a template.  Selection is a plain filter over the table,
so deciding *what* to generate stays separate from rendering and writing.
"""

from __future__ import annotations

import string
from dataclasses import dataclass
from typing import TYPE_CHECKING

from rails_subagents.errors import TemplateContractViolation
from rails_subagents.scaffold import templates

if TYPE_CHECKING:
    from collections.abc import Callable, Mapping

    from rails_subagents.scaffold.resolver import Configuration

AGENTS_DIR = ".claude/agents"
ORCHESTRATOR_ID = "rails-architect"


@dataclass(frozen=True)
class ArtifactSpec:
    """One generated subagent file."""

    identifier: str
    description: str
    predicate: Callable[[Configuration], bool]
    relative_path: str
    template: str

    def includes(self, config: Configuration) -> bool:
        return self.predicate(config)

    def placeholders(self) -> frozenset[str]:
        """Field names the template references."""
        return frozenset(
            name for _, name, _, _ in string.Formatter().parse(self.template) if name
        )

    def render(self, fields: Mapping[str, str]) -> str:
        """Bind *fields* into the template.

        Raises
        ------
        TemplateContractViolation
            If the template references a field missing from *fields*.
        """
        try:
            return self.template.format_map(fields)
        except KeyError as exc:
            raise TemplateContractViolation(self.identifier, str(exc.args[0])) from exc


def _always(_config: Configuration) -> bool:
    return True


def _agent(
    identifier: str,
    description: str,
    template: str,
    predicate: Callable[[Configuration], bool] = _always,
) -> ArtifactSpec:
    return ArtifactSpec(
        identifier=identifier,
        description=description,
        predicate=predicate,
        relative_path=f"{AGENTS_DIR}/{identifier}.md",
        template=template,
    )


# ---------------------------------------------------------------------------
# Catalog (order is the reporting order)
# ---------------------------------------------------------------------------

CATALOG: tuple[ArtifactSpec, ...] = (
    _agent(ORCHESTRATOR_ID, "Orchestrates all Rails development", templates.ARCHITECT),
    _agent("rails-models", "Database and ActiveRecord expert", templates.MODELS),
    _agent("rails-controllers", "Routing and request handling", templates.CONTROLLERS),
    _agent("rails-services", "Business logic patterns", templates.SERVICES),
    _agent("rails-jobs", "Background jobs and queues", templates.JOBS),
    _agent("rails-devops", "Deployment and infrastructure", templates.DEVOPS),
    _agent(
        "rails-views",
        "UI and templates",
        templates.VIEWS,
        lambda c: not c.api_only,
    ),
    _agent(
        "rails-api",
        "JSON API design and serialization",
        templates.API,
        lambda c: c.api_only,
    ),
    _agent(
        "rails-graphql",
        "GraphQL API development",
        templates.GRAPHQL,
        lambda c: c.include_query_layer,
    ),
    _agent(
        "rails-stimulus",
        "Turbo and Stimulus interactivity",
        templates.STIMULUS,
        lambda c: c.include_interactive_extras,
    ),
    _agent(
        "rails-tests",
        "Test coverage and test-driven changes",
        templates.TESTS,
        lambda c: not c.skip_tests,
    ),
)

_BY_ID: dict[str, ArtifactSpec] = {spec.identifier: spec for spec in CATALOG}


def get_artifact(identifier: str) -> ArtifactSpec:
    """Return the catalog entry for *identifier*.  Raises ``KeyError`` if unknown."""
    return _BY_ID[identifier]


def select_artifacts(config: Configuration) -> tuple[ArtifactSpec, ...]:
    """Return the catalog entries whose predicate holds for *config*."""
    return tuple(spec for spec in CATALOG if spec.includes(config))


def check_fields(fields: Mapping[str, str]) -> None:
    """Check that every catalog template only references names in *fields*.

    Raises
    ------
    TemplateContractViolation
        For the first entry, in catalog order, with an unresolved placeholder.
    """
    for spec in CATALOG:
        missing = spec.placeholders() - fields.keys()
        if missing:
            raise TemplateContractViolation(spec.identifier, min(missing))
