"""Generation pipeline: scan, resolve, select, render, write, merge."""

from __future__ import annotations

import logging
from dataclasses import dataclass, field
from typing import TYPE_CHECKING

from rails_subagents.introspection.scanner import scan
from rails_subagents.scaffold.merger import (
    merge_guidance_text,
    read_guidance_document,
    write_guidance_document,
)
from rails_subagents.scaffold.renderer import render_all
from rails_subagents.scaffold.resolver import Overrides, load_overrides, merge
from rails_subagents.scaffold.writer import write_artifact

if TYPE_CHECKING:
    from pathlib import Path

    from rails_subagents.introspection.scanner import ProjectSignals
    from rails_subagents.scaffold.merger import MergeOutcome
    from rails_subagents.scaffold.resolver import Configuration
    from rails_subagents.scaffold.writer import WriteStatus

logger = logging.getLogger(__name__)


@dataclass(frozen=True)
class ArtifactResult:
    """Outcome for one generated subagent file."""

    identifier: str
    path: str
    status: WriteStatus


@dataclass
class GenerationReport:
    """Everything a run decided and did."""

    signals: ProjectSignals
    config: Configuration
    artifacts: list[ArtifactResult] = field(default_factory=list)
    guidance: MergeOutcome | None = None
    dry_run: bool = False

    @property
    def identifiers(self) -> list[str]:
        return [a.identifier for a in self.artifacts]


def resolve_configuration(
    project_root: Path,
    overrides: Overrides | None = None,
    *,
    use_config_file: bool = True,
) -> tuple[ProjectSignals, Configuration]:
    """Scan *project_root* and resolve the run configuration.

    Overrides passed in win over those from ``.claude/subagents.yml``.
    """
    signals = scan(project_root)
    effective = overrides or Overrides()
    if use_config_file:
        effective = effective.layered_over(load_overrides(project_root))
    return signals, merge(effective, signals)


def generate(
    project_root: Path,
    overrides: Overrides | None = None,
    *,
    dry_run: bool = False,
    use_config_file: bool = True,
) -> GenerationReport:
    """Run the full generator against *project_root*.

    All artifacts and the ``CLAUDE.md`` text are rendered before the first
    write, so a template error or an unreadable ``CLAUDE.md`` leaves the
    project untouched.  A write failure stops the run; files written before
    it stay in place.

    Raises
    ------
    MissingRootError
        If *project_root* does not exist.
    TemplateContractViolation
        If a template references a field that is not resolved.
    ArtifactReadError
        If an existing ``CLAUDE.md`` cannot be read.
    ArtifactWriteError
        If a file cannot be written.
    """
    signals, config = resolve_configuration(
        project_root, overrides, use_config_file=use_config_file
    )
    rendered = render_all(config)
    guidance_text, guidance_outcome = merge_guidance_text(
        read_guidance_document(project_root), config
    )

    report = GenerationReport(signals=signals, config=config, dry_run=dry_run)
    for artifact in rendered:
        status = write_artifact(project_root, artifact, dry_run=dry_run)
        report.artifacts.append(ArtifactResult(artifact.identifier, artifact.path, status))

    report.guidance = write_guidance_document(
        project_root, guidance_text, guidance_outcome, dry_run=dry_run
    )
    logger.info(
        "Generated %d subagents for %s (dry_run=%s)",
        len(report.artifacts),
        project_root,
        dry_run,
    )
    return report
