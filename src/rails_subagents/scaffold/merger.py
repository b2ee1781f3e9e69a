"""Document merger: create or extend the shared ``CLAUDE.md`` guidance file.

Integration is detected with a plain substring search for the section
heading.  Concurrent runs against the same file are not supported.
"""

from __future__ import annotations

import enum
import logging
from typing import TYPE_CHECKING

from rails_subagents.errors import (
    ArtifactReadError,
    ArtifactWriteError,
    TemplateContractViolation,
)
from rails_subagents.scaffold import templates
from rails_subagents.scaffold.renderer import template_fields

if TYPE_CHECKING:
    from pathlib import Path

    from rails_subagents.scaffold.resolver import Configuration

logger = logging.getLogger(__name__)

GUIDANCE_DOCUMENT = "CLAUDE.md"
MARKER = "Rails Subagent Team"


class MergeOutcome(enum.Enum):
    """What the merger did to the guidance document."""

    CREATED = "created"
    APPENDED = "appended"
    ALREADY_INTEGRATED = "already_integrated"


def render_creation_document(config: Configuration) -> str:
    """Render the full ``CLAUDE.md`` used when the project has none."""
    try:
        return templates.CLAUDE_MD.format_map(template_fields(config))
    except KeyError as exc:
        raise TemplateContractViolation(GUIDANCE_DOCUMENT, str(exc.args[0])) from exc


def merge_guidance_text(
    existing: str | None,
    config: Configuration,
) -> tuple[str, MergeOutcome]:
    """Compute the new guidance document text.

    *existing* is ``None`` when the document does not exist yet.  Existing
    content is returned unchanged or extended at the end; it is never
    rewritten.
    """
    if existing is None:
        return render_creation_document(config), MergeOutcome.CREATED

    if MARKER in existing:
        return existing, MergeOutcome.ALREADY_INTEGRATED

    separator = "" if not existing or existing.endswith("\n") else "\n"
    return existing + separator + templates.GUIDANCE_SECTION, MergeOutcome.APPENDED


def read_guidance_document(project_root: Path) -> str | None:
    """Return the current ``CLAUDE.md`` text, or ``None`` when there is none.

    Raises
    ------
    ArtifactReadError
        If the document exists but cannot be read as UTF-8.
    """
    path = project_root / GUIDANCE_DOCUMENT
    if not path.exists():
        return None
    try:
        # newline="" keeps CRLF line endings intact.
        with path.open(encoding="utf-8", newline="") as fh:
            return fh.read()
    except (OSError, UnicodeDecodeError) as exc:
        raise ArtifactReadError(path, str(exc)) from exc


def write_guidance_document(
    project_root: Path,
    text: str,
    outcome: MergeOutcome,
    *,
    dry_run: bool = False,
) -> MergeOutcome:
    """Persist *text* computed by :func:`merge_guidance_text`.

    Nothing is written for ``ALREADY_INTEGRATED`` or with *dry_run*.

    Raises
    ------
    ArtifactWriteError
        If the document cannot be written.
    """
    path = project_root / GUIDANCE_DOCUMENT

    if outcome is MergeOutcome.ALREADY_INTEGRATED:
        logger.info("%s already references the Rails subagent team", path)
        return outcome

    if not dry_run:
        try:
            with path.open("w", encoding="utf-8", newline="") as fh:
                fh.write(text)
        except OSError as exc:
            raise ArtifactWriteError(path, str(exc)) from exc
    logger.info("%s %s", outcome.value.capitalize(), path)
    return outcome


def merge_guidance_document(
    project_root: Path,
    config: Configuration,
    *,
    dry_run: bool = False,
) -> MergeOutcome:
    """Create or update ``CLAUDE.md`` under *project_root*.

    Raises
    ------
    ArtifactReadError
        If the existing document cannot be read.
    ArtifactWriteError
        If the document cannot be written.
    """
    text, outcome = merge_guidance_text(read_guidance_document(project_root), config)
    return write_guidance_document(project_root, text, outcome, dry_run=dry_run)
