"""Artifact writer: put rendered subagent files on disk."""

from __future__ import annotations

import enum
import logging
from typing import TYPE_CHECKING

from rails_subagents.errors import ArtifactWriteError

if TYPE_CHECKING:
    from pathlib import Path

    from rails_subagents.scaffold.renderer import GeneratedArtifact

logger = logging.getLogger(__name__)


class WriteStatus(enum.Enum):
    """Result of writing one artifact."""

    CREATE = "create"
    IDENTICAL = "identical"
    UPDATE = "update"


def _current_content(path: Path) -> str | None:
    """Existing file text, or ``None`` when absent or unreadable."""
    if not path.is_file():
        return None
    try:
        # newline="" so CRLF content never compares equal to LF content.
        with path.open(encoding="utf-8", newline="") as fh:
            return fh.read()
    except (OSError, UnicodeDecodeError):
        return None


def write_artifact(
    project_root: Path,
    artifact: GeneratedArtifact,
    *,
    dry_run: bool = False,
) -> WriteStatus:
    """Write *artifact* under *project_root*, creating parent directories.

    Files whose content already matches are left untouched.  With *dry_run*
    the status is computed but nothing is written.

    Raises
    ------
    ArtifactWriteError
        If the directory or file cannot be written.
    """
    path = project_root / artifact.path
    current = _current_content(path)

    if current == artifact.content:
        return WriteStatus.IDENTICAL
    status = WriteStatus.CREATE if not path.exists() else WriteStatus.UPDATE

    if dry_run:
        return status

    try:
        path.parent.mkdir(parents=True, exist_ok=True)
        path.write_text(artifact.content, encoding="utf-8", newline="")
    except OSError as exc:
        raise ArtifactWriteError(path, str(exc)) from exc

    logger.info("%s %s", status.value, artifact.path)
    return status
