"""Exception hierarchy shared by every generation stage."""

from __future__ import annotations

from typing import TYPE_CHECKING

if TYPE_CHECKING:
    from pathlib import Path


class ScaffoldError(Exception):
    """Base class for all fatal generator errors."""


class MissingRootError(ScaffoldError):
    """Raised when the project root does not exist or is not a directory."""

    def __init__(self, project_root: Path) -> None:
        self.project_root = project_root
        super().__init__(f"Project root not found: {project_root}")


class TemplateContractViolation(ScaffoldError):
    """Raised when a template references a field the resolver never produced.

    Catalog templates and the resolved configuration are kept in sync by
    construction, so this always indicates a programming error.
    """

    def __init__(self, artifact_id: str, field: str) -> None:
        self.artifact_id = artifact_id
        self.field = field
        super().__init__(
            f"Template for artifact '{artifact_id}' references unknown field '{field}'"
        )


class ArtifactWriteError(ScaffoldError):
    """Raised when a generated file cannot be written."""

    def __init__(self, path: Path, reason: str) -> None:
        self.path = path
        self.reason = reason
        super().__init__(f"Cannot write {path}: {reason}")


class ArtifactReadError(ScaffoldError):
    """Raised when an existing file the generator must merge into cannot be read."""

    def __init__(self, path: Path, reason: str) -> None:
        self.path = path
        self.reason = reason
        super().__init__(f"Cannot read {path}: {reason}")
