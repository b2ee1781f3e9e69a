"""Scaffold domain — configuration, template catalog, rendering and writing."""

from rails_subagents.scaffold.catalog import (
    AGENTS_DIR,
    CATALOG,
    ORCHESTRATOR_ID,
    ArtifactSpec,
    check_fields,
    get_artifact,
    select_artifacts,
)
from rails_subagents.scaffold.merger import (
    GUIDANCE_DOCUMENT,
    MARKER,
    MergeOutcome,
    merge_guidance_document,
    merge_guidance_text,
    read_guidance_document,
    render_creation_document,
    write_guidance_document,
)
from rails_subagents.scaffold.renderer import (
    GeneratedArtifact,
    render,
    render_all,
    template_fields,
)
from rails_subagents.scaffold.resolver import (
    Configuration,
    Overrides,
    load_overrides,
    merge,
)
from rails_subagents.scaffold.writer import WriteStatus, write_artifact

__all__ = [
    "AGENTS_DIR",
    "CATALOG",
    "GUIDANCE_DOCUMENT",
    "MARKER",
    "ORCHESTRATOR_ID",
    "ArtifactSpec",
    "Configuration",
    "GeneratedArtifact",
    "MergeOutcome",
    "Overrides",
    "WriteStatus",
    "check_fields",
    "get_artifact",
    "load_overrides",
    "merge",
    "merge_guidance_document",
    "merge_guidance_text",
    "read_guidance_document",
    "render",
    "render_all",
    "render_creation_document",
    "select_artifacts",
    "template_fields",
    "write_artifact",
    "write_guidance_document",
]
