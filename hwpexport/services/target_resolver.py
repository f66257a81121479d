from __future__ import annotations

from hwpexport.domain.models import BatchTarget, ExportTarget, SingleTarget, WorkspaceEntry
from hwpexport.utils.constants import SOURCE_EXTENSION


def resolve_target(entry: WorkspaceEntry) -> ExportTarget:
    """
    Classify a workspace entry once, at the workspace boundary.

    Containers become a batch export of the whole tree; anything else is a
    single document whose default output name is its name without extension.
    """
    if entry.is_container:
        return BatchTarget(root_path=entry.path, display_name=entry.name)
    return SingleTarget(path=entry.path, display_name=entry.basename)


def is_exportable(entry: WorkspaceEntry) -> bool:
    """Menu filter: Markdown documents and folders only."""
    return entry.is_container or entry.extension == SOURCE_EXTENSION


def default_output_name(target: ExportTarget) -> str:
    if isinstance(target, SingleTarget):
        return target.display_name
    return ""
