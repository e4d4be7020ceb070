"""Clarinet project scaffolder -- plans and creates new Clarity projects.

The builder produces an ordered list of pending filesystem changes (directory
and file creations with fully rendered content) without touching the disk.
The executor applies such a list.

Quick usage::

    import asyncio

    from src.scaffolder import ProjectChangesBuilder, apply_changes

    changes = ProjectChangesBuilder("/tmp", "demo", telemetry_enabled=False).run()
    asyncio.run(apply_changes(changes))
"""

from src.scaffolder.changes import (
    Change,
    DirectoryCreation,
    FileCreation,
    dump_changes,
    load_changes,
)
from src.scaffolder.executor import ApplyReport, ExecutorError, apply_changes
from src.scaffolder.project import (
    OptionalDirectory,
    ProjectChangesBuilder,
    ScaffoldError,
    get_changes_for_new_project,
)
from src.scaffolder.templates import TemplateRenderer

__all__ = [
    "ApplyReport",
    "Change",
    "DirectoryCreation",
    "ExecutorError",
    "FileCreation",
    "OptionalDirectory",
    "ProjectChangesBuilder",
    "ScaffoldError",
    "TemplateRenderer",
    "apply_changes",
    "dump_changes",
    "get_changes_for_new_project",
    "load_changes",
]
