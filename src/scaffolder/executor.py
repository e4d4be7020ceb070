"""Apply a change list to the local filesystem.

Changes are applied one at a time in list order, so a directory always exists
before any file inside it is written.  Blocking filesystem calls run in a
worker thread to keep the event loop responsive.
"""

from __future__ import annotations

import asyncio
from collections.abc import Sequence
from pathlib import Path

from pydantic import BaseModel, Field
from rich.console import Console
from rich.markup import escape

from src.utils import console as default_console
from src.utils import ensure_dir, red

from .changes import Change, DirectoryCreation, FileCreation


class ExecutorError(Exception):
    """Raised when a change cannot be applied to the filesystem."""

    def __init__(self, change: Change, message: str) -> None:
        self.change = change
        super().__init__(f"Unable to apply change for {change.path}: {message}")


class ApplyReport(BaseModel):
    """Outcome of :func:`apply_changes`."""

    created_directories: list[str] = Field(default_factory=list)
    created_files: list[str] = Field(default_factory=list)
    skipped: list[str] = Field(default_factory=list)

    @property
    def total(self) -> int:
        """Number of changes processed, skipped ones included."""
        return len(self.created_directories) + len(self.created_files) + len(self.skipped)


async def apply_changes(
    changes: Sequence[Change],
    *,
    overwrite: bool = False,
    console: Console | None = None,
) -> ApplyReport:
    """Create every directory and file described by *changes*.

    Args:
        changes: Ordered change list, typically from ``ProjectChangesBuilder``.
        overwrite: Replace files that already exist instead of skipping them.
        console: Rich console used for progress output.

    Returns:
        An ``ApplyReport`` listing what was created and what was skipped.

    Raises:
        ExecutorError: On the first filesystem error.  Changes applied before
            the failure are left in place.
    """
    out = console or default_console
    report = ApplyReport()

    for change in changes:
        try:
            if isinstance(change, DirectoryCreation):
                await asyncio.to_thread(ensure_dir, change.path)
                report.created_directories.append(change.path)
                out.print(change.comment)
            elif isinstance(change, FileCreation):
                written = await asyncio.to_thread(_write_file, change, overwrite)
                if written:
                    report.created_files.append(change.path)
                    out.print(change.comment)
                else:
                    report.skipped.append(change.path)
                    out.print(
                        f"{red('Skip creating file')}, file already exists at path {escape(change.path)}"
                    )
            else:
                raise ExecutorError(change, f"unsupported change kind {type(change).__name__}")
        except OSError as exc:
            raise ExecutorError(change, str(exc)) from exc

    return report


def _write_file(change: FileCreation, overwrite: bool) -> bool:
    """Write the file for *change*; return ``False`` if it was left untouched."""
    path = Path(change.path)
    if path.is_file() and not overwrite:
        return False
    path.write_text(change.content, encoding="utf-8")
    return True
