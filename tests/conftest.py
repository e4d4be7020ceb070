"""Shared pytest fixtures for the Clarinet scaffolder test suite.

Provides reusable fixtures for:
- Change lists built for the canonical ``/tmp`` + ``demo`` inputs
- A Rich console that records output instead of printing it
"""

from __future__ import annotations

import io

import pytest
from rich.console import Console

from src.scaffolder.changes import Change
from src.scaffolder.project import ProjectChangesBuilder


# ---------------------------------------------------------------------------
# Change lists
# ---------------------------------------------------------------------------

@pytest.fixture
def demo_changes() -> list[Change]:
    """Change list for project ``demo`` under ``/tmp`` with telemetry off."""
    return ProjectChangesBuilder("/tmp", "demo", telemetry_enabled=False).run()


@pytest.fixture
def demo_changes_by_path(demo_changes: list[Change]) -> dict[str, Change]:
    """``demo_changes`` keyed by target path."""
    return {change.path: change for change in demo_changes}


# ---------------------------------------------------------------------------
# Console capture
# ---------------------------------------------------------------------------

@pytest.fixture
def recording_console() -> Console:
    """Rich console writing to an in-memory buffer (no colour codes)."""
    return Console(file=io.StringIO(), record=True, no_color=True, width=200)
