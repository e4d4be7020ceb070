"""Clarinet scaffolder configuration.

Typed configuration for a single ``new project`` run.  Settings use a
Pydantic v2 model so they are validated at construction time and can be
serialised to/from JSON or read from environment variables.
"""

from __future__ import annotations

import os
from pathlib import Path
from typing import Any

from pydantic import BaseModel, Field

from src.scaffolder.project import OptionalDirectory

_TRUTHY = {"1", "true", "yes", "on"}


class Config(BaseModel):
    """Options for generating one new project.

    Instances are typically created by the CLI entry point and then passed to
    :class:`~src.scaffolder.project.ProjectChangesBuilder` and
    :func:`~src.scaffolder.executor.apply_changes`.
    """

    project_name: str = Field(..., description="Name of the new project directory")
    project_path: Path = Field(default=Path("."), description="Parent directory")
    telemetry_enabled: bool = Field(default=False)
    optional_directories: list[OptionalDirectory] = Field(
        default_factory=list,
        description="Auxiliary directories (clients, notebooks, scripts) to create",
    )
    overwrite: bool = Field(default=False, description="Replace existing files")
    dry_run: bool = Field(default=False, description="Plan changes without writing")

    @property
    def project_root(self) -> Path:
        """Directory that will contain the generated project."""
        return self.project_path / self.project_name

    # ------------------------------------------------------------------
    # Serialisation helpers
    # ------------------------------------------------------------------

    def save(self, path: Path) -> Path:
        """Persist the configuration to a JSON file.

        Args:
            path: Destination file.  Parent directories are created.

        Returns:
            The path where the file was written.
        """
        target = Path(path)
        target.parent.mkdir(parents=True, exist_ok=True)
        target.write_text(self.model_dump_json(indent=2), encoding="utf-8")
        return target

    @classmethod
    def load(cls, path: Path) -> "Config":
        """Load a previously-saved configuration from JSON."""
        raw = Path(path).read_text(encoding="utf-8")
        return cls.model_validate_json(raw)

    @classmethod
    def from_env(cls, **overrides: Any) -> "Config":
        """Build a ``Config`` from environment variables.

        Recognised variables (all optional except the project name, which
        may instead be passed in *overrides*):
            CLARINET_PROJECT_NAME, CLARINET_PROJECT_PATH, CLARINET_TELEMETRY,
            CLARINET_OPTIONAL_DIRS (comma separated), CLARINET_OVERWRITE.
        """
        kwargs: dict[str, Any] = {}
        if os.environ.get("CLARINET_PROJECT_NAME"):
            kwargs["project_name"] = os.environ["CLARINET_PROJECT_NAME"]
        if os.environ.get("CLARINET_PROJECT_PATH"):
            kwargs["project_path"] = Path(os.environ["CLARINET_PROJECT_PATH"])
        if os.environ.get("CLARINET_TELEMETRY"):
            kwargs["telemetry_enabled"] = os.environ["CLARINET_TELEMETRY"].lower() in _TRUTHY
        if os.environ.get("CLARINET_OVERWRITE"):
            kwargs["overwrite"] = os.environ["CLARINET_OVERWRITE"].lower() in _TRUTHY

        dirs_str = os.environ.get("CLARINET_OPTIONAL_DIRS", "")
        dirs = [d.strip() for d in dirs_str.split(",") if d.strip()]
        if dirs:
            kwargs["optional_directories"] = dirs

        kwargs.update(overrides)
        return cls(**kwargs)
