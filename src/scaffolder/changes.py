"""Pending filesystem changes produced by the project scaffolder.

A change list is a plain, ordered sequence of immutable records.  Nothing in
this module touches the filesystem; applying changes is the job of
:mod:`src.scaffolder.executor`.
"""

from __future__ import annotations

from typing import Annotated, Literal, Union

from pydantic import BaseModel, ConfigDict, Field, TypeAdapter


class DirectoryCreation(BaseModel):
    """A directory that must be created (parents included)."""

    model_config = ConfigDict(frozen=True)

    kind: Literal["directory"] = "directory"
    comment: str = Field(..., description="Human-readable progress label (Rich markup)")
    name: str = Field(..., description="Directory name, e.g. 'contracts'")
    path: str = Field(..., description="Absolute or caller-relative target path")


class FileCreation(BaseModel):
    """A file that must be created with fully rendered *content*."""

    model_config = ConfigDict(frozen=True)

    kind: Literal["file"] = "file"
    comment: str = Field(..., description="Human-readable progress label (Rich markup)")
    name: str = Field(..., description="File name, e.g. 'Clarinet.toml'")
    content: str = Field(..., description="Rendered file content")
    path: str = Field(..., description="Absolute or caller-relative target path")


Change = Annotated[Union[DirectoryCreation, FileCreation], Field(discriminator="kind")]

ChangeList = TypeAdapter(list[Change])


def dump_changes(changes: list[DirectoryCreation | FileCreation]) -> str:
    """Serialise a change list to pretty-printed JSON."""
    return ChangeList.dump_json(changes, indent=2).decode("utf-8")


def load_changes(raw: str | bytes) -> list[DirectoryCreation | FileCreation]:
    """Parse a JSON change list produced by :func:`dump_changes`."""
    return ChangeList.validate_json(raw)
