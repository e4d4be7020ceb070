"""Tests for the change record models and their JSON serialisation."""

from __future__ import annotations

import json

import pytest
from pydantic import ValidationError

from src.scaffolder.changes import DirectoryCreation, FileCreation, dump_changes, load_changes


pytestmark = pytest.mark.unit


class TestModels:
    def test_kind_tags(self):
        d = DirectoryCreation(comment="c", name="tests", path="/tmp/demo/tests")
        f = FileCreation(comment="c", name="a.txt", content="x", path="/tmp/demo/a.txt")
        assert d.kind == "directory"
        assert f.kind == "file"

    def test_frozen(self):
        d = DirectoryCreation(comment="c", name="tests", path="/tmp/demo/tests")
        with pytest.raises(ValidationError):
            d.path = "/elsewhere"

    def test_file_requires_content(self):
        with pytest.raises(ValidationError):
            FileCreation(comment="c", name="a.txt", path="/tmp/demo/a.txt")


class TestSerialisation:
    def test_dump_is_json_list(self, demo_changes):
        data = json.loads(dump_changes(demo_changes))
        assert isinstance(data, list)
        assert len(data) == len(demo_changes)
        assert data[0]["kind"] == "directory"
        assert data[4]["kind"] == "file"
        assert data[4]["name"] == "Clarinet.toml"

    def test_load_restores_variants(self, demo_changes):
        restored = load_changes(dump_changes(demo_changes))
        assert restored == demo_changes
        assert isinstance(restored[0], DirectoryCreation)
        assert isinstance(restored[-1], FileCreation)

    def test_load_rejects_unknown_kind(self):
        with pytest.raises(ValidationError):
            load_changes('[{"kind": "symlink", "comment": "", "name": "x", "path": "/x"}]')
