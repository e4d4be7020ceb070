"""Unit tests for console helpers (src.utils)."""

from __future__ import annotations

from pathlib import Path

import pytest

from src.utils import (
    ensure_dir,
    green,
    print_error,
    print_success,
    print_summary_table,
    print_warning,
    red,
)


class TestMarkup:
    @pytest.mark.unit
    def test_green(self):
        assert green("Created file") == "[green]Created file[/green]"

    @pytest.mark.unit
    def test_red(self):
        assert red("Skip") == "[red]Skip[/red]"


class TestEnsureDir:
    @pytest.mark.unit
    def test_creates_nested(self, tmp_path: Path):
        target = tmp_path / "a" / "b"
        result = ensure_dir(target)
        assert result == target
        assert target.is_dir()

    @pytest.mark.unit
    def test_existing_ok(self, tmp_path: Path):
        assert ensure_dir(tmp_path) == tmp_path


class TestRichOutputHelpers:
    @pytest.mark.unit
    def test_print_summary_table(self):
        # Should not raise
        print_summary_table({"Key1": "Value1", "Key2": "Value2"}, title="Test Summary")

    @pytest.mark.unit
    def test_print_success(self):
        print_success("Project created")

    @pytest.mark.unit
    def test_print_error(self):
        print_error("Something failed")

    @pytest.mark.unit
    def test_print_warning(self):
        print_warning("Check your config")
