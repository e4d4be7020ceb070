"""Tests for the Jinja2 TemplateRenderer.

Covers:
- Bundled templates
- Custom TOML filters
- Strict handling of missing context variables
- Custom template directories
"""

from __future__ import annotations

from pathlib import Path

import pytest
from jinja2 import UndefinedError

from src.scaffolder.templates import TemplateRenderer, _toml_bool_filter, _toml_int_filter


pytestmark = pytest.mark.unit


class TestBundledTemplates:
    def test_missing_variable_raises(self):
        with pytest.raises(UndefinedError):
            TemplateRenderer().render("Clarinet.toml.j2", {"project_name": "demo"})

    def test_static_template_keeps_leading_and_trailing_newline(self):
        content = TemplateRenderer().render("gitignore.j2", {})
        assert content.startswith("\n**/settings/Mainnet.toml")
        assert content.endswith("history.txt\n")


class TestFilters:
    @pytest.mark.parametrize("value, expected", [(True, "true"), (False, "false")])
    def test_toml_bool(self, value, expected):
        assert _toml_bool_filter(value) == expected

    @pytest.mark.parametrize(
        "value, expected",
        [(10, "10"), (30_000, "30_000"), (100_000_000_000_000, "100_000_000_000_000")],
    )
    def test_toml_int(self, value, expected):
        assert _toml_int_filter(value) == expected


class TestCustomDirectory:
    def test_renders_from_custom_dir(self, tmp_path: Path):
        (tmp_path / "hello.txt.j2").write_text(
            "enabled = {{ flag | toml_bool }}\n", encoding="utf-8"
        )
        renderer = TemplateRenderer(tmp_path)
        assert renderer.render("hello.txt.j2", {"flag": True}) == "enabled = true\n"
