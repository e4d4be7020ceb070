"""Unit tests for Config (src.config).

Tests cover:
- Defaults and derived project_root
- Optional directory validation
- save/load round trip
- from_env
"""

from __future__ import annotations

import os
from pathlib import Path
from unittest.mock import patch

import pytest
from pydantic import ValidationError

from src.config import Config
from src.scaffolder.project import OptionalDirectory


class TestConfigDefaults:
    @pytest.mark.unit
    def test_defaults(self):
        config = Config(project_name="demo")
        assert config.project_path == Path(".")
        assert config.telemetry_enabled is False
        assert config.optional_directories == []
        assert config.overwrite is False
        assert config.dry_run is False

    @pytest.mark.unit
    def test_project_name_required(self):
        with pytest.raises(ValidationError):
            Config()

    @pytest.mark.unit
    def test_project_root(self):
        config = Config(project_name="demo", project_path=Path("/tmp"))
        assert config.project_root == Path("/tmp/demo")

    @pytest.mark.unit
    def test_optional_directories_coerced(self):
        config = Config(project_name="demo", optional_directories=["clients", "scripts"])
        assert config.optional_directories == [OptionalDirectory.CLIENTS, OptionalDirectory.SCRIPTS]

    @pytest.mark.unit
    def test_unknown_optional_directory_rejected(self):
        with pytest.raises(ValidationError):
            Config(project_name="demo", optional_directories=["docs"])


class TestConfigPersistence:
    @pytest.mark.unit
    def test_save_and_load(self, tmp_path: Path):
        config = Config(
            project_name="demo",
            project_path=Path("/srv/projects"),
            telemetry_enabled=True,
            optional_directories=["notebooks"],
        )
        target = config.save(tmp_path / "nested" / "config.json")

        assert target.is_file()
        assert Config.load(target) == config


class TestConfigFromEnv:
    @pytest.mark.unit
    def test_reads_variables(self):
        env = {
            "CLARINET_PROJECT_NAME": "counter",
            "CLARINET_PROJECT_PATH": "/work",
            "CLARINET_TELEMETRY": "yes",
            "CLARINET_OPTIONAL_DIRS": "scripts, clients",
            "CLARINET_OVERWRITE": "0",
        }
        with patch.dict(os.environ, env, clear=True):
            config = Config.from_env()

        assert config.project_name == "counter"
        assert config.project_path == Path("/work")
        assert config.telemetry_enabled is True
        assert config.optional_directories == [OptionalDirectory.SCRIPTS, OptionalDirectory.CLIENTS]
        assert config.overwrite is False

    @pytest.mark.unit
    def test_overrides_win(self):
        with patch.dict(os.environ, {"CLARINET_PROJECT_NAME": "from-env"}, clear=True):
            config = Config.from_env(project_name="explicit")
        assert config.project_name == "explicit"

    @pytest.mark.unit
    def test_missing_name_fails(self):
        with patch.dict(os.environ, {}, clear=True):
            with pytest.raises(ValidationError):
                Config.from_env()
