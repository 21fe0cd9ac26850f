"""Unit tests for InitializrConfig (initializr.config).

Tests cover:
- Defaults and derived paths
- save/load round trip through JSON
- from_env for every recognised variable
"""

from __future__ import annotations

from pathlib import Path
from unittest.mock import patch

import pytest

from initializr.config import InitializrConfig


class TestDefaults:
    @pytest.mark.unit
    def test_scratch_dir_uses_tmpdir(self):
        with patch.dict("os.environ", {"TMPDIR": "/var/tmp/x"}, clear=True):
            config = InitializrConfig()
        assert config.scratch_dir == Path("/var/tmp/x") / "initializr"

    @pytest.mark.unit
    def test_scratch_dir_falls_back_to_cwd(self):
        with patch.dict("os.environ", {}, clear=True):
            config = InitializrConfig()
        assert config.scratch_dir == Path(".") / "initializr"

    @pytest.mark.unit
    def test_maven_wrapper_disabled_by_default(self):
        assert InitializrConfig().include_maven_wrapper is False

    @pytest.mark.unit
    def test_template_dir_unset_by_default(self):
        assert InitializrConfig().template_dir is None

    @pytest.mark.unit
    def test_project_resource_dir(self, tmp_path):
        config = InitializrConfig(resource_dir=tmp_path)
        assert config.project_resource_dir == tmp_path / "project"


class TestSaveLoad:
    @pytest.mark.unit
    def test_round_trip(self, tmp_path):
        config = InitializrConfig(
            scratch_dir=tmp_path / "scratch",
            resource_dir=tmp_path / "res",
            include_maven_wrapper=True,
        )
        target = config.save(tmp_path / "conf" / "config.json")
        assert target.exists()

        loaded = InitializrConfig.load(target)
        assert loaded == config


class TestFromEnv:
    @pytest.mark.unit
    def test_reads_all_variables(self, tmp_path):
        env = {
            "INITIALIZR_SCRATCH_DIR": str(tmp_path / "s"),
            "INITIALIZR_RESOURCE_DIR": str(tmp_path / "r"),
            "INITIALIZR_TEMPLATE_DIR": str(tmp_path / "t"),
            "INITIALIZR_MAVEN_WRAPPER": "true",
        }
        with patch.dict("os.environ", env, clear=True):
            config = InitializrConfig.from_env()
        assert config.scratch_dir == tmp_path / "s"
        assert config.resource_dir == tmp_path / "r"
        assert config.template_dir == tmp_path / "t"
        assert config.include_maven_wrapper is True

    @pytest.mark.unit
    def test_maven_wrapper_false_values(self):
        with patch.dict("os.environ", {"INITIALIZR_MAVEN_WRAPPER": "no"}, clear=True):
            config = InitializrConfig.from_env()
        assert config.include_maven_wrapper is False

    @pytest.mark.unit
    def test_empty_environment_uses_defaults(self):
        with patch.dict("os.environ", {}, clear=True):
            config = InitializrConfig.from_env()
            expected = InitializrConfig()
        assert config == expected
