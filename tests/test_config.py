"""Tests for Config"""
import os

import pytest

from checkout_merge.config import Config, DEFAULT_GIT_EXECUTABLE
from checkout_merge.exceptions import ConfigError


class TestConfigFromEnv:
    """Test building configuration from the environment."""

    def test_defaults(self):
        config = Config.from_env({})
        assert config.skip_confirm is False
        assert config.git_executable == DEFAULT_GIT_EXECUTABLE
        assert config.repo_path is None

    def test_skip_confirm_only_for_1(self):
        assert Config.from_env({"CHECKOUTMERGE_SKIPCONFIRM": "1"}).skip_confirm is True
        assert Config.from_env({"CHECKOUTMERGE_SKIPCONFIRM": "true"}).skip_confirm is False
        assert Config.from_env({"CHECKOUTMERGE_SKIPCONFIRM": "0"}).skip_confirm is False

    def test_git_executable_override(self):
        config = Config.from_env({"CHECKOUTMERGE_GIT": "/opt/git/bin/git"})
        assert config.git_executable == "/opt/git/bin/git"

    def test_overrides_win(self, temp_dir):
        config = Config.from_env({}, repo_path=str(temp_dir), verbose=True)
        assert config.repo_path == os.path.abspath(str(temp_dir))
        assert config.verbose is True


class TestConfigValidation:
    """Test configuration validation."""

    def test_missing_repo_directory(self, temp_dir):
        with pytest.raises(ConfigError, match="does not exist"):
            Config(repo_path=str(temp_dir / "missing"))

    def test_empty_git_executable(self):
        with pytest.raises(ConfigError):
            Config(git_executable="  ")

    def test_working_dir_defaults_to_cwd(self):
        assert Config().working_dir == os.getcwd()

    def test_dict_round_trip_ignores_unknown_keys(self):
        config = Config.from_dict({"skip_confirm": True, "stale_days": 30})
        assert config.get("skip_confirm") is True
        assert config.get("stale_days", "missing") == "missing"
        assert config.to_dict()["skip_confirm"] is True
