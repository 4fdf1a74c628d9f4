"""Configuration handling for checkout-merge"""

import os
from dataclasses import dataclass
from typing import Mapping, Optional

from checkout_merge.exceptions import ConfigError

SKIP_CONFIRM_ENV = "CHECKOUTMERGE_SKIPCONFIRM"
GIT_EXECUTABLE_ENV = "CHECKOUTMERGE_GIT"
DEFAULT_GIT_EXECUTABLE = "/usr/bin/git"


@dataclass
class Config:
    """Configuration for checkout-merge with validation."""

    # Repository location (None = current directory)
    repo_path: Optional[str] = None
    git_executable: str = DEFAULT_GIT_EXECUTABLE

    # Only bypasses the initial merge confirmation
    skip_confirm: bool = False

    verbose: bool = False
    debug: bool = False

    def __post_init__(self):
        """Validate configuration after initialization."""
        self._validate_repo_path()
        self._validate_git_executable()

    def _validate_repo_path(self):
        """Resolve repo_path to an absolute, existing directory."""
        if self.repo_path is None:
            return
        path = os.path.abspath(os.path.expanduser(self.repo_path))
        if not os.path.isdir(path):
            raise ConfigError(f"Repository directory does not exist: {self.repo_path}")
        self.repo_path = path

    def _validate_git_executable(self):
        """Validate git_executable is not empty."""
        if not self.git_executable or not self.git_executable.strip():
            raise ConfigError("git_executable cannot be empty")
        self.git_executable = self.git_executable.strip()

    @property
    def working_dir(self) -> str:
        """Directory every git command runs in."""
        return self.repo_path or os.getcwd()

    def to_dict(self) -> dict:
        return {
            "repo_path": self.repo_path,
            "git_executable": self.git_executable,
            "skip_confirm": self.skip_confirm,
            "verbose": self.verbose,
            "debug": self.debug,
        }

    def get(self, key: str, default=None):
        """Get config value by key."""
        return getattr(self, key, default)

    @classmethod
    def from_dict(cls, config_dict: dict) -> "Config":
        """Create Config from dictionary, ignoring unknown keys."""
        known_fields = {"repo_path", "git_executable", "skip_confirm", "verbose", "debug"}

        filtered = {k: v for k, v in config_dict.items() if k in known_fields}
        return cls(**filtered)

    @classmethod
    def from_env(cls, environ: Optional[Mapping[str, str]] = None, **overrides) -> "Config":
        """Create Config from environment variables, with explicit overrides on top."""
        if environ is None:
            environ = os.environ

        values = {
            "skip_confirm": environ.get(SKIP_CONFIRM_ENV) == "1",
            "git_executable": environ.get(GIT_EXECUTABLE_ENV) or DEFAULT_GIT_EXECUTABLE,
        }
        values.update(overrides)
        return cls.from_dict(values)
