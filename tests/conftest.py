"""Pytest fixtures for checkout-merge tests"""
import shutil
import tempfile
from pathlib import Path
from unittest.mock import Mock

import git
import pytest

from checkout_merge.config import Config
from checkout_merge.models.workflow import CommandResult
from checkout_merge.services.git_service import GitService


@pytest.fixture
def git_executable():
    """Path of the git binary available to the tests."""
    return shutil.which("git") or "git"


@pytest.fixture
def temp_dir():
    """Create a temporary directory for testing."""
    with tempfile.TemporaryDirectory() as tmpdir:
        yield Path(tmpdir)


@pytest.fixture
def config(git_executable):
    """Create a configuration that asks for every confirmation."""
    return Config(git_executable=git_executable)


@pytest.fixture
def git_repo(temp_dir):
    """Create a real Git repository with a single commit on main."""
    repo_path = temp_dir / "test_repo"
    repo_path.mkdir()

    repo = git.Repo.init(repo_path)

    # Configure git user for commits
    repo.config_writer().set_value("user", "name", "Test User").release()
    repo.config_writer().set_value("user", "email", "test@example.com").release()

    test_file = repo_path / "README.md"
    test_file.write_text("# Test Repository\n")
    repo.index.add(["README.md"])
    repo.index.commit("Initial commit")

    # Rename master to main if needed
    repo.git.branch('-M', 'main')

    yield repo

    repo.close()


@pytest.fixture
def git_repo_with_feature(git_repo):
    """Create a repository where 'feature' is checked out one commit ahead of main."""
    repo = git_repo
    repo_path = Path(repo.working_dir)

    repo.git.checkout('-b', 'feature')
    feature_file = repo_path / "feature.txt"
    feature_file.write_text("Feature content\n")
    repo.index.add(["feature.txt"])
    repo.index.commit("Add feature")

    yield repo

@pytest.fixture
def git_repo_with_conflict(git_repo_with_feature):
    """Create a repository where merging 'feature' into main conflicts."""
    repo = git_repo_with_feature
    repo_path = Path(repo.working_dir)

    repo.git.checkout('main')
    (repo_path / "feature.txt").write_text("Conflicting content\n")
    repo.index.add(["feature.txt"])
    repo.index.commit("Conflicting change on main")
    repo.git.checkout('feature')

    yield repo


@pytest.fixture
def mock_git_service():
    """Create a mock GitService where every command succeeds."""
    service = Mock(spec=GitService)
    service.repo_path = "/fake/repo/path"
    service.interrupted_command = None
    service.get_current_branch = Mock(return_value="feature")
    service.checkout = Mock(side_effect=lambda b: CommandResult(["checkout", b], 0))
    service.merge = Mock(side_effect=lambda b: CommandResult(["merge", b], 0))
    service.delete_branch = Mock(side_effect=lambda b: CommandResult(["branch", "-D", b], 0))
    service.run_command = Mock(side_effect=lambda args: CommandResult(list(args), 0))
    return service
