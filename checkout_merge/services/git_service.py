"""Git operations service"""
from contextlib import contextmanager
from typing import List, Optional, Union, TYPE_CHECKING

import git

from checkout_merge.config import DEFAULT_GIT_EXECUTABLE
from checkout_merge.exceptions import CommandError, ResolutionError
from checkout_merge.logging_config import get_logger, log_command
from checkout_merge.models.workflow import CommandResult

if TYPE_CHECKING:
    from checkout_merge.config import Config

logger = get_logger(__name__)


class GitService:
    """Service for running git commands in a single working directory."""

    def __init__(self, repo_path: str, config: Union['Config', dict]):
        """Initialize the service.

        Args:
            repo_path: Directory every command runs in
            config: Configuration dictionary or Config object
        """
        self.repo_path = repo_path
        self.config = config
        self.git_executable = config.get('git_executable') or DEFAULT_GIT_EXECUTABLE
        # Set when Ctrl-C arrives while git is running; the repository may be mid-operation
        self.interrupted_command: Optional[List[str]] = None
        logger.info(f"Git service initialized for {repo_path}")

    def _get_git(self) -> git.Git:
        """Get a git.Git command wrapper bound to the working directory."""
        return git.Git(self.repo_path)

    @contextmanager
    def _git_operation(self, args: List[str]):
        """Context manager that remembers a git command cut short by Ctrl-C."""
        try:
            yield
        except KeyboardInterrupt:
            self.interrupted_command = list(args)
            raise

    def execute(self, args: List[str]) -> CommandResult:
        """Run git with the given arguments and capture its output.

        Never raises for a non-zero exit; the status is carried in the result.
        """
        command = [self.git_executable, *args]
        with self._git_operation(args):
            try:
                status, stdout, stderr = self._get_git().execute(
                    command,
                    with_extended_output=True,
                    with_exceptions=False,
                )
            except git.exc.GitCommandNotFound as e:
                log_command(args, -1, str(e), self.repo_path)
                raise CommandError(args, f"Could not start {self.git_executable}: {e}") from e

        log_command(args, status, stderr or "", self.repo_path)
        return CommandResult(args=list(args), exit_code=status, stdout=stdout or "", stderr=stderr or "")

    def run_command(self, args: List[str]) -> CommandResult:
        """Run git and raise CommandError if it exits with a non-zero status."""
        result = self.execute(args)
        if not result.succeeded:
            # merge conflicts are reported on stdout only
            raise CommandError(args, result.stderr or result.stdout or "Unknown error", result.exit_code)
        return result

    def get_current_branch(self) -> str:
        """Return the name of the checked-out branch."""
        result = self.execute(["rev-parse", "--abbrev-ref", "HEAD"])
        if not result.succeeded:
            # rev-parse reports its problem on either stream
            raise ResolutionError("\n".join(s for s in (result.stdout, result.stderr) if s) or "Unknown error")

        branch = result.stdout.strip()
        if not branch:
            raise ResolutionError("Could not parse current branch name")
        logger.debug(f"Current branch is {branch}")
        return branch

    def checkout(self, branch_name: str) -> CommandResult:
        return self.run_command(["checkout", branch_name])

    def merge(self, branch_name: str) -> CommandResult:
        return self.run_command(["merge", branch_name])

    def delete_branch(self, branch_name: str) -> CommandResult:
        """Force-delete a local branch."""
        return self.run_command(["branch", "-D", branch_name])
