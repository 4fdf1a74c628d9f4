"""Core functionality for checkout-merge"""

from typing import List, Optional, TextIO, Union

from rich.console import Console
from rich.markup import escape

from checkout_merge.config import Config, SKIP_CONFIRM_ENV
from checkout_merge.exceptions import CheckoutMergeError
from checkout_merge.logging_config import get_logger
from checkout_merge.models.workflow import CommandResult, WorkflowInput, WorkflowOutcome, WorkflowState
from checkout_merge.services.git_service import GitService
from checkout_merge.services.prompt_service import read_yes_no

console = Console(soft_wrap=True)
logger = get_logger(__name__)


class MergeWorkflow:
    """Check out a target branch, merge a source branch into it, and optionally delete the source.

    The steps run strictly in order. Any git failure ends the run in the
    FATAL state and the error propagates; nothing already done is undone.
    """

    def __init__(
        self,
        workflow_input: WorkflowInput,
        config: Union[Config, dict],
        git_service: Optional[GitService] = None,
        input_stream: Optional[TextIO] = None,
    ):
        """Initialize the workflow.

        Args:
            workflow_input: Target branch, optional source branch and repo path
            config: Configuration dict or Config object
            git_service: Service used to run git (created from config if omitted)
            input_stream: Where answers are read from (stdin if omitted)
        """
        if isinstance(config, dict):
            self.config = Config.from_dict(config)
        else:
            self.config = config

        self.target_branch = workflow_input.target_branch
        self.source_branch = workflow_input.source_branch
        self.repo_path = workflow_input.repo_path or self.config.working_dir
        self.input_stream = input_stream
        self.git_service = git_service or GitService(self.repo_path, self.config)

        self.state = WorkflowState.INIT
        self.history: List[WorkflowState] = [WorkflowState.INIT]
        self.branch_deleted = False

    def _transition(self, state: WorkflowState) -> None:
        logger.debug(f"{self.state.value} -> {state.value}")
        self.state = state
        self.history.append(state)

    def _outcome(self) -> WorkflowOutcome:
        return WorkflowOutcome(
            state=self.state,
            source_branch=self.source_branch,
            target_branch=self.target_branch,
            branch_deleted=self.branch_deleted,
            history=list(self.history),
        )

    def confirm(self, prompt: str) -> bool:
        """Ask a yes/no question on the configured input stream."""
        answer = read_yes_no(prompt, self.input_stream)
        logger.debug(f"Answer to {prompt!r}: {'yes' if answer else 'no'}")
        return answer

    def run_external_command(self, args: List[str], cwd: Optional[str] = None) -> CommandResult:
        """Run git in ``cwd`` (the repository by default), raising CommandError on failure."""
        if cwd is None or cwd == self.git_service.repo_path:
            return self.git_service.run_command(args)
        return GitService(cwd, self.config).run_command(args)

    def resolve_source_branch(self) -> str:
        """Return the source branch, querying the current branch when none was given."""
        if not self.source_branch:
            self.source_branch = self.git_service.get_current_branch()
            logger.info(f"Using current branch {self.source_branch} as merge source")
        return self.source_branch

    def run(self) -> WorkflowOutcome:
        """Run the whole sequence and return how it ended."""
        try:
            return self._run()
        except CheckoutMergeError:
            self._transition(WorkflowState.FATAL)
            raise

    def _run(self) -> WorkflowOutcome:
        source = self.resolve_source_branch()
        target = self.target_branch

        self._transition(WorkflowState.CONFIRM_MERGE)
        if not self.config.skip_confirm:
            prompt = (
                f"This will merge {source} into {target}. Continue? (y/n)\n"
                f"Note: To disable this prompt, set {SKIP_CONFIRM_ENV} = 1."
            )
            if not self.confirm(prompt):
                console.print("Merge cancelled.")
                self._transition(WorkflowState.CANCELLED)
                return self._outcome()
        else:
            console.print(f"Merging {source} into {target}...", markup=False, highlight=False)

        self._transition(WorkflowState.CHECKOUT)
        self.git_service.checkout(target)
        console.print(f"Checked out {target}. Initiating merge...", markup=False, highlight=False)

        self._transition(WorkflowState.MERGE)
        self.git_service.merge(source)

        self._transition(WorkflowState.CONFIRM_DELETE)
        if not self.confirm("Merge completed. Delete original branch? (y/n)"):
            self._transition(WorkflowState.DONE)
            return self._outcome()

        self._transition(WorkflowState.CONFIRM_DELETE_FINAL)
        if not self.confirm("This is permanent. ARE YOU SURE?"):
            self._transition(WorkflowState.DONE)
            return self._outcome()

        self._transition(WorkflowState.DELETE)
        self.git_service.delete_branch(source)
        self.branch_deleted = True
        console.print(f"[green]Deleted branch {escape(source)}[/green]", highlight=False)

        self._transition(WorkflowState.DONE)
        return self._outcome()
