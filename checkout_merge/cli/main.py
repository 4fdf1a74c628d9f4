"""Main entry point for checkout-merge"""

import sys
from rich.console import Console
from rich.markup import escape

from checkout_merge.cli.args import parse_args
from checkout_merge.config import Config
from checkout_merge.core import MergeWorkflow
from checkout_merge.exceptions import CheckoutMergeError
from checkout_merge.logging_config import setup_logging, get_logger
from checkout_merge.models.workflow import WorkflowInput

console = Console(soft_wrap=True)
logger = get_logger(__name__)


def main(argv=None, environ=None, input_stream=None):
    """Main entry point for the application."""
    parsed_args = parse_args(argv)
    setup_logging(verbose=parsed_args.verbose, debug=parsed_args.debug)
    workflow = None

    try:
        config = Config.from_env(
            environ,
            repo_path=parsed_args.repo,
            verbose=parsed_args.verbose,
            debug=parsed_args.debug,
        )

        if parsed_args.debug:
            console.print("[yellow]Configuration:[/yellow]")
            for key, value in config.to_dict().items():
                console.print(f"  {key}: {value}")

        workflow_input = WorkflowInput(
            target_branch=parsed_args.merge_branch,
            source_branch=parsed_args.merge_from_branch,
            repo_path=config.repo_path,
        )
        workflow = MergeWorkflow(workflow_input, config, input_stream=input_stream)
        outcome = workflow.run()
        logger.info(f"Finished in state {outcome.state.value}")

        return 0
    except KeyboardInterrupt:
        console.print("\n[yellow]Operation cancelled by user[/yellow]")
        interrupted = workflow.git_service.interrupted_command if workflow else None
        if interrupted:
            console.print(
                f"[yellow]Interrupted during 'git {escape(' '.join(interrupted))}'; "
                "the repository may be left mid-checkout or mid-merge. Check 'git status'.[/yellow]",
                highlight=False,
            )
        return 1
    except CheckoutMergeError as e:
        console.print(f"[red]Error: {escape(str(e))}[/red]", highlight=False)
        if parsed_args.debug:
            console.print_exception()
        return 1


if __name__ == "__main__":
    sys.exit(main())
