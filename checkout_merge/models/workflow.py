"""Workflow models and related enums"""
from enum import Enum
from dataclasses import dataclass, field
from typing import List, Optional

from checkout_merge.exceptions import ConfigError


class WorkflowState(Enum):
    """States of the checkout/merge/delete sequence."""
    INIT = "init"
    CONFIRM_MERGE = "confirm-merge"
    CHECKOUT = "checkout"
    MERGE = "merge"
    CONFIRM_DELETE = "confirm-delete"
    CONFIRM_DELETE_FINAL = "confirm-delete-final"
    DELETE = "delete"
    CANCELLED = "cancelled"
    DONE = "done"
    FATAL = "fatal"


@dataclass
class WorkflowInput:
    """Branches taking part in the merge."""
    target_branch: str
    source_branch: Optional[str] = None  # None = resolve from current branch
    repo_path: Optional[str] = None

    def __post_init__(self):
        if not self.target_branch or not self.target_branch.strip():
            raise ConfigError("Branch to merge to cannot be empty")
        self.target_branch = self.target_branch.strip()
        if self.source_branch is not None:
            self.source_branch = self.source_branch.strip() or None


@dataclass
class CommandResult:
    """Outcome of a single git invocation."""
    args: List[str]
    exit_code: int
    stdout: str = ""
    stderr: str = ""

    @property
    def succeeded(self) -> bool:
        return self.exit_code == 0


@dataclass
class WorkflowOutcome:
    """Final result of a workflow run."""
    state: WorkflowState
    source_branch: Optional[str] = None
    target_branch: Optional[str] = None
    branch_deleted: bool = False
    history: List[WorkflowState] = field(default_factory=list)
