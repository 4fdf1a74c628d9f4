"""Data models for checkout-merge."""

from .workflow import CommandResult, WorkflowInput, WorkflowOutcome, WorkflowState

__all__ = ["CommandResult", "WorkflowInput", "WorkflowOutcome", "WorkflowState"]
