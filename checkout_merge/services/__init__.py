"""Services for checkout-merge."""

from .git_service import GitService
from .prompt_service import read_yes_no

__all__ = ["GitService", "read_yes_no"]
