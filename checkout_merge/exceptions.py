"""Custom exceptions for checkout-merge"""

from typing import Optional, Sequence


class CheckoutMergeError(Exception):
    """Base exception for all checkout-merge errors."""
    pass


class ConfigError(CheckoutMergeError):
    """Exception raised for invalid configuration or arguments."""
    pass


class ResolutionError(CheckoutMergeError):
    """Exception raised when the current branch cannot be determined."""

    def __init__(self, message: Optional[str] = None):
        self.message = message

        error_msg = "Failed to get current branch"
        if message:
            error_msg += f":\n{message}"

        super().__init__(error_msg)


class CommandError(CheckoutMergeError):
    """Exception raised when a git command exits with a non-zero status."""

    def __init__(self, args: Sequence[str], stderr: str = "", exit_code: Optional[int] = None):
        self.args_list = list(args)
        self.stderr = stderr
        self.exit_code = exit_code

        error_msg = f"Git command failed: git {' '.join(self.args_list)}"
        if stderr:
            error_msg += f"\n{stderr}"

        super().__init__(error_msg)
