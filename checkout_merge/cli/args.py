"""Command-line argument parsing for checkout-merge."""

import argparse
from checkout_merge.__version__ import __version__


def parse_args(argv=None):
    """Parse command-line arguments."""
    parser = argparse.ArgumentParser(
        prog="checkout-merge",
        description="Check out a branch, merge another branch into it, and optionally delete the merged branch",
        epilog="Set CHECKOUTMERGE_SKIPCONFIRM=1 to skip the merge confirmation "
        "(deleting the merged branch always asks twice).",
    )
    parser.add_argument("merge_branch", help="Branch to merge to")
    parser.add_argument(
        "merge_from_branch",
        nargs="?",
        default=None,
        help="Branch to merge from, default is current branch",
    )
    parser.add_argument(
        "-r",
        "--repo",
        default=None,
        help="Git repository root directory, if not provided, defaults to current directory",
    )
    parser.add_argument("-v", "--verbose", action="store_true", help="Show verbose output")
    parser.add_argument(
        "--debug", action="store_true", help="Show debug information for troubleshooting"
    )
    parser.add_argument("--version", action="version", version=f"checkout-merge {__version__}")

    return parser.parse_args(argv)
