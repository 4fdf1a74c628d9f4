"""Logging configuration for checkout-merge"""
import logging
import sys
from pathlib import Path
from typing import Optional, Sequence

LOG_FILE = Path.home() / '.checkout-merge' / 'checkout-merge.log'

# Every git invocation is recorded under this name, so --debug reads as a transcript
COMMAND_LOGGER_NAME = 'git'


def setup_logging(verbose: bool = False, debug: bool = False, log_file: Optional[Path] = None) -> None:
    """
    Configure logging for the application.

    Warnings only by default, INFO with --verbose, DEBUG with --debug. Debug
    runs also keep a copy of the log in ``log_file`` (overwritten each run).
    """
    if debug:
        level = logging.DEBUG
    elif verbose:
        level = logging.INFO
    else:
        level = logging.WARNING

    root_logger = logging.getLogger()
    root_logger.setLevel(level)
    for handler in root_logger.handlers[:]:
        root_logger.removeHandler(handler)

    console_handler = logging.StreamHandler(sys.stderr)
    console_handler.setLevel(level)
    console_handler.setFormatter(logging.Formatter('[%(name)s] %(message)s'))
    root_logger.addHandler(console_handler)

    if debug:
        path = log_file or LOG_FILE
        path.parent.mkdir(parents=True, exist_ok=True)
        file_handler = logging.FileHandler(path, mode='w')
        file_handler.setFormatter(logging.Formatter(
            fmt='%(asctime)s %(levelname)s [%(name)s] %(message)s',
            datefmt='%Y-%m-%d %H:%M:%S'
        ))
        root_logger.addHandler(file_handler)


def log_command(args: Sequence[str], exit_code: int, stderr: str = "", cwd: Optional[str] = None) -> None:
    """Record one git invocation and its exit status."""
    logger = logging.getLogger(COMMAND_LOGGER_NAME)
    command = ' '.join(['git', *args])
    location = f" (in {cwd})" if cwd else ""
    if exit_code == 0:
        logger.debug(f"{command}{location} -> exit 0")
    else:
        detail = stderr.strip().splitlines()[0] if stderr.strip() else "no output"
        logger.info(f"{command}{location} -> exit {exit_code}: {detail}")


def get_logger(name: str) -> logging.Logger:
    """Get a logger named after the module, without the package prefix."""
    if name.startswith('checkout_merge.'):
        name = name[len('checkout_merge.'):]
    return logging.getLogger(name)
