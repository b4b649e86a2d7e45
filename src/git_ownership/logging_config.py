"""
Logging configuration for git-ownership.

Log records go to stderr through rich so that stdout carries only the report.
"""

import logging
from typing import Optional

from rich.console import Console
from rich.logging import RichHandler


def setup_logging(verbose: bool = False, quiet: bool = False) -> logging.Logger:
    """
    Configure logging with a rich handler on stderr.

    Args:
        verbose: Enable DEBUG level logging (every git command is shown)
        quiet: Suppress all but ERROR level logging

    Returns:
        Configured logger instance for git_ownership
    """
    if quiet:
        level = logging.ERROR
    elif verbose:
        level = logging.DEBUG
    else:
        level = logging.INFO

    console = Console(stderr=True)

    handlers: list[logging.Handler] = [
        RichHandler(
            console=console,
            rich_tracebacks=True,
            tracebacks_show_locals=verbose,
            markup=False,
            show_time=False,
            show_path=verbose,
        )
    ]

    logging.basicConfig(level=level, format="%(message)s", datefmt="[%X]", handlers=handlers)

    logger = logging.getLogger("git_ownership")
    logger.setLevel(level)

    return logger


def get_logger(name: Optional[str] = None) -> logging.Logger:
    """
    Get a logger instance for a specific module.

    Args:
        name: Module name (e.g., 'git_ownership.runner')
              If None, returns the root git_ownership logger

    Returns:
        Logger instance
    """
    if name is None:
        return logging.getLogger("git_ownership")

    if not name.startswith("git_ownership"):
        name = f"git_ownership.{name}"

    return logging.getLogger(name)
