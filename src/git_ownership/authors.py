"""Discover the distinct author identities of a repository."""

from .logging_config import get_logger
from .models import AuthorName, RepositoryScope
from .runner import DEFAULT_SHELL, run_command
from .shell import git_invocation, quote_arg

logger = get_logger(__name__)


def shortlog_command(scope: RepositoryScope) -> str:
    return git_invocation(
        scope.target_dir,
        "shortlog",
        "--summary",
        "--numbered",
        "--no-merges",
        "--all",
        f"--branches={quote_arg(scope.branch)}",
    )


def parse_shortlog(text: str) -> list[AuthorName]:
    """Extract author names from ``git shortlog --summary`` output.

    Each line is ``<count> <name...>``. The count is dropped and the rest is
    rejoined with single spaces; a count-only line yields ``""``. Names are
    deduplicated and sorted by code point, which matches UTF-8 byte order.
    """
    names = set()
    for line in text.splitlines():
        tokens = line.split()
        names.add(" ".join(tokens[1:]))
    return sorted(names)


def list_authors(scope: RepositoryScope, shell: str = DEFAULT_SHELL) -> list[AuthorName]:
    """Return the sorted, distinct author names reachable from ``scope.branch``."""
    stdout = run_command(shortlog_command(scope), shell=shell)
    authors = parse_shortlog(stdout)
    logger.debug("Found %d authors in %s", len(authors), scope.target_dir)
    return authors
