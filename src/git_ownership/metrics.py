"""Per-author commit counts and line statistics."""

import re
from typing import Optional

from .exceptions import ParseError
from .models import AuthorName, EditStats, RepositoryScope
from .runner import DEFAULT_SHELL, run_command
from .shell import git_invocation, quote_arg

_UNSIGNED_RE = re.compile(r"[0-9]+")


def _parse_unsigned(token: str) -> Optional[int]:
    if _UNSIGNED_RE.fullmatch(token):
        return int(token)
    return None


# ---------------------------------------------------------------------------
# Commit count (strict)
# ---------------------------------------------------------------------------


def commit_count_command(author: AuthorName, scope: RepositoryScope) -> str:
    return git_invocation(
        scope.target_dir,
        "rev-list",
        "HEAD",
        f"--author={quote_arg(author)}",
        "--count",
        f"--branches={quote_arg(scope.branch)}",
    )


def parse_commit_count(text: str, command: str) -> int:
    """Parse the single number printed by ``git rev-list --count``.

    Raises:
        ParseError: If the output is anything but an unsigned integer,
            which means the query itself is malformed.
    """
    value = text[:-1] if text.endswith("\n") else text
    count = _parse_unsigned(value)
    if count is None:
        raise ParseError(
            command,
            value,
            suggestion=f"Failed to run '{command}'. '--count' didn't return a number!",
        )
    return count


def count_commits(
    author: AuthorName, scope: RepositoryScope, shell: str = DEFAULT_SHELL
) -> int:
    """Return the number of commits authored by ``author``."""
    command = commit_count_command(author, scope)
    return parse_commit_count(run_command(command, shell=shell), command)


# ---------------------------------------------------------------------------
# Edit statistics (lenient)
# ---------------------------------------------------------------------------


def numstat_command(author: AuthorName, scope: RepositoryScope) -> str:
    return git_invocation(
        scope.target_dir,
        "log",
        f"--author={quote_arg(author)}",
        "--numstat",
        "--pretty=tformat:",
        f"--branches={quote_arg(scope.branch)}",
        "--all",
    )


def parse_numstat(text: str) -> EditStats:
    """Sum ``git log --numstat`` rows into an :class:`EditStats`.

    Each row reads ``<added> <removed> <path>``. A missing or non-numeric
    field (``-`` for binary files, blank separator lines) counts as zero.
    """
    additions = 0
    removals = 0
    for line in text.splitlines():
        tokens = line.split()
        if len(tokens) > 0:
            additions += _parse_unsigned(tokens[0]) or 0
        if len(tokens) > 1:
            removals += _parse_unsigned(tokens[1]) or 0
    return EditStats(additions=additions, removals=removals)


def collect_edits(
    author: AuthorName, scope: RepositoryScope, shell: str = DEFAULT_SHELL
) -> EditStats:
    """Return the lines added and removed across every commit by ``author``."""
    return parse_numstat(run_command(numstat_command(author, scope), shell=shell))
