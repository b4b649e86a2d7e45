"""Exception hierarchy for git-ownership."""

from .base import ConfigurationError, ExitCode, GitOwnershipError
from .git import EncodingError, GitQueryError, LaunchError, ParseError, SubprocessError

__all__ = [
    "ExitCode",
    "GitOwnershipError",
    "ConfigurationError",
    "GitQueryError",
    "EncodingError",
    "LaunchError",
    "SubprocessError",
    "ParseError",
]
