"""Base exception for git-ownership and the process exit codes it maps to."""

from typing import Dict, Optional


class ExitCode:
    """Process exit codes.

    Ranges:
      0: Success
      80-89: User and git errors
      100+: Internal errors
    """

    SUCCESS = 0
    CONFIG_ERROR = 81
    GIT_ERROR = 83
    INTERNAL_ERROR = 100
    INTERRUPTED = 130


class GitOwnershipError(Exception):
    """Base exception for all git-ownership errors.

    ``exit_code`` is what the command line exits with when the error
    reaches it.
    """

    exit_code = ExitCode.INTERNAL_ERROR
    label = "Error"

    def __init__(self, message: str, details: Optional[Dict[str, str]] = None):
        super().__init__(message)
        self.message = message
        self.details = {k: v for k, v in (details or {}).items() if v}

    def __str__(self) -> str:
        if not self.details:
            return self.message
        details_str = ", ".join(f"{k}={v}" for k, v in self.details.items())
        return f"{self.message} ({details_str})"


class ConfigurationError(GitOwnershipError):
    """Raised when configuration files, environment values or overrides are invalid."""

    exit_code = ExitCode.CONFIG_ERROR
    label = "Configuration error"
