"""Errors raised while querying git: escaping, launching, exit status, parsing."""

from typing import Optional

from .base import ExitCode, GitOwnershipError


class GitQueryError(GitOwnershipError):
    """Base class for failures of a single git query."""

    exit_code = ExitCode.GIT_ERROR

    def __init__(self, message: str, command: Optional[str] = None, **details: str):
        if command is not None:
            details = {"command": command, **details}
        super().__init__(message, details=details)
        self.command = command


class EncodingError(GitQueryError):
    """Raised when a value cannot be carried through a shell command line as text."""

    def __init__(self, value: str, reason: str):
        super().__init__(f"Cannot escape value {value!r}", reason=reason)
        self.value = value
        self.reason = reason


class LaunchError(GitQueryError):
    """Raised when the subprocess could not be started at all."""

    def __init__(self, command: str, reason: str):
        super().__init__(f"Failed to launch '{command}'", command=command, reason=reason)
        self.reason = reason


class SubprocessError(GitQueryError):
    """Raised when the subprocess started but exited with a non-zero status.

    The captured stderr is kept on the instance for diagnostics but is not
    part of the message.
    """

    def __init__(self, command: str, returncode: int, stderr: str = ""):
        super().__init__(
            f"Failed to run '{command}'", command=command, returncode=str(returncode)
        )
        self.returncode = returncode
        self.stderr = stderr


class ParseError(GitQueryError):
    """Raised when a query that must print a number printed something else."""

    def __init__(self, command: str, output: str, suggestion: str):
        super().__init__(
            f"Unexpected output {output!r} from '{command}'",
            command=command,
            suggestion=suggestion,
        )
        self.output = output
        self.suggestion = suggestion
