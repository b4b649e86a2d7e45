"""Run shell commands and hand back their stdout."""

import subprocess

from .exceptions import LaunchError, SubprocessError
from .logging_config import get_logger

logger = get_logger(__name__)

DEFAULT_SHELL = "bash"


def run_command(command: str, shell: str = DEFAULT_SHELL) -> str:
    """Run ``command`` in a ``shell -c`` subprocess and return its stdout.

    stdin is closed off, stdout and stderr are captured separately. On
    success a single trailing newline is removed from stdout; nothing else
    is stripped.

    Raises:
        LaunchError: If the shell could not be started.
        SubprocessError: If the command exited non-zero. The captured stderr
            is logged as a warning and attached to the error.
    """
    logger.debug("Running '%s'", command)
    try:
        result = subprocess.run(
            [shell, "-c", command],
            stdin=subprocess.DEVNULL,
            capture_output=True,
            text=True,
            encoding="utf-8",
            errors="replace",
        )
    except OSError as e:
        raise LaunchError(command, str(e))

    if result.returncode != 0:
        logger.warning("stderr from subprocess: %s", result.stderr.strip())
        raise SubprocessError(command, result.returncode, result.stderr)

    stdout = result.stdout
    if stdout.endswith("\n"):
        stdout = stdout[:-1]
    return stdout
