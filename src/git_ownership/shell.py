"""Quote untrusted strings for interpolation into a shell command line."""

import shlex
from pathlib import Path

from .exceptions import EncodingError


def quote_arg(value: str) -> str:
    """Return a token the shell reads back as exactly ``value``.

    Author names come from commit metadata, so they are treated as hostile:
    quotes, backticks, ``$``, ``;`` and newlines all end up inside a single
    quoted word.

    Raises:
        EncodingError: If ``value`` is not representable as UTF-8 text or
            contains a NUL byte, which no command line can carry.
    """
    try:
        value.encode("utf-8")
    except UnicodeEncodeError as e:
        raise EncodingError(value, f"not valid UTF-8: {e.reason}")
    if "\x00" in value:
        raise EncodingError(value, "contains a NUL byte")
    return shlex.quote(value)


def git_invocation(target_dir: Path, *args: str) -> str:
    """Build a ``git -C <dir> ...`` command line.

    ``args`` are placed verbatim; callers quote any untrusted piece with
    :func:`quote_arg` first. The directory is always passed to git rather
    than entered, so the process working directory is never touched.
    """
    return " ".join(["git", "-C", quote_arg(str(target_dir)), *args])
