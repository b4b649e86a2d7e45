"""Configuration loading for git-ownership.

Configuration sources are merged in priority order:
    1. Defaults (defined in OwnershipConfig)
    2. Global config (~/.git-ownership.toml)
    3. Project config (./git-ownership.toml)
    4. Explicit config file
    5. Environment variables (GIT_OWNERSHIP_* prefix)
    6. CLI overrides (passed as kwargs)

Only the command-line layer loads configuration; the query modules take
everything they need as arguments.

Example:
    >>> config = load_config(branch="develop", quiet=True)
    >>> config.branch
    'develop'
    >>> config.verbosity
    'quiet'
"""

from __future__ import annotations

import os
import tomllib
from dataclasses import dataclass, fields
from pathlib import Path
from typing import Any, Literal, Optional, get_args

from .exceptions import ConfigurationError

Verbosity = Literal["quiet", "normal", "verbose"]
OutputFormat = Literal["text", "json"]

ENV_PREFIX = "GIT_OWNERSHIP_"
CONFIG_FILENAME = "git-ownership.toml"


@dataclass(frozen=True)
class OwnershipConfig:
    """Settings for one run.

    Attributes:
        branch: Pattern handed to ``--branches=`` on every query
        shell: Shell used to run the git command lines
        output_format: "text" for the one-line-per-author report, "json" for records
        verbosity: Logging level selector
    """

    branch: str = "main"
    shell: str = "bash"
    output_format: OutputFormat = "text"
    verbosity: Verbosity = "normal"

    def __post_init__(self) -> None:
        if not self.branch:
            raise ConfigurationError("branch must not be empty")
        if not self.shell:
            raise ConfigurationError("shell must not be empty")
        if self.output_format not in get_args(OutputFormat):
            raise ConfigurationError(
                f"output_format must be one of {get_args(OutputFormat)}",
                details={"value": str(self.output_format)},
            )
        if self.verbosity not in get_args(Verbosity):
            raise ConfigurationError(
                f"verbosity must be one of {get_args(Verbosity)}",
                details={"value": str(self.verbosity)},
            )

    @property
    def verbose(self) -> bool:
        return self.verbosity == "verbose"

    @property
    def quiet(self) -> bool:
        return self.verbosity == "quiet"


def load_config(config_file: Optional[Path] = None, **overrides: Any) -> OwnershipConfig:
    """Load configuration with auto-discovery and merging.

    Args:
        config_file: Optional explicit config file path
        **overrides: Direct overrides (typically from CLI flags). ``None``
            values are ignored so unset options fall through.

    Returns:
        Validated OwnershipConfig instance

    Raises:
        ConfigurationError: If a config file or value is invalid or missing
    """
    merged: dict[str, Any] = {}

    global_config = Path.home() / f".{CONFIG_FILENAME}"
    if global_config.exists():
        merged.update(_load_toml_file(global_config))

    project_config = Path.cwd() / CONFIG_FILENAME
    if project_config.exists():
        merged.update(_load_toml_file(project_config))

    if config_file is not None:
        if not config_file.exists():
            raise ConfigurationError(f"Config file not found: {config_file}")
        merged.update(_load_toml_file(config_file))

    merged.update(_load_env_vars())

    overrides = {k: v for k, v in overrides.items() if v is not None}
    # Convert verbosity boolean flags to string
    if overrides.pop("verbose", False):
        overrides["verbosity"] = "verbose"
    if overrides.pop("quiet", False):
        overrides["verbosity"] = "quiet"
    merged.update(overrides)

    try:
        return OwnershipConfig(**merged)
    except TypeError as e:
        # Unknown field in config
        raise ConfigurationError(f"Invalid configuration: {e}")


def _load_env_vars() -> dict[str, str]:
    """Load configuration from GIT_OWNERSHIP_* environment variables.

    Supported environment variables:
        GIT_OWNERSHIP_BRANCH
        GIT_OWNERSHIP_SHELL
        GIT_OWNERSHIP_OUTPUT_FORMAT: text/json
        GIT_OWNERSHIP_VERBOSITY: quiet/normal/verbose
    """
    result: dict[str, str] = {}
    for f in fields(OwnershipConfig):
        env_value = os.environ.get(f"{ENV_PREFIX}{f.name.upper()}")
        if env_value is not None:
            result[f.name] = env_value
    return result


def _load_toml_file(path: Path) -> dict[str, Any]:
    try:
        with open(path, "rb") as f:
            return tomllib.load(f)
    except (OSError, tomllib.TOMLDecodeError) as e:
        raise ConfigurationError(f"Invalid config file '{path}': {e}")
