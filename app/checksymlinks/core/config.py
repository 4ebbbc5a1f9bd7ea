"""Run configuration.

This module provides the validated configuration for a single
checksymlinks run. All values come from the command line; no config
file or environment variable is read.
"""

from pathlib import Path
from typing import Annotated

from pydantic import BaseModel, ConfigDict, Field, ValidationError, model_validator

from checksymlinks.walker.models import LinkPolicy


class RunConfig(BaseModel):
    """Configuration for a single walk.

    Attributes:
        root: Directory to walk.
        delete_broken: Remove links whose target cannot be resolved.
        delete_all: Remove every link, valid or not.
        quiet: Suppress informational notes (visited entries, valid links).
    """

    model_config = ConfigDict(extra="forbid", frozen=True)

    root: Annotated[Path, Field(description="Directory to walk")]
    delete_broken: Annotated[
        bool,
        Field(description="Remove links whose target cannot be resolved"),
    ] = False
    delete_all: Annotated[
        bool,
        Field(description="Remove every symbolic link"),
    ] = False
    quiet: Annotated[
        bool,
        Field(description="Suppress non-error informational notes"),
    ] = False

    @model_validator(mode="after")
    def check_exclusive_policies(self) -> "RunConfig":
        """Reject enabling both deletion policies at once."""
        if self.delete_broken and self.delete_all:
            msg = "--delete-broken and --delete-all are not allowed together"
            raise ValueError(msg)
        return self

    @property
    def policy(self) -> LinkPolicy:
        """Get the deletion policy selected by the flags."""
        if self.delete_all:
            return LinkPolicy.DELETE_ALL
        if self.delete_broken:
            return LinkPolicy.DELETE_BROKEN
        return LinkPolicy.REPORT


class ConfigError(Exception):
    """Raised when the run configuration is invalid."""


def build_config(
    root: str | Path,
    *,
    delete_broken: bool = False,
    delete_all: bool = False,
    quiet: bool = False,
) -> RunConfig:
    """Build and validate a run configuration.

    Args:
        root: Directory to walk.
        delete_broken: Remove broken links.
        delete_all: Remove all links.
        quiet: Suppress informational notes.

    Returns:
        Validated RunConfig.

    Raises:
        ConfigError: If the flag combination is invalid.
    """
    try:
        return RunConfig(
            root=Path(root),
            delete_broken=delete_broken,
            delete_all=delete_all,
            quiet=quiet,
        )
    except ValidationError as e:
        messages = "; ".join(str(err["msg"]).removeprefix("Value error, ") for err in e.errors())
        raise ConfigError(messages) from e
