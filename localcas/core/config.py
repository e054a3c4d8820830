"""
Repository configuration.

The config file is written once by ``init`` and never read back by the
object store. Settings are frozen (immutable) after construction.
"""

# Standard library
import configparser
from pathlib import Path

# Third-party
from pydantic import BaseModel, Field

# -----------------------------
# Config model
# -----------------------------

CORE_SECTION = "core"


class RepositoryConfig(BaseModel):
    """Contents of the ``[core]`` section of a repository config file."""

    model_config = {"frozen": True}

    repositoryformatversion: int = Field(
        default=0,
        ge=0,
        description="Version of the on-disk repository format",
    )
    filemode: bool = Field(
        default=False,
        description="Whether file mode changes are tracked",
    )
    bare: bool = Field(
        default=False,
        description="Whether the repository has no working tree",
    )


def default_config() -> RepositoryConfig:
    """Return the configuration written for a new repository."""
    return RepositoryConfig()


# -----------------------------
# INI serialization
# -----------------------------


def _ini_value(value: object) -> str:
    if isinstance(value, bool):
        return "true" if value else "false"
    return str(value)


def write_config(path: Path, config: RepositoryConfig) -> None:
    """Write config as an INI file with a single ``[core]`` section."""
    parser = configparser.ConfigParser()
    parser[CORE_SECTION] = {
        key: _ini_value(value) for key, value in config.model_dump().items()
    }
    with path.open("w", encoding="utf-8") as fh:
        parser.write(fh)

