# Standard library
from pathlib import Path
from typing import TYPE_CHECKING

# Local imports
from localcas.core.config import write_config

if TYPE_CHECKING:
    from localcas.core.config import RepositoryConfig

# -----------------------------
# Content-addressed storage
# -----------------------------

FANOUT_PREFIX_LENGTH = 2


def format_digest(digest: bytes) -> str:
    """Render a raw digest as lowercase hexadecimal text."""
    return digest.hex()


def get_objects_dir(repo_path: Path) -> Path:
    """Get the root of the object tree."""
    return repo_path / "objects"


def get_object_path(repo_path: Path, hash_val: str) -> Path:
    """
    Get path for content-addressed object.

    Uses first 2 characters of hash for directory sharding.

    Example:
        hash="95d09f2b..." -> repo_path/objects/95/d09f2b...
    """
    return (
        get_objects_dir(repo_path)
        / hash_val[:FANOUT_PREFIX_LENGTH]
        / hash_val[FANOUT_PREFIX_LENGTH:]
    )


def get_config_path(repo_path: Path) -> Path:
    """Get path to the repository config file."""
    return repo_path / "config"


# -----------------------------
# Repository bootstrap
# -----------------------------


def init_repo(repo_path: Path, config: "RepositoryConfig") -> None:
    """Initialize repository structure.

    Creates::

        objects/
        refs/heads/
        refs/tags/
        HEAD
        description
        config

    Existing files are left untouched.
    """
    get_objects_dir(repo_path).mkdir(parents=True, exist_ok=True)
    (repo_path / "refs" / "heads").mkdir(parents=True, exist_ok=True)
    (repo_path / "refs" / "tags").mkdir(parents=True, exist_ok=True)

    for name in ("HEAD", "description"):
        (repo_path / name).touch(exist_ok=True)

    config_path: Path = get_config_path(repo_path)
    if not config_path.exists():
        write_config(config_path, config)
