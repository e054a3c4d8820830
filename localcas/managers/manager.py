# Standard library
import os
from pathlib import Path

# Third-party
from rich.console import Console

# Local imports
from localcas.core.config import RepositoryConfig, default_config
from localcas.core.errors import StorageIOError
from localcas.core.models import DEFAULT_KIND, ObjectInfo, StoredObject
from localcas.core.storage import get_objects_dir, init_repo
from localcas.core.utils import load_file
from localcas.repositories.object_repository import ObjectRepository
from localcas.services.display_service import DisplayService
from localcas.services.object_service import ObjectService

# -----------------------------
# Constants
# -----------------------------

REPO_ENV_VAR = "LOCALCAS_REPO"
DEFAULT_REPO_DIRNAME = ".localcas"

# -----------------------------
# Unified Object Manager
# -----------------------------


class ObjectManager:
    """Object manager - single API surface for object store operations.

    The repository is located from ``repo_path``, then ``$LOCALCAS_REPO``,
    then ``./.localcas``. Nothing is created until ``init`` is called.
    """

    def __init__(
        self,
        repo_path: str | Path | None = None,
        console: Console | None = None,
    ) -> None:
        if repo_path is None:
            env_path: str | None = os.getenv(REPO_ENV_VAR)
            if env_path:
                self.repo_path = Path(env_path).expanduser().resolve()
            else:
                self.repo_path = Path.cwd() / DEFAULT_REPO_DIRNAME
        else:
            self.repo_path = Path(repo_path).expanduser().resolve()

        # Initialize repository
        self._object_repo = ObjectRepository(self.repo_path)

        # Initialize services
        self._object_service = ObjectService(self._object_repo)
        self._display_service = DisplayService(self._object_service, console=console)

    @property
    def is_initialized(self) -> bool:
        """Whether the object tree exists."""
        return get_objects_dir(self.repo_path).is_dir()

    # -----------------------------
    # Repository Bootstrap
    # -----------------------------

    def init(self, config: RepositoryConfig | None = None) -> Path:
        """Create the repository skeleton and config file.

        Args:
            config: Config to write (defaults to ``default_config()``)

        Returns:
            Repository path

        Raises:
            StorageIOError: If the skeleton cannot be created
        """
        try:
            init_repo(self.repo_path, config or default_config())
        except OSError as exc:
            raise StorageIOError(str(self.repo_path), exc.strerror or str(exc)) from exc
        return self.repo_path

    # -----------------------------
    # Object Operations
    # -----------------------------

    def put(self, payload: bytes, kind: str = DEFAULT_KIND) -> str:
        """Store content and return its digest.

        Examples:
            >>> om.put(b"hello world")
            '95d09f2b10159347eece71399a7e2e907ea3df4f'
        """
        return self._object_service.put(kind, payload)

    def get(self, hash_val: str) -> StoredObject:
        """Load an object by digest."""
        return self._object_service.get(hash_val)

    def hash_object(self, payload: bytes, kind: str = DEFAULT_KIND) -> str:
        """Compute a digest without storing anything."""
        return self._object_service.hash_object(kind, payload)

    def hash_file(
        self,
        path: str | Path,
        kind: str = DEFAULT_KIND,
        *,
        write: bool = False,
    ) -> str:
        """Hash a file's contents, optionally storing it.

        Args:
            path: File to read
            kind: Object kind tag
            write: Also store the object (keyword-only)

        Returns:
            Lowercase hex digest
        """
        payload: bytes = load_file(Path(path))
        if write:
            return self._object_service.put(kind, payload)
        return self._object_service.hash_object(kind, payload)

    def verify(self, hash_val: str) -> bool:
        """Recompute a stored object's digest and compare it with its address."""
        return self._object_service.verify(hash_val)

    def info(self, hash_val: str) -> ObjectInfo:
        """Describe one stored object."""
        return self._object_service.info(hash_val)

    def list_objects(self, kind: str | None = None) -> list[ObjectInfo]:
        """List stored objects, optionally filtered by kind."""
        return self._object_service.list_objects(kind=kind)

    # -----------------------------
    # Display Operations
    # -----------------------------

    def show(self, hash_val: str) -> None:
        """Display information about one object."""
        self._display_service.show_object_info(hash_val)

    def show_all(self, kind: str | None = None) -> None:
        """Display all objects in a rich table."""
        self._display_service.show_objects_table(kind=kind)
