# Standard library
import os
import re
import tempfile
from collections.abc import Iterator
from pathlib import Path

# Local imports
from localcas.core.errors import ObjectNotFoundError, StorageIOError
from localcas.core.logging import get_logger
from localcas.core.storage import get_object_path, get_objects_dir

logger = get_logger(__name__)

# -----------------------------
# Constants
# -----------------------------

FANOUT_DIR_PATTERN = re.compile(r"[0-9a-f]{2}")
OBJECT_FILE_PATTERN = re.compile(r"[0-9a-f]{38}")
TEMP_PREFIX = ".tmp-"
OBJECT_FILE_MODE = 0o644

# -----------------------------
# Object Repository
# -----------------------------


class ObjectRepository:
    """Repository for compressed object record I/O operations."""

    def __init__(self, repo_path: Path) -> None:
        self.repo_path: Path = repo_path

    def save_object(self, hash_val: str, data: bytes) -> Path:
        """Write a record at its content-addressed path.

        The fan-out directory is created if needed. The record is written
        to a temporary sibling and renamed into place, so readers never
        observe a partial file.

        Args:
            hash_val: Hex digest addressing the record
            data: Compressed envelope bytes

        Returns:
            Path of the stored record

        Raises:
            StorageIOError: If any filesystem operation fails
        """
        object_path: Path = get_object_path(self.repo_path, hash_val)
        fanout_dir: Path = object_path.parent

        # objects/ itself belongs to the repository bootstrap
        try:
            fanout_dir.mkdir(exist_ok=True)
        except OSError as exc:
            raise StorageIOError(str(fanout_dir), exc.strerror or str(exc)) from exc

        tmp_name: str | None = None
        try:
            fd, tmp_name = tempfile.mkstemp(prefix=TEMP_PREFIX, dir=fanout_dir)
            with os.fdopen(fd, "wb") as fh:
                fh.write(data)
            os.chmod(tmp_name, OBJECT_FILE_MODE)
            os.replace(tmp_name, object_path)
        except OSError as exc:
            if tmp_name is not None:
                Path(tmp_name).unlink(missing_ok=True)
            raise StorageIOError(str(object_path), exc.strerror or str(exc)) from exc

        logger.debug("record_written", path=str(object_path), bytes=len(data))
        return object_path

    def load_object(self, hash_val: str) -> bytes:
        """Read a record's compressed bytes.

        Args:
            hash_val: Hex digest

        Returns:
            Compressed envelope bytes

        Raises:
            ObjectNotFoundError: If no record exists for the digest
            StorageIOError: If the record exists but cannot be read
        """
        object_path: Path = get_object_path(self.repo_path, hash_val)
        try:
            return object_path.read_bytes()
        except FileNotFoundError:
            raise ObjectNotFoundError(hash_val) from None
        except OSError as exc:
            raise StorageIOError(str(object_path), exc.strerror or str(exc)) from exc

    def object_size(self, hash_val: str) -> int:
        """Return the on-disk (compressed) size of a record."""
        object_path: Path = get_object_path(self.repo_path, hash_val)
        try:
            return object_path.stat().st_size
        except FileNotFoundError:
            raise ObjectNotFoundError(hash_val) from None
        except OSError as exc:
            raise StorageIOError(str(object_path), exc.strerror or str(exc)) from exc

    def iter_hashes(self) -> Iterator[str]:
        """Yield the digest of every stored record, in sorted order.

        Files that do not follow the fan-out naming (including leftover
        temporary files) are skipped.
        """
        objects_dir: Path = get_objects_dir(self.repo_path)
        if not objects_dir.is_dir():
            return

        for fanout_dir in sorted(objects_dir.iterdir()):
            if not fanout_dir.is_dir() or not FANOUT_DIR_PATTERN.fullmatch(fanout_dir.name):
                continue
            for record in sorted(fanout_dir.iterdir()):
                if record.is_file() and OBJECT_FILE_PATTERN.fullmatch(record.name):
                    yield fanout_dir.name + record.name
