# Standard library
from pathlib import Path

# Local imports
from localcas.core.envelope import decode_envelope, encode_envelope
from localcas.core.errors import CorruptObjectError, MalformedEnvelopeError
from localcas.core.logging import get_logger
from localcas.core.models import ObjectInfo, StoredObject
from localcas.core.storage import format_digest, get_object_path
from localcas.core.utils import compress, compute_digest, compute_hash, decompress
from localcas.core.validation import validate_digest, validate_kind
from localcas.repositories.object_repository import ObjectRepository

logger = get_logger(__name__)

# -----------------------------
# Object Service
# -----------------------------


class ObjectService:
    """Service for storing and retrieving content-addressed objects."""

    def __init__(self, object_repo: ObjectRepository) -> None:
        self.object_repo = object_repo

    # -----------------------------
    # Hashing
    # -----------------------------

    def hash_object(self, kind: str, payload: bytes) -> str:
        """Compute the digest an object would be stored under, without writing.

        Args:
            kind: Object kind tag
            payload: Object content

        Returns:
            Lowercase hex digest of the encoded envelope
        """
        validate_kind(kind)
        return compute_hash(encode_envelope(kind, payload))

    # -----------------------------
    # Store / Load
    # -----------------------------

    def put(self, kind: str, payload: bytes) -> str:
        """Store an object and return its digest.

        The digest covers the whole envelope, so the same payload stored
        under two kinds occupies two addresses. Storing existing content
        rewrites identical bytes.

        Args:
            kind: Object kind tag
            payload: Object content

        Returns:
            Lowercase hex digest

        Raises:
            ValidationError: If kind cannot be framed in an envelope
            StorageIOError: If the record cannot be written
        """
        validate_kind(kind)

        envelope: bytes = encode_envelope(kind, payload)
        hash_val: str = format_digest(compute_digest(envelope))
        self.object_repo.save_object(hash_val, compress(envelope))

        logger.debug("object_stored", digest=hash_val, kind=kind, size=len(payload))
        return hash_val

    def get(self, hash_val: str) -> StoredObject:
        """Load an object by digest.

        Args:
            hash_val: Lowercase hex digest

        Returns:
            The decoded object

        Raises:
            ValidationError: If the digest is not well-formed
            ObjectNotFoundError: If nothing is stored under the digest
            CorruptObjectError: If the record does not decompress
            MalformedEnvelopeError: If the decompressed bytes are not an envelope
        """
        validate_digest(hash_val)

        raw: bytes = self.object_repo.load_object(hash_val)
        try:
            envelope: bytes = decompress(raw)
        except CorruptObjectError as exc:
            raise CorruptObjectError(hash_val, exc.reason) from exc

        kind, _, payload = decode_envelope(envelope)
        logger.debug("object_loaded", digest=hash_val, kind=kind, size=len(payload))
        return StoredObject(kind=kind, payload=payload)

    # -----------------------------
    # Inspection
    # -----------------------------

    def verify(self, hash_val: str) -> bool:
        """Recompute an object's digest and compare it with its address.

        Args:
            hash_val: Lowercase hex digest

        Returns:
            True if the stored content hashes back to ``hash_val``
        """
        obj: StoredObject = self.get(hash_val)
        actual: str = compute_hash(encode_envelope(obj.kind, obj.payload))
        if actual != hash_val:
            logger.warning("object_verify_failed", digest=hash_val, actual=actual)
            return False
        return True

    def info(self, hash_val: str) -> ObjectInfo:
        """Describe a stored object.

        Args:
            hash_val: Lowercase hex digest

        Returns:
            ObjectInfo with kind, payload size and on-disk size
        """
        obj: StoredObject = self.get(hash_val)
        path: Path = get_object_path(self.object_repo.repo_path, hash_val)
        return ObjectInfo(
            digest=hash_val,
            kind=obj.kind,
            size=obj.size,
            stored_size=self.object_repo.object_size(hash_val),
            path=str(path),
        )

    def list_objects(self, kind: str | None = None) -> list[ObjectInfo]:
        """List stored objects ordered by digest.

        Records that cannot be decoded are logged and skipped.

        Args:
            kind: Optional kind to filter by (exact match)

        Returns:
            List of ObjectInfo
        """
        infos: list[ObjectInfo] = []
        for hash_val in self.object_repo.iter_hashes():
            try:
                info: ObjectInfo = self.info(hash_val)
            except (CorruptObjectError, MalformedEnvelopeError) as exc:
                logger.warning("object_unreadable", digest=hash_val, error=str(exc))
                continue
            if kind is None or info.kind == kind:
                infos.append(info)
        return infos

