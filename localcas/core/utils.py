# Standard library
import hashlib
import zlib
from pathlib import Path

# Local imports
from localcas.core.errors import CorruptObjectError

# -----------------------------
# Constants
# -----------------------------

# Fixed so that identical envelopes always produce identical stored bytes.
COMPRESSION_LEVEL = zlib.Z_DEFAULT_COMPRESSION

# -----------------------------
# File I/O utilities
# -----------------------------


def load_file(path: Path) -> bytes:
    """Read a file's raw bytes for hashing or storage."""
    return path.read_bytes()


# -----------------------------
# Hash computation utilities
# -----------------------------


def compute_digest(data: bytes) -> bytes:
    """Compute the raw 20-byte SHA-1 digest of an encoded envelope."""
    return hashlib.sha1(data).digest()  # noqa: S324


def compute_hash(data: bytes) -> str:
    """Compute the SHA-1 digest of an encoded envelope as lowercase hex."""
    return hashlib.sha1(data).hexdigest()  # noqa: S324


# -----------------------------
# Compression utilities
# -----------------------------


def compress(data: bytes) -> bytes:
    """Compress bytes for storage with zlib."""
    return zlib.compress(data, COMPRESSION_LEVEL)


def decompress(data: bytes) -> bytes:
    """Decompress a stored zlib stream.

    Raises:
        CorruptObjectError: If the stream is invalid, truncated, or
            followed by trailing bytes
    """
    decompressor = zlib.decompressobj()
    try:
        result: bytes = decompressor.decompress(data)
        result += decompressor.flush()
    except zlib.error as exc:
        raise CorruptObjectError(None, str(exc)) from exc

    if not decompressor.eof:
        msg = "truncated compressed stream"
        raise CorruptObjectError(None, msg)
    if decompressor.unused_data:
        msg = f"{len(decompressor.unused_data)} trailing bytes after compressed stream"
        raise CorruptObjectError(None, msg)

    return result
