# Standard library
from dataclasses import dataclass

# -----------------------------
# Constants
# -----------------------------

DEFAULT_KIND = "blob"

# -----------------------------
# Domain Models
# -----------------------------


@dataclass(frozen=True)
class StoredObject:
    """Immutable typed content: a kind tag and its payload."""

    kind: str
    payload: bytes

    @property
    def size(self) -> int:
        """Byte length of the payload."""
        return len(self.payload)

    def __repr__(self) -> str:
        return f"StoredObject({self.kind}, size={self.size})"


@dataclass(frozen=True)
class ObjectInfo:
    """Summary of one stored record."""

    digest: str
    kind: str
    size: int
    stored_size: int
    path: str

    @property
    def short_digest(self) -> str:
        """Abbreviated digest for display."""
        return self.digest[:7]
