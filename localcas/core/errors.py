# -----------------------------
# Error taxonomy
# -----------------------------


class LocalcasError(Exception):
    """Base exception for all localcas errors."""


class MalformedEnvelopeError(LocalcasError):
    """Raised when envelope bytes violate the ``<kind> <len>\\0<payload>`` framing."""

    def __init__(self, reason: str) -> None:
        self.reason = reason
        super().__init__(f"Malformed envelope: {reason}")


class CorruptObjectError(LocalcasError):
    """Raised when a stored record is not a valid compressed stream."""

    def __init__(self, hash_val: str | None, reason: str) -> None:
        self.hash_val = hash_val
        self.reason = reason
        if hash_val is None:
            super().__init__(f"Corrupt object: {reason}")
        else:
            super().__init__(f"Corrupt object {hash_val}: {reason}")


class ObjectNotFoundError(LocalcasError):
    """Raised when no stored record exists for a digest."""

    def __init__(self, hash_val: str) -> None:
        self.hash_val = hash_val
        super().__init__(f"Object not found: {hash_val}")


class StorageIOError(LocalcasError):
    """Raised when a filesystem operation on the object tree fails."""

    def __init__(self, path: str, reason: str) -> None:
        self.path = path
        self.reason = reason
        super().__init__(f"I/O failure on {path}: {reason}")
