# Standard library
import re

# -----------------------------
# Validation Constants
# -----------------------------

VALID_DIGEST_PATTERN = re.compile(r"[0-9a-f]{40}")
MAX_KIND_LENGTH = 32

# -----------------------------
# Validation Errors
# -----------------------------


class ValidationError(ValueError):
    """Raised when validation fails."""


# -----------------------------
# Validation Functions
# -----------------------------


def validate_kind(kind: str) -> None:
    """Validate an object kind tag.

    The envelope header is delimited by a space and a NUL, so neither may
    appear in the kind.

    Args:
        kind: Kind tag to validate

    Raises:
        ValidationError: If kind is invalid
    """
    if not kind:
        msg = "Object kind cannot be empty"
        raise ValidationError(msg)

    if not kind.isascii():
        msg = f"Invalid object kind {kind!r}. Only ASCII allowed."
        raise ValidationError(msg)

    if " " in kind or "\x00" in kind:
        msg = f"Invalid object kind {kind!r}. Spaces and NUL are not allowed."
        raise ValidationError(msg)

    if len(kind) > MAX_KIND_LENGTH:
        msg = f"Object kind too long ({len(kind)} chars, max {MAX_KIND_LENGTH})"
        raise ValidationError(msg)


def validate_digest(hash_val: str) -> None:
    """Validate a hex digest.

    Args:
        hash_val: Digest to validate

    Raises:
        ValidationError: If digest is not 40 lowercase hex characters
    """
    if not VALID_DIGEST_PATTERN.fullmatch(hash_val):
        msg = f"Invalid digest '{hash_val}'. Expected 40 lowercase hex characters."
        raise ValidationError(msg)
