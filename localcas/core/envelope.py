# Local imports
from localcas.core.errors import MalformedEnvelopeError

# -----------------------------
# Envelope framing
# -----------------------------
#
# Serialized object format:
#   <kind> 0x20 <decimal payload length> 0x00 <payload>
#
# The buffer length delimits the payload; there is no trailing terminator.

KIND_SEPARATOR = b" "
HEADER_TERMINATOR = b"\x00"
# Enough for any 64-bit length; also keeps int() under its digit limit
MAX_LENGTH_DIGITS = 20


def encode_envelope(kind: str, payload: bytes) -> bytes:
    """Frame ``(kind, payload)`` into a single self-describing buffer.

    The kind is not validated here; see ``validate_kind``.
    """
    header: bytes = kind.encode("ascii") + KIND_SEPARATOR + str(len(payload)).encode("ascii")
    return header + HEADER_TERMINATOR + payload


def decode_envelope(data: bytes) -> tuple[str, int, bytes]:
    """Split an envelope back into ``(kind, length, payload)``.

    Args:
        data: Envelope bytes as produced by ``encode_envelope``

    Returns:
        Tuple of kind, declared length, and payload

    Raises:
        MalformedEnvelopeError: If the header cannot be parsed or the
            declared length disagrees with the payload
    """
    space_pos: int = data.find(KIND_SEPARATOR)
    if space_pos == -1:
        msg = "no space after kind"
        raise MalformedEnvelopeError(msg)

    nul_pos: int = data.find(HEADER_TERMINATOR, space_pos + 1)
    if nul_pos == -1:
        msg = "no NUL after length field"
        raise MalformedEnvelopeError(msg)

    try:
        kind: str = data[:space_pos].decode("ascii")
    except UnicodeDecodeError:
        msg = "kind is not ASCII"
        raise MalformedEnvelopeError(msg) from None

    length_field: bytes = data[space_pos + 1 : nul_pos]
    # int() would also accept signs, whitespace and underscores
    if not length_field or not length_field.isdigit():
        msg = f"invalid length field {length_field!r}"
        raise MalformedEnvelopeError(msg)
    if len(length_field) > MAX_LENGTH_DIGITS:
        msg = f"length field too long ({len(length_field)} digits)"
        raise MalformedEnvelopeError(msg)
    length = int(length_field)

    payload: bytes = data[nul_pos + 1 :]
    if length != len(payload):
        msg = f"declared length {length} but payload has {len(payload)} bytes"
        raise MalformedEnvelopeError(msg)

    return kind, length, payload
