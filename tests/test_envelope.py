"""Tests for localcas.core.envelope."""

import pytest

from localcas.core.envelope import decode_envelope, encode_envelope
from localcas.core.errors import MalformedEnvelopeError


def test_encode_is_byte_exact() -> None:
    assert encode_envelope("blob", b"hello world") == b"blob 11\x00hello world"


def test_encode_empty_payload() -> None:
    assert encode_envelope("blob", b"") == b"blob 0\x00"


def test_encode_has_no_trailing_terminator() -> None:
    assert encode_envelope("tag", b"x").endswith(b"\x00x")


@pytest.mark.parametrize(
    ("kind", "payload"),
    [
        ("blob", b"hello world"),
        ("blob", b""),
        ("commit", b"tree abc\nparent def\n"),
        ("blob", bytes(range(256))),
        ("blob", b"has a space and a \x00 NUL inside"),
    ],
)
def test_round_trip(kind: str, payload: bytes) -> None:
    assert decode_envelope(encode_envelope(kind, payload)) == (kind, len(payload), payload)


def test_decode_uses_first_nul_after_space() -> None:
    data = b"blob 3\x00a\x00b"
    assert decode_envelope(data) == ("blob", 3, b"a\x00b")


def test_decode_missing_space() -> None:
    with pytest.raises(MalformedEnvelopeError, match="no space"):
        decode_envelope(b"blob11\x00helloworld")


def test_decode_first_space_ends_kind() -> None:
    # The space inside the payload is taken as the separator, leaving no NUL after it
    with pytest.raises(MalformedEnvelopeError, match="no NUL"):
        decode_envelope(b"blob11\x00hello world")


def test_decode_missing_nul() -> None:
    with pytest.raises(MalformedEnvelopeError, match="no NUL"):
        decode_envelope(b"blob 11hello world")


def test_decode_empty_input() -> None:
    with pytest.raises(MalformedEnvelopeError):
        decode_envelope(b"")


@pytest.mark.parametrize("length_field", [b"", b"abc", b"-1", b"+1", b" 1", b"1_0", b"1.0"])
def test_decode_rejects_invalid_length_field(length_field: bytes) -> None:
    with pytest.raises(MalformedEnvelopeError, match="invalid length field"):
        decode_envelope(b"blob " + length_field + b"\x00x")


def test_decode_rejects_overlong_length_field() -> None:
    with pytest.raises(MalformedEnvelopeError, match="too long"):
        decode_envelope(b"blob " + b"9" * 5000 + b"\x00x")


def test_decode_accepts_zero_padded_length() -> None:
    assert decode_envelope(b"blob 0000000000000000003\x00abc") == ("blob", 3, b"abc")


def test_decode_rejects_length_mismatch() -> None:
    with pytest.raises(MalformedEnvelopeError, match="declared length 5"):
        decode_envelope(b"blob 5\x00abc")


def test_decode_rejects_non_ascii_kind() -> None:
    with pytest.raises(MalformedEnvelopeError, match="ASCII"):
        decode_envelope(b"bl\xffb 1\x00x")


def test_malformed_error_carries_reason() -> None:
    with pytest.raises(MalformedEnvelopeError) as excinfo:
        decode_envelope(b"nothing")
    assert excinfo.value.reason == "no space after kind"
