import base64

from hypothesis import (
    given,
    strategies as st,
)
import pytest

from bls_keys import (
    AffineProofOfPossession,
    AffinePublicKey,
    AffineSignature,
    CompressedProofOfPossession,
    CompressedPublicKey,
    CompressedSignature,
    LengthMismatch,
    ParseError,
    TextDecodeError,
)

BYTE_TYPES = (
    CompressedPublicKey,
    AffinePublicKey,
    CompressedSignature,
    AffineSignature,
    CompressedProofOfPossession,
    AffineProofOfPossession,
)


@pytest.mark.parametrize(
    "byte_type, size, max_text_size",
    (
        (CompressedPublicKey, 48, 128),
        (AffinePublicKey, 96, 256),
        (CompressedSignature, 96, 256),
        (AffineSignature, 192, 512),
        (CompressedProofOfPossession, 96, 256),
        (AffineProofOfPossession, 192, 512),
    ),
)
def test_sizes(byte_type, size, max_text_size):
    assert byte_type.size == size
    assert byte_type.max_text_size == max_text_size
    assert len(byte_type.default()) == size


@pytest.mark.parametrize("byte_type", BYTE_TYPES)
def test_default_is_all_zero(byte_type):
    assert bytes(byte_type.default()) == b"\x00" * byte_type.size


@pytest.mark.parametrize("byte_type", BYTE_TYPES)
@pytest.mark.parametrize("delta", (-1, 1))
def test_wrong_length_is_rejected(byte_type, delta):
    with pytest.raises(LengthMismatch):
        byte_type(b"\x01" * (byte_type.size + delta))


@given(data=st.binary(min_size=48, max_size=48))
def test_compressed_text_round_trip(data):
    pubkey = CompressedPublicKey(data)
    text = pubkey.to_text()
    assert text == base64.b64encode(data).decode()
    assert len(text) <= CompressedPublicKey.max_text_size
    assert str(pubkey) == text
    assert CompressedPublicKey.from_text(text) == pubkey


@given(data=st.binary(min_size=96, max_size=96))
def test_affine_text_round_trip(data):
    pubkey = AffinePublicKey(data)
    assert AffinePublicKey.from_text(pubkey.to_text()) == pubkey


def test_from_text_of_constant_buffer():
    pubkey = CompressedPublicKey(b"\x01" * 48)
    assert CompressedPublicKey.from_text(str(pubkey)) == pubkey


@pytest.mark.parametrize(
    "byte_type, data",
    (
        (CompressedPublicKey, b"\x01" * 47),
        (CompressedPublicKey, b"\x01" * 49),
        (AffinePublicKey, b"\x01" * 95),
        (AffinePublicKey, b"\x01" * 48),
    ),
)
def test_from_text_wrong_decoded_length(byte_type, data):
    text = base64.b64encode(data).decode()
    with pytest.raises(LengthMismatch):
        byte_type.from_text(text)


@pytest.mark.parametrize(
    "text",
    (
        "not base64!",
        "AAAA*AAA",
        "AAA",
        "é" * 8,
    ),
)
def test_from_text_invalid_base64(text):
    with pytest.raises(TextDecodeError):
        CompressedPublicKey.from_text(text)


def test_from_text_too_long():
    text = "A" * (CompressedPublicKey.max_text_size + 4)
    with pytest.raises(TextDecodeError):
        CompressedPublicKey.from_text(text)


def test_parse_errors_share_a_base():
    for text in ("***", base64.b64encode(b"\x00" * 10).decode()):
        with pytest.raises(ParseError):
            AffinePublicKey.from_text(text)


@pytest.mark.parametrize("byte_type", BYTE_TYPES)
@pytest.mark.parametrize("fill", (b"\x00", b"\x01", b"\xff"))
def test_serialize_is_raw_bytes(byte_type, fill):
    original = byte_type(fill * byte_type.size)
    serialized = original.serialize()
    assert serialized == fill * byte_type.size
    assert byte_type.deserialize(serialized) == original


@pytest.mark.parametrize("byte_type", (CompressedPublicKey, AffinePublicKey))
def test_deserialize_wrong_length(byte_type):
    with pytest.raises(LengthMismatch):
        byte_type.deserialize(b"\x01" * (byte_type.size - 1))


def test_ordering_is_lexicographic():
    low = CompressedPublicKey(b"\x00" * 47 + b"\xff")
    high = CompressedPublicKey(b"\x01" + b"\x00" * 47)
    assert low < high
    assert sorted([high, low]) == [low, high]
    assert max(low, high) == high


@pytest.mark.parametrize(
    "left, right",
    (
        (AffinePublicKey(b"\x07" * 96), b"\x07" * 96),
        (b"\x07" * 96, AffinePublicKey(b"\x07" * 96)),
        (AffinePublicKey(b"\x07" * 96), CompressedSignature(b"\x07" * 96)),
        (CompressedSignature(b"\x07" * 96), CompressedProofOfPossession(b"\x08" * 96)),
    ),
)
def test_ordering_requires_same_type(left, right):
    with pytest.raises(TypeError):
        left < right
    with pytest.raises(TypeError):
        left <= right
    with pytest.raises(TypeError):
        left > right
    with pytest.raises(TypeError):
        left >= right


def test_equality_and_hash_are_bytewise():
    left = AffinePublicKey(b"\x07" * 96)
    right = AffinePublicKey(bytearray(b"\x07" * 96))
    assert left == right
    assert not left != right
    assert hash(left) == hash(right)
    assert len({left, right}) == 1
    assert left != AffinePublicKey(b"\x08" * 96)


def test_equality_requires_same_type():
    data = b"\x07" * 96
    assert AffinePublicKey(data) != CompressedSignature(data)
    assert AffinePublicKey(data) != data
    assert data != AffinePublicKey(data)


def test_repr_is_hex():
    pubkey = CompressedPublicKey(b"\xab" * 48)
    assert repr(pubkey) == f"CompressedPublicKey(0x{'ab' * 48})"
