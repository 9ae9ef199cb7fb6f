import hashlib

from eth_utils import (
    setup_DEBUG2_logging,
)
import pytest

from bls_keys import (
    SecretKey,
    curve,
)
from bls_keys.backends.base import (
    BaseCurveBackend,
)
from bls_keys.enums import (
    CurveGroup,
)
from bls_keys.exceptions import (
    PointDecodeError,
)

#
#  Setup DEBUG2 level logging.
#
setup_DEBUG2_logging()


TOY_ORDER = 2 ** 61 - 1

TOY_UNCOMPRESSED_MARKER = b"\x01"
TOY_COMPRESSED_MARKER = b"\x02"

TOY_UNCOMPRESSED_SIZES = {CurveGroup.G1: 96, CurveGroup.G2: 192}
TOY_COMPRESSED_SIZES = {CurveGroup.G1: 48, CurveGroup.G2: 96}


def _toy_encode(point, marker, size):
    return marker + point.to_bytes(size - 1, "big")


def _toy_decode(data, marker, size):
    if len(data) != size or data[:1] != marker:
        raise PointDecodeError(f"Not a toy point: {data.hex()}")
    point = int.from_bytes(data[1:], "big")
    if point >= TOY_ORDER:
        raise PointDecodeError(f"Toy point out of range: {point}")
    return point


class ToyBackend(BaseCurveBackend):
    """
    Both groups are the integers modulo a prime and the "pairing" is their
    product, which is bilinear. Useless as cryptography, fast and exact as a
    stand-in for the real curve.
    """

    curve_order = TOY_ORDER

    @staticmethod
    def identity(group):
        return 0

    @staticmethod
    def g1_generator():
        return 1

    @staticmethod
    def add(p, q):
        return (p + q) % TOY_ORDER

    @staticmethod
    def multiply(p, scalar):
        return (p * scalar) % TOY_ORDER

    @staticmethod
    def eq(p, q):
        return p == q

    @staticmethod
    def encode_uncompressed(p, group):
        return _toy_encode(p, TOY_UNCOMPRESSED_MARKER, TOY_UNCOMPRESSED_SIZES[group])

    @staticmethod
    def decode_uncompressed(data, group):
        return _toy_decode(data, TOY_UNCOMPRESSED_MARKER, TOY_UNCOMPRESSED_SIZES[group])

    @staticmethod
    def encode_compressed(p, group):
        return _toy_encode(p, TOY_COMPRESSED_MARKER, TOY_COMPRESSED_SIZES[group])

    @staticmethod
    def decode_compressed(data, group):
        return _toy_decode(data, TOY_COMPRESSED_MARKER, TOY_COMPRESSED_SIZES[group])

    @staticmethod
    def hash_to_g2(message, dst):
        return int.from_bytes(hashlib.sha256(dst + message).digest(), "big") % TOY_ORDER

    @staticmethod
    def pairings_equal(p1, q1, p2, q2):
        return (p1 * q1 - p2 * q2) % TOY_ORDER == 0


@pytest.fixture(scope="module")
def toy_curve():
    curve.use(ToyBackend)
    yield ToyBackend
    curve.use_default_backend()


@pytest.fixture(scope="module")
def privkeys():
    return (1, 5, 124, 735, 5566, 127409812145)


@pytest.fixture(scope="module")
def secret_keys(privkeys):
    return tuple(SecretKey(privkey) for privkey in privkeys)


@pytest.fixture(scope="module")
def message():
    return b"\x32" * 32
