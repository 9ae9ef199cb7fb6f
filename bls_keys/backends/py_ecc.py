"""
BLS12-381 backend built on ``py_ecc``. Points are kept in optimized (x, y, z)
coordinates. Serialization follows the ZCash BLS12-381 encoding: big-endian
coordinates with three flag bits in the most significant byte, and G2
coordinates ordered ``c1 || c0``.
"""
import hashlib
from typing import (
    Tuple,
)

from eth_typing import (
    BLSPubkey,
    BLSSignature,
)
from py_ecc.bls.g2_primitives import (
    subgroup_check,
)
from py_ecc.bls.hash import (
    i2osp,
    os2ip,
)
from py_ecc.bls.hash_to_curve import (
    hash_to_G2,
)
from py_ecc.bls.point_compression import (
    compress_G1,
    compress_G2,
    decompress_G1,
    decompress_G2,
)
from py_ecc.optimized_bls12_381 import (
    final_exponentiate,
    pairing,
)
from py_ecc.optimized_bls12_381.optimized_curve import (
    FQ,
    FQ2,
    FQ12,
    G1,
    Z1,
    Z2,
    add,
    b,
    b2,
    curve_order,
    eq,
    field_modulus,
    is_inf,
    is_on_curve,
    multiply,
    neg,
    normalize,
)

from bls_keys.backends.base import (
    BaseCurveBackend,
)
from bls_keys.constants import (
    COMPRESSION_FLAG,
    FLAGS_MASK,
    INFINITY_FLAG,
)
from bls_keys.enums import (
    CurveGroup,
)
from bls_keys.exceptions import (
    PointDecodeError,
)
from bls_keys.typing import (
    DST,
    Point,
)

FIELD_ELEMENT_SIZE = 48

UNCOMPRESSED_SIZES = {
    CurveGroup.G1: 2 * FIELD_ELEMENT_SIZE,
    CurveGroup.G2: 4 * FIELD_ELEMENT_SIZE,
}
COMPRESSED_SIZES = {
    CurveGroup.G1: FIELD_ELEMENT_SIZE,
    CurveGroup.G2: 2 * FIELD_ELEMENT_SIZE,
}


# -- utils -- #


def _validate_size(data: bytes, size: int, group: CurveGroup) -> None:
    if len(data) != size:
        raise PointDecodeError(
            f"Length of data must be {size} bytes for {group.value} point, got {len(data)}"
        )


def _split_field_elements(data: bytes) -> Tuple[int, ...]:
    return tuple(
        int.from_bytes(data[start:start + FIELD_ELEMENT_SIZE], "big")
        for start in range(0, len(data), FIELD_ELEMENT_SIZE)
    )


def _strip_uncompressed_flags(data: bytes) -> Tuple[bool, bytes]:
    flags = data[0] & FLAGS_MASK
    if flags & COMPRESSION_FLAG:
        raise PointDecodeError("Compression flag must not be set on an uncompressed point")
    if flags not in (0, INFINITY_FLAG):
        raise PointDecodeError("Sort flag must not be set on an uncompressed point")

    is_infinity = bool(flags & INFINITY_FLAG)
    return is_infinity, bytes([data[0] & ~FLAGS_MASK]) + data[1:]


def _validate_coordinates(coordinates: Tuple[int, ...]) -> None:
    for coordinate in coordinates:
        if coordinate >= field_modulus:
            raise PointDecodeError("Coordinate >= field modulus")


def _validate_subgroup(point: Point, group: CurveGroup) -> Point:
    if not subgroup_check(point):
        raise PointDecodeError(f"Point failed {group.value} sub-group check")
    return point


def g1_to_uncompressed(point: Point) -> bytes:
    if is_inf(point):
        return bytes([INFINITY_FLAG]) + b"\x00" * (UNCOMPRESSED_SIZES[CurveGroup.G1] - 1)

    x, y = normalize(point)
    return b"".join([
        int(x).to_bytes(FIELD_ELEMENT_SIZE, "big"),
        int(y).to_bytes(FIELD_ELEMENT_SIZE, "big"),
    ])


def g2_to_uncompressed(point: Point) -> bytes:
    if is_inf(point):
        return bytes([INFINITY_FLAG]) + b"\x00" * (UNCOMPRESSED_SIZES[CurveGroup.G2] - 1)

    x, y = normalize(point)
    x_c0, x_c1 = x.coeffs
    y_c0, y_c1 = y.coeffs
    return b"".join(
        int(coordinate).to_bytes(FIELD_ELEMENT_SIZE, "big")
        for coordinate in (x_c1, x_c0, y_c1, y_c0)
    )


def uncompressed_to_g1(data: bytes) -> Point:
    _validate_size(data, UNCOMPRESSED_SIZES[CurveGroup.G1], CurveGroup.G1)
    is_infinity, payload = _strip_uncompressed_flags(data)

    if is_infinity:
        if any(payload):
            raise PointDecodeError("Point at infinity must be encoded with zero coordinates")
        return Z1

    coordinates = _split_field_elements(payload)
    _validate_coordinates(coordinates)
    x, y = coordinates
    point = (FQ(x), FQ(y), FQ.one())

    if not is_on_curve(point, b):
        raise PointDecodeError("Point is not on G1")

    return _validate_subgroup(point, CurveGroup.G1)


def uncompressed_to_g2(data: bytes) -> Point:
    _validate_size(data, UNCOMPRESSED_SIZES[CurveGroup.G2], CurveGroup.G2)
    is_infinity, payload = _strip_uncompressed_flags(data)

    if is_infinity:
        if any(payload):
            raise PointDecodeError("Point at infinity must be encoded with zero coordinates")
        return Z2

    coordinates = _split_field_elements(payload)
    _validate_coordinates(coordinates)
    x_c1, x_c0, y_c1, y_c0 = coordinates
    point = (FQ2((x_c0, x_c1)), FQ2((y_c0, y_c1)), FQ2.one())

    if not is_on_curve(point, b2):
        raise PointDecodeError("Point is not on G2")

    return _validate_subgroup(point, CurveGroup.G2)


def g1_to_compressed(point: Point) -> BLSPubkey:
    return BLSPubkey(i2osp(compress_G1(point), COMPRESSED_SIZES[CurveGroup.G1]))


def g2_to_compressed(point: Point) -> BLSSignature:
    z1, z2 = compress_G2(point)
    return BLSSignature(i2osp(z1, FIELD_ELEMENT_SIZE) + i2osp(z2, FIELD_ELEMENT_SIZE))


def compressed_to_g1(data: bytes) -> Point:
    _validate_size(data, COMPRESSED_SIZES[CurveGroup.G1], CurveGroup.G1)
    try:
        point = decompress_G1(os2ip(data))
    except ValueError as error:
        raise PointDecodeError(f"Bad compressed G1 point: {error}") from error
    return _validate_subgroup(point, CurveGroup.G1)


def compressed_to_g2(data: bytes) -> Point:
    _validate_size(data, COMPRESSED_SIZES[CurveGroup.G2], CurveGroup.G2)
    try:
        point = decompress_G2((os2ip(data[:FIELD_ELEMENT_SIZE]), os2ip(data[FIELD_ELEMENT_SIZE:])))
    except ValueError as error:
        raise PointDecodeError(f"Bad compressed G2 point: {error}") from error
    return _validate_subgroup(point, CurveGroup.G2)


# -- backend -- #


class PyECCBackend(BaseCurveBackend):
    curve_order = curve_order

    @staticmethod
    def identity(group: CurveGroup) -> Point:
        return Z1 if group is CurveGroup.G1 else Z2

    @staticmethod
    def g1_generator() -> Point:
        return G1

    @staticmethod
    def add(p: Point, q: Point) -> Point:
        return add(p, q)

    @staticmethod
    def multiply(p: Point, scalar: int) -> Point:
        return multiply(p, scalar)

    @staticmethod
    def eq(p: Point, q: Point) -> bool:
        return eq(p, q)

    @staticmethod
    def encode_uncompressed(p: Point, group: CurveGroup) -> bytes:
        if group is CurveGroup.G1:
            return g1_to_uncompressed(p)
        return g2_to_uncompressed(p)

    @staticmethod
    def decode_uncompressed(data: bytes, group: CurveGroup) -> Point:
        if group is CurveGroup.G1:
            return uncompressed_to_g1(data)
        return uncompressed_to_g2(data)

    @staticmethod
    def encode_compressed(p: Point, group: CurveGroup) -> bytes:
        if group is CurveGroup.G1:
            return g1_to_compressed(p)
        return g2_to_compressed(p)

    @staticmethod
    def decode_compressed(data: bytes, group: CurveGroup) -> Point:
        if group is CurveGroup.G1:
            return compressed_to_g1(data)
        return compressed_to_g2(data)

    @staticmethod
    def hash_to_g2(message: bytes, dst: DST) -> Point:
        return hash_to_G2(message, dst, hashlib.sha256)

    @staticmethod
    def pairings_equal(p1: Point, q1: Point, p2: Point, q2: Point) -> bool:
        # e(p1, q1) * e(-p2, q2) == 1, with a single final exponentiation
        result = (
            pairing(q1, p1, final_exponentiate=False)
            * pairing(q2, neg(p2), final_exponentiate=False)
        )
        return final_exponentiate(result) == FQ12.one()
