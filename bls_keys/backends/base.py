from abc import ABC, abstractmethod

from bls_keys.enums import CurveGroup
from bls_keys.typing import DST, Point


class BaseCurveBackend(ABC):
    """
    The elliptic curve engine behind the key, signature and proof types.

    Points are opaque to the rest of the package: they are only ever handed
    back to the backend that produced them. G1 holds public keys, G2 holds
    signatures and proofs of possession.
    """

    curve_order: int

    @staticmethod
    @abstractmethod
    def identity(group: CurveGroup) -> Point:
        ...

    @staticmethod
    @abstractmethod
    def g1_generator() -> Point:
        ...

    @staticmethod
    @abstractmethod
    def add(p: Point, q: Point) -> Point:
        ...

    @staticmethod
    @abstractmethod
    def multiply(p: Point, scalar: int) -> Point:
        ...

    @staticmethod
    @abstractmethod
    def eq(p: Point, q: Point) -> bool:
        ...

    @staticmethod
    @abstractmethod
    def encode_uncompressed(p: Point, group: CurveGroup) -> bytes:
        ...

    @staticmethod
    @abstractmethod
    def decode_uncompressed(data: bytes, group: CurveGroup) -> Point:
        """
        Raise ``PointDecodeError`` unless ``data`` encodes a point of the
        prime-order subgroup of ``group``.
        """
        ...

    @staticmethod
    @abstractmethod
    def encode_compressed(p: Point, group: CurveGroup) -> bytes:
        ...

    @staticmethod
    @abstractmethod
    def decode_compressed(data: bytes, group: CurveGroup) -> Point:
        """
        Raise ``PointDecodeError`` unless ``data`` encodes a point of the
        prime-order subgroup of ``group``.
        """
        ...

    @staticmethod
    @abstractmethod
    def hash_to_g2(message: bytes, dst: DST) -> Point:
        ...

    @staticmethod
    @abstractmethod
    def pairings_equal(p1: Point, q1: Point, p2: Point, q2: Point) -> bool:
        """
        Return whether ``e(p1, q1) == e(p2, q2)`` with ``p1, p2`` in G1 and
        ``q1, q2`` in G2.
        """
        ...
