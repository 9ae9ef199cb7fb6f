from typing import (
    Any,
    ClassVar,
    Iterable,
    Type,
    TypeVar,
)

from eth_utils import (
    ExtendedDebugLogger,
    encode_hex,
    get_extended_debug_logger,
)

from bls_keys.curve import (
    curve,
)
from bls_keys.encoding import (
    FixedSizeBytes,
)
from bls_keys.enums import (
    CurveGroup,
)
from bls_keys.exceptions import (
    EmptyAggregationError,
)
from bls_keys.typing import (
    Point,
)

TProjectivePoint = TypeVar("TProjectivePoint", bound="BaseProjectivePoint")


class BaseProjectivePoint:
    """
    A group element held by the active curve backend in projective
    coordinates. Equality is algebraic: two values compare equal when they
    are the same point, whatever their internal coordinates.
    """

    group: ClassVar[CurveGroup]

    def __init__(self, point: Point) -> None:
        self.point = point

    @classmethod
    def identity(cls: Type[TProjectivePoint]) -> TProjectivePoint:
        return cls(curve.backend.identity(cls.group))

    def to_projective(self: TProjectivePoint) -> TProjectivePoint:
        return type(self)(self.point)

    def _to_uncompressed(self) -> bytes:
        return curve.backend.encode_uncompressed(self.point, self.group)

    def _to_compressed(self) -> bytes:
        return curve.backend.encode_compressed(self.point, self.group)

    def __bytes__(self) -> bytes:
        return self._to_uncompressed()

    def __eq__(self, other: Any) -> bool:
        if type(other) is not type(self):
            return False
        return curve.backend.eq(self.point, other.point)

    def __ne__(self, other: Any) -> bool:
        return not self == other

    def __repr__(self) -> str:
        return f"{type(self).__name__}({encode_hex(self._to_uncompressed())})"


class AggregatableMixin:
    """
    Group addition over projective points of one type.
    """

    logger: ClassVar[ExtendedDebugLogger] = get_extended_debug_logger(
        "bls_keys.points.AggregatableMixin"
    )

    @classmethod
    def aggregate(
        cls: Type[TProjectivePoint], points: Iterable[TProjectivePoint]
    ) -> TProjectivePoint:
        """
        Fold ``points`` with group addition, in order.

        There is no aggregate of nothing: the identity would trivially satisfy
        an improperly framed pairing check, so an empty input raises
        ``EmptyAggregationError``.
        """
        iterator = iter(points)
        try:
            first = next(iterator)
        except StopIteration:
            raise EmptyAggregationError(f"Cannot aggregate zero {cls.__name__} values") from None

        accumulator = first.point
        count = 1
        for item in iterator:
            accumulator = curve.backend.add(accumulator, item.point)
            count += 1

        cls.logger.debug2("Aggregated %d %s values", count, cls.__name__)
        return cls(accumulator)

    def aggregate_with(self: TProjectivePoint, points: Iterable[TProjectivePoint]) -> None:
        """
        Fold ``points`` into this value in place. Empty input leaves it unchanged.
        """
        accumulator = self.point
        count = 0
        for item in points:
            accumulator = curve.backend.add(accumulator, item.point)
            count += 1
        self.point = accumulator

        self.logger.debug2("Aggregated %d %s values in place", count, type(self).__name__)


class BaseEncodedPoint(FixedSizeBytes):
    """
    Serialized point of ``group``. Only the length is checked on
    construction; point validity is checked when decoding.
    """

    group: ClassVar[CurveGroup]


class BaseAffinePoint(BaseEncodedPoint):
    def _decode(self) -> Point:
        return curve.backend.decode_uncompressed(bytes(self), self.group)

    def _recompress(self) -> bytes:
        return curve.backend.encode_compressed(self._decode(), self.group)


class BaseCompressedPoint(BaseEncodedPoint):
    def _decode(self) -> Point:
        return curve.backend.decode_compressed(bytes(self), self.group)

    def _decompress(self) -> bytes:
        return curve.backend.encode_uncompressed(self._decode(), self.group)
