import base64
import binascii
from typing import (
    Any,
    ClassVar,
    Type,
    TypeVar,
    Union,
)

from eth_utils import (
    encode_hex,
)
import ssz
from ssz.exceptions import (
    DeserializationError,
)
from ssz.sedes import (
    ByteVector,
)

from bls_keys.exceptions import (
    LengthMismatch,
    TextDecodeError,
)

TFixedSizeBytes = TypeVar("TFixedSizeBytes", bound="FixedSizeBytes")


class FixedSizeBytes(bytes):
    """
    An immutable byte buffer of exactly ``size`` bytes.

    Equality, ordering and hashing are byte-wise over the raw buffer. The
    ordering is lexicographic and structural only: it says nothing about the
    algebraic value the bytes may encode. Instances only compare equal to,
    and only order against, instances of the same class.
    """

    size: ClassVar[int]
    max_text_size: ClassVar[int]
    sedes: ClassVar[ByteVector]

    def __new__(cls: Type[TFixedSizeBytes], value: Union[bytes, bytearray, memoryview]) -> TFixedSizeBytes:
        if len(value) != cls.size:
            raise LengthMismatch(
                f"{cls.__name__} must be {cls.size} bytes, got {len(value)}"
            )
        return super().__new__(cls, value)

    @classmethod
    def default(cls: Type[TFixedSizeBytes]) -> TFixedSizeBytes:
        """
        All-zero placeholder. It does not encode a valid point.
        """
        return cls(b"\x00" * cls.size)

    #
    # Text
    #
    def to_text(self) -> str:
        return base64.b64encode(self).decode("ascii")

    @classmethod
    def from_text(cls: Type[TFixedSizeBytes], text: str) -> TFixedSizeBytes:
        if len(text) > cls.max_text_size:
            raise TextDecodeError(
                f"{cls.__name__} text must be at most {cls.max_text_size} characters, "
                f"got {len(text)}"
            )
        try:
            decoded = base64.b64decode(text, validate=True)
        except (binascii.Error, ValueError) as error:
            raise TextDecodeError(f"Invalid base64 for {cls.__name__}: {error}") from error
        return cls(decoded)

    #
    # Structured serialization
    #
    def serialize(self) -> bytes:
        return ssz.encode(bytes(self), self.sedes)

    @classmethod
    def deserialize(cls: Type[TFixedSizeBytes], data: bytes) -> TFixedSizeBytes:
        try:
            decoded = ssz.decode(data, cls.sedes)
        except DeserializationError as error:
            raise LengthMismatch(
                f"Cannot deserialize {cls.__name__} from {len(data)} bytes: {error}"
            ) from error
        return cls(decoded)

    #
    # Comparison
    #
    def __eq__(self, other: Any) -> bool:
        return type(other) is type(self) and bytes.__eq__(self, other)

    def __ne__(self, other: Any) -> bool:
        return not self == other

    __hash__ = bytes.__hash__

    def _validate_comparable(self, other: Any, operator: str) -> None:
        # ordering is only defined within a single byte type
        if type(other) is not type(self):
            raise TypeError(
                f"'{operator}' not supported between instances of "
                f"'{type(self).__name__}' and '{type(other).__name__}'"
            )

    def __lt__(self, other: Any) -> bool:
        self._validate_comparable(other, "<")
        return bytes.__lt__(self, other)

    def __le__(self, other: Any) -> bool:
        self._validate_comparable(other, "<=")
        return bytes.__le__(self, other)

    def __gt__(self, other: Any) -> bool:
        self._validate_comparable(other, ">")
        return bytes.__gt__(self, other)

    def __ge__(self, other: Any) -> bool:
        self._validate_comparable(other, ">=")
        return bytes.__ge__(self, other)

    def __str__(self) -> str:
        return self.to_text()

    def __repr__(self) -> str:
        return f"{type(self).__name__}({encode_hex(self)})"
