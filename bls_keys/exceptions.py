from eth_utils import (
    ValidationError,
)


class BLSError(Exception):
    """
    Base class for all bls-keys errors.
    """

    pass


class ConversionError(BLSError, ValidationError):
    """
    Raised when a value cannot be converted from one key, signature or proof
    representation into another.
    """

    pass


class ParseError(ConversionError):
    """
    Raised when raw bytes or text cannot be parsed into a fixed-size buffer.
    """

    pass


class LengthMismatch(ParseError):
    """
    Raised when a byte buffer does not have the exact size of the target type.
    """

    pass


class TextDecodeError(ParseError):
    """
    Raised when text is not valid standard base64 or is longer than the
    maximum text size of the target type.
    """

    pass


class PointDecodeError(ConversionError):
    """
    Raised when bytes do not encode a valid curve point, or encode a point
    outside the prime-order subgroup.
    """

    pass


class EmptyAggregationError(BLSError):
    """
    Raised when aggregation is requested over zero points.
    """

    pass
