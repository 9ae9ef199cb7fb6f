from ssz.sedes import (
    ByteVector,
    bytes96,
)

from bls_keys.abc import (
    SignatureAPI,
)
from bls_keys.constants import (
    BLS_SIGNATURE_AFFINE_BASE64_SIZE,
    BLS_SIGNATURE_AFFINE_SIZE,
    BLS_SIGNATURE_COMPRESSED_BASE64_SIZE,
    BLS_SIGNATURE_COMPRESSED_SIZE,
)
from bls_keys.enums import (
    CurveGroup,
)
from bls_keys.points import (
    AggregatableMixin,
    BaseAffinePoint,
    BaseCompressedPoint,
    BaseProjectivePoint,
)


class ProjectiveSignature(AggregatableMixin, BaseProjectivePoint, SignatureAPI):
    """
    A BLS signature in a projective point representation
    """

    group = CurveGroup.G2

    def to_affine(self) -> "AffineSignature":
        return AffineSignature(self._to_uncompressed())

    def to_compressed(self) -> "CompressedSignature":
        return CompressedSignature(self._to_compressed())


class AffineSignature(BaseAffinePoint, SignatureAPI):
    """
    A serialized BLS signature in an affine point representation
    """

    group = CurveGroup.G2
    size = BLS_SIGNATURE_AFFINE_SIZE
    max_text_size = BLS_SIGNATURE_AFFINE_BASE64_SIZE
    sedes = ByteVector(BLS_SIGNATURE_AFFINE_SIZE)

    def to_projective(self) -> ProjectiveSignature:
        return ProjectiveSignature(self._decode())

    def to_compressed(self) -> "CompressedSignature":
        return CompressedSignature(self._recompress())


class CompressedSignature(BaseCompressedPoint, SignatureAPI):
    """
    A serialized BLS signature in a compressed point representation
    """

    group = CurveGroup.G2
    size = BLS_SIGNATURE_COMPRESSED_SIZE
    max_text_size = BLS_SIGNATURE_COMPRESSED_BASE64_SIZE
    sedes = bytes96

    def to_projective(self) -> ProjectiveSignature:
        return ProjectiveSignature(self._decode())

    def to_affine(self) -> AffineSignature:
        return AffineSignature(self._decompress())
