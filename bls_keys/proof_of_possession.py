from ssz.sedes import (
    ByteVector,
    bytes96,
)

from bls_keys.abc import (
    ProofOfPossessionAPI,
)
from bls_keys.constants import (
    BLS_PROOF_OF_POSSESSION_AFFINE_BASE64_SIZE,
    BLS_PROOF_OF_POSSESSION_AFFINE_SIZE,
    BLS_PROOF_OF_POSSESSION_COMPRESSED_BASE64_SIZE,
    BLS_PROOF_OF_POSSESSION_COMPRESSED_SIZE,
)
from bls_keys.enums import (
    CurveGroup,
)
from bls_keys.points import (
    BaseAffinePoint,
    BaseCompressedPoint,
    BaseProjectivePoint,
)


class ProjectiveProofOfPossession(BaseProjectivePoint, ProofOfPossessionAPI):
    """
    A BLS proof of possession in a projective point representation.

    Proofs are never aggregated: each one is bound to a single public key.
    """

    group = CurveGroup.G2

    def to_affine(self) -> "AffineProofOfPossession":
        return AffineProofOfPossession(self._to_uncompressed())

    def to_compressed(self) -> "CompressedProofOfPossession":
        return CompressedProofOfPossession(self._to_compressed())


class AffineProofOfPossession(BaseAffinePoint, ProofOfPossessionAPI):
    """
    A serialized proof of possession in an affine point representation
    """

    group = CurveGroup.G2
    size = BLS_PROOF_OF_POSSESSION_AFFINE_SIZE
    max_text_size = BLS_PROOF_OF_POSSESSION_AFFINE_BASE64_SIZE
    sedes = ByteVector(BLS_PROOF_OF_POSSESSION_AFFINE_SIZE)

    def to_projective(self) -> ProjectiveProofOfPossession:
        return ProjectiveProofOfPossession(self._decode())

    def to_compressed(self) -> "CompressedProofOfPossession":
        return CompressedProofOfPossession(self._recompress())


class CompressedProofOfPossession(BaseCompressedPoint, ProofOfPossessionAPI):
    """
    A serialized proof of possession in a compressed point representation
    """

    group = CurveGroup.G2
    size = BLS_PROOF_OF_POSSESSION_COMPRESSED_SIZE
    max_text_size = BLS_PROOF_OF_POSSESSION_COMPRESSED_BASE64_SIZE
    sedes = bytes96

    def to_projective(self) -> ProjectiveProofOfPossession:
        return ProjectiveProofOfPossession(self._decode())

    def to_affine(self) -> AffineProofOfPossession:
        return AffineProofOfPossession(self._decompress())
