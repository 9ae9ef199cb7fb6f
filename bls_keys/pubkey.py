from typing import (
    TYPE_CHECKING,
    ClassVar,
)

from eth_utils import (
    ExtendedDebugLogger,
    get_extended_debug_logger,
)
from ssz.sedes import (
    bytes48,
    bytes96,
)

from bls_keys.abc import (
    ProofOfPossessionAPI,
    PublicKeyAPI,
    SignatureAPI,
)
from bls_keys.constants import (
    BLS_PUBLIC_KEY_AFFINE_BASE64_SIZE,
    BLS_PUBLIC_KEY_AFFINE_SIZE,
    BLS_PUBLIC_KEY_COMPRESSED_BASE64_SIZE,
    BLS_PUBLIC_KEY_COMPRESSED_SIZE,
)
from bls_keys.curve import (
    curve,
)
from bls_keys.enums import (
    CurveGroup,
)
from bls_keys.exceptions import (
    LengthMismatch,
)
from bls_keys.hash import (
    hash_message_to_point,
    hash_pubkey_to_g2,
)
from bls_keys.points import (
    AggregatableMixin,
    BaseAffinePoint,
    BaseCompressedPoint,
    BaseProjectivePoint,
)
from bls_keys.proof_of_possession import (
    ProjectiveProofOfPossession,
)
from bls_keys.signature import (
    ProjectiveSignature,
)

if TYPE_CHECKING:
    from bls_keys.secret_key import SecretKey  # noqa: F401


def verify_signature(
    public_key: PublicKeyAPI, signature: SignatureAPI, message: bytes
) -> bool:
    """
    Verify ``signature`` over ``message`` against ``public_key``, each given
    in any representation.

    Both values are converted to projective form first; a ``ConversionError``
    from either conversion propagates and no pairing is evaluated.
    """
    signature_projective = signature.to_projective()
    pubkey_projective = public_key.to_projective()
    return pubkey_projective.verify_signature(signature_projective, message)


def verify_proof_of_possession(
    public_key: PublicKeyAPI, proof: ProofOfPossessionAPI
) -> bool:
    """
    Verify ``proof`` against ``public_key``, each given in any representation.
    """
    proof_projective = proof.to_projective()
    pubkey_projective = public_key.to_projective()
    return pubkey_projective.verify_proof_of_possession(proof_projective)


class ProjectivePublicKey(AggregatableMixin, BaseProjectivePoint, PublicKeyAPI):
    """
    A BLS public key in a projective point representation.

    Aggregating keys that have not passed ``verify_proof_of_possession`` is
    open to rogue-key attacks; checking proofs first is up to the caller.
    """

    group = CurveGroup.G1
    logger: ClassVar[ExtendedDebugLogger] = get_extended_debug_logger(
        "bls_keys.pubkey.ProjectivePublicKey"
    )

    @classmethod
    def from_secret(cls, secret: "SecretKey") -> "ProjectivePublicKey":
        """
        Construct the public key corresponding to ``secret``.
        """
        return cls(curve.backend.multiply(curve.backend.g1_generator(), secret.scalar))

    @classmethod
    def from_bytes(cls, data: bytes) -> "ProjectivePublicKey":
        """
        Parse the 96-byte affine encoding of a public key.
        """
        if len(data) != BLS_PUBLIC_KEY_AFFINE_SIZE:
            raise LengthMismatch(
                f"Public key bytes must be {BLS_PUBLIC_KEY_AFFINE_SIZE} bytes, got {len(data)}"
            )
        return AffinePublicKey(data).to_projective()

    def to_affine(self) -> "AffinePublicKey":
        return AffinePublicKey(self._to_uncompressed())

    def to_compressed(self) -> "CompressedPublicKey":
        return CompressedPublicKey(self._to_compressed())

    #
    # Verification
    #
    def verify_signature(self, signature: ProjectiveSignature, message: bytes) -> bool:
        """
        Check ``e(pubkey, H(message)) == e(G1, signature)``.
        """
        hashed_message = hash_message_to_point(message)
        result = curve.backend.pairings_equal(
            self.point,
            hashed_message,
            curve.backend.g1_generator(),
            signature.point,
        )
        self.logger.debug2("Signature verification result: %s", result)
        return result

    def verify_proof_of_possession(self, proof: ProjectiveProofOfPossession) -> bool:
        """
        Check ``e(pubkey, H_pop(pubkey)) == e(G1, proof)``.
        """
        hashed_pubkey = hash_pubkey_to_g2(self)
        result = curve.backend.pairings_equal(
            self.point,
            hashed_pubkey,
            curve.backend.g1_generator(),
            proof.point,
        )
        self.logger.debug2("Proof of possession verification result: %s", result)
        return result


class AffinePublicKey(BaseAffinePoint, PublicKeyAPI):
    """
    A serialized BLS public key in an affine point representation
    """

    group = CurveGroup.G1
    size = BLS_PUBLIC_KEY_AFFINE_SIZE
    max_text_size = BLS_PUBLIC_KEY_AFFINE_BASE64_SIZE
    sedes = bytes96

    def to_projective(self) -> ProjectivePublicKey:
        return ProjectivePublicKey(self._decode())

    def to_compressed(self) -> "CompressedPublicKey":
        return CompressedPublicKey(self._recompress())


class CompressedPublicKey(BaseCompressedPoint, PublicKeyAPI):
    """
    A serialized BLS public key in a compressed point representation
    """

    group = CurveGroup.G1
    size = BLS_PUBLIC_KEY_COMPRESSED_SIZE
    max_text_size = BLS_PUBLIC_KEY_COMPRESSED_BASE64_SIZE
    sedes = bytes48

    def to_projective(self) -> ProjectivePublicKey:
        return ProjectivePublicKey(self._decode())

    def to_affine(self) -> AffinePublicKey:
        return AffinePublicKey(self._decompress())
