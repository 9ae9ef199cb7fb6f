from bls_keys.curve import (
    curve,
)
from bls_keys.hash import (
    hash_message_to_point,
    hash_pubkey_to_g2,
)
from bls_keys.proof_of_possession import (
    ProjectiveProofOfPossession,
)
from bls_keys.pubkey import (
    ProjectivePublicKey,
)
from bls_keys.signature import (
    ProjectiveSignature,
)
from bls_keys.typing import (
    Scalar,
)
from bls_keys.validation import (
    validate_secret_scalar,
)


class SecretKey:
    """
    A BLS secret scalar. Generating and storing secret keys is left to the
    caller; this only derives public values from an existing scalar.
    """

    def __init__(self, scalar: int) -> None:
        validate_secret_scalar(scalar)
        self.scalar = Scalar(scalar)

    def public_key(self) -> ProjectivePublicKey:
        return ProjectivePublicKey.from_secret(self)

    def sign(self, message: bytes) -> ProjectiveSignature:
        hashed_message = hash_message_to_point(message)
        return ProjectiveSignature(curve.backend.multiply(hashed_message, self.scalar))

    def proof_of_possession(self) -> ProjectiveProofOfPossession:
        hashed_pubkey = hash_pubkey_to_g2(self.public_key())
        return ProjectiveProofOfPossession(curve.backend.multiply(hashed_pubkey, self.scalar))

    def __repr__(self) -> str:
        return f"{type(self).__name__}(<redacted>)"
