from abc import (
    ABC,
    abstractmethod,
)
from typing import (
    TYPE_CHECKING,
)

if TYPE_CHECKING:
    from bls_keys.proof_of_possession import ProjectiveProofOfPossession  # noqa: F401
    from bls_keys.pubkey import ProjectivePublicKey  # noqa: F401
    from bls_keys.signature import ProjectiveSignature  # noqa: F401


class PublicKeyAPI(ABC):
    """
    A public key in any representation.
    """

    @abstractmethod
    def to_projective(self) -> "ProjectivePublicKey":
        """
        Return the key as a projective point. Byte representations raise a
        ``ConversionError`` if they do not decode to a valid point.
        """
        ...


class SignatureAPI(ABC):
    """
    A signature in any representation.
    """

    @abstractmethod
    def to_projective(self) -> "ProjectiveSignature":
        ...


class ProofOfPossessionAPI(ABC):
    """
    A proof of possession in any representation.
    """

    @abstractmethod
    def to_projective(self) -> "ProjectiveProofOfPossession":
        ...
