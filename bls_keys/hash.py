from typing import (
    TYPE_CHECKING,
)

from eth_typing import (
    BLSPubkey,
)

from bls_keys.curve import (
    curve,
)
from bls_keys.typing import (
    DST,
    Point,
)

if TYPE_CHECKING:
    from bls_keys.pubkey import ProjectivePublicKey  # noqa: F401


def hash_message_to_point(message: bytes) -> Point:
    return curve.backend.hash_to_g2(message, DST(curve.config.MESSAGE_DST))


def hash_pubkey_to_g2(public_key: "ProjectivePublicKey") -> Point:
    """
    Hash the compressed encoding of ``public_key`` to G2 under the
    proof-of-possession tag, so a proof is bound to exactly one key.
    """
    pubkey_bytes = BLSPubkey(bytes(public_key.to_compressed()))
    return curve.backend.hash_to_g2(pubkey_bytes, DST(curve.config.POP_DST))
