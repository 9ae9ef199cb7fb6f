from bls_keys.constants import (  # noqa: F401
    BLS_PUBLIC_KEY_AFFINE_BASE64_SIZE,
    BLS_PUBLIC_KEY_AFFINE_SIZE,
    BLS_PUBLIC_KEY_COMPRESSED_BASE64_SIZE,
    BLS_PUBLIC_KEY_COMPRESSED_SIZE,
)
from bls_keys.curve import (  # noqa: F401
    curve,
)
from bls_keys.exceptions import (  # noqa: F401
    BLSError,
    ConversionError,
    EmptyAggregationError,
    LengthMismatch,
    ParseError,
    PointDecodeError,
    TextDecodeError,
)
from bls_keys.proof_of_possession import (  # noqa: F401
    AffineProofOfPossession,
    CompressedProofOfPossession,
    ProjectiveProofOfPossession,
)
from bls_keys.pubkey import (  # noqa: F401
    AffinePublicKey,
    CompressedPublicKey,
    ProjectivePublicKey,
    verify_proof_of_possession,
    verify_signature,
)
from bls_keys.secret_key import (  # noqa: F401
    SecretKey,
)
from bls_keys.signature import (  # noqa: F401
    AffineSignature,
    CompressedSignature,
    ProjectiveSignature,
)
