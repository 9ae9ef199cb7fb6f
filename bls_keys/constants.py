# Size of a BLS public key in a compressed point representation
BLS_PUBLIC_KEY_COMPRESSED_SIZE = 48
# Maximum size of a BLS public key in a compressed point representation in base64
BLS_PUBLIC_KEY_COMPRESSED_BASE64_SIZE = 128

# Size of a BLS public key in an affine point representation
BLS_PUBLIC_KEY_AFFINE_SIZE = 96
# Maximum size of a BLS public key in an affine point representation in base64
BLS_PUBLIC_KEY_AFFINE_BASE64_SIZE = 256

# Signatures and proofs of possession live in G2
BLS_SIGNATURE_COMPRESSED_SIZE = 96
BLS_SIGNATURE_COMPRESSED_BASE64_SIZE = 256
BLS_SIGNATURE_AFFINE_SIZE = 192
BLS_SIGNATURE_AFFINE_BASE64_SIZE = 512

BLS_PROOF_OF_POSSESSION_COMPRESSED_SIZE = BLS_SIGNATURE_COMPRESSED_SIZE
BLS_PROOF_OF_POSSESSION_COMPRESSED_BASE64_SIZE = BLS_SIGNATURE_COMPRESSED_BASE64_SIZE
BLS_PROOF_OF_POSSESSION_AFFINE_SIZE = BLS_SIGNATURE_AFFINE_SIZE
BLS_PROOF_OF_POSSESSION_AFFINE_BASE64_SIZE = BLS_SIGNATURE_AFFINE_BASE64_SIZE

# Domain separation tags of the proof-of-possession ciphersuite
MESSAGE_DST = b"BLS_SIG_BLS12381G2_XMD:SHA-256_SSWU_RO_POP_"
POP_DST = b"BLS_POP_BLS12381G2_XMD:SHA-256_SSWU_RO_POP_"

# Flag bits in the most significant byte of a serialized point
COMPRESSION_FLAG = 0x80
INFINITY_FLAG = 0x40
SIGN_FLAG = 0x20
FLAGS_MASK = COMPRESSION_FLAG | INFINITY_FLAG | SIGN_FLAG
