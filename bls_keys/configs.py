from typing import NamedTuple

from bls_keys.constants import (
    MESSAGE_DST,
    POP_DST,
)

BLSConfig = NamedTuple(
    "BLSConfig",
    (
        # Hash to curve
        ("MESSAGE_DST", bytes),
        ("POP_DST", bytes),
    ),
)


DEFAULT_CONFIG = BLSConfig(
    MESSAGE_DST=MESSAGE_DST,
    POP_DST=POP_DST,
)
