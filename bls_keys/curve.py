from typing import (
    Type,
)

from eth_utils import (
    ExtendedDebugLogger,
    get_extended_debug_logger,
)

from .backends import (
    DEFAULT_BACKEND,
)
from .backends.base import (
    BaseCurveBackend,
)
from .configs import (
    DEFAULT_CONFIG,
    BLSConfig,
)


class BLSCurve:
    """
    Process-wide selection of the curve backend and of the hash-to-curve
    configuration used by every key, signature and proof type.
    """

    backend: Type[BaseCurveBackend]
    config: BLSConfig
    logger: ExtendedDebugLogger = get_extended_debug_logger("bls_keys.curve.BLSCurve")

    def __init__(self) -> None:
        self.use_default_backend()
        self.use_default_config()

    @classmethod
    def use(cls, backend: Type[BaseCurveBackend]) -> None:
        cls.logger.debug("Using curve backend %s", backend.__name__)
        cls.backend = backend

    @classmethod
    def use_default_backend(cls) -> None:
        cls.use(DEFAULT_BACKEND)

    @classmethod
    def use_config(cls, config: BLSConfig) -> None:
        cls.logger.debug("Using BLS config %r", config)
        cls.config = config

    @classmethod
    def use_default_config(cls) -> None:
        cls.use_config(DEFAULT_CONFIG)


curve = BLSCurve()
