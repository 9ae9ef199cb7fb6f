from typing import Tuple, Type  # noqa: F401

from .base import BaseCurveBackend  # noqa: F401
from .py_ecc import PyECCBackend

AVAILABLE_BACKENDS = (
    PyECCBackend,
)  # type: Tuple[Type[BaseCurveBackend], ...]


DEFAULT_BACKEND = PyECCBackend  # type: Type[BaseCurveBackend]
