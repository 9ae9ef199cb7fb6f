from typing import Any, NewType

# Opaque point value owned by the active curve backend
Point = Any

Scalar = NewType("Scalar", int)  # in [1, curve_order - 1]

DST = NewType("DST", bytes)  # hash to curve domain separation tag
