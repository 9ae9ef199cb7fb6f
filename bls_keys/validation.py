from bls_keys.curve import (
    curve,
)


def validate_secret_scalar(scalar: int) -> None:
    curve_order = curve.backend.curve_order
    if scalar <= 0 or scalar >= curve_order:
        raise ValueError(
            f"Invalid secret key: Expect integer between 1 and {curve_order - 1}, got {scalar}"
        )
