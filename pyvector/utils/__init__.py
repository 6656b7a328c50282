# This file marks pyvector.utils as a Python package.

from .helpers import (
    NAN,
    INF,
    bytes_to_int32,
    bytes_to_float,
    is_number,
    clamp,
    lerp,
    ieee_divide,
)

__all__ = [
    # Constants
    "NAN", "INF",
    # Byte/Numeric Conversion
    "bytes_to_int32", "bytes_to_float",
    # Scalar Utilities
    "is_number", "clamp", "lerp", "ieee_divide",
]
