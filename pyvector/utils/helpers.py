import math
import numbers
import struct

# Constants
NAN = float("nan")
INF = float("inf")

# --- Byte/Numeric Conversion Functions (Little Endian default) ---

def bytes_to_int32(data: bytes, offset: int = 0) -> int:
    """Converts 4 bytes (little endian) to a signed 32-bit integer."""
    return struct.unpack_from('<i', data, offset)[0]

def bytes_to_float(data: bytes, offset: int = 0) -> float:
    """Converts 4 bytes (little endian) to a single-precision float."""
    return struct.unpack_from('<f', data, offset)[0]


# --- Scalar Utilities ---

def is_number(value) -> bool:
    """True for real numbers (int, float, Fraction, ...). Booleans are rejected."""
    return isinstance(value, numbers.Real) and not isinstance(value, bool)

def clamp(value, min_val, max_val):
    """
    Clamps a value to the range [min_val, max_val].
    A NaN value is returned unchanged rather than snapped to a bound.
    """
    return min(max(value, min_val), max_val)

def lerp(start, end, amount):
    """
    Linear interpolation between start and end by amount. Amount is not clamped.
    The endpoints are returned unchanged at amount 0 and 1.
    """
    if amount == 1:
        return end
    if amount == 0:
        return start
    return amount * (end - start) + start

def ieee_divide(numerator: float, denominator: float) -> float:
    """
    Divides following IEEE 754 rules instead of raising ZeroDivisionError:
    x/0 is +/-inf with the combined sign and 0/0 (or NaN/0) is NaN.
    """
    try:
        return numerator / denominator
    except ZeroDivisionError:
        if numerator == 0 or math.isnan(numerator):
            return NAN
        return math.copysign(INF, numerator) * math.copysign(1.0, denominator)
