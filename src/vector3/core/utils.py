import struct

__all__ = [
    "INF",
    "NAN",
    "float_to_bits",
    "bits_to_float",
    "same_bits",
    "is_nan",
    "is_finite",
    "is_odd_integer",
    "sign_bit",
    "copysign",
    "divide",
    "clamp",
]

INF: float = float("inf")
NAN: float = float("nan")

SIGN_MASK: int = 1 << 63


def float_to_bits(value: float) -> int:
    """Return the IEEE-754 binary64 bit pattern of value as an integer."""
    return struct.unpack(">Q", struct.pack(">d", value))[0]


def bits_to_float(bits: int) -> float:
    return struct.unpack(">d", struct.pack(">Q", bits))[0]


def same_bits(a: float, b: float) -> bool:
    """Compare two floats by bit pattern, NaN payloads and signed zeros included."""
    return float_to_bits(a) == float_to_bits(b)


def is_nan(value: float) -> bool:
    return value != value


def is_finite(value: float) -> bool:
    # inf - inf and nan - nan are both NaN
    return value - value == 0.0


def is_odd_integer(value: float) -> bool:
    return is_finite(value) and value % 2.0 == 1.0


def sign_bit(value: float) -> bool:
    return bool(float_to_bits(value) & SIGN_MASK)


def copysign(magnitude: float, sign: float) -> float:
    bits = (float_to_bits(magnitude) & ~SIGN_MASK) | (float_to_bits(sign) & SIGN_MASK)
    return bits_to_float(bits)


def divide(a: float, b: float) -> float:
    """Divide a by b, returning the IEEE-754 result for a zero divisor.

    Python raises ZeroDivisionError for ``x / 0.0``; here the quotient is
    NaN for ``0/0`` and ``nan/0``, otherwise an infinity whose sign is the
    product of the operand signs.
    """
    if b == 0.0:
        if is_nan(a) or a == 0.0:
            return NAN
        return -INF if sign_bit(a) != sign_bit(b) else INF
    return a / b


def clamp(value: float, lower: float, upper: float) -> float:
    """Clamp value to [lower, upper], NaN passes through unchanged."""
    if value < lower:
        return lower
    if value > upper:
        return upper
    return value
