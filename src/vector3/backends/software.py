"""Self-contained math backend.

Everything here is built from float arithmetic and bit manipulation, so it
works where no platform math library is available. ``sqrt`` is correctly
rounded. ``acos`` agrees with the host backend to within a few units in
the last place; ``pow`` through ``exp(p * log(x))`` loses precision proportional
to the magnitude of ``p * log(x)``.
"""

from ..core.backend import MathBackend
from ..core.utils import (
    INF,
    NAN,
    bits_to_float,
    copysign,
    divide,
    float_to_bits,
    is_finite,
    is_nan,
    is_odd_integer,
)

__all__ = ["SoftwareMathBackend"]

PI: float = 3.141592653589793
HALF_PI: float = 1.5707963267948966
SQRT2: float = 1.4142135623730951

# ln(2) split so that k * LN2_HI is exact for |k| < 2**11
LN2: float = 0.6931471805599453
LN2_HI: float = 6.93147180369123816490e-01
LN2_LO: float = 1.90821492927058770002e-10

TWO_52: float = float.fromhex("0x1p52")
TWO_54: float = float.fromhex("0x1p54")
TWO_108: float = float.fromhex("0x1p108")
TWO_MINUS_54: float = float.fromhex("0x1p-54")
MIN_NORMAL: float = float.fromhex("0x1p-1022")

EXP_OVERFLOW: float = 709.782712893384
EXP_UNDERFLOW: float = -745.1332191019412

EXPONENT_BIAS: int = 1023
FRACTION_MASK: int = (1 << 52) - 1

NEWTON_STEPS: int = 6
MAX_SQUARING_POWER: int = 64


def scale_by_power_of_two(value: float, k: int) -> float:
    """Return value * 2**k without relying on ldexp."""
    while k > 1023:
        value *= bits_to_float((1023 + EXPONENT_BIAS) << 52)
        k -= 1023
    while k < -1022:
        value *= MIN_NORMAL
        k += 1022
    return value * bits_to_float((k + EXPONENT_BIAS) << 52)


def midpoint_squared_exceeds(low: float, high: float, x: float) -> bool:
    """Compare ((low + high) / 2) ** 2 against x exactly, with integer ratios."""
    a, b = low.as_integer_ratio()
    c, d = high.as_integer_ratio()
    p, q = x.as_integer_ratio()
    return (a * d + c * b) ** 2 * q > 4 * (b * d) ** 2 * p


def integer_power(x: float, n: int) -> float:
    """Exponentiation by squaring for a non-negative integer n."""
    result = 1.0
    while n:
        if n & 1:
            result *= x
        x *= x
        n >>= 1
    return result


class SoftwareMathBackend(MathBackend):

    name = "software"

    def sqrt(self, x: float) -> float:
        # sqrt(-0.0) is -0.0
        if is_nan(x) or x == INF or x == 0.0:
            return x
        if x < 0.0:
            return NAN
        if x < MIN_NORMAL:
            return self.sqrt(x * TWO_108) * TWO_MINUS_54
        # halve the biased exponent for a first guess within a few percent
        bits = float_to_bits(x)
        y = bits_to_float((bits >> 1) + (EXPONENT_BIAS << 51))
        for _ in range(NEWTON_STEPS):
            y = 0.5 * (y + x / y)
        # Newton leaves y within an ulp, step to the correctly rounded root
        bits = float_to_bits(y)
        while not midpoint_squared_exceeds(y, bits_to_float(bits + 1), x):
            bits += 1
            y = bits_to_float(bits)
        while midpoint_squared_exceeds(bits_to_float(bits - 1), y, x):
            bits -= 1
            y = bits_to_float(bits)
        return y

    def atan(self, x: float) -> float:
        if is_nan(x):
            return x
        negative = x < 0.0
        x = -x if negative else x
        inverted = x > 1.0
        if inverted:
            x = 1.0 / x
        # atan(x) = 2 * atan(x / (1 + sqrt(1 + x**2))), applied twice
        x = x / (1.0 + self.sqrt(1.0 + x * x))
        x = x / (1.0 + self.sqrt(1.0 + x * x))
        x2 = x * x
        term = x
        total = x
        n = 1
        while True:
            term *= -x2
            n += 2
            delta = term / n
            if total + delta == total:
                break
            total += delta
        result = 4.0 * total
        if inverted:
            result = HALF_PI - result
        return -result if negative else result

    def acos(self, x: float) -> float:
        if is_nan(x) or x > 1.0 or x < -1.0:
            return NAN
        if x == 1.0:
            return 0.0
        if x == -1.0:
            return PI
        return 2.0 * self.atan(self.sqrt((1.0 - x) / (1.0 + x)))

    def log(self, x: float) -> float:
        """Natural logarithm of a positive, finite x."""
        exponent = 0
        if x < MIN_NORMAL:
            x *= TWO_54
            exponent -= 54
        bits = float_to_bits(x)
        exponent += ((bits >> 52) & 0x7FF) - EXPONENT_BIAS
        m = bits_to_float((bits & FRACTION_MASK) | (EXPONENT_BIAS << 52))
        if m > SQRT2:
            m *= 0.5
            exponent += 1
        # log(m) = 2 * atanh((m - 1) / (m + 1))
        s = (m - 1.0) / (m + 1.0)
        s2 = s * s
        term = s
        total = s
        n = 1
        while True:
            term *= s2
            n += 2
            delta = term / n
            if total + delta == total:
                break
            total += delta
        return exponent * LN2_HI + (exponent * LN2_LO + 2.0 * total)

    def exp(self, y: float) -> float:
        if is_nan(y):
            return y
        if y > EXP_OVERFLOW:
            return INF
        if y < EXP_UNDERFLOW:
            return 0.0
        k = int(round(y / LN2))
        r = (y - k * LN2_HI) - k * LN2_LO
        term = 1.0
        total = 1.0
        n = 0
        while True:
            n += 1
            term *= r / n
            if total + term == total:
                break
            total += term
        return scale_by_power_of_two(total, k)

    def pow(self, x: float, p: float) -> float:
        if p == 0.0 or x == 1.0:
            return 1.0
        if is_nan(x) or is_nan(p):
            return NAN
        if not is_finite(p):
            magnitude = -x if x < 0.0 else x
            if magnitude == 1.0:
                return 1.0
            return INF if (magnitude > 1.0) == (p > 0.0) else 0.0
        odd = is_odd_integer(p)
        if x == 0.0:
            if p < 0.0:
                return copysign(INF, x) if odd else INF
            return x if odd else 0.0
        if not is_finite(x):
            if x > 0.0:
                return INF if p > 0.0 else 0.0
            if p > 0.0:
                return -INF if odd else INF
            return -0.0 if odd else 0.0

        integral = float(p).is_integer()
        negative = x < 0.0
        if negative:
            if not integral:
                return NAN
            x = -x
        if integral and -MAX_SQUARING_POWER <= p <= MAX_SQUARING_POWER:
            n = int(p)
            result = integer_power(x, n) if n > 0 else divide(1.0, integer_power(x, -n))
        else:
            result = self.exp(p * self.log(x))
        return -result if negative and odd else result

    def floor(self, x: float) -> float:
        if not is_finite(x) or x >= TWO_52 or x <= -TWO_52:
            return x
        t = float(int(x))
        if t > x:
            t -= 1.0
        return copysign(t, x)

    def ceil(self, x: float) -> float:
        if not is_finite(x) or x >= TWO_52 or x <= -TWO_52:
            return x
        t = float(int(x))
        if t < x:
            t += 1.0
        return copysign(t, x)
