import math

from ..core.backend import MathBackend
from ..core.utils import is_odd_integer

__all__ = ["HostMathBackend"]


class HostMathBackend(MathBackend):
    """Math backend delegating to the platform's ``math`` module.

    ``math`` raises where C's libm returns NaN or an infinity, those
    exceptions are mapped back to the IEEE-754 results.
    """

    name = "host"

    def sqrt(self, x: float) -> float:
        try:
            return math.sqrt(x)
        except ValueError:
            return math.nan

    def pow(self, x: float, p: float) -> float:
        try:
            return math.pow(x, p)
        except ValueError:
            # pole error: zero raised to a negative power
            if x == 0.0:
                if is_odd_integer(p):
                    return math.copysign(math.inf, x)
                return math.inf
            return math.nan
        except OverflowError:
            if x < 0.0 and is_odd_integer(p):
                return -math.inf
            return math.inf

    def acos(self, x: float) -> float:
        try:
            return math.acos(x)
        except ValueError:
            return math.nan

    def floor(self, x: float) -> float:
        if not math.isfinite(x):
            return x
        return math.copysign(float(math.floor(x)), x)

    def ceil(self, x: float) -> float:
        if not math.isfinite(x):
            return x
        return math.copysign(float(math.ceil(x)), x)
