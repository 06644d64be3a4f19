__version__ = "1.0.0"

from .core.backend import MathBackend
from .core.errors import LengthMismatch, Vector3Error
from .core.registry import get_backend
from .core.vector import Vector3

__all__ = [
    "__version__",
    "LengthMismatch",
    "MathBackend",
    "Vector3",
    "Vector3Error",
    "get_backend",
]
