import struct
from dataclasses import dataclass
from numbers import Real
from typing import Any, Iterator, Mapping

from .backend import MathBackend
from .errors import LengthMismatch
from .registry import get_backend
from .utils import clamp, divide

__all__ = ["Vector3", "BYTE_FORMAT", "BYTE_SIZE"]

# x, y, z as big-endian IEEE-754 binary64
BYTE_FORMAT: str = ">3d"
BYTE_SIZE: int = struct.calcsize(BYTE_FORMAT)

RADIANS_TO_DEGREES: float = 180.0 / 3.141592653589793

# Bound once at import time from configuration.
math_backend: MathBackend = get_backend()


@dataclass(frozen=True, eq=False, slots=True)
class Vector3:
    """Immutable three-component double-precision vector.

    Equality is exact componentwise float equality, so a vector holding a
    NaN never equals anything. Division by zero and operations on the zero
    vector produce IEEE-754 infinities or NaN rather than raising.

    The named methods define every operation; ``+``, ``-``, ``*`` and ``/``
    are shorthands for ``add``, ``subtract``, ``scale`` and ``divide``.
    Multiplying two vectors with ``*`` is not supported: use ``dot`` or
    ``entrywise_multiply``.
    """

    x: float = 0.0
    y: float = 0.0
    z: float = 0.0

    def __post_init__(self) -> None:
        object.__setattr__(self, "x", float(self.x))
        object.__setattr__(self, "y", float(self.y))
        object.__setattr__(self, "z", float(self.z))

    @classmethod
    def new(cls, x: float, y: float, z: float) -> "Vector3":
        return cls(x, y, z)

    @classmethod
    def zero(cls) -> "Vector3":
        return cls(0.0, 0.0, 0.0)

    @classmethod
    def default(cls) -> "Vector3":
        return cls.zero()

    # Representation

    def __iter__(self) -> Iterator[float]:
        return iter((self.x, self.y, self.z))

    def __repr__(self) -> str:
        return f"Vector3(x={self.x!r}, y={self.y!r}, z={self.z!r})"

    def to_tuple(self) -> tuple[float, float, float]:
        return self.x, self.y, self.z

    def to_dict(self) -> dict[str, float]:
        return {"x": self.x, "y": self.y, "z": self.z}

    @classmethod
    def from_dict(cls, data: Mapping[str, Any]) -> "Vector3":
        return cls(data["x"], data["y"], data["z"])

    def to_bytes(self) -> bytes:
        """Return the 24 byte big-endian encoding, in order x, y, z."""
        return struct.pack(BYTE_FORMAT, self.x, self.y, self.z)

    @classmethod
    def from_bytes(cls, data: bytes | bytearray | memoryview) -> "Vector3":
        """Decode a vector written by :meth:`to_bytes`.

        Raises :class:`LengthMismatch` unless data is exactly 24 bytes long.
        """
        size = memoryview(data).nbytes
        if size != BYTE_SIZE:
            raise LengthMismatch(BYTE_SIZE, size)
        x, y, z = struct.unpack(BYTE_FORMAT, data)
        return cls(x, y, z)

    # Equality

    def __eq__(self, other: object) -> bool:
        if not isinstance(other, Vector3):
            return NotImplemented
        return self.x == other.x and self.y == other.y and self.z == other.z

    def __hash__(self) -> int:
        return hash((self.x, self.y, self.z))

    # Arithmetic

    def add(self, other: "Vector3") -> "Vector3":
        return Vector3(self.x + other.x, self.y + other.y, self.z + other.z)

    def subtract(self, other: "Vector3") -> "Vector3":
        return Vector3(self.x - other.x, self.y - other.y, self.z - other.z)

    def negate(self) -> "Vector3":
        return Vector3(-self.x, -self.y, -self.z)

    def scale(self, s: float) -> "Vector3":
        s = float(s)
        return Vector3(self.x * s, self.y * s, self.z * s)

    def divide(self, s: float) -> "Vector3":
        return self.scale(divide(1.0, float(s)))

    def entrywise_multiply(self, other: "Vector3") -> "Vector3":
        """Hadamard product, multiplying matching components."""
        return Vector3(self.x * other.x, self.y * other.y, self.z * other.z)

    def dot(self, other: "Vector3") -> float:
        return self.x * other.x + self.y * other.y + self.z * other.z

    def __add__(self, other: object) -> "Vector3":
        if not isinstance(other, Vector3):
            return NotImplemented
        return self.add(other)

    def __sub__(self, other: object) -> "Vector3":
        if not isinstance(other, Vector3):
            return NotImplemented
        return self.subtract(other)

    def __neg__(self) -> "Vector3":
        return self.negate()

    def __mul__(self, other: object) -> "Vector3":
        if not isinstance(other, Real):
            return NotImplemented
        return self.scale(other)

    __rmul__ = __mul__

    def __truediv__(self, other: object) -> "Vector3":
        if not isinstance(other, Real):
            return NotImplemented
        return self.divide(other)

    # Geometry

    def magnitude(self) -> float:
        return math_backend.sqrt(self.dot(self))

    def sqrt_magnitude(self) -> float:
        """Squared length, the magnitude without the square root."""
        return self.dot(self)

    def normalize(self) -> "Vector3":
        """Return the unit vector with the same direction.

        The zero vector has no direction, its normal has NaN components.
        """
        return self.divide(self.magnitude())

    def powf(self, p: float) -> "Vector3":
        return Vector3(
            math_backend.pow(self.x, p),
            math_backend.pow(self.y, p),
            math_backend.pow(self.z, p),
        )

    def angle_radians(self, other: "Vector3") -> float:
        cosine = divide(self.dot(other), self.magnitude() * other.magnitude())
        # rounding can push the cosine of (anti)parallel vectors past +-1
        return math_backend.acos(clamp(cosine, -1.0, 1.0))

    def angle_degrees(self, other: "Vector3") -> float:
        return self.angle_radians(other) * RADIANS_TO_DEGREES

    def cross(self, other: "Vector3") -> "Vector3":
        return Vector3(
            self.y * other.z - self.z * other.y,
            self.z * other.x - self.x * other.z,
            self.x * other.y - self.y * other.x,
        )

    def project(self, onto: "Vector3") -> "Vector3":
        """Component of this vector parallel to onto."""
        return onto.scale(divide(self.dot(onto), onto.dot(onto)))

    def reject(self, from_: "Vector3") -> "Vector3":
        """Component of this vector orthogonal to from_."""
        return self.subtract(self.project(from_))

    def floor(self) -> "Vector3":
        return Vector3(math_backend.floor(self.x), math_backend.floor(self.y), math_backend.floor(self.z))

    def ceil(self) -> "Vector3":
        return Vector3(math_backend.ceil(self.x), math_backend.ceil(self.y), math_backend.ceil(self.z))
