# Built-in math backends

from .host import HostMathBackend
from .software import SoftwareMathBackend

__all__ = ["HostMathBackend", "SoftwareMathBackend", "register_backends"]


def register_backends(registry) -> None:
    registry.register_backend(HostMathBackend.name, HostMathBackend)
    registry.register_backend(SoftwareMathBackend.name, SoftwareMathBackend)
