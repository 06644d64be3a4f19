import logging

from .. import config
from ..backends import register_backends
from .backend import MathBackend
from .errors import Vector3Error

__all__ = ["BackendRegistry", "default_registry", "get_backend"]

logger = logging.getLogger(__name__)


class BackendRegistry:

    def __init__(self) -> None:
        self.backends: dict[str, type[MathBackend]] = {}

    def register_backend(self, name: str, backend: type[MathBackend]) -> None:
        if name in self.backends:
            logger.warning("math backend %r already registered, ignoring %s", name, backend.__name__)
            return
        self.backends[name] = backend
        logger.debug("registered math backend: %r", name)

    def names(self) -> list[str]:
        return sorted(self.backends)

    def create(self, name: str) -> MathBackend:
        try:
            cls = self.backends[name]
        except KeyError as exc:
            available = ", ".join(self.names())
            raise Vector3Error(f"Unknown math backend {name!r} (available: {available})") from exc
        return cls()


def default_registry() -> BackendRegistry:
    registry = BackendRegistry()
    register_backends(registry)
    return registry


def get_backend(name: str | None = None) -> MathBackend:
    """Instantiate a math backend by name, defaulting to the configured one."""
    if name is None:
        name = config.backend_name()
    backend = default_registry().create(name)
    logger.debug("using math backend: %r", backend)
    return backend
