import os

__all__ = ["BACKEND_ENV_VAR", "DEFAULT_BACKEND", "backend_name"]

BACKEND_ENV_VAR: str = "VECTOR3_MATH_BACKEND"
DEFAULT_BACKEND: str = "host"


def backend_name() -> str:
    """Return the configured math backend name, read from the environment."""
    name = os.environ.get(BACKEND_ENV_VAR, "").strip().lower()
    return name or DEFAULT_BACKEND
