from abc import ABC, abstractmethod

__all__ = ["MathBackend"]


class MathBackend(ABC):
    """Provider of the elementary functions a vector needs.

    Implementations follow IEEE-754 semantics: arguments outside a
    function's domain give NaN and results out of range give an infinity,
    nothing is raised.
    """

    name: str = ""

    @abstractmethod
    def sqrt(self, x: float) -> float:
        ...

    @abstractmethod
    def pow(self, x: float, p: float) -> float:
        ...

    @abstractmethod
    def acos(self, x: float) -> float:
        ...

    @abstractmethod
    def floor(self, x: float) -> float:
        ...

    @abstractmethod
    def ceil(self, x: float) -> float:
        ...

    def __repr__(self) -> str:
        return f"{type(self).__name__}(name={self.name!r})"
