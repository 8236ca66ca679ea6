"""
Exception types raised by the vector classes.

Everything derives from :class:`VectorError` so callers can catch the whole
family at once. The concrete errors also subclass :class:`ValueError`, which is
what the vector types raised before these classes existed.
"""


class VectorError(Exception):
    """Base class for all pyvecmath errors."""


class VectorDomainError(VectorError, ValueError):
    """An argument lies outside the domain of the operation (e.g. Minkowski p <= 0)."""


class DegenerateVectorError(VectorDomainError):
    """A zero-length vector was given to an operation that needs a direction."""

    def __init__(self, operation: str, vector=None):
        self.operation = operation
        self.vector = vector
        if vector is None:
            message = f"Cannot {operation}: zero-length vector."
        else:
            message = f"Cannot {operation}: {vector!r} has zero length."
        super().__init__(message)


class ShapeMismatchError(VectorError, ValueError):
    """A sequence with the wrong number of elements was given to a bulk setter."""

    def __init__(self, type_name: str, expected: int, got: int):
        self.expected = expected
        self.got = got
        super().__init__(f"{type_name} needs exactly {expected} components, got {got}.")
