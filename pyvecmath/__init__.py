# Basic package metadata.

__version__ = "0.1.0"

from .exceptions import (
    VectorError, VectorDomainError, DegenerateVectorError, ShapeMismatchError
)
from .types import (
    LogLevel, ZeroVectorPolicy,
    Vector2, ImmutableVector2,
    Vector3, ImmutableVector3,
    Vector4, ImmutableVector4,
)
from .settings import Settings

__all__ = [
    "__version__",
    "VectorError", "VectorDomainError", "DegenerateVectorError", "ShapeMismatchError",
    "LogLevel", "ZeroVectorPolicy", "Settings",
    "Vector2", "ImmutableVector2",
    "Vector3", "ImmutableVector3",
    "Vector4", "ImmutableVector4",
]
