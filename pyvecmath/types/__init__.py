# Main __init__.py for the types sub-package

from .enums import LogLevel, ZeroVectorPolicy # Must load before the vector modules, settings depends on it
from .vector2 import Vector2, ImmutableVector2
from .vector3 import Vector3, ImmutableVector3
from .vector4 import Vector4, ImmutableVector4


__all__ = [
    "LogLevel", "ZeroVectorPolicy",
    "Vector2", "ImmutableVector2",
    "Vector3", "ImmutableVector3",
    "Vector4", "ImmutableVector4",
]
