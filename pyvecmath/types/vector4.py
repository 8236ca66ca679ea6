import math
import random as _random
import dataclasses

from pyvecmath.exceptions import DegenerateVectorError, ShapeMismatchError
from pyvecmath.settings import Settings
from pyvecmath.utils import clamp_unit, cosine_between, minkowski, mutator, safe_acos, sampler


@dataclasses.dataclass(slots=True)
class Vector4:
    """A mutable 4D vector with x, y, z and w components (aliased as r, g, b and a)."""
    x: float = 0.0
    y: float = 0.0
    z: float = 0.0
    w: float = 0.0

    def __post_init__(self):
        self.x = float(self.x)
        self.y = float(self.y)
        self.z = float(self.z)
        self.w = float(self.w)

    def __str__(self) -> str:
        return f"<{self.x:.2f}, {self.y:.2f}, {self.z:.2f}, {self.w:.2f}>"

    def __repr__(self) -> str:
        return f"Vector4(x={self.x}, y={self.y}, z={self.z}, w={self.w})"

    def __eq__(self, other) -> bool:
        if not isinstance(other, (Vector4, ImmutableVector4)):
            return NotImplemented
        return (self.x == other.x and self.y == other.y and
                self.z == other.z and self.w == other.w)

    def __iter__(self):
        yield self.x
        yield self.y
        yield self.z
        yield self.w

    def __len__(self) -> int:
        return 4

    def __add__(self, other: "Vector4") -> "Vector4":
        if not isinstance(other, (Vector4, ImmutableVector4)):
            return NotImplemented
        return Vector4(self.x + other.x, self.y + other.y, self.z + other.z, self.w + other.w)

    def __sub__(self, other: "Vector4") -> "Vector4":
        if not isinstance(other, (Vector4, ImmutableVector4)):
            return NotImplemented
        return Vector4(self.x - other.x, self.y - other.y, self.z - other.z, self.w - other.w)

    def __mul__(self, scalar: float) -> "Vector4":
        if not isinstance(scalar, (int, float)):
            return NotImplemented
        return Vector4(self.x * scalar, self.y * scalar, self.z * scalar, self.w * scalar)

    def __rmul__(self, scalar: float) -> "Vector4":
        return self.__mul__(scalar)

    def __truediv__(self, scalar: float) -> "Vector4":
        if not isinstance(scalar, (int, float)):
            return NotImplemented
        if scalar == 0:
            raise ValueError("Cannot divide by zero.")
        return Vector4(self.x / scalar, self.y / scalar, self.z / scalar, self.w / scalar)

    def __neg__(self) -> "Vector4":
        return Vector4(-self.x, -self.y, -self.z, -self.w)

    @staticmethod
    def immutable(x: float = 0.0, y: float = 0.0, z: float = 0.0, w: float = 0.0) -> "ImmutableVector4":
        return ImmutableVector4(x, y, z, w)

    @classmethod
    def from_sequence(cls, values) -> "Vector4":
        return cls(*cls._unpack(values))

    @classmethod
    def _unpack(cls, values) -> tuple[float, float, float, float]:
        values = tuple(float(v) for v in values)
        if len(values) != 4:
            raise ShapeMismatchError(cls.__name__, 4, len(values))
        return values

    def clone(self) -> "Vector4":
        return Vector4(self.x, self.y, self.z, self.w)

    def freeze(self) -> "ImmutableVector4":
        return ImmutableVector4(self.x, self.y, self.z, self.w)

    # --- Aliases and bulk access ---

    @property
    def r(self) -> float:
        return self.x

    @r.setter
    def r(self, value: float) -> None:
        self.x = float(value)

    @property
    def g(self) -> float:
        return self.y

    @g.setter
    def g(self, value: float) -> None:
        self.y = float(value)

    @property
    def b(self) -> float:
        return self.z

    @b.setter
    def b(self, value: float) -> None:
        self.z = float(value)

    @property
    def a(self) -> float:
        return self.w

    @a.setter
    def a(self, value: float) -> None:
        self.w = float(value)

    @property
    def xyzw(self) -> tuple[float, float, float, float]:
        return (self.x, self.y, self.z, self.w)

    @xyzw.setter
    def xyzw(self, values) -> None:
        self.x, self.y, self.z, self.w = self._unpack(values)

    rgba = xyzw

    # --- Derived values ---

    @property
    def magnitude(self) -> float:
        if self.is_nan():
            return math.nan
        return math.hypot(self.x, self.y, self.z, self.w)

    @property
    def magnitude_squared(self) -> float:
        return self.x * self.x + self.y * self.y + self.z * self.z + self.w * self.w

    # Each axis angle is unsigned, interval [0, PI]
    @property
    def angle_w(self) -> float:
        return math.atan2(math.hypot(self.x, self.y, self.z), self.w)

    @property
    def angle_x(self) -> float:
        return math.atan2(math.hypot(self.y, self.z, self.w), self.x)

    @property
    def angle_y(self) -> float:
        return math.atan2(math.hypot(self.x, self.z, self.w), self.y)

    @property
    def angle_z(self) -> float:
        return math.atan2(math.hypot(self.x, self.y, self.w), self.z)

    # --- Predicates ---

    def is_zero(self) -> bool:
        return self.x == 0.0 and self.y == 0.0 and self.z == 0.0 and self.w == 0.0

    def is_nan(self) -> bool:
        return (math.isnan(self.x) or math.isnan(self.y) or
                math.isnan(self.z) or math.isnan(self.w))

    def is_infinite(self) -> bool:
        if self.is_nan():
            return False
        return (math.isinf(self.x) or math.isinf(self.y) or
                math.isinf(self.z) or math.isinf(self.w))

    def satisfy_equality(self, other) -> bool:
        return (self.x == other.x and self.y == other.y and
                self.z == other.z and self.w == other.w)

    def satisfy_opposition(self, other) -> bool:
        return (self.x == -other.x and self.y == -other.y and
                self.z == -other.z and self.w == -other.w)

    # --- Products, angles and metrics ---

    def dot(self, other) -> float:
        return self.x * other.x + self.y * other.y + self.z * other.z + self.w * other.w

    def angle_between(self, other) -> float:
        """
        Unsigned angle between the two vectors, interval [0, PI].

        Raises:
            DegenerateVectorError: If either vector is zero.
        """
        for vector in (self, other):
            if vector.is_zero():
                raise DegenerateVectorError("measure an angle against", vector)
        return safe_acos(cosine_between(tuple(self), tuple(other)))

    def _differences(self, other) -> tuple[float, float, float, float]:
        return (self.x - other.x, self.y - other.y, self.z - other.z, self.w - other.w)

    def distance(self, other) -> float:
        return math.hypot(*Vector4._differences(self, other))

    def distance_squared(self, other) -> float:
        return sum(d * d for d in Vector4._differences(self, other))

    def distance_chebyshev(self, other) -> float:
        return max(abs(d) for d in Vector4._differences(self, other))

    def distance_manhattan(self, other) -> float:
        return sum(abs(d) for d in Vector4._differences(self, other))

    def distance_minkowski(self, other, p: float) -> float:
        return minkowski(Vector4._differences(self, other), p)

    # --- In-place operations ---

    @mutator
    def add(self, other) -> "Vector4":
        self.x += other.x
        self.y += other.y
        self.z += other.z
        self.w += other.w
        return self

    @mutator
    def subtract(self, other) -> "Vector4":
        self.x -= other.x
        self.y -= other.y
        self.z -= other.z
        self.w -= other.w
        return self

    @mutator
    def scale(self, factor: float) -> "Vector4":
        self.x *= factor
        self.y *= factor
        self.z *= factor
        self.w *= factor
        return self

    @mutator
    def negate(self) -> "Vector4":
        self.x = -self.x
        self.y = -self.y
        self.z = -self.z
        self.w = -self.w
        return self

    @mutator
    def zero(self) -> "Vector4":
        self.x = 0.0
        self.y = 0.0
        self.z = 0.0
        self.w = 0.0
        return self

    @mutator
    def copy(self, source) -> "Vector4":
        self.x = source.x
        self.y = source.y
        self.z = source.z
        self.w = source.w
        return self

    @mutator
    def lerp(self, other, t: float) -> "Vector4":
        """Moves towards other by t, which is clamped to [0, 1]."""
        t = clamp_unit(t)
        self.x += (other.x - self.x) * t
        self.y += (other.y - self.y) * t
        self.z += (other.z - self.z) * t
        self.w += (other.w - self.w) * t
        return self

    def _rescale(self, target: float, operation: str) -> "Vector4":
        current = self.magnitude
        if current == 0.0:
            Settings.check_zero_vector(operation, self)
            return self
        factor = target / current
        self.x *= factor
        self.y *= factor
        self.z *= factor
        self.w *= factor
        return self

    @mutator
    def normalize(self) -> "Vector4":
        return self._rescale(1.0, "normalize")

    @mutator
    def set_magnitude(self, magnitude: float) -> "Vector4":
        return self._rescale(magnitude, "set the magnitude of")

    @mutator
    def limit_max(self, maximum: float) -> "Vector4":
        if self.magnitude > maximum:
            self._rescale(maximum, "limit")
        return self

    @mutator
    def limit_min(self, minimum: float) -> "Vector4":
        if self.magnitude < minimum:
            self._rescale(minimum, "limit")
        return self

    @mutator
    def clamp(self, minimum: float, maximum: float) -> "Vector4":
        current = self.magnitude
        if current > maximum:
            self._rescale(maximum, "clamp")
        elif current < minimum:
            self._rescale(minimum, "clamp")
        return self

    @mutator
    def look_at(self, target) -> "Vector4":
        length = target.magnitude
        if length == 0.0:
            Settings.check_zero_vector("look at", target)
            return self
        current = self.magnitude
        self.x = target.x / length * current
        self.y = target.y / length * current
        self.z = target.z / length * current
        self.w = target.w / length * current
        return self

    @mutator
    def project(self, onto) -> "Vector4":
        length = onto.magnitude
        if length == 0.0:
            Settings.check_zero_vector("project onto", onto)
            return self.zero()
        ux = onto.x / length
        uy = onto.y / length
        uz = onto.z / length
        uw = onto.w / length
        factor = self.x * ux + self.y * uy + self.z * uz + self.w * uw
        self.x = ux * factor
        self.y = uy * factor
        self.z = uz * factor
        self.w = uw * factor
        return self

    @sampler
    def random(self, rng=None) -> "Vector4":
        """
        Points the vector in a uniformly random direction on the 3-sphere, keeping its magnitude.
        Marsaglia (1972): two independent points in the unit disc, the second one
        strictly inside and away from the origin.
        """
        if rng is None:
            rng = _random
        while True:
            x1 = rng.random() * 2.0 - 1.0
            x2 = rng.random() * 2.0 - 1.0
            s1 = x1 * x1 + x2 * x2
            if s1 < 1.0:
                break
        while True:
            x3 = rng.random() * 2.0 - 1.0
            x4 = rng.random() * 2.0 - 1.0
            s2 = x3 * x3 + x4 * x4
            if 0.0 < s2 < 1.0:
                break
        f = math.sqrt((1.0 - s1) / s2)
        m = self.magnitude
        self.x = m * x1
        self.y = m * x2
        self.z = m * x3 * f
        self.w = m * x4 * f
        return self


@dataclasses.dataclass(frozen=True, slots=True, eq=False)
class ImmutableVector4:
    """Read-only 4D vector with derived values computed at construction."""
    x: float = 0.0
    y: float = 0.0
    z: float = 0.0
    w: float = 0.0
    magnitude: float = dataclasses.field(init=False, repr=False)
    magnitude_squared: float = dataclasses.field(init=False, repr=False)
    angle_w: float = dataclasses.field(init=False, repr=False)
    angle_x: float = dataclasses.field(init=False, repr=False)
    angle_y: float = dataclasses.field(init=False, repr=False)
    angle_z: float = dataclasses.field(init=False, repr=False)
    _is_zero: bool = dataclasses.field(init=False, repr=False)
    _is_nan: bool = dataclasses.field(init=False, repr=False)
    _is_infinite: bool = dataclasses.field(init=False, repr=False)

    def __post_init__(self):
        source = Vector4(self.x, self.y, self.z, self.w)
        for name in ("x", "y", "z", "w", "magnitude", "magnitude_squared",
                     "angle_w", "angle_x", "angle_y", "angle_z"):
            object.__setattr__(self, name, getattr(source, name))
        object.__setattr__(self, "_is_zero", source.is_zero())
        object.__setattr__(self, "_is_nan", source.is_nan())
        object.__setattr__(self, "_is_infinite", source.is_infinite())

    def __hash__(self) -> int:
        return hash((self.x, self.y, self.z, self.w))

    def __add__(self, other) -> "ImmutableVector4":
        if not isinstance(other, (Vector4, ImmutableVector4)):
            return NotImplemented
        return ImmutableVector4(self.x + other.x, self.y + other.y, self.z + other.z, self.w + other.w)

    def __sub__(self, other) -> "ImmutableVector4":
        if not isinstance(other, (Vector4, ImmutableVector4)):
            return NotImplemented
        return ImmutableVector4(self.x - other.x, self.y - other.y, self.z - other.z, self.w - other.w)

    def __mul__(self, scalar: float) -> "ImmutableVector4":
        if not isinstance(scalar, (int, float)):
            return NotImplemented
        return ImmutableVector4(self.x * scalar, self.y * scalar, self.z * scalar, self.w * scalar)

    def __rmul__(self, scalar: float) -> "ImmutableVector4":
        return self.__mul__(scalar)

    def __truediv__(self, scalar: float) -> "ImmutableVector4":
        if not isinstance(scalar, (int, float)):
            return NotImplemented
        if scalar == 0:
            raise ValueError("Cannot divide by zero.")
        return ImmutableVector4(self.x / scalar, self.y / scalar, self.z / scalar, self.w / scalar)

    def __neg__(self) -> "ImmutableVector4":
        return ImmutableVector4(-self.x, -self.y, -self.z, -self.w)

    def is_zero(self) -> bool:
        return self._is_zero

    def is_nan(self) -> bool:
        return self._is_nan

    def is_infinite(self) -> bool:
        return self._is_infinite

    def thaw(self) -> Vector4:
        return Vector4(self.x, self.y, self.z, self.w)

    __eq__ = Vector4.__eq__
    __iter__ = Vector4.__iter__
    __len__ = Vector4.__len__
    __str__ = Vector4.__str__
    r = property(Vector4.r.fget)
    g = property(Vector4.g.fget)
    b = property(Vector4.b.fget)
    a = property(Vector4.a.fget)
    xyzw = property(Vector4.xyzw.fget)
    rgba = xyzw
    satisfy_equality = Vector4.satisfy_equality
    satisfy_opposition = Vector4.satisfy_opposition
    dot = Vector4.dot
    angle_between = Vector4.angle_between
    distance = Vector4.distance
    distance_squared = Vector4.distance_squared
    distance_chebyshev = Vector4.distance_chebyshev
    distance_manhattan = Vector4.distance_manhattan
    distance_minkowski = Vector4.distance_minkowski
