import math
import random as _random
import dataclasses

from pyvecmath.exceptions import DegenerateVectorError, ShapeMismatchError
from pyvecmath.settings import Settings
from pyvecmath.utils import clamp_unit, cosine_between, minkowski, mutator, safe_acos, sampler


@dataclasses.dataclass(slots=True)
class Vector3:
    """
    A mutable 3D vector with x, y and z components (aliased as r, g and b).

    As with Vector2, in-place operations have a copying class-level form:
    ``v.cross(w)`` replaces v with v x w, ``Vector3.cross(v, w)`` returns a new vector.
    """
    x: float = 0.0
    y: float = 0.0
    z: float = 0.0

    def __post_init__(self):
        self.x = float(self.x)
        self.y = float(self.y)
        self.z = float(self.z)

    def __str__(self) -> str:
        return f"<{self.x:.2f}, {self.y:.2f}, {self.z:.2f}>"

    def __repr__(self) -> str:
        return f"Vector3(x={self.x}, y={self.y}, z={self.z})"

    def __eq__(self, other) -> bool:
        if not isinstance(other, (Vector3, ImmutableVector3)):
            return NotImplemented
        return self.x == other.x and self.y == other.y and self.z == other.z

    def __iter__(self):
        yield self.x
        yield self.y
        yield self.z

    def __len__(self) -> int:
        return 3

    def __add__(self, other: "Vector3") -> "Vector3":
        if not isinstance(other, (Vector3, ImmutableVector3)):
            return NotImplemented
        return Vector3(self.x + other.x, self.y + other.y, self.z + other.z)

    def __sub__(self, other: "Vector3") -> "Vector3":
        if not isinstance(other, (Vector3, ImmutableVector3)):
            return NotImplemented
        return Vector3(self.x - other.x, self.y - other.y, self.z - other.z)

    def __mul__(self, scalar: float) -> "Vector3": # Scalar multiplication only, see dot/cross
        if not isinstance(scalar, (int, float)):
            return NotImplemented
        return Vector3(self.x * scalar, self.y * scalar, self.z * scalar)

    def __rmul__(self, scalar: float) -> "Vector3":
        return self.__mul__(scalar)

    def __truediv__(self, scalar: float) -> "Vector3":
        if not isinstance(scalar, (int, float)):
            return NotImplemented
        if scalar == 0:
            raise ValueError("Cannot divide by zero.")
        return Vector3(self.x / scalar, self.y / scalar, self.z / scalar)

    def __neg__(self) -> "Vector3":
        return Vector3(-self.x, -self.y, -self.z)

    # --- Construction ---

    @staticmethod
    def immutable(x: float = 0.0, y: float = 0.0, z: float = 0.0) -> "ImmutableVector3":
        """Creates the read-only counterpart with precomputed derived values."""
        return ImmutableVector3(x, y, z)

    @staticmethod
    def from_cylindrical_coords(r: float, phi: float, z: float) -> "Vector3":
        """
        Creates a vector from cylindrical coordinates.

        Args:
            r: Distance from the z-axis.
            phi: Angle in radians from the positive x-axis, in the xy-plane.
            z: Height along the z-axis.
        """
        return Vector3(r * math.cos(phi), r * math.sin(phi), z)

    @staticmethod
    def from_spherical_coords(r: float, theta: float, phi: float) -> "Vector3":
        """
        Creates a vector from spherical coordinates (physics convention).

        Args:
            r: Radius.
            theta: Polar angle in radians, measured from the positive z-axis.
            phi: Azimuth in radians, measured from the positive x-axis in the xy-plane.
        """
        sin_theta = math.sin(theta)
        return Vector3(
            r * sin_theta * math.cos(phi),
            r * sin_theta * math.sin(phi),
            r * math.cos(theta),
        )

    @classmethod
    def from_sequence(cls, values) -> "Vector3":
        """Creates a vector from exactly three numbers."""
        return cls(*cls._unpack(values))

    @classmethod
    def _unpack(cls, values) -> tuple[float, float, float]:
        values = tuple(float(v) for v in values)
        if len(values) != 3:
            raise ShapeMismatchError(cls.__name__, 3, len(values))
        return values

    def clone(self) -> "Vector3":
        """Returns a new vector with identical components."""
        return Vector3(self.x, self.y, self.z)

    def freeze(self) -> "ImmutableVector3":
        """Returns an immutable snapshot of this vector."""
        return ImmutableVector3(self.x, self.y, self.z)

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
    def xyz(self) -> tuple[float, float, float]:
        return (self.x, self.y, self.z)

    @xyz.setter
    def xyz(self, values) -> None:
        self.x, self.y, self.z = self._unpack(values)

    rgb = xyz

    # --- Derived values ---

    @property
    def magnitude(self) -> float:
        """Euclidean length. NaN if any component is NaN; does not overflow for finite input."""
        if self.is_nan():
            return math.nan
        return math.hypot(self.x, self.y, self.z)

    @property
    def magnitude_squared(self) -> float:
        """Returns the squared magnitude of the vector."""
        return self.x * self.x + self.y * self.y + self.z * self.z

    @property
    def angle_x(self) -> float:
        """Unsigned angle to the positive x-axis, interval [0, PI]."""
        return math.atan2(math.hypot(self.y, self.z), self.x)

    @property
    def angle_y(self) -> float:
        """Unsigned angle to the positive y-axis, interval [0, PI]."""
        return math.atan2(math.hypot(self.z, self.x), self.y)

    @property
    def angle_z(self) -> float:
        """Unsigned angle to the positive z-axis, interval [0, PI]."""
        return math.atan2(math.hypot(self.x, self.y), self.z)

    # --- Predicates ---

    def is_zero(self) -> bool:
        return self.x == 0.0 and self.y == 0.0 and self.z == 0.0

    def is_nan(self) -> bool:
        return math.isnan(self.x) or math.isnan(self.y) or math.isnan(self.z)

    def is_infinite(self) -> bool:
        """True if a component is +/-inf and none is NaN."""
        if self.is_nan():
            return False
        return math.isinf(self.x) or math.isinf(self.y) or math.isinf(self.z)

    def satisfy_equality(self, other) -> bool:
        return self.x == other.x and self.y == other.y and self.z == other.z

    def satisfy_opposition(self, other) -> bool:
        return self.x == -other.x and self.y == -other.y and self.z == -other.z

    # --- Products, angles and metrics ---

    def dot(self, other) -> float:
        """Calculates the dot product with another 3D vector."""
        return self.x * other.x + self.y * other.y + self.z * other.z

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

    def distance(self, other) -> float:
        return math.hypot(self.x - other.x, self.y - other.y, self.z - other.z)

    def distance_squared(self, other) -> float:
        dx = self.x - other.x
        dy = self.y - other.y
        dz = self.z - other.z
        return dx * dx + dy * dy + dz * dz

    def distance_chebyshev(self, other) -> float:
        return max(abs(self.x - other.x), abs(self.y - other.y), abs(self.z - other.z))

    def distance_manhattan(self, other) -> float:
        return abs(self.x - other.x) + abs(self.y - other.y) + abs(self.z - other.z)

    def distance_minkowski(self, other, p: float) -> float:
        """
        Minkowski distance of order p.

        Raises:
            VectorDomainError: If p <= 0.
        """
        return minkowski((self.x - other.x, self.y - other.y, self.z - other.z), p)

    # --- In-place operations ---

    @mutator
    def add(self, other) -> "Vector3":
        self.x += other.x
        self.y += other.y
        self.z += other.z
        return self

    @mutator
    def subtract(self, other) -> "Vector3":
        self.x -= other.x
        self.y -= other.y
        self.z -= other.z
        return self

    @mutator
    def scale(self, factor: float) -> "Vector3":
        self.x *= factor
        self.y *= factor
        self.z *= factor
        return self

    @mutator
    def negate(self) -> "Vector3":
        self.x = -self.x
        self.y = -self.y
        self.z = -self.z
        return self

    @mutator
    def zero(self) -> "Vector3":
        self.x = 0.0
        self.y = 0.0
        self.z = 0.0
        return self

    @mutator
    def copy(self, source) -> "Vector3":
        """Overwrites this vector's components with those of source."""
        self.x = source.x
        self.y = source.y
        self.z = source.z
        return self

    @mutator
    def cross(self, other) -> "Vector3":
        """Replaces this vector with the cross product self x other."""
        x, y, z = self.x, self.y, self.z
        self.x = y * other.z - z * other.y
        self.y = z * other.x - x * other.z
        self.z = x * other.y - y * other.x
        return self

    @mutator
    def lerp(self, other, t: float) -> "Vector3":
        """Moves towards other by t, which is clamped to [0, 1]."""
        t = clamp_unit(t)
        self.x += (other.x - self.x) * t
        self.y += (other.y - self.y) * t
        self.z += (other.z - self.z) * t
        return self

    def _rescale(self, target: float, operation: str) -> "Vector3":
        current = self.magnitude
        if current == 0.0:
            Settings.check_zero_vector(operation, self)
            return self
        self.x = self.x / current * target
        self.y = self.y / current * target
        self.z = self.z / current * target
        return self

    @mutator
    def normalize(self) -> "Vector3":
        """Scales to unit length. A zero vector is handled per Settings.ZERO_VECTOR_POLICY."""
        return self._rescale(1.0, "normalize")

    @mutator
    def set_magnitude(self, magnitude: float) -> "Vector3":
        return self._rescale(magnitude, "set the magnitude of")

    @mutator
    def limit_max(self, maximum: float) -> "Vector3":
        if self.magnitude > maximum:
            self._rescale(maximum, "limit")
        return self

    @mutator
    def limit_min(self, minimum: float) -> "Vector3":
        if self.magnitude < minimum:
            self._rescale(minimum, "limit")
        return self

    @mutator
    def clamp(self, minimum: float, maximum: float) -> "Vector3":
        current = self.magnitude
        if current > maximum:
            self._rescale(maximum, "clamp")
        elif current < minimum:
            self._rescale(minimum, "clamp")
        return self

    @mutator
    def look_at(self, target) -> "Vector3":
        """Points this vector in the direction of target, keeping its own magnitude."""
        length = target.magnitude
        if length == 0.0:
            Settings.check_zero_vector("look at", target)
            return self
        current = self.magnitude
        self.x = target.x / length * current
        self.y = target.y / length * current
        self.z = target.z / length * current
        return self

    @mutator
    def project(self, onto) -> "Vector3":
        """Replaces this vector with its orthogonal projection onto another."""
        length = onto.magnitude
        if length == 0.0:
            Settings.check_zero_vector("project onto", onto)
            return self.zero()
        ux = onto.x / length
        uy = onto.y / length
        uz = onto.z / length
        factor = self.x * ux + self.y * uy + self.z * uz
        self.x = ux * factor
        self.y = uy * factor
        self.z = uz * factor
        return self

    @mutator
    def rotate_x(self, phi: float) -> "Vector3":
        """Rotates about the x-axis by phi, moving the positive y-axis towards the positive z-axis."""
        cos_phi = math.cos(phi)
        sin_phi = math.sin(phi)
        y = self.y
        self.y = y * cos_phi - self.z * sin_phi
        self.z = y * sin_phi + self.z * cos_phi
        return self

    @mutator
    def rotate_y(self, phi: float) -> "Vector3":
        """Rotates about the y-axis by phi, moving the positive x-axis towards the positive z-axis."""
        cos_phi = math.cos(phi)
        sin_phi = math.sin(phi)
        x = self.x
        self.x = x * cos_phi - self.z * sin_phi
        self.z = x * sin_phi + self.z * cos_phi
        return self

    @mutator
    def rotate_z(self, phi: float) -> "Vector3":
        """Rotates about the z-axis by phi, moving the positive x-axis towards the positive y-axis."""
        cos_phi = math.cos(phi)
        sin_phi = math.sin(phi)
        x = self.x
        self.x = x * cos_phi - self.y * sin_phi
        self.y = x * sin_phi + self.y * cos_phi
        return self

    @sampler
    def random(self, rng=None) -> "Vector3":
        """
        Points the vector in a uniformly random direction, keeping its magnitude.
        Uses Marsaglia's (1972) rejection method: draw (u, v) uniformly from the
        unit disc, then map it onto the sphere.
        """
        if rng is None:
            rng = _random
        while True:
            u = rng.random() * 2.0 - 1.0
            v = rng.random() * 2.0 - 1.0
            s = u * u + v * v
            if s < 1.0:
                break
        f = 2.0 * math.sqrt(1.0 - s)
        m = self.magnitude
        self.x = m * u * f
        self.y = m * v * f
        self.z = m * (1.0 - 2.0 * s)
        return self


@dataclasses.dataclass(frozen=True, slots=True, eq=False)
class ImmutableVector3:
    """Read-only 3D vector with derived values computed at construction."""
    x: float = 0.0
    y: float = 0.0
    z: float = 0.0
    magnitude: float = dataclasses.field(init=False, repr=False)
    magnitude_squared: float = dataclasses.field(init=False, repr=False)
    angle_x: float = dataclasses.field(init=False, repr=False)
    angle_y: float = dataclasses.field(init=False, repr=False)
    angle_z: float = dataclasses.field(init=False, repr=False)
    _is_zero: bool = dataclasses.field(init=False, repr=False)
    _is_nan: bool = dataclasses.field(init=False, repr=False)
    _is_infinite: bool = dataclasses.field(init=False, repr=False)

    def __post_init__(self):
        source = Vector3(self.x, self.y, self.z)
        object.__setattr__(self, "x", source.x)
        object.__setattr__(self, "y", source.y)
        object.__setattr__(self, "z", source.z)
        object.__setattr__(self, "magnitude", source.magnitude)
        object.__setattr__(self, "magnitude_squared", source.magnitude_squared)
        object.__setattr__(self, "angle_x", source.angle_x)
        object.__setattr__(self, "angle_y", source.angle_y)
        object.__setattr__(self, "angle_z", source.angle_z)
        object.__setattr__(self, "_is_zero", source.is_zero())
        object.__setattr__(self, "_is_nan", source.is_nan())
        object.__setattr__(self, "_is_infinite", source.is_infinite())

    def __hash__(self) -> int:
        return hash((self.x, self.y, self.z))

    def __add__(self, other) -> "ImmutableVector3":
        if not isinstance(other, (Vector3, ImmutableVector3)):
            return NotImplemented
        return ImmutableVector3(self.x + other.x, self.y + other.y, self.z + other.z)

    def __sub__(self, other) -> "ImmutableVector3":
        if not isinstance(other, (Vector3, ImmutableVector3)):
            return NotImplemented
        return ImmutableVector3(self.x - other.x, self.y - other.y, self.z - other.z)

    def __mul__(self, scalar: float) -> "ImmutableVector3":
        if not isinstance(scalar, (int, float)):
            return NotImplemented
        return ImmutableVector3(self.x * scalar, self.y * scalar, self.z * scalar)

    def __rmul__(self, scalar: float) -> "ImmutableVector3":
        return self.__mul__(scalar)

    def __truediv__(self, scalar: float) -> "ImmutableVector3":
        if not isinstance(scalar, (int, float)):
            return NotImplemented
        if scalar == 0:
            raise ValueError("Cannot divide by zero.")
        return ImmutableVector3(self.x / scalar, self.y / scalar, self.z / scalar)

    def __neg__(self) -> "ImmutableVector3":
        return ImmutableVector3(-self.x, -self.y, -self.z)

    def is_zero(self) -> bool:
        return self._is_zero

    def is_nan(self) -> bool:
        return self._is_nan

    def is_infinite(self) -> bool:
        return self._is_infinite

    def cross(self, other) -> "ImmutableVector3":
        """Returns the cross product self x other as a new immutable vector."""
        return ImmutableVector3(*Vector3.cross(self, other))

    def thaw(self) -> Vector3:
        """Returns a mutable copy."""
        return Vector3(self.x, self.y, self.z)

    # Read-only surface shared with Vector3
    __eq__ = Vector3.__eq__
    __iter__ = Vector3.__iter__
    __len__ = Vector3.__len__
    __str__ = Vector3.__str__
    r = property(Vector3.r.fget)
    g = property(Vector3.g.fget)
    b = property(Vector3.b.fget)
    xyz = property(Vector3.xyz.fget)
    rgb = xyz
    satisfy_equality = Vector3.satisfy_equality
    satisfy_opposition = Vector3.satisfy_opposition
    dot = Vector3.dot
    angle_between = Vector3.angle_between
    distance = Vector3.distance
    distance_squared = Vector3.distance_squared
    distance_chebyshev = Vector3.distance_chebyshev
    distance_manhattan = Vector3.distance_manhattan
    distance_minkowski = Vector3.distance_minkowski
