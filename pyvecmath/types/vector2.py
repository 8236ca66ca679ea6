import math
import random as _random
import dataclasses

from pyvecmath.exceptions import DegenerateVectorError, ShapeMismatchError
from pyvecmath.settings import Settings
from pyvecmath.utils import (
    TWO_PI, clamp_unit, minkowski, mutator, sampler, scale_by_largest, wrap_angle
)


@dataclasses.dataclass(slots=True)
class Vector2:
    """
    A mutable 2D vector with x and y components.

    Instance methods that change the vector return it so calls can be chained.
    The same methods looked up on the class leave their first argument alone
    and return a new vector instead:

        v.add(w)            # v is modified
        Vector2.add(v, w)   # v is untouched, the sum is a new Vector2
    """
    x: float = 0.0
    y: float = 0.0

    def __post_init__(self):
        self.x = float(self.x)
        self.y = float(self.y)

    def __str__(self) -> str:
        return f"<{self.x:.2f}, {self.y:.2f}>"

    def __repr__(self) -> str:
        return f"Vector2(x={self.x}, y={self.y})"

    def __eq__(self, other) -> bool:
        if not isinstance(other, (Vector2, ImmutableVector2)):
            return NotImplemented
        return self.x == other.x and self.y == other.y

    def __iter__(self):
        yield self.x
        yield self.y

    def __len__(self) -> int:
        return 2

    def __add__(self, other: "Vector2") -> "Vector2":
        if not isinstance(other, (Vector2, ImmutableVector2)):
            return NotImplemented
        return Vector2(self.x + other.x, self.y + other.y)

    def __sub__(self, other: "Vector2") -> "Vector2":
        if not isinstance(other, (Vector2, ImmutableVector2)):
            return NotImplemented
        return Vector2(self.x - other.x, self.y - other.y)

    def __mul__(self, scalar: float) -> "Vector2":
        if not isinstance(scalar, (int, float)):
            return NotImplemented
        return Vector2(self.x * scalar, self.y * scalar)

    def __rmul__(self, scalar: float) -> "Vector2":
        return self.__mul__(scalar)

    def __truediv__(self, scalar: float) -> "Vector2":
        if not isinstance(scalar, (int, float)):
            return NotImplemented
        if scalar == 0:
            raise ValueError("Cannot divide by zero.")
        return Vector2(self.x / scalar, self.y / scalar)

    def __neg__(self) -> "Vector2":
        return Vector2(-self.x, -self.y)

    # --- Construction ---

    @staticmethod
    def immutable(x: float = 0.0, y: float = 0.0) -> "ImmutableVector2":
        """Creates the read-only counterpart with precomputed derived values."""
        return ImmutableVector2(x, y)

    @staticmethod
    def from_polar_coords(r: float, theta: float) -> "Vector2":
        """Creates a vector from a radius and an angle (radians) from the positive x-axis."""
        return Vector2(r * math.cos(theta), r * math.sin(theta))

    @classmethod
    def from_sequence(cls, values) -> "Vector2":
        """Creates a vector from exactly two numbers."""
        return cls(*cls._unpack(values))

    @classmethod
    def _unpack(cls, values) -> tuple[float, float]:
        values = tuple(float(v) for v in values)
        if len(values) != 2:
            raise ShapeMismatchError(cls.__name__, 2, len(values))
        return values

    def clone(self) -> "Vector2":
        """Returns a new vector with identical components."""
        return Vector2(self.x, self.y)

    def freeze(self) -> "ImmutableVector2":
        """Returns an immutable snapshot of this vector."""
        return ImmutableVector2(self.x, self.y)

    # --- Derived values ---

    @property
    def xy(self) -> tuple[float, float]:
        return (self.x, self.y)

    @xy.setter
    def xy(self, values) -> None:
        self.x, self.y = self._unpack(values)

    @property
    def magnitude(self) -> float:
        """Euclidean length. NaN if any component is NaN; does not overflow for finite input."""
        if self.is_nan():
            return math.nan
        return math.hypot(self.x, self.y)

    @property
    def magnitude_squared(self) -> float:
        """Returns the squared magnitude of the vector."""
        return self.x * self.x + self.y * self.y

    @property
    def angle_x(self) -> float:
        """Angle from the positive x-axis towards the positive y-axis, interval [0, 2PI)."""
        return wrap_angle(math.atan2(self.y, self.x))

    @property
    def angle_y(self) -> float:
        """Angle from the positive y-axis towards the negative x-axis, interval [0, 2PI)."""
        return wrap_angle(math.atan2(-self.x, self.y))

    # --- Predicates ---

    def is_zero(self) -> bool:
        return self.x == 0.0 and self.y == 0.0

    def is_nan(self) -> bool:
        return math.isnan(self.x) or math.isnan(self.y)

    def is_infinite(self) -> bool:
        """True if a component is +/-inf and none is NaN."""
        return not self.is_nan() and (math.isinf(self.x) or math.isinf(self.y))

    def satisfy_equality(self, other) -> bool:
        """Exact componentwise equality, no tolerance."""
        return self.x == other.x and self.y == other.y

    def satisfy_opposition(self, other) -> bool:
        """True if other is exactly the negation of this vector."""
        return self.x == -other.x and self.y == -other.y

    # --- Products, angles and metrics ---

    def dot(self, other) -> float:
        return self.x * other.x + self.y * other.y

    def angle_between(self, other) -> float:
        """
        Signed angle turning this vector onto other, interval (-PI, PI].

        Raises:
            DegenerateVectorError: If either vector is zero.
        """
        for vector in (self, other):
            if vector.is_zero():
                raise DegenerateVectorError("measure an angle against", vector)
        ax, ay = scale_by_largest((self.x, self.y))
        bx, by = scale_by_largest((other.x, other.y))
        angle = math.atan2(ax * by - ay * bx, ax * bx + ay * by)
        # atan2(-0.0, negative) lands on the open end of the interval
        return math.pi if angle == -math.pi else angle

    def distance(self, other) -> float:
        return math.hypot(self.x - other.x, self.y - other.y)

    def distance_squared(self, other) -> float:
        dx = self.x - other.x
        dy = self.y - other.y
        return dx * dx + dy * dy

    def distance_chebyshev(self, other) -> float:
        """Largest absolute componentwise difference (chessboard distance)."""
        return max(abs(self.x - other.x), abs(self.y - other.y))

    def distance_manhattan(self, other) -> float:
        """Sum of absolute componentwise differences (taxicab distance)."""
        return abs(self.x - other.x) + abs(self.y - other.y)

    def distance_minkowski(self, other, p: float) -> float:
        """
        Minkowski distance of order p: 1 is Manhattan, 2 is Euclidean and
        infinity is Chebyshev.

        Raises:
            VectorDomainError: If p <= 0.
        """
        return minkowski((self.x - other.x, self.y - other.y), p)

    # --- In-place operations ---

    @mutator
    def add(self, other) -> "Vector2":
        self.x += other.x
        self.y += other.y
        return self

    @mutator
    def subtract(self, other) -> "Vector2":
        self.x -= other.x
        self.y -= other.y
        return self

    @mutator
    def scale(self, factor: float) -> "Vector2":
        self.x *= factor
        self.y *= factor
        return self

    @mutator
    def negate(self) -> "Vector2":
        self.x = -self.x
        self.y = -self.y
        return self

    @mutator
    def zero(self) -> "Vector2":
        self.x = 0.0
        self.y = 0.0
        return self

    @mutator
    def copy(self, source) -> "Vector2":
        """Overwrites this vector's components with those of source."""
        self.x = source.x
        self.y = source.y
        return self

    @mutator
    def lerp(self, other, t: float) -> "Vector2":
        """Moves towards other by t, which is clamped to [0, 1]."""
        t = clamp_unit(t)
        self.x += (other.x - self.x) * t
        self.y += (other.y - self.y) * t
        return self

    def _rescale(self, target: float, operation: str) -> "Vector2":
        current = self.magnitude
        if current == 0.0:
            Settings.check_zero_vector(operation, self)
            return self
        self.x = self.x / current * target
        self.y = self.y / current * target
        return self

    @mutator
    def normalize(self) -> "Vector2":
        """Scales to unit length. A zero vector is handled per Settings.ZERO_VECTOR_POLICY."""
        return self._rescale(1.0, "normalize")

    @mutator
    def set_magnitude(self, magnitude: float) -> "Vector2":
        """Rescales to the given length, keeping the direction."""
        return self._rescale(magnitude, "set the magnitude of")

    @mutator
    def limit_max(self, maximum: float) -> "Vector2":
        if self.magnitude > maximum:
            self._rescale(maximum, "limit")
        return self

    @mutator
    def limit_min(self, minimum: float) -> "Vector2":
        if self.magnitude < minimum:
            self._rescale(minimum, "limit")
        return self

    @mutator
    def clamp(self, minimum: float, maximum: float) -> "Vector2":
        """Keeps the magnitude within [minimum, maximum]; only one bound is applied per call."""
        current = self.magnitude
        if current > maximum:
            self._rescale(maximum, "clamp")
        elif current < minimum:
            self._rescale(minimum, "clamp")
        return self

    @mutator
    def look_at(self, target) -> "Vector2":
        """Points this vector in the direction of target, keeping its own magnitude."""
        length = target.magnitude
        if length == 0.0:
            Settings.check_zero_vector("look at", target)
            return self
        current = self.magnitude
        self.x = target.x / length * current
        self.y = target.y / length * current
        return self

    @mutator
    def project(self, onto) -> "Vector2":
        """
        Replaces this vector with its orthogonal projection onto another.
        Projecting onto a zero vector gives zero (or raises, per Settings).
        """
        length = onto.magnitude
        if length == 0.0:
            Settings.check_zero_vector("project onto", onto)
            return self.zero()
        ux = onto.x / length
        uy = onto.y / length
        # |self| * cos(angle between), without the trigonometric round trip
        factor = self.x * ux + self.y * uy
        self.x = ux * factor
        self.y = uy * factor
        return self

    @mutator
    def set_angle_x(self, phi: float) -> "Vector2":
        """Points the vector at phi radians from the positive x-axis, keeping its magnitude."""
        m = self.magnitude
        self.x = m * math.cos(phi)
        self.y = m * math.sin(phi)
        return self

    @mutator
    def set_angle_y(self, phi: float) -> "Vector2":
        """Points the vector at phi radians from the positive y-axis (counter-clockwise)."""
        m = self.magnitude
        self.x = m * -math.sin(phi)
        self.y = m * math.cos(phi)
        return self

    @mutator
    def rotate_z(self, phi: float) -> "Vector2":
        """Rotates by phi radians, moving the positive x-axis towards the positive y-axis."""
        cos_phi = math.cos(phi)
        sin_phi = math.sin(phi)
        x = self.x
        self.x = x * cos_phi - self.y * sin_phi
        self.y = x * sin_phi + self.y * cos_phi
        return self

    @mutator
    def turn_left(self) -> "Vector2":
        """Exact quarter turn counter-clockwise."""
        self.x, self.y = -self.y, self.x
        return self

    @mutator
    def turn_right(self) -> "Vector2":
        """Exact quarter turn clockwise."""
        self.x, self.y = self.y, -self.x
        return self

    @sampler
    def random(self, rng=None) -> "Vector2":
        """
        Points the vector in a uniformly random direction, keeping its magnitude.
        Called on the class, returns a random unit vector.

        Args:
            rng: Anything with a random() method returning floats in [0, 1).
                 Defaults to the random module.
        """
        if rng is None:
            rng = _random
        phi = rng.random() * TWO_PI
        m = self.magnitude
        self.x = m * math.cos(phi)
        self.y = m * math.sin(phi)
        return self


@dataclasses.dataclass(frozen=True, slots=True, eq=False)
class ImmutableVector2:
    """
    Read-only 2D vector. Magnitude, angles and the zero/NaN/infinity checks are
    computed once when the instance is created.
    """
    x: float = 0.0
    y: float = 0.0
    magnitude: float = dataclasses.field(init=False, repr=False)
    magnitude_squared: float = dataclasses.field(init=False, repr=False)
    angle_x: float = dataclasses.field(init=False, repr=False)
    angle_y: float = dataclasses.field(init=False, repr=False)
    _is_zero: bool = dataclasses.field(init=False, repr=False)
    _is_nan: bool = dataclasses.field(init=False, repr=False)
    _is_infinite: bool = dataclasses.field(init=False, repr=False)

    def __post_init__(self):
        source = Vector2(self.x, self.y)
        object.__setattr__(self, "x", source.x)
        object.__setattr__(self, "y", source.y)
        object.__setattr__(self, "magnitude", source.magnitude)
        object.__setattr__(self, "magnitude_squared", source.magnitude_squared)
        object.__setattr__(self, "angle_x", source.angle_x)
        object.__setattr__(self, "angle_y", source.angle_y)
        object.__setattr__(self, "_is_zero", source.is_zero())
        object.__setattr__(self, "_is_nan", source.is_nan())
        object.__setattr__(self, "_is_infinite", source.is_infinite())

    def __hash__(self) -> int:
        return hash((self.x, self.y))

    def __add__(self, other) -> "ImmutableVector2":
        if not isinstance(other, (Vector2, ImmutableVector2)):
            return NotImplemented
        return ImmutableVector2(self.x + other.x, self.y + other.y)

    def __sub__(self, other) -> "ImmutableVector2":
        if not isinstance(other, (Vector2, ImmutableVector2)):
            return NotImplemented
        return ImmutableVector2(self.x - other.x, self.y - other.y)

    def __mul__(self, scalar: float) -> "ImmutableVector2":
        if not isinstance(scalar, (int, float)):
            return NotImplemented
        return ImmutableVector2(self.x * scalar, self.y * scalar)

    def __rmul__(self, scalar: float) -> "ImmutableVector2":
        return self.__mul__(scalar)

    def __truediv__(self, scalar: float) -> "ImmutableVector2":
        if not isinstance(scalar, (int, float)):
            return NotImplemented
        if scalar == 0:
            raise ValueError("Cannot divide by zero.")
        return ImmutableVector2(self.x / scalar, self.y / scalar)

    def __neg__(self) -> "ImmutableVector2":
        return ImmutableVector2(-self.x, -self.y)

    def is_zero(self) -> bool:
        return self._is_zero

    def is_nan(self) -> bool:
        return self._is_nan

    def is_infinite(self) -> bool:
        return self._is_infinite

    def thaw(self) -> Vector2:
        """Returns a mutable copy."""
        return Vector2(self.x, self.y)

    # Read-only surface shared with Vector2
    __eq__ = Vector2.__eq__
    __iter__ = Vector2.__iter__
    __len__ = Vector2.__len__
    __str__ = Vector2.__str__
    xy = property(Vector2.xy.fget)
    satisfy_equality = Vector2.satisfy_equality
    satisfy_opposition = Vector2.satisfy_opposition
    dot = Vector2.dot
    angle_between = Vector2.angle_between
    distance = Vector2.distance
    distance_squared = Vector2.distance_squared
    distance_chebyshev = Vector2.distance_chebyshev
    distance_manhattan = Vector2.distance_manhattan
    distance_minkowski = Vector2.distance_minkowski
