"""
Homogeneous Tuples
==================
A single 4-component representation (x, y, z, w) for both points and vectors.

The kind of a tuple is derived from `w`, never stored:
    w ~ 0.0 -> TupleKind.VECTOR
    w ~ 1.0 -> TupleKind.POINT
    otherwise -> TupleKind.INVALID

Arithmetic operates on all four components, so the homogeneous trick gives
the right kind for free in the legal cases (Point + Vector = Point,
Point - Point = Vector). Illegal combinations (Point + Point, scaling a Point)
are not rejected; they produce an INVALID tuple. Callers that combine tuples
of mixed provenance should check `kind` afterwards, or use the distinct
`Point` / `Vector` types from `raytracer.algebra.primitives` instead.
"""
from __future__ import annotations

from dataclasses import dataclass
from enum import Enum
import logging
import math
from numbers import Real
from typing import TYPE_CHECKING

from raytracer.algebra.utils import approximately_equal, to_f32

if TYPE_CHECKING:
    from raytracer.algebra.primitives import Point, Vector

logger = logging.getLogger(__name__)


class TupleKind(Enum):
    VECTOR = "vector"
    POINT = "point"
    INVALID = "invalid"


@dataclass(frozen=True, eq=False)
class Tuple:
    """
    A homogeneous coordinate. Immutable; every operator returns a new instance.
    """
    x: float
    y: float
    z: float
    w: float

    def __post_init__(self) -> None:
        # Components are single precision
        for name in ("x", "y", "z", "w"):
            object.__setattr__(self, name, to_f32(getattr(self, name)))

    @property
    def kind(self) -> TupleKind:
        if approximately_equal(self.w, 0.0):
            return TupleKind.VECTOR
        if approximately_equal(self.w, 1.0):
            return TupleKind.POINT
        return TupleKind.INVALID

    @property
    def is_point(self) -> bool:
        return self.kind is TupleKind.POINT

    @property
    def is_vector(self) -> bool:
        return self.kind is TupleKind.VECTOR

    def __eq__(self, other: object) -> bool:
        if not isinstance(other, Tuple):
            return NotImplemented
        return (
            approximately_equal(self.x, other.x)
            and approximately_equal(self.y, other.y)
            and approximately_equal(self.z, other.z)
            and self.kind is other.kind
        )

    def __add__(self, other: Tuple) -> Tuple:
        if not isinstance(other, Tuple):
            return NotImplemented
        return Tuple(self.x + other.x, self.y + other.y, self.z + other.z, self.w + other.w)

    def __sub__(self, other: Tuple) -> Tuple:
        if not isinstance(other, Tuple):
            return NotImplemented
        return Tuple(self.x - other.x, self.y - other.y, self.z - other.z, self.w - other.w)

    def __mul__(self, scalar: float) -> Tuple:
        if not isinstance(scalar, Real):
            return NotImplemented
        return Tuple(self.x * scalar, self.y * scalar, self.z * scalar, self.w * scalar)

    __rmul__ = __mul__

    def __truediv__(self, scalar: float) -> Tuple:
        if not isinstance(scalar, Real):
            return NotImplemented
        if scalar == 0.0: raise ZeroDivisionError("Tuple division by zero.")
        return Tuple(self.x / scalar, self.y / scalar, self.z / scalar, self.w / scalar)

    def __neg__(self) -> Tuple:
        return Tuple(-self.x, -self.y, -self.z, -self.w)

    def magnitude(self) -> float:
        """
        Length over all four components.

        For a vector (w = 0) this is the Euclidean length. For a point the
        w component contributes, so it is not the distance from the origin.
        """
        return to_f32(math.sqrt(self.x ** 2 + self.y ** 2 + self.z ** 2 + self.w ** 2))

    def normalize(self) -> Tuple:
        """Unit-length copy of this tuple. A zero tuple normalizes to `zero()`."""
        mag = self.magnitude()
        if mag == 0.0: return zero()
        return self / mag

    def dot(self, other: Tuple) -> float:
        """
        Four-component dot product.

        Only meaningful between two vectors; a warning is logged otherwise
        (skipped under `python -O`).
        """
        if __debug__ and not (self.is_vector and other.is_vector):
            logger.warning(
                f"Dot product of non-vector tuples: {self.kind.value} . {other.kind.value}"
            )
        return to_f32(self.x * other.x + self.y * other.y + self.z * other.z + self.w * other.w)

    def cross(self, other: Tuple) -> Tuple:
        """3D cross product of x/y/z. The result is always a vector."""
        return vector(
            self.y * other.z - self.z * other.y,
            self.z * other.x - self.x * other.z,
            self.x * other.y - self.y * other.x,
        )

    def as_point(self) -> Point:
        from raytracer.algebra.primitives import Point

        if not self.is_point:
            raise ValueError(f"Cannot convert a {self.kind.value} tuple to a Point.")
        return Point(self.x, self.y, self.z)

    def as_vector(self) -> Vector:
        from raytracer.algebra.primitives import Vector

        if not self.is_vector:
            raise ValueError(f"Cannot convert a {self.kind.value} tuple to a Vector.")
        return Vector(self.x, self.y, self.z)


def point(x: float, y: float, z: float) -> Tuple:
    return Tuple(x, y, z, 1.0)


def vector(x: float, y: float, z: float) -> Tuple:
    return Tuple(x, y, z, 0.0)


def raw(x: float, y: float, z: float, w: float) -> Tuple:
    """Tuple with an arbitrary w; the kind may be INVALID."""
    return Tuple(x, y, z, w)


def zero() -> Tuple:
    return Tuple(0.0, 0.0, 0.0, 0.0)
