"""
Geometric Primitives
====================
Distinct Point and Vector types with a restricted set of operations.

Unlike the homogeneous `Tuple`, an illegal combination never produces a value:
    Point + Vector  -> Point  (translation)
    Point - Vector  -> Point  (inverse translation)
    Point - Point   -> Vector (displacement)
    Vector +/- Vector -> Vector
    Point + Point, Point * scalar, -Point -> TypeError
"""
from __future__ import annotations

from dataclasses import dataclass
import math
from numbers import Real
from typing import Union, TYPE_CHECKING

import numpy as np

from raytracer.algebra.tuples import Tuple, point, vector
from raytracer.algebra.utils import approximately_equal, to_f32

if TYPE_CHECKING:
    import numpy.typing as npt


@dataclass(frozen=True, eq=False)
class Vector:
    """
    A vector in 3D space representing direction and magnitude.
    """
    x: float
    y: float
    z: float = 0.0

    def __post_init__(self) -> None:
        for name in ("x", "y", "z"):
            object.__setattr__(self, name, to_f32(getattr(self, name)))

    @staticmethod
    def zero() -> Vector:
        return Vector(0.0, 0.0, 0.0)

    def __eq__(self, other: object) -> bool:
        if not isinstance(other, Vector):
            return NotImplemented
        return (
            approximately_equal(self.x, other.x)
            and approximately_equal(self.y, other.y)
            and approximately_equal(self.z, other.z)
        )

    def __add__(self, other: Vector) -> Vector:
        # Vector + Point is handled by Point.__radd__
        if not isinstance(other, Vector):
            return NotImplemented
        return Vector(self.x + other.x, self.y + other.y, self.z + other.z)

    def __sub__(self, other: Vector) -> Vector:
        if not isinstance(other, Vector):
            return NotImplemented
        return Vector(self.x - other.x, self.y - other.y, self.z - other.z)

    def __mul__(self, scalar: float) -> Vector:
        if not isinstance(scalar, Real):
            return NotImplemented
        return Vector(self.x * scalar, self.y * scalar, self.z * scalar)

    __rmul__ = __mul__

    def __truediv__(self, scalar: float) -> Vector:
        if not isinstance(scalar, Real):
            return NotImplemented
        if scalar == 0.0: raise ZeroDivisionError("Vector division by zero.")
        return Vector(self.x / scalar, self.y / scalar, self.z / scalar)

    def __neg__(self) -> Vector:
        return Vector(-self.x, -self.y, -self.z)

    def magnitude(self) -> float:
        return to_f32(math.sqrt(self.x ** 2 + self.y ** 2 + self.z ** 2))

    def normalize(self) -> Vector:
        mag = self.magnitude()
        if mag == 0.0: return Vector.zero()
        return self / mag

    def dot(self, other: Vector) -> float:
        return to_f32(self.x * other.x + self.y * other.y + self.z * other.z)

    def cross(self, other: Vector) -> Vector:
        return Vector(
            self.y * other.z - self.z * other.y,
            self.z * other.x - self.x * other.z,
            self.x * other.y - self.y * other.x
        )

    def as_tuple(self) -> Tuple:
        return vector(self.x, self.y, self.z)

    def to_array(self) -> npt.NDArray[np.float32]:
        return np.array([self.x, self.y, self.z], dtype=np.float32)


@dataclass(frozen=True, eq=False)
class Point:
    """A location in 3D space."""
    x: float
    y: float
    z: float = 0.0

    def __post_init__(self) -> None:
        for name in ("x", "y", "z"):
            object.__setattr__(self, name, to_f32(getattr(self, name)))

    def __eq__(self, other: object) -> bool:
        if not isinstance(other, Point):
            return NotImplemented
        return (
            approximately_equal(self.x, other.x)
            and approximately_equal(self.y, other.y)
            and approximately_equal(self.z, other.z)
        )

    def __add__(self, other: Vector) -> Point:
        # Point + Vector = Point (Translation)
        if isinstance(other, Vector):
            return Point(self.x + other.x, self.y + other.y, self.z + other.z)
        if isinstance(other, Point):
            raise TypeError("Cannot add two Points; add a Vector to a Point instead.")
        return NotImplemented

    def __radd__(self, other: Vector) -> Point:
        if isinstance(other, Vector):
            return self + other
        return NotImplemented

    def __sub__(self, other: Union[Vector, Point]) -> Union[Vector, Point]:
        # Point - Point = Vector (Direction)
        if isinstance(other, Point):
            return Vector(self.x - other.x, self.y - other.y, self.z - other.z)
        # Point - Vector = Point (Inverse translation)
        if isinstance(other, Vector):
            return Point(self.x - other.x, self.y - other.y, self.z - other.z)
        return NotImplemented

    def __rsub__(self, other: object) -> Point:
        if isinstance(other, Vector):
            raise TypeError("Cannot subtract a Point from a Vector.")
        return NotImplemented

    def distance_to(self, other: Point) -> float:
        return (self - other).magnitude()

    def as_tuple(self) -> Tuple:
        return point(self.x, self.y, self.z)

    def to_array(self) -> npt.NDArray[np.float32]:
        return np.array([self.x, self.y, self.z], dtype=np.float32)
