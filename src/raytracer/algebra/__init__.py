"""
The ALGEBRA layer contains the geometric value types of the renderer.
It has NO knowledge of pixels or colors.
It deals with Points, Vectors and homogeneous Tuples.
"""
from raytracer.algebra.utils import EPSILON, approximately_equal
from raytracer.algebra.tuples import Tuple, TupleKind, point, vector, raw, zero
from raytracer.algebra.primitives import Point, Vector

__all__ = [
    "EPSILON",
    "approximately_equal",
    "Tuple",
    "TupleKind",
    "point",
    "vector",
    "raw",
    "zero",
    "Point",
    "Vector",
]
