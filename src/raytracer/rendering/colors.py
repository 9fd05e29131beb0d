"""
RGB Colors
==========
Colors are unclamped: channels may exceed 1.0 or go negative while light
contributions are accumulated. Clamping belongs to image export.
"""
from __future__ import annotations

from dataclasses import dataclass
from numbers import Real
from typing import Union, TYPE_CHECKING

import numpy as np

from raytracer.algebra.utils import approximately_equal, to_f32

if TYPE_CHECKING:
    import numpy.typing as npt


@dataclass(frozen=True, eq=False)
class Color:
    """An RGB triple of single precision channels."""
    r: float
    g: float
    b: float

    def __post_init__(self) -> None:
        for name in ("r", "g", "b"):
            object.__setattr__(self, name, to_f32(getattr(self, name)))

    def __eq__(self, other: object) -> bool:
        if not isinstance(other, Color):
            return NotImplemented
        return (
            approximately_equal(self.r, other.r)
            and approximately_equal(self.g, other.g)
            and approximately_equal(self.b, other.b)
        )

    def __add__(self, other: Color) -> Color:
        if not isinstance(other, Color):
            return NotImplemented
        return Color(self.r + other.r, self.g + other.g, self.b + other.b)

    def __sub__(self, other: Color) -> Color:
        if not isinstance(other, Color):
            return NotImplemented
        return Color(self.r - other.r, self.g - other.g, self.b - other.b)

    def __mul__(self, other: Union[Color, float]) -> Color:
        # Color * Color is the Hadamard product (surface reflectance applied to light)
        if isinstance(other, Color):
            return Color(self.r * other.r, self.g * other.g, self.b * other.b)
        if isinstance(other, Real):
            return Color(self.r * other, self.g * other, self.b * other)
        return NotImplemented

    def __rmul__(self, scalar: float) -> Color:
        if not isinstance(scalar, Real):
            return NotImplemented
        return self * scalar

    def to_array(self) -> npt.NDArray[np.float32]:
        return np.array([self.r, self.g, self.b], dtype=np.float32)

    @staticmethod
    def from_array(values: npt.ArrayLike) -> Color:
        arr = np.asarray(values, dtype=np.float32)
        if arr.shape != (3,):
            raise ValueError(f"Expected shape (3,), got {arr.shape}.")
        return Color(arr[0], arr[1], arr[2])


BLACK = Color(0.0, 0.0, 0.0)
WHITE = Color(1.0, 1.0, 1.0)
RED = Color(1.0, 0.0, 0.0)
GREEN = Color(0.0, 1.0, 0.0)
BLUE = Color(0.0, 0.0, 1.0)
