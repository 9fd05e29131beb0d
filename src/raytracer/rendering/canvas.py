"""
Canvas
======
A fixed-size raster of Colors addressed by (x, y) = (column, row).

Storage is a C-contiguous float32 array of shape (height, width, 3), so the
cell for (x, y) sits at flat offset `y * width + x`. Every cell starts black.

A canvas has exactly one writer at a time. Parallel renderers must partition
it into disjoint regions or serialize their writes.
"""
from __future__ import annotations

import logging
import operator
from typing import Iterator, TYPE_CHECKING

import numpy as np

from raytracer.rendering.colors import Color

if TYPE_CHECKING:
    import numpy.typing as npt

logger = logging.getLogger(__name__)

_CHANNELS = 3
_CELL_BYTES = _CHANNELS * np.dtype(np.float32).itemsize
_MAX_CELLS = np.iinfo(np.intp).max // _CELL_BYTES


class CanvasError(Exception):
    """Base class for canvas failures."""


class CanvasSizeError(CanvasError, ValueError):
    """The requested dimensions cannot be allocated."""


class PixelPositionOutOfBounds(CanvasError, IndexError):
    """
    A pixel coordinate lies outside the canvas.

    Attributes:
        axis: "x" or "y".
        value: The offending coordinate.
        limit: The bound it violated (0 for negatives, width/height otherwise).
    """
    def __init__(self, axis: str, value: int, limit: int) -> None:
        self.axis = axis
        self.value = value
        self.limit = limit
        if value < 0:
            message = f"{axis}: {value} < {limit}"
        else:
            message = f"{axis}: {value} >= {limit}"
        super().__init__(message)


class Canvas:
    """
    A width x height grid of pixels.
    """
    def __init__(self, width: int, height: int) -> None:
        """
        Allocate the canvas with every pixel set to black.

        Args:
            width: Number of columns.
            height: Number of rows.

        Raises:
            TypeError: If a dimension is not an integer.
            CanvasSizeError: If a dimension is negative or the buffer is not addressable.
        """
        width = operator.index(width)
        height = operator.index(height)
        if width < 0 or height < 0:
            raise CanvasSizeError(f"Canvas dimensions must be non-negative, got {width}x{height}.")
        if max(width, height) > _MAX_CELLS or width * height > _MAX_CELLS:
            raise CanvasSizeError(f"Canvas of {width}x{height} pixels exceeds the addressable size.")

        try:
            # All zeros is BLACK
            buffer = np.zeros((height, width, _CHANNELS), dtype=np.float32)
        except (MemoryError, ValueError) as e:
            raise CanvasSizeError(f"Could not allocate a canvas of {width}x{height} pixels.") from e

        self._width = width
        self._height = height
        self._buffer: npt.NDArray[np.float32] = buffer
        logger.debug(f"Created canvas {width}x{height}")

    def __repr__(self) -> str:
        return f"{self.__class__.__name__}(width={self._width}, height={self._height})"

    def __len__(self) -> int:
        return self._width * self._height

    @property
    def width(self) -> int:
        return self._width

    @property
    def height(self) -> int:
        return self._height

    @property
    def size(self) -> tuple[int, int]:
        return self._width, self._height

    def _check_bounds(self, x: int, y: int) -> tuple[int, int]:
        x = operator.index(x)
        y = operator.index(y)
        if x < 0:
            raise PixelPositionOutOfBounds("x", x, 0)
        if x >= self._width:
            raise PixelPositionOutOfBounds("x", x, self._width)
        if y < 0:
            raise PixelPositionOutOfBounds("y", y, 0)
        if y >= self._height:
            raise PixelPositionOutOfBounds("y", y, self._height)
        return x, y

    def set_pixel(self, x: int, y: int, color: Color) -> None:
        """
        Overwrite the pixel at column `x`, row `y`.

        Raises:
            PixelPositionOutOfBounds: If (x, y) lies outside the canvas.
        """
        x, y = self._check_bounds(x, y)
        self._buffer[y, x] = color.to_array()
        logger.debug(f"Set pixel ({x}, {y}) to {color}")

    def get_pixel(self, x: int, y: int) -> Color:
        """
        Read the pixel at column `x`, row `y`.

        Raises:
            PixelPositionOutOfBounds: If (x, y) lies outside the canvas.
        """
        x, y = self._check_bounds(x, y)
        return Color.from_array(self._buffer[y, x])

    def fill(self, color: Color) -> None:
        self._buffer[:, :] = color.to_array()

    def pixels(self) -> Iterator[tuple[int, int, Color]]:
        """Yield (x, y, color) for every pixel, row by row."""
        for y in range(self._height):
            for x in range(self._width):
                yield x, y, Color.from_array(self._buffer[y, x])

    def to_array(self) -> npt.NDArray[np.float32]:
        """Copy of the pixel buffer, shape (height, width, 3)."""
        return self._buffer.copy()
