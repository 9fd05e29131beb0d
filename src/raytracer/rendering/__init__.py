"""
The RENDERING layer holds pixel values and the raster they are written into.
"""
from raytracer.rendering.colors import Color, BLACK, WHITE, RED, GREEN, BLUE
from raytracer.rendering.canvas import Canvas, CanvasError, CanvasSizeError, PixelPositionOutOfBounds

__all__ = [
    "Color",
    "BLACK",
    "WHITE",
    "RED",
    "GREEN",
    "BLUE",
    "Canvas",
    "CanvasError",
    "CanvasSizeError",
    "PixelPositionOutOfBounds",
]
