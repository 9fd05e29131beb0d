"""
Geometric algebra and raster foundations of a software 3D renderer.

Subpackages:
    algebra: Points, Vectors, homogeneous Tuples and scalar equality.
    rendering: Colors and the Canvas they are written into.
    scene: The projectile demo built on the algebra layer.
"""
