from __future__ import annotations

from dataclasses import dataclass

from raytracer.algebra.primitives import Point, Vector


@dataclass(frozen=True)
class Projectile:
    """A body in flight: where it is and where it is heading."""
    position: Point
    velocity: Vector

    @property
    def has_landed(self) -> bool:
        return self.position.y <= 0.0
