from __future__ import annotations

from dataclasses import dataclass

from raytracer.algebra.primitives import Vector
from raytracer.scene.projectile import Projectile


@dataclass(frozen=True)
class Environment:
    """Constant accelerations applied to a projectile on every tick."""
    gravity: Vector
    wind: Vector


def tick(projectile: Projectile, environment: Environment) -> Projectile:
    """
    Advance the projectile by one time step.

    Args:
        projectile: The current state.
        environment: Forces acting on the projectile.

    Returns:
        A new Projectile; the input is not modified.
    """
    return Projectile(
        position=projectile.position + projectile.velocity,
        velocity=projectile.velocity + environment.gravity + environment.wind,
    )
