from raytracer.scene.projectile import Projectile
from raytracer.scene.environment import Environment, tick

__all__ = ["Projectile", "Environment", "tick"]
