"""
Configuration & Defaults
========================
This module serves as the central registry for global constants used by the
outer layer (program startup, logging and the projectile demo).

Exports:
    DEFAULT_LOG_FORMAT (str): Format of every log record.
    DEFAULT_DATE_FORMAT (str): Timestamp format of every log record.
    DEFAULT_MAX_TICKS (int): Safety limit for the projectile simulation.
    SimulationConfig: Initial conditions of the projectile demo.
"""
from __future__ import annotations

from dataclasses import dataclass, field

from raytracer.algebra.primitives import Point, Vector

DEFAULT_LOG_FORMAT: str = '%(asctime)s - %(name)s - %(levelname)s - %(message)s'
DEFAULT_DATE_FORMAT: str = '%H:%M:%S'
DEFAULT_MAX_TICKS: int = 10_000


@dataclass
class SimulationConfig:
    start: Point = field(default_factory=lambda: Point(0.0, 1.0, 0.0))
    velocity: Vector = field(default_factory=lambda: Vector(1.0, 1.0, 0.0).normalize())
    gravity: Vector = field(default_factory=lambda: Vector(0.0, -0.1, 0.0))
    wind: Vector = field(default_factory=lambda: Vector(-0.01, 0.0, 0.0))
    max_ticks: int = DEFAULT_MAX_TICKS

    def with_speed(self, speed: float) -> SimulationConfig:
        """Copy of this config with the launch velocity scaled to `speed`."""
        return SimulationConfig(
            start=self.start,
            velocity=self.velocity.normalize() * speed,
            gravity=self.gravity,
            wind=self.wind,
            max_ticks=self.max_ticks,
        )
