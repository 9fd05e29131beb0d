"""
Application Entry Point
=======================
Configures logging and runs the projectile demo: a projectile launched from
above the ground is advanced tick by tick under gravity and wind until it
lands.

Usage:
    $ python -m raytracer --speed 2.0
"""
from __future__ import annotations

import argparse
import logging
from typing import Optional, Sequence

from raytracer.config import DEFAULT_MAX_TICKS, SimulationConfig
from raytracer.logging_config import setup_logging
from raytracer.scene import Environment, Projectile, tick

logger = logging.getLogger(__name__)


def run_simulation(config: SimulationConfig) -> int:
    """
    Advance the projectile until it reaches the ground.

    Args:
        config: Initial conditions and forces.

    Raises:
        RuntimeError: If the projectile has not landed after `config.max_ticks` ticks.

    Returns:
        The number of ticks taken.
    """
    logger.info("Initialising scene")
    projectile = Projectile(position=config.start, velocity=config.velocity)
    environment = Environment(gravity=config.gravity, wind=config.wind)

    ticks = 0
    while not projectile.has_landed:
        if ticks >= config.max_ticks:
            raise RuntimeError(f"Projectile did not land after {ticks} ticks.")
        logger.info(f"Position before tick {ticks}: {projectile.position}")
        projectile = tick(projectile, environment)
        logger.info(f"Position after tick {ticks}: {projectile.position}")
        ticks += 1

    logger.info(f"Took {ticks} ticks to reach the ground")
    return ticks


def build_parser() -> argparse.ArgumentParser:
    parser = argparse.ArgumentParser(prog="raytracer", description="Run the projectile demo")
    parser.add_argument("--verbose", "-v", action="store_true", help="Log at DEBUG level")
    parser.add_argument("--log-level", default="INFO", help="Logging level name (default: INFO)")
    parser.add_argument("--log-file", help="Also write the log to this file")
    parser.add_argument(
        "--max-ticks",
        type=int,
        default=DEFAULT_MAX_TICKS,
        help=f"Give up after this many ticks (default: {DEFAULT_MAX_TICKS})",
    )
    parser.add_argument("--speed", type=float, default=1.0, help="Launch speed (default: 1.0)")
    return parser


def main(argv: Optional[Sequence[str]] = None) -> int:
    args = build_parser().parse_args(argv)

    try:
        setup_logging(level=logging.DEBUG if args.verbose else args.log_level, log_file=args.log_file)
    except ValueError as e:
        build_parser().error(str(e))

    config = SimulationConfig(max_ticks=args.max_ticks).with_speed(args.speed)
    try:
        run_simulation(config)
    except RuntimeError as e:
        logger.error(str(e))
        return 1
    return 0


if __name__ == "__main__":
    raise SystemExit(main())
