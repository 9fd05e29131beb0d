"""Tests for the projectile simulation step."""
from raytracer.algebra import Point, Vector
from raytracer.scene import Environment, Projectile, tick


def test_tick_moves_projectile():
    p = Projectile(position=Point(0, 1, 0), velocity=Vector(1, 1, 0))
    env = Environment(gravity=Vector(0, -0.1, 0), wind=Vector(-0.01, 0, 0))

    result = tick(p, env)

    assert result.position == Point(1, 2, 0)
    assert result.velocity == Vector(0.99, 0.9, 0)


def test_tick_does_not_mutate_input():
    p = Projectile(position=Point(0, 1, 0), velocity=Vector(1, 1, 0))
    env = Environment(gravity=Vector(0, -0.1, 0), wind=Vector(0, 0, 0))
    tick(p, env)
    assert p.position == Point(0, 1, 0)


def test_has_landed():
    assert Projectile(position=Point(0, 0, 0), velocity=Vector.zero()).has_landed
    assert not Projectile(position=Point(0, 0.5, 0), velocity=Vector.zero()).has_landed
