"""Pytest configuration and shared fixtures."""

import pytest

from raycaster.color import Color
from raycaster.geometry import Plane, Sphere
from raycaster.lights import DirectionalLight
from raycaster.material import Material, Reflective
from raycaster.scene import Scene
from raycaster.texture import SolidColor
from raycaster.vector import Point, Vec3


@pytest.fixture
def white_material():
    """Diffuse white material with unit albedo."""
    return Material(SolidColor(Color.white()), 1.0)


@pytest.fixture
def green_sphere_scene():
    """One diffuse green sphere lit from above, reflections disabled."""
    sphere = Sphere(Point(0, 0, -5), 1.0,
                    Material(SolidColor(Color(0.2, 0.8, 0.2)), 1.0))
    light = DirectionalLight(Vec3(0, -1, 0), Color.white(), 1.0)
    return Scene(800, 600, 90.0, [sphere], [light], bias=0.1, max_recursion_depth=0)


@pytest.fixture
def small_scene():
    """Small frame with a green sphere above a grey floor."""
    sphere = Sphere(Point(0, 0, -5), 1.0,
                    Material(SolidColor(Color(0.2, 0.8, 0.2)), 1.0, Reflective(0.1)))
    floor = Plane(Point(0, -2, 0), Vec3(0, -1, 0),
                  Material(SolidColor(Color(0.5, 0.5, 0.5)), 1.0))
    light = DirectionalLight(Vec3(0, -1, -1), Color.white(), 5.0)
    return Scene(40, 30, 90.0, [sphere, floor], [light], bias=0.1, max_recursion_depth=3)
