"""Tests for Scene validation and nearest-hit tracing."""

import math

import pytest

from raycaster.errors import ConfigurationError
from raycaster.geometry import Sphere
from raycaster.scene import Scene
from raycaster.vector import Point, Ray, Vec3

FORWARD = Ray(Point(0, 0, 0), Vec3(0, 0, -1))


class _NaNElement:
    def intersect(self, ray):
        return math.nan


class TestSceneValidation:

    @pytest.mark.parametrize("width, height", [(600, 600), (600, 800), (0, -1)])
    def test_width_must_exceed_height(self, width, height):
        with pytest.raises(ConfigurationError):
            Scene(width, height, 90.0)

    @pytest.mark.parametrize("kwargs", [
        {"bias": -0.1},
        {"bias": 0.0},
        {"max_recursion_depth": -1},
        {"fov": 0.0, "fov_scaling": True},
        {"fov": 180.0, "fov_scaling": True},
    ])
    def test_rejects_bad_parameters(self, kwargs):
        params = {"width": 8, "height": 6, "fov": 90.0}
        params.update(kwargs)
        with pytest.raises(ConfigurationError):
            Scene(**params)

    @pytest.mark.parametrize("kwargs", [
        {"width": "8"},
        {"width": 8.0},
        {"height": True},
        {"max_recursion_depth": 2.0},
        {"max_recursion_depth": False},
        {"fov": "90"},
        {"bias": None},
    ])
    def test_rejects_wrong_types(self, kwargs):
        params = {"width": 8, "height": 6, "fov": 90.0}
        params.update(kwargs)
        with pytest.raises(ConfigurationError):
            Scene(**params)

    @pytest.mark.parametrize("fov", [0.0, 200.0])
    def test_fov_unchecked_without_scaling(self, fov):
        assert Scene(8, 6, fov).fov == fov

    def test_zero_depth_is_valid(self):
        assert Scene(8, 6, 90.0, max_recursion_depth=0).max_recursion_depth == 0

    def test_elements_are_frozen(self, white_material):
        elements = [Sphere(Point(0, 0, -5), 1, white_material)]
        scene = Scene(8, 6, 90.0, elements)
        elements.clear()
        assert len(scene.elements) == 1


class TestTrace:

    def test_empty_scene(self):
        assert Scene(8, 6, 90.0).trace(FORWARD) is None

    def test_nearest_wins_regardless_of_order(self, white_material):
        far = Sphere(Point(0, 0, -10), 1, white_material)
        near = Sphere(Point(0, 0, -5), 1, white_material)
        for elements in ([far, near], [near, far]):
            hit = Scene(8, 6, 90.0, elements).trace(FORWARD)
            assert hit.body is near
            assert hit.t == pytest.approx(4.0)

    def test_misses_are_skipped(self, white_material):
        off_axis = Sphere(Point(5, 0, -5), 1, white_material)
        target = Sphere(Point(0, 0, -8), 1, white_material)
        hit = Scene(8, 6, 90.0, [off_axis, target]).trace(FORWARD)
        assert hit.body is target

    def test_tie_keeps_first(self, white_material):
        first = Sphere(Point(0, 0, -5), 1, white_material)
        second = Sphere(Point(0, 0, -5), 1, white_material)
        assert Scene(8, 6, 90.0, [first, second]).trace(FORWARD).body is first

    def test_non_finite_hit_is_no_hit(self, white_material):
        assert Scene(8, 6, 90.0, [_NaNElement()]).trace(FORWARD) is None
        target = Sphere(Point(0, 0, -5), 1, white_material)
        hit = Scene(8, 6, 90.0, [_NaNElement(), target]).trace(FORWARD)
        assert hit.body is target
