"""Tests for ray generation, shading, reflection and the frame loop."""

import math
from types import SimpleNamespace

import pytest
from PIL import Image

from raycaster.color import Color
from raycaster.errors import ConfigurationError
from raycaster.geometry import Plane, Sphere
from raycaster.lights import DirectionalLight, PointLight
from raycaster.material import Material, Reflective
from raycaster.render import (create_prime_ray, raycast, reflection_ray,
                              render_scene, save_image)
from raycaster.scene import Scene
from raycaster.texture import SolidColor
from raycaster.vector import Point, Ray, Vec3

DOWN = Ray(Point(0, 0, 0), Vec3(0, -1, 0))


def _material(color=Color.white(), surface=None):
    # albedo pi cancels the 1/pi of the diffuse term
    return Material(SolidColor(color), math.pi, surface)


def _floor(surface=None):
    return Plane(Point(0, -1, 0), Vec3(0, -1, 0), _material(surface=surface))


def _scene(elements, lights, depth=0):
    return Scene(8, 6, 90.0, elements, lights, bias=0.1, max_recursion_depth=depth)


def _approx(color):
    return pytest.approx(tuple(color))


class TestPrimeRay:

    def test_corner_pixel(self):
        scene = Scene(800, 600, 90.0)
        ray = create_prime_ray(0, 0, scene)
        sensor_x = ((0.5 / 800) * 2 - 1) * (800 / 600)
        sensor_y = 1 - (0.5 / 600) * 2
        assert ray.o == Point(0, 0, 0)
        assert tuple(ray.d) == _approx(Vec3(sensor_x, sensor_y, -1).norm())

    def test_unit_direction_and_symmetry(self):
        scene = Scene(800, 600, 90.0)
        top_left = create_prime_ray(0, 0, scene).d
        bottom_right = create_prime_ray(799, 599, scene).d
        assert top_left.mag() == pytest.approx(1.0)
        assert (bottom_right.x, bottom_right.y) == pytest.approx((-top_left.x, -top_left.y))

    def test_fov_ignored_by_default(self):
        narrow = create_prime_ray(10, 20, Scene(80, 60, 30.0)).d
        wide = create_prime_ray(10, 20, Scene(80, 60, 120.0)).d
        assert tuple(narrow) == _approx(wide)

    def test_fov_scaling(self):
        scene = Scene(80, 60, 60.0, fov_scaling=True)
        ray = create_prime_ray(0, 0, scene)
        fov_adj = math.tan(math.radians(30.0))
        sensor_x = ((0.5 / 80) * 2 - 1) * (80 / 60) * fov_adj
        sensor_y = (1 - (0.5 / 60) * 2) * fov_adj
        assert tuple(ray.d) == _approx(Vec3(sensor_x, sensor_y, -1).norm())

    def test_requires_landscape_frame(self):
        portrait = SimpleNamespace(width=6, height=8, fov=90.0, fov_scaling=False)
        with pytest.raises(ConfigurationError):
            create_prime_ray(0, 0, portrait)


class TestReflectionRay:

    def test_mirrors_direction(self):
        d = Vec3(1, -1, 0).norm()
        ray = reflection_ray(Vec3(0, 1, 0), d, Point(2, 0, 0), 0.1)
        assert tuple(ray.d) == _approx(Vec3(1, 1, 0).norm())
        assert tuple(ray.o) == pytest.approx((2, 0.1, 0))


class TestDirectLighting:

    def test_miss_is_black(self):
        assert raycast(_scene([], [DirectionalLight(Vec3(0, -1, 0), Color.white(), 1)]), DOWN) == Color.black()

    def test_unoccluded_light_gives_full_intensity(self):
        light = DirectionalLight(Vec3(0, -1, 0), Color.white(), 0.5)
        assert tuple(raycast(_scene([_floor()], [light]), DOWN)) == pytest.approx((0.5, 0.5, 0.5))

    def test_cosine_term(self):
        light = DirectionalLight(Vec3(1, -1, 0), Color.white(), 0.5)
        expected = 0.5 * math.cos(math.radians(45))
        assert tuple(raycast(_scene([_floor()], [light]), DOWN)) == pytest.approx((expected,) * 3)

    def test_light_color_and_texture_tint(self):
        floor = Plane(Point(0, -1, 0), Vec3(0, -1, 0), _material(Color(1.0, 0.5, 0.0)))
        light = DirectionalLight(Vec3(0, -1, 0), Color(0.5, 1.0, 1.0), 1.0)
        assert tuple(raycast(_scene([floor], [light]), DOWN)) == pytest.approx((0.5, 0.5, 0.0))

    def test_lights_accumulate_and_clamp(self):
        lights = [DirectionalLight(Vec3(0, -1, 0), Color.white(), 0.75)] * 2
        assert raycast(_scene([_floor()], lights), DOWN) == Color.white()

    def test_back_facing_light_contributes_nothing(self):
        light = DirectionalLight(Vec3(0, 1, 0), Color.white(), 1.0)
        assert raycast(_scene([_floor()], [light]), DOWN) == Color.black()


class TestShadows:

    @pytest.fixture
    def blocker(self):
        return Sphere(Point(0, 5, 0), 1.0, _material())

    def test_directional_light_blocked(self, blocker):
        light = DirectionalLight(Vec3(0, -1, 0), Color.white(), 0.5)
        assert raycast(_scene([_floor(), blocker], [light]), DOWN) == Color.black()

    def test_point_light_in_front_of_blocker(self, blocker):
        light = PointLight(Point(0, 2, 0), Color.white(), 4 * math.pi * 9 * 0.5)
        assert tuple(raycast(_scene([_floor(), blocker], [light]), DOWN)) == pytest.approx((0.5, 0.5, 0.5))

    def test_point_light_behind_blocker(self, blocker):
        light = PointLight(Point(0, 10, 0), Color.white(), 1000.0)
        assert raycast(_scene([_floor(), blocker], [light]), DOWN) == Color.black()

    def test_light_on_surface_is_skipped(self):
        light = PointLight(Point(0, -1, 0), Color.white(), 10.0)
        assert raycast(_scene([_floor()], [light]), DOWN) == Color.black()


class TestReflection:

    def _mirror_scene(self, depth):
        floor = _floor(Reflective(1.0))
        ceiling = Plane(Point(0, 3, 0), Vec3(0, 1, 0), _material(Color(1, 0, 0)))
        light = PointLight(Point(0, 1, 0), Color.white(), 8 * math.pi)
        return _scene([floor, ceiling], [light], depth)

    def test_mirror_shows_reflected_surface(self):
        assert tuple(raycast(self._mirror_scene(1), DOWN)) == pytest.approx((0.5, 0, 0))

    def test_zero_depth_disables_reflection(self):
        assert raycast(self._mirror_scene(0), DOWN) == Color.black()

    def test_blend_with_diffuse(self):
        light = DirectionalLight(Vec3(0, -1, 0), Color.white(), 0.5)
        scene = _scene([_floor(Reflective(0.5))], [light], depth=3)
        assert tuple(raycast(scene, DOWN)) == pytest.approx((0.25, 0.25, 0.25))

    @pytest.mark.parametrize("depth", [0, 1, 5, 20])
    def test_recursion_bounded_by_depth(self, depth):
        floor = _floor(Reflective(1.0))
        ceiling = Plane(Point(0, 3, 0), Vec3(0, 1, 0), _material(surface=Reflective(1.0)))
        scene = _scene([floor, ceiling], [], depth)
        calls = []
        trace = scene.trace

        def counting_trace(ray):
            calls.append(ray)
            return trace(ray)

        scene.trace = counting_trace
        color = raycast(scene, DOWN)
        assert len(calls) == depth + 1
        assert all(math.isfinite(c) for c in color)


class TestRenderScene:

    def test_green_sphere_frame(self, green_sphere_scene):
        im = render_scene(green_sphere_scene)
        assert im.size == (800, 600)
        assert im.mode == "RGB"
        for corner in [(0, 0), (799, 0), (0, 599), (799, 599)]:
            assert im.getpixel(corner) == (0, 0, 0)
        # upper half of the sphere faces the overhead light
        red, green, blue = im.getpixel((400, 250))
        assert green > 0
        assert green > red
        # the centre sits just below the equator, facing away from the light
        assert im.getpixel((400, 300)) == (0, 0, 0)

    def test_save_image(self, small_scene, tmp_path):
        path = tmp_path / "frame.png"
        save_image(render_scene(small_scene), path)
        with Image.open(path) as im:
            assert im.size == (40, 30)
