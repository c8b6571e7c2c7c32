"""Ray generation, shading and the frame loop.

Pixels are shaded with a Lambertian term per light, hard shadows from a
shadow ray per light, and mirror reflection traced recursively up to the
scene's ``max_recursion_depth``.
"""

import logging
import math
import time

from PIL import Image

from raycaster.color import Color
from raycaster.errors import ConfigurationError
from raycaster.geometry import Intersection
from raycaster.material import Reflective
from raycaster.scene import Scene
from raycaster.texture import TextureCoords
from raycaster.vector import Point, Ray, Vec3

logger = logging.getLogger(__name__)


def create_prime_ray(x: int, y: int, scene: Scene) -> Ray:
    """Return the primary ray through the centre of pixel ``(x, y)``.

    The camera sits at the origin looking down ``-z``. Unless
    ``scene.fov_scaling`` is set the field of view does not change the
    sensor size.

    Raises:
        ConfigurationError: if the scene is not wider than it is tall.
    """
    if scene.width <= scene.height:
        raise ConfigurationError(
            f"width must be greater than height, got {scene.width}x{scene.height}")
    fov_adj = math.tan(math.radians(scene.fov) / 2.0)
    aspect_ratio = scene.width / scene.height
    sensor_x = ((x + 0.5) / scene.width * 2.0 - 1.0) * aspect_ratio
    sensor_y = 1.0 - (y + 0.5) / scene.height * 2.0
    if scene.fov_scaling:
        sensor_x *= fov_adj
        sensor_y *= fov_adj
    return Ray(Point.zero(), Vec3(sensor_x, sensor_y, -1.0).norm())


def reflection_ray(normal: Vec3, direction: Vec3, hit_point: Point, bias: float) -> Ray:
    """Mirror ``direction`` about ``normal``, starting just off the surface."""
    reflected = direction.sub(normal.s_mult(2.0 * direction.dot(normal)))
    return Ray(hit_point.add(normal.s_mult(bias)), reflected)


def diffuse_shading(scene: Scene, intersection: Intersection, hit_point: Point,
                    surface_normal: Vec3, texture_coords: TextureCoords) -> Color:
    """Sum the direct light reaching ``hit_point`` from every light.

    Lights blocked by an element closer than the light itself contribute
    nothing. The result is clamped to 0-1.
    """
    material = intersection.body.m
    surface_color = material.texture.sample(texture_coords)
    reflected_light = material.albedo / math.pi
    shadow_origin = hit_point.add(surface_normal.s_mult(scene.bias))

    combined = Color.black()
    for light in scene.lights:
        light_distance = light.distance_to(hit_point)
        if light_distance == 0:
            logger.debug("Skipping %r: light coincides with hit point", light)
            continue
        direction_light = light.direction_to(hit_point)

        shadow = scene.trace(Ray(shadow_origin, direction_light))
        is_lit = shadow is None or shadow.t > light_distance
        intensity = light.intensity_at(hit_point) if is_lit else 0.0

        light_power = max(0.0, surface_normal.dot(direction_light)) * intensity
        contribution = light.color.s_mult(light_power * reflected_light)
        combined = combined.add(surface_color.mult(contribution))

    return combined.clamp()


def shade(scene: Scene, ray: Ray, intersection: Intersection, depth: int) -> Color:
    """Return the color seen along ``ray`` at ``intersection``."""
    body = intersection.body
    hit_point = ray.at(intersection.t)
    surface_normal = body.surface_normal(hit_point)
    texture_coords = body.texture_coords(hit_point)

    color = diffuse_shading(scene, intersection, hit_point, surface_normal, texture_coords)

    surface = body.m.surface
    if isinstance(surface, Reflective):
        reflection = reflection_ray(surface_normal, ray.d, hit_point, scene.bias)
        color = color.s_mult(1.0 - surface.reflectivity)
        color = color.add(
            raycast(scene, reflection, depth + 1).s_mult(surface.reflectivity))
    return color


def raycast(scene: Scene, ray: Ray, depth: int = 0) -> Color:
    """Return the color seen along ``ray``.

    ``depth`` counts reflection bounces. Rays past
    ``scene.max_recursion_depth`` bounces and rays that hit nothing are
    black.
    """
    if depth > scene.max_recursion_depth:
        return Color.black()
    intersection = scene.trace(ray)
    if intersection is None:
        return Color.black()
    return shade(scene, ray, intersection, depth)


def render_scene(scene: Scene) -> Image.Image:
    """Render every pixel of ``scene`` into a new RGB image."""
    logger.info("Rendering %dx%d frame: %d elements, %d lights, max depth %d",
                scene.width, scene.height, len(scene.elements),
                len(scene.lights), scene.max_recursion_depth)
    start = time.perf_counter()

    im = Image.new("RGB", (scene.width, scene.height))
    out: list[tuple[int, int, int]] = []

    for y in range(scene.height):
        for x in range(scene.width):
            ray = create_prime_ray(x, y, scene)
            out.append(raycast(scene, ray, 0).to_display())
        if y % 100 == 0:
            logger.debug("Rendered row %d/%d", y, scene.height)

    im.putdata(out)
    logger.info("Frame rendered in %.2f seconds", time.perf_counter() - start)
    return im


def save_image(im: Image.Image, path) -> None:
    """Encode ``im`` to ``path``; the format follows the file extension."""
    logger.info("Writing image to %s", path)
    im.save(path)
