"""Scene container: elements, lights and camera parameters."""

import logging
import math

from raycaster.errors import ConfigurationError
from raycaster.geometry import Intersection
from raycaster.vector import Ray

logger = logging.getLogger(__name__)


def _require_int(name: str, value) -> None:
    if isinstance(value, bool) or not isinstance(value, int):
        raise ConfigurationError(f"{name} must be an integer, got {value!r}")


def _require_number(name: str, value) -> None:
    if isinstance(value, bool) or not isinstance(value, (int, float)):
        raise ConfigurationError(f"{name} must be a number, got {value!r}")


class Scene:
    """Read-only description of everything needed to render a frame.

    Args:
        width: Output width in pixels, must exceed ``height``.
        height: Output height in pixels.
        fov: Horizontal field of view in degrees.
        elements: Intersectable objects, searched in order.
        lights: Light sources, accumulated in order.
        bias: Offset along the surface normal for secondary ray origins.
        max_recursion_depth: Number of reflection bounces followed; 0
            disables reflection, reflected colors then count as black.
        fov_scaling: Apply ``tan(fov / 2)`` to the sensor coordinates.
    """

    def __init__(self, width: int, height: int, fov: float, elements=(),
                 lights=(), bias: float = 0.1, max_recursion_depth: int = 10,
                 fov_scaling: bool = False) -> None:
        _require_int("width", width)
        _require_int("height", height)
        _require_int("max_recursion_depth", max_recursion_depth)
        _require_number("fov", fov)
        _require_number("bias", bias)
        if width <= 0 or height <= 0:
            raise ConfigurationError(
                f"image size must be positive, got {width}x{height}")
        if width <= height:
            raise ConfigurationError(
                f"width must be greater than height, got {width}x{height}")
        # fov only shapes the camera when it scales the sensor.
        if fov_scaling and not 0.0 < fov < 180.0:
            raise ConfigurationError(f"fov must lie in (0, 180) degrees, got {fov}")
        if bias <= 0:
            raise ConfigurationError(f"bias must be positive, got {bias}")
        if max_recursion_depth < 0:
            raise ConfigurationError(
                f"max_recursion_depth must not be negative, got {max_recursion_depth}")
        self.width = width
        self.height = height
        self.fov = fov
        self.elements = tuple(elements)
        self.lights = tuple(lights)
        self.bias = bias
        self.max_recursion_depth = max_recursion_depth
        self.fov_scaling = fov_scaling

    def trace(self, ray: Ray) -> Intersection | None:
        """Return the closest intersection of ``ray`` with any element."""
        nearest = None
        for body in self.elements:
            t = body.intersect(ray)
            if t is None:
                continue
            if not math.isfinite(t):
                logger.debug("Discarding non-finite hit on %r", body)
                continue
            if nearest is None or t < nearest.t:
                nearest = Intersection(t, body)
        return nearest

    def __repr__(self) -> str:
        return (f"Scene({self.width}x{self.height}, fov={self.fov}, "
                f"{len(self.elements)} elements, {len(self.lights)} lights)")
