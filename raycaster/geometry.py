"""Intersectable primitives.

Every element exposes ``intersect(ray)``, ``surface_normal(hit_point)`` and
``texture_coords(hit_point)``, and carries a ``m`` material.
"""

import math

from raycaster.errors import ConfigurationError
from raycaster.material import Material
from raycaster.texture import TextureCoords
from raycaster.vector import Point, Ray, Vec3

# Rays whose direction is closer than this to the plane (or facing its back)
# never hit it.
PLANE_EPSILON = 1e-6

Z_AXIS = Vec3(0.0, 0.0, 1.0)
Y_AXIS = Vec3(0.0, 1.0, 0.0)


class Intersection:
    """Stores ray intersection information.

    ``body`` is the element that was hit, shared with the scene that owns it.
    """

    def __init__(self, t: float, body) -> None:
        if not math.isfinite(t):
            raise ValueError(f"intersection distance must be finite, got {t}")
        self.t = t
        self.body = body

    def __repr__(self) -> str:
        return f"Intersection(t={self.t!r}, body={self.body!r})"


class Sphere:
    """Simple sphere primitive."""

    def __init__(self, c: Point, r: float, m: Material) -> None:
        """Create a sphere.

        Args:
            c: Centre of the sphere.
            r: Radius of the sphere.
            m: Material applied to the surface.
        """
        if r <= 0:
            raise ConfigurationError(f"sphere radius must be positive, got {r}")
        self.c = c
        self.r = r
        self.m = m

    def intersect(self, ray: Ray) -> float | None:
        """Return the distance along *ray* to this sphere, or ``None``.

        When the ray starts inside the sphere the smaller root is negative
        and is still returned.
        """
        to_centre = self.c.sub(ray.o)
        t_ca = to_centre.dot(ray.d)
        d2 = to_centre.sqMag() - t_ca * t_ca
        r2 = self.r * self.r
        if d2 > r2:
            return None
        t_hc = math.sqrt(r2 - d2)
        t0 = t_ca - t_hc
        t1 = t_ca + t_hc
        if t0 < 0 and t1 < 0:
            return None
        return min(t0, t1)

    def surface_normal(self, hit_point: Point) -> Vec3:
        return hit_point.sub(self.c).norm()

    def texture_coords(self, hit_point: Point) -> TextureCoords:
        """Spherical UV mapping around the centre."""
        hit = hit_point.sub(self.c)
        x = (1.0 + math.atan2(hit.z, hit.x) / math.pi) * 0.5
        # Clamp against rounding pushing the ratio just past +/-1.
        y = math.acos(max(-1.0, min(1.0, hit.y / self.r))) / math.pi
        return TextureCoords(x, y)

    def __repr__(self) -> str:
        return f"Sphere({self.c!r}, {self.r!r})"


class Plane:
    """Infinite plane primitive, visible from the side its normal points away from."""

    def __init__(self, p: Point, n: Vec3, m: Material) -> None:
        """Create a plane defined by point ``p`` and normal ``n``."""
        self.p = p
        self.n = n.norm()
        self.m = m

    def intersect(self, ray: Ray) -> float | None:
        denominator = self.n.dot(ray.d)
        if denominator > PLANE_EPSILON:
            t = self.p.sub(ray.o).dot(self.n) / denominator
            if t >= 0.0:
                return t
        return None

    def surface_normal(self, hit_point: Point) -> Vec3:
        # Faces the incoming rays, opposite to the stored normal.
        return self.n.neg()

    def texture_coords(self, hit_point: Point) -> TextureCoords:
        """Project the hit point onto two tangent axes of the plane.

        The axes are not normalized, so the texture scale depends on the
        normal's orientation.
        """
        x_axis = self.n.cross(Z_AXIS)
        if x_axis.is_zero():
            x_axis = self.n.cross(Y_AXIS)
        y_axis = self.n.cross(x_axis)
        hit = hit_point.sub(self.p)
        return TextureCoords(hit.dot(x_axis), hit.dot(y_axis))

    def __repr__(self) -> str:
        return f"Plane({self.p!r}, {self.n!r})"
