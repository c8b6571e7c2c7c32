"""Light sources."""

import math

from raycaster.color import Color
from raycaster.vector import Point, Vec3


class DirectionalLight:
    """Light arriving from infinitely far away along ``direction``."""

    def __init__(self, direction: Vec3, color: Color, intensity: float) -> None:
        """Create a directional light; ``direction`` is normalized here."""
        self.direction = direction.norm()
        self.color = color
        self.intensity = intensity

    def direction_to(self, hit_point: Point) -> Vec3:
        """Return the unit vector from *hit_point* toward the light."""
        return self.direction.neg()

    def intensity_at(self, hit_point: Point) -> float:
        return self.intensity

    def distance_to(self, hit_point: Point) -> float:
        return math.inf

    def __repr__(self) -> str:
        return f"DirectionalLight({self.direction!r}, {self.color!r}, {self.intensity!r})"


class PointLight:
    """Point light source with inverse-square falloff."""

    def __init__(self, p: Point, color: Color, intensity: float) -> None:
        self.p = p
        self.color = color
        self.intensity = intensity

    def direction_to(self, hit_point: Point) -> Vec3:
        """Return the unit vector from *hit_point* toward the light."""
        return self.p.sub(hit_point).norm()

    def intensity_at(self, hit_point: Point) -> float:
        """Return the intensity reaching *hit_point*.

        A light sitting exactly on the point is treated as non-physical and
        contributes nothing.
        """
        r2 = self.p.sub(hit_point).sqMag()
        if r2 == 0:
            return 0.0
        return self.intensity / (4.0 * math.pi * r2)

    def distance_to(self, hit_point: Point) -> float:
        return self.p.sub(hit_point).mag()

    def __repr__(self) -> str:
        return f"PointLight({self.p!r}, {self.color!r}, {self.intensity!r})"
