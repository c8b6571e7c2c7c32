"""Vector algebra and rays.

Points and directions share the same :class:`Vec3` representation; the
``Point`` alias only documents the role a value plays.
"""

from raycaster.errors import ConfigurationError


class Vec3:
    """Simple 3D vector with basic arithmetic helpers."""

    def __init__(self, x: float, y: float, z: float) -> None:
        """Create a new vector from components."""
        self.x = float(x)
        self.y = float(y)
        self.z = float(z)

    @classmethod
    def zero(cls) -> "Vec3":
        return cls(0.0, 0.0, 0.0)

    def dot(self, other: "Vec3") -> float:
        """Return the dot product with another vector."""
        return self.x * other.x + self.y * other.y + self.z * other.z

    def cross(self, other: "Vec3") -> "Vec3":
        """Return the cross product ``self x other``."""
        return Vec3(
            self.y * other.z - self.z * other.y,
            self.z * other.x - self.x * other.z,
            self.x * other.y - self.y * other.x,
        )

    def sqMag(self) -> float:
        """Return the squared magnitude of the vector."""
        return self.x**2 + self.y**2 + self.z**2

    def mag(self) -> float:
        """Return the magnitude of the vector."""
        return self.sqMag()**0.5

    def norm(self) -> "Vec3":
        """Return a normalized copy of the vector.

        Raises:
            ConfigurationError: if the vector has zero length.
        """
        m = self.mag()
        if m == 0:
            raise ConfigurationError("cannot normalize a zero-length vector")
        return Vec3(self.x / m, self.y / m, self.z / m)

    def is_zero(self) -> bool:
        return self.x == 0 and self.y == 0 and self.z == 0

    def s_mult(self, other: float) -> "Vec3":
        """Return the vector scaled by *other*."""
        return Vec3(self.x * other, self.y * other, self.z * other)

    def s_div(self, other: float) -> "Vec3":
        """Return the vector divided by *other*."""
        return Vec3(self.x / other, self.y / other, self.z / other)

    def add(self, other: "Vec3") -> "Vec3":
        """Return the sum of this vector and *other*."""
        return Vec3(self.x + other.x, self.y + other.y, self.z + other.z)

    def sub(self, other: "Vec3") -> "Vec3":
        """Return the difference between this vector and *other*."""
        return Vec3(self.x - other.x, self.y - other.y, self.z - other.z)

    def neg(self) -> "Vec3":
        """Return the negated vector."""
        return Vec3(-self.x, -self.y, -self.z)

    def __iter__(self):
        yield self.x
        yield self.y
        yield self.z

    def __eq__(self, other) -> bool:
        if not isinstance(other, Vec3):
            return NotImplemented
        return (self.x, self.y, self.z) == (other.x, other.y, other.z)

    def __repr__(self) -> str:
        return f"Vec3({self.x!r}, {self.y!r}, {self.z!r})"


Point = Vec3


class Ray:
    """Ray with origin ``o`` and direction ``d``.

    The direction is expected to be unit length; callers normalize it.
    """

    def __init__(self, o: Point, d: Vec3) -> None:
        self.o = o
        self.d = d

    def at(self, t: float) -> Point:
        """Return the point reached after travelling ``t`` along the ray."""
        return self.o.add(self.d.s_mult(t))

    def __repr__(self) -> str:
        return f"Ray(o={self.o!r}, d={self.d!r})"
