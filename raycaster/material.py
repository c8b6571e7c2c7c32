"""Surface properties for renderable objects."""

from raycaster.errors import ConfigurationError


class Diffuse:
    """Surface that only scatters direct light."""

    def __repr__(self) -> str:
        return "Diffuse()"


class Reflective:
    """Mirror-like surface.

    ``reflectivity`` blends the reflected color with the local diffuse
    color: 0 is fully diffuse, 1 a perfect mirror.
    """

    def __init__(self, reflectivity: float) -> None:
        if not 0.0 <= reflectivity <= 1.0:
            raise ConfigurationError(
                f"reflectivity must lie in [0, 1], got {reflectivity}")
        self.reflectivity = reflectivity

    def __repr__(self) -> str:
        return f"Reflective({self.reflectivity!r})"


class Material:
    """Surface properties for a renderable object."""

    def __init__(self, texture, albedo: float, surface=None) -> None:
        """Initialize a material.

        Args:
            texture: Color source with a ``sample(coords)`` method.
            albedo: Diffuse reflectance, must be positive.
            surface: :class:`Diffuse` (the default) or :class:`Reflective`.
        """
        if albedo <= 0:
            raise ConfigurationError(f"albedo must be positive, got {albedo}")
        self.texture = texture
        self.albedo = albedo
        self.surface = surface if surface is not None else Diffuse()

    def __repr__(self) -> str:
        return f"Material({self.texture!r}, {self.albedo!r}, {self.surface!r})"
