"""Linear RGB colors and their conversion to display bytes."""

GAMMA = 1.5


def encode_gamma(linear: float) -> float:
    return linear ** (1.0 / GAMMA)


def decode_gamma(encoded: float) -> float:
    return encoded ** GAMMA


def clamp(c: float) -> float:
    """Clamp a color channel value to the 0-1 range."""
    return min(1.0, max(0.0, c))


class Color:
    """Linear-space RGB triple.

    Channels may leave the 0-1 range while light is being accumulated;
    :meth:`clamp` brings them back before display.
    """

    def __init__(self, red: float, green: float, blue: float) -> None:
        self.red = float(red)
        self.green = float(green)
        self.blue = float(blue)

    @classmethod
    def black(cls) -> "Color":
        return cls(0.0, 0.0, 0.0)

    @classmethod
    def white(cls) -> "Color":
        return cls(1.0, 1.0, 1.0)

    def add(self, other: "Color") -> "Color":
        """Return the component-wise sum with *other*."""
        return Color(self.red + other.red,
                     self.green + other.green,
                     self.blue + other.blue)

    def mult(self, other: "Color") -> "Color":
        """Return the component-wise product with *other* (tinting)."""
        return Color(self.red * other.red,
                     self.green * other.green,
                     self.blue * other.blue)

    def s_mult(self, other: float) -> "Color":
        """Return the color scaled by *other*."""
        return Color(self.red * other, self.green * other, self.blue * other)

    def clamp(self) -> "Color":
        return Color(clamp(self.red), clamp(self.green), clamp(self.blue))

    def to_display(self) -> tuple[int, int, int]:
        """Return gamma-encoded 8-bit channels for writing into an image."""
        return (
            round(encode_gamma(clamp(self.red)) * 255),
            round(encode_gamma(clamp(self.green)) * 255),
            round(encode_gamma(clamp(self.blue)) * 255),
        )

    @classmethod
    def from_display(cls, rgb, gamma_decode: bool = False) -> "Color":
        """Build a color from 8-bit channels.

        Args:
            rgb: An RGB or RGBA sequence in the 0-255 range. Alpha is ignored.
            gamma_decode: Undo :func:`encode_gamma`. Texture sampling leaves
                this off and treats image pixels as linear samples.
        """
        red, green, blue = (c / 255.0 for c in tuple(rgb)[:3])
        if gamma_decode:
            red, green, blue = decode_gamma(red), decode_gamma(green), decode_gamma(blue)
        return cls(red, green, blue)

    def __iter__(self):
        yield self.red
        yield self.green
        yield self.blue

    def __eq__(self, other) -> bool:
        if not isinstance(other, Color):
            return NotImplemented
        return (self.red, self.green, self.blue) == (other.red, other.green, other.blue)

    def __repr__(self) -> str:
        return f"Color({self.red!r}, {self.green!r}, {self.blue!r})"
