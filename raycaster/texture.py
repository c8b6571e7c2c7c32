"""Color sources sampled at surface texture coordinates."""

from PIL import Image

from raycaster.color import Color


class TextureCoords:
    """2D surface parameterization of a hit point."""

    def __init__(self, x: float, y: float) -> None:
        self.x = x
        self.y = y

    def __repr__(self) -> str:
        return f"TextureCoords({self.x!r}, {self.y!r})"


def wrap(value: float, bound: int) -> int:
    """Map a texture coordinate onto a pixel index in ``[0, bound)``.

    The coordinate is scaled by ``bound`` and truncated toward zero, so
    coordinates outside 0-1 repeat the image.
    """
    # Python's % already folds negative values back into range.
    return int(value * bound) % bound


class SolidColor:
    """Texture returning the same color everywhere."""

    def __init__(self, color: Color) -> None:
        self.color = color

    def sample(self, coords: TextureCoords) -> Color:
        return self.color

    def __repr__(self) -> str:
        return f"SolidColor({self.color!r})"


class ImageTexture:
    """Texture backed by a decoded image, tiled over the surface."""

    def __init__(self, image: Image.Image) -> None:
        """Wrap a Pillow image.

        Args:
            image: Any Pillow image; it is converted to RGBA once here.
        """
        self.image = image.convert("RGBA")
        self.width, self.height = self.image.size

    @classmethod
    def open(cls, path) -> "ImageTexture":
        """Decode the image file at *path*."""
        with Image.open(path) as im:
            return cls(im)

    def sample(self, coords: TextureCoords) -> Color:
        img_x = wrap(coords.x, self.width)
        img_y = wrap(coords.y, self.height)
        return Color.from_display(self.image.getpixel((img_x, img_y)))
