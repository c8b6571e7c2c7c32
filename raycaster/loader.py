"""Scene description loading.

Two formats are understood:

* a plain-text format with one directive per line, as written by the scene
  editor::

      sphere x y z radius R G B
      plane x y z nx ny nz R G B
      light x y z intensity R G B
      directional dx dy dz intensity R G B

  Colors are 0-255. Blank lines and ``#`` comments are ignored. Spheres get
  a slightly reflective white-albedo material, planes a diffuse one.

* JSON, a mapping holding the camera parameters plus ``elements`` and
  ``lights`` lists (see :func:`scene_from_dict`).
"""

import json
import logging
from pathlib import Path

from raycaster import config
from raycaster.color import Color
from raycaster.errors import RaycasterError, SceneFormatError
from raycaster.geometry import Plane, Sphere
from raycaster.lights import DirectionalLight, PointLight
from raycaster.material import Diffuse, Material, Reflective
from raycaster.scene import Scene
from raycaster.texture import ImageTexture, SolidColor
from raycaster.vector import Point, Vec3

logger = logging.getLogger(__name__)

TEXT_SPHERE_REFLECTIVITY = 0.1
TEXT_ALBEDO = 1.0

_FIELD_COUNTS = {
    "sphere": 7,
    "plane": 9,
    "light": 7,
    "directional": 7,
}


def _camera_params(overrides: dict, data: dict | None = None) -> dict:
    """Merge camera parameters: explicit overrides, then *data*, then config."""
    data = data or {}
    defaults = {
        "width": config.WIDTH,
        "height": config.HEIGHT,
        "fov": config.FOV,
        "bias": config.BIAS,
        "max_recursion_depth": config.MAX_DEPTH,
        "fov_scaling": config.FOV_SCALING,
    }
    params = {}
    for key, default in defaults.items():
        if overrides.get(key) is not None:
            params[key] = overrides[key]
        else:
            params[key] = data.get(key, default)
    unknown = set(overrides) - set(defaults)
    if unknown:
        raise TypeError(f"unexpected scene parameters: {', '.join(sorted(unknown))}")
    return params


def _byte_color(values) -> Color:
    return Color(*(v / 255.0 for v in values))


def parse_scene_text(text: str, **overrides) -> Scene:
    """Build a scene from the line-based text format.

    Args:
        text: Scene description.
        **overrides: Camera parameters (``width``, ``height``, ``fov``,
            ``bias``, ``max_recursion_depth``, ``fov_scaling``); missing
            ones come from :mod:`raycaster.config`.
    """
    elements = []
    lights = []
    for lineno, raw in enumerate(text.splitlines(), start=1):
        line = raw.split("#", 1)[0].strip()
        if not line:
            continue
        keyword, *fields = line.split()
        keyword = keyword.lower()
        if keyword not in _FIELD_COUNTS:
            raise SceneFormatError(f"unknown directive {keyword!r}", lineno)
        if len(fields) != _FIELD_COUNTS[keyword]:
            raise SceneFormatError(
                f"{keyword} expects {_FIELD_COUNTS[keyword]} values, got {len(fields)}",
                lineno)
        try:
            values = [float(f) for f in fields]
        except ValueError as e:
            raise SceneFormatError(str(e), lineno) from e

        try:
            if keyword == "sphere":
                material = Material(SolidColor(_byte_color(values[4:7])), TEXT_ALBEDO,
                                    Reflective(TEXT_SPHERE_REFLECTIVITY))
                elements.append(Sphere(Point(*values[0:3]), values[3], material))
            elif keyword == "plane":
                material = Material(SolidColor(_byte_color(values[6:9])), TEXT_ALBEDO)
                elements.append(Plane(Point(*values[0:3]), Vec3(*values[3:6]), material))
            elif keyword == "light":
                lights.append(PointLight(Point(*values[0:3]), _byte_color(values[4:7]),
                                         values[3]))
            else:
                lights.append(DirectionalLight(Vec3(*values[0:3]),
                                               _byte_color(values[4:7]), values[3]))
        except RaycasterError as e:
            raise SceneFormatError(str(e), lineno) from e

    if not lights:
        logger.warning("Scene declares no lights; it will render black")
    return Scene(elements=elements, lights=lights, **_camera_params(overrides))


def _require_mapping(data, what: str) -> None:
    if not isinstance(data, dict):
        raise SceneFormatError(f"{what} must be a JSON object, got {data!r}")


def _require_list(data, key: str) -> list:
    value = data.get(key, [])
    if not isinstance(value, list):
        raise SceneFormatError(f"{key!r} must be a list")
    return value


def _vec(data, key: str) -> Vec3:
    try:
        x, y, z = data[key]
        return Vec3(x, y, z)
    except KeyError as e:
        raise SceneFormatError(f"missing {key!r}") from e
    except (TypeError, ValueError) as e:
        raise SceneFormatError(f"{key!r} must be a list of three numbers") from e


def _color(data, key: str = "color") -> Color:
    if key not in data:
        raise SceneFormatError(f"missing {key!r}")
    try:
        red, green, blue = data[key]
        return Color(red, green, blue)
    except (TypeError, ValueError) as e:
        raise SceneFormatError(f"{key!r} must be a list of three numbers") from e


def _number(data, key: str, default=None) -> float:
    if key not in data:
        if default is None:
            raise SceneFormatError(f"missing {key!r}")
        return default
    try:
        return float(data[key])
    except (TypeError, ValueError) as e:
        raise SceneFormatError(f"{key!r} must be a number") from e


def _texture(data, base_dir: Path):
    _require_mapping(data, "texture")
    if "color" in data:
        return SolidColor(_color(data))
    if "image" in data:
        if not isinstance(data["image"], str):
            raise SceneFormatError("'image' must be a file path")
        return ImageTexture.open(base_dir / data["image"])
    raise SceneFormatError("texture needs either 'color' or 'image'")


def _material(data, base_dir: Path) -> Material:
    _require_mapping(data, "material")
    surface = data.get("surface", "diffuse")
    if surface == "diffuse":
        surface = Diffuse()
    elif isinstance(surface, dict) and "reflective" in surface:
        surface = Reflective(_number(surface, "reflective"))
    else:
        raise SceneFormatError(f"unknown surface {surface!r}")
    return Material(_texture(data.get("texture", {}), base_dir),
                    _number(data, "albedo", TEXT_ALBEDO), surface)


def _element(data, base_dir: Path):
    _require_mapping(data, "element")
    kind = data.get("type")
    material = _material(data.get("material", {}), base_dir)
    if kind == "sphere":
        return Sphere(_vec(data, "center"), _number(data, "radius"), material)
    if kind == "plane":
        return Plane(_vec(data, "center"), _vec(data, "normal"), material)
    raise SceneFormatError(f"unknown element type {kind!r}")


def _light(data):
    _require_mapping(data, "light")
    kind = data.get("type")
    color = _color(data) if "color" in data else Color.white()
    intensity = _number(data, "intensity")
    if kind == "directional":
        return DirectionalLight(_vec(data, "direction"), color, intensity)
    if kind == "point":
        return PointLight(_vec(data, "position"), color, intensity)
    raise SceneFormatError(f"unknown light type {kind!r}")


def scene_from_dict(data: dict, base_dir=".", **overrides) -> Scene:
    """Build a scene from decoded JSON.

    Example::

        {
          "width": 800, "height": 600, "fov": 90, "bias": 0.1,
          "max_recursion_depth": 5,
          "elements": [
            {"type": "sphere", "center": [0, 0, -5], "radius": 1,
             "material": {"texture": {"color": [0.2, 0.8, 0.2]},
                          "albedo": 1.0, "surface": {"reflective": 0.1}}},
            {"type": "plane", "center": [0, -2, 0], "normal": [0, -1, 0],
             "material": {"texture": {"image": "checker.png"}}}
          ],
          "lights": [
            {"type": "directional", "direction": [0, -1, 0],
             "color": [1, 1, 1], "intensity": 1.0},
            {"type": "point", "position": [1, 2, -5], "intensity": 10}
          ]
        }

    Image paths are resolved against *base_dir*.
    """
    if not isinstance(data, dict):
        raise SceneFormatError("scene must be a JSON object")
    base_dir = Path(base_dir)
    elements = [_element(e, base_dir) for e in _require_list(data, "elements")]
    lights = [_light(light) for light in _require_list(data, "lights")]
    if not lights:
        logger.warning("Scene declares no lights; it will render black")
    return Scene(elements=elements, lights=lights, **_camera_params(overrides, data))


def load_scene(path, **overrides) -> Scene:
    """Load a scene file; ``.json`` files are JSON, anything else is text."""
    path = Path(path)
    logger.info("Loading scene from %s", path)
    text = path.read_text(encoding="utf-8")
    if path.suffix.lower() == ".json":
        try:
            data = json.loads(text)
        except json.JSONDecodeError as e:
            raise SceneFormatError(f"invalid JSON: {e.msg}", e.lineno) from e
        return scene_from_dict(data, base_dir=path.parent, **overrides)
    return parse_scene_text(text, **overrides)
