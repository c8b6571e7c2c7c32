"""Recursive ray tracer rendering spheres and planes lit by point and
directional lights, with hard shadows, mirror reflection and image textures.
"""

from raycaster.color import Color
from raycaster.errors import ConfigurationError, RaycasterError, SceneFormatError
from raycaster.geometry import Intersection, Plane, Sphere
from raycaster.lights import DirectionalLight, PointLight
from raycaster.loader import load_scene, parse_scene_text, scene_from_dict
from raycaster.material import Diffuse, Material, Reflective
from raycaster.render import create_prime_ray, raycast, render_scene, save_image
from raycaster.scene import Scene
from raycaster.texture import ImageTexture, SolidColor, TextureCoords
from raycaster.vector import Point, Ray, Vec3

__version__ = "0.1.0"
