# planetshade/__init__.py
import logging

from planetshade.patterns import PATTERNS, get_pattern, pseudo_perlin
from planetshade.settings import PatternKind, ShaderSettings
from planetshade.shader import ShaderProgram, fragment_shader, vertex_shader
from planetshade.types import Color, Fragment, Vector2, Vector3, Vertex
from planetshade.uniforms import NoiseSampler, Uniforms
from planetshade.vertex import transform, transform_batch

logging.getLogger(__name__).addHandler(logging.NullHandler())

__all__ = [
    "Color",
    "Fragment",
    "NoiseSampler",
    "PATTERNS",
    "PatternKind",
    "ShaderProgram",
    "ShaderSettings",
    "Uniforms",
    "Vector2",
    "Vector3",
    "Vertex",
    "fragment_shader",
    "get_pattern",
    "pseudo_perlin",
    "transform",
    "transform_batch",
    "vertex_shader",
]
