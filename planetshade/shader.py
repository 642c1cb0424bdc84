# planetshade/shader.py
from __future__ import annotations

import logging
from dataclasses import dataclass, field, replace
from typing import Iterable, Iterator, Union

from planetshade.patterns import Pattern, gas_giant, get_pattern, pattern_kind_of
from planetshade.settings import PatternKind, ShaderSettings
from planetshade.types import Color, Fragment, Vertex
from planetshade.uniforms import Uniforms
from planetshade.vertex import transform

logger = logging.getLogger(__name__)


@dataclass(frozen=True, slots=True)
class ShaderProgram:
    """
    A vertex stage plus exactly one fragment pattern.

    The pattern is chosen once, when the program is built; shading a fragment
    never branches on its content. `settings.pattern` always names the
    pattern actually painted: it is rewritten on construction, and reads
    `PatternKind.CUSTOM` when `pattern` is not one of the built-in ones.
    """

    pattern: Pattern
    settings: ShaderSettings = field(default_factory=ShaderSettings)

    def __post_init__(self) -> None:
        kind = pattern_kind_of(self.pattern)
        if kind is not self.settings.pattern:
            object.__setattr__(
                self, "settings", replace(self.settings, pattern=kind)
            )

    @staticmethod
    def from_settings(settings: ShaderSettings) -> ShaderProgram:
        logger.info("Building shader program with pattern %s", settings.pattern.value)
        return ShaderProgram(pattern=get_pattern(settings.pattern), settings=settings)

    def with_pattern(self, pattern: Union[PatternKind, str, Pattern]) -> ShaderProgram:
        """Returns a copy painting `pattern`; accepts a kind or any callable."""
        if not callable(pattern):
            pattern = get_pattern(pattern)
        return replace(self, pattern=pattern)

    def vertex_shader(self, vertex: Vertex, uniforms: Uniforms) -> Vertex:
        return transform(vertex, uniforms, self.settings)

    def fragment_shader(self, fragment: Fragment, uniforms: Uniforms) -> Color:
        return self.pattern(fragment, uniforms)

    def shade_vertices(
        self, vertices: Iterable[Vertex], uniforms: Uniforms
    ) -> Iterator[Vertex]:
        for vertex in vertices:
            yield self.vertex_shader(vertex, uniforms)

    def shade_fragments(
        self, fragments: Iterable[Fragment], uniforms: Uniforms
    ) -> Iterator[Color]:
        for fragment in fragments:
            yield self.fragment_shader(fragment, uniforms)


DEFAULT_PROGRAM = ShaderProgram(pattern=gas_giant)


def vertex_shader(vertex: Vertex, uniforms: Uniforms) -> Vertex:
    return DEFAULT_PROGRAM.vertex_shader(vertex, uniforms)


def fragment_shader(fragment: Fragment, uniforms: Uniforms) -> Color:
    return DEFAULT_PROGRAM.fragment_shader(fragment, uniforms)
