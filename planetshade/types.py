# planetshade/types.py
from __future__ import annotations

import math
from dataclasses import dataclass, field
from typing import Iterator, Sequence, Tuple, TypeAlias

import numpy as np

Scalar: TypeAlias = float

RGB8 = Tuple[int, int, int]

_CHANNEL_MAX = 255.0


@dataclass(frozen=True, slots=True)
class Vector2:
    x: Scalar
    y: Scalar

    @staticmethod
    def zero() -> Vector2:
        return Vector2(0.0, 0.0)


@dataclass(frozen=True, slots=True)
class Vector3:
    x: Scalar
    y: Scalar
    z: Scalar

    @staticmethod
    def zero() -> Vector3:
        return Vector3(0.0, 0.0, 0.0)

    @staticmethod
    def from_array(arr: Sequence[float] | np.ndarray) -> Vector3:
        return Vector3(float(arr[0]), float(arr[1]), float(arr[2]))

    def to_array(self) -> np.ndarray:
        return np.array([self.x, self.y, self.z], dtype=np.float64)

    def normalized(self) -> Vector3:
        mag = math.sqrt(self.x * self.x + self.y * self.y + self.z * self.z)
        if mag == 0:
            return self
        return Vector3(self.x / mag, self.y / mag, self.z / mag)


def _saturate(value: float) -> float:
    return min(_CHANNEL_MAX, max(0.0, value))


@dataclass(frozen=True, slots=True)
class Color:
    """
    RGB color on the 0..255 scale.

    Channels are floats so that chained blends keep their precision; use
    `to_rgb8` when writing to an 8-bit framebuffer.
    """

    r: Scalar
    g: Scalar
    b: Scalar

    @staticmethod
    def black() -> Color:
        return Color(0.0, 0.0, 0.0)

    @staticmethod
    def white() -> Color:
        return Color(255.0, 255.0, 255.0)

    @staticmethod
    def from_hex(value: str) -> Color:
        text = value.strip().lstrip("#")
        if len(text) != 6:
            raise ValueError(f"Expected a #rrggbb color, got {value!r}")
        try:
            raw = int(text, 16)
        except ValueError as exc:
            raise ValueError(f"Expected a #rrggbb color, got {value!r}") from exc
        return Color(
            float((raw >> 16) & 0xFF),
            float((raw >> 8) & 0xFF),
            float(raw & 0xFF),
        )

    def lerp(self, other: Color, t: float) -> Color:
        """
        Component-wise linear blend towards `other`.

        `t` is not clamped. Written as a*(1-t) + b*t so that t=0 and t=1
        return the endpoints exactly.
        """
        s = 1.0 - t
        return Color(
            self.r * s + other.r * t,
            self.g * s + other.g * t,
            self.b * s + other.b * t,
        )

    def clamped(self) -> Color:
        return Color(_saturate(self.r), _saturate(self.g), _saturate(self.b))

    def to_rgb8(self) -> RGB8:
        c = self.clamped()
        return (int(round(c.r)), int(round(c.g)), int(round(c.b)))

    def to_hex(self) -> str:
        r, g, b = self.to_rgb8()
        return f"#{r:02x}{g:02x}{b:02x}"

    def __iter__(self) -> Iterator[Scalar]:
        yield self.r
        yield self.g
        yield self.b

    def __len__(self) -> int:
        return 3

    def __mul__(self, scalar: float) -> Color:
        # Saturates instead of wrapping like an 8-bit channel would.
        return Color(
            _saturate(self.r * scalar),
            _saturate(self.g * scalar),
            _saturate(self.b * scalar),
        )

    __rmul__ = __mul__


@dataclass(frozen=True, slots=True)
class Vertex:
    position: Vector3
    normal: Vector3
    tex_coords: Vector2 = field(default_factory=Vector2.zero)
    color: Color = field(default_factory=Color.black)

    # Filled in by the vertex shader
    transformed_position: Vector3 = field(default_factory=Vector3.zero)
    transformed_normal: Vector3 = field(default_factory=Vector3.zero)


@dataclass(frozen=True, slots=True)
class Fragment:
    """Interpolated attributes of one covered pixel, produced by the rasterizer."""

    vertex_position: Vector3
    depth: Scalar
    intensity: Scalar = 1.0
