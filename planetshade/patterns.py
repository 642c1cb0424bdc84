# planetshade/patterns.py
"""
Procedural planet surfaces.

Every pattern maps (fragment, uniforms) to a Color and finishes by scaling
with `fragment.intensity`. Patterns are pure: the result depends only on the
fragment, `uniforms.time` and `uniforms.noise`.
"""

from __future__ import annotations

import math
import random
from typing import Callable, Dict, Union

from planetshade.settings import PatternKind
from planetshade.types import Color, Fragment
from planetshade.uniforms import Uniforms

Pattern = Callable[[Fragment, Uniforms], Color]

# -- Palettes --
GAS_WHITE = Color(255, 255, 255)
GAS_LIGHT_BLUE = Color(173, 216, 230)
GAS_BEIGE = Color(245, 245, 220)
GAS_NAVY = Color(25, 25, 112)
GAS_SLATE_GRAY = Color(112, 128, 144)

SPOT_COLOR = Color(255, 255, 255)
SPOT_BASE_COLOR = Color(0, 0, 0)

CLOUD_COLOR = Color(255, 255, 255)
SKY_COLOR = Color(30, 97, 145)

CELL_DARK_OLIVE = Color(85, 107, 47)
CELL_LAWN_GREEN = Color(124, 252, 0)
CELL_FOREST_GREEN = Color(34, 139, 34)
CELL_GREEN_YELLOW = Color(173, 255, 47)

LAVA_DARK = Color(130, 20, 0)
LAVA_BRIGHT = Color(255, 240, 0)

# Ascending band limits, each compared with a strict "<"
CELL_THRESHOLDS = (0.15, 0.7, 0.75)

_U64_MAX = 2**64 - 1


def pseudo_perlin(x: float, y: float) -> float:
    """Cheap smooth wobble in [-0.5, 0.5]. Not gradient noise."""
    return math.sin(x) * math.cos(y) * 0.5


def _band(pattern_arg: float) -> float:
    return math.sin(pattern_arg) * 0.5 + 0.5


def gas_giant(fragment: Fragment, uniforms: Uniforms) -> Color:
    x = fragment.vertex_position.x
    y = fragment.vertex_position.y

    phase = float(uniforms.time) * 0.01
    frequency = 10.0

    distance = math.sqrt(x * x + y * y)
    noise = pseudo_perlin(x * 0.5 + phase, y * 0.5)
    angle = phase * 0.5

    ring = distance + noise
    pattern1 = _band(ring * 7.0 * frequency + (y + noise) * 5.0 + angle)
    pattern2 = _band(
        ring * 5.0 * frequency - (y + noise) * 8.0 + math.pi / 3.0 + angle
    )
    pattern3 = _band(
        ring * 6.0 * frequency + (x + noise) * 4.0 + 2.0 * math.pi / 3.0 + angle
    )

    # Order matters: each lerp starts from the previous blend
    color = GAS_WHITE.lerp(GAS_LIGHT_BLUE, pattern1)
    color = color.lerp(GAS_BEIGE, pattern2)
    color = color.lerp(GAS_NAVY, pattern3)
    color = color.lerp(GAS_SLATE_GRAY, pattern2)

    return color * fragment.intensity


def dalmatian(fragment: Fragment, uniforms: Uniforms) -> Color:
    zoom = 100.0
    ox = 0.0
    oy = 0.0
    x = fragment.vertex_position.x
    y = fragment.vertex_position.y

    noise_value = uniforms.noise.sample_2d((x + ox) * zoom, (y + oy) * zoom)

    spot_threshold = 0.5
    color = SPOT_COLOR if noise_value < spot_threshold else SPOT_BASE_COLOR

    return color * fragment.intensity


def cloud(fragment: Fragment, uniforms: Uniforms) -> Color:
    zoom = 100.0
    ox = 100.0
    oy = 100.0
    x = fragment.vertex_position.x
    y = fragment.vertex_position.y
    t = float(uniforms.time) * 0.5

    noise_value = uniforms.noise.sample_2d(x * zoom + ox + t, y * zoom + oy)

    cloud_threshold = 0.5
    color = CLOUD_COLOR if noise_value > cloud_threshold else SKY_COLOR

    return color * fragment.intensity


def cellular_band(value: float) -> Color:
    """Four-step classification of |noise|; a value on a limit goes up a band."""
    low, mid, high = CELL_THRESHOLDS
    if value < low:
        return CELL_DARK_OLIVE
    if value < mid:
        return CELL_LAWN_GREEN
    if value < high:
        return CELL_FOREST_GREEN
    return CELL_GREEN_YELLOW


def cellular(fragment: Fragment, uniforms: Uniforms) -> Color:
    zoom = 30.0
    ox = 50.0
    oy = 50.0
    x = fragment.vertex_position.x
    y = fragment.vertex_position.y

    cell_noise_value = abs(
        uniforms.noise.sample_2d(x * zoom + ox, y * zoom + oy)
    )

    return cellular_band(cell_noise_value) * fragment.intensity


def lava(fragment: Fragment, uniforms: Uniforms) -> Color:
    x = fragment.vertex_position.x
    y = fragment.vertex_position.y
    z = fragment.depth

    base_frequency = 0.2
    pulsate_amplitude = 0.5
    t = float(uniforms.time) * 0.01

    pulsate = math.sin(t * base_frequency) * pulsate_amplitude

    zoom = 1000.0
    noise_value1 = uniforms.noise.sample_3d(
        x * zoom,
        y * zoom,
        (z + pulsate) * zoom,
    )
    noise_value2 = uniforms.noise.sample_3d(
        (x + 1000.0) * zoom,
        (y + 1000.0) * zoom,
        (z + 1000.0 + pulsate) * zoom,
    )
    noise_value = (noise_value1 + noise_value2) * 0.5

    return LAVA_DARK.lerp(LAVA_BRIGHT, noise_value) * fragment.intensity


def _seed_from(value: float) -> int:
    # Saturating float -> u64 conversion
    if math.isnan(value):
        return 0
    value = abs(value)
    if value >= _U64_MAX:
        return _U64_MAX
    return int(value)


def black_and_white(fragment: Fragment, uniforms: Uniforms) -> Color:
    """Per-fragment static. Seeded from time and position, so repeatable."""
    seed = (
        float(uniforms.time)
        * fragment.vertex_position.y
        * fragment.vertex_position.x
    )

    rng = random.Random(_seed_from(seed))
    random_number = rng.randint(0, 100)

    color = Color.black() if random_number < 50 else Color.white()

    return color * fragment.intensity


PATTERNS: Dict[PatternKind, Pattern] = {
    PatternKind.GAS_GIANT: gas_giant,
    PatternKind.DALMATIAN: dalmatian,
    PatternKind.CLOUD: cloud,
    PatternKind.CELLULAR: cellular,
    PatternKind.LAVA: lava,
    PatternKind.BLACK_AND_WHITE: black_and_white,
}


def get_pattern(kind: Union[PatternKind, str]) -> Pattern:
    try:
        kind = PatternKind.parse(kind)
    except ValueError as exc:
        raise KeyError(str(exc)) from None
    if kind not in PATTERNS:
        raise KeyError(f"Pattern {kind.value!r} has no built-in implementation")
    return PATTERNS[kind]


def pattern_kind_of(pattern: Pattern) -> PatternKind:
    """The registry kind painting `pattern`, or CUSTOM for anything else."""
    for kind, fn in PATTERNS.items():
        if fn is pattern:
            return kind
    return PatternKind.CUSTOM
