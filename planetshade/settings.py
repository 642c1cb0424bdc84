# planetshade/settings.py
from __future__ import annotations

import os
from dataclasses import dataclass
from enum import Enum
from typing import Mapping

ENV_PATTERN = "PLANETSHADE_PATTERN"
ENV_W_EPSILON = "PLANETSHADE_W_EPSILON"
ENV_RENORMALIZE_NORMALS = "PLANETSHADE_RENORMALIZE_NORMALS"


class PatternKind(str, Enum):
    """Which surface the fragment shader paints."""

    GAS_GIANT = "gas_giant"
    DALMATIAN = "dalmatian"
    CLOUD = "cloud"
    CELLULAR = "cellular"
    LAVA = "lava"
    BLACK_AND_WHITE = "black_and_white"

    # A caller-supplied callable; has no built-in implementation
    CUSTOM = "custom"

    @classmethod
    def parse(cls, value: str | PatternKind) -> PatternKind:
        if isinstance(value, PatternKind):
            return value
        key = str(value).strip().lower().replace("-", "_")
        try:
            return cls(key)
        except ValueError:
            choices = ", ".join(kind.value for kind in cls)
            raise ValueError(
                f"Unknown pattern {value!r}, expected one of: {choices}"
            ) from None


@dataclass(frozen=True, slots=True)
class ShaderSettings:
    """Static shader program configuration."""

    pattern: PatternKind = PatternKind.GAS_GIANT

    # Clip-space |w| below this is clamped before the perspective divide.
    # 0 disables the guard.
    w_epsilon: float = 1e-6

    renormalize_normals: bool = False

    @staticmethod
    def from_env(env: Mapping[str, str] | None = None) -> ShaderSettings:
        defaults = ShaderSettings()
        pattern = PatternKind.parse(
            _text(ENV_PATTERN, defaults.pattern.value, env=env)
        )
        if pattern is PatternKind.CUSTOM:
            raise ValueError(
                f"{ENV_PATTERN} must name a built-in pattern, not 'custom'"
            )
        return ShaderSettings(
            pattern=pattern,
            w_epsilon=_float(
                ENV_W_EPSILON, defaults.w_epsilon, minimum=0.0, env=env
            ),
            renormalize_normals=_flag(
                ENV_RENORMALIZE_NORMALS, defaults.renormalize_normals, env=env
            ),
        )


def _raw(name: str, *, env: Mapping[str, str] | None = None) -> str | None:
    value = os.getenv(name) if env is None else env.get(name)
    return None if value is None else str(value)


def _flag(name: str, default: bool, *, env: Mapping[str, str] | None = None) -> bool:
    raw = _raw(name, env=env)
    if raw is None:
        return bool(default)
    value = raw.strip().lower()
    if value in {"1", "true", "yes", "on"}:
        return True
    if value in {"0", "false", "no", "off"}:
        return False
    return bool(default)


def _float(
    name: str,
    default: float,
    *,
    minimum: float | None = None,
    env: Mapping[str, str] | None = None,
) -> float:
    raw = _raw(name, env=env)
    if raw is None:
        value = float(default)
    else:
        try:
            value = float(raw.strip())
        except ValueError:
            value = float(default)
    if minimum is None:
        return value
    return max(float(minimum), value)


def _text(name: str, default: str, *, env: Mapping[str, str] | None = None) -> str:
    raw = _raw(name, env=env)
    if raw is None:
        return str(default)
    value = raw.strip()
    return value if value else str(default)
