# planetshade/uniforms.py
from __future__ import annotations

from dataclasses import dataclass, replace
from typing import Protocol, Union, runtime_checkable

import numpy as np

FrameTime = Union[int, float]


@runtime_checkable
class NoiseSampler(Protocol):
    """
    Reproducible scalar noise field.

    Implementations must return the same value for the same coordinates and
    tolerate concurrent reads, since fragments are shaded independently.
    """

    def sample_2d(self, x: float, y: float) -> float: ...

    def sample_3d(self, x: float, y: float, z: float) -> float: ...


def _frozen_mat4(mat: np.ndarray, name: str) -> np.ndarray:
    arr = np.array(mat, dtype=np.float64)
    if arr.shape != (4, 4):
        raise ValueError(f"Matrix must be 4x4, got {arr.shape} for {name}")
    arr.setflags(write=False)
    return arr


@dataclass(frozen=True, slots=True, eq=False)
class Uniforms:
    """
    Per-frame, read-only state shared by every shader invocation.

    Matrices are copied and locked on construction; the driver builds a new
    snapshot for the next frame instead of mutating this one. Snapshots
    compare and hash by identity.
    """

    model_matrix: np.ndarray
    view_matrix: np.ndarray
    projection_matrix: np.ndarray
    viewport_matrix: np.ndarray
    time: FrameTime
    noise: NoiseSampler

    def __post_init__(self) -> None:
        for name in (
            "model_matrix",
            "view_matrix",
            "projection_matrix",
            "viewport_matrix",
        ):
            object.__setattr__(
                self, name, _frozen_mat4(getattr(self, name), name)
            )

    @staticmethod
    def identity(noise: NoiseSampler, time: FrameTime = 0) -> Uniforms:
        eye = np.eye(4, dtype=np.float64)
        return Uniforms(
            model_matrix=eye,
            view_matrix=eye,
            projection_matrix=eye,
            viewport_matrix=eye,
            time=time,
            noise=noise,
        )

    @property
    def mvp(self) -> np.ndarray:
        """projection * view * model"""
        return self.projection_matrix @ self.view_matrix @ self.model_matrix

    def advanced(self, time: FrameTime) -> Uniforms:
        return replace(self, time=time)
