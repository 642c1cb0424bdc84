import math
from dataclasses import dataclass, field

import numpy as np
import pytest

from planetshade.types import Fragment, Vector3
from planetshade.uniforms import Uniforms


@dataclass(frozen=True)
class ConstantNoise:
    value: float = 0.0

    def sample_2d(self, x: float, y: float) -> float:
        return self.value

    def sample_3d(self, x: float, y: float, z: float) -> float:
        return self.value


@dataclass
class RecordingNoise:
    """Returns a fixed value and remembers every coordinate it was asked for."""

    value: float = 0.0
    calls_2d: list = field(default_factory=list)
    calls_3d: list = field(default_factory=list)

    def sample_2d(self, x: float, y: float) -> float:
        self.calls_2d.append((x, y))
        return self.value

    def sample_3d(self, x: float, y: float, z: float) -> float:
        self.calls_3d.append((x, y, z))
        return self.value


@pytest.fixture
def uniforms():
    """Identity matrices, time 0, noise fixed at 0."""
    return Uniforms.identity(ConstantNoise(0.0))


@pytest.fixture
def fragment():
    return Fragment(vertex_position=Vector3(0.3, -0.2, 0.1), depth=0.4, intensity=1.0)


# -- Frame matrices built by the (external) scene driver --


def translation_matrix(x: float, y: float, z: float) -> np.ndarray:
    m = np.eye(4)
    m[:3, 3] = [x, y, z]
    return m


def scale_matrix(x: float, y: float, z: float) -> np.ndarray:
    return np.diag([x, y, z, 1.0])


def rotation_z_matrix(angle: float) -> np.ndarray:
    c, s = math.cos(angle), math.sin(angle)
    m = np.eye(4)
    m[:2, :2] = [[c, -s], [s, c]]
    return m


def perspective_matrix(fov_deg: float, aspect: float, near: float, far: float) -> np.ndarray:
    """OpenGL-style projection, w = -z."""
    f = 1.0 / math.tan(math.radians(fov_deg) / 2.0)
    m = np.zeros((4, 4))
    m[0, 0] = f / aspect
    m[1, 1] = f
    m[2, 2] = (far + near) / (near - far)
    m[2, 3] = (2.0 * far * near) / (near - far)
    m[3, 2] = -1.0
    return m


def viewport_matrix(width: float, height: float) -> np.ndarray:
    """NDC -> pixels, origin top-left, depth passed through."""
    return np.array(
        [
            [width / 2.0, 0.0, 0.0, width / 2.0],
            [0.0, -height / 2.0, 0.0, height / 2.0],
            [0.0, 0.0, 1.0, 0.0],
            [0.0, 0.0, 0.0, 1.0],
        ]
    )


def make_uniforms(model=None, view=None, projection=None, viewport=None, time=0, noise=None):
    eye = np.eye(4)
    return Uniforms(
        model_matrix=eye if model is None else model,
        view_matrix=eye if view is None else view,
        projection_matrix=eye if projection is None else projection,
        viewport_matrix=eye if viewport is None else viewport,
        time=time,
        noise=ConstantNoise() if noise is None else noise,
    )
