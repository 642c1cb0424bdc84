# planetshade/vertex.py
from __future__ import annotations

import logging
from dataclasses import replace

import numpy as np

from planetshade.math import normal_matrix, perspective_divide
from planetshade.settings import ShaderSettings
from planetshade.types import Vector3, Vertex
from planetshade.uniforms import Uniforms

logger = logging.getLogger(__name__)

DEFAULT_SETTINGS = ShaderSettings()


def transform(
    vertex: Vertex,
    uniforms: Uniforms,
    settings: ShaderSettings = DEFAULT_SETTINGS,
) -> Vertex:
    """
    Object space -> screen space.

    Fills `transformed_position` (pixel x/y plus NDC depth) and
    `transformed_normal`; every other field is copied from `vertex`.
    """
    position = np.array(
        [vertex.position.x, vertex.position.y, vertex.position.z, 1.0],
        dtype=np.float64,
    )

    clip = uniforms.mvp @ position
    ndc = perspective_divide(clip, settings.w_epsilon)
    screen = uniforms.viewport_matrix @ ndc

    normal = normal_matrix(uniforms.model_matrix) @ vertex.normal.to_array()
    transformed_normal = Vector3.from_array(normal)
    if settings.renormalize_normals:
        transformed_normal = transformed_normal.normalized()

    return replace(
        vertex,
        transformed_position=Vector3.from_array(screen),
        transformed_normal=transformed_normal,
    )


def transform_batch(
    positions: np.ndarray,
    normals: np.ndarray,
    uniforms: Uniforms,
    settings: ShaderSettings = DEFAULT_SETTINGS,
) -> tuple[np.ndarray, np.ndarray]:
    """
    Vectorized `transform` over a whole mesh.
    positions: (N, 3)
    normals: (N, 3)
    Returns: screen positions (N, 3), transformed normals (N, 3)
    """
    positions = np.asarray(positions, dtype=np.float64)
    normals = np.asarray(normals, dtype=np.float64)

    if positions.ndim != 2 or positions.shape[1] != 3:
        raise ValueError(f"positions must be (N, 3), got {positions.shape}")
    if normals.shape != positions.shape:
        raise ValueError(
            f"normals {normals.shape} do not match positions {positions.shape}"
        )

    N = len(positions)

    # 1. Homogeneous lift, row vectors so the matrices are applied transposed
    homo = np.ones((N, 4), dtype=np.float64)
    homo[:, :3] = positions

    clip = homo @ uniforms.mvp.T

    # 2. Perspective divide with the same w guard as the scalar path
    w = clip[:, 3].copy()
    eps = settings.w_epsilon
    if eps > 0.0:
        small = np.abs(w) < eps
        if np.any(small):
            logger.debug("Clamping %d near-zero clip w values", int(small.sum()))
            w[small] = np.where(w[small] < 0.0, -eps, eps)

    ndc = np.ones((N, 4), dtype=np.float64)
    with np.errstate(divide="ignore", invalid="ignore"):
        ndc[:, :3] = clip[:, :3] / w[:, None]

    # 3. Viewport
    screen = (ndc @ uniforms.viewport_matrix.T)[:, :3]

    # 4. Normals
    out_normals = normals @ normal_matrix(uniforms.model_matrix).T
    if settings.renormalize_normals:
        lengths = np.linalg.norm(out_normals, axis=1, keepdims=True)
        out_normals = np.divide(
            out_normals,
            lengths,
            out=out_normals.copy(),
            where=lengths != 0.0,
        )

    return screen, out_normals
