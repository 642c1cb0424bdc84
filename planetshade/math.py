# planetshade/math.py
import logging
import math

import numpy as np

logger = logging.getLogger(__name__)


def normal_matrix(model: np.ndarray) -> np.ndarray:
    """
    Inverse-transpose of the model's upper 3x3 block.

    A singular block yields the identity instead of an error, so shading for
    that vertex is wrong but the frame keeps rendering.
    """
    m3 = np.asarray(model, dtype=np.float64)[:3, :3]

    det = np.linalg.det(m3)
    if det == 0.0 or not math.isfinite(det):
        logger.debug("Singular model matrix, using identity normal matrix")
        return np.eye(3, dtype=np.float64)

    try:
        return np.linalg.inv(m3.T)
    except np.linalg.LinAlgError:
        logger.debug("Model matrix inversion failed, using identity normal matrix")
        return np.eye(3, dtype=np.float64)


def clamp_w(w: float, epsilon: float) -> float:
    """
    Keeps |w| >= epsilon, preserving its sign (+epsilon for w == 0).
    NaN passes through untouched.
    """
    if not abs(w) < epsilon:
        return w
    logger.debug("Clip-space w=%r below epsilon %r, clamping", w, epsilon)
    return math.copysign(epsilon, w) if w != 0.0 else epsilon


def perspective_divide(clip: np.ndarray, epsilon: float = 0.0) -> np.ndarray:
    """
    Clip -> NDC. Returns a homogeneous (x/w, y/w, z/w, 1) vector.

    With epsilon == 0 a zero w divides through and yields inf/nan.
    """
    w = float(clip[3])
    if epsilon > 0.0:
        w = clamp_w(w, epsilon)

    with np.errstate(divide="ignore", invalid="ignore"):
        return np.array(
            [clip[0] / w, clip[1] / w, clip[2] / w, 1.0], dtype=np.float64
        )
