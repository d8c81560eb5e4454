"""
This module implements the softened gravitational acceleration kernels.

For every body i the acceleration is the sum over all other bodies j of
dx * G * m_j / (r2 * sqrt(r2 + softening)), where dx = pos_j - pos_i and r2 is the
squared separation. The softening constant enters only under the square root; the
leading r2 factor is left unsoftened, which is not the symmetric Plummer form
(r2 + eps^2)^1.5 and gives different trajectories at short range. Self-interaction is
removed explicitly by zeroing the diagonal of the pair-factor matrix rather than relying
on a zero-distance term.

softened_accelerations is the numpy kernel built on geometry_buffers.
sequential_accelerations walks the bodies in order with scalar floats and reproduces a
plain double loop bit for bit. Both overwrite their output completely and never raise:
coincident bodies or an exploding state yield inf/nan silently, with numpy's
floating-point warnings suppressed. KERNELS maps config names to functions.
"""

from __future__ import annotations
import math
import numpy as np
from numpy.typing import NDArray
from .geometry_cache import geometry_buffers


def _prepare_out(pos: np.ndarray, out: np.ndarray | None) -> np.ndarray:
    if out is None:
        return np.zeros_like(pos, dtype=float)
    out[...] = 0.0
    return out


def softened_accelerations(
    pos: NDArray[np.floating],
    mass: NDArray[np.floating],
    G: float,
    softening: float,
    out: NDArray[np.floating] | None = None,
) -> NDArray[np.floating]:

    pos = np.asarray(pos, dtype=float)
    mass = np.asarray(mass, dtype=float).ravel()
    acc = _prepare_out(pos, out)

    if pos.shape[0] < 2:
        return acc

    diff, r2 = geometry_buffers(pos)
    with np.errstate(divide="ignore", invalid="ignore", over="ignore"):
        f = (float(G) * mass[None, :]) / (r2 * np.sqrt(r2 + float(softening)))
        np.fill_diagonal(f, 0.0)
        np.sum(diff * f[..., None], axis=1, out=acc)
    return acc


def sequential_accelerations(
    pos: NDArray[np.floating],
    mass: NDArray[np.floating],
    G: float,
    softening: float,
    out: NDArray[np.floating] | None = None,
) -> NDArray[np.floating]:

    pos = np.asarray(pos, dtype=float)
    acc = _prepare_out(pos, out)

    g = float(G)
    soft = float(softening)
    q = pos.tolist()
    m = [float(v) for v in np.asarray(mass, dtype=float).ravel()]
    n = len(q)

    for i in range(n):
        ax = 0.0
        ay = 0.0
        az = 0.0
        xi, yi, zi = q[i]
        for j in range(n):
            if i == j:
                continue
            xj, yj, zj = q[j]
            dx = xj - xi
            dy = yj - yi
            dz = zj - zi
            dist_sq = dx * dx + dy * dy + dz * dz
            f = _pair_factor(g * m[j], dist_sq, soft)
            ax += dx * f
            ay += dy * f
            az += dz * f
        acc[i, 0] = ax
        acc[i, 1] = ay
        acc[i, 2] = az
    return acc


def _pair_factor(gm: float, dist_sq: float, soft: float) -> float:
    # float division by zero raises in Python; follow IEEE like the numpy kernel
    root = math.sqrt(dist_sq + soft) if dist_sq + soft >= 0.0 else math.nan
    denom = dist_sq * root
    if denom == 0.0:
        if gm == 0.0 or math.isnan(gm):
            return math.nan
        return math.copysign(math.inf, gm)
    return gm / denom


KERNELS = {
    "vectorized": softened_accelerations,
    "sequential": sequential_accelerations,
}
