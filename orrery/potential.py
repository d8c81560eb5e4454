from __future__ import annotations
import numpy as np
from numpy.typing import NDArray
from .geometry_cache import geometry_buffers

"""
This module computes the softened gravitational potential energy of a set of bodies. The softened_potential function sums -G m_i m_j / sqrt(r2 + softening) over unordered pairs, using the same softening placement as the acceleration kernel (the constant is added to the squared distance under the root). For softening 0 this is the Newtonian potential whose gradient is exactly the kernel's force. Single bodies and G = 0 give zero. It assumes (N, 3) positions and positive masses.

"""

__all__ = ["softened_potential"]


def softened_potential(
    q: NDArray[np.floating],
    m: NDArray[np.floating],
    G: float,
    softening: float,
) -> float:

    q_arr = np.asarray(q, dtype=float)
    m_arr = np.asarray(m, dtype=float).ravel()

    n = int(q_arr.shape[0])
    if n < 2 or float(G) == 0.0:
        return 0.0

    _, r2 = geometry_buffers(q_arr)
    iu = np.triu_indices(n, 1)

    with np.errstate(divide="ignore", invalid="ignore"):
        inv_r = 1.0 / np.sqrt(r2[iu] + float(softening))

    term = (m_arr[iu[0]] * m_arr[iu[1]]) * inv_r
    return -float(G) * float(np.sum(term))
