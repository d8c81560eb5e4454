from __future__ import annotations
import numpy as np
from typing import Tuple

"""
This module provides the pairwise geometry shared by the acceleration kernel and the diagnostics. The geometry_buffers function computes separation vectors dx[i, j] = pos[j] - pos[i] and squared distances in a single pass. The squared distance is summed component by component in x, y, z order so that every entry carries exactly the rounding of a scalar dx*dx + dy*dy + dz*dz. Diagonal entries are zero; callers exclude self-interaction themselves. It assumes (N, 3) position arrays.

"""


__all__ = ["geometry_buffers"]


def geometry_buffers(pos: np.ndarray) -> Tuple[np.ndarray, np.ndarray]:
    pos = np.asarray(pos, dtype=float)

    diff = pos[None, :, :] - pos[:, None, :]
    dx = diff[..., 0]
    dy = diff[..., 1]
    dz = diff[..., 2]
    r2 = dx * dx + dy * dy + dz * dz
    return diff, r2
