"""
Normalized sinc kernel.

sinc(x) = sin(pi * x) / (pi * x), with the removable singularity at x = 0
filled by its limit, 1.0. Arguments within SINC_TOLERANCE of zero are
treated as zero.

MIT License
"""

from __future__ import annotations

import math

import numpy as np
from numba import njit
from numpy.typing import ArrayLike

from sincdelay.config import SINC_TOLERANCE


@njit(cache=True)
def sinc_kernel(x: float, tolerance: float) -> float:
    """Scalar sinc for use inside jitted loops."""
    if abs(x) < tolerance:
        return 1.0
    pi_x = math.pi * x
    return math.sin(pi_x) / pi_x


def sinc(x: float) -> float:
    """
    Normalized sinc of a scalar.
    
    Example:
        >>> sinc(0.0)
        1.0
        >>> round(sinc(0.5), 4)
        0.6366
    """
    return float(sinc_kernel(float(x), SINC_TOLERANCE))


def sinc_array(x: ArrayLike) -> np.ndarray:
    """
    Normalized sinc, vectorized over a numpy array.

    Matches sinc() element-wise, including the tolerance around zero.
    """
    x = np.asarray(x, dtype=np.float64)
    near_zero = np.abs(x) < SINC_TOLERANCE
    pi_x = np.pi * np.where(near_zero, 1.0, x)
    return np.where(near_zero, 1.0, np.sin(pi_x) / pi_x)
