"""
Time conversion utility functions.

All functions are vectorized and work with numpy arrays or scalars.

MIT License
"""

import numpy as np
from numpy.typing import ArrayLike


def samples_to_seconds(samples: ArrayLike, sample_rate: float) -> np.ndarray:
    """
    Convert sample count to seconds.
    
    Args:
        samples: Number of samples (may be fractional)
        sample_rate: Sample rate in Hz
    
    Returns:
        Duration in seconds
    
    Example:
        >>> samples_to_seconds(44100, 44100)
        1.0
        >>> samples_to_seconds(100.5, 44100)
        0.0022789...
    """
    samples = np.asarray(samples, dtype=np.float64)
    return samples / sample_rate


def seconds_to_samples(seconds: ArrayLike, sample_rate: float) -> np.ndarray:
    """
    Convert seconds to sample count.
    
    Args:
        seconds: Duration in seconds
        sample_rate: Sample rate in Hz
    
    Returns:
        Number of samples (float; delay lengths may stay fractional)
    
    Example:
        >>> seconds_to_samples(0.01, 44100)
        441.0
    """
    seconds = np.asarray(seconds, dtype=np.float64)
    return seconds * sample_rate
