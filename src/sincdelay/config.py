"""
Configuration defaults and numeric tolerances for sincdelay.

MIT License
"""

import numpy as np

from sincdelay.errors import InvalidArgument
from sincdelay.logger import get_logger

logger = get_logger(__name__)


# Machine epsilon of the sample type used throughout the engine
FLOAT_EPSILON: float = float(np.finfo(np.float64).eps)

# |tau2 - tau1| below this is treated as a fixed (single) delay
DELTA_TOLERANCE: float = FLOAT_EPSILON * 100

# |x| below this evaluates sinc(x) as its limit, 1.0
SINC_TOLERANCE: float = FLOAT_EPSILON

# Parameter values applied by the engine constructor
DEFAULT_K: int = 1
DEFAULT_TAU1: float = 1.0
DEFAULT_TAU2: float = 2.0
DEFAULT_ALPHA: float = 0.0

# Largest K whose tap count 2K + 2 fits the compiled loop's int64 counter
MAX_K: int = (int(np.iinfo(np.int64).max) - 2) // 2

# Module-level default sample rate
DEFAULT_SAMPLE_RATE: float = 44100.0


def set_default_sample_rate(sample_rate: float) -> None:
    """
    Set the sample rate used by engines constructed without one.
    
    Args:
        sample_rate: Sample rate in Hz (must be positive)
    
    Raises:
        InvalidArgument: If sample_rate is not a positive number
    """
    global DEFAULT_SAMPLE_RATE
    DEFAULT_SAMPLE_RATE = validate_sample_rate(sample_rate)
    logger.debug("default sample rate set to %s", DEFAULT_SAMPLE_RATE)


def get_default_sample_rate() -> float:
    """
    Get the current default sample rate.
    
    Returns:
        The default sample rate in Hz
    """
    return DEFAULT_SAMPLE_RATE


def validate_sample_rate(sample_rate: float) -> float:
    """Return sample_rate as a float, or raise InvalidArgument."""
    try:
        value = float(sample_rate)
    except (TypeError, ValueError) as exc:
        raise InvalidArgument(f"sample_rate must be a number, got {sample_rate!r}") from exc
    if not (np.isfinite(value) and value > 0.0):
        raise InvalidArgument(f"sample_rate must be positive, got {sample_rate!r}")
    return value
