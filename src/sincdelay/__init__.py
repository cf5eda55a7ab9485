"""
sincdelay - a variable delay that morphs between two delay lengths with
multi-tap sinc interpolation.

MIT License
"""

from sincdelay.config import (
    DELTA_TOLERANCE,
    SINC_TOLERANCE,
    set_default_sample_rate,
    get_default_sample_rate,
)
from sincdelay.errors import SincDelayError, InvalidArgument, OutOfRange
from sincdelay.delay_buffer import DelayBuffer
from sincdelay.sinc import sinc, sinc_array
from sincdelay.tap_scheduler import (
    TapSchedule,
    schedule_taps,
    tap_positions,
    tap_gains,
    dominant_tap,
)
from sincdelay.multi_tap_sinc_delay import MultiTapSincDelay
from sincdelay.sweep import (
    SweepResult,
    impulse,
    impulse_sweep,
    peak_lag,
    peak_lag_trajectory,
)
from sincdelay.conversions import samples_to_seconds, seconds_to_samples
from sincdelay.logger import set_global_logging, get_logger, reset_logging

__version__ = "0.1.0"

__all__ = [
    # Configuration
    "DELTA_TOLERANCE",
    "SINC_TOLERANCE",
    "set_default_sample_rate",
    "get_default_sample_rate",
    # Errors
    "SincDelayError",
    "InvalidArgument",
    "OutOfRange",
    # Engine
    "DelayBuffer",
    "MultiTapSincDelay",
    "TapSchedule",
    "schedule_taps",
    "tap_positions",
    "tap_gains",
    "dominant_tap",
    "sinc",
    "sinc_array",
    # Sweep driver
    "SweepResult",
    "impulse",
    "impulse_sweep",
    "peak_lag",
    "peak_lag_trajectory",
    # Conversions
    "samples_to_seconds",
    "seconds_to_samples",
    # Logging
    "set_global_logging",
    "reset_logging",
    "get_logger",
]
