"""
MultiTapSincDelay - variable delay that morphs between two delay lengths.

MIT License
"""

from __future__ import annotations

import numbers
import operator
from typing import Optional

import numpy as np
from numpy.typing import ArrayLike

from sincdelay import config
from sincdelay.conversions import samples_to_seconds
from sincdelay.delay_buffer import DelayBuffer
from sincdelay.errors import InvalidArgument, OutOfRange
from sincdelay.logger import get_logger
from sincdelay.tap_scheduler import (
    TapSchedule,
    blended_delay,
    is_degenerate,
    multi_tap_sample,
    process_block_kernel,
    schedule_taps,
)

logger = get_logger(__name__)


class MultiTapSincDelay:
    """
    A delay line whose length glides between two targets, tau1 and tau2.

    Rather than jumping between the two delays (clicks) or crossfading two
    reads linearly (smearing), each output sample is a sum of 2K + 2
    interpolated taps weighted by a sinc kernel centred on the blended
    delay (1 - alpha) * tau1 + alpha * tau2.

    All state is preallocated at construction. process() and
    process_block() run in bounded time proportional to 2K + 2 per sample
    and do not allocate per sample. The engine is not thread-safe: hosts
    that change parameters from another thread must synchronize externally.

    Args:
        max_delay_samples: Capacity of the delay buffer in samples (> 0)
        initial_k: Number of auxiliary tap pairs (>= 0, default 1)
        sample_rate: Sample rate in Hz; descriptive only, used for the
            *_seconds properties (default: config.get_default_sample_rate())

    Raises:
        InvalidArgument: If max_delay_samples is not a positive integer,
            initial_k is negative or sample_rate is not positive
        OutOfRange: If the buffer is too short for the default delays
            (max_delay_samples <= 3)

    Example:
        delay = MultiTapSincDelay(4096, initial_k=2)
        delay.set_tau1(100.5)
        delay.set_tau2(500.7)
        for i, x in enumerate(signal):
            delay.set_alpha(i / (len(signal) - 1))
            y = delay.process(x)
    """

    def __init__(
        self,
        max_delay_samples: int,
        initial_k: int = config.DEFAULT_K,
        sample_rate: Optional[float] = None,
    ):
        try:
            max_delay_samples = operator.index(max_delay_samples)
        except TypeError as exc:
            raise InvalidArgument(
                f"max_delay_samples must be an integer, got {max_delay_samples!r}"
            ) from exc
        if max_delay_samples <= 0:
            raise InvalidArgument(
                f"max_delay_samples must be greater than 0, got {max_delay_samples}"
            )
        if sample_rate is None:
            sample_rate = config.get_default_sample_rate()

        self._sample_rate = config.validate_sample_rate(sample_rate)
        self._buffer = DelayBuffer(max_delay_samples)
        self._k = 0
        self._tau1 = 0.0
        self._tau2 = 0.0
        self._alpha = 0.0

        self.set_k(initial_k)
        self.set_tau1(config.DEFAULT_TAU1)
        self.set_tau2(config.DEFAULT_TAU2)
        self.set_alpha(config.DEFAULT_ALPHA)

        logger.debug("created %r", self)

    # ------------------------------------------------------------------
    # Properties

    @property
    def max_delay_samples(self) -> int:
        """Capacity of the delay buffer in samples."""
        return self._buffer.capacity

    @property
    def sample_rate(self) -> float:
        """Sample rate in Hz (descriptive)."""
        return self._sample_rate

    @property
    def k(self) -> int:
        """Number of auxiliary tap pairs."""
        return self._k

    @property
    def num_taps(self) -> int:
        """Number of taps evaluated per sample when tau1 != tau2."""
        return 2 * self._k + 2

    @property
    def tau1(self) -> float:
        """Delay selected by alpha = 0, in samples."""
        return self._tau1

    @property
    def tau2(self) -> float:
        """Delay selected by alpha = 1, in samples."""
        return self._tau2

    @property
    def alpha(self) -> float:
        """Blend factor between tau1 (0.0) and tau2 (1.0)."""
        return self._alpha

    @property
    def write_index(self) -> int:
        """Buffer slot the next input sample will be written to."""
        return self._buffer.cursor

    @property
    def buffer(self) -> DelayBuffer:
        """The underlying circular sample store."""
        return self._buffer

    @property
    def is_degenerate(self) -> bool:
        """True when tau1 and tau2 coincide and a single tap is read."""
        return is_degenerate(self._tau1, self._tau2)

    @property
    def effective_delay(self) -> float:
        """The delay the taps are centred on, in samples."""
        if self.is_degenerate:
            return self._tau1
        return blended_delay(self._tau1, self._tau2, self._alpha)

    @property
    def tau1_seconds(self) -> float:
        return float(samples_to_seconds(self._tau1, self._sample_rate))

    @property
    def tau2_seconds(self) -> float:
        return float(samples_to_seconds(self._tau2, self._sample_rate))

    @property
    def effective_delay_seconds(self) -> float:
        return float(samples_to_seconds(self.effective_delay, self._sample_rate))

    # ------------------------------------------------------------------
    # Parameter setters

    def set_k(self, k: int) -> None:
        """
        Set the number of auxiliary tap pairs.

        K = 0 evaluates 2 taps, K = 1 evaluates 4 taps, and so on.

        Raises:
            InvalidArgument: If k is not an integer, is negative, or is too
                large for the tap counter (config.MAX_K)
        """
        if isinstance(k, bool) or not isinstance(k, numbers.Integral):
            logger.debug("rejected K=%r", k)
            raise InvalidArgument(f"K must be an integer, got {k!r}")
        if k < 0:
            logger.debug("rejected K=%r", k)
            raise InvalidArgument(f"K cannot be negative, got {k}")
        if k > config.MAX_K:
            logger.debug("rejected K=%r", k)
            raise InvalidArgument(f"K must be at most {config.MAX_K}, got {k}")
        self._k = int(k)
        logger.debug("K set to %d (%d taps)", self._k, self.num_taps)

    def set_tau1(self, tau1: float) -> None:
        """
        Set the delay selected by alpha = 0.

        Raises:
            OutOfRange: Unless 0 <= tau1 < max_delay_samples - 1
        """
        self._tau1 = self._validated_delay("tau1", tau1)
        logger.debug("tau1 set to %s", self._tau1)

    def set_tau2(self, tau2: float) -> None:
        """
        Set the delay selected by alpha = 1.

        Raises:
            OutOfRange: Unless 0 <= tau2 < max_delay_samples - 1
        """
        self._tau2 = self._validated_delay("tau2", tau2)
        logger.debug("tau2 set to %s", self._tau2)

    def set_alpha(self, alpha: float) -> None:
        """
        Set the blend factor (0 selects tau1, 1 selects tau2).

        Raises:
            InvalidArgument: Unless 0 <= alpha <= 1
        """
        self._alpha = self._validated_alpha(alpha)

    def _validated_delay(self, name: str, value: float) -> float:
        limit = self.max_delay_samples - 1.0
        try:
            value = float(value)
        except (TypeError, ValueError) as exc:
            raise OutOfRange(f"{name} must be a number, got {value!r}") from exc
        # The interpolated read needs one sample of headroom past the delay
        if not (0.0 <= value < limit):
            logger.debug("rejected %s=%r", name, value)
            raise OutOfRange(
                f"{name} must be between 0.0 and max_delay_samples - 1.0 "
                f"({limit}), got {value}"
            )
        return value

    @staticmethod
    def _validated_alpha(alpha: float) -> float:
        try:
            value = float(alpha)
        except (TypeError, ValueError) as exc:
            raise InvalidArgument(f"alpha must be a number, got {alpha!r}") from exc
        if not (0.0 <= value <= 1.0):
            raise InvalidArgument(f"alpha must be between 0.0 and 1.0, got {value}")
        return value

    # ------------------------------------------------------------------
    # Processing

    def process(self, sample: float) -> float:
        """
        Process one input sample and return one output sample.

        Writes the input at the write cursor, sums the weighted taps (or
        reads a single tap when tau1 == tau2), then advances the cursor.
        """
        buf = self._buffer
        buf.write(sample)
        output = multi_tap_sample(
            buf.samples,
            buf.cursor,
            self._k,
            self._tau1,
            self._tau2,
            self._alpha,
            config.DELTA_TOLERANCE,
            config.SINC_TOLERANCE,
        )
        buf.advance()
        return float(output)

    def process_block(
        self,
        samples: ArrayLike,
        alpha: float | ArrayLike | None = None,
    ) -> np.ndarray:
        """
        Process a block of samples.

        Equivalent to calling set_alpha() and process() once per sample,
        but runs the whole block in one compiled loop.

        Args:
            samples: 1D array of input samples
            alpha: None to keep the current blend factor, a float to set it
                for the whole block, or a 1D array with one blend factor per
                sample (the last one remains current afterwards)

        Returns:
            1D float64 array of output samples, same length as samples

        Raises:
            InvalidArgument: If samples is not 1D, alpha has the wrong shape
                or any alpha lies outside [0, 1]. Nothing is processed.
        """
        x = np.ascontiguousarray(samples, dtype=np.float64)
        if x.ndim != 1:
            raise InvalidArgument(f"samples must be 1D, got {x.ndim}D")
        duration = x.shape[0]

        if alpha is None:
            final_alpha = self._alpha
            alphas = np.full(duration, final_alpha, dtype=np.float64)
        elif np.ndim(alpha) == 0:
            final_alpha = self._validated_alpha(alpha)
            alphas = np.full(duration, final_alpha, dtype=np.float64)
        else:
            alphas = np.ascontiguousarray(alpha, dtype=np.float64)
            if alphas.shape != (duration,):
                raise InvalidArgument(
                    f"alpha array must have shape ({duration},), got {alphas.shape}"
                )
            if not np.all((alphas >= 0.0) & (alphas <= 1.0)):
                raise InvalidArgument("alpha values must be between 0.0 and 1.0")
            final_alpha = float(alphas[-1]) if duration else self._alpha

        out = np.zeros(duration, dtype=np.float64)
        if duration == 0:
            self._alpha = final_alpha
            return out

        buf = self._buffer
        process_block_kernel(
            buf.samples,
            buf.cursor,
            x,
            alphas,
            out,
            self._k,
            self._tau1,
            self._tau2,
            config.DELTA_TOLERANCE,
            config.SINC_TOLERANCE,
        )
        buf.advance(duration)
        self._alpha = final_alpha
        return out

    def read_interpolated(self, position: float) -> float:
        """
        Fractional read from the delay buffer at an absolute slot position.

        See DelayBuffer.read_interpolated().
        """
        return self._buffer.read_interpolated(position)

    def taps(self) -> TapSchedule:
        """Tap positions and gains for the current parameters."""
        return schedule_taps(self._k, self._tau1, self._tau2, self._alpha)

    def reset(self) -> None:
        """Clear the delay buffer and rewind the write cursor."""
        self._buffer.clear()
        logger.debug("reset %r", self)

    def __repr__(self) -> str:
        return (
            f"MultiTapSincDelay(max_delay_samples={self.max_delay_samples}, "
            f"k={self._k}, tau1={self._tau1}, tau2={self._tau2}, "
            f"alpha={self._alpha}, sample_rate={self._sample_rate})"
        )
