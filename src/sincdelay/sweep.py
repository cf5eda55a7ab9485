"""
Impulse-sweep driver and response analysis for MultiTapSincDelay.

Feeds a unit impulse through an engine while the blend factor is swept
linearly from 0 to 1, and locates where the delayed impulse lands for a
given blend factor.

MIT License
"""

from __future__ import annotations

from dataclasses import dataclass
from typing import Iterable, Iterator

import numpy as np

from sincdelay.errors import InvalidArgument
from sincdelay.logger import get_logger
from sincdelay.multi_tap_sinc_delay import MultiTapSincDelay

logger = get_logger(__name__)


@dataclass(frozen=True)
class SweepResult:
    """Per-sample input, output and blend factor of a sweep."""

    inputs: np.ndarray
    outputs: np.ndarray
    alphas: np.ndarray

    def __len__(self) -> int:
        return len(self.inputs)

    def rows(self) -> Iterator[tuple[float, float, float]]:
        """Yield (input, output, alpha) for each sample."""
        for x, y, a in zip(self.inputs, self.outputs, self.alphas):
            yield float(x), float(y), float(a)


def impulse(length: int) -> np.ndarray:
    """A unit impulse: 1.0 followed by length - 1 zeros."""
    if length <= 0:
        raise InvalidArgument(f"length must be positive, got {length}")
    signal = np.zeros(length, dtype=np.float64)
    signal[0] = 1.0
    return signal


def impulse_sweep(engine: MultiTapSincDelay, num_samples: int = 1000) -> SweepResult:
    """
    Feed a unit impulse while sweeping alpha linearly from 0 to 1.

    Sample i is processed with alpha = i / (num_samples - 1). The engine's
    buffer and cursor carry on from wherever they were; call reset() first
    for a clean run.

    Args:
        engine: Engine to drive (tau1, tau2 and K already configured)
        num_samples: Number of samples to process

    Returns:
        SweepResult with the input, output and alpha of every sample
    """
    inputs = impulse(num_samples)
    alphas = np.linspace(0.0, 1.0, num_samples)
    logger.info(
        "sweeping alpha over %d samples (K=%d, tau1=%s, tau2=%s)",
        num_samples,
        engine.k,
        engine.tau1,
        engine.tau2,
    )
    outputs = engine.process_block(inputs, alpha=alphas)
    if not np.all(np.isfinite(outputs)):
        logger.warning("sweep produced non-finite output")
    return SweepResult(inputs=inputs, outputs=outputs, alphas=alphas)


def peak_lag(engine: MultiTapSincDelay, alpha: float, length: int) -> int:
    """
    Sample index of the largest-magnitude response to a unit impulse.

    Resets the engine, holds alpha fixed and processes `length` samples.
    Ties resolve to the earliest index.
    """
    engine.reset()
    response = engine.process_block(impulse(length), alpha=alpha)
    return int(np.argmax(np.abs(response)))


def peak_lag_trajectory(
    engine: MultiTapSincDelay, alphas: Iterable[float], length: int
) -> list[int]:
    """peak_lag() for each blend factor in alphas, in order."""
    return [peak_lag(engine, alpha, length) for alpha in alphas]
