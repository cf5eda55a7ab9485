"""
Tap scheduling and sinc weighting for the multi-tap delay.

Given two target delays tau1 and tau2, a blend factor alpha and a tap-pair
count K, the scheduler places 2K + 2 taps spaced by delta = tau2 - tau1:

    k <= K:  t_k = tau1 - (K - k) * delta     (walking away from tau2)
    k >  K:  t_k = tau2 + (k - K - 1) * delta (walking away from tau1)

and weights each by h_k = sinc((t_k - tau) / delta), where
tau = (1 - alpha) * tau1 + alpha * tau2 is the blended target delay.
As alpha sweeps 0 -> 1 the dominant gain moves from the tau1 tap to the
tau2 tap while the outer taps band-limit the transition.

When |delta| is within DELTA_TOLERANCE the two targets are the same delay
and a single interpolated read at tau1 is used instead.

MIT License
"""

from __future__ import annotations

from dataclasses import dataclass

import numpy as np
from numba import njit

from sincdelay.config import DELTA_TOLERANCE
from sincdelay.delay_buffer import read_interpolated_kernel
from sincdelay.sinc import sinc_array, sinc_kernel


@njit(cache=True)
def multi_tap_sample(
    buffer: np.ndarray,
    write_index: int,
    k_pairs: int,
    tau1: float,
    tau2: float,
    alpha: float,
    delta_tolerance: float,
    sinc_tolerance: float,
) -> float:
    """
    Weighted sum of all tap reads for the sample at write_index.

    The caller must already have written the current input at write_index.
    """
    delta = tau2 - tau1

    if abs(delta) < delta_tolerance:
        return read_interpolated_kernel(buffer, write_index - tau1)

    tau = (1.0 - alpha) * tau1 + alpha * tau2
    delta_safe = delta
    if abs(delta) < delta_tolerance:
        delta_safe = 1.0

    output = 0.0
    num_taps = 2 * k_pairs + 2
    for k in range(num_taps):
        if k <= k_pairs:
            tk = tau1 - (k_pairs - k) * delta
        else:
            tk = tau2 + (k - k_pairs - 1) * delta
        hk = sinc_kernel((tk - tau) / delta_safe, sinc_tolerance)
        output += read_interpolated_kernel(buffer, write_index - tk) * hk
    return output


@njit(cache=True)
def process_block_kernel(
    buffer: np.ndarray,
    write_index: int,
    samples: np.ndarray,
    alphas: np.ndarray,
    out: np.ndarray,
    k_pairs: int,
    tau1: float,
    tau2: float,
    delta_tolerance: float,
    sinc_tolerance: float,
) -> None:
    """
    Run the write / sum / advance cycle over a block of samples.

    Outputs go to `out`. The caller advances its own cursor by the block
    length afterwards.
    """
    capacity = buffer.shape[0]
    for n in range(samples.shape[0]):
        buffer[write_index] = samples[n]
        out[n] = multi_tap_sample(
            buffer,
            write_index,
            k_pairs,
            tau1,
            tau2,
            alphas[n],
            delta_tolerance,
            sinc_tolerance,
        )
        write_index += 1
        if write_index >= capacity:
            write_index = 0


@dataclass(frozen=True)
class TapSchedule:
    """
    Tap positions and gains for one parameter set.

    Attributes:
        positions: Delay of each tap in samples
        gains: Sinc gain of each tap
        tau: Blended target delay (tau1 when degenerate)
        degenerate: True when tau1 and tau2 coincide and a single tap is used
    """

    positions: np.ndarray
    gains: np.ndarray
    tau: float
    degenerate: bool

    def __len__(self) -> int:
        return len(self.positions)


def is_degenerate(tau1: float, tau2: float) -> bool:
    """True when the two target delays are equal within DELTA_TOLERANCE."""
    return abs(tau2 - tau1) < DELTA_TOLERANCE


def blended_delay(tau1: float, tau2: float, alpha: float) -> float:
    """The target delay (1 - alpha) * tau1 + alpha * tau2."""
    return (1.0 - alpha) * tau1 + alpha * tau2


def tap_positions(k_pairs: int, tau1: float, tau2: float) -> np.ndarray:
    """
    Positions of the 2K + 2 taps for the general (non-degenerate) case.

    Example:
        >>> tap_positions(1, 10.0, 12.0)
        array([ 8., 10., 12., 14.])
    """
    delta = tau2 - tau1
    k = np.arange(2 * k_pairs + 2, dtype=np.float64)
    return np.where(
        k <= k_pairs,
        tau1 - (k_pairs - k) * delta,
        tau2 + (k - k_pairs - 1) * delta,
    )


def tap_gains(
    positions: np.ndarray, tau1: float, tau2: float, alpha: float
) -> np.ndarray:
    """Sinc gain of each tap position for the given blend factor."""
    delta = tau2 - tau1
    delta_safe = 1.0 if abs(delta) < DELTA_TOLERANCE else delta
    tau = blended_delay(tau1, tau2, alpha)
    return sinc_array((np.asarray(positions, dtype=np.float64) - tau) / delta_safe)


def schedule_taps(k_pairs: int, tau1: float, tau2: float, alpha: float) -> TapSchedule:
    """
    Compute the full tap schedule for one parameter set.

    This allocates and is meant for inspection; the audio path evaluates the
    same taps in place via multi_tap_sample().
    """
    if is_degenerate(tau1, tau2):
        return TapSchedule(
            positions=np.array([tau1], dtype=np.float64),
            gains=np.ones(1, dtype=np.float64),
            tau=float(tau1),
            degenerate=True,
        )
    positions = tap_positions(k_pairs, tau1, tau2)
    return TapSchedule(
        positions=positions,
        gains=tap_gains(positions, tau1, tau2, alpha),
        tau=blended_delay(tau1, tau2, alpha),
        degenerate=False,
    )


def dominant_tap(schedule: TapSchedule) -> float:
    """Position of the tap with the largest gain magnitude."""
    return float(schedule.positions[int(np.argmax(np.abs(schedule.gains)))])
