"""
DelayBuffer - fixed-capacity circular sample store with a fractional reader.

MIT License
"""

from __future__ import annotations

import math
import operator

import numpy as np
from numba import njit

from sincdelay.errors import InvalidArgument


@njit(cache=True)
def read_interpolated_kernel(buffer: np.ndarray, position: float) -> float:
    """
    Linearly interpolated read at a fractional buffer position.

    Positions may be negative or beyond the end of the buffer; both wrap
    modulo the buffer length. Performs no allocation.
    """
    capacity = buffer.shape[0]
    wrapped = position
    # Tap positions can lie more than one buffer length in the past
    while wrapped < 0.0:
        wrapped += capacity
    wrapped = np.fmod(wrapped, float(capacity))

    floor_pos = math.floor(wrapped)
    index0 = int(floor_pos)
    index1 = (index0 + 1) % capacity
    frac = wrapped - floor_pos

    return buffer[index0] * (1.0 - frac) + buffer[index1] * frac


class DelayBuffer:
    """
    Circular store holding the most recent `capacity` input samples.

    The capacity is fixed at construction. The write cursor always lies in
    [0, capacity) and wraps to zero after the last slot.

    Args:
        capacity: Number of samples held (must be a positive integer)

    Example:
        buf = DelayBuffer(8)
        buf.write(1.0)
        buf.advance()
        buf.read_interpolated(buf.cursor - 0.5)  # halfway back to the 1.0
    """

    def __init__(self, capacity: int):
        try:
            capacity = operator.index(capacity)
        except TypeError as exc:
            raise InvalidArgument(
                f"capacity must be an integer, got {capacity!r}"
            ) from exc
        if capacity <= 0:
            raise InvalidArgument(f"capacity must be greater than 0, got {capacity}")
        self._data = np.zeros(capacity, dtype=np.float64)
        self._cursor = 0

    @property
    def capacity(self) -> int:
        """Number of samples the buffer holds."""
        return self._data.shape[0]

    @property
    def cursor(self) -> int:
        """Index of the slot the next write will fill."""
        return self._cursor

    @property
    def data(self) -> np.ndarray:
        """Read-only view of the stored samples, in slot order."""
        view = self._data.view()
        view.flags.writeable = False
        return view

    @property
    def samples(self) -> np.ndarray:
        """The live sample array, for compiled kernels that write in place."""
        return self._data

    def write(self, sample: float) -> None:
        """Store a sample at the current cursor position."""
        self._data[self._cursor] = sample

    def advance(self, count: int = 1) -> None:
        """Move the cursor forward by count slots, wrapping at capacity."""
        self._cursor = (self._cursor + count) % self._data.shape[0]

    def read_interpolated(self, position: float) -> float:
        """
        Read the buffer at a fractional slot position.

        Callers address taps as `cursor - delay`; negative and out-of-range
        positions wrap around the buffer.

        Args:
            position: Fractional slot index

        Returns:
            Linear interpolation between the two neighbouring slots

        Raises:
            InvalidArgument: If position is NaN or infinite
        """
        position = float(position)
        if not math.isfinite(position):
            raise InvalidArgument(f"position must be finite, got {position!r}")
        return float(read_interpolated_kernel(self._data, position))

    def clear(self) -> None:
        """Zero every slot and rewind the cursor."""
        self._data.fill(0.0)
        self._cursor = 0

    def __len__(self) -> int:
        return self._data.shape[0]

    def __repr__(self) -> str:
        return f"DelayBuffer(capacity={self.capacity}, cursor={self._cursor})"
