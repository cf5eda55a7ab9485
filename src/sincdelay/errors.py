"""
Exception types raised by sincdelay.

MIT License
"""


class SincDelayError(Exception):
    """Base class for all sincdelay errors."""

    pass


class InvalidArgument(SincDelayError, ValueError):
    """
    A value lies outside its logically required domain: a negative or
    non-integer tap-pair count, a blend factor outside [0, 1], a
    non-positive buffer capacity or sample rate.
    """

    pass


class OutOfRange(SincDelayError, ValueError):
    """A delay length lies outside the buffer's addressable window."""

    pass
