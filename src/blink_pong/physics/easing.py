"""
Scalar interpolation helpers.
"""

from __future__ import annotations

import math
from typing import Callable

Ease = Callable[[float], float]


def clamp(value: float, lo: float, hi: float) -> float:
    """Clamp ``value`` into ``[lo, hi]``."""
    return min(max(value, lo), hi)


def saturate(value: float) -> float:
    """Clamp ``value`` into ``[0, 1]``."""
    return clamp(value, 0.0, 1.0)


def lerp(a: float, b: float, t: float) -> float:
    """Linear interpolation from ``a`` to ``b``."""
    return a + (b - a) * t


def unlerp(value: float, a: float, b: float) -> float:
    """
    Inverse of :func:`lerp`: where ``value`` sits between ``a`` and ``b``.

    :return: Progress (unclamped), or 0.0 when ``a == b``.
    :rtype: float
    """
    if a == b:
        return 0.0
    return (value - a) / (b - a)


def ease_linear(t: float) -> float:
    """Identity easing."""
    return t


def remap(
    value: float,
    from_min: float,
    from_max: float,
    to_min: float,
    to_max: float,
    ease: Ease = ease_linear,
) -> float:
    """
    Map ``value`` from one range onto another.

    :param value: Input value.
    :type value: float

    :param from_min: Start of the input range.
    :type from_min: float

    :param from_max: End of the input range.
    :type from_max: float

    :param to_min: Start of the output range.
    :type to_min: float

    :param to_max: End of the output range.
    :type to_max: float

    :param ease: Applied to the normalized progress before mapping,
        e.g. :func:`saturate` to stay inside the output range.
    :type ease: Callable[[float], float]

    :return: Remapped value.
    :rtype: float
    """
    return lerp(to_min, to_max, ease(unlerp(value, from_min, from_max)))


def damp(value: float, target: float, lambda_: float, dt: float) -> float:
    """
    Frame-rate independent exponential smoothing of ``value`` toward
    ``target``.

    :param value: Current value.
    :type value: float

    :param target: Value being approached.
    :type target: float

    :param lambda_: Decay rate; higher is snappier.
    :type lambda_: float

    :param dt: Elapsed time in seconds.
    :type dt: float

    :return: Smoothed value.
    :rtype: float
    """
    return lerp(value, target, 1.0 - math.exp(-lambda_ * dt))
