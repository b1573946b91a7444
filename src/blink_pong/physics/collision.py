"""
Circle vs. axis-aligned rectangle intersection.
"""

from __future__ import annotations

import math
from typing import Protocol

from mini_arcade_core.spaces.d2.geometry2d import Size2D

from blink_pong.physics.easing import clamp
from blink_pong.physics.vector import Vector


class Rectangle(Protocol):
    """Anything with a top-left position and a size."""

    position: Vector
    size: Size2D


class Circle(Protocol):
    """Anything with a center position and a radius."""

    position: Vector
    radius: float


def intersects(rectangle: Rectangle, circle: Circle) -> bool:
    """
    Check whether a circle overlaps a rectangle.

    The circle center is clamped onto the rectangle to find the nearest
    point; touching exactly at the radius does not count.

    :param rectangle: Axis-aligned rectangle.
    :type rectangle: Rectangle

    :param circle: Circle to test.
    :type circle: Circle

    :return: True if the shapes overlap.
    :rtype: bool
    """
    rx, ry = rectangle.position.to_tuple()
    width, height = rectangle.size.to_tuple()
    cx, cy = circle.position.to_tuple()

    x = clamp(cx, rx, rx + width)
    y = clamp(cy, ry, ry + height)

    return math.hypot(cx - x, cy - y) < circle.radius
