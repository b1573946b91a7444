"""
Mutable 2D vector used for positions and velocities.
"""

from __future__ import annotations

import math
import random
from dataclasses import dataclass

from blink_pong.constants import BALL_SPEED


@dataclass
class Vector:
    """
    Mutable 2D vector.

    Every operation mutates the vector in place and returns it, so calls
    can be chained: ``Vector(1, 2).add(other).normalize(5)``.

    :ivar x (float): X component.
    :ivar y (float): Y component.
    """

    x: float = 0.0
    y: float = 0.0

    @staticmethod
    def random_ball_velocity(rng: random.Random | None = None) -> "Vector":
        """
        Build a serve velocity: random horizontal direction, random vertical
        slope in [-1, 1], scaled to ``BALL_SPEED``.

        :param rng: Optional random source (defaults to the ``random`` module).
        :type rng: random.Random | None

        :return: New velocity vector.
        :rtype: Vector
        """
        rng = rng or random
        vel = Vector(rng.choice((-1.0, 1.0)), rng.uniform(-1.0, 1.0))
        return vel.normalize(BALL_SPEED)

    def add(self, v: "Vector", scalar: float = 1.0) -> "Vector":
        """Add ``v * scalar`` to this vector."""
        self.x += v.x * scalar
        self.y += v.y * scalar
        return self

    def sub(self, v: "Vector", scalar: float = 1.0) -> "Vector":
        """Subtract ``v * scalar`` from this vector."""
        self.x -= v.x * scalar
        self.y -= v.y * scalar
        return self

    def dot(self, v: "Vector") -> float:
        """Scalar product."""
        return self.x * v.x + self.y * v.y

    def length(self) -> float:
        """Euclidean norm."""
        return math.hypot(self.x, self.y)

    def normalize(self, scalar: float = 1.0) -> "Vector":
        """
        Rescale to length ``scalar``.

        A zero vector stays zero.

        :param scalar: Target length.
        :type scalar: float

        :return: This vector.
        :rtype: Vector
        """
        length = self.length()
        if length > 0:
            self.x /= length
            self.y /= length
        return self.scale(scalar)

    def scale(self, scalar: float) -> "Vector":
        """Multiply both components by ``scalar``."""
        self.x *= scalar
        self.y *= scalar
        return self

    def copy(self) -> "Vector":
        """Independent copy of this vector."""
        return Vector(self.x, self.y)

    def to_tuple(self) -> tuple[float, float]:
        """
        Convert Vector to a tuple.

        :return: Tuple of (x, y).
        :rtype: tuple[float, float]
        """
        return (self.x, self.y)
