"""
Physics helpers for Blink Pong: vectors, easing and collision tests.
"""

from __future__ import annotations

from .collision import intersects
from .easing import clamp, damp, lerp, remap, saturate, unlerp
from .vector import Vector

__all__ = [
    "Vector",
    "clamp",
    "damp",
    "intersects",
    "lerp",
    "remap",
    "saturate",
    "unlerp",
]
