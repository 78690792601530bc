#!/usr/bin/env python3
"""
RGBA colour value used by palettes and the translation evaluator
"""

import math
from dataclasses import dataclass
from typing import Optional

from .constants import DEFAULT_ALPHA, MAX_CHANNEL

RGB = tuple[int, int, int]


def clamp_channel(value: float) -> int:
    """Round half up and clamp to the 0-255 channel range."""
    rounded = int(math.floor(value + 0.5))
    return max(0, min(MAX_CHANNEL, rounded))


def clamp_byte(value: int) -> int:
    """Clamp an integer to 0-255."""
    return max(0, min(MAX_CHANNEL, int(value)))


@dataclass
class Colour:
    """
    An RGBA colour, optionally tied to a palette index.

    ``index`` is None while the colour has not been resolved against a
    palette.
    """

    r: int = 0
    g: int = 0
    b: int = 0
    a: int = DEFAULT_ALPHA
    index: Optional[int] = None

    @property
    def rgb(self) -> RGB:
        return (self.r, self.g, self.b)

    @property
    def rgba(self) -> tuple[int, int, int, int]:
        return (self.r, self.g, self.b, self.a)

    def as_hex(self) -> str:
        return f"#{self.r:02X}{self.g:02X}{self.b:02X}"
