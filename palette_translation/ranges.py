#!/usr/bin/env python3
"""
Translation range operators

Each range maps an inclusive interval of origin palette indices to a
destination. The set of range types is closed: palette, colour,
desaturated, blend, tint and special. Every range renders itself back into
the translation grammar via as_text().
"""

from dataclasses import dataclass, field, replace
from enum import Enum
from typing import Union

from .colour import RGB, clamp_byte
from .constants import DEFAULT_TINT_AMOUNT, TINT_AMOUNT_MAX

FloatRGB = tuple[float, float, float]


def _clamp_rgb(rgb) -> RGB:
    r, g, b = (clamp_byte(c) for c in rgb)
    return (r, g, b)


def _format_float(value: float) -> str:
    """Two decimals when exact, otherwise the shortest text that reads back the same"""
    if round(value, 2) == value:
        return f"{value:.2f}"
    return repr(float(value))


class RangeType(Enum):
    """Kinds of translation range"""

    PALETTE = "palette"
    COLOUR = "colour"
    DESAT = "desat"
    BLEND = "blend"
    TINT = "tint"
    SPECIAL = "special"


@dataclass
class _OriginRange:
    origin_start: int = 0
    origin_end: int = 0

    def __post_init__(self):
        self.origin_start = clamp_byte(self.origin_start)
        self.origin_end = clamp_byte(self.origin_end)
        self._clamp_destination()
        if self.origin_start > self.origin_end:
            self.origin_start, self.origin_end = self.origin_end, self.origin_start
            self._swap_destination()

    def _clamp_destination(self):
        """Bring destination indices and colours into 0-255"""

    def _swap_destination(self):
        """Reverse the destination along with the origin, where it has two ends"""

    def contains(self, index: int) -> bool:
        return self.origin_start <= index <= self.origin_end

    def fraction(self, index: int) -> float:
        """How far along the origin interval an index is (0.0 - 1.0)"""
        if self.origin_start == self.origin_end:
            return 0.0
        return (index - self.origin_start) / (self.origin_end - self.origin_start)

    def origin_text(self) -> str:
        return f"{self.origin_start}:{self.origin_end}"

    def copy(self):
        return replace(self)


@dataclass
class PaletteRange(_OriginRange):
    """Maps origin indices linearly onto another index interval"""

    dest_start: int = 0
    dest_end: int = 0
    type = RangeType.PALETTE

    def _clamp_destination(self):
        self.dest_start = clamp_byte(self.dest_start)
        self.dest_end = clamp_byte(self.dest_end)

    def _swap_destination(self):
        self.dest_start, self.dest_end = self.dest_end, self.dest_start

    def as_text(self) -> str:
        return f"{self.origin_text()}={self.dest_start}:{self.dest_end}"


@dataclass
class ColourRange(_OriginRange):
    """Maps origin indices onto an RGB gradient"""

    dest_start: RGB = (0, 0, 0)
    dest_end: RGB = (255, 255, 255)
    type = RangeType.COLOUR

    def _clamp_destination(self):
        self.dest_start = _clamp_rgb(self.dest_start)
        self.dest_end = _clamp_rgb(self.dest_end)

    def _swap_destination(self):
        self.dest_start, self.dest_end = self.dest_end, self.dest_start

    def as_text(self) -> str:
        s, e = self.dest_start, self.dest_end
        return (
            f"{self.origin_text()}=[{s[0]},{s[1]},{s[2]}]:[{e[0]},{e[1]},{e[2]}]"
        )


@dataclass
class DesatRange(_OriginRange):
    """Maps the greyscale of origin colours onto a float RGB gradient"""

    start: FloatRGB = (0.0, 0.0, 0.0)
    end: FloatRGB = (2.0, 2.0, 2.0)
    type = RangeType.DESAT

    def _swap_destination(self):
        self.start, self.end = self.end, self.start

    def as_text(self) -> str:
        start = ",".join(_format_float(v) for v in self.start)
        end = ",".join(_format_float(v) for v in self.end)
        return f"{self.origin_text()}=%[{start}]:[{end}]"


@dataclass
class BlendRange(_OriginRange):
    """Colourises origin colours by their greyscale weight"""

    colour: RGB = (255, 255, 255)
    type = RangeType.BLEND

    def _clamp_destination(self):
        self.colour = _clamp_rgb(self.colour)

    def as_text(self) -> str:
        c = self.colour
        return f"{self.origin_text()}=#[{c[0]},{c[1]},{c[2]}]"


@dataclass
class TintRange(_OriginRange):
    """Mixes origin colours with a fixed colour by a percentage"""

    colour: RGB = (255, 255, 255)
    amount: int = DEFAULT_TINT_AMOUNT
    type = RangeType.TINT

    def _clamp_destination(self):
        self.colour = _clamp_rgb(self.colour)
        self.amount = max(0, min(TINT_AMOUNT_MAX, int(self.amount)))

    def as_text(self) -> str:
        c = self.colour
        return f"{self.origin_text()}=@{self.amount}[{c[0]},{c[1]},{c[2]}]"


@dataclass
class SpecialRange(_OriginRange):
    """Applies a named special blend (ice, gold, desat12, ...) to origin colours"""

    name: str = field(default="")
    type = RangeType.SPECIAL

    def as_text(self) -> str:
        return f"{self.origin_text()}=${self.name}"


TranslationRange = Union[
    PaletteRange, ColourRange, DesatRange, BlendRange, TintRange, SpecialRange
]

RANGE_CLASSES = {
    RangeType.PALETTE: PaletteRange,
    RangeType.COLOUR: ColourRange,
    RangeType.DESAT: DesatRange,
    RangeType.BLEND: BlendRange,
    RangeType.TINT: TintRange,
    RangeType.SPECIAL: SpecialRange,
}


def create_range(kind: Union[RangeType, str]) -> TranslationRange:
    """Create a range of the given kind with default values"""
    return RANGE_CLASSES[RangeType(kind)]()
