#!/usr/bin/env python3
"""
Palette translation

A translation is an ordered list of ranges, each mapping an origin palette
index interval to some kind of destination (another palette range, a colour
gradient, a desaturated gradient, a blend, a tint or a special blend), or
one of the built-in whole-palette presets (Ice, Inverse, Red, Green, Blue,
Gold, Desaturate).

    Palette range:   0...16 -> 32...48       "0:16=32:48"
    Colour gradient: 0...16 -> Red...Black   "0:16=[255,0,0]:[0,0,0]"

Ranges are evaluated in list order and every range containing the index
overwrites the result, so when ranges overlap the last one wins. Special
ranges are the exception and return as soon as they match.
"""

from typing import Callable, Optional, Sequence, Union

from .blends import blend_type_for_name, special_blend
from .colour import Colour, clamp_channel
from .constants import (
    DEFAULT_DESAT_AMOUNT,
    DEFAULT_GREYSCALE_B,
    DEFAULT_GREYSCALE_G,
    DEFAULT_GREYSCALE_R,
    DESAT_GREY_B,
    DESAT_GREY_G,
    DESAT_GREY_R,
    DESATURATE_NAME,
    MAX_CHANNEL,
    PALETTE_ENTRIES,
    TINT_AMOUNT_MAX,
)
from .logging_config import get_logger
from .palette import Palette
from .parser import get_parser
from .ranges import (
    BlendRange,
    ColourRange,
    DesatRange,
    PaletteRange,
    RangeType,
    SpecialRange,
    TintRange,
    TranslationRange,
    create_range,
)
from .table_analyzer import analyze_table

logger = get_logger("translation")

GreyscaleWeights = tuple[float, float, float]
DEFAULT_GREYSCALE_WEIGHTS: GreyscaleWeights = (
    DEFAULT_GREYSCALE_R,
    DEFAULT_GREYSCALE_G,
    DEFAULT_GREYSCALE_B,
)


def _lerp(start: float, end: float, frac: float) -> float:
    return start + frac * (end - start)


def _translate_palette_range(tr: PaletteRange, index: int, source: Colour,
                             palette: Palette, weights: GreyscaleWeights) -> Colour:
    di = clamp_channel(_lerp(tr.dest_start, tr.dest_end, tr.fraction(index)))
    return palette.colour(di)


def _translate_colour_range(tr: ColourRange, index: int, source: Colour,
                            palette: Palette, weights: GreyscaleWeights) -> Colour:
    frac = tr.fraction(index)
    result = Colour(
        clamp_channel(_lerp(tr.dest_start[0], tr.dest_end[0], frac)),
        clamp_channel(_lerp(tr.dest_start[1], tr.dest_end[1], frac)),
        clamp_channel(_lerp(tr.dest_start[2], tr.dest_end[2], frac)),
        source.a,
    )
    result.index = palette.nearest_colour(result)
    return result


def _translate_desat_range(tr: DesatRange, index: int, source: Colour,
                           palette: Palette, weights: GreyscaleWeights) -> Colour:
    # Greyscale of the palette colour, not the incoming one
    pcol = palette.colour(index)
    grey = (pcol.r * DESAT_GREY_R + pcol.g * DESAT_GREY_G + pcol.b * DESAT_GREY_B) / MAX_CHANNEL
    result = Colour(
        clamp_channel(_lerp(tr.start[0], tr.end[0], grey) * MAX_CHANNEL),
        clamp_channel(_lerp(tr.start[1], tr.end[1], grey) * MAX_CHANNEL),
        clamp_channel(_lerp(tr.start[2], tr.end[2], grey) * MAX_CHANNEL),
        source.a,
    )
    result.index = palette.nearest_colour(result)
    return result


def _translate_blend_range(tr: BlendRange, index: int, source: Colour,
                           palette: Palette, weights: GreyscaleWeights) -> Colour:
    wr, wg, wb = weights
    grey = (source.r * wr + source.g * wg + source.b * wb) / MAX_CHANNEL
    grey = max(0.0, min(1.0, grey))
    result = Colour(
        clamp_channel(tr.colour[0] * grey),
        clamp_channel(tr.colour[1] * grey),
        clamp_channel(tr.colour[2] * grey),
        source.a,
    )
    result.index = palette.nearest_colour(result)
    return result


def _translate_tint_range(tr: TintRange, index: int, source: Colour,
                          palette: Palette, weights: GreyscaleWeights) -> Colour:
    amount = tr.amount / TINT_AMOUNT_MAX
    inv_amount = 1.0 - amount
    result = Colour(
        clamp_channel(source.r * inv_amount + tr.colour[0] * amount),
        clamp_channel(source.g * inv_amount + tr.colour[1] * amount),
        clamp_channel(source.b * inv_amount + tr.colour[2] * amount),
        source.a,
    )
    result.index = palette.nearest_colour(result)
    return result


RangeEvaluator = Callable[[TranslationRange, int, Colour, Palette, GreyscaleWeights], Colour]

# Special ranges are handled separately, they end the evaluation
RANGE_EVALUATORS: dict[type, RangeEvaluator] = {
    PaletteRange: _translate_palette_range,
    ColourRange: _translate_colour_range,
    DesatRange: _translate_desat_range,
    BlendRange: _translate_blend_range,
    TintRange: _translate_tint_range,
}


class Translation:
    """An ordered set of translation ranges, or a built-in preset"""

    def __init__(self, definition: Optional[str] = None):
        self.ranges: list[TranslationRange] = []
        self.built_in_name = ""
        self.desat_amount = DEFAULT_DESAT_AMOUNT
        if definition:
            self.parse(definition)

    def __eq__(self, other) -> bool:
        if not isinstance(other, Translation):
            return NotImplemented
        return (
            self.ranges == other.ranges
            and self.built_in_name == other.built_in_name
            and self.desat_amount == other.desat_amount
        )

    def __repr__(self) -> str:
        return f"Translation({self.as_text()!r})"

    def __len__(self) -> int:
        return len(self.ranges)

    def __iter__(self):
        return iter(self.ranges)

    def parse(self, definition: str) -> bool:
        """
        Parse a text definition (in ZDoom format) into this translation.

        Returns:
            False if parsing stopped at a malformed clause
        """
        return get_parser().parse(definition, self)

    def as_text(self) -> str:
        """Get the definition text of this translation (in ZDoom format)"""
        if self.built_in_name:
            text = self.built_in_name
            if self.built_in_name == DESATURATE_NAME:
                text += f", {self.desat_amount}"
            return text

        return ", ".join(f'"{tr.as_text()}"' for tr in self.ranges)

    def read_table(self, table: Sequence[int]):
        """Add the palette ranges inferred from a raw 256-entry translation table"""
        for tr in analyze_table(table):
            self.add(tr)
        logger.debug(f"Translation table analyzed as {self.as_text()}")

    def is_empty(self) -> bool:
        return not self.ranges and not self.built_in_name

    def n_ranges(self) -> int:
        return len(self.ranges)

    def get_range(self, index: int) -> Optional[TranslationRange]:
        """Get the range at index, None if out of bounds"""
        if 0 <= index < len(self.ranges):
            return self.ranges[index]
        return None

    def add(self, trange: TranslationRange):
        """Append a range"""
        self.ranges.append(trange)

    def insert_range(self, trange: TranslationRange, pos: int = -1) -> TranslationRange:
        """Insert a range at pos, appending if pos is negative or past the end"""
        if pos < 0 or pos >= len(self.ranges):
            self.ranges.append(trange)
        else:
            self.ranges.insert(pos, trange)
        return trange

    def add_range(self, kind: Union[RangeType, str], pos: int = -1) -> TranslationRange:
        """Insert a new default range of the given kind"""
        return self.insert_range(create_range(kind), pos)

    def remove_range(self, pos: int):
        """Remove the range at pos (ignored if out of bounds)"""
        if 0 <= pos < len(self.ranges):
            del self.ranges[pos]

    def swap_ranges(self, pos1: int, pos2: int):
        """Swap two ranges (ignored if either position is out of bounds)"""
        count = len(self.ranges)
        if not (0 <= pos1 < count and 0 <= pos2 < count):
            return
        self.ranges[pos1], self.ranges[pos2] = self.ranges[pos2], self.ranges[pos1]

    def clear(self):
        """Remove all ranges and any built-in preset"""
        self.ranges = []
        self.built_in_name = ""
        self.desat_amount = DEFAULT_DESAT_AMOUNT

    def copy_from(self, other: "Translation"):
        """Replace this translation with a deep copy of another"""
        self.clear()
        self.ranges = [tr.copy() for tr in other.ranges]
        self.built_in_name = other.built_in_name
        self.desat_amount = other.desat_amount

    def copy(self) -> "Translation":
        duplicate = Translation()
        duplicate.copy_from(self)
        return duplicate

    def translate(self, colour: Colour, palette: Palette,
                  greyscale: Optional[GreyscaleWeights] = None) -> Colour:
        """
        Apply the translation to a colour.

        Args:
            colour: Colour to translate; an unresolved index is matched
                against the palette first
            palette: Palette the colour belongs to
            greyscale: (r, g, b) weights for blend ranges

        Returns:
            The translated colour, or the input colour if no range applies
        """
        weights = greyscale or DEFAULT_GREYSCALE_WEIGHTS
        index = palette.nearest_colour(colour) if colour.index is None else colour.index

        if self.built_in_name:
            blend_type = blend_type_for_name(self.built_in_name, self.desat_amount)
            return special_blend(colour, blend_type, palette)

        result = colour
        for tr in self.ranges:
            if not tr.contains(index):
                continue
            if isinstance(tr, SpecialRange):
                return special_blend(colour, blend_type_for_name(tr.name), palette)
            result = RANGE_EVALUATORS[type(tr)](tr, index, colour, palette, weights)
        return result

    def translate_index(self, index: int, palette: Palette,
                        greyscale: Optional[GreyscaleWeights] = None) -> Colour:
        """Translate a palette index"""
        return self.translate(palette.colour(index), palette, greyscale)

    def translate_palette(self, palette: Palette,
                          greyscale: Optional[GreyscaleWeights] = None) -> Palette:
        """Get a copy of the palette with every entry translated"""
        translated = palette.copy()
        for i in range(PALETTE_ENTRIES):
            translated.set_colour(i, self.translate_index(i, palette, greyscale))
        return translated

    def to_table(self, palette: Palette,
                 greyscale: Optional[GreyscaleWeights] = None) -> bytes:
        """Build a raw 256-entry index translation table for a palette"""
        table = bytearray(PALETTE_ENTRIES)
        for i in range(PALETTE_ENTRIES):
            result = self.translate_index(i, palette, greyscale)
            table[i] = palette.nearest_colour(result) if result.index is None else result.index
        return bytes(table)


def parse_translation(definition: str) -> Translation:
    """Create a translation from a text definition"""
    translation = Translation()
    translation.parse(definition)
    return translation


def translation_from_table(table: Sequence[int]) -> Translation:
    """Create a translation from a raw 256-entry translation table"""
    translation = Translation()
    translation.read_table(table)
    return translation
