#!/usr/bin/env python3
"""
Special colour blends

The whole-palette presets (Ice, Inverse, Red, Green, Blue, Gold and the
31 desaturation levels) expressed as luminance driven colour functions.
Blend types are small integer codes; names are resolved through a single
table shared by the parser, the evaluator and the serializer.
"""

from typing import Optional

from .colour import Colour, clamp_channel
from .constants import (
    BLEND_BLUE,
    BLEND_DESAT_FIRST,
    BLEND_DESAT_LAST,
    BLEND_GOLD,
    BLEND_GREEN,
    BLEND_ICE,
    BLEND_INVALID,
    BLEND_INVERSE,
    BLEND_RED,
    DEFAULT_DESAT_AMOUNT,
    DESAT_PREFIX,
    DESATURATE_NAME,
    ICE_RANGE,
    MAX_CHANNEL,
    PRESET_GRADIENTS,
    SPECIAL_GREY_B,
    SPECIAL_GREY_DIVISOR,
    SPECIAL_GREY_G,
    SPECIAL_GREY_R,
)
from .palette import Palette

# Lower-case preset name -> (canonical name, blend code).
# Desaturate has no fixed code; its code is the desaturation amount.
PRESETS = {
    "inverse": ("Inverse", BLEND_INVERSE),
    "gold": ("Gold", BLEND_GOLD),
    "red": ("Red", BLEND_RED),
    "green": ("Green", BLEND_GREEN),
    "blue": ("Blue", BLEND_BLUE),
    "ice": ("Ice", BLEND_ICE),
    "desaturate": (DESATURATE_NAME, None),
}


def canonical_preset_name(name: str) -> Optional[str]:
    """Get the canonical spelling of a preset name, None if it isn't one"""
    entry = PRESETS.get(name.strip().lower())
    return entry[0] if entry else None


def is_desat_type(blend_type: int) -> bool:
    return BLEND_DESAT_FIRST <= blend_type <= BLEND_DESAT_LAST


def blend_type_for_name(name: str, desat_amount: Optional[int] = None) -> int:
    """
    Resolve a preset or special range name to a blend code.

    Matching is case-insensitive. "Desaturate" uses desat_amount; any other
    name starting with "desat" takes its level from its last two characters
    (desat01 - desat31). Unknown names give BLEND_INVALID.
    """
    key = name.strip().lower()
    entry = PRESETS.get(key)
    if entry is not None:
        if entry[1] is not None:
            return entry[1]
        amount = DEFAULT_DESAT_AMOUNT if desat_amount is None else desat_amount
        return amount if is_desat_type(amount) else BLEND_INVALID

    if key.startswith(DESAT_PREFIX):
        try:
            level = int(key[-2:])
        except ValueError:
            return BLEND_INVALID
        if is_desat_type(level):
            return level

    return BLEND_INVALID


def special_grey(colour: Colour) -> float:
    """Greyscale of a colour using the ZDoom formula"""
    return (
        colour.r * SPECIAL_GREY_R + colour.g * SPECIAL_GREY_G + colour.b * SPECIAL_GREY_B
    ) / SPECIAL_GREY_DIVISOR


def special_blend(colour: Colour, blend_type: int, palette: Palette) -> Colour:
    """
    Apply one of the special blending modes to a colour.

    Args:
        colour: Source colour
        blend_type: Blend code (BLEND_ICE, 1-31 for desaturation, BLEND_INVERSE...)
        palette: Palette used to resolve the output index

    Returns:
        Blended colour with its nearest palette index, or the input unchanged
        for BLEND_INVALID
    """
    if not BLEND_ICE <= blend_type < BLEND_INVALID:
        return colour

    grey = special_grey(colour)

    if blend_type == BLEND_ICE:
        # Ice uses a colour ramp from the Hexen palette, not a gradient
        r, g, b = ICE_RANGE[min(int(grey) >> 4, 15)]
        result = Colour(r, g, b, colour.a)

    elif is_desat_type(blend_type):
        # From no effect (level 1) to nearly fully desaturated (level 31)
        amount = blend_type - 1
        result = Colour(
            clamp_channel((colour.r * (31 - amount) + grey * amount) / 31),
            clamp_channel((colour.g * (31 - amount) + grey * amount) / 31),
            clamp_channel((colour.b * (31 - amount) + grey * amount) / 31),
            colour.a,
        )

    else:
        # Gradient coefficients are fractions of full intensity
        start, end = PRESET_GRADIENTS[blend_type]
        level = grey / MAX_CHANNEL
        result = Colour(
            clamp_channel(MAX_CHANNEL * (start[0] + level * (end[0] - start[0]))),
            clamp_channel(MAX_CHANNEL * (start[1] + level * (end[1] - start[1]))),
            clamp_channel(MAX_CHANNEL * (start[2] + level * (end[2] - start[2]))),
            colour.a,
        )

    result.index = palette.nearest_colour(result)
    return result
