#!/usr/bin/env python3
"""
Constants for the palette translation engine
All magic numbers and grammar characters in one place
"""

# Palette layout
PALETTE_ENTRIES = 256  # 8-bit indexed palette
PALETTE_SIZE_BYTES = 768  # 256 colors * 3 bytes (RGB)
MAX_INDEX = 255
MAX_CHANNEL = 255
DEFAULT_ALPHA = 255

# Raw translation tables (index -> index)
TABLE_SIZE = 256

# Tokenizer delimiters used by the translation grammar
TRANSLATION_DELIMITERS = "[]:%,=#@$"

# Destination prefixes
TOKEN_COLOUR = "["
TOKEN_DESAT = "%"
TOKEN_BLEND = "#"
TOKEN_TINT = "@"
TOKEN_SPECIAL = "$"

# Special blend codes
BLEND_ICE = 0
BLEND_DESAT_FIRST = 1
BLEND_DESAT_LAST = 31
BLEND_INVERSE = 32
BLEND_RED = 33
BLEND_GREEN = 34
BLEND_BLUE = 35
BLEND_GOLD = 36
BLEND_INVALID = 37

# Preset and special blend names
DESATURATE_NAME = "Desaturate"
DESAT_PREFIX = "desat"

# Desaturate amount limits for the whole-palette preset
DESAT_AMOUNT_MIN = BLEND_DESAT_FIRST
DESAT_AMOUNT_MAX = BLEND_DESAT_LAST
DEFAULT_DESAT_AMOUNT = DESAT_AMOUNT_MIN

# Tint amount is a percentage
TINT_AMOUNT_MAX = 100
DEFAULT_TINT_AMOUNT = 50

# Luminance used by desaturated ranges
DESAT_GREY_R = 0.30
DESAT_GREY_G = 0.59
DESAT_GREY_B = 0.11

# ZDoom luminance for special blends (sums to 257 over a 256 divisor)
SPECIAL_GREY_R = 77
SPECIAL_GREY_G = 143
SPECIAL_GREY_B = 37
SPECIAL_GREY_DIVISOR = 256.0

# Default greyscale weights for blend ranges (configurable in settings)
DEFAULT_GREYSCALE_R = 0.3
DEFAULT_GREYSCALE_G = 0.59
DEFAULT_GREYSCALE_B = 0.11

# Colours used by the "Ice" blend, based on the Hexen palette
ICE_RANGE = [
    (10, 8, 18), (15, 15, 26),
    (20, 16, 36), (30, 26, 46),
    (40, 36, 57), (50, 46, 67),
    (59, 57, 78), (69, 67, 88),
    (79, 77, 99), (89, 87, 109),
    (99, 97, 120), (109, 107, 130),
    (118, 118, 141), (128, 128, 151),
    (138, 138, 162), (148, 148, 172),
]

# Linear (start, end) coefficients for the named preset blends
PRESET_GRADIENTS = {
    # Doom invulnerability: white to black
    BLEND_INVERSE: ((1.0, 1.0, 1.0), (0.0, 0.0, 0.0)),
    # Heretic invulnerability: black to reddish yellow
    BLEND_GOLD: ((0.0, 0.0, 0.0), (1.5, 0.75, 0.0)),
    # Skulltag doomsphere
    BLEND_RED: ((0.0, 0.0, 0.0), (1.5, 0.0, 0.0)),
    # Skulltag guardsphere
    BLEND_GREEN: ((0.0, 0.0, 0.0), (1.25, 1.5, 1.0)),
    # Hacx invulnerability
    BLEND_BLUE: ((0.0, 0.0, 0.0), (0.0, 0.0, 1.5)),
}

# Palette file limits
MAX_PALETTE_FILE_SIZE = 64 * 1024  # PLAYPAL is 10752 bytes
MAX_TABLE_FILE_SIZE = 1024 * 1024

# Supported palette export formats
PALETTE_EXPORT_FORMATS = ("act", "pal", "gpl")
