"""
Palette Translation Engine
Parses, evaluates and reconstructs ZDoom style palette translations
"""

from .blends import blend_type_for_name, special_blend
from .colour import Colour
from .exceptions import PaletteError, TableFormatError, TranslationError
from .palette import Palette
from .parser import TranslationParser
from .ranges import (
    BlendRange,
    ColourRange,
    DesatRange,
    PaletteRange,
    RangeType,
    SpecialRange,
    TintRange,
)
from .table_analyzer import analyze_table, read_table_file
from .translation import Translation, parse_translation, translation_from_table

__version__ = "1.0.0"
__all__ = [
    "BlendRange",
    "Colour",
    "ColourRange",
    "DesatRange",
    "Palette",
    "PaletteError",
    "PaletteRange",
    "RangeType",
    "SpecialRange",
    "TableFormatError",
    "TintRange",
    "Translation",
    "TranslationError",
    "TranslationParser",
    "analyze_table",
    "blend_type_for_name",
    "parse_translation",
    "read_table_file",
    "special_blend",
    "translation_from_table",
]
