#!/usr/bin/env python3
"""
Translation definition parser

Reads ZDoom style translation definitions, e.g.:

    Palette range:   "0:16=32:48"
    Colour gradient: "0:16=[255,0,0]:[0,0,0]"
    Desaturated:     "0:16=%[0.0,0.0,0.0]:[1.0,0.5,0.5]"
    Blend:           "0:16=#[255,128,0]"
    Tint:            "0:16=@50[255,0,0]"
    Special:         "0:16=$ice"
    Built-in preset: "Ice", "Desaturate, 20"

Several clauses can be given in one definition, separated by commas and
optionally double quoted (the form produced by Translation.as_text()).
Malformed clauses are abandoned without raising; parsing stops there and
the ranges read from earlier clauses are kept.
"""

from typing import TYPE_CHECKING, Optional

from .blends import canonical_preset_name
from .constants import (
    DEFAULT_DESAT_AMOUNT,
    DESAT_AMOUNT_MAX,
    DESAT_AMOUNT_MIN,
    DESATURATE_NAME,
    MAX_INDEX,
    TINT_AMOUNT_MAX,
    TOKEN_BLEND,
    TOKEN_COLOUR,
    TOKEN_DESAT,
    TOKEN_SPECIAL,
    TOKEN_TINT,
    TRANSLATION_DELIMITERS,
)
from .logging_config import get_logger
from .ranges import (
    BlendRange,
    ColourRange,
    DesatRange,
    PaletteRange,
    SpecialRange,
    TintRange,
    TranslationRange,
)
from .tokenizer import Tokenizer

if TYPE_CHECKING:
    from .translation import Translation


class MalformedClause(Exception):
    """Internal signal that a clause is missing an expected token"""


class TranslationParser:
    """Parses translation definitions into a Translation"""

    def __init__(self):
        self.logger = get_logger("parser")

    def parse(self, definition: str, translation: "Translation") -> bool:
        """
        Parse a definition into a translation.

        Args:
            definition: Translation definition text
            translation: Translation to add ranges to (or set a preset on)

        Returns:
            True if every clause was read, False if parsing stopped at a
            malformed clause
        """
        tz = Tokenizer(definition, TRANSLATION_DELIMITERS)

        # Built-in preset
        preset = canonical_preset_name(tz.peek_token())
        if preset is not None:
            tz.skip_token()
            amount = DEFAULT_DESAT_AMOUNT
            if preset == DESATURATE_NAME and tz.check_token(","):
                amount = tz.get_integer()
                if amount is None:
                    self.logger.debug(f"Invalid desaturate amount in '{definition}'")
                    return False
                amount = self._clamp(
                    amount, DESAT_AMOUNT_MIN, DESAT_AMOUNT_MAX, "desaturate amount"
                )
            translation.built_in_name = preset
            translation.desat_amount = amount
            return True

        for clause in self.split_clauses(definition):
            trange = self.parse_clause(clause)
            if trange is None:
                return False
            translation.add(trange)
        return True

    @staticmethod
    def split_clauses(definition: str) -> list[str]:
        """Split a definition on top-level commas, dropping surrounding quotes"""
        clauses = []
        current = []
        depth = 0
        in_quote = False
        for char in definition:
            if char == '"':
                in_quote = not in_quote
            elif not in_quote and char == "[":
                depth += 1
            elif not in_quote and char == "]":
                depth = max(0, depth - 1)
            elif not in_quote and depth == 0 and char == ",":
                clauses.append("".join(current))
                current = []
                continue
            current.append(char)
        clauses.append("".join(current))

        result = []
        for clause in clauses:
            clause = clause.strip().replace('"', "").strip()
            if clause:
                result.append(clause)
        return result

    def parse_clause(self, clause: str) -> Optional[TranslationRange]:
        """Parse a single 'origin=destination' clause, None if malformed"""
        tz = Tokenizer(clause, TRANSLATION_DELIMITERS)
        try:
            trange = self._read_clause(tz)
        except MalformedClause as e:
            self.logger.debug(f"Malformed translation clause '{clause}': {e}")
            return None

        if not tz.at_end():
            self.logger.debug(
                f"Ignoring trailing tokens in clause '{clause}': {tz.tokens[tz.position:]}"
            )
        return trange

    def _read_clause(self, tz: Tokenizer) -> TranslationRange:
        # Origin range
        o_start = self._read_index(tz)
        if tz.peek_token() == "=":
            o_end = o_start
        else:
            self._expect(tz, ":")
            o_end = self._read_index(tz)
        self._expect(tz, "=")

        # Ranges normalise reversed origins (and their destinations) on construction
        token = tz.peek_token()
        if token == TOKEN_COLOUR:
            start = self._read_rgb(tz)
            self._expect(tz, ":")
            end = self._read_rgb(tz)
            return ColourRange(o_start, o_end, start, end)

        if token == TOKEN_DESAT:
            tz.skip_token()
            start = self._read_float_rgb(tz)
            self._expect(tz, ":")
            end = self._read_float_rgb(tz)
            return DesatRange(o_start, o_end, start, end)

        if token == TOKEN_BLEND:
            tz.skip_token()
            return BlendRange(o_start, o_end, self._read_rgb(tz))

        if token == TOKEN_TINT:
            tz.skip_token()
            amount = self._read_int(tz, "tint amount")
            amount = self._clamp(amount, 0, TINT_AMOUNT_MAX, "tint amount")
            return TintRange(o_start, o_end, self._read_rgb(tz), amount)

        if token == TOKEN_SPECIAL:
            tz.skip_token()
            name = tz.get_token()
            if not name or name in TRANSLATION_DELIMITERS:
                raise MalformedClause("expected special blend name after '$'")
            return SpecialRange(o_start, o_end, name)

        # Palette range
        d_start = self._read_index(tz)
        d_end = self._read_index(tz) if tz.check_token(":") else d_start
        return PaletteRange(o_start, o_end, d_start, d_end)

    def _expect(self, tz: Tokenizer, literal: str):
        if not tz.check_token(literal):
            found = tz.peek_token() or "end of definition"
            raise MalformedClause(f"expected '{literal}', found '{found}'")

    def _read_int(self, tz: Tokenizer, what: str) -> int:
        value = tz.get_integer()
        if value is None:
            raise MalformedClause(f"expected integer {what}")
        return value

    def _read_index(self, tz: Tokenizer) -> int:
        return self._clamp(self._read_int(tz, "palette index"), 0, MAX_INDEX, "palette index")

    def _read_rgb(self, tz: Tokenizer) -> tuple[int, int, int]:
        self._expect(tz, "[")
        values = []
        for i in range(3):
            if i:
                self._expect(tz, ",")
            value = self._read_int(tz, "colour component")
            values.append(self._clamp(value, 0, MAX_INDEX, "colour component"))
        self._expect(tz, "]")
        return (values[0], values[1], values[2])

    def _read_float_rgb(self, tz: Tokenizer) -> tuple[float, float, float]:
        self._expect(tz, "[")
        values = []
        for i in range(3):
            if i:
                self._expect(tz, ",")
            value = tz.get_float()
            if value is None:
                raise MalformedClause("expected float colour component")
            values.append(value)
        self._expect(tz, "]")
        return (values[0], values[1], values[2])

    def _clamp(self, value: int, low: int, high: int, what: str) -> int:
        if value < low or value > high:
            clamped = max(low, min(high, value))
            self.logger.warning(f"{what.capitalize()} {value} out of range, clamped to {clamped}")
            return clamped
        return value


_default_parser = None


def get_parser() -> TranslationParser:
    """Get the shared parser instance"""
    global _default_parser
    if _default_parser is None:
        _default_parser = TranslationParser()
    return _default_parser
