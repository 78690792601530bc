#!/usr/bin/env python3
"""
256-colour palette store
Index lookups, nearest-colour matching and palette file import/export
"""

from pathlib import Path
from typing import Iterable, Optional, Union

import numpy as np
from PIL import Image, UnidentifiedImageError

from .colour import Colour, clamp_byte
from .constants import (
    DEFAULT_ALPHA,
    MAX_PALETTE_FILE_SIZE,
    PALETTE_ENTRIES,
    PALETTE_EXPORT_FORMATS,
    PALETTE_SIZE_BYTES,
)
from .exceptions import PaletteError
from .logging_config import get_logger

logger = get_logger("palette")

IMAGE_SUFFIXES = {".png", ".bmp", ".gif", ".pcx", ".tga"}


class Palette:
    """An 8-bit palette of 256 RGBA entries"""

    def __init__(self, colours: Optional[Iterable] = None, name: str = ""):
        self.name = name
        self._entries = np.zeros((PALETTE_ENTRIES, 4), dtype=np.uint8)
        self._entries[:, 3] = DEFAULT_ALPHA
        if colours is not None:
            for i, entry in enumerate(colours):
                if i >= PALETTE_ENTRIES:
                    break
                self._set_entry(i, entry)

    def _set_entry(self, index: int, entry):
        values = [clamp_byte(v) for v in entry]
        if len(values) < 3:
            raise PaletteError(f"Palette entry {index} needs at least 3 components")
        alpha = values[3] if len(values) > 3 else DEFAULT_ALPHA
        self._entries[index] = (values[0], values[1], values[2], alpha)

    def __len__(self) -> int:
        return PALETTE_ENTRIES

    def __eq__(self, other) -> bool:
        if not isinstance(other, Palette):
            return NotImplemented
        return bool(np.array_equal(self._entries, other._entries))

    def __repr__(self) -> str:
        return f"Palette(name={self.name!r})"

    def colour(self, index: int) -> Colour:
        """Get the colour at a palette index, with its index resolved"""
        if not 0 <= index < PALETTE_ENTRIES:
            raise IndexError(f"Palette index out of range: {index}")
        r, g, b, a = (int(v) for v in self._entries[index])
        return Colour(r, g, b, a, index)

    def set_colour(self, index: int, colour):
        """Set a palette entry from a Colour or an (r, g, b[, a]) tuple"""
        if not 0 <= index < PALETTE_ENTRIES:
            raise IndexError(f"Palette index out of range: {index}")
        if isinstance(colour, Colour):
            colour = colour.rgba
        self._set_entry(index, colour)

    def nearest_colour(self, colour) -> int:
        """
        Find the palette index closest to a colour.

        Uses squared RGB distance; ties resolve to the lowest index.

        Args:
            colour: Colour or (r, g, b) tuple

        Returns:
            Palette index (0-255)
        """
        rgb = colour.rgb if isinstance(colour, Colour) else tuple(colour[:3])
        target = np.array(rgb, dtype=np.int32)
        diff = self._entries[:, :3].astype(np.int32) - target
        distances = np.einsum("ij,ij->i", diff, diff)
        return int(np.argmin(distances))

    def to_flat_list(self) -> list[int]:
        """Get the palette as 768 RGB values (PIL putpalette layout)"""
        return [int(v) for v in self._entries[:, :3].reshape(-1)]

    def copy(self) -> "Palette":
        duplicate = Palette(name=self.name)
        duplicate._entries = self._entries.copy()
        return duplicate

    @classmethod
    def from_flat(cls, data, name: str = "") -> "Palette":
        """Build a palette from a flat sequence of RGB values"""
        values = list(data)
        colours = [values[i:i + 3] for i in range(0, len(values) - 2, 3)]
        return cls(colours, name=name)

    @classmethod
    def grayscale(cls) -> "Palette":
        """Get a linear grayscale palette (index == intensity)"""
        return cls([(i, i, i) for i in range(PALETTE_ENTRIES)], name="Greyscale")

    @classmethod
    def from_image(cls, image: Union[Image.Image, str, Path]) -> "Palette":
        """Read the palette of an indexed image"""
        if not isinstance(image, Image.Image):
            try:
                with Image.open(image) as img:
                    img.load()
                    return cls.from_image(img)
            except (OSError, UnidentifiedImageError) as e:
                raise PaletteError(f"Could not read image palette: {e}") from e

        if image.mode != "P":
            raise PaletteError(f"Image is not indexed (mode {image.mode})")
        raw = image.getpalette() or []
        return cls.from_flat(raw[:PALETTE_SIZE_BYTES], name=getattr(image, "filename", "") or "")

    @classmethod
    def from_file(cls, file_path: Union[str, Path]) -> "Palette":
        """
        Load a palette file.

        Supports JASC-PAL text, GIMP .gpl, raw RGB (.act, .lmp, raw .pal,
        PLAYPAL - first palette only) and indexed images.

        Raises:
            PaletteError: If the file cannot be read or has an unknown format
        """
        path = Path(file_path)
        suffix = path.suffix.lower()

        if suffix in IMAGE_SUFFIXES:
            return cls.from_image(path)

        try:
            if path.stat().st_size > MAX_PALETTE_FILE_SIZE:
                raise PaletteError(f"Palette file too large: {path}")
            raw_data = path.read_bytes()
        except OSError as e:
            raise PaletteError(f"Could not read palette file {path}: {e}") from e

        if raw_data.startswith(b"JASC-PAL"):
            palette = cls._parse_jasc(raw_data.decode("ascii", errors="replace"))
        elif raw_data.startswith(b"GIMP Palette"):
            palette = cls._parse_gimp(raw_data.decode("utf-8", errors="replace"))
        else:
            if len(raw_data) < PALETTE_SIZE_BYTES:
                raise PaletteError(
                    f"Invalid palette file: expected {PALETTE_SIZE_BYTES} bytes, got {len(raw_data)}"
                )
            palette = cls.from_flat(raw_data[:PALETTE_SIZE_BYTES])

        palette.name = path.stem
        logger.debug(f"Loaded palette {path.name}")
        return palette

    @classmethod
    def _parse_jasc(cls, text: str) -> "Palette":
        lines = [line.strip() for line in text.splitlines() if line.strip()]
        if len(lines) < 3:
            raise PaletteError("Invalid JASC palette: missing header")
        try:
            count = int(lines[2])
        except ValueError as e:
            raise PaletteError(f"Invalid JASC palette colour count: {lines[2]}") from e

        colours = []
        for line in lines[3:3 + count]:
            parts = line.split()
            if len(parts) < 3:
                raise PaletteError(f"Invalid JASC palette entry: {line}")
            try:
                colours.append([int(p) for p in parts[:4]])
            except ValueError as e:
                raise PaletteError(f"Invalid JASC palette entry: {line}") from e
        return cls(colours)

    @classmethod
    def _parse_gimp(cls, text: str) -> "Palette":
        colours = []
        name = ""
        for line in text.splitlines()[1:]:
            line = line.strip()
            if line.startswith("#") or not line:
                continue
            if line.startswith("Name:"):
                name = line[5:].strip()
                continue
            if line.startswith("Columns:"):
                continue

            parts = line.split()
            if len(parts) >= 3:
                try:
                    colours.append([int(parts[0]), int(parts[1]), int(parts[2])])
                except ValueError:
                    continue
        return cls(colours, name=name)

    def export(self, format: str = "act") -> Union[bytes, str]:
        """Export the palette to act (bytes), pal (JASC text) or gpl (text)"""
        format = format.lower()
        if format == "act":
            return bytes(self.to_flat_list())
        elif format == "pal":
            lines = ["JASC-PAL", "0100", str(PALETTE_ENTRIES)]
            for r, g, b, _a in self._entries.tolist():
                lines.append(f"{r} {g} {b}")
            return "\n".join(lines) + "\n"
        elif format == "gpl":
            lines = ["GIMP Palette", f"Name: {self.name or 'Palette'}", "#"]
            for i, (r, g, b, _a) in enumerate(self._entries.tolist()):
                lines.append(f"{r:3d} {g:3d} {b:3d}  Index {i}")
            return "\n".join(lines) + "\n"

        raise PaletteError(
            f"Unsupported palette format: {format} (expected one of {', '.join(PALETTE_EXPORT_FORMATS)})"
        )

    def save(self, file_path: Union[str, Path], format: Optional[str] = None):
        """Write the palette to disk, picking the format from the suffix if not given"""
        path = Path(file_path)
        if format is None:
            format = path.suffix.lower().lstrip(".") or "act"
        data = self.export(format)
        try:
            if isinstance(data, bytes):
                path.write_bytes(data)
            else:
                path.write_text(data)
        except OSError as e:
            raise PaletteError(f"Could not write palette file {path}: {e}") from e
        logger.info(f"Saved {format} palette to {path}")
