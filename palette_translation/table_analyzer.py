#!/usr/bin/env python3
"""
Translation table analysis

Reads a raw 256-entry translation table (source index -> destination index,
as stored in Hexen TRANTBL lumps) and infers the palette ranges that
reproduce it.

Only runs where the destination increases by exactly one per source index
are recognised, since the origin and target ranges then have the same
length. This handles Hexen style tables. Asymmetric, reversed or RGB
gradient translations cannot be recovered, so the conversion is lossy for
anything else. Index 255 ends the scan and is never part of an inferred
range.
"""

from pathlib import Path
from typing import Sequence, Union

from .constants import MAX_TABLE_FILE_SIZE, TABLE_SIZE
from .exceptions import TableFormatError
from .logging_config import get_logger
from .ranges import PaletteRange

logger = get_logger("table_analyzer")


def analyze_table(table: Sequence[int]) -> list[PaletteRange]:
    """
    Infer palette ranges from a translation table.

    Args:
        table: 256 destination indices

    Returns:
        Palette ranges for every run that is not an identity mapping

    Raises:
        ValueError: If the table does not hold exactly 256 entries
    """
    if len(table) != TABLE_SIZE:
        raise ValueError(f"Translation table must have {TABLE_SIZE} entries, got {len(table)}")

    ranges = []

    def close_run(o_start: int, o_end: int, d_start: int, d_end: int):
        # Only keep actual translations
        if o_start != d_start or o_end != d_end:
            ranges.append(PaletteRange(o_start, o_end, d_start, d_end))

    last = TABLE_SIZE - 1
    o_start = 0
    d_start = table[0]
    for i in range(1, TABLE_SIZE):
        # Reaching the last index ends the scan; the final run closes at 254
        if table[i] != table[i - 1] + 1 or i == last:
            close_run(o_start, i - 1, d_start, table[i - 1])
            o_start = i
            d_start = table[i]

    logger.debug(f"Table analysis found {len(ranges)} range(s)")
    return ranges


def read_table_file(file_path: Union[str, Path], offset: int = 0) -> bytes:
    """
    Read a 256-byte translation table from a file.

    Args:
        file_path: Table file (e.g. an extracted TRANTBL lump)
        offset: Byte offset of the table within the file

    Raises:
        TableFormatError: If the file can't be read or is too short
    """
    path = Path(file_path)
    if offset < 0:
        raise TableFormatError(f"Invalid table offset: {offset}")

    try:
        if path.stat().st_size > MAX_TABLE_FILE_SIZE:
            raise TableFormatError(f"Translation table file too large: {path}")
        with open(path, "rb") as f:
            f.seek(offset)
            data = f.read(TABLE_SIZE)
    except OSError as e:
        raise TableFormatError(f"Could not read translation table {path}: {e}") from e

    if len(data) != TABLE_SIZE:
        raise TableFormatError(
            f"Expected {TABLE_SIZE} bytes at offset {offset} in {path}, got {len(data)}"
        )
    return data
