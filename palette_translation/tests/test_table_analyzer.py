#!/usr/bin/env python3
"""
Tests for translation table analysis and table file reading
"""

import pytest

from palette_translation.exceptions import TableFormatError
from palette_translation.ranges import PaletteRange
from palette_translation.table_analyzer import analyze_table, read_table_file


def identity_table():
    return list(range(256))


@pytest.mark.unit
class TestAnalyzeTable:
    """Test inferring palette ranges from a table"""

    def test_identity_gives_no_ranges(self):
        assert analyze_table(identity_table()) == []

    def test_single_run(self):
        table = identity_table()
        for i in range(10, 20):
            table[i] = i + 5
        assert analyze_table(table) == [PaletteRange(10, 19, 15, 24)]

    def test_final_run_closes_before_last_index(self):
        table = identity_table()
        for i in range(200, 256):
            table[i] = i - 100
        assert analyze_table(table) == [PaletteRange(200, 254, 100, 154)]

    def test_last_index_alone_is_not_a_range(self):
        table = identity_table()
        table[255] = 0
        assert analyze_table(table) == []

    def test_constant_table_splits_into_single_indices(self):
        ranges = analyze_table([0] * 256)
        # Index 0 maps to itself and is dropped, index 255 ends the scan
        assert len(ranges) == 254
        assert ranges[0] == PaletteRange(1, 1, 0, 0)
        assert ranges[-1] == PaletteRange(254, 254, 0, 0)

    def test_hexen_style_table(self):
        # Green ramp 112-127 remapped onto two other ramps
        table = identity_table()
        table[112:120] = range(144, 152)
        table[120:128] = range(64, 72)
        assert analyze_table(table) == [
            PaletteRange(112, 119, 144, 151),
            PaletteRange(120, 127, 64, 71),
        ]

    def test_accepts_bytes(self):
        assert analyze_table(bytes(range(256))) == []

    @pytest.mark.parametrize("size", [0, 255, 257])
    def test_wrong_size(self, size):
        with pytest.raises(ValueError):
            analyze_table([0] * size)


@pytest.mark.unit
class TestReadTableFile:
    """Test reading raw tables from disk"""

    def test_read_whole_file(self, temp_dir):
        path = temp_dir / "TRANTBL0.lmp"
        path.write_bytes(bytes(range(256)))
        assert read_table_file(path) == bytes(range(256))

    def test_read_at_offset(self, temp_dir):
        path = temp_dir / "TRANTBL.lmp"
        path.write_bytes(b"\xff" * 16 + bytes(range(256)) + b"\x00" * 16)
        assert read_table_file(str(path), offset=16) == bytes(range(256))

    def test_short_file(self, temp_dir):
        path = temp_dir / "short.lmp"
        path.write_bytes(bytes(100))
        with pytest.raises(TableFormatError, match="Expected 256 bytes"):
            read_table_file(path)

    def test_offset_past_end(self, temp_dir):
        path = temp_dir / "table.lmp"
        path.write_bytes(bytes(256))
        with pytest.raises(TableFormatError):
            read_table_file(path, offset=10)

    def test_negative_offset(self, temp_dir):
        path = temp_dir / "table.lmp"
        path.write_bytes(bytes(256))
        with pytest.raises(TableFormatError, match="offset"):
            read_table_file(path, offset=-1)

    def test_missing_file(self, temp_dir):
        with pytest.raises(TableFormatError, match="Could not read"):
            read_table_file(temp_dir / "missing.lmp")
