#!/usr/bin/env python3
"""
Tests for the palette store and palette file formats
"""

import pytest
from PIL import Image

from palette_translation.colour import Colour
from palette_translation.exceptions import PaletteError
from palette_translation.palette import Palette


@pytest.mark.unit
class TestPaletteBasics:
    """Test palette construction and lookups"""

    def test_default_is_black(self):
        palette = Palette()
        assert len(palette) == 256
        assert palette.colour(0).rgba == (0, 0, 0, 255)
        assert palette.colour(255).rgb == (0, 0, 0)

    def test_short_colour_list_is_padded(self):
        palette = Palette([(1, 2, 3), (4, 5, 6, 7)])
        assert palette.colour(0).rgba == (1, 2, 3, 255)
        assert palette.colour(1).rgba == (4, 5, 6, 7)
        assert palette.colour(2).rgb == (0, 0, 0)

    def test_components_are_clamped(self):
        palette = Palette([(300, -5, 128)])
        assert palette.colour(0).rgb == (255, 0, 128)

    def test_entry_needs_three_components(self):
        with pytest.raises(PaletteError):
            Palette([(1, 2)])

    def test_colour_has_index(self, grey_palette):
        colour = grey_palette.colour(42)
        assert colour.index == 42
        assert colour.rgb == (42, 42, 42)

    @pytest.mark.parametrize("index", [-1, 256])
    def test_colour_out_of_range(self, grey_palette, index):
        with pytest.raises(IndexError):
            grey_palette.colour(index)

    def test_set_colour(self, grey_palette):
        grey_palette.set_colour(3, Colour(9, 8, 7))
        grey_palette.set_colour(4, (1, 1, 1))
        assert grey_palette.colour(3).rgb == (9, 8, 7)
        assert grey_palette.colour(4).rgb == (1, 1, 1)

    def test_copy_is_independent(self, grey_palette):
        duplicate = grey_palette.copy()
        assert duplicate == grey_palette
        duplicate.set_colour(0, (255, 0, 0))
        assert duplicate != grey_palette

    def test_flat_list(self, grey_palette):
        flat = grey_palette.to_flat_list()
        assert len(flat) == 768
        assert flat[:6] == [0, 0, 0, 1, 1, 1]


@pytest.mark.unit
class TestNearestColour:
    """Test nearest palette colour matching"""

    def test_exact_match(self, colour_palette):
        assert colour_palette.nearest_colour(Colour(0, 255, 0)) == 2

    def test_closest_match(self, colour_palette):
        assert colour_palette.nearest_colour((10, 250, 5)) == 2

    def test_ties_resolve_to_lowest_index(self):
        palette = Palette()
        assert palette.nearest_colour((0, 0, 0)) == 0

    def test_grey_ramp(self, grey_palette):
        assert grey_palette.nearest_colour((100, 50, 25)) == 58


@pytest.mark.unit
class TestPaletteFiles:
    """Test loading and saving palette files"""

    def test_raw_playpal(self, playpal_file, colour_palette):
        palette = Palette.from_file(playpal_file)
        assert palette == colour_palette
        assert palette.name == "PLAYPAL"

    def test_raw_uses_first_palette(self, temp_dir, colour_palette):
        path = temp_dir / "playpal.lmp"
        path.write_bytes(bytes(colour_palette.to_flat_list()) + bytes(768))
        assert Palette.from_file(path) == colour_palette

    def test_raw_too_short(self, temp_dir):
        path = temp_dir / "short.act"
        path.write_bytes(bytes(100))
        with pytest.raises(PaletteError, match="expected 768 bytes"):
            Palette.from_file(path)

    def test_missing_file(self, temp_dir):
        with pytest.raises(PaletteError):
            Palette.from_file(temp_dir / "missing.pal")

    def test_jasc_round_trip(self, temp_dir, colour_palette):
        path = temp_dir / "test.pal"
        colour_palette.save(path)
        assert path.read_text().startswith("JASC-PAL\n0100\n256\n0 0 0\n255 0 0\n")
        assert Palette.from_file(path) == colour_palette

    def test_gimp_round_trip(self, temp_dir, colour_palette):
        path = temp_dir / "test.gpl"
        colour_palette.save(path)
        text = path.read_text()
        assert text.startswith("GIMP Palette\nName: Test\n#\n")
        assert "255   0   0  Index 1" in text
        loaded = Palette.from_file(path)
        assert loaded == colour_palette
        assert loaded.name == "test"

    def test_act_export(self, colour_palette):
        data = colour_palette.export("act")
        assert isinstance(data, bytes)
        assert len(data) == 768
        assert data[3:6] == bytes([255, 0, 0])

    def test_explicit_format_overrides_suffix(self, temp_dir, colour_palette):
        path = temp_dir / "palette.dat"
        colour_palette.save(path, "act")
        assert path.read_bytes() == bytes(colour_palette.to_flat_list())

    def test_unknown_format(self, colour_palette):
        with pytest.raises(PaletteError, match="Unsupported palette format"):
            colour_palette.export("bmp")

    def test_invalid_jasc(self, temp_dir):
        path = temp_dir / "bad.pal"
        path.write_text("JASC-PAL\n0100\nlots\n")
        with pytest.raises(PaletteError):
            Palette.from_file(path)


@pytest.mark.unit
class TestImagePalettes:
    """Test reading palettes from indexed images with PIL"""

    def test_from_indexed_image(self, colour_palette):
        image = Image.new("P", (4, 4))
        image.putpalette(colour_palette.to_flat_list())
        palette = Palette.from_image(image)
        assert palette.colour(1).rgb == (255, 0, 0)
        assert palette.colour(5).rgb == (200, 100, 50)

    def test_from_png_file(self, temp_dir, colour_palette):
        path = temp_dir / "sprite.png"
        image = Image.new("P", (4, 4))
        image.putpalette(colour_palette.to_flat_list())
        image.save(path)
        palette = Palette.from_file(path)
        assert palette.colour(3).rgb == (0, 0, 255)
        assert palette.name == "sprite"

    def test_rgb_image_rejected(self):
        with pytest.raises(PaletteError, match="not indexed"):
            Palette.from_image(Image.new("RGB", (2, 2)))

    def test_unreadable_image(self, temp_dir):
        path = temp_dir / "broken.png"
        path.write_bytes(b"not an image")
        with pytest.raises(PaletteError):
            Palette.from_file(path)
