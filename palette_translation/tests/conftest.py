"""
Shared pytest fixtures and configuration for palette translation tests
"""

import logging
import tempfile
from pathlib import Path

import pytest

from palette_translation import settings_manager
from palette_translation.logging_config import LOGGER_NAME
from palette_translation.palette import Palette
from palette_translation.settings_manager import SettingsManager


@pytest.fixture
def temp_dir():
    """Create a temporary directory for test files"""
    with tempfile.TemporaryDirectory() as tmpdir:
        yield Path(tmpdir)


@pytest.fixture
def grey_palette():
    """Linear greyscale palette, index i is (i, i, i)"""
    return Palette.grayscale()


@pytest.fixture
def colour_palette():
    """Palette with a few distinct colours followed by a grey ramp"""
    colours = [
        (0, 0, 0),
        (255, 0, 0),
        (0, 255, 0),
        (0, 0, 255),
        (255, 255, 255),
        (200, 100, 50),
    ]
    colours += [(i, i, i) for i in range(len(colours), 256)]
    return Palette(colours, name="Test")


@pytest.fixture
def playpal_file(temp_dir, colour_palette):
    """Raw 768-byte palette file (PLAYPAL layout)"""
    path = temp_dir / "PLAYPAL.lmp"
    path.write_bytes(bytes(colour_palette.to_flat_list()))
    return path


@pytest.fixture
def isolated_settings(tmp_path, monkeypatch):
    """Route the settings singleton to a temporary settings file"""
    settings_file = tmp_path / "settings.json"

    def mock_get_settings_path(self):
        return settings_file

    monkeypatch.setattr(SettingsManager, "_get_settings_path", mock_get_settings_path)
    monkeypatch.setattr(settings_manager, "_settings_instance", None)
    return settings_file


@pytest.fixture(autouse=True)
def reset_package_logger():
    """Undo setup_logging() so records reach pytest's capture handlers"""
    yield
    logger = logging.getLogger(LOGGER_NAME)
    for handler in logger.handlers[:]:
        logger.removeHandler(handler)
        handler.close()
    logger.setLevel(logging.NOTSET)
    logger.propagate = True
