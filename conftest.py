"""
Root conftest.py for all tests in the project.

Palette translation tests are in palette_translation/tests/ with their own
conftest.py.
"""

import sys
from pathlib import Path

# Add project root to Python path for imports
project_root = Path(__file__).parent
sys.path.insert(0, str(project_root))


def pytest_configure(config):
    """Register the custom test markers"""
    config.addinivalue_line("markers", "unit: fast tests of a single module")
    config.addinivalue_line(
        "markers", "integration: tests that exercise the command line end to end"
    )
