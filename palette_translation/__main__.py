"""Allow running the tool with ``python -m palette_translation``."""

import sys

from .cli import main

sys.exit(main())
