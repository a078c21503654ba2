"""Make ``import lazyls`` resolve to this checkout during test runs.

Tests build their fixtures in temporary directories and inject fixed
collaborators, so the only shared setup is the source path.
"""

from __future__ import annotations

import sys
from pathlib import Path


PROJECT_ROOT = Path(__file__).resolve().parent.parent

if str(PROJECT_ROOT) not in sys.path:
    sys.path.insert(0, str(PROJECT_ROOT))
