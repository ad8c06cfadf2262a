"""Test package initialisation.

The project source lives one directory above this package, so the repository
root is appended to ``sys.path`` for ``import modules.hangar_schedule`` and
friends to work when the tests run in isolation.
"""

from __future__ import annotations

import sys
from pathlib import Path

ROOT = Path(__file__).resolve().parents[1]
if str(ROOT) not in sys.path:
    sys.path.append(str(ROOT))
