"""Pytest bootstrap for local source imports.

The ``pytest`` console script can run with a sys.path that excludes the
repository root. Ensure ``import sidenav`` resolves to the local package and
shared fixtures under ``tests/`` import as ``menu_fixtures``.
"""

from __future__ import annotations

import sys
from pathlib import Path


TESTS_ROOT = Path(__file__).resolve().parent
PROJECT_ROOT = TESTS_ROOT.parent

for entry in (str(PROJECT_ROOT), str(TESTS_ROOT)):
    if entry not in sys.path:
        sys.path.insert(0, entry)
