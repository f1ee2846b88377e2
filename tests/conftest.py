"""Pytest bootstrap for local source imports.

Ensure ``import rper`` resolves to ``src/rper`` without an editable install.
"""

from __future__ import annotations

import sys
from pathlib import Path


SRC_ROOT_STR = str(Path(__file__).resolve().parent.parent / "src")

if SRC_ROOT_STR not in sys.path:
    sys.path.insert(0, SRC_ROOT_STR)
