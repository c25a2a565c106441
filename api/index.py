"""Function entrypoint for hosts that load `api/index.py` from the repo root.

The package is not installed there, so `src/` is put on the import path
before the portion scan app is re-exported.
"""

from __future__ import annotations

import sys
from pathlib import Path

_SRC = Path(__file__).resolve().parents[1] / "src"
if str(_SRC) not in sys.path:
    sys.path.insert(0, str(_SRC))

from food_fusion.api.asgi import app  # noqa: E402

__all__ = ["app"]
