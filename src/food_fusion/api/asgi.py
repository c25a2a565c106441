"""ASGI app for long-running servers, e.g. `uvicorn food_fusion.api.asgi:app`.

Settings are read from `FOOD_FUSION_*` variables once at import time.
"""

from food_fusion.api.app import create_app
from food_fusion.containers import build_container

app = create_app(build_container())
