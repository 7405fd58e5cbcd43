import os

# secrets must exist before the app (and its settings) are imported
os.environ["OPENROUTER_API_KEY"] = "sk-or-test-key"
os.environ["DASHBOARD_TOKEN"] = "dashboard-secret"
for _name in ("FRAME_ANCESTORS", "OPENROUTER_BASE_URL", "UPSTREAM_TIMEOUT", "STATIC_DIR", "INDEX_FILE"):
    os.environ.pop(_name, None)

import pytest
from aioresponses import aioresponses


@pytest.fixture
def upstream():
    """Mock every outbound aiohttp call; unmatched URLs fail as connection errors."""
    with aioresponses() as m:
        yield m
