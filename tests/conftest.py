import sys
from pathlib import Path

import pytest

# Ensure `tradematch` is importable when running pytest from a plain checkout.
ROOT = Path(__file__).resolve().parents[1]
if str(ROOT) not in sys.path:
    sys.path.insert(0, str(ROOT))

from tradematch.core import config  # noqa: E402

_VENDOR_ENV = (
    "ZEROENTROPY_API_KEY",
    "ARCADE_API_KEY",
    "DATALOG_API_KEY",
    "GOOGLE_API_KEY",
    "GOOGLE_CSE_ID",
    "SERPAPI_API_KEY",
    "SEARCH_BACKEND",
)


@pytest.fixture(autouse=True)
def offline_settings(monkeypatch):
    """Every test starts without vendor credentials so nothing touches the network."""
    monkeypatch.setattr(config, "load_dotenv", lambda: None)
    for name in _VENDOR_ENV:
        monkeypatch.delenv(name, raising=False)
    config.get_settings.cache_clear()
    yield
    config.get_settings.cache_clear()
