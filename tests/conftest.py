import sys
from pathlib import Path

import pytest

ROOT_DIR = Path(__file__).resolve().parents[1]
if str(ROOT_DIR) not in sys.path:
    sys.path.insert(0, str(ROOT_DIR))

from src.settings import reload_settings  # noqa: E402

_SETTINGS_ENV = (
    "BASE_URL",
    "LOCALES",
    "EXCLUDE_TYPES",
    "DEFAULT_DOCUMENT_EXTENSION",
    "INDEX_DOCUMENT",
    "FETCH_TIMEOUT_SECONDS",
    "DEBUG_LOGS_ENABLED",
)


@pytest.fixture(autouse=True)
def _isolated_settings(monkeypatch):
    for name in _SETTINGS_ENV:
        monkeypatch.delenv(name, raising=False)
    reload_settings()
    yield
    reload_settings()


def pytest_collection_modifyitems(config, items):
    for item in items:
        if "tests/integration/" in str(item.fspath):
            item.add_marker(pytest.mark.integration)
