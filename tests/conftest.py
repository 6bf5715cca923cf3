import sys
import pathlib

import pytest

# Ensure src/ layout is on path for pytest invocation from repo folder
ROOT = pathlib.Path(__file__).resolve().parents[1]
SRC = ROOT / "src"
if str(SRC) not in sys.path:
    sys.path.insert(0, str(SRC))


@pytest.fixture(autouse=True)
def _clean_env(monkeypatch):
    # setenv first so teardown restores the variables configure() writes
    for key in ("METAMIX_TRACE", "METAMIX_LOG_LEVEL", "FORCE_COLOR"):
        monkeypatch.setenv(key, "")
        monkeypatch.delenv(key)
