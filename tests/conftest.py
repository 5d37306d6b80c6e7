from __future__ import annotations

import sys
from pathlib import Path

import pytest

# Allow running the suite from a checkout without installing the package.
SRC = Path(__file__).resolve().parents[1] / "src"
if str(SRC) not in sys.path:
    sys.path.insert(0, str(SRC))

from textinterp.logging.helpers import reset_base_logger  # noqa: E402


@pytest.fixture(autouse=True)
def _clean_logging():
    yield
    reset_base_logger()


@pytest.fixture(autouse=True)
def _clean_env(monkeypatch):
    for var in (
        "TEXTINTERP_MARKER",
        "TEXTINTERP_GUARD",
        "TEXTINTERP_RECURSION_LIMIT",
        "TEXTINTERP_CLASSIFIER",
        "TEXTINTERP_TRACE",
    ):
        monkeypatch.delenv(var, raising=False)
