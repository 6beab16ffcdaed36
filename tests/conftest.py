"""Shared fixtures for PageActions unit tests."""

from __future__ import annotations

from unittest.mock import AsyncMock, MagicMock

import pytest

from pageactions.engine.protocols import RunOptions
from pageactions.engine.registry import reset_default_registry


# ---------------------------------------------------------------------------
# Fixture: mock page handle
# ---------------------------------------------------------------------------

@pytest.fixture
def mock_page() -> MagicMock:
    """A PageHandle whose every method is an AsyncMock resolving to None."""
    page = MagicMock(name="page")
    page.click = AsyncMock(return_value=None)
    page.focus = AsyncMock(return_value=None)
    page.type = AsyncMock(return_value=None)
    page.evaluate = AsyncMock(return_value=None)
    page.wait_for_function = AsyncMock(return_value=None)
    return page


# ---------------------------------------------------------------------------
# Fixture: run options with a spy log
# ---------------------------------------------------------------------------

@pytest.fixture
def options() -> RunOptions:
    return RunOptions(log=MagicMock(name="log"))


# ---------------------------------------------------------------------------
# Fixture: keep the process-wide registry pristine between tests
# ---------------------------------------------------------------------------

@pytest.fixture(autouse=True)
def _restore_default_registry():
    yield
    reset_default_registry()


# ---------------------------------------------------------------------------
# Fixture: real Chromium (skips when Playwright browsers are not installed)
# ---------------------------------------------------------------------------

@pytest.fixture(scope="session")
def chromium_available() -> bool:
    pytest.importorskip("playwright")
    from playwright.sync_api import sync_playwright

    try:
        with sync_playwright() as pw:
            pw.chromium.launch(headless=True).close()
    except Exception as exc:
        pytest.skip(f"Playwright Chromium unavailable: {exc}")
    return True


# ---------------------------------------------------------------------------
# Fixture: sample config YAML string
# ---------------------------------------------------------------------------

@pytest.fixture
def sample_config_yaml() -> str:
    """Return a valid pageactions.yaml as a string."""
    return """\
url: http://localhost:3000/login
headless: false
viewport:
  width: 1920
  height: 1080
timeout: 5000
actions:
  - "set field #username to alice"
  - "check field #remember"
  - "click button[type=submit]"
  - "wait for path to be /dashboard"
"""
