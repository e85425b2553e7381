# Keep tests hermetic: breakpoint overrides from the developer's shell must not
# leak into CLI or settings tests.

import pytest


@pytest.fixture(autouse=True)
def _clear_breakpoint_env(monkeypatch):
    monkeypatch.delenv("DEVICE_SIZES_BREAKPOINTS", raising=False)
    yield
