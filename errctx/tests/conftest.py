"""Pytest configuration for the errctx test suite.

Every test starts from default settings: ``ERRCTX_*`` variables are removed
from the environment and the cached settings object is dropped before and
after each test.
"""

from __future__ import annotations

from typing import Iterator

import pytest

from errctx.config import reset_settings
from errctx.config.env import ENV_MAP


@pytest.fixture(autouse=True)
def isolated_settings(monkeypatch: pytest.MonkeyPatch) -> Iterator[None]:
    """Clear errctx environment overrides and the settings cache."""

    for name in ENV_MAP.values():
        monkeypatch.delenv(name, raising=False)
    reset_settings()
    yield
    reset_settings()

