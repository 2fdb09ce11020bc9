from __future__ import annotations

import pytest

from core.config import AppSettings


@pytest.fixture
def settings() -> AppSettings:
    """Settings isolated from any local or user `.env` file."""

    return AppSettings(_env_file=None, ai_api_key="test-key")
