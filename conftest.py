"""
Repository-level pytest configuration (demo-safe).

Why this exists:
  - Provide safe defaults for demo environments (no secrets embedded)
  - Route framework logging through the configured Loguru sink
"""

from __future__ import annotations

import os
from pathlib import Path
from typing import Generator

import pytest

from pagedrops.common import init_logger


@pytest.fixture(scope="session")
def project_root() -> Path:
    """Return repo root path."""
    return Path(__file__).parent


@pytest.fixture(scope="session", autouse=True)
def _demo_safe_env_defaults() -> Generator[None, None, None]:
    """Set demo-safe environment defaults if not already provided by the user/CI."""
    defaults = {
        "UI_USERNAME": "demo_user",
        "UI_PASSWORD": "demo_password",
    }

    for k, v in defaults.items():
        os.environ.setdefault(k, v)

    init_logger()
    yield
