"""
Repository-level pytest configuration.

Provides safe defaults for local runs so the suite works right after cloning:
  - placeholder credentials for example page objects
  - a fast highlight when running UI tests locally

Real projects should load credentials from a secret manager in CI/CD.
"""

from __future__ import annotations

import os
from pathlib import Path
from typing import Generator

import pytest

from page_kit.common import init_logger


@pytest.fixture(scope="session")
def project_root() -> Path:
    """Return repo root path."""
    return Path(__file__).parent


@pytest.fixture(scope="session", autouse=True)
def _demo_safe_env_defaults() -> Generator[None, None, None]:
    """
    Set demo-safe environment defaults if not already provided by the user/CI.
    """
    defaults = {
        "UI_USERNAME": "demo_user",
        "UI_PASSWORD": "demo_password",
    }

    for k, v in defaults.items():
        os.environ.setdefault(k, v)

    init_logger()
    yield
