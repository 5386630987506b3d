"""Pytest configuration and shared fixtures."""

from __future__ import annotations

import json
import sys
from pathlib import Path
from typing import Any, Callable

PROJECT_ROOT = Path(__file__).resolve().parents[1]

if str(PROJECT_ROOT) not in sys.path:
    sys.path.insert(0, str(PROJECT_ROOT))

import pytest

from flatconf.adapters import StaticEnvironment


@pytest.fixture
def write_json(tmp_path: Path) -> Callable[..., Path]:
    """Return a helper that writes a JSON document under tmp_path."""

    def _write(data: Any, name: str = "config.json") -> Path:
        path = tmp_path / name
        path.write_text(json.dumps(data), encoding="utf-8")
        return path

    return _write


@pytest.fixture
def fake_environment() -> StaticEnvironment:
    """Return a fixed environment containing a few prefixed variables."""

    return StaticEnvironment(
        {
            "APP_HOST": "localhost",
            "APP_PORT": "8080",
            "APPLE": "fruit",
            "XAPP": "other",
            "HOME": "/home/user",
        }
    )
