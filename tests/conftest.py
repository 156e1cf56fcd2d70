# SPDX-License-Identifier: MIT
# Copyright (c) 2025 OmniNode Team
"""Pytest configuration and shared fixtures for pgconn tests."""

from __future__ import annotations

from pathlib import Path

import pytest

from pgconn.runtime.model_pgconn_settings import (
    ENV_CONFIG_DIR,
    ENV_CONN_STRING,
    ModelPgConnSettings,
)


@pytest.fixture
def config_dir(tmp_path: Path) -> Path:
    """Config directory under tmp_path that does not exist yet."""
    return tmp_path / "pgconn-config"


@pytest.fixture
def settings(config_dir: Path) -> ModelPgConnSettings:
    """Settings pointing at an isolated config directory, no connection string."""
    return ModelPgConnSettings(conn_string="", config_dir=config_dir)


@pytest.fixture
def isolated_env(monkeypatch: pytest.MonkeyPatch, config_dir: Path) -> Path:
    """Point PGCONN_CONFIG_DIR at tmp_path and clear PGCONN_CONN_STRING.

    For code paths that build settings from the environment (CLI commands).
    """
    monkeypatch.setenv(ENV_CONFIG_DIR, str(config_dir))
    monkeypatch.delenv(ENV_CONN_STRING, raising=False)
    return config_dir
