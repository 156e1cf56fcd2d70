# SPDX-License-Identifier: MIT
# Copyright (c) 2025 OmniNode Team
"""Settings model for pgconn.

.. versionadded:: 0.1.0
"""

from __future__ import annotations

import os
from dataclasses import dataclass
from pathlib import Path
from typing import Final

from platformdirs import user_config_dir

__all__: list[str] = [
    "ENV_CONFIG_DIR",
    "ENV_CONN_STRING",
    "ModelPgConnSettings",
]

ENV_CONN_STRING: Final[str] = "PGCONN_CONN_STRING"
ENV_CONFIG_DIR: Final[str] = "PGCONN_CONFIG_DIR"

APP_NAME: Final[str] = "pgconn"


@dataclass(frozen=True)
class ModelPgConnSettings:
    """Runtime settings for pgconn.

    Attributes:
        conn_string: Connection string used when no named config is
            requested. Empty when unset.
        config_dir: Directory holding ``config.yml`` and ``options.yml``.
    """

    conn_string: str = ""
    config_dir: Path = Path(user_config_dir(APP_NAME))

    @classmethod
    def from_env(cls) -> ModelPgConnSettings:
        """Create settings from environment variables.

        Reads PGCONN_CONN_STRING and PGCONN_CONFIG_DIR. The config directory
        falls back to the per-user config directory of the platform.

        Returns:
            ModelPgConnSettings populated from environment.
        """
        config_dir = os.environ.get(ENV_CONFIG_DIR, "")
        return cls(
            conn_string=os.environ.get(ENV_CONN_STRING, ""),
            config_dir=Path(config_dir) if config_dir else Path(user_config_dir(APP_NAME)),
        )
