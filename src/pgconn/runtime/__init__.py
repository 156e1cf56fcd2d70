# SPDX-License-Identifier: MIT
# Copyright (c) 2025 OmniNode Team
"""pgconn runtime: configuration store, argument resolution and connect glue.

Exports:
    ModelPgConnSettings: Settings read from the environment
    init_config_files: Bootstrap config.yml/options.yml from templates
    load_connection_configs: Read named connection configs
    load_connection_options: Read options applied to every connection
    use_config: Install a YAML file as the active config
    resolve_connection_args: Build connection arguments (no connection made)
    to_asyncpg_kwargs: Translate a descriptor into asyncpg keywords
    connect / disconnect / connection: asyncpg connection lifecycle
"""

from pgconn.runtime.config_store import (
    config_dir,
    config_path,
    init_config_files,
    load_connection_configs,
    load_connection_options,
    options_path,
    template_path,
    use_config,
)
from pgconn.runtime.connection import (
    connect,
    connection,
    disconnect,
    to_asyncpg_kwargs,
)
from pgconn.runtime.connection_args import resolve_connection_args
from pgconn.runtime.model_pgconn_settings import (
    ENV_CONFIG_DIR,
    ENV_CONN_STRING,
    ModelPgConnSettings,
)

__all__: list[str] = [
    "ENV_CONFIG_DIR",
    "ENV_CONN_STRING",
    "ModelPgConnSettings",
    "config_dir",
    "config_path",
    "connect",
    "connection",
    "disconnect",
    "init_config_files",
    "load_connection_configs",
    "load_connection_options",
    "options_path",
    "resolve_connection_args",
    "template_path",
    "to_asyncpg_kwargs",
    "use_config",
]
