# SPDX-License-Identifier: MIT
# Copyright (c) 2025 OmniNode Team
"""pgconn - PostgreSQL connection string parsing and connection helpers.

This package turns a single configuration string, either a
``postgresql://`` URI or a libpq-style keyword/value string, into a
normalized mapping of connection parameters, and wires that mapping to:

- a YAML configuration store of named connections and default options
- an asyncpg connect call

Key Components:
    - parse_connection_string: URI / keyword-value parser with fail-fast validation
    - resolve_connection_args: Named config or PGCONN_CONN_STRING plus options
    - connect / disconnect: asyncpg connection lifecycle
    - ConnectionStringError: Parse failures, classified by EnumConnStringErrorKind
"""

from pgconn.enums import EnumConnStringErrorKind, EnumConnStringFormat
from pgconn.errors import (
    ConfigurationError,
    ConnectionStringError,
    DatabaseAuthenticationError,
    DatabaseConnectionError,
    PgConnError,
)
from pgconn.runtime import (
    connect,
    connection,
    disconnect,
    init_config_files,
    resolve_connection_args,
    use_config,
)
from pgconn.types import ConnectionDescriptor
from pgconn.utils import detect_conn_string_format, parse_connection_string

__all__: list[str] = [
    "ConfigurationError",
    "ConnectionDescriptor",
    "ConnectionStringError",
    "DatabaseAuthenticationError",
    "DatabaseConnectionError",
    "EnumConnStringErrorKind",
    "EnumConnStringFormat",
    "PgConnError",
    "connect",
    "connection",
    "detect_conn_string_format",
    "disconnect",
    "init_config_files",
    "parse_connection_string",
    "resolve_connection_args",
    "use_config",
]
