# SPDX-License-Identifier: MIT
# Copyright (c) 2025 OmniNode Team
"""pgconn Errors Module.

Exports:
    ModelPgConnErrorContext: Configuration model for bundled error context
    PgConnError: Base error class
    ConnectionStringError: Connection string parsing errors (carries a kind)
    ConfigurationError: Config file, named config and env var errors
    DatabaseConnectionError: Database server unreachable
    DatabaseAuthenticationError: Database server rejected credentials

Error Sanitization Guidelines:
    NEVER include in error messages or context:
        - Passwords or full connection strings with credentials

    SAFE to include:
        - Parameter names (e.g., "dsn.port", "sslmode")
        - Operation names (e.g., "parse_dsn", "load_config")
        - Correlation IDs
        - Config file paths and config names
        - Previews produced by ``preview_conn_string`` (passwords masked)
"""

from pgconn.errors.model_pgconn_error_context import ModelPgConnErrorContext
from pgconn.errors.pgconn_errors import (
    ConfigurationError,
    ConnectionStringError,
    DatabaseAuthenticationError,
    DatabaseConnectionError,
    PgConnError,
)

__all__: list[str] = [
    # Configuration model
    "ModelPgConnErrorContext",
    # Error classes
    "PgConnError",
    "ConnectionStringError",
    "ConfigurationError",
    "DatabaseConnectionError",
    "DatabaseAuthenticationError",
]
