# SPDX-License-Identifier: MIT
# Copyright (c) 2025 OmniNode Team
"""Error codes attached to every pgconn error."""

from enum import Enum


class EnumPgConnErrorCode(str, Enum):
    """Error classification codes for pgconn errors.

    Attributes:
        INVALID_CONNECTION_STRING: Connection string failed parsing.
        INVALID_CONFIGURATION: Config file, named config or env var problem.
        CONNECTION_FAILED: Database server could not be reached.
        AUTHENTICATION_FAILED: Database server rejected the credentials.
        OPERATION_FAILED: Any other failure.
    """

    INVALID_CONNECTION_STRING = "PGCONN_INVALID_CONNECTION_STRING"
    INVALID_CONFIGURATION = "PGCONN_INVALID_CONFIGURATION"
    CONNECTION_FAILED = "PGCONN_CONNECTION_FAILED"
    AUTHENTICATION_FAILED = "PGCONN_AUTHENTICATION_FAILED"
    OPERATION_FAILED = "PGCONN_OPERATION_FAILED"


__all__ = ["EnumPgConnErrorCode"]
