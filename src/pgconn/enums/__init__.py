# SPDX-License-Identifier: MIT
# Copyright (c) 2025 OmniNode Team
"""pgconn Enumerations Module.

Exports:
    EnumConnStringErrorKind: Failure classes for connection string parsing
    EnumConnStringFormat: Connection string grammar (URI, KEYWORD_VALUE)
    EnumPgConnErrorCode: Error codes attached to every pgconn error
"""

from pgconn.enums.enum_conn_string_error_kind import EnumConnStringErrorKind
from pgconn.enums.enum_conn_string_format import EnumConnStringFormat
from pgconn.enums.enum_pgconn_error_code import EnumPgConnErrorCode

__all__: list[str] = [
    "EnumConnStringErrorKind",
    "EnumConnStringFormat",
    "EnumPgConnErrorCode",
]
