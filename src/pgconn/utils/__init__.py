# SPDX-License-Identifier: MIT
# Copyright (c) 2025 OmniNode Team
"""Connection string parsing utilities for pgconn.

This package provides:
    - util_conn_string: Format dispatcher and public parse entry point
    - util_conn_string_tokenizer: Quote-aware whitespace tokenizer
    - util_conn_string_kv: Keyword/value parser (semicolon or whitespace)
    - util_dsn_validation: Structural URI validation and port validation
    - util_dsn_parser: URI component extraction with percent-decoding
    - util_error_sanitization: Password masking and bounded previews
"""

from pgconn.utils.util_conn_string import (
    KNOWN_CONNECTION_PARAMETERS,
    detect_conn_string_format,
    find_unknown_parameters,
    parse_connection_string,
)
from pgconn.utils.util_conn_string_kv import parse_keyword_value
from pgconn.utils.util_conn_string_tokenizer import tokenize_keyword_value
from pgconn.utils.util_dsn_parser import parse_authority, parse_dsn, parse_query_params
from pgconn.utils.util_dsn_validation import validate_dsn, validate_port
from pgconn.utils.util_error_sanitization import (
    mask_descriptor,
    preview_conn_string,
    sanitize_error_message,
)

__all__: list[str] = [
    "KNOWN_CONNECTION_PARAMETERS",
    "detect_conn_string_format",
    "find_unknown_parameters",
    "mask_descriptor",
    "parse_authority",
    "parse_connection_string",
    "parse_dsn",
    "parse_keyword_value",
    "parse_query_params",
    "preview_conn_string",
    "sanitize_error_message",
    "tokenize_keyword_value",
    "validate_dsn",
    "validate_port",
]
