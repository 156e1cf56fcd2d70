# SPDX-License-Identifier: MIT
# Copyright (c) 2025 OmniNode Team
"""Keyword/value connection string parser.

Two delimiters are accepted:

- Semicolon (legacy): ``user=me;password=pw;host=db;port=5432;dbname=app``
- Whitespace (libpq): ``host='my host' user=me dbname='test db'``

The presence of a single ``;`` anywhere selects semicolon mode. Values are
taken literally; no percent-decoding is applied on this path.
"""

from __future__ import annotations

import logging
from uuid import UUID

from pgconn.types import ConnectionDescriptor
from pgconn.utils.util_conn_string_tokenizer import (
    QUOTE_CHARS,
    tokenize_keyword_value,
)
from pgconn.utils.util_dsn_validation import validate_port

logger = logging.getLogger(__name__)


def strip_matching_quotes(value: str) -> str:
    """Remove one pair of matching ``'`` or ``"`` quotes around a value.

    Example:
        >>> strip_matching_quotes("'my host'")
        'my host'
        >>> strip_matching_quotes("'unterminated")
        "'unterminated"
    """
    if len(value) >= 2 and value[0] in QUOTE_CHARS and value[-1] == value[0]:
        return value[1:-1]
    return value


def split_keyword_value(raw: str) -> list[str]:
    """Split a keyword/value string into ``key=value`` segments.

    Semicolon mode when the input contains ``;``, tokenizer otherwise.
    """
    if ";" in raw:
        return raw.split(";")
    return tokenize_keyword_value(raw)


def parse_keyword_value(
    raw: str,
    *,
    correlation_id: UUID | None = None,
) -> ConnectionDescriptor:
    """Parse a keyword/value connection string into a ConnectionDescriptor.

    Each segment is trimmed and split on its first ``=``. Segments that are
    empty or lack ``=`` are skipped; so are pairs whose value is empty after
    quote stripping. Later duplicates overwrite earlier ones.

    Args:
        raw: Keyword/value connection string.
        correlation_id: Optional correlation ID propagated into error context.

    Returns:
        Mapping of parameter names to literal values.

    Raises:
        ConnectionStringError: (kind INVALID_PORT) if a ``port`` value is not
            a base-10 integer in range.

    Example:
        >>> parse_keyword_value("host='my host' user=testuser port=5432")
        {'host': 'my host', 'user': 'testuser', 'port': '5432'}
    """
    descriptor: ConnectionDescriptor = {}
    for segment in split_keyword_value(raw):
        token = segment.strip()
        if not token:
            continue
        key, sep, value = token.partition("=")
        key = key.strip()
        if not sep or not key:
            logger.debug(
                "Skipping keyword/value token without a key",
                extra={"token_length": len(token)},
            )
            continue
        value = strip_matching_quotes(value.strip())
        if not value:
            logger.debug(
                "Skipping keyword/value pair with empty value",
                extra={"parameter": key},
            )
            continue
        descriptor[key] = value

    if "port" in descriptor:
        descriptor["port"] = validate_port(
            descriptor["port"], correlation_id=correlation_id
        )
    return descriptor


__all__: list[str] = [
    "parse_keyword_value",
    "split_keyword_value",
    "strip_matching_quotes",
]
