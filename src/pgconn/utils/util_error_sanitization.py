# SPDX-License-Identifier: MIT
# Copyright (c) 2025 OmniNode Team
"""Error message and connection string sanitization utilities.

This module provides functions to sanitize text before it is:
- Logged
- Included in error messages
- Printed by the CLI

Sanitization protects against leaking sensitive data such as:
- Passwords embedded in connection URIs (``user:secret@host``)
- ``password=...`` keyword/value pairs and query parameters
- Excessively long inputs that may carry secrets

Example:
    >>> from pgconn.utils import preview_conn_string
    >>> preview_conn_string("postgresql://app:s3cret@db:5432/prod")
    'postgresql://app:***@db:5432/prod'
"""

from __future__ import annotations

import re

from pgconn.types import ConnectionDescriptor

# Substrings of a driver error that suggest it echoes connection parameters.
# Matched case-insensitively; any hit redacts the whole message.
DRIVER_ERROR_REDACT_MARKERS: tuple[str, ...] = (
    "password",
    "passwd",
    "pgpass",
    "secret",
    "sslkey",
    "sslpassword",
    "user=",
    "postgres://",
    "postgresql://",
)

# Default bound for previews of user input embedded in error messages
PREVIEW_MAX_LENGTH = 64

MASK = "***"

_URI_SCHEME_PATTERN = re.compile(r"^\s*postgres(?:ql)?://", re.IGNORECASE)

# password=value in keyword/value strings and URI query text; the value ends at
# whitespace, ';' or '&' unless it is quoted
_PASSWORD_PAIR_PATTERN = re.compile(
    r"""(password\s*=\s*)('[^']*'?|"[^"]*"?|[^\s;&]+)""",
    re.IGNORECASE,
)


def _mask_uri_password(text: str) -> str:
    match = _URI_SCHEME_PATTERN.match(text)
    if match is None:
        return text
    prefix, rest = text[: match.end()], text[match.end() :]
    authority, slash, tail = rest.partition("/")
    userinfo, at, hostport = authority.rpartition("@")
    if not at or ":" not in userinfo:
        return text
    user = userinfo.split(":", 1)[0]
    return f"{prefix}{user}:{MASK}@{hostport}{slash}{tail}"


def preview_conn_string(raw: str, max_length: int = PREVIEW_MAX_LENGTH) -> str:
    """Build a bounded, password-masked excerpt of a connection string.

    Used to point at the offending input in error messages without leaking
    credentials or dumping arbitrarily long values into logs.

    Args:
        raw: The connection string (URI or keyword/value form).
        max_length: Maximum preview length before truncation.

    Returns:
        The masked preview, suffixed with ``...`` when truncated.

    Example:
        >>> preview_conn_string("host=db password='a b' user=me")
        'host=db password=*** user=me'
    """
    masked = _mask_uri_password(raw)
    masked = _PASSWORD_PAIR_PATTERN.sub(lambda m: m.group(1) + MASK, masked)
    if len(masked) > max_length:
        return masked[:max_length] + "..."
    return masked


def mask_descriptor(descriptor: ConnectionDescriptor) -> ConnectionDescriptor:
    """Return a copy of a descriptor with the password value masked."""
    return {
        key: (MASK if key == "password" else value)
        for key, value in descriptor.items()
    }


def sanitize_error_message(exception: Exception, max_length: int = 500) -> str:
    """Render a driver exception as ``"{Type}: {message}"`` safe for errors and logs.

    asyncpg and the socket layer sometimes echo the DSN or parameters they
    were given. A message containing any ``DRIVER_ERROR_REDACT_MARKERS``
    entry is replaced by a redaction notice; any other message is cut to
    ``max_length`` characters.

    Example:
        >>> sanitize_error_message(OSError("connect to postgresql://u:pw@db failed"))
        'OSError: [REDACTED - potentially sensitive data]'
        >>> sanitize_error_message(ValueError("bad value"))
        'ValueError: bad value'
    """
    type_name = type(exception).__name__
    message = str(exception)

    lowered = message.lower()
    if any(marker in lowered for marker in DRIVER_ERROR_REDACT_MARKERS):
        return f"{type_name}: [REDACTED - potentially sensitive data]"

    if len(message) > max_length:
        message = message[:max_length] + "... [truncated]"
    return f"{type_name}: {message}"


__all__: list[str] = [
    "DRIVER_ERROR_REDACT_MARKERS",
    "MASK",
    "PREVIEW_MAX_LENGTH",
    "mask_descriptor",
    "preview_conn_string",
    "sanitize_error_message",
]
