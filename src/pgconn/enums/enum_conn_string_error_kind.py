# SPDX-License-Identifier: MIT
# Copyright (c) 2025 OmniNode Team
"""Connection String Error Kind Enumeration.

Classifies why a connection string was rejected. Every
``ConnectionStringError`` carries exactly one of these kinds so callers can
branch on the failure class without matching message text.
"""

from enum import Enum


class EnumConnStringErrorKind(str, Enum):
    """Failure classes for connection string parsing.

    Attributes:
        INVALID_INPUT: Input is not a single string value.
        EMPTY_INPUT: Input is empty or all whitespace.
        UNSUPPORTED_SCHEME: URI does not start with a recognized scheme.
        MALFORMED_STRUCTURE: A required URI segment is missing or an IPv6
            host literal is broken.
        EMBEDDED_WHITESPACE: Whitespace found inside a URI.
        INVALID_PORT: Port is present but not a base-10 integer in range.
    """

    INVALID_INPUT = "invalid_input"
    EMPTY_INPUT = "empty_input"
    UNSUPPORTED_SCHEME = "unsupported_scheme"
    MALFORMED_STRUCTURE = "malformed_structure"
    EMBEDDED_WHITESPACE = "embedded_whitespace"
    INVALID_PORT = "invalid_port"


__all__ = ["EnumConnStringErrorKind"]
