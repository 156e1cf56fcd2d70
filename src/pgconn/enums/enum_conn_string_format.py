# SPDX-License-Identifier: MIT
# Copyright (c) 2025 OmniNode Team
"""Connection String Format Enumeration.

Identifies which grammar a raw connection string is written in. Used by the
format dispatcher to route parsing and by the CLI to report what was parsed.
"""

from enum import Enum


class EnumConnStringFormat(str, Enum):
    """Textual formats accepted by the connection string parser.

    Attributes:
        URI: ``postgres://`` or ``postgresql://`` URI form.
        KEYWORD_VALUE: libpq-style ``key=value`` pairs delimited by
            semicolons or whitespace.
    """

    URI = "uri"
    KEYWORD_VALUE = "keyword_value"


__all__ = ["EnumConnStringFormat"]
