# SPDX-License-Identifier: MIT
# Copyright (c) 2025 OmniNode Team
"""Whitespace tokenizer for keyword/value connection strings.

Splits ``host='my host' user=me`` into ``["host='my host'", "user=me"]``.
Quote characters are kept in the tokens; stripping them is the keyword/value
parser's job.

An unterminated quote is accepted: the stray quote character stays in the
final token and no error is raised. Existing configuration files rely on
this leniency.
"""

from __future__ import annotations

QUOTE_CHARS = frozenset("'\"")


def tokenize_keyword_value(raw: str) -> list[str]:
    """Split a whitespace-delimited keyword/value string into raw tokens.

    Single- or double-quoted spans may contain spaces; a quote opens a span
    only when no span is open, and only the same quote character closes it.

    Args:
        raw: Keyword/value connection string.

    Returns:
        Raw ``key=value`` tokens in input order, possibly still quoted.

    Example:
        >>> tokenize_keyword_value("host='my host' port=5432")
        ["host='my host'", 'port=5432']
    """
    tokens: list[str] = []
    current: list[str] = []
    active_quote: str | None = None

    for char in raw:
        if active_quote is None and char in QUOTE_CHARS:
            active_quote = char
            current.append(char)
        elif char == active_quote:
            active_quote = None
            current.append(char)
        elif char == " " and active_quote is None:
            if current:
                tokens.append("".join(current))
                current = []
        else:
            current.append(char)

    if current:
        tokens.append("".join(current))
    return tokens


__all__: list[str] = ["QUOTE_CHARS", "tokenize_keyword_value"]
