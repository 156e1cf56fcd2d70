# SPDX-License-Identifier: MIT
# Copyright (c) 2025 OmniNode Team
"""
Type aliases shared across pgconn.

ConnectionDescriptor is the parser's output: an insertion-ordered mapping of
libpq parameter names to non-empty string values, ready to be handed to a
driver connect call.
"""

from __future__ import annotations

from pathlib import Path
from typing import TypeAlias

# Normalized connection parameters (host, port, dbname, user, password, ...)
ConnectionDescriptor: TypeAlias = dict[str, str]

# Filesystem path input flexibility
PathInput: TypeAlias = Path | str

__all__ = [
    "ConnectionDescriptor",
    "PathInput",
]
