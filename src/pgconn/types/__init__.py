# SPDX-License-Identifier: MIT
# Copyright (c) 2025 OmniNode Team
"""pgconn type definitions.

Exports:
    ConnectionDescriptor: Parser output type (dict[str, str])
    PathInput: Path | str
    ModelParsedAuthority: Parsed URI authority segment
"""

from pgconn.types.type_parsed_authority import ModelParsedAuthority
from pgconn.types.type_pgconn_aliases import ConnectionDescriptor, PathInput

__all__: list[str] = [
    "ConnectionDescriptor",
    "ModelParsedAuthority",
    "PathInput",
]
