# SPDX-License-Identifier: MIT
# Copyright (c) 2025 OmniNode Team
"""pgconn command line interface."""

from pgconn.cli.commands import cli

__all__: list[str] = ["cli"]
