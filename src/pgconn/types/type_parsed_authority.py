# SPDX-License-Identifier: MIT
# Copyright (c) 2025 OmniNode Team

"""Strongly-typed URI authority parse result model.

The authority is the ``user:password@host:port`` segment of a connection URI.
The URI parser builds one of these per call and discards it as soon as the
connection descriptor has been assembled.

Example:
    >>> from pgconn.types import ModelParsedAuthority
    >>> authority = ModelParsedAuthority(
    ...     user="admin",
    ...     password="secret",
    ...     host="2001:db8::1",
    ...     port="5432",
    ... )
    >>> authority.host
    '2001:db8::1'
"""

from pydantic import BaseModel, ConfigDict, Field

__all__ = ["ModelParsedAuthority"]


class ModelParsedAuthority(BaseModel):
    """Parsed authority segment of a PostgreSQL connection URI.

    Attributes:
        user: Percent-decoded user name. None if not specified.
        password: Percent-decoded password. None if not specified.
            Note: Handle with care as this contains sensitive credentials.
        host: Host name, or IPv6 literal without brackets. Empty when the
            authority held only user-info.
        port: Decimal port string. None if not specified.
    """

    user: str | None = Field(
        default=None,
        description="Percent-decoded user name.",
    )
    password: str | None = Field(
        default=None,
        description="Percent-decoded password. Handle with care.",
    )
    host: str = Field(
        default="",
        description="Host name or bracket-less IPv6 literal.",
    )
    port: str | None = Field(
        default=None,
        pattern=r"^[0-9]+$",
        description="Decimal port string.",
    )

    model_config = ConfigDict(frozen=True)
