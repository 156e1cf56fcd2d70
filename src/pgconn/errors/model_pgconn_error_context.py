# SPDX-License-Identifier: MIT
# Copyright (c) 2025 OmniNode Team
"""pgconn Error Context Configuration Model.

This module defines the configuration model for error context, bundling the
common structured fields of every pgconn error so that error constructors
take one typed argument instead of a growing list of keywords.
"""

from __future__ import annotations

from uuid import UUID, uuid4

from pydantic import BaseModel, ConfigDict, Field


class ModelPgConnErrorContext(BaseModel):
    """Configuration model for pgconn error context.

    Attributes:
        operation: Operation being performed (parse_dsn, load_config, connect, ...)
        target_name: Target resource name (parser component, config file, ...)
        correlation_id: Correlation ID for tracing one call across log lines

    Example:
        >>> context = ModelPgConnErrorContext.with_correlation(
        ...     operation="validate_dsn",
        ...     target_name="dsn_validator",
        ... )
        >>> raise ConnectionStringError("Invalid dsn", kind=..., context=context)
    """

    model_config = ConfigDict(
        frozen=True,  # Immutable for thread safety
        extra="forbid",
    )

    operation: str | None = Field(
        default=None,
        description="Operation being performed (parse_dsn, load_config, connect, etc.)",
    )
    target_name: str | None = Field(
        default=None,
        description="Target resource or component name",
    )
    correlation_id: UUID | None = Field(
        default=None,
        description="Correlation ID for tracing",
    )

    @classmethod
    def with_correlation(
        cls,
        correlation_id: UUID | None = None,
        **kwargs: str | None,
    ) -> ModelPgConnErrorContext:
        """Create a context, generating a UUID4 correlation ID when none is given.

        Args:
            correlation_id: Existing correlation ID to propagate, or ``None``.
            **kwargs: Remaining context fields (operation, target_name).

        Returns:
            A frozen context with ``correlation_id`` always set.
        """
        return cls(correlation_id=correlation_id or uuid4(), **kwargs)


__all__ = ["ModelPgConnErrorContext"]
