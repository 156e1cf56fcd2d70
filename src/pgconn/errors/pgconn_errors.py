# SPDX-License-Identifier: MIT
# Copyright (c) 2025 OmniNode Team
"""pgconn Error Classes.

Error Hierarchy:
    PgConnError (base error)
    ├── ConnectionStringError
    ├── ConfigurationError
    ├── DatabaseConnectionError
    └── DatabaseAuthenticationError

All errors:
    - Use EnumPgConnErrorCode for error classification
    - Support proper error chaining with `raise ... from e`
    - Include structured context for debugging
    - Carry a correlation ID for request tracking
    - Accept ModelPgConnErrorContext for bundled context parameters
"""

from __future__ import annotations

from uuid import UUID

from pgconn.enums import EnumConnStringErrorKind, EnumPgConnErrorCode
from pgconn.errors.model_pgconn_error_context import ModelPgConnErrorContext


class PgConnError(Exception):
    """Base error class for pgconn.

    Provides common structured fields for every failure raised by the package.

    Structured Fields (via ModelPgConnErrorContext):
        operation: Operation being performed
        target_name: Target resource or component name
        correlation_id: Correlation ID for tracking

    Example:
        >>> context = ModelPgConnErrorContext(
        ...     operation="load_config",
        ...     target_name="config.yml",
        ... )
        >>> raise PgConnError("Operation failed", context=context)

        # Or with extra context:
        >>> raise PgConnError(
        ...     "Operation failed",
        ...     context=context,
        ...     parameter="dsn.port",
        ... )
    """

    def __init__(
        self,
        message: str,
        error_code: EnumPgConnErrorCode | None = None,
        context: ModelPgConnErrorContext | None = None,
        **extra_context: object,
    ) -> None:
        """Initialize PgConnError with structured fields.

        Args:
            message: Human-readable error message
            error_code: Error code (defaults to OPERATION_FAILED)
            context: Bundled context (operation, target_name, correlation_id)
            **extra_context: Additional context information
        """
        super().__init__(message)
        self.message = message
        self.error_code = error_code or EnumPgConnErrorCode.OPERATION_FAILED

        structured_context: dict[str, object] = dict(extra_context)
        self.correlation_id: UUID | None = None
        if context is not None:
            if context.operation is not None:
                structured_context["operation"] = context.operation
            if context.target_name is not None:
                structured_context["target_name"] = context.target_name
            self.correlation_id = context.correlation_id
        self.context = structured_context

    def __str__(self) -> str:
        return self.message


class ConnectionStringError(PgConnError):
    """Raised when a connection string cannot be parsed.

    The ``kind`` attribute names the failure class; the message names the
    exact rule that was violated.

    Example:
        >>> raise ConnectionStringError(
        ...     "port is not a valid integer",
        ...     kind=EnumConnStringErrorKind.INVALID_PORT,
        ...     parameter="dsn.port",
        ... )
    """

    def __init__(
        self,
        message: str,
        kind: EnumConnStringErrorKind,
        context: ModelPgConnErrorContext | None = None,
        **extra_context: object,
    ) -> None:
        """Initialize ConnectionStringError.

        Args:
            message: Human-readable error message
            kind: Failure class of the rejected input
            context: Bundled context
            **extra_context: Additional context information (parameter, value)
        """
        super().__init__(
            message=message,
            error_code=EnumPgConnErrorCode.INVALID_CONNECTION_STRING,
            context=context,
            kind=kind,
            **extra_context,
        )
        self.kind = kind


class ConfigurationError(PgConnError):
    """Raised when configuration loading or validation fails.

    Used for unreadable or malformed YAML files, missing named configs,
    a missing database name, or an unset connection string variable.
    """

    def __init__(
        self,
        message: str,
        context: ModelPgConnErrorContext | None = None,
        **extra_context: object,
    ) -> None:
        super().__init__(
            message=message,
            error_code=EnumPgConnErrorCode.INVALID_CONFIGURATION,
            context=context,
            **extra_context,
        )


class DatabaseConnectionError(PgConnError):
    """Raised when the database server cannot be reached.

    Example:
        >>> raise DatabaseConnectionError(
        ...     "Failed to connect to database - check host and port",
        ...     context=context,
        ...     host="db.example.com",
        ...     port=5432,
        ... )
    """

    def __init__(
        self,
        message: str,
        context: ModelPgConnErrorContext | None = None,
        **extra_context: object,
    ) -> None:
        super().__init__(
            message=message,
            error_code=EnumPgConnErrorCode.CONNECTION_FAILED,
            context=context,
            **extra_context,
        )


class DatabaseAuthenticationError(PgConnError):
    """Raised when the database server rejects the supplied credentials."""

    def __init__(
        self,
        message: str,
        context: ModelPgConnErrorContext | None = None,
        **extra_context: object,
    ) -> None:
        super().__init__(
            message=message,
            error_code=EnumPgConnErrorCode.AUTHENTICATION_FAILED,
            context=context,
            **extra_context,
        )


__all__ = [
    "ConfigurationError",
    "ConnectionStringError",
    "DatabaseAuthenticationError",
    "DatabaseConnectionError",
    "PgConnError",
]
