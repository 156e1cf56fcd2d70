"""
Tests for pgconn error classes.

All tests validate:
- Error class instantiation
- Inheritance chain
- Error chaining (raise ... from e)
- Structured context fields via ModelPgConnErrorContext
- Error code mapping
"""

from uuid import UUID, uuid4

import pytest
from pydantic import ValidationError

from pgconn.enums import EnumConnStringErrorKind, EnumPgConnErrorCode
from pgconn.errors import (
    ConfigurationError,
    ConnectionStringError,
    DatabaseAuthenticationError,
    DatabaseConnectionError,
    ModelPgConnErrorContext,
    PgConnError,
)

pytestmark = [pytest.mark.unit]


class TestModelPgConnErrorContextWithCorrelation:
    """Tests for ModelPgConnErrorContext.with_correlation() factory method."""

    def test_with_correlation_generates_uuid_when_none(self) -> None:
        """Test that with_correlation generates a UUID when none is provided."""
        context = ModelPgConnErrorContext.with_correlation()
        assert isinstance(context.correlation_id, UUID)
        assert context.correlation_id.version == 4

    def test_with_correlation_uses_provided_uuid(self) -> None:
        """Test that with_correlation uses the provided UUID when given."""
        provided_id = uuid4()
        context = ModelPgConnErrorContext.with_correlation(correlation_id=provided_id)
        assert context.correlation_id == provided_id

    def test_with_correlation_with_other_fields(self) -> None:
        """Test that with_correlation passes through other kwargs."""
        context = ModelPgConnErrorContext.with_correlation(
            operation="parse_dsn",
            target_name="dsn_parser",
        )
        assert context.operation == "parse_dsn"
        assert context.target_name == "dsn_parser"


class TestModelPgConnErrorContext:
    """Tests for ModelPgConnErrorContext configuration model."""

    def test_basic_instantiation(self) -> None:
        """Test basic context model instantiation."""
        context = ModelPgConnErrorContext()
        assert context.operation is None
        assert context.target_name is None
        assert context.correlation_id is None

    def test_immutability(self) -> None:
        """Test that the context model is frozen."""
        context = ModelPgConnErrorContext(operation="connect")
        with pytest.raises(ValidationError):
            context.operation = "other"  # type: ignore[misc]

    def test_extra_fields_forbidden(self) -> None:
        """Test that unknown fields are rejected."""
        with pytest.raises(ValidationError):
            ModelPgConnErrorContext(password="secret")  # type: ignore[call-arg]


class TestPgConnError:
    """Tests for PgConnError base class."""

    def test_basic_instantiation(self) -> None:
        """Test basic error instantiation."""
        error = PgConnError("Operation failed")
        assert str(error) == "Operation failed"
        assert error.message == "Operation failed"
        assert error.error_code == EnumPgConnErrorCode.OPERATION_FAILED
        assert error.correlation_id is None
        assert error.context == {}

    def test_with_context_model(self) -> None:
        """Test error with context model."""
        correlation_id = uuid4()
        context = ModelPgConnErrorContext(
            operation="load_config",
            target_name="config.yml",
            correlation_id=correlation_id,
        )
        error = PgConnError("Config failed", context=context)
        assert error.correlation_id == correlation_id
        assert error.context["operation"] == "load_config"
        assert error.context["target_name"] == "config.yml"

    def test_with_extra_context(self) -> None:
        """Test error with extra context kwargs."""
        error = PgConnError("Parse failed", parameter="dsn.port")
        assert error.context["parameter"] == "dsn.port"

    def test_error_chaining(self) -> None:
        """Test error chaining with 'raise ... from e'."""
        original = ValueError("original")
        with pytest.raises(PgConnError) as exc_info:
            try:
                raise original
            except ValueError as e:
                raise PgConnError("wrapped") from e
        assert exc_info.value.__cause__ is original


class TestConnectionStringError:
    """Tests for ConnectionStringError."""

    def test_kind_and_code(self) -> None:
        """Test kind attribute and error code mapping."""
        error = ConnectionStringError(
            "port is not a valid integer",
            kind=EnumConnStringErrorKind.INVALID_PORT,
            parameter="port",
        )
        assert isinstance(error, PgConnError)
        assert error.kind == EnumConnStringErrorKind.INVALID_PORT
        assert error.error_code == EnumPgConnErrorCode.INVALID_CONNECTION_STRING
        assert error.context["kind"] == EnumConnStringErrorKind.INVALID_PORT
        assert error.context["parameter"] == "port"


class TestErrorCodeMapping:
    """Tests for error code mapping of the remaining subclasses."""

    @pytest.mark.parametrize(
        ("error_class", "expected_code"),
        [
            (ConfigurationError, EnumPgConnErrorCode.INVALID_CONFIGURATION),
            (DatabaseConnectionError, EnumPgConnErrorCode.CONNECTION_FAILED),
            (DatabaseAuthenticationError, EnumPgConnErrorCode.AUTHENTICATION_FAILED),
        ],
    )
    def test_error_code(
        self, error_class: type[PgConnError], expected_code: EnumPgConnErrorCode
    ) -> None:
        """Test each subclass maps to its error code and keeps context."""
        context = ModelPgConnErrorContext.with_correlation(operation="connect")
        error = error_class("failed", context=context, host="db")
        assert isinstance(error, PgConnError)
        assert error.error_code == expected_code
        assert error.correlation_id == context.correlation_id
        assert error.context == {"host": "db", "operation": "connect"}
