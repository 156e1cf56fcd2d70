# SPDX-License-Identifier: MIT
# Copyright (c) 2025 OmniNode Team
"""Unit tests for pgconn enumerations."""

import pytest

from pgconn.enums import (
    EnumConnStringErrorKind,
    EnumConnStringFormat,
    EnumPgConnErrorCode,
)

pytestmark = [pytest.mark.unit]


class TestEnumConnStringErrorKind:
    """Tests for EnumConnStringErrorKind values."""

    def test_members(self) -> None:
        """Every failure class has a lowercase value."""
        assert {kind.value for kind in EnumConnStringErrorKind} == {
            "invalid_input",
            "empty_input",
            "unsupported_scheme",
            "malformed_structure",
            "embedded_whitespace",
            "invalid_port",
        }

    def test_is_str(self) -> None:
        """Kinds compare equal to their string values."""
        assert EnumConnStringErrorKind.INVALID_PORT == "invalid_port"


class TestEnumConnStringFormat:
    """Tests for EnumConnStringFormat values."""

    def test_values(self) -> None:
        """URI and KEYWORD_VALUE values."""
        assert EnumConnStringFormat.URI.value == "uri"
        assert EnumConnStringFormat.KEYWORD_VALUE.value == "keyword_value"


class TestEnumPgConnErrorCode:
    """Tests for EnumPgConnErrorCode values."""

    def test_values_are_prefixed(self) -> None:
        """Error codes share the PGCONN_ prefix."""
        assert all(code.value.startswith("PGCONN_") for code in EnumPgConnErrorCode)
