"""Tests for error types and codes."""

import pytest

from uniqname.core.errors import (
    ConfigError,
    ErrorCode,
    InternalError,
    NamingError,
    UniqnameError,
)


class TestErrorCode:
    """Error code value tests."""

    @pytest.mark.parametrize(
        ("code", "expected_range"),
        [
            (ErrorCode.CONFIG_PARSE_ERROR, 2000),
            (ErrorCode.CONFIG_FILE_NOT_FOUND, 2000),
            (ErrorCode.DUPLICATE_KEY, 3000),
            (ErrorCode.INVALID_UNIVERSE, 3000),
            (ErrorCode.INTERNAL_ERROR, 9000),
        ],
    )
    def test_given_error_code_when_checked_then_in_correct_range(
        self, code: ErrorCode, expected_range: int
    ) -> None:
        """Error codes fall within their designated numeric range."""
        assert expected_range <= code.value < expected_range + 1000


class TestUniqnameError:
    """Base error behavior tests."""

    def test_given_error_when_to_dict_then_serializes_all_fields(self) -> None:
        # Given
        error = UniqnameError(
            code=ErrorCode.SYMBOL_NOT_FOUND,
            message="Test message",
            details={"key": "value"},
        )

        # When
        result = error.to_dict()

        # Then
        assert result == {
            "code": 3002,
            "error": "SYMBOL_NOT_FOUND",
            "message": "Test message",
            "details": {"key": "value"},
        }

    def test_given_error_when_str_then_human_readable(self) -> None:
        error = UniqnameError(code=ErrorCode.INTERNAL_ERROR, message="Something broke")

        assert str(error) == "[9001] INTERNAL_ERROR: Something broke"

    def test_given_error_when_raised_then_catchable_as_base(self) -> None:
        with pytest.raises(UniqnameError):
            raise NamingError.not_found("Actor.Value")


class TestConfigError:
    """ConfigError factory method tests."""

    @pytest.mark.parametrize(
        ("factory", "kwargs", "expected_code"),
        [
            (
                "parse_error",
                {"path": "/foo", "reason": "bad yaml"},
                ErrorCode.CONFIG_PARSE_ERROR,
            ),
            (
                "invalid_value",
                {"field": "naming.counter_bits", "value": 0, "reason": "too small"},
                ErrorCode.CONFIG_INVALID_VALUE,
            ),
            ("file_not_found", {"path": "/missing"}, ErrorCode.CONFIG_FILE_NOT_FOUND),
        ],
    )
    def test_given_factory_when_called_then_correct_code(
        self, factory: str, kwargs: dict[str, object], expected_code: ErrorCode
    ) -> None:
        error = getattr(ConfigError, factory)(**kwargs)

        assert error.code == expected_code

    def test_given_invalid_value_when_created_then_value_stringified(self) -> None:
        error = ConfigError.invalid_value("naming.counter_bits", 0, "too small")

        assert error.details == {
            "field": "naming.counter_bits",
            "value": "0",
            "reason": "too small",
        }


class TestNamingError:
    """NamingError factory method tests."""

    def test_given_duplicate_key_when_created_then_details_name_symbol(self) -> None:
        # Given
        key = ("Actor", "Value", 0)

        # When
        error = NamingError.duplicate_key(key, "Actor", "Value")

        # Then
        assert error.code == ErrorCode.DUPLICATE_KEY
        assert error.details == {"key": repr(key), "scope": "Actor", "symbol": "Value"}
        assert "Value" in error.message

    def test_given_saturated_counter_when_created_then_limit_in_details(self) -> None:
        error = NamingError.counter_saturated("Pad", "MEMBER_NAME", 31)

        assert error.code == ErrorCode.COUNTER_SATURATED
        assert error.details["limit"] == 31

    def test_given_invalid_universe_when_created_then_reason_in_message(self) -> None:
        error = NamingError.invalid_universe("duplicate type 'A'", type="A")

        assert error.message == "Invalid type universe: duplicate type 'A'"
        assert error.details == {"type": "A"}


class TestInternalError:
    def test_given_unexpected_error_when_created_then_includes_extras(self) -> None:
        extras = {"symbol": "Value", "kind": "SUPER_MEMBER_NAME"}

        error = InternalError.unexpected("boom", **extras)

        assert error.details == extras
        assert error.code == ErrorCode.INTERNAL_ERROR
