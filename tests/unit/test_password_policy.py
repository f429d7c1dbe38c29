"""Unit tests for the password strength policy."""

import pytest

from profile_api.application.services.password_policy import (
    check_password_strength,
    exceeds_max_bytes,
    missing_requirements,
    password_strength_message,
)


class TestMissingRequirements:
    """Tests for missing_requirements."""

    def test_strong_password_has_no_missing(self) -> None:
        assert missing_requirements("Str0ng-Pass!") == ()

    def test_short_password(self) -> None:
        assert missing_requirements("Ab1!x") == ("at least 8 characters",)

    @pytest.mark.parametrize(
        ("password", "label"),
        [
            ("lower-case-1", "one uppercase letter"),
            ("UPPER-CASE-1", "one lowercase letter"),
            ("No-Digits-Here", "one number"),
            ("NoSpecial123", "one special character"),
        ],
    )
    def test_single_missing_rule(self, password: str, label: str) -> None:
        missing = missing_requirements(password)
        assert len(missing) == 1
        assert missing[0].startswith(label)

    def test_byte_limit_is_not_a_must_contain_item(self) -> None:
        password = "Aa1!" + "x" * 69
        assert missing_requirements(password) == ()
        assert exceeds_max_bytes(password)

    def test_byte_limit_counts_utf8_bytes(self) -> None:
        password = "Aa1!" + "é" * 35
        assert len(password) == 39
        assert exceeds_max_bytes(password)
        assert not exceeds_max_bytes("Aa1!" + "é" * 34)

    def test_check_reports_every_rule(self) -> None:
        checks = check_password_strength("")
        assert set(checks) == {
            "min_length",
            "has_upper",
            "has_lower",
            "has_number",
            "has_special",
            "max_bytes",
        }
        assert checks["max_bytes"] is True
        assert not any(v for k, v in checks.items() if k != "max_bytes")


class TestPasswordStrengthMessage:
    """Tests for password_strength_message."""

    def test_empty_when_nothing_missing(self) -> None:
        assert password_strength_message(()) == ""

    def test_joins_missing_in_order(self) -> None:
        assert (
            password_strength_message(("one uppercase letter", "one number"))
            == "Password must contain: one uppercase letter, one number"
        )

    def test_too_long_has_its_own_wording(self) -> None:
        assert password_strength_message((), too_long=True) == (
            "Password must be at most 72 bytes"
        )

    def test_missing_and_too_long_are_both_reported(self) -> None:
        assert password_strength_message(("one number",), too_long=True) == (
            "Password must contain: one number; Password must be at most 72 bytes"
        )
