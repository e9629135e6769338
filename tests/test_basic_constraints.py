"""Tests for the basic constraint provider."""

import pytest

from fieldrules.constraints import (
    DEFAULT_MESSAGES,
    EMAIL_PATTERN,
    PHONE_PATTERN,
    URL_PATTERN,
    UUID_PATTERN,
    BasicConstraints,
    register_basic_constraints,
)
from fieldrules.validator import Validator


@pytest.fixture
def constraints():
    return BasicConstraints().get_constraints()


# =============================================================================
# Pattern Tests
# =============================================================================


class TestPatterns:
    @pytest.mark.parametrize("value", ["user@example.com", "first.last+tag@sub.example.co"])
    def test_valid_emails(self, value):
        assert EMAIL_PATTERN.match(value)

    @pytest.mark.parametrize("value", ["user@", "@example.com", "user@example", "plain"])
    def test_invalid_emails(self, value):
        assert not EMAIL_PATTERN.match(value)

    @pytest.mark.parametrize("value", ["+1 555 123 4567", "555-123-4567", "(555) 123-4567"])
    def test_valid_phones(self, value):
        assert PHONE_PATTERN.match(value)

    def test_url(self):
        assert URL_PATTERN.match("https://example.com/path")
        assert not URL_PATTERN.match("ftp://example.com")

    def test_uuid(self):
        assert UUID_PATTERN.match("123e4567-e89b-12d3-a456-426614174000")
        assert not UUID_PATTERN.match("123e4567")


# =============================================================================
# Constraint Tests
# =============================================================================


class TestConstraints:
    def test_every_constraint_has_a_default_message(self, constraints):
        assert set(constraints) == set(DEFAULT_MESSAGES)

    @pytest.mark.parametrize("value", ["x", 0, False, ["a"]])
    def test_required_passes(self, constraints, value):
        assert constraints["required"](value)

    @pytest.mark.parametrize("value", [None, "", "   ", [], {}])
    def test_required_fails(self, constraints, value):
        assert not constraints["required"](value)

    def test_alpha(self, constraints):
        assert constraints["alpha"]("abc")
        assert not constraints["alpha"]("abc1")
        assert not constraints["alpha"](5)

    def test_alpha_numeric(self, constraints):
        assert constraints["alpha_numeric"]("abc123")
        assert not constraints["alpha_numeric"]("abc 123")

    def test_numeric(self, constraints):
        assert constraints["numeric"]("12.5")
        assert constraints["numeric"](-3)
        assert not constraints["numeric"]("12a")
        assert not constraints["numeric"](True)

    def test_integer(self, constraints):
        assert constraints["integer"](4)
        assert constraints["integer"]("-4")
        assert constraints["integer"](4.0)
        assert not constraints["integer"](4.5)
        assert not constraints["integer"]("4.5")

    def test_boolean(self, constraints):
        assert constraints["boolean"](True)
        assert constraints["boolean"]("false")
        assert not constraints["boolean"]("yes")

    def test_date_and_datetime(self, constraints):
        assert constraints["date"]("2024-01-31")
        assert not constraints["date"]("31/01/2024")
        assert constraints["datetime"]("2024-01-31T10:30:00")
        assert not constraints["datetime"]("2024-01-31")

    def test_min_coerces_string_options(self, constraints):
        assert constraints["min"](18, "18")
        assert not constraints["min"](15, "18")
        assert constraints["min"]("20", "18")

    def test_min_non_numeric_value_fails(self, constraints):
        assert not constraints["min"]("abc", "1")
        assert not constraints["min"](None, "1")

    def test_max(self, constraints):
        assert constraints["max"](10, "10")
        assert not constraints["max"](11, 10)

    def test_between(self, constraints):
        assert constraints["between"](5, "1", "10")
        assert not constraints["between"](11, "1", "10")

    def test_length_bounds(self, constraints):
        assert constraints["length"]("hello", "5", "10")
        assert not constraints["length"]("hey", "5", "10")
        assert constraints["min_length"]("abc", "3")
        assert not constraints["max_length"]("abcd", "3")
        assert constraints["exact_length"](["a", "b"], "2")
        assert not constraints["length"](12345, "1", "10")

    def test_in_list_variadic(self, constraints):
        assert constraints["in_list"]("b", "a", "b", "c")
        assert not constraints["in_list"]("d", "a", "b", "c")

    def test_in_list_list_option(self, constraints):
        assert constraints["in_list"]("b", ["a", "b"])
        assert constraints["not_in_list"]("z", ["a", "b"])

    def test_pattern(self, constraints):
        assert constraints["pattern"]("AB-12", r"^[A-Z]{2}-\d+$")
        assert not constraints["pattern"]("ab-12", r"^[A-Z]{2}-\d+$")
        assert not constraints["pattern"](12, r"\d+")


# =============================================================================
# Integration with the validator
# =============================================================================


class TestRegisterBasicConstraints:
    def test_registers_constraints_and_messages(self):
        v = Validator()
        register_basic_constraints(v)

        assert set(v.constraints) == set(DEFAULT_MESSAGES)
        assert v.messages["required"] == "{title} is required"

    def test_shorthand_with_defaults(self):
        v = Validator.make_from_shorthand(
            fields={
                "age": {"title": "Age", "rules": "required|integer|min:18"},
                "email": {"title": "Email", "rules": "required|email"},
                "name": {"title": "Name", "rules": ["length:2,5"]},
            }
        )
        register_basic_constraints(v)

        assert v.validate({"age": 16, "email": "not-an-email", "name": "Bartholomew"}) is False
        assert v.errors == {
            "age": "Age must be at least 18",
            "email": "Email must be a valid email address",
            "name": "Name must be between 2 and 5 characters",
        }
