"""Basic constraints shipped with fieldrules.

Every constraint takes the value under validation followed by its options:

- required: Value must be non-empty
- alpha, alpha_numeric, numeric, integer, boolean: Character/type checks
- email, url, uuid, phone, date, datetime: Format checks
- min, max, between: Numeric bounds
- length, min_length, max_length, exact_length: Length bounds
- in_list, not_in_list: Membership in the options
- pattern: Regex match

Options written in shorthand arrive as strings, so numeric options are
coerced with float(). A value that cannot be coerced fails the check.
"""

import re
from collections.abc import Mapping
from typing import TYPE_CHECKING, Any

from fieldrules.types import Constraint

if TYPE_CHECKING:
    from fieldrules.validator import Validator


# =============================================================================
# Format Patterns
# =============================================================================

# Email: Basic RFC 5322 compliant pattern
EMAIL_PATTERN = re.compile(
    r"^[a-zA-Z0-9._%+-]+@[a-zA-Z0-9.-]+\.[a-zA-Z]{2,}$"
)

# Phone: Flexible pattern supporting international formats
PHONE_PATTERN = re.compile(
    r"^[\+]?[(]?[0-9]{1,3}[)]?[-\s\.]?[(]?[0-9]{1,4}[)]?[-\s\.]?[0-9]{1,4}[-\s\.]?[0-9]{1,9}$"
)

URL_PATTERN = re.compile(
    r"^https?://[^\s/$.?#].[^\s]*$",
    re.IGNORECASE
)

UUID_PATTERN = re.compile(
    r"^[0-9a-f]{8}-[0-9a-f]{4}-[0-9a-f]{4}-[0-9a-f]{4}-[0-9a-f]{12}$",
    re.IGNORECASE
)

DATE_PATTERN = re.compile(r"^\d{4}-\d{2}-\d{2}$")

DATETIME_PATTERN = re.compile(r"^\d{4}-\d{2}-\d{2}[T ]\d{2}:\d{2}")

NUMERIC_PATTERN = re.compile(r"^[-+]?(\d+\.?\d*|\.\d+)$")

INTEGER_PATTERN = re.compile(r"^[-+]?\d+$")


# =============================================================================
# Default Messages
# =============================================================================

DEFAULT_MESSAGES: dict[str, str] = {
    "required": "{title} is required",
    "alpha": "{title} may only contain letters",
    "alpha_numeric": "{title} may only contain letters and numbers",
    "numeric": "{title} must be a number",
    "integer": "{title} must be a whole number",
    "boolean": "{title} must be a boolean",
    "email": "{title} must be a valid email address",
    "url": "{title} must be a valid URL",
    "uuid": "{title} must be a valid UUID",
    "phone": "{title} must be a valid phone number",
    "date": "{title} must be a valid date (YYYY-MM-DD)",
    "datetime": "{title} must be a valid datetime",
    "min": "{title} must be at least {0}",
    "max": "{title} must be at most {0}",
    "between": "{title} must be between {0} and {1}",
    "length": "{title} must be between {0} and {1} characters",
    "min_length": "{title} must be at least {0} characters",
    "max_length": "{title} must be at most {0} characters",
    "exact_length": "{title} must be exactly {0} characters",
    "in_list": "{title} is not an allowed value",
    "not_in_list": "{title} is not an allowed value",
    "pattern": "{title} format is invalid",
}


# =============================================================================
# Helpers
# =============================================================================


def _is_empty(value: Any) -> bool:
    """Check if a value is considered empty."""
    if value is None:
        return True
    if isinstance(value, str) and value.strip() == "":
        return True
    if isinstance(value, (list, tuple, dict, set)) and len(value) == 0:
        return True
    return False


def _to_number(value: Any) -> float | None:
    if isinstance(value, bool):
        return None
    if isinstance(value, (int, float)):
        return float(value)
    if isinstance(value, str):
        try:
            return float(value)
        except ValueError:
            return None
    return None


def _flatten(options: tuple[Any, ...]) -> list[str]:
    """Flatten variadic and list-valued options into strings."""
    values: list[str] = []
    for option in options:
        if isinstance(option, (list, tuple, set)):
            values.extend(str(item) for item in option)
        else:
            values.append(str(option))
    return values


def _matches(pattern: re.Pattern, value: Any) -> bool:
    return isinstance(value, str) and pattern.match(value) is not None


# =============================================================================
# Constraints
# =============================================================================


def required(value: Any) -> bool:
    return not _is_empty(value)


def alpha(value: Any) -> bool:
    return isinstance(value, str) and value.isalpha()


def alpha_numeric(value: Any) -> bool:
    return isinstance(value, str) and value.isalnum()


def numeric(value: Any) -> bool:
    if isinstance(value, str):
        return NUMERIC_PATTERN.match(value.strip()) is not None
    return _to_number(value) is not None


def integer(value: Any) -> bool:
    if isinstance(value, bool):
        return False
    if isinstance(value, int):
        return True
    if isinstance(value, float):
        return value.is_integer()
    return _matches(INTEGER_PATTERN, value)


def boolean(value: Any) -> bool:
    return isinstance(value, bool) or value in (0, 1, "0", "1", "true", "false")


def email(value: Any) -> bool:
    return _matches(EMAIL_PATTERN, value)


def url(value: Any) -> bool:
    return _matches(URL_PATTERN, value)


def uuid(value: Any) -> bool:
    return _matches(UUID_PATTERN, value)


def phone(value: Any) -> bool:
    return _matches(PHONE_PATTERN, value)


def date(value: Any) -> bool:
    return _matches(DATE_PATTERN, value)


def datetime(value: Any) -> bool:
    return _matches(DATETIME_PATTERN, value)


def min_value(value: Any, minimum: Any) -> bool:
    number, bound = _to_number(value), _to_number(minimum)
    return number is not None and bound is not None and number >= bound


def max_value(value: Any, maximum: Any) -> bool:
    number, bound = _to_number(value), _to_number(maximum)
    return number is not None and bound is not None and number <= bound


def between(value: Any, minimum: Any, maximum: Any) -> bool:
    return min_value(value, minimum) and max_value(value, maximum)


def _length(value: Any) -> int | None:
    if isinstance(value, (str, list, tuple, dict, set)):
        return len(value)
    return None


def length(value: Any, minimum: Any, maximum: Any) -> bool:
    size = _length(value)
    return size is not None and between(size, minimum, maximum)


def min_length(value: Any, minimum: Any) -> bool:
    size = _length(value)
    return size is not None and min_value(size, minimum)


def max_length(value: Any, maximum: Any) -> bool:
    size = _length(value)
    return size is not None and max_value(size, maximum)


def exact_length(value: Any, expected: Any) -> bool:
    size, bound = _length(value), _to_number(expected)
    return size is not None and bound is not None and size == bound


def in_list(value: Any, *options: Any) -> bool:
    return str(value) in _flatten(options)


def not_in_list(value: Any, *options: Any) -> bool:
    return str(value) not in _flatten(options)


def pattern(value: Any, expression: str) -> bool:
    if not isinstance(value, str):
        return False
    return re.search(expression, value) is not None


# =============================================================================
# Provider
# =============================================================================


class BasicConstraints:
    """Constraint provider for the basic constraint set.

    Example:
        validator.add_constraint_provider(BasicConstraints())
        validator.add_messages(DEFAULT_MESSAGES)
    """

    def get_constraints(self) -> Mapping[str, Constraint]:
        return {
            "required": required,
            "alpha": alpha,
            "alpha_numeric": alpha_numeric,
            "numeric": numeric,
            "integer": integer,
            "boolean": boolean,
            "email": email,
            "url": url,
            "uuid": uuid,
            "phone": phone,
            "date": date,
            "datetime": datetime,
            "min": min_value,
            "max": max_value,
            "between": between,
            "length": length,
            "min_length": min_length,
            "max_length": max_length,
            "exact_length": exact_length,
            "in_list": in_list,
            "not_in_list": not_in_list,
            "pattern": pattern,
        }


def register_basic_constraints(validator: "Validator") -> None:
    """Register the basic constraints and their default messages on a validator."""
    validator.add_constraint_provider(BasicConstraints())
    validator.add_messages(DEFAULT_MESSAGES)
