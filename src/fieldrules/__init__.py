"""fieldrules — declarative field-level validation.

A validator holds named constraints, fields with display titles, and
per-field rule bindings. Validating a record runs every bound rule for
every field present in the record and collects one message per failing
field.

Usage:
    from fieldrules import Validator
    from fieldrules.constraints import register_basic_constraints

    validator = Validator.make_from_shorthand(fields={
        "age": {"title": "Age", "rules": "required|min:18"},
        "email": "required|email",
    })
    register_basic_constraints(validator)

    if not validator.validate({"age": 15, "email": "a@example.com"}):
        print(validator.errors)  # {"age": "Age must be at least 18"}
"""

from fieldrules.errors import (
    MissingConstraintError,
    MissingMessageError,
    RuleSetError,
    UnknownFieldError,
    ValidatorConfigError,
)
from fieldrules.messages import MessageFormatter, insert_tokens, render_option
from fieldrules.registry import ConstraintRegistry
from fieldrules.shorthand import (
    normalize_field_spec,
    parse_rule_string,
    split_rule_string,
    split_shorthand,
)
from fieldrules.types import (
    Constraint,
    ConstraintProvider,
    FieldSpec,
    Option,
    RuleBinding,
)
from fieldrules.validator import Validator

__version__ = "0.1.0"

__all__ = [
    # Types
    "Constraint",
    "ConstraintProvider",
    "FieldSpec",
    "Option",
    "RuleBinding",
    # Errors
    "MissingConstraintError",
    "MissingMessageError",
    "RuleSetError",
    "UnknownFieldError",
    "ValidatorConfigError",
    # Registry
    "ConstraintRegistry",
    # Shorthand
    "normalize_field_spec",
    "parse_rule_string",
    "split_rule_string",
    "split_shorthand",
    # Messages
    "MessageFormatter",
    "insert_tokens",
    "render_option",
    # Engine
    "Validator",
]
