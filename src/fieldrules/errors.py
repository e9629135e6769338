"""Configuration errors raised by the validation engine.

Data validation failures are never raised: they are recorded in the
validator's error map. Everything in this module signals a defect in how
the validator was configured.
"""


class ValidatorConfigError(Exception):
    """Base class for validator configuration errors."""


class UnknownFieldError(ValidatorConfigError, ValueError):
    """A rule was attached to a field that was never registered."""

    def __init__(self, field: str):
        self.field = field
        super().__init__(f"Field {field} does not exist")


class MissingConstraintError(ValidatorConfigError, LookupError):
    """A rule references a constraint that is not registered."""

    def __init__(self, rule: str):
        self.rule = rule
        super().__init__(f"Validation constraint {rule} does not exist")


class MissingMessageError(ValidatorConfigError, LookupError):
    """A failing rule has neither a message override nor a default message."""

    def __init__(self, rule: str):
        self.rule = rule
        super().__init__(f"Error message for rule {rule} does not exist")


class RuleSetError(ValidatorConfigError, ValueError):
    """A rule-set or record file could not be loaded."""
