"""Validation engine for fieldrules.

A Validator is configured once and then used to validate records:

    validator = Validator()
    validator.add_constraint("min", lambda value, n: value >= float(n))
    validator.add_field("age", "Age")
    validator.add_rule("age", "min", "{title} must be at least {0}", ["18"])

    if not validator.validate({"age": 15}):
        validator.errors  # {"age": "Age must be at least 18"}

Or from shorthand declarations:

    validator = Validator.make_from_shorthand(record, {
        "age": {"title": "Age", "rules": "required|min:18"},
        "email": "required|email",
    })

A validator stores the record and errors of the current pass on the
instance, so it must not run concurrent passes. Use copy() to give each
pass its own record and error state over the shared configuration.
"""

import copy
import logging
from collections.abc import Callable, Mapping, Sequence
from types import MappingProxyType
from typing import Any

from fieldrules.errors import UnknownFieldError
from fieldrules.messages import MessageFormatter
from fieldrules.registry import ConstraintRegistry
from fieldrules.shorthand import normalize_field_spec, split_shorthand
from fieldrules.types import Constraint, ConstraintProvider, Option, RuleBinding

logger = logging.getLogger(__name__)


class Validator:
    """Validates a record against per-field rules.

    Errors are collected one per field: when several rules fail for the same
    field in one pass, the last failing rule's message is kept.
    """

    def __init__(self, data: Mapping[str, Any] | None = None):
        self._registry = ConstraintRegistry()
        self._data: dict[str, Any] = {}
        self._errors: dict[str, str] = {}
        self._fields: dict[str, str] = {}
        self._messages: dict[str, str] = {}
        self._rules: dict[str, dict[str, RuleBinding]] = {}
        self._formatter = MessageFormatter(self._fields, self._messages)

        if data:
            self.set_data(data)

    # =========================================================================
    # Configuration
    # =========================================================================

    def add_constraint(self, name: str, constraint: Constraint) -> "Validator":
        """Register a constraint callback under a rule name."""
        self._registry.register(name, constraint)
        return self

    def add_constraint_provider(self, provider: ConstraintProvider) -> "Validator":
        """Import every constraint from a provider."""
        self._registry.register_provider(provider)
        return self

    def add_field(
        self,
        field: str,
        title: str,
        rules: Mapping[str, Sequence[Option]] | None = None,
    ) -> "Validator":
        """Register a field and its display title.

        Args:
            field: Field name as it appears in records
            title: Display title for the {title} message token
            rules: Optional mapping of rule_name -> options; each entry is
                added with no message override
        """
        self._fields[field] = title

        if rules:
            for rule, options in rules.items():
                self.add_rule(field, rule, "", options)

        return self

    def add_messages(self, messages: Mapping[str, str]) -> "Validator":
        """Set default message templates by rule name."""
        self._messages.update(messages)
        return self

    def add_rule(
        self,
        field: str,
        rule: str,
        message: str = "",
        options: Sequence[Option] | None = None,
    ) -> "Validator":
        """Attach a rule to a registered field.

        Re-adding a rule to the same field replaces the earlier binding.

        The first binding of a rule name seeds the default message for that
        rule with whatever message it carries, even an empty one. Later
        bindings with no message take the default as it stands when they
        are added.

        Raises:
            UnknownFieldError: If field was never registered with add_field()
        """
        if field not in self._fields:
            raise UnknownFieldError(field)

        # A bare string is one option, not a sequence of characters
        if isinstance(options, str):
            options = [options]

        if rule in self._messages:
            message = message or self._messages[rule]
        else:
            self._messages[rule] = message

        self._rules.setdefault(field, {})[rule] = RuleBinding(
            rule=rule,
            message=message,
            options=list(options or []),
        )
        logger.debug("Added rule '%s' to field '%s'", rule, field)

        return self

    def add_error(self, field: str, message: str) -> "Validator":
        """Record an error for a field, replacing any earlier one."""
        self._errors[field] = message
        return self

    def set_data(self, data: Mapping[str, Any]) -> "Validator":
        """Store the record to validate."""
        self._data = dict(data)
        return self

    # =========================================================================
    # Accessors
    # =========================================================================

    @property
    def constraints(self) -> Mapping[str, Constraint]:
        return self._registry.as_dict()

    @property
    def data(self) -> Mapping[str, Any]:
        return MappingProxyType(self._data)

    @property
    def errors(self) -> Mapping[str, str]:
        return MappingProxyType(self._errors)

    @property
    def fields(self) -> Mapping[str, str]:
        return MappingProxyType(self._fields)

    @property
    def messages(self) -> Mapping[str, str]:
        return MappingProxyType(self._messages)

    @property
    def rules(self) -> Mapping[str, Mapping[str, RuleBinding]]:
        return MappingProxyType(self._rules)

    @property
    def registry(self) -> ConstraintRegistry:
        return self._registry

    # =========================================================================
    # Validation
    # =========================================================================

    def format_message(self, field: str, binding: RuleBinding) -> str:
        """Format the error message for a failing rule on a field.

        Raises:
            MissingMessageError: If the binding has no message and the rule
                has no default
        """
        return self._formatter.format(field, binding)

    def validate(self, data: Mapping[str, Any] | None = None) -> bool:
        """Validate a record against the configured rules.

        Fields are visited in the record's order, and each field's rules in
        the order they were added. Fields without rules are skipped; rules
        for fields missing from the record are not run.

        Errors from an earlier pass are kept; call reset() between
        unrelated passes.

        Args:
            data: Record to validate. When empty, the stored record is used.

        Returns:
            True if no errors were recorded. False without validating when
            there is no record at all.

        Raises:
            MissingConstraintError: If a rule has no registered constraint
            MissingMessageError: If a failing rule has no message
        """
        if data:
            self.set_data(data)
        elif not self._data:
            logger.debug("No record to validate")
            return False

        for field, value in self._data.items():
            bindings = self._rules.get(field)
            if bindings is None:
                continue

            for rule, binding in bindings.items():
                constraint = self._registry.get(rule)

                # The value is always the first argument
                if not constraint(value, *binding.options):
                    logger.debug("Field '%s' failed rule '%s'", field, rule)
                    self.add_error(field, self.format_message(field, binding))

        return len(self._errors) == 0

    def reset(self) -> "Validator":
        """Clear the stored record and errors, keeping all configuration."""
        self._data.clear()
        self._errors.clear()
        return self

    def copy(self) -> "Validator":
        """Return a validator sharing this configuration with fresh state.

        Constraints, fields, rules and messages are shared, not copied; the
        record and error map belong to the new instance alone.
        """
        clone = copy.copy(self)
        clone._data = {}
        clone._errors = {}
        return clone

    # =========================================================================
    # Shorthand construction
    # =========================================================================

    split_shorthand = staticmethod(split_shorthand)

    @classmethod
    def make_from_shorthand(
        cls,
        data: Mapping[str, Any] | None = None,
        fields: Mapping[str, Any] | None = None,
        *,
        factory: Callable[[Mapping[str, Any] | None], "Validator"] | None = None,
    ) -> "Validator":
        """Create a validator from shorthand field declarations.

        Args:
            data: Record to store on the new validator
            fields: Dict of field_name -> declaration, where a declaration is
                a pipe-delimited rule string, a list of shorthand tokens, or
                a mapping with an optional "title" and a "rules" entry.
                Declarations of any other shape are skipped.
            factory: Builds the empty validator from data; defaults to cls

        Returns:
            The configured validator
        """
        build = factory or cls
        validator = build(data)

        for field, spec in (fields or {}).items():
            normalized = normalize_field_spec(field, spec)
            if normalized is None:
                continue

            title, tokens = normalized
            validator.add_field(field, title)

            for token in tokens:
                binding = split_shorthand(token)
                validator.add_rule(field, binding.rule, binding.message, binding.options)

        return validator
