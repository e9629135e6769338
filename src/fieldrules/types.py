"""Core types for the fieldrules validation engine.

This module defines the data model shared by every layer:
- RuleBinding: a rule attached to a field (name, options, message override)
- Constraint / ConstraintProvider: the pluggable checking capability
- Option / FieldSpec: the accepted shapes of rule options and field declarations
"""

from collections.abc import Mapping
from dataclasses import dataclass, field
from typing import Any, Protocol

# A positional rule option. Options parsed from shorthand are always strings;
# options passed programmatically may be numbers or lists of strings.
Option = str | int | float | list[str]

# A shorthand field declaration: "rule|rule:opt", ["rule", "rule:opt"],
# or {"title": "...", "rules": <string or list>}.
FieldSpec = str | list[str] | Mapping[str, Any]


class Constraint(Protocol):
    """Protocol that all constraints must implement.

    A constraint receives the value under validation as its first argument,
    followed by the rule's options in order, and answers whether the value
    passes.
    """

    def __call__(self, value: Any, *options: Any) -> bool:
        ...


class ConstraintProvider(Protocol):
    """A named bundle of constraints that can be imported in bulk."""

    def get_constraints(self) -> Mapping[str, Constraint]:
        """Return a mapping of rule name -> constraint."""
        ...


@dataclass
class RuleBinding:
    """A single rule attached to a field.

    Attributes:
        rule: Rule name, used to look up the constraint and default message
        message: Message template override; empty means "use the default"
        options: Positional options passed to the constraint after the value
    """

    rule: str
    message: str = ""
    options: list[Option] = field(default_factory=list)

    def to_dict(self) -> dict[str, Any]:
        return {
            "rule": self.rule,
            "message": self.message,
            "options": list(self.options),
        }
