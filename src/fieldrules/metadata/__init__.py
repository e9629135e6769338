"""Rule-set files: loading and schema validation."""

from fieldrules.metadata.loader import (
    RuleSet,
    RuleSetLoader,
    load_record_file,
)
from fieldrules.metadata.validator import (
    ValidationIssue,
    validate_ruleset_document,
    validate_ruleset_file,
)

__all__ = [
    "RuleSet",
    "RuleSetLoader",
    "load_record_file",
    "ValidationIssue",
    "validate_ruleset_document",
    "validate_ruleset_file",
]
