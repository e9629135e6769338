"""Loads rule sets and records from YAML or JSON files."""

import json
import logging
from collections.abc import Callable, Iterable, Mapping
from dataclasses import dataclass, field
from pathlib import Path
from typing import Any

import yaml

from fieldrules.errors import RuleSetError
from fieldrules.types import ConstraintProvider, FieldSpec
from fieldrules.validator import Validator

logger = logging.getLogger(__name__)

SUPPORTED_SUFFIXES = (".yaml", ".yml", ".json")


def _read_document(path: Path) -> Any:
    """Parse a YAML or JSON file, raising RuleSetError on failure."""
    if not path.is_file():
        raise RuleSetError(f"File not found: {path}")
    if path.suffix.lower() not in SUPPORTED_SUFFIXES:
        raise RuleSetError(
            f"Unsupported file type '{path.suffix}' for {path}. "
            "Expected one of: " + ", ".join(SUPPORTED_SUFFIXES)
        )

    with open(path, encoding="utf-8") as f:
        try:
            if path.suffix.lower() == ".json":
                return json.load(f)
            return yaml.safe_load(f)
        except (yaml.YAMLError, json.JSONDecodeError) as e:
            raise RuleSetError(f"Failed to parse {path}: {e}") from e


@dataclass
class RuleSet:
    """A declarative set of field rules and default messages.

    Attributes:
        fields: Dict of field_name -> shorthand declaration
        messages: Dict of rule_name -> default message template
        source: File the rule set was loaded from, if any
    """

    fields: dict[str, FieldSpec] = field(default_factory=dict)
    messages: dict[str, str] = field(default_factory=dict)
    source: Path | None = None

    @classmethod
    def from_dict(cls, data: Mapping[str, Any], source: Path | None = None) -> "RuleSet":
        """Create RuleSet from a parsed YAML/JSON document."""
        fields = data.get("fields") or {}
        messages = data.get("messages") or {}

        if not isinstance(fields, Mapping):
            raise RuleSetError("'fields' must be a mapping of field name to rules")
        if not isinstance(messages, Mapping):
            raise RuleSetError("'messages' must be a mapping of rule name to message")

        for rule, message in messages.items():
            if not isinstance(message, str):
                raise RuleSetError(f"Message for rule '{rule}' must be a string")

        return cls(
            fields=dict(fields),
            messages={str(rule): message for rule, message in messages.items()},
            source=source,
        )

    def build(
        self,
        data: Mapping[str, Any] | None = None,
        providers: Iterable[ConstraintProvider] = (),
        factory: Callable[[Mapping[str, Any] | None], Validator] | None = None,
    ) -> Validator:
        """Build a validator configured with this rule set.

        Constraints from the providers are imported before the rule set's
        messages, so the rule set's messages win over any defaults.
        """
        validator = Validator.make_from_shorthand(data, self.fields, factory=factory)

        for provider in providers:
            validator.add_constraint_provider(provider)

        if self.messages:
            validator.add_messages(self.messages)

        return validator


class RuleSetLoader:
    """Loads a rule set from a YAML or JSON file."""

    def __init__(self, path: Path):
        self.path = Path(path)

    def load(self) -> RuleSet:
        """Load and resolve the rule set.

        Raises:
            RuleSetError: If the file is missing, unparsable, or not a mapping
        """
        data = _read_document(self.path)

        if not isinstance(data, Mapping):
            raise RuleSetError(f"Rule set {self.path} must be a mapping at the top level")

        ruleset = RuleSet.from_dict(data, source=self.path)
        logger.debug(
            "Loaded %d field(s) and %d message(s) from %s",
            len(ruleset.fields),
            len(ruleset.messages),
            self.path,
        )
        return ruleset


def load_record_file(path: Path) -> list[dict[str, Any]]:
    """Load records to validate from a YAML or JSON file.

    The file holds either a single record (a mapping) or a list of records.

    Raises:
        RuleSetError: If the file is missing, unparsable, or has another shape
    """
    path = Path(path)
    data = _read_document(path)

    if isinstance(data, Mapping):
        return [dict(data)]
    if isinstance(data, list) and all(isinstance(item, Mapping) for item in data):
        return [dict(item) for item in data]

    raise RuleSetError(f"Record file {path} must hold a mapping or a list of mappings")
