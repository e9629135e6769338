"""
metadata/validator.py — JSON Schema validation for rule-set files.

Checks a rule-set document against ``schemas/ruleset.schema.json`` and also
flags shorthand tokens that parse to an empty rule name.

Usage:
    from fieldrules.metadata.validator import validate_ruleset_file

    issues = validate_ruleset_file(Path("rules.yaml"))
    for issue in issues:
        print(issue)
"""
from __future__ import annotations

import json
import logging
from dataclasses import dataclass
from pathlib import Path
from typing import Any

import yaml
from jsonschema import Draft202012Validator
from jsonschema.exceptions import ValidationError

from fieldrules.shorthand import normalize_field_spec, split_shorthand

logger = logging.getLogger(__name__)

_SCHEMAS_DIR = Path(__file__).parent / "schemas"
_RULESET_SCHEMA = "ruleset.schema.json"


@dataclass
class ValidationIssue:
    """A single validation finding for a rule-set file."""

    file: Path
    message: str
    path: str = ""          # location within the document, e.g. "fields/age/rules[1]"
    severity: str = "error" # "error" | "warning"

    def __str__(self) -> str:
        loc = f" at {self.path}" if self.path else ""
        return f"[{self.severity.upper()}] {self.file}{loc}: {self.message}"


# ---------------------------------------------------------------------------
# Internal helpers
# ---------------------------------------------------------------------------


def _load_schema(name: str) -> dict[str, Any]:
    schema_path = _SCHEMAS_DIR / name
    with schema_path.open(encoding="utf-8") as fh:
        return json.load(fh)


def _json_path(error: ValidationError) -> str:
    """Convert a jsonschema ValidationError path to a readable string."""
    parts = []
    for p in error.absolute_path:
        if isinstance(p, int):
            parts.append(f"[{p}]")
        else:
            parts.append(str(p))
    return "/".join(parts).replace("/[", "[")


def _check_tokens(path: Path, doc: dict[str, Any]) -> list[ValidationIssue]:
    """Warn about shorthand tokens without a rule name (e.g. "required||email")."""
    issues: list[ValidationIssue] = []
    fields = doc.get("fields")
    if not isinstance(fields, dict):
        return issues

    for name, spec in fields.items():
        normalized = normalize_field_spec(str(name), spec)
        if normalized is None:
            continue
        _, tokens = normalized
        for i, token in enumerate(tokens):
            if not split_shorthand(token).rule:
                issues.append(
                    ValidationIssue(
                        file=path,
                        message=f"Rule token {token!r} has no rule name",
                        path=f"fields/{name}/rules[{i}]",
                        severity="warning",
                    )
                )
    return issues


# ---------------------------------------------------------------------------
# Public API
# ---------------------------------------------------------------------------


def validate_ruleset_document(
    doc: Any,
    path: Path,
    *,
    strict: bool = False,
) -> list[ValidationIssue]:
    """
    Validate an already-parsed rule-set document.

    Args:
        doc:    Parsed YAML/JSON document.
        path:   File the document came from, used in issue reports.
        strict: If ``True``, warnings are escalated to errors.

    Returns:
        A list of :class:`ValidationIssue` objects (empty on success).
    """
    if doc is None:
        return [ValidationIssue(file=path, message="File is empty or contains only whitespace")]

    validator = Draft202012Validator(_load_schema(_RULESET_SCHEMA))

    issues = [
        ValidationIssue(file=path, message=error.message, path=_json_path(error))
        for error in sorted(validator.iter_errors(doc), key=_json_path)
    ]

    if isinstance(doc, dict):
        issues.extend(_check_tokens(path, doc))

    if strict:
        for issue in issues:
            if issue.severity == "warning":
                issue.severity = "error"

    for issue in issues:
        logger.debug("Rule-set issue: %s", issue)

    return issues


def validate_ruleset_file(yaml_path: Path, *, strict: bool = False) -> list[ValidationIssue]:
    """
    Validate a single rule-set file (YAML or JSON) against the rule-set schema.

    Parse errors are reported as issues rather than raised.
    """
    yaml_path = Path(yaml_path)
    if not yaml_path.is_file():
        return [ValidationIssue(file=yaml_path, message=f"File does not exist: {yaml_path}")]

    # YAML is a superset of JSON, so one parser covers both
    try:
        with yaml_path.open(encoding="utf-8") as fh:
            raw = yaml.safe_load(fh)
    except yaml.YAMLError as exc:
        return [ValidationIssue(file=yaml_path, message=f"YAML parse error: {exc}")]

    return validate_ruleset_document(raw, yaml_path, strict=strict)
