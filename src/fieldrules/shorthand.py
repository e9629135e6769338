"""Shorthand rule parser.

A shorthand token packs a rule binding into a single string:

    rule
    rule:opt
    rule:opt1,opt2
    rule:opt1,opt2:The message here!

Several tokens are joined with "|" when a field's rules are declared as one
string. There is no escaping: an option can never contain "," or ":", while
the message part may contain ":" because the token is split at most twice.
"""

import logging
from collections.abc import Mapping
from typing import Any

from fieldrules.types import FieldSpec, Option, RuleBinding

logger = logging.getLogger(__name__)

RULE_SEPARATOR = "|"
PART_SEPARATOR = ":"
OPTION_SEPARATOR = ","


def split_shorthand(shorthand: str) -> RuleBinding:
    """Split a shorthand token into a rule binding.

    Examples:
        >>> split_shorthand("length:5,10:Must be between {0} and {1} chars")
        RuleBinding(rule='length', message='Must be between {0} and {1} chars', options=['5', '10'])
        >>> split_shorthand("required")
        RuleBinding(rule='required', message='', options=[])
    """
    if PART_SEPARATOR not in shorthand:
        return RuleBinding(rule=shorthand)

    parts = shorthand.split(PART_SEPARATOR, 2)
    rule = parts[0]
    options: list[Option] = []
    message = ""

    if len(parts) > 1:
        raw_options = parts[1]
        if OPTION_SEPARATOR in raw_options:
            options = list(raw_options.split(OPTION_SEPARATOR))
        elif raw_options:
            options = [raw_options]

    if len(parts) > 2:
        message = parts[2]

    return RuleBinding(rule=rule, message=message, options=options)


def split_rule_string(rules: str) -> list[str]:
    """Split a pipe-delimited rule string into shorthand tokens, in order."""
    return rules.split(RULE_SEPARATOR)


def normalize_field_spec(name: str, spec: FieldSpec) -> tuple[str, list[str]] | None:
    """Resolve a shorthand field declaration to its title and rule tokens.

    Accepted shapes:
    - "required|min:18"                        - a pipe-delimited string
    - ["required", "min:18"]                   - an ordered list of tokens
    - {"title": "Age", "rules": <either above>} - a config mapping

    Args:
        name: Field name, used as the title when none is given
        spec: The declaration

    Returns:
        (title, tokens), or None when spec is none of the accepted shapes
    """
    title: Any = name

    if isinstance(spec, (str, list, tuple)):
        rules: Any = spec
    elif isinstance(spec, Mapping):
        if "title" in spec:
            title = spec["title"]
        rules = spec.get("rules")
    else:
        logger.warning(
            "Skipping field '%s': unsupported rule declaration of type %s",
            name,
            type(spec).__name__,
        )
        return None

    if isinstance(rules, str):
        tokens = split_rule_string(rules)
    elif isinstance(rules, (list, tuple)):
        tokens = [str(token) for token in rules]
    else:
        # Field is still registered, it just carries no rules
        tokens = []

    return str(title), tokens


def parse_rule_string(rules: str) -> list[RuleBinding]:
    """Expand a pipe-delimited rule string into rule bindings, in token order."""
    return [split_shorthand(token) for token in split_rule_string(rules)]
