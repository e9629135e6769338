"""Error message formatting.

Message templates support these tokens:
- {field} - the field name
- {title} - the field's display title
- {0}, {1}, ... - the rule's options by position (list options are joined with ", ")

Tokens without a value are left in the message as written.
"""

import re
from collections.abc import Mapping

from fieldrules.errors import MissingMessageError
from fieldrules.types import Option, RuleBinding

TOKEN_PATTERN = re.compile(r"\{(?P<token>\w+)\}")


def render_option(option: Option) -> str:
    """Render a rule option for display in a message."""
    if isinstance(option, (list, tuple)):
        return ", ".join(str(item) for item in option)
    return str(option)


def insert_tokens(template: str, tokens: Mapping[str, str]) -> str:
    """Replace {token} placeholders in a template.

    Substitution is a single pass, so inserted values are never scanned
    for further tokens.
    """

    def replace(match: re.Match) -> str:
        token = match.group("token")
        if token in tokens:
            return tokens[token]
        return match.group(0)

    return TOKEN_PATTERN.sub(replace, template)


class MessageFormatter:
    """Formats the error message for a failing rule binding.

    The formatter reads the validator's field titles and default messages
    by reference, so messages imported after construction are honored.
    """

    def __init__(self, fields: Mapping[str, str], messages: Mapping[str, str]):
        """Initialize the formatter.

        Args:
            fields: Dict of field_name -> display title
            messages: Dict of rule_name -> default message template
        """
        self.fields = fields
        self.messages = messages

    def resolve_template(self, binding: RuleBinding) -> str:
        """Pick the binding's own message, falling back to the rule default.

        Raises:
            MissingMessageError: If neither is set
        """
        message = binding.message or self.messages.get(binding.rule)
        if not message:
            raise MissingMessageError(binding.rule)
        return message

    def tokens_for(self, field: str, binding: RuleBinding) -> dict[str, str]:
        tokens = {
            "field": field,
            "title": str(self.fields.get(field, field)),
        }
        for i, option in enumerate(binding.options):
            tokens[str(i)] = render_option(option)
        return tokens

    def format(self, field: str, binding: RuleBinding) -> str:
        """Format the error message for a field's failing rule."""
        template = self.resolve_template(binding)
        return insert_tokens(template, self.tokens_for(field, binding))
