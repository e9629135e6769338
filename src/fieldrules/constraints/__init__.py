"""Constraint bundles for fieldrules.

The engine never depends on these; they are ordinary constraint providers.
"""

from fieldrules.constraints.basic import (
    DEFAULT_MESSAGES,
    EMAIL_PATTERN,
    PHONE_PATTERN,
    URL_PATTERN,
    UUID_PATTERN,
    BasicConstraints,
    register_basic_constraints,
)

__all__ = [
    "DEFAULT_MESSAGES",
    "EMAIL_PATTERN",
    "PHONE_PATTERN",
    "URL_PATTERN",
    "UUID_PATTERN",
    "BasicConstraints",
    "register_basic_constraints",
]
