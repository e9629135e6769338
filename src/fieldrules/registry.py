"""Constraint registry for fieldrules.

Provides registration and lookup for the named constraints a validator
evaluates. Each validator owns its own registry, so two validators can
bind the same rule name to different constraints.
"""

import logging
from collections.abc import Mapping
from types import MappingProxyType

from fieldrules.errors import MissingConstraintError
from fieldrules.types import Constraint, ConstraintProvider

logger = logging.getLogger(__name__)


class ConstraintRegistry:
    """Registry of constraints keyed by rule name.

    Lookups are lazy: a rule may reference a constraint that is registered
    after the rule itself, as long as it exists by the time validation runs.

    Example:
        registry = ConstraintRegistry()
        registry.register("min", lambda value, n: float(value) >= float(n))

        # Later, during validation
        constraint = registry.get("min")
    """

    def __init__(self) -> None:
        self._constraints: dict[str, Constraint] = {}

    def register(self, name: str, constraint: Constraint) -> None:
        """Register a constraint by name.

        Re-registering a name overwrites the previous constraint.

        Args:
            name: Rule name the constraint answers to (e.g., "email", "min")
            constraint: Callable taking the value followed by the rule options

        Raises:
            TypeError: If constraint is not callable
        """
        if not callable(constraint):
            raise TypeError(f"Constraint '{name}' must be callable")
        if name in self._constraints:
            logger.debug("Overwriting constraint '%s'", name)
        self._constraints[name] = constraint

    def register_provider(self, provider: ConstraintProvider) -> None:
        """Import every constraint exposed by a provider.

        Provider entries overwrite existing constraints with the same name.
        The provider itself is not retained.
        """
        constraints = provider.get_constraints()
        for name, constraint in constraints.items():
            self.register(name, constraint)
        logger.debug(
            "Imported %d constraint(s) from %s",
            len(constraints),
            type(provider).__name__,
        )

    def get(self, name: str) -> Constraint:
        """Get a registered constraint by name.

        Raises:
            MissingConstraintError: If no constraint is registered under name
        """
        if name not in self._constraints:
            raise MissingConstraintError(name)
        return self._constraints[name]

    def is_registered(self, name: str) -> bool:
        """Check if a constraint is registered."""
        return name in self._constraints

    def list_registered(self) -> list[str]:
        """List all registered constraint names."""
        return sorted(self._constraints)

    def as_dict(self) -> Mapping[str, Constraint]:
        """Read-only view of the registered constraints."""
        return MappingProxyType(self._constraints)

    def clear(self) -> None:
        """Clear all registrations."""
        self._constraints.clear()

    def __contains__(self, name: object) -> bool:
        return name in self._constraints

    def __len__(self) -> int:
        return len(self._constraints)
