"""Tests for the constraint registry."""

import pytest

from fieldrules.errors import MissingConstraintError
from fieldrules.registry import ConstraintRegistry


class StubProvider:
    def __init__(self, constraints):
        self.constraints = constraints

    def get_constraints(self):
        return self.constraints


@pytest.fixture
def registry():
    return ConstraintRegistry()


class TestConstraintRegistry:
    def test_register_and_get(self, registry):
        def is_even(value):
            return value % 2 == 0

        registry.register("even", is_even)
        assert registry.get("even") is is_even
        assert registry.is_registered("even")
        assert "even" in registry

    def test_register_overwrites(self, registry):
        registry.register("check", lambda value: True)
        registry.register("check", lambda value: False)
        assert registry.get("check")(1) is False
        assert len(registry) == 1

    def test_get_unknown_raises(self, registry):
        with pytest.raises(MissingConstraintError) as exc_info:
            registry.get("nope")
        assert exc_info.value.rule == "nope"
        assert "Validation constraint nope does not exist" in str(exc_info.value)

    def test_missing_constraint_is_lookup_error(self, registry):
        with pytest.raises(LookupError):
            registry.get("nope")

    def test_register_non_callable(self, registry):
        with pytest.raises(TypeError):
            registry.register("bad", "not callable")

    def test_register_provider_merges(self, registry):
        registry.register("keep", lambda value: True)
        registry.register("replace", lambda value: True)

        registry.register_provider(
            StubProvider({"replace": lambda value: False, "added": lambda value: True})
        )

        assert registry.list_registered() == ["added", "keep", "replace"]
        assert registry.get("replace")(None) is False

    def test_as_dict_is_read_only(self, registry):
        registry.register("check", lambda value: True)
        view = registry.as_dict()
        assert list(view) == ["check"]
        with pytest.raises(TypeError):
            view["other"] = lambda value: True

    def test_clear(self, registry):
        registry.register("check", lambda value: True)
        registry.clear()
        assert len(registry) == 0
        assert not registry.is_registered("check")
