"""Tests for the pattern registry."""
import threading

import pytest

from patternbook.application.decorators import PatternRegistration
from patternbook.domain.base.exceptions import DuplicatePatternError, PatternNotFoundError
from patternbook.domain.catalog import PatternCategory, PatternEntry
from patternbook.infrastructure.registry.pattern_registry import PatternRegistry


def make_registration(name, category=PatternCategory.BEHAVIORAL, module="tests.fake", aliases=()):
    entry = PatternEntry(name=name, category=category, intent=f"{name} intent",
                         aliases=aliases, module=module)
    return PatternRegistration(entry=entry, demo=lambda: [name])


class TestPatternRegistry:
    """Test cases for PatternRegistry."""

    def setup_method(self):
        self.registry = PatternRegistry()

    def test_singleton_instance(self):
        PatternRegistry.reset_instance()
        try:
            assert PatternRegistry.get_instance() is PatternRegistry.get_instance()
        finally:
            PatternRegistry.reset_instance()

    def test_singleton_is_thread_safe(self):
        PatternRegistry.reset_instance()
        instances = []
        threads = [threading.Thread(target=lambda: instances.append(PatternRegistry.get_instance()))
                   for _ in range(10)]
        for t in threads:
            t.start()
        for t in threads:
            t.join()
        try:
            assert len({id(i) for i in instances}) == 1
        finally:
            PatternRegistry.reset_instance()

    def test_register_and_get_by_slug_name_and_alias(self):
        registration = make_registration("Chain of Responsibility", aliases=("CoR",))
        self.registry.register(registration)

        assert self.registry.get("chain-of-responsibility") is registration
        assert self.registry.get("Chain of Responsibility") is registration
        assert self.registry.get("cor") is registration
        assert self.registry.is_registered("chain of responsibility")

    def test_get_unknown_pattern(self):
        with pytest.raises(PatternNotFoundError) as exc_info:
            self.registry.get("Monostate")
        assert "Monostate" in str(exc_info.value)
        assert not self.registry.is_registered("Monostate")

    def test_duplicate_slug_from_other_module(self):
        self.registry.register(make_registration("Observer", module="tests.one"))

        with pytest.raises(DuplicatePatternError):
            self.registry.register(make_registration("observer", module="tests.two"))

    def test_reregistering_same_module_is_noop(self):
        first = make_registration("Observer")
        self.registry.register(first)
        self.registry.register(make_registration("Observer"))

        assert self.registry.count() == 1
        assert self.registry.get("observer") is first

    def test_list_in_catalog_order(self):
        self.registry.register(make_registration("Visitor"))
        self.registry.register(make_registration("Null Object", PatternCategory.MODERN))
        self.registry.register(make_registration("Builder", PatternCategory.CREATIONAL))
        self.registry.register(make_registration("Command"))

        names = [r.entry.name for r in self.registry.list_registrations()]
        assert names == ["Builder", "Command", "Visitor", "Null Object"]

        behavioral = self.registry.list_registrations(PatternCategory.BEHAVIORAL)
        assert [r.entry.name for r in behavioral] == ["Command", "Visitor"]

    def test_shared_alias_resolves_in_catalog_order(self):
        self.registry.register(make_registration("Decorator", PatternCategory.STRUCTURAL, aliases=("Wrapper",)))
        self.registry.register(make_registration("Adapter", PatternCategory.STRUCTURAL, aliases=("Wrapper",)))

        assert self.registry.get("wrapper").entry.name == "Adapter"

    def test_clear_registrations(self):
        self.registry.register(make_registration("State"))
        self.registry.clear_registrations()

        assert self.registry.count() == 0
        assert self.registry.list_registrations() == []
