import logging
import os

import pytest

from patternbook.application.services.catalog_service import CatalogService
from patternbook.infrastructure.discovery.pattern_discovery import PatternDiscoveryService
from patternbook.infrastructure.registry.pattern_registry import PatternRegistry


@pytest.fixture(autouse=True)
def clean_environment(monkeypatch):
    """Keep PATTERNBOOK_* variables from the developer's shell out of tests."""
    for name in list(os.environ):
        if name.startswith("PATTERNBOOK_"):
            monkeypatch.delenv(name, raising=False)


@pytest.fixture(autouse=True)
def restore_root_logger():
    """Undo handlers installed by setup_logging so they never outlive captured streams."""
    root = logging.getLogger()
    handlers, level = root.handlers[:], root.level
    yield
    for handler in root.handlers[:]:
        root.removeHandler(handler)
        if handler not in handlers:
            handler.close()
    for handler in handlers:
        root.addHandler(handler)
    root.setLevel(level)


@pytest.fixture
def registry():
    """A private registry populated from the bundled pattern examples."""
    registry = PatternRegistry()
    PatternDiscoveryService(registry).discover_and_register()
    return registry


@pytest.fixture
def catalog_service(registry):
    return CatalogService(registry)
