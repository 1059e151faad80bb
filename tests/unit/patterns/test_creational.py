"""Tests for the creational pattern examples."""
import threading

import pytest

from patternbook.domain.base.exceptions import DomainException, ValidationError
from patternbook.patterns.creational.abstract_factory import (
    DarkThemeFactory,
    LightThemeFactory,
    render_login_form,
)
from patternbook.patterns.creational.builder import HttpRequestBuilder, RequestDirector
from patternbook.patterns.creational.factory_method import HtmlCreator, HtmlDocument, PdfCreator
from patternbook.patterns.creational.prototype import Monster, PrototypeNotFoundError, PrototypeRegistry
from patternbook.patterns.creational.singleton import (
    AppSettings,
    ConnectionManager,
    SingletonAlreadyInitializedError,
    SingletonMeta,
)


@pytest.fixture
def clean_singletons():
    SingletonMeta.clear_instances()
    ConnectionManager.reset()
    yield
    SingletonMeta.clear_instances()
    ConnectionManager.reset()


class TestSingleton:

    def test_same_instance_returned(self, clean_singletons):
        first = AppSettings("production")
        second = AppSettings("testing")

        assert first is second
        assert second.environment == "production"

    def test_clear_instances_allows_new_instance(self, clean_singletons):
        first = AppSettings()
        SingletonMeta.clear_instances()

        assert AppSettings() is not first

    def test_concurrent_creation_yields_one_instance(self, clean_singletons):
        instances = []
        barrier = threading.Barrier(8)

        def create():
            barrier.wait()
            instances.append(AppSettings())

        threads = [threading.Thread(target=create) for _ in range(8)]
        for t in threads:
            t.start()
        for t in threads:
            t.join()

        assert len({id(i) for i in instances}) == 1

    def test_double_initialization_raises(self, clean_singletons):
        ConnectionManager.initialize("db://one")

        with pytest.raises(SingletonAlreadyInitializedError, match="already been initialized"):
            ConnectionManager.initialize("db://two")
        assert ConnectionManager.instance().dsn == "db://one"

    def test_access_before_initialization_raises(self, clean_singletons):
        with pytest.raises(DomainException, match="has not been initialized"):
            ConnectionManager.instance()

    def test_singleton_constructing_another_singleton(self, clean_singletons):
        class Inner(metaclass=SingletonMeta):
            pass

        class Outer(metaclass=SingletonMeta):
            def __init__(self):
                self.inner = Inner()

        created = []
        worker = threading.Thread(target=lambda: created.append(Outer()))
        worker.daemon = True
        worker.start()
        worker.join(timeout=2)

        assert not worker.is_alive()
        assert created[0].inner is Inner()


class TestFactoryMethod:

    def test_subclass_decides_product(self):
        assert isinstance(HtmlCreator().create_document("t"), HtmlDocument)

    def test_render_uses_factory_method(self):
        assert PdfCreator().render("Report") == "%PDF-1.7 [Report]"
        assert HtmlCreator().render("Report") == "<html><title>Report</title></html>"


class TestAbstractFactory:

    def test_families_are_consistent(self):
        light = render_login_form(LightThemeFactory())
        dark = render_login_form(DarkThemeFactory())

        assert light == ["[x] Remember me", "[ Sign in ]"]
        assert dark == ["(*) Remember me", "<< Sign in >>"]


class TestBuilder:

    def test_builds_request_with_query(self):
        request = HttpRequestBuilder().url("https://x.test/a").param("q", "1").param("p", "2").build()

        assert request.method == "GET"
        assert request.full_url() == "https://x.test/a?q=1&p=2"

    def test_builder_resets_after_build(self):
        builder = HttpRequestBuilder()
        builder.method("POST").url("https://x.test").json_body("{}").build()

        second = builder.url("https://y.test").build()
        assert second.method == "GET"
        assert second.headers == {}

    def test_missing_url_rejected(self):
        with pytest.raises(ValidationError, match="needs a URL"):
            HttpRequestBuilder().build()

    def test_get_with_body_rejected(self):
        with pytest.raises(ValidationError, match="cannot carry a body"):
            HttpRequestBuilder().url("https://x.test").json_body("{}").method("GET").build()

    def test_director_sets_auth_and_content_type(self):
        request = RequestDirector(HttpRequestBuilder()).create_resource("https://x.test", "{}", "tok")

        assert request.method == "POST"
        assert request.headers["Authorization"] == "Bearer tok"
        assert request.headers["Content-Type"] == "application/json"

    def test_product_is_immutable(self):
        request = HttpRequestBuilder().url("https://x.test").build()

        with pytest.raises(Exception):
            request.url = "https://other.test"


class TestPrototype:

    def test_clone_is_deep(self):
        original = Monster("orc", 40, ["smash"])
        clone = original.clone()
        clone.abilities.append("roar")

        assert original.abilities == ["smash"]

    def test_clone_with_overrides(self):
        clone = Monster("orc", 40, ["smash"]).clone(health=80)
        assert clone.health == 80

    def test_clone_rejects_unknown_attribute(self):
        with pytest.raises(AttributeError):
            Monster("orc", 40, []).clone(mana=3)

    def test_registry_unknown_name(self):
        registry = PrototypeRegistry()

        with pytest.raises(PrototypeNotFoundError) as exc_info:
            registry.create("missing")
        assert isinstance(exc_info.value, KeyError)
        assert "missing" in str(exc_info.value)
