"""Tests for the structural pattern examples."""
import threading
from unittest.mock import patch

import pytest

from patternbook.patterns.structural.adapter import (
    DigitalSensor,
    LegacyThermometer,
    ThermometerAdapter,
    average_temperature,
)
from patternbook.patterns.structural.bridge import Circle, RasterRenderer, Square, VectorRenderer
from patternbook.patterns.structural.composite import Directory, File
from patternbook.patterns.structural.decorator import (
    Base64Decorator,
    CompressionDecorator,
    MemoryDataSource,
)
from patternbook.patterns.structural.facade import (
    Inventory,
    OrderFacade,
    OutOfStockError,
    PaymentDeclinedError,
    PaymentGateway,
    ShippingService,
)
from patternbook.patterns.structural.flyweight import GlyphStyleFactory, TextLayout
from patternbook.patterns.structural.proxy import (
    AccessDeniedError,
    HighResolutionImage,
    LazyImageProxy,
    ProtectedImageProxy,
)


class TestAdapter:

    def test_converts_fahrenheit(self):
        assert ThermometerAdapter(LegacyThermometer(32.0)).celsius() == 0.0
        assert ThermometerAdapter(LegacyThermometer(212.0)).celsius() == 100.0

    def test_adapter_usable_where_target_expected(self):
        sensors = [DigitalSensor(10.0), ThermometerAdapter(LegacyThermometer(86.0))]
        assert average_temperature(sensors) == 20.0

    def test_average_of_nothing(self):
        with pytest.raises(ValueError):
            average_temperature([])


class TestBridge:

    def test_abstraction_and_implementation_vary_independently(self):
        assert Circle(VectorRenderer(), 2).draw() == '<circle r="2"/>'
        assert Circle(RasterRenderer(), 2).draw() == "pixels for circle of radius 2"
        assert Square(VectorRenderer(), 3).draw() == '<rect width="3" height="3"/>'

    def test_resize_is_independent_of_renderer(self):
        circle = Circle(RasterRenderer(), 2)
        circle.resize(1.5)
        assert circle.radius == 3.0


class TestComposite:

    def test_sizes_aggregate(self):
        src = Directory("src").add(File("a.py", 10)).add(File("b.py", 5))
        root = Directory("root").add(src).add(File("README", 1))

        assert root.size() == 16
        assert Directory("empty").size() == 0

    def test_walk_reports_depth(self):
        root = Directory("root").add(Directory("sub").add(File("f", 1)))
        walked = [(depth, node.name) for depth, node in root.walk()]

        assert walked == [(0, "root"), (1, "sub"), (2, "f")]

    def test_directory_cannot_contain_itself(self):
        directory = Directory("loop")
        with pytest.raises(ValueError):
            directory.add(directory)

    def test_initial_children_are_copied(self):
        children = [File("a", 1)]
        directory = Directory("d", children)
        children.append(File("b", 2))

        assert directory.size() == 1
        assert Directory("none", None).children == []


class TestDecorator:

    def test_stacked_decorators_round_trip(self):
        storage = MemoryDataSource()
        source = CompressionDecorator(Base64Decorator(storage))
        source.write(b"hello hello hello hello")

        assert storage.stored != b"hello hello hello hello"
        assert storage.stored.isascii()
        assert source.read() == b"hello hello hello hello"

    def test_undecorated_source_stores_raw(self):
        storage = MemoryDataSource()
        storage.write(b"raw")
        assert storage.read() == b"raw"


class TestFacade:

    @pytest.fixture
    def facade(self):
        return OrderFacade(
            Inventory({"book": 3}),
            PaymentGateway(limit=100.0),
            ShippingService(),
            prices={"book": 40.0},
        )

    def test_successful_order(self, facade):
        tracking = facade.place_order("book", 2, "addr")

        assert tracking == "trk-0001"
        assert facade.inventory.stock["book"] == 1

    def test_declined_payment_releases_stock(self, facade):
        with pytest.raises(PaymentDeclinedError):
            facade.place_order("book", 3, "addr")
        assert facade.inventory.stock["book"] == 3
        assert facade.shipping.shipments == []

    def test_out_of_stock(self, facade):
        with pytest.raises(OutOfStockError):
            facade.place_order("book", 4, "addr")

    def test_unpriced_item_releases_stock(self):
        facade = OrderFacade(
            Inventory({"book": 5, "pen": 10}),
            PaymentGateway(limit=100.0),
            ShippingService(),
            prices={"book": 40.0},
        )

        with pytest.raises(KeyError):
            facade.place_order("pen", 3, "addr")
        assert facade.inventory.stock == {"book": 5, "pen": 10}

    def test_shipping_failure_releases_stock(self, facade):
        with patch.object(facade.shipping, "schedule", side_effect=RuntimeError("carrier down")):
            with pytest.raises(RuntimeError):
                facade.place_order("book", 2, "addr")
        assert facade.inventory.stock["book"] == 3


class TestFlyweight:

    def test_identical_styles_are_shared(self):
        factory = GlyphStyleFactory()

        assert factory.get_style("Arial", 10, "red") is factory.get_style("Arial", 10, "red")
        assert factory.get_style("Arial", 11, "red") is not factory.get_style("Arial", 10, "red")
        assert factory.count() == 2

    def test_many_glyphs_few_styles(self):
        factory = GlyphStyleFactory()
        layout = TextLayout(factory)
        layout.write("abcdef", y=0)
        layout.write("ghijkl", y=1)

        assert len(layout.glyphs) == 12
        assert factory.count() == 1

    def test_count_while_styles_are_added_concurrently(self):
        factory = GlyphStyleFactory()
        counts = []

        def worker(size):
            for color in ("red", "green", "blue"):
                factory.get_style("Arial", size, color)
                counts.append(factory.count())

        threads = [threading.Thread(target=worker, args=(size,)) for size in range(8)]
        for t in threads:
            t.start()
        for t in threads:
            t.join()

        assert factory.count() == 24
        assert max(counts) == 24
        assert all(1 <= c <= 24 for c in counts)


class TestProxy:

    def test_lazy_proxy_loads_once(self):
        HighResolutionImage.loads = 0
        proxy = LazyImageProxy("a.png")
        assert HighResolutionImage.loads == 0

        proxy.display()
        proxy.display()
        assert HighResolutionImage.loads == 1
        assert proxy.loaded

    def test_protection_proxy_denies(self):
        proxy = LazyImageProxy("b.png")
        guarded = ProtectedImageProxy(proxy, roles={"guest"})

        with pytest.raises(AccessDeniedError):
            guarded.display()
        assert not proxy.loaded

    def test_protection_proxy_allows(self):
        guarded = ProtectedImageProxy(LazyImageProxy("c.png"), roles={"viewer"})
        assert guarded.display() == "showing <c.png decoded>"
