"""Decorator - attach responsibilities to an object dynamically."""
import base64
import zlib
from abc import ABC, abstractmethod
from typing import List

from patternbook.application.decorators import pattern_example
from patternbook.domain.catalog import PatternCategory


class DataSource(ABC):
    """Component interface."""

    @abstractmethod
    def write(self, data: bytes) -> None:
        ...

    @abstractmethod
    def read(self) -> bytes:
        ...


class MemoryDataSource(DataSource):
    """Concrete component storing the raw bytes it is given."""

    def __init__(self):
        self.stored = b""

    def write(self, data: bytes) -> None:
        self.stored = data

    def read(self) -> bytes:
        return self.stored


class DataSourceDecorator(DataSource):
    """Base decorator; forwards to the wrapped source."""

    def __init__(self, wrapped: DataSource):
        self._wrapped = wrapped

    def write(self, data: bytes) -> None:
        self._wrapped.write(data)

    def read(self) -> bytes:
        return self._wrapped.read()


class CompressionDecorator(DataSourceDecorator):
    def write(self, data: bytes) -> None:
        super().write(zlib.compress(data))

    def read(self) -> bytes:
        return zlib.decompress(super().read())


class Base64Decorator(DataSourceDecorator):
    def write(self, data: bytes) -> None:
        super().write(base64.b64encode(data))

    def read(self) -> bytes:
        return base64.b64decode(super().read())


@pattern_example(
    name="Decorator",
    category=PatternCategory.STRUCTURAL,
    intent="Attach additional responsibilities to an object dynamically as a flexible alternative to subclassing.",
    aliases=("Wrapper",),
    participants=(DataSource, DataSourceDecorator, CompressionDecorator, Base64Decorator),
    related=("adapter", "composite", "strategy"),
)
def demo() -> List[str]:
    payload = b"design patterns " * 8
    storage = MemoryDataSource()
    source = CompressionDecorator(Base64Decorator(storage))
    source.write(payload)

    return [
        f"payload: {len(payload)} bytes",
        f"stored after compress+encode: {len(storage.stored)} bytes",
        f"stored is plain text: {storage.stored.isascii()}",
        f"round trip intact: {source.read() == payload}",
    ]
