"""Specification - recombinable business rules expressed as objects."""
from abc import ABC, abstractmethod
from typing import Callable, Generic, Iterable, List, TypeVar

from pydantic import BaseModel

from patternbook.application.decorators import pattern_example
from patternbook.domain.catalog import PatternCategory

T = TypeVar("T")


class Specification(ABC, Generic[T]):
    """A predicate over candidates that composes with ``&``, ``|`` and ``~``."""

    @abstractmethod
    def is_satisfied_by(self, candidate: T) -> bool:
        ...

    def __and__(self, other: "Specification[T]") -> "Specification[T]":
        return AndSpecification(self, other)

    def __or__(self, other: "Specification[T]") -> "Specification[T]":
        return OrSpecification(self, other)

    def __invert__(self) -> "Specification[T]":
        return NotSpecification(self)

    def filter(self, candidates: Iterable[T]) -> List[T]:
        return [c for c in candidates if self.is_satisfied_by(c)]


class AndSpecification(Specification[T]):
    def __init__(self, *specs: Specification[T]):
        self.specs = specs

    def is_satisfied_by(self, candidate: T) -> bool:
        return all(spec.is_satisfied_by(candidate) for spec in self.specs)


class OrSpecification(Specification[T]):
    def __init__(self, *specs: Specification[T]):
        self.specs = specs

    def is_satisfied_by(self, candidate: T) -> bool:
        return any(spec.is_satisfied_by(candidate) for spec in self.specs)


class NotSpecification(Specification[T]):
    def __init__(self, spec: Specification[T]):
        self.spec = spec

    def is_satisfied_by(self, candidate: T) -> bool:
        return not self.spec.is_satisfied_by(candidate)


class PredicateSpecification(Specification[T]):
    """Adapts any callable returning bool."""

    def __init__(self, predicate: Callable[[T], bool], description: str = ""):
        self.predicate = predicate
        self.description = description

    def is_satisfied_by(self, candidate: T) -> bool:
        return bool(self.predicate(candidate))

    def __str__(self) -> str:
        return self.description or getattr(self.predicate, "__name__", repr(self.predicate))


class Product(BaseModel):
    name: str
    category: str
    price: float
    stock: int = 0


class InStock(Specification[Product]):
    def is_satisfied_by(self, candidate: Product) -> bool:
        return candidate.stock > 0


class PriceAtMost(Specification[Product]):
    def __init__(self, limit: float):
        self.limit = limit

    def is_satisfied_by(self, candidate: Product) -> bool:
        return candidate.price <= self.limit


class InCategory(Specification[Product]):
    def __init__(self, category: str):
        self.category = category.lower()

    def is_satisfied_by(self, candidate: Product) -> bool:
        return candidate.category.lower() == self.category


@pattern_example(
    name="Specification",
    category=PatternCategory.MODERN,
    intent="Encapsulate a business rule as an object that can be combined with other rules using boolean logic.",
    participants=(Specification, AndSpecification, NotSpecification, InStock, PriceAtMost),
    related=("composite", "interpreter", "strategy"),
)
def demo() -> List[str]:
    catalog = [
        Product(name="keyboard", category="hardware", price=49.0, stock=12),
        Product(name="monitor", category="hardware", price=229.0, stock=0),
        Product(name="ide license", category="software", price=89.0, stock=999),
        Product(name="mouse", category="hardware", price=19.0, stock=3),
    ]
    affordable_hardware = InCategory("hardware") & PriceAtMost(100) & InStock()
    out_of_stock_or_pricey = ~InStock() | ~PriceAtMost(100)
    long_names = PredicateSpecification(lambda p: len(p.name) > 6, "name longer than 6")

    return [
        f"affordable hardware in stock: {[p.name for p in affordable_hardware.filter(catalog)]}",
        f"out of stock or over 100: {[p.name for p in out_of_stock_or_pricey.filter(catalog)]}",
        f"{long_names}: {[p.name for p in long_names.filter(catalog)]}",
    ]
