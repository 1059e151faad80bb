"""Strategy - define a family of interchangeable algorithms."""
from abc import ABC, abstractmethod
from dataclasses import dataclass
from typing import Callable, List, Union

from patternbook.application.decorators import pattern_example
from patternbook.domain.base.exceptions import ValidationError
from patternbook.domain.catalog import PatternCategory


@dataclass(frozen=True)
class LineItem:
    sku: str
    unit_price: float
    quantity: int

    @property
    def subtotal(self) -> float:
        return self.unit_price * self.quantity


class PricingStrategy(ABC):
    @abstractmethod
    def total(self, items: List[LineItem]) -> float:
        ...


class RegularPricing(PricingStrategy):
    def total(self, items: List[LineItem]) -> float:
        return sum(item.subtotal for item in items)


class PercentageDiscount(PricingStrategy):
    def __init__(self, percent: float):
        if not 0 <= percent <= 100:
            raise ValidationError(f"Discount must be between 0 and 100, got {percent}")
        self.percent = percent

    def total(self, items: List[LineItem]) -> float:
        return sum(item.subtotal for item in items) * (1 - self.percent / 100)


class BulkDiscount(PricingStrategy):
    """Every line with at least ``min_quantity`` units gets ``unit_discount`` off each unit."""

    def __init__(self, min_quantity: int, unit_discount: float):
        self.min_quantity = min_quantity
        self.unit_discount = unit_discount

    def total(self, items: List[LineItem]) -> float:
        total = 0.0
        for item in items:
            price = item.unit_price
            if item.quantity >= self.min_quantity:
                price = max(price - self.unit_discount, 0.0)
            total += price * item.quantity
        return total


PricingFunction = Callable[[List[LineItem]], float]


class Checkout:
    """Context; accepts a strategy object or a plain function."""

    def __init__(self, strategy: Union[PricingStrategy, PricingFunction]):
        self.strategy = strategy

    def total(self, items: List[LineItem]) -> float:
        if isinstance(self.strategy, PricingStrategy):
            amount = self.strategy.total(items)
        else:
            amount = self.strategy(items)
        return round(amount, 2)


def free_cheapest_item(items: List[LineItem]) -> float:
    """A strategy needs no class when it has no state."""
    regular = sum(item.subtotal for item in items)
    if not items:
        return regular
    return regular - min(item.unit_price for item in items)


@pattern_example(
    name="Strategy",
    category=PatternCategory.BEHAVIORAL,
    intent="Define a family of algorithms, encapsulate each one, and make them interchangeable.",
    aliases=("Policy",),
    participants=(PricingStrategy, PercentageDiscount, Checkout, free_cheapest_item),
    related=("state", "template-method", "flyweight"),
)
def demo() -> List[str]:
    cart = [LineItem("pen", 1.50, 12), LineItem("notebook", 4.00, 3), LineItem("bag", 30.00, 1)]
    strategies = [
        ("regular", RegularPricing()),
        ("10% off", PercentageDiscount(10)),
        ("bulk", BulkDiscount(min_quantity=10, unit_discount=0.5)),
        ("cheapest free", free_cheapest_item),
    ]
    return [f"{label}: {Checkout(strategy).total(cart):.2f}" for label, strategy in strategies]
