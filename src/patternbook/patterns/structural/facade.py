"""Facade - a unified, higher-level interface to a set of subsystem interfaces."""
from typing import Dict, List, Optional

from patternbook.application.decorators import pattern_example
from patternbook.domain.base.exceptions import DomainException
from patternbook.domain.catalog import PatternCategory


class OutOfStockError(DomainException):
    pass


class PaymentDeclinedError(DomainException):
    pass


class Inventory:
    def __init__(self, stock: Dict[str, int]):
        self.stock = dict(stock)

    def reserve(self, sku: str, quantity: int) -> None:
        if self.stock.get(sku, 0) < quantity:
            raise OutOfStockError(f"Only {self.stock.get(sku, 0)} of {sku} left")
        self.stock[sku] -= quantity

    def release(self, sku: str, quantity: int) -> None:
        self.stock[sku] = self.stock.get(sku, 0) + quantity


class PaymentGateway:
    def __init__(self, limit: float):
        self.limit = limit
        self.charges: List[float] = []

    def charge(self, amount: float) -> str:
        if amount > self.limit:
            raise PaymentDeclinedError(f"Charge of {amount:.2f} exceeds limit {self.limit:.2f}")
        self.charges.append(amount)
        return f"txn-{len(self.charges):04d}"


class ShippingService:
    def __init__(self):
        self.shipments: List[str] = []

    def schedule(self, sku: str, quantity: int, address: str) -> str:
        tracking = f"trk-{len(self.shipments) + 1:04d}"
        self.shipments.append(f"{tracking}: {quantity} x {sku} -> {address}")
        return tracking


class OrderFacade:
    """Single entry point hiding the coordination between subsystems."""

    def __init__(self, inventory: Inventory, payments: PaymentGateway, shipping: ShippingService,
                 prices: Dict[str, float]):
        self.inventory = inventory
        self.payments = payments
        self.shipping = shipping
        self.prices = prices

    def place_order(self, sku: str, quantity: int, address: str) -> Optional[str]:
        """Returns the tracking number; stock is released again if any later step fails."""
        self.inventory.reserve(sku, quantity)
        try:
            self.payments.charge(self.prices[sku] * quantity)
            return self.shipping.schedule(sku, quantity, address)
        except Exception:
            self.inventory.release(sku, quantity)
            raise


@pattern_example(
    name="Facade",
    category=PatternCategory.STRUCTURAL,
    intent="Provide a unified interface to a set of interfaces in a subsystem.",
    participants=(OrderFacade,),
    related=("mediator", "singleton"),
)
def demo() -> List[str]:
    inventory = Inventory({"book": 5, "laptop": 2})
    facade = OrderFacade(inventory, PaymentGateway(limit=1000.0), ShippingService(),
                         prices={"book": 25.0, "laptop": 1500.0})
    lines = [f"book order shipped: {facade.place_order('book', 2, '1 Main St')}"]
    try:
        facade.place_order("laptop", 1, "1 Main St")
    except PaymentDeclinedError as e:
        lines.append(f"laptop order failed: {e}")
    lines.append(f"stock after rollback: {inventory.stock}")
    return lines
