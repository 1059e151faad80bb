"""State - let an object alter its behavior when its internal state changes."""
from abc import ABC
from typing import List

from patternbook.application.decorators import pattern_example
from patternbook.domain.base.exceptions import InvalidStateTransitionError
from patternbook.domain.catalog import PatternCategory


class OrderState(ABC):
    """Each transition is rejected unless a concrete state overrides it."""

    name = "unknown"

    def pay(self, order: "Order") -> None:
        raise InvalidStateTransitionError(self.name, "paid")

    def ship(self, order: "Order") -> None:
        raise InvalidStateTransitionError(self.name, "shipped")

    def deliver(self, order: "Order") -> None:
        raise InvalidStateTransitionError(self.name, "delivered")

    def cancel(self, order: "Order") -> None:
        raise InvalidStateTransitionError(self.name, "cancelled")


class Pending(OrderState):
    name = "pending"

    def pay(self, order: "Order") -> None:
        order.transition_to(Paid())

    def cancel(self, order: "Order") -> None:
        order.transition_to(Cancelled())


class Paid(OrderState):
    name = "paid"

    def ship(self, order: "Order") -> None:
        order.transition_to(Shipped())

    def cancel(self, order: "Order") -> None:
        order.refunded = True
        order.transition_to(Cancelled())


class Shipped(OrderState):
    name = "shipped"

    def deliver(self, order: "Order") -> None:
        order.transition_to(Delivered())


class Delivered(OrderState):
    name = "delivered"


class Cancelled(OrderState):
    name = "cancelled"


class Order:
    """Context; delegates every action to its current state."""

    def __init__(self, order_id: str):
        self.order_id = order_id
        self.state: OrderState = Pending()
        self.refunded = False
        self.history: List[str] = [self.state.name]

    def transition_to(self, state: OrderState) -> None:
        self.state = state
        self.history.append(state.name)

    def pay(self) -> None:
        self.state.pay(self)

    def ship(self) -> None:
        self.state.ship(self)

    def deliver(self) -> None:
        self.state.deliver(self)

    def cancel(self) -> None:
        self.state.cancel(self)


@pattern_example(
    name="State",
    category=PatternCategory.BEHAVIORAL,
    intent="Allow an object to alter its behavior when its internal state changes.",
    aliases=("Objects for States",),
    participants=(OrderState, Pending, Paid, Order),
    related=("strategy", "flyweight"),
)
def demo() -> List[str]:
    happy = Order("A-1")
    happy.pay()
    happy.ship()
    happy.deliver()

    refunded = Order("A-2")
    refunded.pay()
    refunded.cancel()

    lines = [
        f"{happy.order_id}: {' -> '.join(happy.history)}",
        f"{refunded.order_id}: {' -> '.join(refunded.history)} (refunded={refunded.refunded})",
    ]
    try:
        happy.cancel()
    except InvalidStateTransitionError as e:
        lines.append(f"{happy.order_id}: {e}")
    return lines
