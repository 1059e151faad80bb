"""Null Object - a do-nothing stand-in that removes the need for None checks."""
from abc import ABC, abstractmethod
from typing import Dict, List, Optional

from patternbook.application.decorators import pattern_example
from patternbook.domain.catalog import PatternCategory


class Notifier(ABC):
    @abstractmethod
    def notify(self, recipient: str, message: str) -> None:
        ...


class RecordingNotifier(Notifier):
    def __init__(self):
        self.sent: List[str] = []

    def notify(self, recipient: str, message: str) -> None:
        self.sent.append(f"to {recipient}: {message}")


class NullNotifier(Notifier):
    """Accepts every call and does nothing."""

    def notify(self, recipient: str, message: str) -> None:
        pass


class Customer:
    is_null = False

    def __init__(self, customer_id: str, name: str, discount: float = 0.0):
        self.customer_id = customer_id
        self.name = name
        self.discount = discount

    def greeting(self) -> str:
        return f"Welcome back, {self.name}!"


class NullCustomer(Customer):
    """Returned instead of None for unknown customers."""

    is_null = True

    def __init__(self):
        super().__init__(customer_id="", name="guest", discount=0.0)

    def greeting(self) -> str:
        return "Welcome, guest!"


class CustomerRepository:
    def __init__(self, customers: Dict[str, Customer]):
        self._customers = customers

    def find(self, customer_id: str) -> Customer:
        return self._customers.get(customer_id, NullCustomer())


class CheckoutService:
    def __init__(self, customers: CustomerRepository, notifier: Optional[Notifier] = None):
        self.customers = customers
        self.notifier = notifier or NullNotifier()

    def checkout(self, customer_id: str, amount: float) -> float:
        customer = self.customers.find(customer_id)
        total = round(amount * (1 - customer.discount), 2)
        self.notifier.notify(customer.name, f"charged {total:.2f}")
        return total


@pattern_example(
    name="Null Object",
    category=PatternCategory.MODERN,
    intent="Provide an object with neutral, do-nothing behavior in place of a missing collaborator or None.",
    aliases=("Active Nothing",),
    participants=(Notifier, NullNotifier, NullCustomer, CustomerRepository),
    related=("strategy", "singleton"),
)
def demo() -> List[str]:
    repository = CustomerRepository({"c-1": Customer("c-1", "Ada", discount=0.1)})
    recording = RecordingNotifier()

    with_notifications = CheckoutService(repository, recording)
    silent = CheckoutService(repository)

    lines = [
        repository.find("c-1").greeting(),
        repository.find("c-404").greeting(),
        f"unknown customer is_null: {repository.find('c-404').is_null}",
        f"member total: {with_notifications.checkout('c-1', 100.0)}",
        f"guest total: {with_notifications.checkout('c-404', 100.0)}",
        f"silent service total: {silent.checkout('c-1', 50.0)}",
        f"notifications sent: {recording.sent}",
    ]
    return lines
