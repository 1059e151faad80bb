"""Chain of Responsibility - pass a request along a chain of handlers until one handles it."""
from abc import ABC, abstractmethod
from dataclasses import dataclass
from typing import List, Optional

from patternbook.application.decorators import pattern_example
from patternbook.domain.base.exceptions import DomainException
from patternbook.domain.catalog import PatternCategory


class UnhandledRequestError(DomainException):
    """Raised when a request reaches the end of the chain."""
    def __init__(self, request: "SupportTicket"):
        super().__init__(f"No handler accepted ticket '{request.subject}' (severity {request.severity})")
        self.request = request


@dataclass
class SupportTicket:
    subject: str
    severity: int


class SupportHandler(ABC):
    """Link in the chain."""

    def __init__(self):
        self._next: Optional["SupportHandler"] = None

    def set_next(self, handler: "SupportHandler") -> "SupportHandler":
        """Link the next handler and return it, so chains read left to right."""
        self._next = handler
        return handler

    def handle(self, ticket: SupportTicket) -> str:
        if self.can_handle(ticket):
            return self.resolve(ticket)
        if self._next is None:
            raise UnhandledRequestError(ticket)
        return self._next.handle(ticket)

    @abstractmethod
    def can_handle(self, ticket: SupportTicket) -> bool:
        ...

    def resolve(self, ticket: SupportTicket) -> str:
        return f"{type(self).__name__} resolved '{ticket.subject}'"


class HelpDesk(SupportHandler):
    def can_handle(self, ticket: SupportTicket) -> bool:
        return ticket.severity <= 1


class Engineer(SupportHandler):
    def can_handle(self, ticket: SupportTicket) -> bool:
        return ticket.severity <= 3


class IncidentManager(SupportHandler):
    def can_handle(self, ticket: SupportTicket) -> bool:
        return ticket.severity <= 5


def build_support_chain() -> SupportHandler:
    head = HelpDesk()
    head.set_next(Engineer()).set_next(IncidentManager())
    return head


@pattern_example(
    name="Chain of Responsibility",
    category=PatternCategory.BEHAVIORAL,
    intent="Avoid coupling the sender of a request to its receiver by giving more than one object a chance to handle it.",
    participants=(SupportHandler, HelpDesk, Engineer, IncidentManager, build_support_chain),
    related=("composite", "command"),
)
def demo() -> List[str]:
    chain = build_support_chain()
    tickets = [
        SupportTicket("password reset", 1),
        SupportTicket("API returns 500", 3),
        SupportTicket("datacenter outage", 5),
        SupportTicket("meteor strike", 9),
    ]
    lines = []
    for ticket in tickets:
        try:
            lines.append(chain.handle(ticket))
        except UnhandledRequestError as e:
            lines.append(f"unhandled: {e}")
    return lines
