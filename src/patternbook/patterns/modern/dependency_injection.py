"""Dependency Injection - supply an object's collaborators from the outside."""
import inspect
from abc import ABC, abstractmethod
from typing import Any, Callable, Dict, List, Optional, Type, TypeVar, get_type_hints

from patternbook.application.decorators import pattern_example
from patternbook.domain.base.exceptions import DomainException
from patternbook.domain.catalog import PatternCategory
from patternbook.infrastructure.logging.logger import get_logger

T = TypeVar("T")
logger = get_logger(__name__)


class DependencyResolutionError(DomainException):
    """Base error for dependencies that cannot be resolved."""
    pass


class UnregisteredDependencyError(DependencyResolutionError):
    def __init__(self, cls: Type, parent: Optional[Type] = None):
        location = f" (required by {parent.__name__})" if parent is not None else ""
        super().__init__(f"No registration for {cls.__name__}{location}")
        self.dependency_type = cls
        self.parent_type = parent


class CircularDependencyError(DependencyResolutionError):
    def __init__(self, chain: List[Type]):
        super().__init__("Circular dependency: " + " -> ".join(c.__name__ for c in chain))
        self.chain = chain


class Container:
    """
    Minimal dependency injection container.

    Supports pre-built instances, lazily created singletons, factories that
    receive the container, and constructor autowiring by type hints.
    """

    def __init__(self):
        self._instances: Dict[Type, Any] = {}
        self._singletons: Dict[Type, Type] = {}
        self._factories: Dict[Type, Callable[["Container"], Any]] = {}
        self._transients: Dict[Type, Type] = {}

    def register_instance(self, cls: Type[T], instance: T) -> None:
        self._instances[cls] = instance
        logger.debug(f"Registered instance for {cls.__name__}")

    def register_singleton(self, cls: Type[T], implementation: Optional[Type] = None) -> None:
        """Register a type built once on first use; ``implementation`` defaults to ``cls``."""
        self._singletons[cls] = implementation or cls
        logger.debug(f"Registered singleton type {cls.__name__}")

    def register_factory(self, cls: Type[T], factory: Callable[["Container"], T]) -> None:
        self._factories[cls] = factory
        logger.debug(f"Registered factory for {cls.__name__}")

    def register_transient(self, cls: Type[T], implementation: Optional[Type] = None) -> None:
        """Register a type built anew on every resolution."""
        self._transients[cls] = implementation or cls

    def is_registered(self, cls: Type) -> bool:
        return cls in self._instances or cls in self._singletons or cls in self._factories or cls in self._transients

    def get(self, cls: Type[T]) -> T:
        """
        Resolve an instance of ``cls``.

        Raises:
            UnregisteredDependencyError: If ``cls`` or one of its dependencies is unknown
            CircularDependencyError: If constructors depend on each other in a cycle
        """
        return self._resolve(cls, [], None)

    def _resolve(self, cls: Type, chain: List[Type], parent: Optional[Type]) -> Any:
        if cls in chain:
            raise CircularDependencyError(chain + [cls])

        if cls in self._instances:
            return self._instances[cls]
        if cls in self._factories:
            return self._factories[cls](self)
        if cls in self._singletons:
            instance = self._build(self._singletons[cls], chain + [cls])
            self._instances[cls] = instance
            return instance
        if cls in self._transients:
            return self._build(self._transients[cls], chain + [cls])

        raise UnregisteredDependencyError(cls, parent)

    def _build(self, implementation: Type, chain: List[Type]) -> Any:
        signature = inspect.signature(implementation.__init__)
        hints = get_type_hints(implementation.__init__)
        kwargs = {}
        for name, param in signature.parameters.items():
            if name == "self" or param.kind in (param.VAR_POSITIONAL, param.VAR_KEYWORD):
                continue
            annotation = hints.get(name)
            if annotation is not None and self.is_registered(annotation):
                kwargs[name] = self._resolve(annotation, chain, implementation)
            elif param.default is not inspect.Parameter.empty:
                continue
            elif annotation is not None:
                raise UnregisteredDependencyError(annotation, implementation)
            else:
                raise DependencyResolutionError(
                    f"Parameter '{name}' of {implementation.__name__} has no type hint"
                )
        return implementation(**kwargs)


class MessageSender(ABC):
    @abstractmethod
    def send(self, to: str, body: str) -> str:
        ...


class SmsSender(MessageSender):
    def send(self, to: str, body: str) -> str:
        return f"sms to {to}: {body}"


class Clock:
    def __init__(self, fixed: str = "2024-01-01T09:00:00"):
        self.fixed = fixed

    def now(self) -> str:
        return self.fixed


class ReminderService:
    """Declares what it needs; never constructs its own collaborators."""

    def __init__(self, sender: MessageSender, clock: Clock):
        self.sender = sender
        self.clock = clock

    def remind(self, to: str, what: str) -> str:
        return self.sender.send(to, f"[{self.clock.now()}] reminder: {what}")


class Ping:
    def __init__(self, pong: "Pong"):
        self.pong = pong


class Pong:
    def __init__(self, ping: Ping):
        self.ping = ping


@pattern_example(
    name="Dependency Injection",
    category=PatternCategory.MODERN,
    intent="Have an object's dependencies supplied by an external assembler instead of constructing them itself.",
    aliases=("Inversion of Control",),
    participants=(Container, ReminderService),
    related=("abstract-factory", "singleton"),
)
def demo() -> List[str]:
    container = Container()
    container.register_singleton(MessageSender, SmsSender)
    container.register_factory(Clock, lambda c: Clock("2024-06-01T08:30:00"))
    container.register_singleton(ReminderService)

    service = container.get(ReminderService)
    lines = [
        service.remind("+1-555-0100", "water the plants"),
        f"singleton reused: {container.get(ReminderService) is service}",
        f"interface bound to {type(service.sender).__name__}",
    ]

    container.register_transient(Ping)
    container.register_transient(Pong)
    try:
        container.get(Ping)
    except CircularDependencyError as e:
        lines.append(f"rejected: {e}")
    try:
        Container().get(ReminderService)
    except UnregisteredDependencyError as e:
        lines.append(f"rejected: {e}")
    return lines
