"""Singleton - ensure a class has only one instance and a global access point to it."""
import threading
from typing import Any, Dict, List, Optional

from patternbook.application.decorators import pattern_example
from patternbook.domain.base.exceptions import DomainException
from patternbook.domain.catalog import PatternCategory


class SingletonAlreadyInitializedError(DomainException):
    """Raised when a once-only singleton is initialized a second time."""
    def __init__(self, class_name: str):
        super().__init__(f"{class_name} has already been initialized")
        self.class_name = class_name


class SingletonMeta(type):
    """
    Thread-safe singleton metaclass.

    Usage:
        class AppSettings(metaclass=SingletonMeta):
            ...
    """

    _instances: Dict[type, Any] = {}
    _lock: threading.RLock = threading.RLock()

    def __call__(cls, *args, **kwargs):
        if cls not in cls._instances:
            with cls._lock:
                # Double-checked locking
                if cls not in cls._instances:
                    cls._instances[cls] = super().__call__(*args, **kwargs)
        return cls._instances[cls]

    @classmethod
    def clear_instances(mcs) -> None:
        """Clear all singleton instances (useful for testing)."""
        with mcs._lock:
            mcs._instances.clear()


class AppSettings(metaclass=SingletonMeta):
    """Process-wide settings; constructor arguments only count the first time."""

    def __init__(self, environment: str = "development"):
        self.environment = environment
        self.values: Dict[str, Any] = {}

    def set(self, key: str, value: Any) -> None:
        self.values[key] = value

    def get(self, key: str, default: Any = None) -> Any:
        return self.values.get(key, default)


class ConnectionManager:
    """Singleton that must be initialized exactly once before use."""

    _instance: Optional["ConnectionManager"] = None
    _lock = threading.Lock()

    def __init__(self, dsn: str):
        self.dsn = dsn

    @classmethod
    def initialize(cls, dsn: str) -> "ConnectionManager":
        with cls._lock:
            if cls._instance is not None:
                raise SingletonAlreadyInitializedError(cls.__name__)
            cls._instance = cls(dsn)
            return cls._instance

    @classmethod
    def instance(cls) -> "ConnectionManager":
        if cls._instance is None:
            raise DomainException(f"{cls.__name__} has not been initialized")
        return cls._instance

    @classmethod
    def reset(cls) -> None:
        with cls._lock:
            cls._instance = None


@pattern_example(
    name="Singleton",
    category=PatternCategory.CREATIONAL,
    intent="Ensure a class has only one instance and provide a global point of access to it.",
    participants=(SingletonMeta, AppSettings, ConnectionManager),
    related=("flyweight", "dependency-injection"),
)
def demo() -> List[str]:
    SingletonMeta.clear_instances()
    ConnectionManager.reset()
    lines = []

    first = AppSettings("production")
    second = AppSettings("testing")
    first.set("feature_flag", True)
    lines.append(f"AppSettings() is AppSettings(): {first is second}")
    lines.append(f"environment kept from first call: {second.environment}")
    lines.append(f"value visible through second reference: {second.get('feature_flag')}")

    ConnectionManager.initialize("postgres://localhost/app")
    lines.append(f"initialized with {ConnectionManager.instance().dsn}")
    try:
        ConnectionManager.initialize("postgres://elsewhere/app")
    except SingletonAlreadyInitializedError as e:
        lines.append(f"second initialize rejected: {e}")

    SingletonMeta.clear_instances()
    ConnectionManager.reset()
    return lines
