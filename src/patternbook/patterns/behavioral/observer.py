"""Observer - notify dependents automatically when an object changes state."""
from abc import ABC, abstractmethod
from typing import Callable, List, Union

from patternbook.application.decorators import pattern_example
from patternbook.domain.catalog import PatternCategory
from patternbook.infrastructure.logging.logger import get_logger

logger = get_logger(__name__)


class Observer(ABC):
    @abstractmethod
    def update(self, subject: "Subject") -> None:
        ...


Listener = Union[Observer, Callable[["Subject"], None]]


class Subject:
    """Keeps its observers and notifies every one of them on change."""

    def __init__(self):
        self._observers: List[Listener] = []

    def attach(self, observer: Listener) -> None:
        if observer not in self._observers:
            self._observers.append(observer)

    def detach(self, observer: Listener) -> None:
        if observer in self._observers:
            self._observers.remove(observer)

    def notify(self) -> int:
        """Notify all observers; returns how many were notified successfully."""
        delivered = 0
        for observer in list(self._observers):
            try:
                if isinstance(observer, Observer):
                    observer.update(self)
                else:
                    observer(self)
                delivered += 1
            except Exception as e:
                logger.error(f"Observer {observer!r} failed: {e}")
                # Continue with other observers
        return delivered


class WeatherStation(Subject):
    def __init__(self):
        super().__init__()
        self.temperature = 0.0

    def record(self, temperature: float) -> None:
        self.temperature = temperature
        self.notify()


class TemperatureDisplay(Observer):
    def __init__(self):
        self.readings: List[float] = []

    def update(self, subject: "Subject") -> None:
        self.readings.append(subject.temperature)


class HeatAlert(Observer):
    def __init__(self, threshold: float):
        self.threshold = threshold
        self.alerts: List[str] = []

    def update(self, subject: "Subject") -> None:
        if subject.temperature >= self.threshold:
            self.alerts.append(f"heat alert at {subject.temperature}")


@pattern_example(
    name="Observer",
    category=PatternCategory.BEHAVIORAL,
    intent="Define a one-to-many dependency so that when one object changes state, all its dependents are notified.",
    aliases=("Publish-Subscribe", "Dependents"),
    participants=(Subject, Observer, WeatherStation, TemperatureDisplay),
    related=("mediator", "singleton"),
)
def demo() -> List[str]:
    station = WeatherStation()
    display = TemperatureDisplay()
    alert = HeatAlert(threshold=30)
    log: List[str] = []

    station.attach(display)
    station.attach(alert)
    station.attach(lambda s: log.append(f"logged {s.temperature}"))

    for reading in (21.5, 31.0):
        station.record(reading)
    station.detach(alert)
    station.record(35.0)

    return [
        f"display readings: {display.readings}",
        f"alerts (detached before 35.0): {alert.alerts}",
        f"callback log: {log}",
    ]
