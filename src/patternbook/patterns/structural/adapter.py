"""Adapter - convert the interface of a class into the one clients expect."""
from abc import ABC, abstractmethod
from typing import List

from patternbook.application.decorators import pattern_example
from patternbook.domain.catalog import PatternCategory


class TemperatureSensor(ABC):
    """Target interface: readings in degrees Celsius."""

    @abstractmethod
    def celsius(self) -> float:
        ...


class DigitalSensor(TemperatureSensor):
    def __init__(self, reading: float):
        self._reading = reading

    def celsius(self) -> float:
        return self._reading


class LegacyThermometer:
    """Adaptee with an incompatible interface (Fahrenheit, different method name)."""

    def __init__(self, fahrenheit: float):
        self._fahrenheit = fahrenheit

    def read_fahrenheit(self) -> float:
        return self._fahrenheit


class ThermometerAdapter(TemperatureSensor):
    """Object adapter wrapping a LegacyThermometer."""

    def __init__(self, thermometer: LegacyThermometer):
        self._thermometer = thermometer

    def celsius(self) -> float:
        return round((self._thermometer.read_fahrenheit() - 32) * 5 / 9, 2)


def average_temperature(sensors: List[TemperatureSensor]) -> float:
    if not sensors:
        raise ValueError("No sensors to average")
    return round(sum(s.celsius() for s in sensors) / len(sensors), 2)


@pattern_example(
    name="Adapter",
    category=PatternCategory.STRUCTURAL,
    intent="Convert the interface of a class into another interface clients expect.",
    aliases=("Wrapper",),
    participants=(TemperatureSensor, LegacyThermometer, ThermometerAdapter),
    related=("bridge", "decorator", "proxy"),
)
def demo() -> List[str]:
    legacy = LegacyThermometer(212.0)
    sensors = [DigitalSensor(20.0), ThermometerAdapter(legacy)]
    return [
        f"legacy reading: {legacy.read_fahrenheit()} F",
        f"adapted reading: {ThermometerAdapter(legacy).celsius()} C",
        f"average over mixed sensors: {average_temperature(sensors)} C",
    ]
