"""Abstract Factory - create families of related objects without naming their classes."""
from abc import ABC, abstractmethod
from typing import List

from patternbook.application.decorators import pattern_example
from patternbook.domain.catalog import PatternCategory


class Button(ABC):
    @abstractmethod
    def paint(self, label: str) -> str:
        ...


class Checkbox(ABC):
    @abstractmethod
    def paint(self, label: str, checked: bool) -> str:
        ...


class LightButton(Button):
    def paint(self, label: str) -> str:
        return f"[ {label} ]"


class LightCheckbox(Checkbox):
    def paint(self, label: str, checked: bool) -> str:
        return f"[{'x' if checked else ' '}] {label}"


class DarkButton(Button):
    def paint(self, label: str) -> str:
        return f"<< {label} >>"


class DarkCheckbox(Checkbox):
    def paint(self, label: str, checked: bool) -> str:
        return f"({'*' if checked else ' '}) {label}"


class WidgetFactory(ABC):
    """Creates one consistent family of widgets."""

    theme: str = ""

    @abstractmethod
    def create_button(self) -> Button:
        ...

    @abstractmethod
    def create_checkbox(self) -> Checkbox:
        ...


class LightThemeFactory(WidgetFactory):
    theme = "light"

    def create_button(self) -> Button:
        return LightButton()

    def create_checkbox(self) -> Checkbox:
        return LightCheckbox()


class DarkThemeFactory(WidgetFactory):
    theme = "dark"

    def create_button(self) -> Button:
        return DarkButton()

    def create_checkbox(self) -> Checkbox:
        return DarkCheckbox()


def render_login_form(factory: WidgetFactory) -> List[str]:
    """Client code; only ever talks to the abstract interfaces."""
    remember = factory.create_checkbox()
    submit = factory.create_button()
    return [remember.paint("Remember me", checked=True), submit.paint("Sign in")]


@pattern_example(
    name="Abstract Factory",
    category=PatternCategory.CREATIONAL,
    intent="Provide an interface for creating families of related objects without specifying their concrete classes.",
    aliases=("Kit",),
    participants=(WidgetFactory, LightThemeFactory, DarkThemeFactory, render_login_form),
    related=("factory-method", "prototype"),
)
def demo() -> List[str]:
    lines = []
    for factory in (LightThemeFactory(), DarkThemeFactory()):
        for widget in render_login_form(factory):
            lines.append(f"{factory.theme}: {widget}")
    return lines
