"""Factory Method - let subclasses decide which class to instantiate."""
from abc import ABC, abstractmethod
from typing import List

from patternbook.application.decorators import pattern_example
from patternbook.domain.catalog import PatternCategory


class Document(ABC):
    """Product interface."""

    def __init__(self, title: str):
        self.title = title

    @abstractmethod
    def render(self) -> str:
        ...


class PdfDocument(Document):
    def render(self) -> str:
        return f"%PDF-1.7 [{self.title}]"


class HtmlDocument(Document):
    def render(self) -> str:
        return f"<html><title>{self.title}</title></html>"


class MarkdownDocument(Document):
    def render(self) -> str:
        return f"# {self.title}"


class DocumentCreator(ABC):
    """Creator; ``render`` works with any product the factory method returns."""

    @abstractmethod
    def create_document(self, title: str) -> Document:
        """The factory method."""

    def render(self, title: str) -> str:
        document = self.create_document(title)
        return document.render()


class PdfCreator(DocumentCreator):
    def create_document(self, title: str) -> Document:
        return PdfDocument(title)


class HtmlCreator(DocumentCreator):
    def create_document(self, title: str) -> Document:
        return HtmlDocument(title)


class MarkdownCreator(DocumentCreator):
    def create_document(self, title: str) -> Document:
        return MarkdownDocument(title)


@pattern_example(
    name="Factory Method",
    category=PatternCategory.CREATIONAL,
    intent="Define an interface for creating an object, but let subclasses decide which class to instantiate.",
    aliases=("Virtual Constructor",),
    participants=(Document, DocumentCreator, PdfCreator, HtmlCreator),
    related=("abstract-factory", "template-method"),
)
def demo() -> List[str]:
    creators = [PdfCreator(), HtmlCreator(), MarkdownCreator()]
    return [f"{type(c).__name__}: {c.render('Quarterly Report')}" for c in creators]
