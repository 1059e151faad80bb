"""Visitor - add operations to an object structure without changing its classes."""
from abc import ABC, abstractmethod
from typing import Any, List

from patternbook.application.decorators import pattern_example
from patternbook.domain.catalog import PatternCategory


class Node(ABC):
    @abstractmethod
    def accept(self, visitor: "NodeVisitor") -> Any:
        ...


class Literal(Node):
    def __init__(self, value: float):
        self.value = value

    def accept(self, visitor: "NodeVisitor") -> Any:
        return visitor.visit_literal(self)


class Sum(Node):
    def __init__(self, *terms: Node):
        self.terms = terms

    def accept(self, visitor: "NodeVisitor") -> Any:
        return visitor.visit_sum(self)


class Product(Node):
    def __init__(self, *factors: Node):
        self.factors = factors

    def accept(self, visitor: "NodeVisitor") -> Any:
        return visitor.visit_product(self)


class NodeVisitor(ABC):
    """One method per concrete node class (double dispatch through ``accept``)."""

    @abstractmethod
    def visit_literal(self, node: Literal) -> Any:
        ...

    @abstractmethod
    def visit_sum(self, node: Sum) -> Any:
        ...

    @abstractmethod
    def visit_product(self, node: Product) -> Any:
        ...


class Evaluator(NodeVisitor):
    def visit_literal(self, node: Literal) -> float:
        return node.value

    def visit_sum(self, node: Sum) -> float:
        return sum(term.accept(self) for term in node.terms)

    def visit_product(self, node: Product) -> float:
        result = 1.0
        for factor in node.factors:
            result *= factor.accept(self)
        return result


class Printer(NodeVisitor):
    def visit_literal(self, node: Literal) -> str:
        return f"{node.value:g}"

    def visit_sum(self, node: Sum) -> str:
        return "(" + " + ".join(t.accept(self) for t in node.terms) + ")"

    def visit_product(self, node: Product) -> str:
        return " * ".join(f.accept(self) for f in node.factors)


class DepthCounter(NodeVisitor):
    def visit_literal(self, node: Literal) -> int:
        return 1

    def visit_sum(self, node: Sum) -> int:
        return 1 + max((t.accept(self) for t in node.terms), default=0)

    def visit_product(self, node: Product) -> int:
        return 1 + max((f.accept(self) for f in node.factors), default=0)


@pattern_example(
    name="Visitor",
    category=PatternCategory.BEHAVIORAL,
    intent="Represent an operation to be performed on the elements of an object structure without changing their classes.",
    participants=(Node, Literal, NodeVisitor, Evaluator, Printer),
    related=("composite", "interpreter"),
)
def demo() -> List[str]:
    expression = Product(Sum(Literal(2), Literal(3)), Literal(4), Sum(Literal(1), Product(Literal(5), Literal(2))))
    return [
        f"printed: {expression.accept(Printer())}",
        f"evaluated: {expression.accept(Evaluator()):g}",
        f"depth: {expression.accept(DepthCounter())}",
    ]
