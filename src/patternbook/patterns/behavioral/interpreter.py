"""Interpreter - represent a grammar as classes and evaluate sentences in it."""
from abc import ABC, abstractmethod
from typing import Dict, List

from patternbook.application.decorators import pattern_example
from patternbook.domain.base.exceptions import DomainException, ValidationError
from patternbook.domain.catalog import PatternCategory

Context = Dict[str, float]


class UnknownVariableError(DomainException):
    def __init__(self, name: str):
        super().__init__(f"Variable '{name}' is not defined")
        self.name = name


class Expression(ABC):
    @abstractmethod
    def interpret(self, context: Context) -> float:
        ...


class Number(Expression):
    """Terminal expression."""

    def __init__(self, value: float):
        self.value = value

    def interpret(self, context: Context) -> float:
        return self.value

    def __str__(self) -> str:
        return f"{self.value:g}"


class Variable(Expression):
    """Terminal expression looked up in the context."""

    def __init__(self, name: str):
        self.name = name

    def interpret(self, context: Context) -> float:
        if self.name not in context:
            raise UnknownVariableError(self.name)
        return context[self.name]

    def __str__(self) -> str:
        return self.name


class BinaryOperation(Expression):
    """Nonterminal expression."""

    symbol = "?"

    def __init__(self, left: Expression, right: Expression):
        self.left = left
        self.right = right

    def interpret(self, context: Context) -> float:
        return self.apply(self.left.interpret(context), self.right.interpret(context))

    @abstractmethod
    def apply(self, left: float, right: float) -> float:
        ...

    def __str__(self) -> str:
        return f"({self.left} {self.symbol} {self.right})"


class Add(BinaryOperation):
    symbol = "+"

    def apply(self, left: float, right: float) -> float:
        return left + right


class Subtract(BinaryOperation):
    symbol = "-"

    def apply(self, left: float, right: float) -> float:
        return left - right


class Multiply(BinaryOperation):
    symbol = "*"

    def apply(self, left: float, right: float) -> float:
        return left * right


class Divide(BinaryOperation):
    symbol = "/"

    def apply(self, left: float, right: float) -> float:
        if right == 0:
            raise ZeroDivisionError(f"division by zero in {self}")
        return left / right


OPERATORS = {op.symbol: op for op in (Add, Subtract, Multiply, Divide)}


def parse_rpn(source: str) -> Expression:
    """
    Parse a reverse-Polish expression such as ``"price qty * 5 -"``.

    Raises:
        ValidationError: If the token stream does not form exactly one expression
    """
    stack: List[Expression] = []
    for token in source.split():
        if token in OPERATORS:
            if len(stack) < 2:
                raise ValidationError(f"Operator '{token}' needs two operands", details=source)
            right = stack.pop()
            left = stack.pop()
            stack.append(OPERATORS[token](left, right))
        elif token.isidentifier():
            stack.append(Variable(token))
        else:
            try:
                stack.append(Number(float(token)))
            except ValueError:
                raise ValidationError(f"Unexpected token '{token}'", details=source) from None

    if len(stack) != 1:
        raise ValidationError(f"Expression '{source}' leaves {len(stack)} values on the stack", details=source)
    return stack[0]


@pattern_example(
    name="Interpreter",
    category=PatternCategory.BEHAVIORAL,
    intent="Given a language, define a representation for its grammar along with an interpreter that uses it to interpret sentences.",
    participants=(Expression, Number, Variable, BinaryOperation, parse_rpn),
    related=("composite", "visitor"),
)
def demo() -> List[str]:
    context = {"price": 12.5, "qty": 4, "discount": 5}
    lines = []
    for source in ("price qty * discount -", "1 2 + 3 *", "price vat *", "1 +"):
        try:
            expression = parse_rpn(source)
            lines.append(f"{source!r} -> {expression} = {expression.interpret(context):g}")
        except (UnknownVariableError, ValidationError) as e:
            lines.append(f"{source!r} -> error: {e}")
    return lines
