"""Command - encapsulate a request as an object, allowing undo and redo."""
from abc import ABC, abstractmethod
from typing import List

from patternbook.application.decorators import pattern_example
from patternbook.domain.base.exceptions import DomainException
from patternbook.domain.catalog import PatternCategory


class NothingToUndoError(DomainException):
    pass


class NothingToRedoError(DomainException):
    pass


class TextBuffer:
    """Receiver."""

    def __init__(self, text: str = ""):
        self.text = text

    def insert(self, position: int, value: str) -> None:
        self.text = self.text[:position] + value + self.text[position:]

    def delete(self, position: int, length: int) -> str:
        removed = self.text[position:position + length]
        self.text = self.text[:position] + self.text[position + length:]
        return removed


class Command(ABC):
    @abstractmethod
    def execute(self) -> None:
        ...

    @abstractmethod
    def undo(self) -> None:
        ...


class InsertCommand(Command):
    def __init__(self, buffer: TextBuffer, position: int, value: str):
        self.buffer = buffer
        self.position = position
        self.value = value

    def execute(self) -> None:
        self.buffer.insert(self.position, self.value)

    def undo(self) -> None:
        self.buffer.delete(self.position, len(self.value))


class DeleteCommand(Command):
    def __init__(self, buffer: TextBuffer, position: int, length: int):
        self.buffer = buffer
        self.position = position
        self.length = length
        self._removed = ""

    def execute(self) -> None:
        self._removed = self.buffer.delete(self.position, self.length)

    def undo(self) -> None:
        self.buffer.insert(self.position, self._removed)


class CommandHistory:
    """Invoker; executing a new command discards the redo stack."""

    def __init__(self):
        self._done: List[Command] = []
        self._undone: List[Command] = []

    def run(self, command: Command) -> None:
        command.execute()
        self._done.append(command)
        self._undone.clear()

    def undo(self) -> None:
        if not self._done:
            raise NothingToUndoError("Nothing to undo")
        command = self._done.pop()
        command.undo()
        self._undone.append(command)

    def redo(self) -> None:
        if not self._undone:
            raise NothingToRedoError("Nothing to redo")
        command = self._undone.pop()
        command.execute()
        self._done.append(command)

    @property
    def can_undo(self) -> bool:
        return bool(self._done)

    @property
    def can_redo(self) -> bool:
        return bool(self._undone)


@pattern_example(
    name="Command",
    category=PatternCategory.BEHAVIORAL,
    intent="Encapsulate a request as an object, letting you parameterize clients, queue requests and support undoable operations.",
    aliases=("Action", "Transaction"),
    participants=(Command, InsertCommand, DeleteCommand, CommandHistory),
    related=("memento", "chain-of-responsibility"),
)
def demo() -> List[str]:
    buffer = TextBuffer()
    history = CommandHistory()
    lines = []

    history.run(InsertCommand(buffer, 0, "Hello"))
    history.run(InsertCommand(buffer, 5, ", world"))
    lines.append(f"after inserts: {buffer.text!r}")
    history.run(DeleteCommand(buffer, 0, 7))
    lines.append(f"after delete: {buffer.text!r}")
    history.undo()
    lines.append(f"undo: {buffer.text!r}")
    history.undo()
    lines.append(f"undo: {buffer.text!r}")
    history.redo()
    lines.append(f"redo: {buffer.text!r}")
    try:
        history.redo()
        history.redo()
    except NothingToRedoError as e:
        lines.append(f"redo refused: {e}")
    return lines
