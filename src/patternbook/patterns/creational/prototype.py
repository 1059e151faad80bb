"""Prototype - create new objects by copying a prototypical instance."""
import copy
from typing import Any, Dict, List

from patternbook.application.decorators import pattern_example
from patternbook.domain.base.exceptions import DomainException
from patternbook.domain.catalog import PatternCategory


class PrototypeNotFoundError(DomainException, KeyError):
    """Raised when no prototype is registered under a name."""
    def __init__(self, name: str):
        DomainException.__init__(self, f"No prototype registered as '{name}'")
        self.name = name

    def __str__(self) -> str:
        return self.args[0]


class Prototype:
    """Mixin giving deep-copy cloning with attribute overrides."""

    def clone(self, **overrides: Any):
        duplicate = copy.deepcopy(self)
        for name, value in overrides.items():
            if not hasattr(duplicate, name):
                raise AttributeError(f"{type(self).__name__} has no attribute '{name}'")
            setattr(duplicate, name, value)
        return duplicate


class Monster(Prototype):
    def __init__(self, kind: str, health: int, abilities: List[str], position=(0, 0)):
        self.kind = kind
        self.health = health
        self.abilities = abilities
        self.position = position

    def __repr__(self) -> str:
        return f"Monster({self.kind!r}, health={self.health}, abilities={self.abilities}, position={self.position})"


class PrototypeRegistry:
    """Named, preconfigured prototypes."""

    def __init__(self):
        self._prototypes: Dict[str, Prototype] = {}

    def register(self, name: str, prototype: Prototype) -> None:
        self._prototypes[name] = prototype

    def unregister(self, name: str) -> None:
        self._prototypes.pop(name, None)

    def create(self, name: str, **overrides: Any):
        try:
            prototype = self._prototypes[name]
        except KeyError:
            raise PrototypeNotFoundError(name) from None
        return prototype.clone(**overrides)

    def names(self) -> List[str]:
        return sorted(self._prototypes)


@pattern_example(
    name="Prototype",
    category=PatternCategory.CREATIONAL,
    intent="Specify the kinds of objects to create using a prototypical instance, and create new objects by copying it.",
    participants=(Prototype, PrototypeRegistry),
    related=("abstract-factory", "memento"),
)
def demo() -> List[str]:
    registry = PrototypeRegistry()
    registry.register("goblin", Monster("goblin", 30, ["stab"]))
    registry.register("dragon", Monster("dragon", 500, ["fly", "breathe fire"]))

    goblin = registry.create("goblin", position=(3, 4))
    elite = registry.create("goblin", health=60)
    elite.abilities.append("dodge")

    lines = [
        f"prototypes: {registry.names()}",
        f"clone: {goblin!r}",
        f"elite clone: {elite!r}",
        f"original untouched by deep copy: {registry.create('goblin').abilities}",
    ]
    try:
        registry.create("unicorn")
    except PrototypeNotFoundError as e:
        lines.append(f"lookup failed: {e}")
    return lines
