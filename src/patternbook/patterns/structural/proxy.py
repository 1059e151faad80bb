"""Proxy - a surrogate that controls access to another object."""
from abc import ABC, abstractmethod
from typing import List, Optional, Set

from patternbook.application.decorators import pattern_example
from patternbook.domain.base.exceptions import DomainException
from patternbook.domain.catalog import PatternCategory


class AccessDeniedError(DomainException):
    pass


class Image(ABC):
    """Subject interface."""

    @abstractmethod
    def display(self) -> str:
        ...


class HighResolutionImage(Image):
    """Real subject; expensive to construct."""

    loads = 0

    def __init__(self, path: str):
        self.path = path
        HighResolutionImage.loads += 1
        self._pixels = f"<{path} decoded>"

    def display(self) -> str:
        return f"showing {self._pixels}"


class LazyImageProxy(Image):
    """Virtual proxy; loads the real image on first use and reuses it."""

    def __init__(self, path: str):
        self.path = path
        self._image: Optional[HighResolutionImage] = None

    @property
    def loaded(self) -> bool:
        return self._image is not None

    def display(self) -> str:
        if self._image is None:
            self._image = HighResolutionImage(self.path)
        return self._image.display()


class ProtectedImageProxy(Image):
    """Protection proxy; checks the caller's roles before delegating."""

    def __init__(self, image: Image, roles: Set[str], required_role: str = "viewer"):
        self._image = image
        self._roles = roles
        self._required_role = required_role

    def display(self) -> str:
        if self._required_role not in self._roles:
            raise AccessDeniedError(f"role '{self._required_role}' required")
        return self._image.display()


@pattern_example(
    name="Proxy",
    category=PatternCategory.STRUCTURAL,
    intent="Provide a surrogate or placeholder for another object to control access to it.",
    aliases=("Surrogate",),
    participants=(Image, LazyImageProxy, ProtectedImageProxy),
    related=("adapter", "decorator"),
)
def demo() -> List[str]:
    HighResolutionImage.loads = 0
    gallery = [LazyImageProxy(f"photo_{i}.png") for i in range(3)]
    lines = [f"proxies created, real images loaded: {HighResolutionImage.loads}"]

    lines.append(gallery[0].display())
    lines.append(gallery[0].display())
    lines.append(f"after two displays of one image, loads: {HighResolutionImage.loads}")

    guarded = ProtectedImageProxy(gallery[1], roles={"guest"})
    try:
        guarded.display()
    except AccessDeniedError as e:
        lines.append(f"guest denied: {e}")
    lines.append(f"denied access did not load the image: {not gallery[1].loaded}")
    return lines
