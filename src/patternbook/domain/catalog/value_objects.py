"""Catalog value objects."""
import re
from enum import Enum


class PatternCategory(str, Enum):
    """GoF classification axes plus the catch-all for post-GoF patterns."""
    CREATIONAL = "creational"
    STRUCTURAL = "structural"
    BEHAVIORAL = "behavioral"
    MODERN = "modern"

    @property
    def label(self) -> str:
        return self.value.capitalize()

    @classmethod
    def ordered(cls) -> list:
        """Categories in catalog order."""
        return [cls.CREATIONAL, cls.STRUCTURAL, cls.BEHAVIORAL, cls.MODERN]


_NON_ALNUM = re.compile(r"[^a-z0-9]+")


def slugify(name: str) -> str:
    """Turn a display name into a kebab-case slug ("Null Object" -> "null-object")."""
    return _NON_ALNUM.sub("-", name.strip().lower()).strip("-")
