"""
Domain entities for the pokedex bounded context.

Entities are request-scoped value objects. They contain no framework
imports and no IO operations.
"""

from dataclasses import dataclass, replace
from enum import Enum


class Dialect(Enum):
    """Translation persona requested from the translation upstream."""

    YODA = "yoda"
    SHAKESPEARE = "shakespeare"


@dataclass(frozen=True)
class SpeciesInfo:
    """Descriptive metadata for a single species.

    The description never contains a raw line break; the species client
    folds them into spaces before construction.
    """

    name: str
    description: str
    habitat: str
    is_legendary: bool

    def with_description(self, description: str) -> "SpeciesInfo":
        """Return a copy with only the description replaced."""
        return replace(self, description=description)


@dataclass(frozen=True)
class Translation:
    """A single translated text returned by the translation upstream.

    Attributes:
        dialect: Translation persona reported by the server.
        original: Input text the translator saw.
        translated: Output text.
    """

    dialect: str
    original: str
    translated: str
