"""
Port interfaces (ABCs) for the pokedex bounded context.

Ports define the contracts that the application layer requires from
the two upstream APIs. Infrastructure adapters implement these
interfaces; use cases never depend on concrete clients.
"""

from abc import ABC, abstractmethod

from app.domain.pokedex.entities import SpeciesInfo, Translation


class SpeciesInfoPort(ABC):
    """Port for retrieving species metadata."""

    @abstractmethod
    async def fetch(self, name: str) -> SpeciesInfo:
        """Return metadata for a species.

        Raises:
            SpeciesNotFoundError: The upstream does not know the name.
            SpeciesInternalError: Anything else went wrong.
        """
        raise NotImplementedError


class TranslationPort(ABC):
    """Port for translating a text into a dialect."""

    @abstractmethod
    async def translate(self, dialect: str, text: str) -> Translation:
        """Return the translation of ``text`` into ``dialect``.

        Raises:
            TranslationNotFoundError: The upstream does not know the dialect.
            TranslationInternalError: Anything else went wrong.
        """
        raise NotImplementedError
