"""
Data Transfer Objects for the pokedex application layer.

DTOs carry data between the interface and application layers.
They are plain dataclasses with no behavior.
"""

from dataclasses import dataclass

from app.domain.pokedex.entities import SpeciesInfo


@dataclass(frozen=True)
class GetSpeciesInfoQuery:
    """Input DTO for looking up a species.

    Attributes:
        name: Species name as received on the route, forwarded unchanged.
    """

    name: str


@dataclass(frozen=True)
class SpeciesInfoResult:
    """Output DTO for a species lookup.

    Attributes:
        name: Species name reported by the upstream.
        description: English description, possibly translated.
        habitat: Habitat category.
        is_legendary: Whether the species is legendary.
    """

    name: str
    description: str
    habitat: str
    is_legendary: bool

    @classmethod
    def from_entity(cls, info: SpeciesInfo) -> "SpeciesInfoResult":
        return cls(
            name=info.name,
            description=info.description,
            habitat=info.habitat,
            is_legendary=info.is_legendary,
        )
