"""
Dependency injection for the pokedex bounded context.

Provides FastAPI dependency functions that wire the shared upstream
clients, created once at startup, into per-request use cases.
"""

from fastapi import Depends, Request

from app.application.pokedex.get_info import GetInfoUseCase
from app.application.pokedex.get_translated_info import GetTranslatedInfoUseCase
from app.domain.pokedex.ports import SpeciesInfoPort, TranslationPort


def get_species_client(request: Request) -> SpeciesInfoPort:
    """Return the shared species metadata client."""
    return request.app.state.species_client


def get_translation_client(request: Request) -> TranslationPort:
    """Return the shared translation client."""
    return request.app.state.translation_client


def get_info_use_case(
    species_client: SpeciesInfoPort = Depends(get_species_client),
) -> GetInfoUseCase:
    """Build GetInfoUseCase with its infrastructure dependencies."""
    return GetInfoUseCase(species_port=species_client)


def get_translated_info_use_case(
    species_client: SpeciesInfoPort = Depends(get_species_client),
    translation_client: TranslationPort = Depends(get_translation_client),
) -> GetTranslatedInfoUseCase:
    """Build GetTranslatedInfoUseCase with its infrastructure dependencies."""
    return GetTranslatedInfoUseCase(
        species_port=species_client,
        translation_port=translation_client,
    )
