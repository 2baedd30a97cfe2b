"""
Tests for the pokedex application layer (use cases).

Tests use cases with mocked ports. No real infrastructure needed.
Each test verifies orchestration logic: call order, dialect choice
and error propagation.
"""

from unittest.mock import AsyncMock

import pytest

from app.application.pokedex.dtos import GetSpeciesInfoQuery, SpeciesInfoResult
from app.application.pokedex.get_info import GetInfoUseCase
from app.application.pokedex.get_translated_info import GetTranslatedInfoUseCase
from app.domain.pokedex.entities import SpeciesInfo, Translation
from app.domain.pokedex.errors import (
    SpeciesInternalError,
    SpeciesNotFoundError,
    TranslationInternalError,
    TranslationNotFoundError,
)

MEWTWO = SpeciesInfo(
    name="mewtwo",
    description="It was created by a scientist.",
    habitat="rare",
    is_legendary=True,
)

PIKACHU = SpeciesInfo(
    name="pikachu",
    description="It keeps its tail raised.",
    habitat="forest",
    is_legendary=False,
)


def _species_port(result=MEWTWO) -> AsyncMock:
    port = AsyncMock()
    if isinstance(result, Exception):
        port.fetch.side_effect = result
    else:
        port.fetch.return_value = result
    return port


def _translation_port(result=None) -> AsyncMock:
    port = AsyncMock()
    if isinstance(result, Exception):
        port.translate.side_effect = result
    else:
        port.translate.return_value = result or Translation(
            dialect="yoda",
            original=MEWTWO.description,
            translated="Created by a scientist, it was.",
        )
    return port


class TestGetInfoUseCase:
    """Tests for the GetInfoUseCase."""

    @pytest.mark.asyncio
    async def test_returns_species_unchanged(self) -> None:
        port = _species_port()
        result = await GetInfoUseCase(port).execute(GetSpeciesInfoQuery(name="mewtwo"))

        port.fetch.assert_awaited_once_with("mewtwo")
        assert result == SpeciesInfoResult.from_entity(MEWTWO)

    @pytest.mark.asyncio
    async def test_name_forwarded_as_is(self) -> None:
        port = _species_port()
        await GetInfoUseCase(port).execute(GetSpeciesInfoQuery(name="Mr. Mime"))
        port.fetch.assert_awaited_once_with("Mr. Mime")

    @pytest.mark.asyncio
    async def test_not_found_propagates(self) -> None:
        port = _species_port(SpeciesNotFoundError("missingno"))
        with pytest.raises(SpeciesNotFoundError):
            await GetInfoUseCase(port).execute(GetSpeciesInfoQuery(name="missingno"))


class TestGetTranslatedInfoUseCase:
    """Tests for the GetTranslatedInfoUseCase."""

    @pytest.mark.asyncio
    async def test_legendary_uses_yoda(self) -> None:
        species, translator = _species_port(MEWTWO), _translation_port()
        result = await GetTranslatedInfoUseCase(species, translator).execute(
            GetSpeciesInfoQuery(name="mewtwo")
        )

        translator.translate.assert_awaited_once_with("yoda", MEWTWO.description)
        assert result == SpeciesInfoResult(
            name="mewtwo",
            description="Created by a scientist, it was.",
            habitat="rare",
            is_legendary=True,
        )

    @pytest.mark.asyncio
    async def test_cave_habitat_uses_yoda(self) -> None:
        zubat = SpeciesInfo("zubat", "Forms colonies.", "cave", False)
        translator = _translation_port()
        await GetTranslatedInfoUseCase(_species_port(zubat), translator).execute(
            GetSpeciesInfoQuery(name="zubat")
        )
        translator.translate.assert_awaited_once_with("yoda", "Forms colonies.")

    @pytest.mark.asyncio
    async def test_default_uses_shakespeare(self) -> None:
        translator = _translation_port(
            Translation("shakespeare", PIKACHU.description, "Its tail 't keepeth raised.")
        )
        result = await GetTranslatedInfoUseCase(_species_port(PIKACHU), translator).execute(
            GetSpeciesInfoQuery(name="pikachu")
        )

        translator.translate.assert_awaited_once_with("shakespeare", PIKACHU.description)
        assert result.description == "Its tail 't keepeth raised."
        assert result.habitat == "forest"
        assert result.is_legendary is False

    @pytest.mark.asyncio
    async def test_species_failure_skips_translation(self) -> None:
        """Translation is never attempted when the species lookup fails."""
        translator = _translation_port()
        use_case = GetTranslatedInfoUseCase(
            _species_port(SpeciesInternalError("timeout")), translator
        )

        with pytest.raises(SpeciesInternalError):
            await use_case.execute(GetSpeciesInfoQuery(name="mewtwo"))
        translator.translate.assert_not_awaited()

    @pytest.mark.asyncio
    @pytest.mark.parametrize(
        "error",
        [TranslationInternalError("unusable payload"), TranslationNotFoundError("yoda")],
    )
    async def test_translation_failure_has_no_fallback(self, error: Exception) -> None:
        """A failed translation fails the whole request."""
        use_case = GetTranslatedInfoUseCase(_species_port(), _translation_port(error))
        with pytest.raises(type(error)):
            await use_case.execute(GetSpeciesInfoQuery(name="mewtwo"))
