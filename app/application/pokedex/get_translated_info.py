"""
Use case: Retrieve metadata for a species with a translated description.

Input: GetSpeciesInfoQuery (name)
Output: SpeciesInfoResult
Side effects: One call to the species upstream, then one call to the
    translation upstream. The second call depends on the first.
Failure cases: SpeciesNotFoundError, SpeciesInternalError,
    TranslationNotFoundError, TranslationInternalError.
"""

import logging

from app.application.pokedex.dtos import GetSpeciesInfoQuery, SpeciesInfoResult
from app.domain.pokedex.dialect_selector import select_dialect
from app.domain.pokedex.ports import SpeciesInfoPort, TranslationPort

logger = logging.getLogger(__name__)


class GetTranslatedInfoUseCase:
    """Orchestrates fetch → select dialect → translate → merge.

    Errors from either port propagate unchanged. There is no fallback to
    the untranslated description.
    """

    def __init__(
        self,
        species_port: SpeciesInfoPort,
        translation_port: TranslationPort,
    ) -> None:
        self._species_port = species_port
        self._translation_port = translation_port

    async def execute(self, query: GetSpeciesInfoQuery) -> SpeciesInfoResult:
        """Run the translated species lookup use case.

        Args:
            query: The lookup request containing the species name.

        Returns:
            The species metadata with its description replaced by the
            translated text. All other fields are untouched.
        """
        info = await self._species_port.fetch(query.name)

        dialect = select_dialect(info)
        logger.info(
            "Translating description for name=%s, dialect=%s",
            info.name,
            dialect.value,
        )

        translation = await self._translation_port.translate(
            dialect.value, info.description
        )

        return SpeciesInfoResult.from_entity(
            info.with_description(translation.translated)
        )
