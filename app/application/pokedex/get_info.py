"""
Use case: Retrieve metadata for a species.

Input: GetSpeciesInfoQuery (name)
Output: SpeciesInfoResult
Side effects: One call to the species upstream.
Failure cases: SpeciesNotFoundError, SpeciesInternalError.
"""

import logging

from app.application.pokedex.dtos import GetSpeciesInfoQuery, SpeciesInfoResult
from app.domain.pokedex.ports import SpeciesInfoPort

logger = logging.getLogger(__name__)


class GetInfoUseCase:
    """Delegates species lookup to the SpeciesInfoPort."""

    def __init__(self, species_port: SpeciesInfoPort) -> None:
        self._species_port = species_port

    async def execute(self, query: GetSpeciesInfoQuery) -> SpeciesInfoResult:
        """Run the species lookup use case.

        Args:
            query: The lookup request containing the species name.

        Returns:
            The species metadata, unchanged.
        """
        logger.info("Retrieving species info for name=%s", query.name)
        info = await self._species_port.fetch(query.name)
        return SpeciesInfoResult.from_entity(info)
