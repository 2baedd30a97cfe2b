"""
Dialect selection rule for translated species descriptions.

Cave dwellers and legendary species speak like Yoda; every other
species gets Shakespeare.
"""

from app.domain.pokedex.entities import Dialect, SpeciesInfo

CAVE_HABITAT = "cave"


def select_dialect(info: SpeciesInfo) -> Dialect:
    """Pick the translation dialect for a species.

    Args:
        info: The fetched species metadata.

    Returns:
        Dialect.YODA if the habitat is a cave or the species is legendary,
        Dialect.SHAKESPEARE otherwise.
    """
    if info.habitat == CAVE_HABITAT or info.is_legendary:
        return Dialect.YODA
    return Dialect.SHAKESPEARE
