"""
Adapter: PokeAPI species metadata client.

Implements SpeciesInfoPort.
Calls GET {base_url}/pokemon-species/{name} and extracts the name,
the first English flavor text, the habitat and the legendary flag.
"""

import asyncio
import logging
from typing import Any

import httpx

from app.domain.pokedex.entities import SpeciesInfo
from app.domain.pokedex.errors import SpeciesInternalError, SpeciesNotFoundError
from app.domain.pokedex.ports import SpeciesInfoPort

logger = logging.getLogger(__name__)

DEFAULT_TIMEOUT_SECONDS = 10.0
DESCRIPTION_LANGUAGE = "en"
LINE_BREAKS = ("\r\n", "\n", "\r", "\f")


def fold_line_breaks(text: str) -> str:
    """Replace every line break in ``text`` with a single space."""
    for line_break in LINE_BREAKS:
        text = text.replace(line_break, " ")
    return text


def _nested(document: Any, *keys: str) -> Any:
    """Walk nested JSON objects, returning None as soon as a key is missing."""
    for key in keys:
        if not isinstance(document, dict):
            return None
        document = document.get(key)
    return document


def _first_description(entries: Any) -> str | None:
    """Return the flavor text of the first English entry, if any."""
    if not isinstance(entries, list):
        return None
    for entry in entries:
        if _nested(entry, "language", "name") == DESCRIPTION_LANGUAGE:
            text = _nested(entry, "flavor_text")
            return text if isinstance(text, str) else None
    return None


def parse_species(document: Any) -> SpeciesInfo:
    """Build a SpeciesInfo from a decoded pokemon-species document.

    Raises:
        ValueError: If any of the four fields is missing or mistyped.
    """
    name = _nested(document, "name")
    description = _first_description(_nested(document, "flavor_text_entries"))
    habitat = _nested(document, "habitat", "name")
    is_legendary = _nested(document, "is_legendary")

    if not (
        isinstance(name, str)
        and isinstance(description, str)
        and isinstance(habitat, str)
        and isinstance(is_legendary, bool)
    ):
        raise ValueError("species document is missing required fields")

    return SpeciesInfo(
        name=name,
        description=fold_line_breaks(description),
        habitat=habitat,
        is_legendary=is_legendary,
    )


class PokeApiSpeciesInfoClient(SpeciesInfoPort):
    """Concrete adapter for the PokeAPI species endpoint.

    Args:
        http_client: Shared async HTTP client.
        base_url: Root of the species API, e.g. https://pokeapi.co/api/v2.
        timeout: Deadline in seconds for the whole call, body included.
    """

    def __init__(
        self,
        http_client: httpx.AsyncClient,
        base_url: str,
        timeout: float = DEFAULT_TIMEOUT_SECONDS,
    ) -> None:
        self._http_client = http_client
        self._base_url = base_url.rstrip("/")
        self._timeout = timeout

    async def fetch(self, name: str) -> SpeciesInfo:
        """Fetch and parse metadata for a species.

        Args:
            name: Species name, forwarded as-is.

        Returns:
            The parsed SpeciesInfo.

        Raises:
            SpeciesNotFoundError: The upstream answered 404.
            SpeciesInternalError: Transport failure, timeout, any other
                status, or a payload that does not have the expected shape.
        """
        url = f"{self._base_url}/pokemon-species/{name}"
        logger.debug("Fetching species metadata: %s", url)

        try:
            # httpx timeouts are per read; the deadline covers the whole call
            response = await asyncio.wait_for(
                self._http_client.get(url), timeout=self._timeout
            )
        except (httpx.HTTPError, asyncio.TimeoutError) as exc:
            logger.warning(
                "Species upstream unreachable for name=%s: %s",
                name,
                type(exc).__name__,
            )
            raise SpeciesInternalError(type(exc).__name__) from exc

        if response.status_code == httpx.codes.NOT_FOUND:
            logger.warning("Species upstream returned 404 for name=%s", name)
            raise SpeciesNotFoundError(name)
        if response.status_code != httpx.codes.OK:
            logger.warning(
                "Species upstream returned status=%d for name=%s",
                response.status_code,
                name,
            )
            raise SpeciesInternalError(f"unexpected status {response.status_code}")

        try:
            return parse_species(response.json())
        except ValueError as exc:
            logger.warning("Malformed species payload for name=%s", name)
            raise SpeciesInternalError("malformed payload") from exc
