"""
Adapter: FunTranslations client.

Implements TranslationPort.
Calls GET {base_url}/translate/{dialect}.json?text=... and extracts
the translated text from the ``contents`` object.
"""

import asyncio
import logging
from typing import Any

import httpx

from app.domain.pokedex.entities import Translation
from app.domain.pokedex.errors import (
    TranslationInternalError,
    TranslationNotFoundError,
)
from app.domain.pokedex.ports import TranslationPort

logger = logging.getLogger(__name__)

DEFAULT_TIMEOUT_SECONDS = 10.0


def parse_translation(document: Any) -> Translation:
    """Build a Translation from a decoded translate response.

    An upstream that reports zero successful translations is treated as
    a failure even though it answered 200.

    Raises:
        ValueError: If ``success.total`` is not a positive integer or any
            ``contents`` field is missing or mistyped.
    """
    if not isinstance(document, dict):
        raise ValueError("translation document is not an object")

    success = document.get("success")
    total = success.get("total") if isinstance(success, dict) else None
    if isinstance(total, bool) or not isinstance(total, int) or total <= 0:
        raise ValueError("translation reported no successful result")

    contents = document.get("contents")
    if not isinstance(contents, dict):
        raise ValueError("translation document has no contents")

    translated = contents.get("translated")
    original = contents.get("text")
    dialect = contents.get("translation")
    if not all(isinstance(value, str) for value in (translated, original, dialect)):
        raise ValueError("translation contents are incomplete")

    return Translation(dialect=dialect, original=original, translated=translated)


class FunTranslationsClient(TranslationPort):
    """Concrete adapter for the FunTranslations API.

    Args:
        http_client: Shared async HTTP client.
        base_url: Root of the translation API, e.g. https://api.funtranslations.com.
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

    async def translate(self, dialect: str, text: str) -> Translation:
        """Translate ``text`` into ``dialect``.

        Raises:
            TranslationNotFoundError: The upstream answered 404.
            TranslationInternalError: Transport failure, timeout, any other
                status, or a payload without a usable translation.
        """
        url = f"{self._base_url}/translate/{dialect}.json"
        logger.debug("Requesting %s translation: %s", dialect, url)

        try:
            response = await asyncio.wait_for(
                self._http_client.get(url, params={"text": text}),
                timeout=self._timeout,
            )
        except (httpx.HTTPError, asyncio.TimeoutError) as exc:
            logger.warning(
                "Translation upstream unreachable for dialect=%s: %s",
                dialect,
                type(exc).__name__,
            )
            raise TranslationInternalError(type(exc).__name__) from exc

        if response.status_code == httpx.codes.NOT_FOUND:
            logger.warning("Translation upstream returned 404 for dialect=%s", dialect)
            raise TranslationNotFoundError(dialect)
        if response.status_code != httpx.codes.OK:
            logger.warning(
                "Translation upstream returned status=%d for dialect=%s",
                response.status_code,
                dialect,
            )
            raise TranslationInternalError(
                f"unexpected status {response.status_code}"
            )

        try:
            return parse_translation(response.json())
        except ValueError as exc:
            logger.warning("Unusable translation payload for dialect=%s", dialect)
            raise TranslationInternalError("unusable payload") from exc
