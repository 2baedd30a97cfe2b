"""
Domain-specific errors for the pokedex bounded context.

Each upstream client raises only its own closed family of errors:
NotFound, Internal and BadRequest. These are mapped to HTTP responses
at the interface layer. No framework imports allowed.
"""


class PokedexDomainError(Exception):
    """Base error for all pokedex domain errors."""

    def __init__(self, message: str) -> None:
        self.message = message
        super().__init__(self.message)


# ── Species metadata upstream ────────────────────────────────────────


class SpeciesInfoClientError(PokedexDomainError):
    """Base error for the species metadata client."""


class SpeciesNotFoundError(SpeciesInfoClientError):
    """Raised when the species upstream does not know the requested name."""

    def __init__(self, name: str) -> None:
        super().__init__(f"Species not found: {name}")
        self.name = name


class SpeciesInternalError(SpeciesInfoClientError):
    """Raised on transport failure, unexpected status or malformed payload."""

    def __init__(self, reason: str) -> None:
        super().__init__(f"Species lookup failed: {reason}")
        self.reason = reason


class SpeciesBadRequestError(SpeciesInfoClientError):
    """Raised when the caller's input is rejected before lookup.

    Not raised by the current client, which performs no validation.
    """


# ── Translation upstream ─────────────────────────────────────────────


class TranslationClientError(PokedexDomainError):
    """Base error for the translation client."""


class TranslationNotFoundError(TranslationClientError):
    """Raised when the translation upstream does not know the dialect."""

    def __init__(self, dialect: str) -> None:
        super().__init__(f"Translation not found for dialect: {dialect}")
        self.dialect = dialect


class TranslationInternalError(TranslationClientError):
    """Raised on transport failure, unexpected status or unusable payload."""

    def __init__(self, reason: str) -> None:
        super().__init__(f"Translation failed: {reason}")
        self.reason = reason


class TranslationBadRequestError(TranslationClientError):
    """Raised when the caller's input is rejected before translation.

    Not raised by the current client, which performs no validation.
    """
