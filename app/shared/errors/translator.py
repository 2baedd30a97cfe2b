"""
Error translation from client error families to API errors.

The mapping is an explicit table keyed by exception class so that it
stays total and can be tested without a running application.
"""

from dataclasses import dataclass
from http import HTTPStatus

from app.domain.pokedex.errors import (
    SpeciesBadRequestError,
    SpeciesInternalError,
    SpeciesNotFoundError,
    TranslationBadRequestError,
    TranslationInternalError,
    TranslationNotFoundError,
)

HTTP_400 = 400
HTTP_404 = 404
HTTP_500 = 500

CODE_BAD_REQUEST = "PE_BAD_REQUEST"
CODE_NOT_FOUND = "PE_NOT_FOUND"
CODE_INTERNAL = "PE_INTERNAL"

INTERNAL_MESSAGE = "internal error"


@dataclass(frozen=True)
class ApiError:
    """Uniform error returned at the HTTP boundary.

    Attributes:
        status_code: HTTP status to answer with.
        code: Stable machine-readable error code.
        message: Human-readable message. Never contains upstream payloads.
    """

    status_code: int
    code: str
    message: str

    def to_body(self) -> dict[str, str]:
        return {"code": self.code, "message": self.message}


INTERNAL_API_ERROR = ApiError(HTTP_500, CODE_INTERNAL, INTERNAL_MESSAGE)

# BadRequest variants carry their own message, so they are handled apart.
ERROR_TABLE: dict[type[Exception], ApiError] = {
    SpeciesNotFoundError: ApiError(HTTP_404, CODE_NOT_FOUND, "pokemon not found"),
    SpeciesInternalError: INTERNAL_API_ERROR,
    TranslationNotFoundError: ApiError(HTTP_404, CODE_NOT_FOUND, "not found"),
    TranslationInternalError: INTERNAL_API_ERROR,
}

BAD_REQUEST_ERRORS = (SpeciesBadRequestError, TranslationBadRequestError)


def to_api_error(exc: Exception) -> ApiError:
    """Map a client error to its API error.

    Args:
        exc: Any exception that reached the boundary.

    Returns:
        The mapped ApiError. Exceptions outside both client families map
        to the internal error.
    """
    if isinstance(exc, BAD_REQUEST_ERRORS):
        return ApiError(HTTP_400, CODE_BAD_REQUEST, exc.message)
    return ERROR_TABLE.get(type(exc), INTERNAL_API_ERROR)


def status_to_api_error(status_code: int) -> ApiError:
    """Map a status raised by the framework itself to an API error.

    Covers unmatched paths (404) and wrong methods (405). The message is
    the lowercased reason phrase of the status.
    """
    if status_code == HTTP_404:
        return ApiError(HTTP_404, CODE_NOT_FOUND, "not found")
    if status_code >= HTTP_500:
        return ApiError(status_code, CODE_INTERNAL, INTERNAL_MESSAGE)
    try:
        message = HTTPStatus(status_code).phrase.lower()
    except ValueError:
        message = "bad request"
    return ApiError(status_code, CODE_BAD_REQUEST, message)
