"""
Liveness endpoint.

Answers from process state alone, so a slow or failing PokeAPI or
FunTranslations never makes the service look dead.
"""

from fastapi import APIRouter

from app.core.config import settings
from app.interfaces.pokedex.schemas import HealthResponse

router = APIRouter(tags=["health"])


@router.get(
    "/health",
    response_model=HealthResponse,
    summary="Liveness check",
    description="Reports that the service is up, with its version.",
)
def health_check() -> HealthResponse:
    """Report the service as up."""
    return HealthResponse(status="ok", version=settings.version)
