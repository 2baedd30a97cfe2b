"""
FastAPI router for the pokedex bounded context.

All routes delegate to use cases. No business logic here.
Error mapping is handled by centralized error handlers.
"""

from fastapi import APIRouter, Depends

from app.application.pokedex.dtos import GetSpeciesInfoQuery, SpeciesInfoResult
from app.application.pokedex.get_info import GetInfoUseCase
from app.application.pokedex.get_translated_info import GetTranslatedInfoUseCase
from app.interfaces.pokedex.dependencies import (
    get_info_use_case,
    get_translated_info_use_case,
)
from app.interfaces.pokedex.schemas import ErrorResponse, SpeciesInfoResponse

router = APIRouter(prefix="/pokemon", tags=["pokemon"])

ERROR_RESPONSES = {
    400: {"model": ErrorResponse},
    404: {"model": ErrorResponse},
    500: {"model": ErrorResponse},
}


def _to_response(result: SpeciesInfoResult) -> SpeciesInfoResponse:
    return SpeciesInfoResponse(
        name=result.name,
        description=result.description,
        habitat=result.habitat,
        is_legendary=result.is_legendary,
    )


@router.get(
    "/translated/{name}",
    response_model=SpeciesInfoResponse,
    responses=ERROR_RESPONSES,
    summary="Get translated species information",
    description=(
        "Species information with the description translated to Yoda speak "
        "for cave dwellers and legendary species, Shakespeare otherwise."
    ),
)
async def get_translated_info(
    name: str,
    use_case: GetTranslatedInfoUseCase = Depends(get_translated_info_use_case),
) -> SpeciesInfoResponse:
    """Get species information with a translated description."""
    result = await use_case.execute(GetSpeciesInfoQuery(name=name))
    return _to_response(result)


@router.get(
    "/{name}",
    response_model=SpeciesInfoResponse,
    responses=ERROR_RESPONSES,
    summary="Get species information",
    description="Name, English description, habitat and legendary status.",
)
async def get_info(
    name: str,
    use_case: GetInfoUseCase = Depends(get_info_use_case),
) -> SpeciesInfoResponse:
    """Get species information."""
    result = await use_case.execute(GetSpeciesInfoQuery(name=name))
    return _to_response(result)
