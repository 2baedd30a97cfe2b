"""
Pydantic schemas for the pokedex API responses.

These schemas define the API contract. No business logic belongs here.
"""

from pydantic import BaseModel, Field


class SpeciesInfoResponse(BaseModel):
    """Response schema for both species endpoints."""

    name: str = Field(..., description="Species name")
    description: str = Field(
        ..., description="English description, translated on the translated route"
    )
    habitat: str = Field(..., description="Habitat category")
    is_legendary: bool = Field(..., description="Whether the species is legendary")


class ErrorResponse(BaseModel):
    """Standard error response body.

    Attributes:
        code: Stable machine-readable error code, e.g. PE_NOT_FOUND.
        message: Human-readable error message.
    """

    code: str
    message: str


class HealthResponse(BaseModel):
    """Health check response."""

    status: str
    version: str
