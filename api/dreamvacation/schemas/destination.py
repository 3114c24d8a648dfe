"""
Destination Schemas
"""
from pydantic import BaseModel, AliasChoices, Field
from typing import Optional
from datetime import datetime


class DestinationCreate(BaseModel):
    """Schema for the create request body"""
    # Presence is checked by the route so a missing country is a 400, not a 422
    country: Optional[str] = None
    vacation_type: Optional[str] = Field(
        default=None,
        validation_alias=AliasChoices("vacationType", "vacation_type"),
    )


class DestinationResponse(BaseModel):
    """Schema for a stored destination"""
    id: int
    country: str
    capital: Optional[str] = None
    population: Optional[int] = None
    region: Optional[str] = None
    vacation_type: Optional[str] = Field(
        default=None,
        validation_alias=AliasChoices("vacation_type", "vacationType"),
        serialization_alias="vacationType",
    )
    created_at: datetime

    class Config:
        from_attributes = True


class ErrorResponse(BaseModel):
    """Schema for every error body"""
    error: str


class MessageResponse(BaseModel):
    message: str
