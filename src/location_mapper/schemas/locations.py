"""Location request/response schemas."""

from __future__ import annotations

from typing import Any

from pydantic import BaseModel, ConfigDict, Field


class LocationCreate(BaseModel):
    # Range checks live in the store so API and direct callers share one rule set
    name: Any = Field(default=None, description="Display name for the marker.")
    latitude: Any = Field(default=None, description="Latitude in degrees, -90 to 90.")
    longitude: Any = Field(default=None, description="Longitude in degrees, -180 to 180.")


class LocationModel(BaseModel):
    model_config = ConfigDict(from_attributes=True)

    id: int
    name: str
    latitude: float
    longitude: float


class ClearLocationsResponse(BaseModel):
    deleted: int


class ValidationErrorDetail(BaseModel):
    field: str
    message: str
