"""Saved location endpoints."""

from __future__ import annotations

import logging
from typing import List

from fastapi import APIRouter, HTTPException, status

from ...schemas.locations import ClearLocationsResponse, LocationCreate, LocationModel
from ...services.locations import ValidationError, get_location_store

router = APIRouter(prefix="/locations", tags=["locations"])


@router.get("", response_model=List[LocationModel], status_code=status.HTTP_200_OK)
def list_locations() -> List[LocationModel]:
    return [LocationModel.model_validate(location) for location in get_location_store().list()]


@router.post("", response_model=LocationModel, status_code=status.HTTP_201_CREATED)
def create_location(payload: LocationCreate) -> LocationModel:
    try:
        location = get_location_store().add(payload.name, payload.latitude, payload.longitude)
    except ValidationError as exc:
        raise HTTPException(
            status_code=status.HTTP_400_BAD_REQUEST,
            detail={"field": exc.field, "message": exc.message},
        ) from exc
    except OSError as exc:
        logging.exception(f"Error saving location: {exc}")
        raise HTTPException(
            status_code=status.HTTP_500_INTERNAL_SERVER_ERROR,
            detail=f"Failed to save location: {str(exc)}",
        ) from exc
    return LocationModel.model_validate(location)


@router.delete("", response_model=ClearLocationsResponse, status_code=status.HTTP_200_OK)
def clear_locations() -> ClearLocationsResponse:
    try:
        deleted = get_location_store().clear_all()
    except OSError as exc:
        logging.exception(f"Error clearing locations: {exc}")
        raise HTTPException(
            status_code=status.HTTP_500_INTERNAL_SERVER_ERROR,
            detail=f"Failed to delete locations: {str(exc)}",
        ) from exc
    return ClearLocationsResponse(deleted=deleted)
