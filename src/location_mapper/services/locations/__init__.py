"""Location store exports."""

from .store import LocationStore, ValidationError, get_location_store

__all__ = ["LocationStore", "ValidationError", "get_location_store"]
