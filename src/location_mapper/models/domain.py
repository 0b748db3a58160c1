"""Domain models for saved map locations."""

from dataclasses import dataclass


@dataclass(frozen=True, slots=True)
class Location:
    """A named point on the map, owned by the location store."""

    id: int
    name: str
    latitude: float
    longitude: float
