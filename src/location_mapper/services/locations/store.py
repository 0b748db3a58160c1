"""Thread-safe store for saved map locations."""

from __future__ import annotations

import functools
import logging
import math
import threading
from pathlib import Path
from typing import Any, Optional

from ...config import settings
from ...models.domain import Location
from ...persistence.filesystem import FileStorage

LATITUDE_RANGE = (-90.0, 90.0)
LONGITUDE_RANGE = (-180.0, 180.0)


class ValidationError(ValueError):
    """Raised when a location cannot be created from the supplied input."""

    def __init__(self, field: str, message: str, value: Any = None) -> None:
        super().__init__(f"{field}: {message}")
        self.field = field
        self.message = message
        self.value = value


def _validate_name(name: Any) -> str:
    if not isinstance(name, str):
        raise ValidationError("name", "must be a string", name)
    cleaned = name.strip()
    if not cleaned:
        raise ValidationError("name", "must not be empty", name)
    return cleaned


def _validate_coordinate(field: str, value: Any, bounds: tuple[float, float]) -> float:
    # bool is an int subclass; a checkbox value is never a coordinate
    if isinstance(value, bool):
        raise ValidationError(field, "must be a number", value)
    try:
        number = float(value)
    except OverflowError:
        raise ValidationError(field, "must be a finite number", value) from None
    except (TypeError, ValueError):
        raise ValidationError(field, "must be a number", value) from None
    if not math.isfinite(number):
        raise ValidationError(field, "must be a finite number", value)
    low, high = bounds
    if not low <= number <= high:
        raise ValidationError(field, f"must be between {low:g} and {high:g}", value)
    return number


def _coerce_int(field: str, value: Any) -> int:
    if isinstance(value, bool) or not isinstance(value, (int, float)):
        raise ValueError(f"{field} must be an integer, got {value!r}")
    if isinstance(value, float) and not value.is_integer():
        raise ValueError(f"{field} must be an integer, got {value!r}")
    return int(value)


class LocationStore:
    """Owns the saved locations and hands out their identifiers.

    Every public operation runs under a single lock, so a concurrent reader
    sees the store either before or after a mutation. Identifiers come from a
    counter that only moves forward; clearing the store does not reuse them.

    When ``snapshot_path`` is given, the store loads its state from that JSON
    file and rewrites it after each mutation. The in-memory state only changes
    once the snapshot has been written.
    """

    def __init__(self, snapshot_path: Path | None = None, storage: FileStorage | None = None) -> None:
        self._lock = threading.Lock()
        self._locations: list[Location] = []
        self._next_id = 1
        self._storage = storage
        if snapshot_path is not None and storage is None:
            snapshot_path = Path(snapshot_path).expanduser().resolve()
            self._storage = FileStorage(root=snapshot_path.parent)
        self._snapshot_path = snapshot_path
        if snapshot_path is not None:
            self._load_snapshot()

    def __len__(self) -> int:
        with self._lock:
            return len(self._locations)

    def add(self, name: str, latitude: float, longitude: float) -> Location:
        cleaned_name = _validate_name(name)
        lat = _validate_coordinate("latitude", latitude, LATITUDE_RANGE)
        lon = _validate_coordinate("longitude", longitude, LONGITUDE_RANGE)

        with self._lock:
            location = Location(id=self._next_id, name=cleaned_name, latitude=lat, longitude=lon)
            updated = [*self._locations, location]
            self._write_snapshot(updated, self._next_id + 1)
            self._locations = updated
            self._next_id += 1

        logging.info(f"Saved location {location.id} '{location.name}' at ({lat:.6f}, {lon:.6f})")
        return location

    def list(self) -> tuple[Location, ...]:
        with self._lock:
            return tuple(self._locations)

    def clear_all(self) -> int:
        with self._lock:
            removed = len(self._locations)
            if removed:
                self._write_snapshot([], self._next_id)
                self._locations = []

        logging.info(f"Cleared {removed} saved locations")
        return removed

    def _write_snapshot(self, locations: list[Location], next_id: int) -> None:
        if self._snapshot_path is None or self._storage is None:
            return
        payload = {
            "next_id": next_id,
            "locations": [
                {
                    "id": location.id,
                    "name": location.name,
                    "latitude": location.latitude,
                    "longitude": location.longitude,
                }
                for location in locations
            ],
        }
        try:
            self._storage.write_json(self._snapshot_path, payload)
        except OSError as exc:
            logging.error(f"Failed to write location snapshot '{self._snapshot_path}': {exc}")
            raise

    def _load_snapshot(self) -> None:
        data = self._storage.read_json(self._snapshot_path, default=None)
        if data is None:
            logging.info(f"No location snapshot at '{self._snapshot_path}', starting empty")
            return
        try:
            locations = [
                Location(
                    id=_coerce_int("id", entry["id"]),
                    name=_validate_name(entry["name"]),
                    latitude=_validate_coordinate("latitude", entry["latitude"], LATITUDE_RANGE),
                    longitude=_validate_coordinate("longitude", entry["longitude"], LONGITUDE_RANGE),
                )
                for entry in data.get("locations", [])
            ]
            stored_next_id = _coerce_int("next_id", data.get("next_id", 1))
        except (KeyError, TypeError, AttributeError, ValueError) as exc:
            raise ValueError(f"Location snapshot '{self._snapshot_path}' is malformed: {exc}") from exc

        ids = [location.id for location in locations]
        if len(set(ids)) != len(ids):
            raise ValueError(f"Location snapshot '{self._snapshot_path}' contains duplicate ids")

        highest = max(ids, default=0)
        self._locations = locations
        self._next_id = max(stored_next_id, highest + 1)
        logging.info(f"Loaded {len(locations)} locations from '{self._snapshot_path}'")


@functools.lru_cache(maxsize=1)
def get_location_store() -> LocationStore:
    """Return the process-wide store configured from settings."""

    snapshot: Optional[Path] = settings.locations_file
    if snapshot is None:
        return LocationStore()
    storage = FileStorage()
    return LocationStore(snapshot_path=storage.resolve(snapshot), storage=storage)
