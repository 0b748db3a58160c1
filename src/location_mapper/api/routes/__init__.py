"""Route group exports."""

from . import health, locations, routes

__all__ = ["health", "locations", "routes"]
