"""
Domain entities.

All entities are frozen value objects: districts and cities are defined
once at import time, hotels live only until the next district query.
"""

from __future__ import annotations

from dataclasses import dataclass


class UnknownRegion(LookupError):
    """Raised when a district or city name is not in the registry."""


# ── Value Objects ─────────────────────────────────────────────────────


@dataclass(frozen=True)
class Location:
    latitude: float
    longitude: float

    def as_pair(self) -> tuple[float, float]:
        return (self.latitude, self.longitude)


@dataclass(frozen=True)
class BoundingBox:
    """Rectangle in degrees, ordered the way Overpass expects it."""

    south: float
    west: float
    north: float
    east: float

    @classmethod
    def from_tuple(cls, bbox: tuple[float, float, float, float]) -> BoundingBox:
        south, west, north, east = bbox
        return cls(south, west, north, east)

    def as_tuple(self) -> tuple[float, float, float, float]:
        return (self.south, self.west, self.north, self.east)

    def center(self) -> Location:
        return Location(
            (self.south + self.north) / 2, (self.west + self.east) / 2
        )


# ── Entities ──────────────────────────────────────────────────────────


@dataclass(frozen=True)
class District:
    name: str
    bbox: BoundingBox


@dataclass(frozen=True)
class City:
    name: str
    location: Location


@dataclass(frozen=True)
class Hotel:
    id: int
    location: Location
    name: str

    @property
    def lat(self) -> float:
        return self.location.latitude

    @property
    def lon(self) -> float:
        return self.location.longitude
