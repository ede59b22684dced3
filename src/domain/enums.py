"""Domain enumerations."""

import enum


class ElementType(str, enum.Enum):
    """Overpass element kinds queried for hotels."""

    NODE = "node"
    WAY = "way"
    RELATION = "relation"


class MarkerKind(str, enum.Enum):
    SOURCE = "source"
    HOTEL = "hotel"


class BaseLayer(str, enum.Enum):
    SATELLITE = "Esri Satellite"
    TERRAIN = "Esri Terrain"
