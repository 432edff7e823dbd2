"""Typed GeoJSON contracts for the feed cleaner.

The pipeline works on plain decoded JSON dicts end to end, so these
``TypedDict``s describe the shapes instead of wrapping them.  The feed
only ever carries the RFC 7946 geometry types, so the geometry union is
closed: six coordinate-bearing types plus ``GeometryCollection``.
"""

from __future__ import annotations

from typing import Any, Literal, NotRequired, TypedDict

SIMPLE_GEOMETRY_TYPES: frozenset[str] = frozenset(
    {
        "Point",
        "LineString",
        "Polygon",
        "MultiPoint",
        "MultiLineString",
        "MultiPolygon",
    }
)
"""Geometry types that carry a ``coordinates`` member."""

GEOMETRY_COLLECTION = "GeometryCollection"


class SimpleGeometry(TypedDict):
    """Any coordinate-bearing geometry (``Point`` .. ``MultiPolygon``)."""

    type: str
    coordinates: list[Any]


class GeometryCollection(TypedDict):
    """Heterogeneous geometry container; may nest further collections."""

    type: Literal["GeometryCollection"]
    geometries: NotRequired[list[Geometry | None]]


Geometry = SimpleGeometry | GeometryCollection

Properties = dict[str, Any]


class Feature(TypedDict):
    """A GeoJSON feature; ``geometry`` is ``None`` for unlocated incidents."""

    type: Literal["Feature"]
    properties: Properties
    geometry: Geometry | None


class FeatureCollection(TypedDict):
    """Top-level feed document."""

    type: Literal["FeatureCollection"]
    features: list[Feature]
