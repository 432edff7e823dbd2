"""Data models and schemas.

Defines the data structures passed through the cleaning pipeline:
- GeoJSON contracts: typed shapes of features, geometries and collections
- CleanReport: cleaned collection plus diagnostics raised while cleaning
"""

from rfs_incidents.models.geojson import (
    Feature,
    FeatureCollection,
    Geometry,
    GeometryCollection,
    SimpleGeometry,
)
from rfs_incidents.models.report import CleanReport, InconsistentFieldWarning

__all__ = [
    "CleanReport",
    "Feature",
    "FeatureCollection",
    "Geometry",
    "GeometryCollection",
    "InconsistentFieldWarning",
    "SimpleGeometry",
]
