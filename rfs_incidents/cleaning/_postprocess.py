"""Collection-wide post-processing: coordinate precision and winding order.

Both passes rebuild the coordinate arrays instead of editing them in
place, so a cleaned collection never shares lists with its input.
"""

from __future__ import annotations

import logging
from typing import TYPE_CHECKING, Any

from shapely.geometry import LinearRing

from rfs_incidents.core.constants import DEFAULT_COORDINATE_PRECISION

if TYPE_CHECKING:
    from collections.abc import Callable

logger = logging.getLogger("rfs_incidents.cleaning")

# A ring needs 3 distinct positions before it has an orientation.
_MIN_RING_POSITIONS = 3


# ---------------------------------------------------------------------------
# Coordinate precision
# ---------------------------------------------------------------------------


def limit_precision(
    geojson: dict[str, Any], precision: int = DEFAULT_COORDINATE_PRECISION
) -> dict[str, Any]:
    """Round every coordinate value in a GeoJSON object to *precision* places.

    Accepts a ``FeatureCollection``, a ``Feature`` or a bare geometry.
    """
    return _map_geometries(geojson, lambda geom: _round_geometry(geom, precision))


def _round_geometry(geometry: dict[str, Any], precision: int) -> dict[str, Any]:
    return {**geometry, "coordinates": _round_nested(geometry["coordinates"], precision)}


def _round_nested(value: Any, precision: int) -> Any:
    if isinstance(value, list | tuple):
        return [_round_nested(item, precision) for item in value]
    return round(value, precision)


# ---------------------------------------------------------------------------
# Winding order (RFC 7946 section 3.1.6)
# ---------------------------------------------------------------------------


def rewind(geojson: dict[str, Any]) -> dict[str, Any]:
    """Orient polygon rings: exterior rings counter-clockwise, holes clockwise.

    Applies to ``Polygon`` and ``MultiPolygon`` geometries anywhere in the
    object, including inside ``GeometryCollection``s.  Other geometry
    types pass through unchanged.
    """
    return _map_geometries(geojson, _rewind_geometry)


def _rewind_geometry(geometry: dict[str, Any]) -> dict[str, Any]:
    match geometry.get("type"):
        case "Polygon":
            coordinates = _rewind_polygon(geometry["coordinates"])
        case "MultiPolygon":
            coordinates = [_rewind_polygon(polygon) for polygon in geometry["coordinates"]]
        case _:
            return geometry
    return {**geometry, "coordinates": coordinates}


def _rewind_polygon(rings: list[Any]) -> list[Any]:
    return [_orient_ring(ring, ccw=index == 0) for index, ring in enumerate(rings)]


def _orient_ring(ring: list[Any], *, ccw: bool) -> list[Any]:
    positions = [list(position) for position in ring]
    if len({tuple(position[:2]) for position in positions}) < _MIN_RING_POSITIONS:
        logger.debug("Leaving degenerate ring with %d position(s) as-is", len(positions))
        return positions
    if LinearRing([position[:2] for position in positions]).is_ccw != ccw:
        positions.reverse()
    return positions


# ---------------------------------------------------------------------------
# Traversal
# ---------------------------------------------------------------------------


def _map_geometries(
    geojson: dict[str, Any], transform: Callable[[dict[str, Any]], dict[str, Any]]
) -> dict[str, Any]:
    """Apply *transform* to every coordinate-bearing geometry in *geojson*."""
    match geojson.get("type"):
        case "FeatureCollection":
            return {
                **geojson,
                "features": [_map_geometries(f, transform) for f in geojson.get("features", [])],
            }
        case "Feature":
            geometry = geojson.get("geometry")
            if geometry is None:
                return dict(geojson)
            return {**geojson, "geometry": _map_geometries(geometry, transform)}
        case "GeometryCollection":
            return {
                **geojson,
                "geometries": [
                    None if g is None else _map_geometries(g, transform)
                    for g in geojson.get("geometries", [])
                ],
            }
        case _ if "coordinates" in geojson:
            return transform(geojson)
        case _:
            return dict(geojson)
