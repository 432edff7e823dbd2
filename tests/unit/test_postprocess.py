"""Tests for coordinate precision limiting and winding order.

Covers:
- limit_precision rounds every coordinate of every geometry type
- rewind orients exterior rings CCW and holes CW (RFC 7946)
- GeometryCollections and null geometries are traversed safely
- Inputs are not mutated
"""

from __future__ import annotations

import copy
from typing import Any

from shapely.geometry import LinearRing

from rfs_incidents.cleaning import limit_precision, rewind

# Exterior ring drawn clockwise (east, south, west, north).
CW_SQUARE = [[150.0, -33.0], [150.1, -33.0], [150.1, -33.1], [150.0, -33.1], [150.0, -33.0]]
CCW_SQUARE = list(reversed(CW_SQUARE))
# Hole inside the square, drawn counter-clockwise.
CCW_HOLE = [[150.02, -33.08], [150.08, -33.08], [150.08, -33.02], [150.02, -33.02], [150.02, -33.08]]


def _feature(geometry: Any) -> dict[str, Any]:
    return {"type": "Feature", "properties": {}, "geometry": geometry}


def _is_ccw(ring: list[list[float]]) -> bool:
    return LinearRing([tuple(p[:2]) for p in ring]).is_ccw


class TestLimitPrecision:
    """Coordinate rounding."""

    def test_point(self) -> None:
        geometry = {"type": "Point", "coordinates": [151.12345678, -33.98765432]}
        assert limit_precision(geometry) == {"type": "Point", "coordinates": [151.1235, -33.9877]}

    def test_polygon_in_collection(self) -> None:
        collection = {
            "type": "FeatureCollection",
            "features": [
                _feature(
                    {
                        "type": "Polygon",
                        "coordinates": [[[1.123456, 2.123456], [3.0, 4.0], [5.99999, 6.00001]]],
                    }
                )
            ],
        }
        result = limit_precision(collection)
        assert result["features"][0]["geometry"]["coordinates"] == [
            [[1.1235, 2.1235], [3.0, 4.0], [6.0, 6.0]]
        ]

    def test_custom_precision(self) -> None:
        geometry = {"type": "Point", "coordinates": [151.1261, -33.9841]}
        assert limit_precision(geometry, 2)["coordinates"] == [151.13, -33.98]

    def test_third_dimension_rounded(self) -> None:
        geometry = {"type": "Point", "coordinates": [151.123456, -33.123456, 12.345678]}
        assert limit_precision(geometry)["coordinates"] == [151.1235, -33.1235, 12.3457]

    def test_geometry_collection_members(self) -> None:
        geometry = {
            "type": "GeometryCollection",
            "geometries": [
                {"type": "Point", "coordinates": [1.000049, 2.000051]},
                {"type": "LineString", "coordinates": [[1.11111, 2.22222], [3.33333, 4.44444]]},
            ],
        }
        result = limit_precision(geometry)
        assert result["geometries"][0]["coordinates"] == [1.0, 2.0001]
        assert result["geometries"][1]["coordinates"] == [[1.1111, 2.2222], [3.3333, 4.4444]]

    def test_null_geometry_feature(self) -> None:
        feature = _feature(None)
        assert limit_precision(feature) == feature

    def test_input_not_mutated(self) -> None:
        geometry = {"type": "Point", "coordinates": [151.12345678, -33.98765432]}
        original = copy.deepcopy(geometry)
        limit_precision(geometry)
        assert geometry == original


class TestRewind:
    """RFC 7946 winding order."""

    def test_clockwise_exterior_reversed(self) -> None:
        result = rewind({"type": "Polygon", "coordinates": [CW_SQUARE]})
        assert result["coordinates"] == [CCW_SQUARE]

    def test_ccw_exterior_unchanged(self) -> None:
        result = rewind({"type": "Polygon", "coordinates": [CCW_SQUARE]})
        assert result["coordinates"] == [CCW_SQUARE]

    def test_hole_made_clockwise(self) -> None:
        result = rewind({"type": "Polygon", "coordinates": [CW_SQUARE, CCW_HOLE]})
        exterior, hole = result["coordinates"]
        assert _is_ccw(exterior) is True
        assert _is_ccw(hole) is False
        assert hole == list(reversed(CCW_HOLE))

    def test_multipolygon_each_part(self) -> None:
        result = rewind({"type": "MultiPolygon", "coordinates": [[CW_SQUARE], [CCW_SQUARE, CCW_HOLE]]})
        for polygon in result["coordinates"]:
            assert _is_ccw(polygon[0]) is True
            for hole in polygon[1:]:
                assert _is_ccw(hole) is False

    def test_inside_geometry_collection(self) -> None:
        collection = {
            "type": "FeatureCollection",
            "features": [
                _feature(
                    {
                        "type": "GeometryCollection",
                        "geometries": [
                            {"type": "Point", "coordinates": [150.0, -33.0]},
                            {"type": "Polygon", "coordinates": [CW_SQUARE]},
                        ],
                    }
                )
            ],
        }
        result = rewind(collection)
        point, polygon = result["features"][0]["geometry"]["geometries"]
        assert point == {"type": "Point", "coordinates": [150.0, -33.0]}
        assert polygon["coordinates"] == [CCW_SQUARE]

    def test_line_string_untouched(self) -> None:
        line = {"type": "LineString", "coordinates": CW_SQUARE}
        assert rewind(line) == line

    def test_degenerate_ring_left_alone(self) -> None:
        ring = [[150.0, -33.0], [150.1, -33.0], [150.0, -33.0]]
        assert rewind({"type": "Polygon", "coordinates": [ring]})["coordinates"] == [ring]

    def test_input_not_mutated(self) -> None:
        polygon = {"type": "Polygon", "coordinates": [copy.deepcopy(CW_SQUARE)]}
        rewind(polygon)
        assert polygon["coordinates"] == [CW_SQUARE]
