"""Extractor for the native geometry classes in ``geowkt.core.geometry``."""

from __future__ import annotations

from typing import Any

from ..core.geometry import (
    Geometry,
    GeometryCollection,
    LineString,
    MultiLineString,
    MultiPoint,
    MultiPolygon,
    Point,
    Polygon,
)
from ..core.types import Coordinates, Dimension, GeometryType


class GeometryExtractor:
    """Reads native ``Geometry`` objects.

    Each accessor checks that it was handed the geometry class it expects
    and raises ``TypeError`` otherwise.
    """

    def extract_type(self, geometry: Any) -> GeometryType:
        return _expect(geometry, Geometry).geometry_type

    def extract_dimension(self, geometry: Any) -> Dimension:
        return _expect(geometry, Geometry).dimension

    def extract_srid(self, geometry: Any) -> int | None:
        return _expect(geometry, Geometry).srid

    def extract_coordinates_from_point(self, point: Any) -> Coordinates | None:
        return _expect(point, Point).coordinates

    def extract_points_from_line_string(self, line_string: Any) -> list[Point]:
        return _expect(line_string, LineString).points()

    def extract_line_strings_from_polygon(self, polygon: Any) -> list[LineString]:
        return _expect(polygon, Polygon).rings

    def extract_points_from_multi_point(self, multi_point: Any) -> list[Point]:
        return _expect(multi_point, MultiPoint).points

    def extract_line_strings_from_multi_line_string(
        self, multi_line_string: Any
    ) -> list[LineString]:
        return _expect(multi_line_string, MultiLineString).lines

    def extract_polygons_from_multi_polygon(self, multi_polygon: Any) -> list[Polygon]:
        return _expect(multi_polygon, MultiPolygon).polygons

    def extract_geometries_from_geometry_collection(
        self, geometry_collection: Any
    ) -> list[Geometry]:
        return _expect(geometry_collection, GeometryCollection).geometries


def _expect(value: Any, cls: type) -> Any:
    if not isinstance(value, cls):
        raise TypeError(f"Expected {cls.__name__}, got {type(value).__name__}")
    return value
