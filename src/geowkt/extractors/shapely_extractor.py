"""Extractor for shapely 2.1+ geometries."""

from __future__ import annotations

from typing import Any

import shapely
from shapely.geometry.base import BaseGeometry

from ..core.types import Coordinates, Dimension, GeometryType

# shapely geom_type -> GeometryType
SHAPELY_TYPES: dict[str, GeometryType] = {
    "Point": GeometryType.POINT,
    "LineString": GeometryType.LINESTRING,
    "LinearRing": GeometryType.LINESTRING,
    "Polygon": GeometryType.POLYGON,
    "MultiPoint": GeometryType.MULTIPOINT,
    "MultiLineString": GeometryType.MULTILINESTRING,
    "MultiPolygon": GeometryType.MULTIPOLYGON,
    "GeometryCollection": GeometryType.GEOMETRYCOLLECTION,
}


class ShapelyExtractor:
    """Reads shapely geometries.

    Shapely has no per-vertex point objects, so the points of a line string
    are handed out as ``Coordinates`` values; ``extract_coordinates_from_point``
    accepts either those or a shapely ``Point``.

    Z and M presence come from ``has_z`` and ``has_m`` (shapely 2.1 and later).
    """

    def extract_type(self, geometry: Any) -> GeometryType:
        geom_type = _expect_geometry(geometry).geom_type
        try:
            return SHAPELY_TYPES[geom_type]
        except KeyError:
            raise ValueError(f"Unsupported shapely geometry type: {geom_type}") from None

    def extract_dimension(self, geometry: Any) -> Dimension:
        geometry = _expect_geometry(geometry)
        return Dimension.from_flags(geometry.has_z, geometry.has_m)

    def extract_srid(self, geometry: Any) -> int | None:
        srid = int(shapely.get_srid(_expect_geometry(geometry)))
        # shapely reports 0 for "no SRID"
        return srid or None

    def extract_coordinates_from_point(self, point: Any) -> Coordinates | None:
        if isinstance(point, Coordinates):
            return point
        point = _expect_geometry(point)
        if point.is_empty:
            return None
        return self._coordinates(point)[0]

    def extract_points_from_line_string(self, line_string: Any) -> list[Coordinates]:
        return self._coordinates(_expect_geometry(line_string))

    def extract_line_strings_from_polygon(self, polygon: Any) -> list[BaseGeometry]:
        polygon = _expect_geometry(polygon)
        if polygon.is_empty:
            return []
        return [polygon.exterior, *polygon.interiors]

    def extract_points_from_multi_point(self, multi_point: Any) -> list[BaseGeometry]:
        return list(_expect_geometry(multi_point).geoms)

    def extract_line_strings_from_multi_line_string(
        self, multi_line_string: Any
    ) -> list[BaseGeometry]:
        return list(_expect_geometry(multi_line_string).geoms)

    def extract_polygons_from_multi_polygon(self, multi_polygon: Any) -> list[BaseGeometry]:
        return list(_expect_geometry(multi_polygon).geoms)

    def extract_geometries_from_geometry_collection(
        self, geometry_collection: Any
    ) -> list[BaseGeometry]:
        return list(_expect_geometry(geometry_collection).geoms)

    def _coordinates(self, geometry: BaseGeometry) -> list[Coordinates]:
        """All coordinates of a geometry, in order, laid out per its dimension."""
        dimension = self.extract_dimension(geometry)
        kwargs: dict[str, bool] = {"include_z": dimension.has_z}
        if dimension.has_m:
            kwargs["include_m"] = True
        rows = shapely.get_coordinates(geometry, **kwargs)
        return [Coordinates.from_array(row, dimension) for row in rows]


def _expect_geometry(value: Any) -> BaseGeometry:
    if not isinstance(value, BaseGeometry):
        raise TypeError(f"Expected a shapely geometry, got {type(value).__name__}")
    return value
