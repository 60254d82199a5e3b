"""YAML loader for geometry documents."""

from __future__ import annotations

import logging
from pathlib import Path
from typing import Any

import yaml

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
from ..core.types import Dimension, GeometryType

logger = logging.getLogger(__name__)


class GeometryLoader:
    """Builds native geometries from YAML documents.

    YAML format:
    ```yaml
    type: GeometryCollection
    dimension: 2D        # 2D, 3DZ, 3DM or 4D; inherited by children
    srid: 4326
    geometries:
      - type: Point
        coordinates: [1, 2]
      - type: LineString
        dimension: 3DZ
        coordinates: [[0, 0, 0], [1, 1, 1]]
    ```

    Polygons list their rings under ``rings``, multi points under ``points``
    (``null`` for an empty member), multi line strings under ``lines`` and
    multi polygons under ``polygons``. A point without coordinates is empty.
    """

    def load(self, path: str | Path) -> Geometry:
        """Load a geometry from a YAML file.

        Args:
            path: Path to the YAML file

        Returns:
            The geometry described by the document
        """
        path = Path(path)
        logger.debug(f"Loading geometry document {path}")
        with open(path) as f:
            data = yaml.safe_load(f)

        return self._build_geometry(data)

    def load_string(self, yaml_string: str) -> Geometry:
        """Load a geometry from a YAML string.

        Args:
            yaml_string: YAML content as a string

        Returns:
            The geometry described by the document
        """
        data = yaml.safe_load(yaml_string)
        return self._build_geometry(data)

    def _build_geometry(
        self, data: Any, parent_dimension: Dimension = Dimension.XY
    ) -> Geometry:
        """Build a geometry tree from parsed YAML data."""
        if not isinstance(data, dict):
            raise ValueError(f"Geometry document must be a mapping, got {type(data).__name__}")
        if "type" not in data:
            raise ValueError("Geometry document is missing 'type'")

        geometry_type = GeometryType.parse(data["type"])
        dimension = parent_dimension
        if data.get("dimension") is not None:
            dimension = Dimension(str(data["dimension"]).upper())
        srid = data.get("srid")
        if srid is not None:
            if isinstance(srid, bool) or not isinstance(srid, (int, str)):
                raise ValueError(f"'srid' must be an integer, got {type(srid).__name__}")
            srid = int(srid)

        if geometry_type is GeometryType.POINT:
            coordinates = data.get("coordinates")
            if coordinates is not None:
                coordinates = _list_value(coordinates, "coordinates")
            return Point(coordinates, dimension=dimension, srid=srid)

        if geometry_type is GeometryType.LINESTRING:
            return LineString(
                _list_value(data.get("coordinates"), "coordinates"),
                dimension=dimension,
                srid=srid,
            )

        if geometry_type is GeometryType.POLYGON:
            return self._build_polygon(
                _list_value(data.get("rings"), "rings"), dimension, srid
            )

        if geometry_type is GeometryType.MULTIPOINT:
            return MultiPoint(
                points=[
                    Point(
                        _list_value(coords, "points") if coords is not None else None,
                        dimension=dimension,
                    )
                    for coords in _list_value(data.get("points"), "points")
                ],
                dimension=dimension,
                srid=srid,
            )

        if geometry_type is GeometryType.MULTILINESTRING:
            return MultiLineString(
                lines=[
                    LineString(_list_value(coords, "lines"), dimension=dimension)
                    for coords in _list_value(data.get("lines"), "lines")
                ],
                dimension=dimension,
                srid=srid,
            )

        if geometry_type is GeometryType.MULTIPOLYGON:
            return MultiPolygon(
                polygons=[
                    self._build_polygon(_list_value(rings, "polygons"), dimension)
                    for rings in _list_value(data.get("polygons"), "polygons")
                ],
                dimension=dimension,
                srid=srid,
            )

        collection = GeometryCollection(dimension=dimension, srid=srid)
        for member in _list_value(data.get("geometries"), "geometries"):
            collection.add(self._build_geometry(member, dimension))
        return collection

    def _build_polygon(
        self, rings: list[Any], dimension: Dimension, srid: int | None = None
    ) -> Polygon:
        return Polygon(
            rings=[
                LineString(_list_value(ring, "rings"), dimension=dimension)
                for ring in rings
            ],
            dimension=dimension,
            srid=srid,
        )


def _list_value(value: Any, key: str) -> list[Any]:
    """Return a document list value, treating null as empty."""
    if value is None:
        return []
    if not isinstance(value, list):
        raise ValueError(f"'{key}' must be a list, got {type(value).__name__}")
    return value
