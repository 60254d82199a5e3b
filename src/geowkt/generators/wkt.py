"""Well-Known Text generator."""

from __future__ import annotations

import logging
from typing import Any, Callable, Iterable, Mapping

from ..core.types import Coordinates, Dimension, GeometryType
from ..exceptions import GenerationError
from ..extractors.base import Extractor
from .options import Dialect, GeneratorOptions

logger = logging.getLogger(__name__)

EMPTY = "EMPTY"

# Separate dimension token written between tag and body by SFS 1.2
SFS12_MARKERS: dict[Dimension, str] = {
    Dimension.XYZM: "ZM",
    Dimension.XYM: "M",
    Dimension.XYZ: "Z",
}


class WktGenerator:
    """Converts geometries to Well-Known Text.

    The generator is generic over the geometry representation: every
    lookup goes through the supplied extractor. Options are resolved once
    at construction and never change, so a single instance can be shared
    between threads as long as the extractor tolerates concurrent reads.

    Nesting is handled by plain recursion; the depth is that of the input
    geometry and is not limited here.

    Example:
        generator = WktGenerator(GeometryExtractor(), {"dialect": "wkt12"})
        generator.generate(Point([1, 2, 3], dimension=Dimension.XYZ))
        # 'Point Z (1.000000 2.000000 3.000000)'
    """

    def __init__(
        self,
        extractor: Extractor,
        options: GeneratorOptions | Mapping[str, Any] | None = None,
    ) -> None:
        """Create a generator.

        Args:
            extractor: Provides read access to the geometries passed to generate()
            options: Resolved GeneratorOptions or a mapping of option names
                     (dialect, emit_identifier, case_transform, float_precision)

        Raises:
            InvalidOptionError: If an option value is not recognized
        """
        self.extractor = extractor
        if isinstance(options, GeneratorOptions):
            self.options = options
        else:
            self.options = GeneratorOptions.from_mapping(options)

        self._format_spec = self.options.format_spec
        self._encoders: dict[GeometryType, Callable[[Any, Dimension], str]] = {
            GeometryType.POINT: self._generate_point,
            GeometryType.LINESTRING: self._generate_line_string,
            GeometryType.POLYGON: self._generate_polygon,
            GeometryType.MULTIPOINT: self._generate_multi_point,
            GeometryType.MULTILINESTRING: self._generate_multi_line_string,
            GeometryType.MULTIPOLYGON: self._generate_multi_polygon,
            GeometryType.GEOMETRYCOLLECTION: self._generate_geometry_collection,
        }

        logger.debug(f"WktGenerator configured with {self.options}")

    def generate(self, geometry: Any) -> str:
        """Generate the text representation of a geometry.

        Args:
            geometry: Any geometry object the extractor understands

        Returns:
            The complete text, e.g. ``SRID=4326;Point(1.000000 2.000000)``

        Raises:
            GenerationError: If the extractor or any encoding step fails.
                The original exception is chained as the cause.
        """
        try:
            text = ""

            if self.options.emit_identifier:
                srid = self.extractor.extract_srid(geometry)
                if srid is not None:
                    text += f"SRID={int(srid)};"

            dimension = self.extractor.extract_dimension(geometry)
            text += self._generate_geometry(geometry, dimension)

            return self.options.case_transform.apply(text)
        except Exception as e:
            raise GenerationError(e) from e

    def _generate_geometry(self, geometry: Any, dimension: Dimension) -> str:
        """Encode a geometry with its tag and dialect-specific dimension marker."""
        geometry_type = GeometryType(self.extractor.extract_type(geometry))
        data = self._encoders[geometry_type](geometry, dimension)

        tag = geometry_type.value
        dialect = self.options.dialect

        if dialect is Dialect.SFS12 and dimension in SFS12_MARKERS:
            return f"{tag} {SFS12_MARKERS[dimension]} {data}"

        if dialect is Dialect.EXTENDED and dimension is Dimension.XYM:
            tag += "M"

        if data == EMPTY:
            return f"{tag} {data}"
        return tag + data

    def _generate_coordinates(
        self, coordinates: Coordinates | None, dimension: Dimension
    ) -> str:
        """Format one coordinate as ``X Y [Z] [M]``.

        Missing ordinates are written as zero. The strict dialect never
        writes Z or M, whatever the dimension says.
        """
        if coordinates is None:
            coordinates = Coordinates()

        values = [coordinates.x, coordinates.y]
        if self.options.dialect is not Dialect.SFS_STRICT:
            if dimension.has_z:
                values.append(coordinates.z)
            if dimension.has_m:
                values.append(coordinates.m)

        return " ".join(
            format(float(v) if v is not None else 0.0, self._format_spec) for v in values
        )

    def _join(self, parts: Iterable[str]) -> str:
        """Wrap encoded children as ``(a, b, ...)``, or EMPTY when there are none."""
        parts = list(parts)
        if not parts:
            return EMPTY
        return f"({', '.join(parts)})"

    def _generate_point(self, point: Any, dimension: Dimension) -> str:
        coordinates = self.extractor.extract_coordinates_from_point(point)
        if coordinates is None:
            return EMPTY
        return f"({self._generate_coordinates(coordinates, dimension)})"

    def _generate_line_string(self, line_string: Any, dimension: Dimension) -> str:
        points = self.extractor.extract_points_from_line_string(line_string)
        return self._join(
            self._generate_coordinates(
                self.extractor.extract_coordinates_from_point(point), dimension
            )
            for point in points
        )

    def _generate_polygon(self, polygon: Any, dimension: Dimension) -> str:
        rings = self.extractor.extract_line_strings_from_polygon(polygon)
        return self._join(self._generate_line_string(ring, dimension) for ring in rings)

    def _generate_multi_point(self, multi_point: Any, dimension: Dimension) -> str:
        points = self.extractor.extract_points_from_multi_point(multi_point)
        return self._join(self._generate_point(point, dimension) for point in points)

    def _generate_multi_line_string(
        self, multi_line_string: Any, dimension: Dimension
    ) -> str:
        lines = self.extractor.extract_line_strings_from_multi_line_string(
            multi_line_string
        )
        return self._join(self._generate_line_string(line, dimension) for line in lines)

    def _generate_multi_polygon(self, multi_polygon: Any, dimension: Dimension) -> str:
        polygons = self.extractor.extract_polygons_from_multi_polygon(multi_polygon)
        return self._join(
            self._generate_polygon(polygon, dimension) for polygon in polygons
        )

    def _generate_geometry_collection(
        self, geometry_collection: Any, dimension: Dimension
    ) -> str:
        # Members are tagged individually and report their own dimension
        geometries = self.extractor.extract_geometries_from_geometry_collection(
            geometry_collection
        )
        return self._join(
            self._generate_geometry(
                geometry, self.extractor.extract_dimension(geometry)
            )
            for geometry in geometries
        )
