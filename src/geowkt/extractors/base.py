"""Protocol describing read access to an arbitrary geometry representation."""

from typing import Any, Iterable, Protocol, runtime_checkable

from ..core.types import Coordinates, Dimension, GeometryType


@runtime_checkable
class Extractor(Protocol):
    """Protocol for geometry extractors.

    An extractor knows how to pull structure out of one family of geometry
    objects. Any class providing these methods satisfies the protocol; the
    generator only ever talks to geometries through it. Any exception raised
    here surfaces from ``WktGenerator.generate`` as a ``GenerationError``.
    """

    def extract_type(self, geometry: Any) -> GeometryType:
        """Return the geometry's type tag."""
        ...

    def extract_dimension(self, geometry: Any) -> Dimension:
        """Return which of Z and M the geometry carries."""
        ...

    def extract_srid(self, geometry: Any) -> int | None:
        """Return the spatial reference identifier, or None."""
        ...

    def extract_coordinates_from_point(self, point: Any) -> Coordinates | None:
        """Return a point's coordinates, or None for an empty point."""
        ...

    def extract_points_from_line_string(self, line_string: Any) -> Iterable[Any]:
        ...

    def extract_line_strings_from_polygon(self, polygon: Any) -> Iterable[Any]:
        """Return the polygon's rings, exterior first."""
        ...

    def extract_points_from_multi_point(self, multi_point: Any) -> Iterable[Any]:
        ...

    def extract_line_strings_from_multi_line_string(
        self, multi_line_string: Any
    ) -> Iterable[Any]:
        ...

    def extract_polygons_from_multi_polygon(self, multi_polygon: Any) -> Iterable[Any]:
        ...

    def extract_geometries_from_geometry_collection(
        self, geometry_collection: Any
    ) -> Iterable[Any]:
        ...
