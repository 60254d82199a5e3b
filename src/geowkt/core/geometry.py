"""Native geometry classes backed by numpy coordinate arrays.

These are a small, self-contained geometry model used by the YAML loader
and the command line tool. The generator never depends on them directly;
it reads them through ``GeometryExtractor`` like any other representation.

Example:
    square = Polygon(rings=[
        LineString([[0, 0], [4, 0], [4, 4], [0, 4], [0, 0]]),
    ])
    mixed = GeometryCollection(geometries=[Point([1, 2]), square])
"""

from __future__ import annotations

from abc import ABC, abstractmethod
from dataclasses import dataclass, field
from typing import ClassVar, Iterator

import numpy as np
from numpy.typing import NDArray

from .types import Coordinates, Dimension, GeometryType


@dataclass(kw_only=True)
class Geometry(ABC):
    """Base class for native geometries.

    Attributes:
        dimension: Which ordinates each coordinate carries
        srid: Optional spatial reference identifier
    """

    geometry_type: ClassVar[GeometryType]

    dimension: Dimension = Dimension.XY
    srid: int | None = None

    @property
    @abstractmethod
    def is_empty(self) -> bool:
        """True when the geometry has no coordinates or no members."""

    def children(self) -> list[Geometry]:
        """Direct child geometries (empty for points and line strings)."""
        return []

    def iter_geometries(self, include_self: bool = True) -> Iterator[Geometry]:
        """Iterate over this geometry and all descendants (depth-first).

        Args:
            include_self: Whether to include this geometry in the iteration

        Yields:
            Geometry instances
        """
        if include_self:
            yield self
        for child in self.children():
            yield from child.iter_geometries(include_self=True)


def _as_coordinate_array(values, dimension: Dimension, ndim: int) -> NDArray[np.float64]:
    try:
        arr = np.asarray(values, dtype=np.float64)
    except (TypeError, ValueError) as e:
        raise ValueError(f"Invalid coordinate values: {e}") from e
    if ndim == 2 and arr.size == 0:
        arr = arr.reshape(0, dimension.ordinate_count)
    if arr.ndim != ndim or arr.shape[-1] != dimension.ordinate_count:
        raise ValueError(
            f"Coordinate array of shape {arr.shape} does not match "
            f"dimension {dimension.value} ({dimension.ordinate_count} ordinates)"
        )
    return arr


@dataclass(kw_only=True, eq=False)
class Point(Geometry):
    """A single position, or an empty point when ``coords`` is None."""

    geometry_type: ClassVar[GeometryType] = GeometryType.POINT

    coords: NDArray[np.float64] | None = field(default=None, kw_only=False)

    def __post_init__(self) -> None:
        if self.coords is not None:
            self.coords = _as_coordinate_array(self.coords, self.dimension, 1)

    @property
    def is_empty(self) -> bool:
        return self.coords is None

    @property
    def coordinates(self) -> Coordinates | None:
        """The point's coordinate tuple, or None for an empty point."""
        if self.coords is None:
            return None
        return Coordinates.from_array(self.coords, self.dimension)


@dataclass(kw_only=True, eq=False)
class LineString(Geometry):
    """An ordered sequence of positions stored as an (N, k) array."""

    geometry_type: ClassVar[GeometryType] = GeometryType.LINESTRING

    coords: NDArray[np.float64] = field(default=(), kw_only=False)

    def __post_init__(self) -> None:
        self.coords = _as_coordinate_array(self.coords, self.dimension, 2)

    @property
    def is_empty(self) -> bool:
        return len(self.coords) == 0

    def points(self) -> list[Point]:
        """The line string's positions as individual points."""
        return [Point(row, dimension=self.dimension) for row in self.coords]


@dataclass(kw_only=True)
class Polygon(Geometry):
    """A polygon: the first ring is the exterior, the rest are holes."""

    geometry_type: ClassVar[GeometryType] = GeometryType.POLYGON

    rings: list[LineString] = field(default_factory=list)

    @property
    def is_empty(self) -> bool:
        return not self.rings

    def children(self) -> list[Geometry]:
        return list(self.rings)


@dataclass(kw_only=True)
class MultiPoint(Geometry):
    geometry_type: ClassVar[GeometryType] = GeometryType.MULTIPOINT

    points: list[Point] = field(default_factory=list)

    @property
    def is_empty(self) -> bool:
        return not self.points

    def children(self) -> list[Geometry]:
        return list(self.points)


@dataclass(kw_only=True)
class MultiLineString(Geometry):
    geometry_type: ClassVar[GeometryType] = GeometryType.MULTILINESTRING

    lines: list[LineString] = field(default_factory=list)

    @property
    def is_empty(self) -> bool:
        return not self.lines

    def children(self) -> list[Geometry]:
        return list(self.lines)


@dataclass(kw_only=True)
class MultiPolygon(Geometry):
    geometry_type: ClassVar[GeometryType] = GeometryType.MULTIPOLYGON

    polygons: list[Polygon] = field(default_factory=list)

    @property
    def is_empty(self) -> bool:
        return not self.polygons

    def children(self) -> list[Geometry]:
        return list(self.polygons)


@dataclass(kw_only=True)
class GeometryCollection(Geometry):
    """A heterogeneous collection.

    Members keep their own dimension, independent of the collection's.
    """

    geometry_type: ClassVar[GeometryType] = GeometryType.GEOMETRYCOLLECTION

    geometries: list[Geometry] = field(default_factory=list)

    def add(self, geometry: Geometry) -> Geometry:
        """Append a member geometry.

        Returns:
            The added geometry (for chaining)
        """
        self.geometries.append(geometry)
        return geometry

    @property
    def is_empty(self) -> bool:
        return not self.geometries

    def children(self) -> list[Geometry]:
        return list(self.geometries)

