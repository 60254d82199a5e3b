"""Geometry type tags, dimensionality and coordinate tuples."""

from __future__ import annotations

from dataclasses import dataclass
from enum import Enum
from typing import Self, Sequence

import numpy as np
from numpy.typing import NDArray


class GeometryType(Enum):
    """The seven standard geometry kinds.

    Values are the tags written into the generated text (in the readable
    mixed case; a case transform may fold them afterwards).
    """
    POINT = "Point"
    LINESTRING = "LineString"
    POLYGON = "Polygon"
    MULTIPOINT = "MultiPoint"
    MULTILINESTRING = "MultiLineString"
    MULTIPOLYGON = "MultiPolygon"
    GEOMETRYCOLLECTION = "GeometryCollection"

    @classmethod
    def parse(cls, name: GeometryType | str) -> GeometryType:
        """Look up a geometry type from its tag, ignoring case."""
        if isinstance(name, GeometryType):
            return name
        key = str(name).replace("_", "").lower()
        for member in cls:
            if member.value.lower() == key:
                return member
        raise ValueError(f"Unknown geometry type: {name}")


class Dimension(Enum):
    """Which of the optional Z and M ordinates a geometry carries."""
    XY = "2D"
    XYZ = "3DZ"
    XYM = "3DM"
    XYZM = "4D"

    @property
    def has_z(self) -> bool:
        return self in (Dimension.XYZ, Dimension.XYZM)

    @property
    def has_m(self) -> bool:
        return self in (Dimension.XYM, Dimension.XYZM)

    @property
    def ordinate_count(self) -> int:
        """Number of ordinates per coordinate (2, 3 or 4)."""
        return 2 + self.has_z + self.has_m

    @classmethod
    def from_flags(cls, has_z: bool, has_m: bool) -> Dimension:
        """Build a dimension from Z/M presence flags."""
        return DIMENSION_FLAGS[(bool(has_z), bool(has_m))]


# (has_z, has_m) -> Dimension
DIMENSION_FLAGS: dict[tuple[bool, bool], Dimension] = {
    (False, False): Dimension.XY,
    (True, False): Dimension.XYZ,
    (False, True): Dimension.XYM,
    (True, True): Dimension.XYZM,
}


@dataclass(frozen=True)
class Coordinates:
    """A single coordinate tuple.

    Any ordinate may be None when the source does not supply it; the
    generator renders missing ordinates as zero.
    """

    x: float | None = None
    y: float | None = None
    z: float | None = None
    m: float | None = None

    @classmethod
    def from_array(
        cls,
        values: NDArray[np.float64] | Sequence[float],
        dimension: Dimension,
    ) -> Self:
        """Create coordinates from a flat ordinate sequence.

        Ordinates are read in X, Y, [Z], [M] order according to the
        dimension, so a 3DM row ``(x, y, m)`` maps its third value to M.

        Args:
            values: Ordinate values for one coordinate
            dimension: Dimensionality describing the layout of values

        Returns:
            Coordinates with absent ordinates left as None
        """
        row = [float(v) for v in values]
        if len(row) < dimension.ordinate_count:
            raise ValueError(
                f"Expected {dimension.ordinate_count} ordinates for "
                f"{dimension.value}, got {len(row)}"
            )

        z = m = None
        idx = 2
        if dimension.has_z:
            z = row[idx]
            idx += 1
        if dimension.has_m:
            m = row[idx]

        return cls(x=row[0], y=row[1], z=z, m=m)

