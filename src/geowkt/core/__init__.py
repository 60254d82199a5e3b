"""Core geometry model: type tags, dimensionality, coordinates and native geometries."""

from .types import Coordinates, Dimension, GeometryType
from . import geometry

__all__ = ["Coordinates", "Dimension", "GeometryType", "geometry"]
