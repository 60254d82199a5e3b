"""Extractors giving the generator read access to geometry objects."""

from .base import Extractor
from .native import GeometryExtractor
from .shapely_extractor import ShapelyExtractor

__all__ = ["Extractor", "GeometryExtractor", "ShapelyExtractor"]
