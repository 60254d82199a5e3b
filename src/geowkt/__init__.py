"""Well-Known Text generation for arbitrary geometry representations."""

from .core.types import Coordinates, Dimension, GeometryType
from .exceptions import GenerationError, GeowktError, InvalidOptionError
from .extractors import Extractor, GeometryExtractor, ShapelyExtractor
from .generators import CaseTransform, Dialect, GeneratorOptions, WktGenerator

__all__ = [
    "CaseTransform",
    "Coordinates",
    "Dialect",
    "Dimension",
    "Extractor",
    "GenerationError",
    "GeneratorOptions",
    "GeometryExtractor",
    "GeometryType",
    "GeowktError",
    "InvalidOptionError",
    "ShapelyExtractor",
    "WktGenerator",
]
