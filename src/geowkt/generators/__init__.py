"""Text generators."""

from .options import CaseTransform, Dialect, GeneratorOptions
from .wkt import WktGenerator

__all__ = ["CaseTransform", "Dialect", "GeneratorOptions", "WktGenerator"]
