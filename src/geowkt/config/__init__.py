"""YAML loaders for option profiles and geometry documents."""

from .geometry import GeometryLoader
from .profiles import ProfileLoader

__all__ = ["GeometryLoader", "ProfileLoader"]
