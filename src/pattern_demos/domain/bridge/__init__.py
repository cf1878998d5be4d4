"""Bridge pattern: figures (abstraction) composed with colors and materials
(implementation)."""

from .figure import ExtendedAbstraction, Figure
from .implementation import Color, Green, Material, Wood

__all__ = ["Figure", "ExtendedAbstraction", "Color", "Material", "Green", "Wood"]
