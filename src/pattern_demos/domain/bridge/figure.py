"""Abstraction hierarchy of the bridge."""
from pattern_demos.domain.base.value_object import ValueObject
from pattern_demos.domain.bridge.implementation import Color, Material
from pattern_demos.helpers.logger import get_logger

logger = get_logger(__name__)


class Figure(ValueObject):
    """
    Abstraction holding a color and a material implementation.

    The figure does no rendering of its own: :meth:`operation` delegates to
    both implementations and only arranges their text under headers.
    """

    color: Color
    material: Material

    def __init__(self, color: Color, material: Material, **data):
        super().__init__(color=color, material=material, **data)

    def operation(self) -> str:
        logger.debug("Rendering figure", figure=type(self).__name__)
        return (
            "Color:\n" + self.color.render() + "\n"
            + "Material:\n" + self.material.render()
        )


class ExtendedAbstraction(Figure):
    """Figure variant that reports its color only."""

    def operation(self) -> str:
        logger.debug("Rendering figure", figure=type(self).__name__)
        return "ExtendedAbstraction: Extended operation with:\n" + self.color.render()
