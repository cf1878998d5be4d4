"""
Implementation hierarchy of the bridge.

Implementations expose only a primitive ``render`` operation; figures build
their higher level text on top of it.
"""
from abc import abstractmethod

from pattern_demos.domain.base.value_object import ValueObject


class Color(ValueObject):
    """Color implementation interface."""

    @abstractmethod
    def render(self) -> str:
        pass


class Material(ValueObject):
    """Material implementation interface."""

    @abstractmethod
    def render(self) -> str:
        pass


class Green(Color):

    def render(self) -> str:
        return "Green.\n"


class Wood(Material):

    def render(self) -> str:
        return "Wood.\n"
