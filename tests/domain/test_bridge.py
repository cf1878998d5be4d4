import pytest
from pydantic import ValidationError

from pattern_demos.domain.bridge import (
    Color,
    ExtendedAbstraction,
    Figure,
    Green,
    Material,
    Wood,
)


class Red(Color):

    def render(self) -> str:
        return "Red.\n"


class Stone(Material):

    def render(self) -> str:
        return "Stone.\n"


def test_implementations_render_fixed_text():
    assert Green().render() == "Green.\n"
    assert Wood().render() == "Wood.\n"


def test_figure_combines_color_and_material():
    assert Figure(Green(), Wood()).operation() == "Color:\nGreen.\n\nMaterial:\nWood.\n"


def test_extended_abstraction_uses_color_only():
    figure = ExtendedAbstraction(Green(), Wood())
    result = figure.operation()
    assert result == "ExtendedAbstraction: Extended operation with:\nGreen.\n"
    assert "Wood" not in result
    # the material is still held
    assert isinstance(figure.material, Wood)


def test_figures_accept_other_implementations():
    assert Figure(Red(), Stone()).operation() == "Color:\nRed.\n\nMaterial:\nStone.\n"
    assert ExtendedAbstraction(Red(), Stone()).operation().endswith("Red.\n")


def test_figure_keeps_implementation_instances():
    green, wood = Green(), Wood()
    figure = Figure(green, wood)
    assert figure.color is green
    assert figure.material is wood


@pytest.mark.parametrize("figure_cls", [Figure, ExtendedAbstraction])
def test_operation_is_repeatable(figure_cls):
    figure = figure_cls(Green(), Wood())
    assert figure.operation() == figure.operation()


def test_figure_is_frozen():
    figure = Figure(Green(), Wood())
    with pytest.raises(ValidationError):
        figure.color = Red()


def test_figure_rejects_swapped_implementations():
    with pytest.raises(ValidationError):
        Figure(Wood(), Green())


def test_implementation_interfaces_are_abstract():
    with pytest.raises(TypeError):
        Color()
    with pytest.raises(TypeError):
        Material()
