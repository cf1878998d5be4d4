import pytest

from pattern_demos.application.client import Client
from pattern_demos.application.demos import (
    DEMOS,
    available_demos,
    build_invoker,
    get_demo,
    run_bridge_demo,
    run_command_demo,
)
from pattern_demos.domain.bridge import ExtendedAbstraction, Figure, Green, Wood
from pattern_demos.domain.command import OrderCommand, TaxiCommand, WaiterHandToCooker
from pattern_demos.domain.core.exceptions import UnknownDemoError


def test_client_writes_operation_verbatim(capsys):
    Client().run(Figure(Green(), Wood()))
    assert capsys.readouterr().out == "Color:\nGreen.\n\nMaterial:\nWood.\n"


def test_client_adds_nothing_to_extended_output(capsys):
    Client().run(ExtendedAbstraction(Green(), Wood()))
    assert capsys.readouterr().out == "ExtendedAbstraction: Extended operation with:\nGreen.\n"


def test_build_invoker_wiring():
    invoker = build_invoker()
    assert isinstance(invoker.on_start, OrderCommand)
    assert invoker.on_start.payload == "Say Hi!"
    assert isinstance(invoker.on_process, WaiterHandToCooker)
    assert (invoker.on_process.dish, invoker.on_process.other) == ("Make fish", "Make meat")
    assert isinstance(invoker.on_finish, TaxiCommand)


def test_command_demo_output(capsys, command_demo_output):
    run_command_demo()
    out = capsys.readouterr().out
    assert out == command_demo_output
    assert len(out.splitlines()) == 8


def test_bridge_demo_output(capsys, bridge_demo_output):
    run_bridge_demo()
    assert capsys.readouterr().out == bridge_demo_output


def test_registry_lists_both_demos():
    assert available_demos() == ["bridge", "command"]
    assert get_demo("command") is run_command_demo
    assert get_demo("bridge") is run_bridge_demo


def test_unknown_demo():
    with pytest.raises(UnknownDemoError) as exc:
        get_demo("observer")
    assert exc.value.name == "observer"
    assert exc.value.available == sorted(DEMOS)
    assert "observer" in str(exc.value)
