import pytest

from pattern_demos.domain.command import (
    Cooker,
    Invoker,
    OrderCommand,
    TaxiCommand,
    WaiterHandToCooker,
)
from pattern_demos.domain.core.exceptions import DomainException, InvalidCommandError

NARRATION = ["Client: Hello", "Cleint: I am waiting", "Client: I need a taxi"]


def test_empty_invoker_prints_only_narration(capsys):
    invoker = Invoker()
    invoker.run()
    assert capsys.readouterr().out.splitlines() == NARRATION


def test_slots_start_empty():
    invoker = Invoker()
    assert invoker.on_start is None
    assert invoker.on_process is None
    assert invoker.on_finish is None


def test_fully_wired_invoker(capsys):
    invoker = Invoker()
    invoker.set_on_start(OrderCommand("Say Hi!"))
    invoker.set_on_process(WaiterHandToCooker(Cooker(), "Make fish", "Make meat"))
    invoker.set_on_finish(TaxiCommand("Taxi is driving to client"))

    invoker.run()

    assert capsys.readouterr().out.splitlines() == [
        "Client: Hello",
        "Waiter: Say Hi!",
        "Cleint: I am waiting",
        "Waiter hended the order to cooker",
        "Cooker: Working on (Make fish.)",
        "Cooker: Also working on (Make meat.)",
        "Client: I need a taxi",
        "Taxi: Taxi is driving to client",
    ]


def test_only_finish_assigned(capsys):
    invoker = Invoker()
    invoker.set_on_finish(TaxiCommand("On the way"))
    invoker.run()
    assert capsys.readouterr().out.splitlines() == NARRATION + ["Taxi: On the way"]


def test_slot_can_be_reassigned_and_cleared(capsys):
    invoker = Invoker()
    invoker.set_on_start(OrderCommand("first"))
    invoker.set_on_start(OrderCommand("second"))
    invoker.run()
    assert "Waiter: second" in capsys.readouterr().out

    invoker.set_on_start(None)
    invoker.run()
    assert capsys.readouterr().out.splitlines() == NARRATION


def test_non_waiter_is_rejected():
    invoker = Invoker()
    with pytest.raises(InvalidCommandError) as exc:
        invoker.set_on_process(lambda: print("sneaky"))
    assert exc.value.slot == "on_process"
    assert isinstance(exc.value, DomainException)
    assert invoker.on_process is None


def test_run_is_repeatable(capsys):
    invoker = Invoker()
    invoker.set_on_start(OrderCommand("Say Hi!"))
    invoker.run()
    first = capsys.readouterr().out
    invoker.run()
    assert capsys.readouterr().out == first
