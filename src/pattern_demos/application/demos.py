"""Demo scenarios and the registry the CLI looks them up in."""
from typing import Callable, Dict, List

from pattern_demos.application.client import Client
from pattern_demos.domain.bridge import ExtendedAbstraction, Figure, Green, Wood
from pattern_demos.domain.command import (
    Cooker,
    Invoker,
    OrderCommand,
    TaxiCommand,
    WaiterHandToCooker,
)
from pattern_demos.domain.core.exceptions import UnknownDemoError
from pattern_demos.helpers.logger import get_logger

logger = get_logger(__name__)

Demo = Callable[[], None]


def build_invoker() -> Invoker:
    """Return an invoker parameterized with the restaurant scenario's commands."""
    invoker = Invoker()
    invoker.set_on_start(OrderCommand("Say Hi!"))

    receiver = Cooker()
    invoker.set_on_process(WaiterHandToCooker(receiver, "Make fish", "Make meat"))

    invoker.set_on_finish(TaxiCommand("Taxi is driving to client"))
    return invoker


def run_command_demo() -> None:
    """Command pattern: a client visit narrated around three waiter commands."""
    logger.info("Running demo", demo="command")
    build_invoker().run()


def run_bridge_demo() -> None:
    """Bridge pattern: the same color and material behind two figure variants."""
    logger.info("Running demo", demo="bridge")
    client = Client()

    client.run(Figure(Green(), Wood()))
    print()
    client.run(ExtendedAbstraction(Green(), Wood()))


DEMOS: Dict[str, Demo] = {
    "command": run_command_demo,
    "bridge": run_bridge_demo,
}


def available_demos() -> List[str]:
    """Return the registered demo names in sorted order."""
    return sorted(DEMOS)


def get_demo(name: str) -> Demo:
    """
    Look up a demo by name.

    Raises:
        UnknownDemoError: If no demo is registered under ``name``
    """
    try:
        return DEMOS[name]
    except KeyError:
        raise UnknownDemoError(name, available_demos()) from None
