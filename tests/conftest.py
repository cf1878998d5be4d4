import logging
import os

import pytest


@pytest.fixture(autouse=True)
def clean_environment(monkeypatch):
    """Keep the developer's own PATTERN_DEMOS_* settings out of the tests."""
    for name in list(os.environ):
        if name.startswith("PATTERN_DEMOS_"):
            monkeypatch.delenv(name, raising=False)


@pytest.fixture(autouse=True)
def restore_root_logger():
    """setup_logging replaces root handlers; put the originals back."""
    root_logger = logging.getLogger()
    handlers = root_logger.handlers[:]
    level = root_logger.level
    yield
    for handler in root_logger.handlers[:]:
        if handler not in handlers:
            handler.close()
        root_logger.removeHandler(handler)
    for handler in handlers:
        root_logger.addHandler(handler)
    root_logger.setLevel(level)


COMMAND_DEMO_OUTPUT = (
    "Client: Hello\n"
    "Waiter: Say Hi!\n"
    "Cleint: I am waiting\n"
    "Waiter hended the order to cooker\n"
    "Cooker: Working on (Make fish.)\n"
    "Cooker: Also working on (Make meat.)\n"
    "Client: I need a taxi\n"
    "Taxi: Taxi is driving to client\n"
)

BRIDGE_DEMO_OUTPUT = (
    "Color:\nGreen.\n\nMaterial:\nWood.\n"
    "\n"
    "ExtendedAbstraction: Extended operation with:\nGreen.\n"
)


@pytest.fixture
def command_demo_output():
    return COMMAND_DEMO_OUTPUT


@pytest.fixture
def bridge_demo_output():
    return BRIDGE_DEMO_OUTPUT
