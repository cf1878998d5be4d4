"""Invoker - triggers waiter commands without knowing their concrete types."""
from typing import Optional

from pattern_demos.domain.command.waiter import Waiter
from pattern_demos.domain.core.exceptions import InvalidCommandError
from pattern_demos.helpers.logger import get_logger

logger = get_logger(__name__)


class Invoker:
    """
    Holds up to three commands and runs them around the client's narration.

    Each slot is independent and empty until assigned. Empty slots are
    skipped by :meth:`run`.
    """

    def __init__(self):
        self._on_start: Optional[Waiter] = None
        self._on_process: Optional[Waiter] = None
        self._on_finish: Optional[Waiter] = None

    @property
    def on_start(self) -> Optional[Waiter]:
        return self._on_start

    @property
    def on_process(self) -> Optional[Waiter]:
        return self._on_process

    @property
    def on_finish(self) -> Optional[Waiter]:
        return self._on_finish

    @staticmethod
    def _check(slot: str, command: Optional[Waiter]) -> Optional[Waiter]:
        if command is not None and not isinstance(command, Waiter):
            raise InvalidCommandError(slot, command)
        return command

    def set_on_start(self, command: Optional[Waiter]) -> None:
        self._on_start = self._check("on_start", command)

    def set_on_process(self, command: Optional[Waiter]) -> None:
        self._on_process = self._check("on_process", command)

    def set_on_finish(self, command: Optional[Waiter]) -> None:
        self._on_finish = self._check("on_finish", command)

    def _invoke(self, slot: str, command: Optional[Waiter]) -> None:
        if command is None:
            logger.debug("Slot empty, skipping", slot=slot)
            return
        logger.debug("Invoking command", slot=slot, command=type(command).__name__)
        command.speak()

    def run(self) -> None:
        """Narrate the visit, invoking start, process and finish in that order."""
        print("Client: Hello")
        self._invoke("on_start", self._on_start)

        print("Cleint: I am waiting")
        self._invoke("on_process", self._on_process)

        print("Client: I need a taxi")
        self._invoke("on_finish", self._on_finish)
