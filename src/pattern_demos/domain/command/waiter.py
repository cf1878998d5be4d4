"""Waiter commands.

A waiter command wraps a single ``speak`` action. Simple commands carry their
own payload and print it; :class:`WaiterHandToCooker` delegates the work to a
:class:`~pattern_demos.domain.command.cooker.Cooker` receiver.
"""
from abc import abstractmethod

from pattern_demos.domain.base.value_object import ValueObject
from pattern_demos.domain.command.cooker import Cooker


class Waiter(ValueObject):
    """Command interface."""

    @abstractmethod
    def speak(self) -> None:
        """Perform the command, writing its lines to stdout."""
        pass


class OrderCommand(Waiter):
    """Waiter taking an order."""

    payload: str

    def __init__(self, payload: str, **data):
        super().__init__(payload=payload, **data)

    def speak(self) -> None:
        print(f"Waiter: {self.payload}")


class TaxiCommand(Waiter):
    """Taxi announcement."""

    payload: str

    def __init__(self, payload: str, **data):
        super().__init__(payload=payload, **data)

    def speak(self) -> None:
        print(f"Taxi: {self.payload}")


class WaiterHandToCooker(Waiter):
    """Waiter handing an order over to the cooker."""

    cooker: Cooker
    dish: str
    other: str

    def __init__(self, cooker: Cooker, dish: str, other: str, **data):
        super().__init__(cooker=cooker, dish=dish, other=other, **data)

    def speak(self) -> None:
        print("Waiter hended the order to cooker")
        self.cooker.cook_dish(self.dish)
        self.cooker.cook_other(self.other)
