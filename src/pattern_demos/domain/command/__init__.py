"""Command pattern: waiters (commands), a cooker (receiver) and an invoker."""

from .cooker import Cooker
from .invoker import Invoker
from .waiter import OrderCommand, TaxiCommand, Waiter, WaiterHandToCooker

__all__ = [
    "Waiter",
    "OrderCommand",
    "TaxiCommand",
    "WaiterHandToCooker",
    "Cooker",
    "Invoker",
]
