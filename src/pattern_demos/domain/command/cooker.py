"""Cooker - the receiver that does the real work behind a delegating command."""
from pattern_demos.domain.base.value_object import ValueObject


class Cooker(ValueObject):
    """Stateless receiver. Any number of commands may share one instance."""

    def cook_dish(self, dish: str) -> None:
        print(f"Cooker: Working on ({dish}.)")

    def cook_other(self, other: str) -> None:
        print(f"Cooker: Also working on ({other}.)")
