"""Base value object - foundation for immutable domain objects."""
from abc import ABC

from pydantic import BaseModel, ConfigDict


class ValueObject(BaseModel, ABC):
    """
    Base class for immutable domain objects.

    Value objects are frozen after construction: every field is fixed by the
    constructor and attribute assignment raises a pydantic ``ValidationError``.
    Collaborators that are themselves plain domain objects (a receiver, a
    color) are held by reference, hence ``arbitrary_types_allowed``.
    """
    model_config = ConfigDict(
        frozen=True,
        arbitrary_types_allowed=True,
        extra="forbid",
    )
