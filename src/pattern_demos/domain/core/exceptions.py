# src/pattern_demos/domain/core/exceptions.py
from typing import List, Optional


class DomainException(Exception):
    """Base exception for all domain-specific errors."""
    pass


class ConfigurationError(DomainException):
    """Raised when there's an issue with configuration."""
    def __init__(self, message: str, missing_fields: Optional[List[str]] = None):
        super().__init__(message)
        self.missing_fields = missing_fields or []


class InvalidCommandError(DomainException):
    """Raised when something other than a waiter command is given to an invoker."""
    def __init__(self, slot: str, value: object):
        super().__init__(
            f"Cannot assign {type(value).__name__} to invoker slot '{slot}': expected a Waiter"
        )
        self.slot = slot
        self.value = value


class UnknownDemoError(DomainException):
    """Raised when a demo name is not registered."""
    def __init__(self, name: str, available: Optional[List[str]] = None):
        available = available or []
        super().__init__(
            f"Unknown demo '{name}'. Available demos: {', '.join(available) or 'none'}"
        )
        self.name = name
        self.available = available
