"""Configuration schemas."""

from .app_schema import AppConfig
from .demo_schema import DemoConfig
from .logging_schema import LogDestination, LoggingConfig, LogLevel

__all__ = ["AppConfig", "DemoConfig", "LoggingConfig", "LogLevel", "LogDestination"]
