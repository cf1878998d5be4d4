"""Configuration package.

The configuration manager lives in :mod:`pattern_demos.config.manager`; it is
not re-exported here because the logging helpers import the schemas from this
package.
"""

from .schemas import AppConfig, DemoConfig, LoggingConfig

__all__ = ["AppConfig", "DemoConfig", "LoggingConfig"]
