"""Package metadata and naming constants."""

from importlib.metadata import PackageNotFoundError, version

PACKAGE_NAME = "pattern-demos"
PACKAGE_NAME_PYTHON = PACKAGE_NAME.replace("-", "_")
DESCRIPTION = "Console demonstrations of the Command and Bridge design patterns"

try:
    __version__ = version(PACKAGE_NAME)
except PackageNotFoundError:
    # Running from a source checkout without an installed distribution
    __version__ = "0.0.0"

VERSION = __version__

# Environment variable prefix for configuration overrides
ENV_PREFIX = PACKAGE_NAME_PYTHON.upper()
