"""Pattern Demos - Root Package.

Two small console programs illustrating classic object-oriented design
patterns:

Key Components:
    - domain.command: Command pattern (waiters, a cooker receiver, an invoker)
    - domain.bridge: Bridge pattern (figures composed with colors and materials)
    - application: demo scenarios and the bridge client
    - config: pydantic configuration schemas and the configuration manager
    - cli: command line entry points

Usage:
    >>> pattern-demos command
    >>> pattern-demos bridge --no-wait
"""

from ._package import PACKAGE_NAME, __version__

__package_name__ = PACKAGE_NAME
