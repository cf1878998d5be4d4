"""
Main CLI module with argument parsing and demo execution.

This module provides the command line interface including:
- Command line argument parsing
- Configuration and logging setup
- Demo lookup and execution
"""
import argparse
import os
import sys
from typing import Any, Dict, List, Optional

from pattern_demos._package import DESCRIPTION, VERSION
from pattern_demos.application.demos import available_demos, get_demo
from pattern_demos.config.manager import ConfigurationManager
from pattern_demos.config.schemas.logging_schema import LogLevel
from pattern_demos.domain.core.exceptions import DomainException
from pattern_demos.helpers.logger import get_logger, setup_logging

logger = get_logger(__name__)


def build_parser(demo: Optional[str] = None) -> argparse.ArgumentParser:
    """
    Build the argument parser.

    Args:
        demo: When given, the parser belongs to a single-demo entry point and
              takes no demo argument.
    """
    prog = os.path.basename(sys.argv[0]) if sys.argv and sys.argv[0] else "pattern-demos"
    parser = argparse.ArgumentParser(
        prog=prog,
        description=DESCRIPTION,
        formatter_class=argparse.RawDescriptionHelpFormatter,
        epilog="""
Examples:
  pattern-demos command              # Command pattern demo
  pattern-demos bridge --no-wait     # Bridge pattern demo, exit immediately
  command-demo --log-level DEBUG     # Command demo with diagnostics on stderr
        """,
    )

    if demo is None:
        parser.add_argument('demo', choices=available_demos(), help='Demo to run')

    parser.add_argument('--config', help='Configuration file path (JSON)')
    parser.add_argument('--log-level', choices=[level.value for level in LogLevel],
                        help='Set logging level')
    parser.add_argument('--no-wait', action='store_true',
                        help='Exit right after the demo instead of waiting for Enter')
    parser.add_argument('--version', action='version', version=f'%(prog)s {VERSION}')
    parser.set_defaults(fixed_demo=demo)
    return parser


def parse_args(argv: Optional[List[str]] = None, demo: Optional[str] = None) -> argparse.Namespace:
    """Parse command line arguments."""
    return build_parser(demo).parse_args(argv)


def _cli_overrides(args: argparse.Namespace) -> Dict[str, Any]:
    overrides: Dict[str, Any] = {}
    if args.log_level:
        overrides["logging"] = {"level": args.log_level}
    if args.no_wait:
        overrides["demo"] = {"wait_for_input": False}
    return overrides


def wait_for_enter(prompt: str = "") -> None:
    """Block until one line is read from stdin."""
    try:
        input(prompt)
    except EOFError:
        # stdin closed or redirected from an empty source
        logger.debug("No input available, not waiting")


def execute(args: argparse.Namespace) -> int:
    """Load configuration, set up logging and run the selected demo."""
    config_manager = ConfigurationManager(args.config)
    config_manager.update_config(_cli_overrides(args))
    config = config_manager.get_app_config()

    setup_logging(config.logging)

    name = args.fixed_demo or args.demo
    demo = get_demo(name)
    demo()
    logger.debug("Demo finished", demo=name)

    if config.demo.wait_for_input:
        wait_for_enter(config.demo.prompt)
    return 0


def main(argv: Optional[List[str]] = None, demo: Optional[str] = None) -> int:
    """Entry point for the umbrella ``pattern-demos`` command."""
    args = parse_args(argv, demo)
    # Schema defaults until the configuration is loaded, so early failures
    # are rendered like every other log record
    setup_logging()
    try:
        return execute(args)
    except DomainException as e:
        logger.error("Demo failed", error=str(e), error_type=type(e).__name__)
        print(f"Error: {e}", file=sys.stderr)
        return 1
    except KeyboardInterrupt:
        return 130


def command_demo() -> None:
    """Entry point for ``command-demo``."""
    sys.exit(main(demo="command"))


def bridge_demo() -> None:
    """Entry point for ``bridge-demo``."""
    sys.exit(main(demo="bridge"))


def run() -> None:
    """Entry point for ``pattern-demos``."""
    sys.exit(main())


if __name__ == "__main__":
    run()
