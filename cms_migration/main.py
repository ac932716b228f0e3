"""
Main CLI Interface

Command-line entry point that configures logging and runs the migration.
The page list is built in, so the command takes no arguments.
"""

import logging
import os
import sys

from rich.console import Console
from rich.logging import RichHandler

from .config.settings import get_settings
from .migration import CMSMigration

console = Console()


def setup_logging(level=logging.INFO):
    """
    Set up logging with rich handler.

    Args:
        level: Logging level (default: INFO)
    """
    logging.basicConfig(
        level=level,
        format="%(message)s",
        handlers=[RichHandler(console=console, show_path=False)]
    )


def is_command_line():
    """
    Check whether the process was started from a command line.

    Returns:
        bool: False under a CGI-style server or an embedded interpreter without argv
    """
    if os.environ.get('GATEWAY_INTERFACE'):
        return False
    return bool(getattr(sys, 'argv', None))


def main():
    """Main CLI entry point."""
    if not is_command_line():
        print("This script must be run from the command line.")
        sys.exit(1)

    settings = get_settings()
    setup_logging(getattr(logging, settings.log_level.upper(), logging.INFO))

    CMSMigration(settings, console=console).run()


if __name__ == '__main__':
    main()
