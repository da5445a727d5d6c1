"""Main entry point for running the terminal as a module.

This allows running with: python -m wolf_terminal
"""

import argparse
import os
from typing import List, Optional

from . import __version__
from .config import CONFIG_PATH_ENV_VAR, get_cli_setting, load_cli_config
from .Utils.logging_config import LOG_LEVEL_ENV_VAR, configure_logging


def parse_args(argv: Optional[List[str]] = None) -> argparse.Namespace:
    parser = argparse.ArgumentParser(prog="wolf-terminal", description="A portfolio in a terminal.")
    parser.add_argument("--config", help="Path of a TOML config file to use")
    parser.add_argument("--log-level", help="Minimum log level (DEBUG, INFO, ...)")
    parser.add_argument("--log-file", help="Write logs to this file")
    parser.add_argument("--version", action="version", version=f"%(prog)s {__version__}")
    return parser.parse_args(argv)


def main(argv: Optional[List[str]] = None) -> None:
    """Run the terminal application."""
    args = parse_args(argv)
    if args.config:
        os.environ[CONFIG_PATH_ENV_VAR] = args.config
    load_cli_config(force_reload=True)

    # The TUI owns the terminal, so logs only go to a file
    configure_logging(
        level=args.log_level or os.environ.get(LOG_LEVEL_ENV_VAR) or get_cli_setting("logging", "log_level"),
        log_file=args.log_file or get_cli_setting("logging", "log_file") or None,
        console=False,
    )

    from .app import TerminalApp
    TerminalApp().run()


if __name__ == "__main__":
    main()
