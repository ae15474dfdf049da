"""
Show the effective run configuration.

Loads the given YAML file over the defaults and prints the result in the
same document shape, so a test directory's settings can be checked before
a run.

Usage:
    python -m yaks_config [PATH] [--dir DIR] [--log-level LEVEL]
"""

from __future__ import annotations

import argparse
import sys

import yaml

from yaks_config.config.config_loader import (
    DEFAULT_CONFIG_FILE,
    config_file_for,
    load_config,
)
from yaks_config.utils.errors import ConfigError
from yaks_config.utils.logging import get_logger, setup_logging, shutdown_logging

logger = get_logger(__name__)


def build_parser() -> argparse.ArgumentParser:
    parser = argparse.ArgumentParser(
        prog="yaks-config",
        description="Print the effective run configuration as YAML",
        epilog=f"""
Examples:
  %(prog)s                       # reads ./{DEFAULT_CONFIG_FILE}
  %(prog)s tests/{DEFAULT_CONFIG_FILE}
  %(prog)s --dir tests/          # reads tests/{DEFAULT_CONFIG_FILE}
        """,
        formatter_class=argparse.RawDescriptionHelpFormatter,
    )

    parser.add_argument(
        "path",
        nargs="?",
        help=f"Configuration file (default: {DEFAULT_CONFIG_FILE})",
    )
    parser.add_argument(
        "--dir",
        metavar="DIR",
        help=f"Test directory holding a {DEFAULT_CONFIG_FILE}",
    )
    parser.add_argument(
        "--log-level",
        default="WARNING",
        help="Logging level for diagnostics on stderr (default: WARNING)",
    )
    return parser


def main(argv: list[str] | None = None) -> int:
    """Main function to run the config viewer."""
    parser = build_parser()
    args = parser.parse_args(argv)
    if args.path and args.dir:
        parser.error("PATH and --dir are mutually exclusive")
    setup_logging(args.log_level)

    if args.dir:
        config_path = str(config_file_for(args.dir))
    else:
        config_path = args.path or DEFAULT_CONFIG_FILE

    try:
        run_config = load_config(config_path)
    except ConfigError as e:
        logger.error("%s", e, extra={"config_path": config_path})
        return 1
    finally:
        shutdown_logging()

    yaml.safe_dump(run_config.to_dict(), sys.stdout, sort_keys=False)
    return 0


if __name__ == "__main__":
    sys.exit(main())
