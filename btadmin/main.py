"""Entry point for the application"""

import sys

from btadmin.cli.commands import run_cli
from btadmin.cli.parser import parse_args
from btadmin.logging_config import setup_logging


def main():
    """Main entry point"""
    args = parse_args()

    log_level = "DEBUG" if args.debug else "INFO"
    setup_logging(level=log_level, log_file=args.log_file, quiet=args.quiet)

    try:
        exit_code = run_cli(args)
    except KeyboardInterrupt:
        exit_code = 130
    sys.exit(exit_code)


if __name__ == "__main__":
    main()
