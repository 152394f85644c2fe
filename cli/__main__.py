#!/usr/bin/env python3
"""
eduadmin CLI - console for the dashboard's categories screen.

Usage:
    python -m cli <command> <subcommand> [options]

Commands:
    categories   List, inspect, toggle, delete, and import categories

Examples:
    python -m cli categories import response.json --country jo
    python -m cli categories list
    python -m cli categories list --search math --status active --page 2
    python -m cli categories toggle 12
"""

import sys
import argparse
from cli import categories
from config import load_config
from services.base import Services
from logger import setup_logging


def main():
    """Main CLI entry point with subcommands."""
    parser = argparse.ArgumentParser(
        prog="cli",
        description="eduadmin - Educational content dashboard console",
        formatter_class=argparse.RawDescriptionHelpFormatter,
    )

    subparsers = parser.add_subparsers(
        title="commands",
        description="Available commands",
        dest="command",
        required=True,
    )

    categories.setup_parser(subparsers)

    args = parser.parse_args()

    if hasattr(args, "func"):
        services = None
        try:
            config = load_config()
            setup_logging(config)

            # Application state lives for the duration of the command
            services = Services(config)
            args.func(args, services)
        except Exception as e:
            print(f"Error: {e}")
            sys.exit(1)
        finally:
            if services is not None:
                services.teardown()
    else:
        parser.print_help()
        sys.exit(1)


if __name__ == "__main__":
    main()
