"""Command-line interface for autopilot-engine.

Usage:
    autopilot activate <root>
    autopilot enable [--root <path>]
    autopilot disable [--root <path>]
    autopilot status [--root <path>] [--json]
"""

import argparse
import logging
import os
import sys

from autopilot_engine.cli.commands import (
    cmd_activate,
    cmd_disable,
    cmd_enable,
    cmd_status,
)
from autopilot_engine.errors import AutopilotError


def _configure_logging(verbose: int) -> None:
    if verbose >= 2:
        level = logging.DEBUG
    elif verbose == 1:
        level = logging.INFO
    else:
        level = getattr(
            logging, os.environ.get("AUTOPILOT_LOG_LEVEL", "WARNING").upper(), logging.WARNING,
        )
    logging.basicConfig(
        level=level,
        format="%(asctime)s %(levelname)s %(name)s: %(message)s",
    )


def build_parser() -> argparse.ArgumentParser:
    parser = argparse.ArgumentParser(
        prog="autopilot",
        description="Toggle the autopilot camera sequence in a tour project",
    )
    parser.add_argument(
        "--config", default=None,
        help="Path to autopilot.yaml (default: $AUTOPILOT_CONFIG)",
    )
    parser.add_argument(
        "-v", "--verbose", action="count", default=0,
        help="Increase log output (-v info, -vv debug)",
    )
    sub = parser.add_subparsers(dest="command")

    act = sub.add_parser(
        "activate", help="Bind a project folder and build the autopilot script",
    )
    act.add_argument("root", help="Project folder containing script_general.js")

    en = sub.add_parser("enable", help="Make the autopilot script live")
    en.add_argument(
        "--root", default=None,
        help="Project folder (default: last activated)",
    )

    dis = sub.add_parser("disable", help="Restore the original script")
    dis.add_argument(
        "--root", default=None,
        help="Project folder (default: last activated)",
    )

    st = sub.add_parser("status", help="Show which script variant is live")
    st.add_argument(
        "--root", default=None,
        help="Project folder (default: last activated)",
    )
    st.add_argument(
        "--json", action="store_true",
        help="Output machine-readable JSON",
    )

    return parser


def main(argv: list[str] | None = None) -> int:
    parser = build_parser()
    args = parser.parse_args(argv)

    if not args.command:
        parser.print_help()
        return 0

    _configure_logging(args.verbose)

    dispatch = {
        "activate": cmd_activate,
        "enable": cmd_enable,
        "disable": cmd_disable,
        "status": cmd_status,
    }
    try:
        return dispatch[args.command](args)
    except AutopilotError as e:
        print(f"ERROR: {e}", file=sys.stderr)
        return 1


if __name__ == "__main__":
    sys.exit(main())
