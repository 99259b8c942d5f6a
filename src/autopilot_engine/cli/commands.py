"""Autopilot CLI commands."""

import argparse
import json

from autopilot_engine.config import load_config
from autopilot_engine.errors import NotActivated
from autopilot_engine.session.controller import AutopilotSession
from autopilot_engine.session.registry import load_active_root, save_active_root


def _session(args: argparse.Namespace) -> AutopilotSession:
    return AutopilotSession(load_config(args.config))


def _bound_session(args: argparse.Namespace) -> AutopilotSession:
    session = _session(args)
    root = args.root or load_active_root()
    if root is None:
        raise NotActivated(None, "No project activated. Run 'autopilot activate <root>' first.")
    session.bind(root)
    return session


def cmd_activate(args: argparse.Namespace) -> int:
    session = _session(args)
    result = session.activate(args.root)
    save_active_root(result.root, result.count)
    print(result.summary())
    return 0


def cmd_enable(args: argparse.Namespace) -> int:
    session = _bound_session(args)
    session.enable()
    print(f"Autopilot enabled in {session.root}")
    return 0


def cmd_disable(args: argparse.Namespace) -> int:
    session = _bound_session(args)
    session.disable()
    print(f"Autopilot disabled in {session.root}")
    return 0


def cmd_status(args: argparse.Namespace) -> int:
    session = _bound_session(args)
    info = session.status()

    if args.json:
        print(json.dumps(info, indent=2))
        return 0

    print(f"Autopilot status: {info['root']}")
    print("─" * 40)
    print(f"  Live mode: {info['mode']}")
    for name, entry in info["files"].items():
        size = f"{entry['size']} bytes" if entry["exists"] else "missing"
        print(f"  {name:<9} {size}")
    return 0
