"""CLI parser construction."""

from __future__ import annotations

import argparse

from manifestsync import __version__


def build_parser() -> argparse.ArgumentParser:
    parser = argparse.ArgumentParser(prog="manifestsync")
    parser.add_argument("--version", action="version", version=f"%(prog)s {__version__}")

    subparsers = parser.add_subparsers(dest="command", required=True)

    check_parser = subparsers.add_parser(
        "check", help="Compare a project's package.json with the one a new project would get"
    )
    check_parser.add_argument("--project", default="./package.json", help="Path to the project package.json")
    check_parser.add_argument("--config", default=None, help="Path to manifestsync.json")
    check_parser.add_argument(
        "--dev",
        action="store_true",
        help="Developing against a local build of manifestsync (skips its own unpinned dependency)",
    )
    answer = check_parser.add_mutually_exclusive_group()
    answer.add_argument("--yes", "-y", action="store_true", help="Accept fixes without prompting")
    answer.add_argument("--no", action="store_true", help="Decline fixes without prompting")
    check_parser.add_argument("--json", action="store_true", help="Print the decision as JSON")
    check_parser.add_argument("--verbose", "-v", action="store_true", help="Enable debug logging")

    return parser


__all__ = ["build_parser"]
