"""Command-line interface for manifestsync."""

from __future__ import annotations

from manifestsync.cli.app import main
from manifestsync.cli.parser import build_parser

__all__ = ["build_parser", "main"]
