"""CLI app entrypoint and error mapping."""

from __future__ import annotations

import asyncio
import logging
import sys

from manifestsync import ConfigError, ProjectManifestError, PromptError, TemplateRenderError
from manifestsync.cli.commands.check import run_check
from manifestsync.cli.parser import build_parser


def main(argv: list[str] | None = None) -> int:
    parser = build_parser()
    args = parser.parse_args(argv)

    if args.verbose:
        logging.basicConfig(level=logging.DEBUG, format="%(name)s %(message)s", stream=sys.stderr)

    try:
        if args.command == "check":
            asyncio.run(run_check(args))
        return 0
    except KeyboardInterrupt:
        print("\nAborted.", file=sys.stderr)
        return 2
    except (ConfigError, ProjectManifestError) as exc:
        print(f"error: {exc}", file=sys.stderr)
        return 3
    except TemplateRenderError as exc:
        print(f"error: {exc}", file=sys.stderr)
        return 4
    except PromptError as exc:
        print(f"error: {exc}", file=sys.stderr)
        return 5
    except Exception as exc:  # pragma: no cover - unexpected failure
        print(f"error: {exc}", file=sys.stderr)
        return 1


__all__ = ["main"]
