"""Check command handler and formatting."""

from __future__ import annotations

import argparse
import json

from pydantic import ValidationError

from manifestsync import Decision, ManifestSync, ManifestSyncConfig, ProjectManifestError, Prompter, load_config
from manifestsync.cli.common import format_dependency_count
from manifestsync.cli.project import read_project_manifest
from manifestsync.cli.prompt import QuestionaryPrompter, StaticPrompter
from manifestsync.core.contracts.manifest import Manifest


def format_check_summary(decision: Decision, *, project_path: str) -> str:
    lines = ["", f"manifestsync - check complete ({project_path})", ""]
    if not decision.mismatched_modules:
        lines.append("  Dependencies are in sync")
    else:
        action = "update" if decision.should_fix else "leave as is"
        lines.append(f"  Decision:  {action} {format_dependency_count(len(decision.mismatched_modules))}")
        lines.append("")
        for name, entry in decision.mismatched_modules.items():
            lines.append(f"  {name:<24} {entry.project:>12} -> {entry.required:<12} ({entry.type.value})")
    lines.append("")
    return "\n".join(lines)


def select_prompter(args: argparse.Namespace) -> Prompter:
    if args.yes:
        return StaticPrompter(True)
    if args.no:
        return StaticPrompter(False)
    return QuestionaryPrompter()


async def run_check(args: argparse.Namespace) -> Decision:
    config = load_config(args.config) if args.config else ManifestSyncConfig()
    payload = read_project_manifest(args.project)
    try:
        project = Manifest.from_project(payload)
    except ValidationError as exc:
        raise ProjectManifestError(f"invalid dependencies in {args.project}: {exc}") from exc

    client = ManifestSync.from_config(config, prompter=select_prompter(args))
    decision = await client.check_for_mismatch(project, args.dev)

    if args.json:
        print(json.dumps(decision.model_dump(mode="json", by_alias=True), indent=2))
    else:
        print(format_check_summary(decision, project_path=args.project))
    return decision


__all__ = ["format_check_summary", "run_check", "select_prompter"]
