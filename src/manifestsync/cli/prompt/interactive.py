"""Interactive prompter built on questionary and Rich."""

from __future__ import annotations

import sys

import questionary
from rich.console import Console

from manifestsync.cli.common import build_report_table, format_dependency_count
from manifestsync.core.contracts.exceptions import PromptError
from manifestsync.core.contracts.manifest import Decision, MismatchReport
from manifestsync.core.contracts.prompter import Prompter


class QuestionaryPrompter(Prompter):
    """Show the report as a table, then ask whether (and what) to fix.

    Answering ``None`` (Ctrl-C, closed input) is an error, never an implicit "no".
    """

    def __init__(self, *, console: Console | None = None, allow_deselect: bool = True) -> None:
        self._console = console or Console(stderr=True)
        self._allow_deselect = allow_deselect

    async def prompt(self, report: MismatchReport) -> Decision:
        if not sys.stdin.isatty():
            raise PromptError("stdin is not interactive; rerun with --yes or --no")

        self._console.print(build_report_table(report))
        should_fix = await questionary.confirm(
            f"Update {format_dependency_count(len(report))} to match this version of manifestsync?",
            default=True,
        ).ask_async()
        if should_fix is None:
            raise PromptError("Aborted dependency update prompt")
        if not should_fix:
            return Decision(should_fix=False, mismatched_modules=dict(report))
        if not self._allow_deselect or len(report) == 1:
            return Decision(should_fix=True, mismatched_modules=dict(report))

        selected = await questionary.checkbox(
            "Deselect dependencies to leave untouched:",
            choices=[
                questionary.Choice(f"{name} ({entry.project} -> {entry.required})", value=name, checked=True)
                for name, entry in report.items()
            ],
        ).ask_async()
        if selected is None:
            raise PromptError("Aborted dependency selection")
        chosen = {name: report[name] for name in report if name in selected}
        return Decision(should_fix=bool(chosen), mismatched_modules=chosen)
