"""Non-interactive prompter."""

from __future__ import annotations

from manifestsync.core.contracts.manifest import Decision, MismatchReport
from manifestsync.core.contracts.prompter import Prompter


class StaticPrompter(Prompter):
    """Answers every prompt with a fixed decision (``--yes`` / ``--no``)."""

    def __init__(self, answer: bool) -> None:
        self._answer = answer

    async def prompt(self, report: MismatchReport) -> Decision:
        return Decision(should_fix=self._answer, mismatched_modules=dict(report))
