"""Prompt provider contract."""

from __future__ import annotations

from abc import ABC, abstractmethod

from manifestsync.core.contracts.manifest import Decision, MismatchReport


class Prompter(ABC):
    """Presents a mismatch report to a human and returns their decision.

    Implementations may let the user deselect entries; otherwise the report
    must come back unchanged in :attr:`Decision.mismatched_modules`.
    """

    @abstractmethod
    async def prompt(self, report: MismatchReport) -> Decision: ...  # pragma: no cover
