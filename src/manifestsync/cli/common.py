"""Shared CLI formatting helpers."""

from __future__ import annotations

from rich.table import Table

from manifestsync.core.contracts.manifest import MismatchReport
from manifestsync.core.mismatch.utils import format_dependency_count

__all__ = ["build_report_table", "format_dependency_count"]


def build_report_table(report: MismatchReport) -> Table:
    table = Table(title="Mismatched dependencies", title_justify="left")
    table.add_column("Module", style="bold")
    table.add_column("Type")
    table.add_column("Project", style="red")
    table.add_column("Required", style="green")
    for name, entry in report.items():
        table.add_row(name, entry.type.value, entry.project, entry.required)
    return table
