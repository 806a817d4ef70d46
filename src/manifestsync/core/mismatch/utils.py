"""Mismatch report helpers shared by the core and its callers."""

from __future__ import annotations


def format_dependency_count(count: int) -> str:
    return f"{count} dependenc{'y' if count == 1 else 'ies'}"
