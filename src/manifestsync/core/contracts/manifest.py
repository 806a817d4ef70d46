"""Manifest, mismatch report and decision contracts."""

from __future__ import annotations

from collections.abc import Mapping
from enum import StrEnum
from typing import Any

from pydantic import BaseModel, ConfigDict, Field

MISSING = "missing"


class DependencyType(StrEnum):
    DEPENDENCIES = "dependencies"
    DEV_DEPENDENCIES = "devDependencies"


class Manifest(BaseModel):
    """The two dependency collections of a ``package.json``.

    Unknown keys (``name``, ``scripts``, ...) are ignored so a full
    ``package.json`` payload can be validated directly.
    """

    model_config = ConfigDict(populate_by_name=True, frozen=True, extra="ignore")

    dependencies: dict[str, str] = Field(default_factory=dict)
    dev_dependencies: dict[str, str] = Field(default_factory=dict, alias="devDependencies")

    def collection(self, dep_type: DependencyType) -> dict[str, str]:
        if dep_type is DependencyType.DEPENDENCIES:
            return self.dependencies
        return self.dev_dependencies

    @classmethod
    def from_project(cls, payload: Manifest | Mapping[str, Any]) -> Manifest:
        """Normalize a caller-supplied project manifest.

        Missing (or ``null``) collections become empty mappings; the comparison
        code never has to ask whether a collection is present.
        """
        if isinstance(payload, Manifest):
            return payload
        return cls.model_validate(
            {
                "dependencies": payload.get("dependencies") or {},
                "devDependencies": payload.get("devDependencies") or {},
            }
        )


class MismatchEntry(BaseModel):
    model_config = ConfigDict(frozen=True)

    required: str
    project: str
    type: DependencyType

    @property
    def is_missing(self) -> bool:
        return self.project == MISSING


MismatchReport = dict[str, MismatchEntry]


class Decision(BaseModel):
    model_config = ConfigDict(populate_by_name=True)

    should_fix: bool = Field(alias="shouldFix")
    mismatched_modules: MismatchReport = Field(default_factory=dict, alias="mismatchedModules")

    @classmethod
    def no_action(cls) -> Decision:
        return cls(should_fix=False, mismatched_modules={})
