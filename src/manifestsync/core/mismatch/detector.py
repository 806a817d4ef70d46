"""Detect drift between a project manifest and the template manifest."""

from __future__ import annotations

import logging
from collections.abc import Mapping
from typing import Any

from manifestsync.core.contracts.exceptions import ManifestSyncError, PromptError
from manifestsync.core.contracts.manifest import (
    MISSING,
    Decision,
    DependencyType,
    Manifest,
    MismatchEntry,
    MismatchReport,
)
from manifestsync.core.contracts.prompter import Prompter
from manifestsync.core.mismatch.utils import format_dependency_count
from manifestsync.core.mismatch.versions import is_exempt_self_reference, is_mismatched

_LOG = logging.getLogger(__name__)


class MismatchDetector:
    def __init__(self, prompter: Prompter, *, self_name: str) -> None:
        self._prompter = prompter
        self._self_name = self_name

    def build_report(self, project: Manifest, template: Manifest, *, dev: bool) -> MismatchReport:
        """Classify every template dependency against the project.

        Runtime dependencies are walked first, then development dependencies,
        each in template order.
        """
        report: MismatchReport = {}
        for dep_type in (DependencyType.DEPENDENCIES, DependencyType.DEV_DEPENDENCIES):
            project_deps = project.collection(dep_type)
            for name, required in template.collection(dep_type).items():
                project_version = project_deps.get(name)
                if dep_type is DependencyType.DEPENDENCIES and is_exempt_self_reference(
                    name, project_version, dev=dev, self_name=self._self_name
                ):
                    _LOG.debug("skipping %s (%s): unpinned self-reference in dev mode", name, project_version)
                    continue
                if not is_mismatched(project_version, required):
                    continue
                entry = MismatchEntry(required=required, project=project_version or MISSING, type=dep_type)
                _LOG.debug("%s %s: required %s, project %s", dep_type, name, entry.required, entry.project)
                report[name] = entry
        return report

    async def detect(
        self,
        project: Manifest | Mapping[str, Any],
        template: Manifest,
        *,
        dev: bool,
    ) -> Decision:
        """Build the mismatch report and ask the prompter what to do with it.

        Returns:
            A "no action" :class:`Decision` when the project is in sync,
            otherwise the prompter's decision unchanged.

        Raises:
            PromptError: If the prompter fails.
        """
        report = self.build_report(Manifest.from_project(project), template, dev=dev)
        if not report:
            _LOG.info("project dependencies match the template")
            return Decision.no_action()

        _LOG.info("%s out of sync", format_dependency_count(len(report)))
        try:
            return await self._prompter.prompt(report)
        except ManifestSyncError:
            raise
        except Exception as exc:
            raise PromptError(f"prompt failed: {exc}") from exc
