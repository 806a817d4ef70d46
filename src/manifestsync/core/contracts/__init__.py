"""Contracts shared by the manifestsync core and its callers."""

from manifestsync.core.contracts.config import ManifestSyncConfig
from manifestsync.core.contracts.exceptions import (
    ConfigError,
    ManifestSyncError,
    ProjectManifestError,
    PromptError,
    TemplateRenderError,
)
from manifestsync.core.contracts.manifest import (
    MISSING,
    Decision,
    DependencyType,
    Manifest,
    MismatchEntry,
    MismatchReport,
)
from manifestsync.core.contracts.prompter import Prompter
from manifestsync.core.contracts.renderer import TemplateRenderer

__all__ = [
    "MISSING",
    "ConfigError",
    "Decision",
    "DependencyType",
    "Manifest",
    "ManifestSyncConfig",
    "ManifestSyncError",
    "MismatchEntry",
    "MismatchReport",
    "ProjectManifestError",
    "PromptError",
    "Prompter",
    "TemplateRenderError",
    "TemplateRenderer",
]
