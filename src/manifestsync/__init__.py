"""Public API surface for manifestsync."""

__version__ = "1.4.0"

from manifestsync.core.config import load_config
from manifestsync.core.contracts import (
    MISSING,
    ConfigError,
    Decision,
    DependencyType,
    Manifest,
    ManifestSyncConfig,
    ManifestSyncError,
    MismatchEntry,
    MismatchReport,
    ProjectManifestError,
    PromptError,
    Prompter,
    TemplateRenderer,
    TemplateRenderError,
)
from manifestsync.core.manifest import TemplateManifestLoader, load_template_manifest
from manifestsync.core.mismatch import MismatchDetector, is_exempt_self_reference
from manifestsync.core.renderers import JinjaTemplateRenderer, create_renderer
from manifestsync.sdk import ManifestSync, check_for_mismatch

__all__ = [
    "MISSING",
    "ConfigError",
    "Decision",
    "DependencyType",
    "JinjaTemplateRenderer",
    "Manifest",
    "ManifestSync",
    "ManifestSyncConfig",
    "ManifestSyncError",
    "MismatchDetector",
    "MismatchEntry",
    "MismatchReport",
    "ProjectManifestError",
    "PromptError",
    "Prompter",
    "TemplateManifestLoader",
    "TemplateRenderError",
    "TemplateRenderer",
    "__version__",
    "check_for_mismatch",
    "create_renderer",
    "is_exempt_self_reference",
    "load_config",
    "load_template_manifest",
]
