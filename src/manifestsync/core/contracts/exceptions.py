"""Exception hierarchy for manifestsync."""

from __future__ import annotations


class ManifestSyncError(Exception):
    """Base exception for all manifestsync errors."""


class ConfigError(ManifestSyncError):
    """Configuration loading or validation failure."""


class ProjectManifestError(ManifestSyncError):
    """Project package.json could not be read or parsed by the caller."""


class TemplateRenderError(ManifestSyncError):
    """Bundled package template could not be rendered or parsed.

    Attributes:
        template: Location of the template that failed, when known.
    """

    def __init__(self, message: str, *, template: str | None = None) -> None:
        super().__init__(message)
        self.template = template


class PromptError(ManifestSyncError):
    """Prompt provider failed to produce a decision."""
