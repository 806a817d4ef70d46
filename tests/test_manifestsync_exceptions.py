"""Tests for the manifestsync exception hierarchy."""

from __future__ import annotations

from manifestsync import ConfigError, ManifestSyncError, ProjectManifestError, PromptError, TemplateRenderError


class TestExceptionHierarchy:
    def test_all_exceptions_inherit_from_manifest_sync_error(self) -> None:
        assert issubclass(ConfigError, ManifestSyncError)
        assert issubclass(ProjectManifestError, ManifestSyncError)
        assert issubclass(TemplateRenderError, ManifestSyncError)
        assert issubclass(PromptError, ManifestSyncError)

    def test_template_render_error_keeps_template_location(self) -> None:
        exc = TemplateRenderError("bad template", template="/t/package.json")

        assert str(exc) == "bad template"
        assert exc.template == "/t/package.json"

    def test_template_render_error_location_is_optional(self) -> None:
        assert TemplateRenderError("bad").template is None
