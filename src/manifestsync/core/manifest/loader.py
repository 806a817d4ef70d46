"""Render the bundled package template into a template manifest."""

from __future__ import annotations

import json
import logging
from importlib import resources
from pathlib import Path
from typing import Any

from pydantic import ValidationError

from manifestsync.core.contracts.config import DEFAULT_TARGET_FILE
from manifestsync.core.contracts.exceptions import TemplateRenderError
from manifestsync.core.contracts.manifest import DependencyType, Manifest
from manifestsync.core.contracts.renderer import TemplateRenderer

_LOG = logging.getLogger(__name__)

SELF_VERSION_KEY = "tool_dependency_self_version"
_REQUIRED_KEYS = tuple(dep_type.value for dep_type in DependencyType)


def bundled_template_dir() -> Path:
    """Location of the ``package`` template shipped with this installation."""
    return Path(str(resources.files("manifestsync").joinpath("templates").joinpath("package")))


class TemplateManifestLoader:
    """Produce the manifest a freshly generated project would declare.

    Nothing is cached: every :meth:`load` re-renders the template so the
    comparison always reflects the running tool's version.
    """

    def __init__(
        self,
        renderer: TemplateRenderer,
        *,
        template_dir: Path | None = None,
        target_file: str = DEFAULT_TARGET_FILE,
        self_version_key: str = SELF_VERSION_KEY,
    ) -> None:
        self._renderer = renderer
        self._template_dir = template_dir or bundled_template_dir()
        self._target_file = target_file
        self._self_version_key = self_version_key

    def load(self, tool_version: str) -> Manifest:
        location = str(self._template_dir / self._target_file)
        _LOG.debug("rendering %s with %s=%s", location, self._self_version_key, tool_version)
        try:
            rendered = self._renderer.render(
                self._template_dir,
                self._target_file,
                {self._self_version_key: tool_version},
            )
        except Exception as exc:
            raise TemplateRenderError(f"failed rendering template {location}: {exc}", template=location) from exc

        return parse_template_manifest(rendered, template=location)


def parse_template_manifest(rendered: str, *, template: str | None = None) -> Manifest:
    """Parse rendered template text, requiring both dependency collections."""
    try:
        payload: Any = json.loads(rendered)
    except json.JSONDecodeError as exc:
        raise TemplateRenderError(f"rendered template is not valid JSON: {exc}", template=template) from exc

    if not isinstance(payload, dict):
        raise TemplateRenderError("rendered template root must be an object", template=template)
    missing = [key for key in _REQUIRED_KEYS if key not in payload]
    if missing:
        raise TemplateRenderError(f"rendered template is missing {', '.join(missing)}", template=template)

    try:
        return Manifest.model_validate(payload)
    except ValidationError as exc:
        raise TemplateRenderError(f"rendered template has an invalid shape: {exc}", template=template) from exc


def load_template_manifest(
    tool_version: str,
    *,
    renderer: TemplateRenderer,
    template_dir: Path | None = None,
    target_file: str = DEFAULT_TARGET_FILE,
) -> Manifest:
    return TemplateManifestLoader(renderer, template_dir=template_dir, target_file=target_file).load(tool_version)
