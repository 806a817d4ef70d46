"""SDK composition root for manifestsync."""

from __future__ import annotations

from collections.abc import Mapping
from typing import Any

from manifestsync.core.contracts.config import ManifestSyncConfig
from manifestsync.core.contracts.exceptions import ConfigError
from manifestsync.core.contracts.manifest import Decision, Manifest
from manifestsync.core.contracts.prompter import Prompter
from manifestsync.core.contracts.renderer import TemplateRenderer
from manifestsync.core.manifest import TemplateManifestLoader
from manifestsync.core.mismatch import MismatchDetector
from manifestsync.core.renderers import create_renderer


def _running_version() -> str:
    import manifestsync

    return manifestsync.__version__


class ManifestSync:
    """manifestsync SDK public API."""

    def __init__(
        self,
        *,
        renderer: TemplateRenderer,
        prompter: Prompter,
        config: ManifestSyncConfig | None = None,
    ) -> None:
        self._config = config or ManifestSyncConfig()
        self._loader = TemplateManifestLoader(
            renderer,
            template_dir=self._config.template_dir,
            target_file=self._config.target_file,
        )
        self._detector = MismatchDetector(prompter, self_name=self._config.tool_name)

    @classmethod
    def from_config(cls, config: ManifestSyncConfig, *, prompter: Prompter) -> ManifestSync:
        try:
            renderer = create_renderer(config.renderer)
        except ValueError as exc:
            raise ConfigError(str(exc)) from exc
        return cls(renderer=renderer, prompter=prompter, config=config)

    @property
    def tool_version(self) -> str:
        return self._config.tool_version or _running_version()

    def load_template(self) -> Manifest:
        return self._loader.load(self.tool_version)

    async def check_for_mismatch(self, project_package: Manifest | Mapping[str, Any], dev: bool) -> Decision:
        """Compare *project_package* against a freshly rendered template.

        Raises:
            TemplateRenderError: If the bundled template cannot be rendered or parsed.
            PromptError: If the prompter fails.
        """
        template = self.load_template()
        return await self._detector.detect(project_package, template, dev=dev)


async def check_for_mismatch(
    project_package: Manifest | Mapping[str, Any],
    dev: bool,
    *,
    prompter: Prompter,
    renderer: TemplateRenderer | None = None,
    config: ManifestSyncConfig | None = None,
) -> Decision:
    """One-shot convenience wrapper around :class:`ManifestSync`."""
    config = config or ManifestSyncConfig()
    if renderer is None:
        client = ManifestSync.from_config(config, prompter=prompter)
    else:
        client = ManifestSync(renderer=renderer, prompter=prompter, config=config)
    return await client.check_for_mismatch(project_package, dev)
