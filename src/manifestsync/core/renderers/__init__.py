"""Template renderer implementations and factory."""

from manifestsync.core.renderers.factory import create_renderer
from manifestsync.core.renderers.jinja import JinjaTemplateRenderer

__all__ = ["JinjaTemplateRenderer", "create_renderer"]
