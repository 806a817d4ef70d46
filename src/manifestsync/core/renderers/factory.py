"""Factory for template renderers by name."""

from __future__ import annotations

from manifestsync.core.contracts.renderer import TemplateRenderer
from manifestsync.core.renderers.jinja import JinjaTemplateRenderer

_REGISTRY: dict[str, type[TemplateRenderer]] = {
    "jinja": JinjaTemplateRenderer,
}


def create_renderer(name: str) -> TemplateRenderer:
    """Create a renderer instance by name.

    Raises:
        ValueError: If the renderer name is not registered.
    """
    if name not in _REGISTRY:
        available = ", ".join(sorted(_REGISTRY))
        raise ValueError(f"Unknown renderer: {name!r}. Available: {available}")
    return _REGISTRY[name]()
