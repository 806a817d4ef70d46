"""Protocol defining how bundled templates are rendered.

The loader only needs rendered text back; the templating engine behind it
is a detail of the implementation passed in.
"""

from __future__ import annotations

from collections.abc import Mapping
from pathlib import Path
from typing import Protocol


class TemplateRenderer(Protocol):
    """Structural-typing protocol for template renderers."""

    def render(self, template_dir: Path, target_file: str, variables: Mapping[str, str]) -> str:
        """Render *target_file* from the template bundle in *template_dir*.

        Args:
            template_dir: Directory holding the template bundle.
            target_file: Name of the file the template generates (e.g. ``"package.json"``).
            variables: Substitution map made available to the template.

        Returns:
            Rendered file contents.
        """
        ...
