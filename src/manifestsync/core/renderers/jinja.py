"""Jinja2-backed template renderer."""

from __future__ import annotations

from collections.abc import Mapping
from pathlib import Path

import jinja2

TEMPLATE_SUFFIX = ".j2"


class JinjaTemplateRenderer:
    """Render ``<target_file>.j2`` (or ``<target_file>``) from a template directory.

    Undefined variables raise instead of rendering as empty strings.
    """

    def render(self, template_dir: Path, target_file: str, variables: Mapping[str, str]) -> str:
        env = jinja2.Environment(
            loader=jinja2.FileSystemLoader(str(template_dir)),
            undefined=jinja2.StrictUndefined,
            keep_trailing_newline=True,
            autoescape=False,
        )
        template = env.get_or_select_template([f"{target_file}{TEMPLATE_SUFFIX}", target_file])
        return template.render(**variables)
