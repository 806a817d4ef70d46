"""Config contracts."""

from __future__ import annotations

from pathlib import Path

from pydantic import BaseModel, ConfigDict, Field

DEFAULT_TOOL_NAME = "manifestsync"
DEFAULT_TARGET_FILE = "package.json"


class ManifestSyncConfig(BaseModel):
    model_config = ConfigDict(extra="forbid", frozen=True)

    tool_name: str = Field(default=DEFAULT_TOOL_NAME, min_length=1)
    tool_version: str | None = None
    template_dir: Path | None = None
    target_file: str = Field(default=DEFAULT_TARGET_FILE, min_length=1)
    renderer: str = "jinja"
