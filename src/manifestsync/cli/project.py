"""Read the project package.json on behalf of the core."""

from __future__ import annotations

import json
from pathlib import Path
from typing import Any

from manifestsync.core.contracts.exceptions import ProjectManifestError


def read_project_manifest(path: str | Path) -> dict[str, Any]:
    manifest_path = Path(path).expanduser()
    if not manifest_path.exists():
        raise ProjectManifestError(f"missing project manifest: {manifest_path}")
    try:
        payload: Any = json.loads(manifest_path.read_text(encoding="utf-8"))
    except json.JSONDecodeError as exc:
        raise ProjectManifestError(f"invalid JSON in project manifest: {manifest_path}") from exc
    except OSError as exc:
        raise ProjectManifestError(f"failed reading project manifest: {manifest_path}") from exc

    if not isinstance(payload, dict):
        raise ProjectManifestError(f"project manifest root must be an object: {manifest_path}")
    return payload
