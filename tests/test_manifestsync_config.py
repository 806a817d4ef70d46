from __future__ import annotations

import json
from pathlib import Path

import pytest

from manifestsync import ConfigError, ManifestSyncConfig, load_config


def test_defaults() -> None:
    config = ManifestSyncConfig()

    assert config.tool_name == "manifestsync"
    assert config.tool_version is None
    assert config.template_dir is None
    assert config.target_file == "package.json"
    assert config.renderer == "jinja"


def test_load_config_resolves_template_dir_relative_to_config(tmp_path: Path) -> None:
    config_path = tmp_path / "conf" / "manifestsync.json"
    config_path.parent.mkdir()
    config_path.write_text(json.dumps({"template_dir": "templates/package", "tool_version": "3.1.0"}))

    config = load_config(config_path)

    assert config.template_dir == (tmp_path / "conf" / "templates" / "package").resolve()
    assert config.tool_version == "3.1.0"


def test_load_config_keeps_absolute_template_dir(tmp_path: Path) -> None:
    config_path = tmp_path / "manifestsync.json"
    config_path.write_text(json.dumps({"template_dir": str(tmp_path / "abs")}))

    assert load_config(config_path).template_dir == tmp_path / "abs"


def test_load_config_missing_file(tmp_path: Path) -> None:
    with pytest.raises(ConfigError, match="failed reading config file"):
        load_config(tmp_path / "missing.json")


def test_load_config_invalid_json(tmp_path: Path) -> None:
    config_path = tmp_path / "manifestsync.json"
    config_path.write_text("{nope")

    with pytest.raises(ConfigError, match="invalid JSON"):
        load_config(config_path)


def test_load_config_rejects_unknown_keys(tmp_path: Path) -> None:
    config_path = tmp_path / "manifestsync.json"
    config_path.write_text(json.dumps({"tool_name": "x", "cache": True}))

    with pytest.raises(ConfigError, match="invalid config"):
        load_config(config_path)
