"""
test_config_manager.py
----------------------
Tests for JSON config loading and merging.
"""

import json

import pytest

from src.core.services import config_manager
from src.core.services.config_manager import load_config


def test_bundled_asset_manifest_lists_board_tiles():
    manifest = load_config("assets.json", {"images": []}, strict=True)
    assert "images/water-block.png" in manifest["images"]
    assert "_notes" not in manifest


def test_extension_optional():
    rules = load_config("rules", {}, strict=True)
    assert rules["win_score"] > 0


def test_nested_merge_over_defaults(tmp_path):
    path = tmp_path / "custom.json"
    path.write_text(json.dumps({"display": {"fps": 30}, "_notes": "ignored"}), encoding="utf-8")

    merged = load_config(str(path), {"display": {"fps": 60, "width": 707}})

    assert merged == {"display": {"fps": 30, "width": 707}}


def test_missing_file_returns_defaults_copy():
    defaults = {"images": []}
    loaded = load_config("does_not_exist.json", defaults)
    assert loaded == defaults
    assert loaded is not defaults


def test_missing_file_strict_raises():
    with pytest.raises(FileNotFoundError):
        load_config("does_not_exist.json", strict=True)


def test_index_contains_bundled_configs():
    config_manager.rebuild_file_index()
    assert "rules.json" in config_manager._FILE_INDEX
