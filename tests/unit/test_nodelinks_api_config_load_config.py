"""Unit tests for settings loading and interactive initialization."""

import json
import os

import pytest

from nodelinks.api.config.InitializationCancelled import InitializationCancelled
from nodelinks.api.config.initialize import initialize
from nodelinks.api.config.load_config import load_config
from nodelinks.api.config.NodelinksConfig import NodelinksConfig
from nodelinks.api.config.read_mirror_timeout import read_mirror_timeout
from nodelinks.api.guard.UnsafePathError import UnsafePathError
from tests.conftest import FakeProber, ScriptedPrompt, minimal_catalog

pytestmark = pytest.mark.config


def _make_dangerous(store, tmp_path):
    global_pkg = tmp_path / "global" / "nodelinks"
    global_pkg.mkdir(parents=True)
    (store / "node_modules").mkdir(parents=True, exist_ok=True)
    os.symlink(global_pkg, store / "node_modules" / "nodelinks", target_is_directory=True)


def test_valid_settings_are_returned(settings_file, store_dir, catalog):
    config = load_config(catalog, ScriptedPrompt())

    assert config.folder_path == store_dir
    assert config.repo == "registry.npmmirror.com"
    assert config.mirror_timeout == 2000


def test_stored_alias_is_normalized(settings_file, catalog):
    settings_file.write_text(json.dumps({"folderPath": "/srv/deps", "repo": "TAOBAO"}), encoding="utf-8")

    config = load_config(catalog, ScriptedPrompt())

    assert config.repo == "registry.npmmirror.com"
    assert json.loads(settings_file.read_text(encoding="utf-8"))["repo"] == "registry.npmmirror.com"


def test_missing_settings_start_initialization(nodelinks_home, tmp_path):
    deps = tmp_path / "deps"
    # folder, confirm, mirror choice by default (fastest)
    prompt = ScriptedPrompt(str(deps), "y", "")
    prober = FakeProber({"m1.example": 400, "m2.example": 40})

    config = load_config(minimal_catalog(), prompt, prober=prober)

    assert config.folder_path == deps
    assert config.repo == "m2.example"
    assert deps.is_dir()
    assert json.loads((nodelinks_home / "settings.json").read_text(encoding="utf-8")) == {
        "folderPath": str(deps),
        "repo": "m2.example",
        "mirrorTimeout": 5000,
    }
    assert "Mirror index, alias or address (default: 2): " in prompt.questions


def test_malformed_settings_start_initialization(settings_file, tmp_path):
    settings_file.write_text("{broken", encoding="utf-8")
    prompt = ScriptedPrompt(str(tmp_path / "deps"), "y", "one")

    config = load_config(minimal_catalog(), prompt, prober=FakeProber({}))

    assert config.repo == "m1.example"
    assert any("invalid" in m for m in prompt.messages)


def test_dangerous_stored_path_forces_initialization(settings_file, tmp_path):
    danger = tmp_path / "danger"
    _make_dangerous(danger, tmp_path)
    settings_file.write_text(json.dumps({"folderPath": str(danger), "repo": "m1.example"}), encoding="utf-8")
    prompt = ScriptedPrompt(str(tmp_path / "safe"), "y", "1")

    config = load_config(minimal_catalog(), prompt, prober=FakeProber({}))

    assert config.folder_path == tmp_path / "safe"
    assert json.loads(settings_file.read_text(encoding="utf-8"))["folderPath"] == str(tmp_path / "safe")


def test_failed_save_then_load_reinitializes(nodelinks_home, tmp_path, catalog):
    danger = tmp_path / "danger"
    _make_dangerous(danger, tmp_path)
    with pytest.raises(UnsafePathError):
        NodelinksConfig(folder_path=danger, repo="npmjs").save(catalog)
    assert not (nodelinks_home / "settings.json").exists()

    prompt = ScriptedPrompt("q")
    with pytest.raises(InitializationCancelled):
        load_config(catalog, prompt)
    assert prompt.questions[0].startswith("Shared dependency directory")


def test_initialize_rejects_dangerous_folder(nodelinks_home, tmp_path):
    danger = tmp_path / "danger"
    _make_dangerous(danger, tmp_path)
    prompt = ScriptedPrompt(str(danger), str(tmp_path / "ok"), "y", "2")

    config = initialize(minimal_catalog(), prompt, prober=FakeProber({}))

    assert config.folder_path == tmp_path / "ok"
    assert config.repo == "m2.example"
    assert any("contains the global nodelinks installation" in m for m in prompt.messages)


def test_initialize_asks_again_when_not_confirmed(nodelinks_home, tmp_path):
    prompt = ScriptedPrompt(str(tmp_path / "a"), "n", str(tmp_path / "b"), "y", "")

    config = initialize(minimal_catalog(), prompt, prober=FakeProber({"m1.example": 5}))

    assert config.folder_path == tmp_path / "b"
    assert config.repo == "m1.example"


def test_initialize_custom_address(nodelinks_home, tmp_path):
    prompt = ScriptedPrompt(str(tmp_path / "deps"), "y", "3", "http://localhost:4873")
    config = initialize(minimal_catalog(), prompt, prober=FakeProber({}))
    assert config.repo == "http://localhost:4873"


def test_initialize_out_of_range_index_uses_recommendation(nodelinks_home, tmp_path):
    prompt = ScriptedPrompt(str(tmp_path / "deps"), "y", "9")
    config = initialize(minimal_catalog(), prompt, prober=FakeProber({"m2.example": 5}))
    assert config.repo == "m2.example"


def test_initialize_default_folder(nodelinks_home):
    prompt = ScriptedPrompt("", "y", "1")
    config = initialize(minimal_catalog(), prompt, prober=FakeProber({}))
    assert config.folder_path == nodelinks_home / "deps"


def test_read_mirror_timeout(settings_file, nodelinks_home):
    assert read_mirror_timeout() == 2000
    settings_file.write_text('{"mirrorTimeout": "fast"}', encoding="utf-8")
    assert read_mirror_timeout() == 5000
    settings_file.unlink()
    assert read_mirror_timeout() == 5000
