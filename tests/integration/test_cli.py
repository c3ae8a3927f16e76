"""CLI tests - drive nodelinks.cli.main end to end without network."""

import io
import json
import os
import subprocess
from contextlib import redirect_stderr, redirect_stdout

import pytest
import yaml

pytestmark = pytest.mark.cli


def run_cli(args):
    """Execute CLI command and capture stdout/stderr."""
    from nodelinks.cli import main

    out_buf = io.StringIO()
    err_buf = io.StringIO()
    with redirect_stdout(out_buf), redirect_stderr(err_buf):
        try:
            rc = main(args)
        except SystemExit as exc:
            rc = exc.code if isinstance(exc.code, int) else 0
    return rc, out_buf.getvalue(), err_buf.getvalue()


class FakeNpm:
    def __init__(self, returncode=0):
        self.returncode = returncode
        self.calls = []

    def __call__(self, argv, cwd=None, **kwargs):
        self.calls.append((list(argv[1:]), str(cwd)))
        return subprocess.CompletedProcess(argv, self.returncode, stdout='{"dependencies": {"lodash": {}}}', stderr="")


@pytest.fixture
def project(tmp_path):
    path = tmp_path / "project"
    path.mkdir()
    return path


def test_version_flag(nodelinks_home):
    rc, out, _ = run_cli(["--version"])
    assert rc == 0
    assert out.startswith("nodelinks ")


def test_no_command_shows_help(nodelinks_home):
    rc, out, err = run_cli([])
    assert rc == 0
    assert "Usage" in out + err


def test_hidden_aliases_not_in_help(nodelinks_home):
    rc, out, _ = run_cli(["--help"])
    assert rc == 0
    assert "mirror" in out
    assert "change-repo" not in out


@pytest.mark.parametrize("args", [["bogus"], ["mirror", "set"], ["uninstall"], ["--display", "xml", "mirror", "list"]])
def test_usage_errors_exit_2(nodelinks_home, args):
    rc, _, _ = run_cli(args)
    assert rc == 2


def test_mirror_list_json(nodelinks_home):
    rc, out, err = run_cli(["--display", "json", "mirror", "list"])

    assert rc == 0
    data = json.loads(out)
    assert [m["index"] for m in data["mirrors"]] == [1, 2, 3, 4, 5]
    assert "Listing registry mirrors" in err


def test_mirror_list_yaml_by_default(nodelinks_home):
    rc, out, _ = run_cli(["mirror", "list"])
    assert rc == 0
    assert yaml.safe_load(out)["mirrors"][0]["value"] == "registry.npmmirror.com"


@pytest.mark.parametrize("args", [["config", "show"], ["show"]])
def test_config_show(settings_file, store_dir, args):
    rc, out, _ = run_cli(["--display", "json", *args])
    assert rc == 0
    assert json.loads(out)["content"]["folderPath"] == str(store_dir)


@pytest.mark.parametrize("alias", ["rs", "remove-settings"])
def test_remove_settings_alias(settings_file, alias):
    rc, _, _ = run_cli([alias])
    assert rc == 0
    assert not settings_file.exists()


def test_set_repo_alias(settings_file):
    rc, out, _ = run_cli(["--display", "json", "set-repo", "TENCENT"])

    assert rc == 0
    assert json.loads(out)["repo"] == "mirrors.cloud.tencent.com/npm/"
    assert json.loads(settings_file.read_text(encoding="utf-8"))["repo"] == "mirrors.cloud.tencent.com/npm/"


def test_link_create_and_delete(settings_file, store_dir, project):
    rc, _, _ = run_cli(["link", "create", str(project)])
    assert rc == 0
    assert os.path.realpath(project / "node_modules") == os.path.realpath(store_dir / "node_modules")

    rc, _, _ = run_cli(["del", str(project)])
    assert rc == 0
    assert not os.path.lexists(project / "node_modules")


def test_link_delete_real_directory_exits_1(nodelinks_home, project):
    (project / "node_modules").mkdir()

    rc, _, _ = run_cli(["link", "delete", str(project)])

    assert rc == 1
    assert (project / "node_modules").is_dir()


@pytest.mark.parametrize("command", ["install", "i"])
def test_install(monkeypatch, settings_file, store_dir, command):
    fake = FakeNpm()
    monkeypatch.setattr(subprocess, "run", fake)

    rc, out, _ = run_cli(["--display", "json", command, "lodash"])

    assert rc == 0
    assert fake.calls == [(["install", "lodash", "--registry", "https://registry.npmmirror.com"], str(store_dir))]
    assert json.loads(out)["exit_code"] == 0


def test_npm_exit_code_is_propagated(monkeypatch, settings_file):
    monkeypatch.setattr(subprocess, "run", FakeNpm(returncode=5))
    rc, _, _ = run_cli(["ui", "lodash"])
    assert rc == 5


def test_list_alias(monkeypatch, settings_file):
    monkeypatch.setattr(subprocess, "run", FakeNpm())
    rc, out, _ = run_cli(["--display", "json", "l"])
    assert rc == 0
    assert json.loads(out)["packages"] == ["lodash"]


@pytest.mark.parametrize("args", [["config", "version"], ["version"], ["config", "show"]])
def test_display_json_reaches_nested_commands(nodelinks_home, args):
    rc, out, _ = run_cli(["--display", "json", *args])
    assert rc in (0, 1)
    assert "errors" in json.loads(out)
