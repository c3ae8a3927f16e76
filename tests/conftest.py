"""Shared pytest configuration and fixtures for all tests."""

import json
from pathlib import Path

import pytest

from nodelinks.api.mirror.ProbeResult import ProbeResult
from nodelinks.api.registry.RegistryCatalog import RegistryCatalog


def pytest_configure(config):
    config.addinivalue_line("markers", "unit: fast tests without network or subprocesses")
    config.addinivalue_line("markers", "integration: CLI and local-network tests")
    for domain in ("registry", "mirror", "guard", "config", "link", "npm", "cli"):
        config.addinivalue_line("markers", f"{domain}: tests for the {domain} domain")


def pytest_collection_modifyitems(config, items):
    """Automatically apply markers based on test file location."""
    for item in items:
        path_str = str(item.fspath)
        if "/unit/" in path_str:
            item.add_marker(pytest.mark.unit)
        elif "/integration/" in path_str:
            item.add_marker(pytest.mark.integration)


# =============================================================================
# Test Doubles
# =============================================================================


class ScriptedPrompt:
    """Prompt that replays canned answers and records the conversation."""

    def __init__(self, *answers: str):
        self.answers = list(answers)
        self.questions: list[str] = []
        self.messages: list[str] = []

    def ask(self, question: str) -> str:
        self.questions.append(question)
        if not self.answers:
            raise AssertionError(f"Unexpected question: {question!r}")
        return self.answers.pop(0).strip()

    def say(self, message: str = "") -> None:
        self.messages.append(message)

    @property
    def transcript(self) -> str:
        return "\n".join(self.messages)


class FakeProber:
    """Prober answering from a table: int latency, or None for failure."""

    def __init__(self, latencies: dict[str, int | None]):
        self.latencies = latencies
        self.calls: list[tuple[str, int]] = []

    async def probe(self, address: str, timeout_ms: int) -> ProbeResult:
        self.calls.append((address, timeout_ms))
        latency = self.latencies.get(address)
        if latency is None:
            return ProbeResult.failure(address, "connection refused")
        return ProbeResult.success(address, latency, 200)


# =============================================================================
# Fixtures
# =============================================================================


def minimal_catalog() -> RegistryCatalog:
    """Two real mirrors plus the custom slot."""
    return RegistryCatalog.model_validate(
        {
            "mirrors": [
                {"name": "m1", "value": "m1.example", "alias": ["one"]},
                {"name": "m2", "value": "m2.example", "alias": ["two"]},
                {"name": "custom", "value": "", "alias": ["custom"]},
            ]
        }
    )


@pytest.fixture
def nodelinks_home(tmp_path: Path, monkeypatch) -> Path:
    """Point NODELINKS_HOME at a temporary directory."""
    home = tmp_path / "home"
    home.mkdir()
    monkeypatch.setenv("NODELINKS_HOME", str(home))
    return home


@pytest.fixture
def catalog() -> RegistryCatalog:
    return RegistryCatalog.default()


@pytest.fixture
def store_dir(tmp_path: Path) -> Path:
    """Shared store root with an existing node_modules."""
    store = tmp_path / "store"
    (store / "node_modules").mkdir(parents=True)
    return store


@pytest.fixture
def settings_file(nodelinks_home: Path, store_dir: Path) -> Path:
    """Valid settings document under NODELINKS_HOME."""
    path = nodelinks_home / "settings.json"
    path.write_text(
        json.dumps({"folderPath": str(store_dir), "repo": "registry.npmmirror.com", "mirrorTimeout": 2000}),
        encoding="utf-8",
    )
    return path


# =============================================================================
# Test Helpers
# =============================================================================


def run_cmd(cmd_func, *args, **kwargs):
    """Execute a cmd function and return the result with progress_callback executed."""
    result = cmd_func(*args, **kwargs)
    list(result.progress_callback(result))
    return result
