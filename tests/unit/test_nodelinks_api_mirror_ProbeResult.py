"""Unit tests for probe results and their presentation."""

import pytest

from nodelinks.api.mirror.build_probe_url import build_probe_url
from nodelinks.api.mirror.describe_result import describe_result
from nodelinks.api.mirror.ProbeResult import ProbeResult
from nodelinks.api.mirror.rate_latency import rate_latency
from nodelinks.api.mirror.SelectorEntry import SelectorEntry

pytestmark = pytest.mark.mirror


def test_exactly_one_of_latency_and_error():
    with pytest.raises(ValueError):
        ProbeResult(target="x")
    with pytest.raises(ValueError):
        ProbeResult(target="x", elapsed_ms=5, error="late")


def test_failure_without_message_gets_one():
    assert ProbeResult.failure("x", "").error == "network error"


@pytest.mark.parametrize(
    ("elapsed", "rating"),
    [(0, "very fast"), (99, "very fast"), (100, "fast"), (299, "fast"), (300, "good"), (800, "fair"), (1500, "slow")],
)
def test_rate_latency_thresholds(elapsed, rating):
    assert rate_latency(elapsed) == rating


@pytest.mark.parametrize(
    ("address", "url"),
    [
        ("registry.npmjs.org", "https://registry.npmjs.org/"),
        ("mirrors.cloud.tencent.com/npm/", "https://mirrors.cloud.tencent.com/npm/"),
        ("http://localhost:4873", "http://localhost:4873/"),
    ],
)
def test_build_probe_url(address, url):
    assert build_probe_url(address) == url


def test_describe_result_adds_name_and_rating(catalog):
    data = describe_result(ProbeResult.success("registry.npmjs.org", 250, 200), catalog)
    assert data["name"] == "npm official registry"
    assert data["rating"] == "fast"
    assert data["status_code"] == 200

    failed = describe_result(ProbeResult.failure("nowhere.example", "refused"), catalog)
    assert failed["name"] == "nowhere.example"
    assert failed["rating"] == ""


def test_selector_entry_status():
    assert SelectorEntry("a", "a.example", ProbeResult.success("a.example", 42)).status() == "42ms"
    assert SelectorEntry("b", "b.example", ProbeResult.failure("b.example", "x")).status() == "unreachable"
