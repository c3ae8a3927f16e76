"""Unit tests for nodelinks.api.registry.RegistryCatalog."""

import json

import pytest

from nodelinks.api.registry.RegistryCatalog import RegistryCatalog
from nodelinks.api.registry.ResolvedTarget import ResolvedTarget
from nodelinks.api.registry.TargetKind import TargetKind
from tests.conftest import minimal_catalog

pytestmark = pytest.mark.registry


def test_every_index_resolves_to_its_entry(catalog):
    for i, mirror in enumerate(catalog.mirrors, start=1):
        resolved = catalog.resolve_input(str(i))
        if mirror.is_custom:
            assert resolved == ResolvedTarget.custom()
        else:
            assert resolved == ResolvedTarget.of(mirror.value)


@pytest.mark.parametrize("raw", ["2", "tencent", "TENCENT", " Tencent "])
def test_tencent_by_index_and_alias(raw):
    catalog = RegistryCatalog.model_validate(
        {
            "mirrors": [
                {"name": "npmmirror", "value": "registry.npmmirror.com", "alias": ["taobao"]},
                {"name": "tencent", "value": "mirrors.cloud.tencent.com/npm/", "alias": ["tencent"]},
                {"name": "custom", "value": ""},
            ]
        }
    )
    assert catalog.resolve_input(raw) == ResolvedTarget.of("mirrors.cloud.tencent.com/npm/")


def test_aliases_are_case_insensitive(catalog):
    assert catalog.resolve_input("NpmJS") == catalog.resolve_input("npmjs")
    assert catalog.resolve_input("Taobao").address == "registry.npmmirror.com"


@pytest.mark.parametrize("raw", [None, "", "   ", "all", "ALL"])
def test_empty_and_all_mean_every_mirror(catalog, raw):
    assert catalog.resolve_input(raw).kind is TargetKind.ALL


def test_custom_alias_resolves_to_custom(catalog):
    assert catalog.resolve_input("custom").kind is TargetKind.CUSTOM


def test_out_of_range_index_passes_through(catalog):
    assert catalog.resolve_input("0") == ResolvedTarget.of("0")
    assert catalog.resolve_input(str(len(catalog) + 1)) == ResolvedTarget.of(str(len(catalog) + 1))


def test_urls_and_unknown_text_pass_through(catalog):
    assert catalog.resolve_input("https://npm.example.com").address == "https://npm.example.com"
    assert catalog.resolve_input("nonsense").address == "nonsense"


def test_normalize_address(catalog):
    assert catalog.normalize_address("") == catalog.default_address
    assert catalog.normalize_address("HUAWEI") == "mirrors.huaweicloud.com/repository/npm/"
    assert catalog.normalize_address("custom") == "custom"
    assert catalog.normalize_address("http://localhost:4873") == "http://localhost:4873"


def test_probe_targets_skip_custom_slot():
    assert minimal_catalog().probe_targets() == ["m1.example", "m2.example"]


def test_lookup_helpers():
    cat = minimal_catalog()
    assert cat.index_of("m2.example") == 2
    assert cat.index_of("elsewhere") is None
    assert cat.name_for("m1.example") == "m1"
    assert cat.name_for("elsewhere") == "elsewhere"
    assert cat.custom_entry().name == "custom"


def test_duplicate_alias_is_rejected():
    with pytest.raises(ValueError, match="Alias 'x'"):
        RegistryCatalog.model_validate(
            {"mirrors": [{"name": "a", "value": "a.example", "alias": ["x"]}, {"name": "b", "value": "b", "alias": ["X"]}]}
        )


def test_custom_slot_cannot_be_first():
    with pytest.raises(ValueError, match="First catalog entry"):
        RegistryCatalog.model_validate({"mirrors": [{"name": "custom", "value": ""}]})


def test_load_writes_default_catalog(nodelinks_home):
    catalog = RegistryCatalog.load()

    path = nodelinks_home / "repos.json"
    assert path.exists()
    assert json.loads(path.read_text(encoding="utf-8")) == catalog.to_list()
    assert catalog == RegistryCatalog.default()


def test_load_reads_existing_catalog(tmp_path):
    path = tmp_path / "repos.json"
    path.write_text(json.dumps([{"name": "local", "value": "localhost:4873", "alias": ["Verdaccio"]}]), encoding="utf-8")

    catalog = RegistryCatalog.load(path)

    assert catalog.resolve_input("verdaccio").address == "localhost:4873"


@pytest.mark.parametrize("content", ["{not json", '{"name": "x"}', '[{"name": "x", "bogus": 1}]'])
def test_load_rejects_bad_catalog(tmp_path, content):
    path = tmp_path / "repos.json"
    path.write_text(content, encoding="utf-8")
    with pytest.raises(ValueError):
        RegistryCatalog.load(path)
