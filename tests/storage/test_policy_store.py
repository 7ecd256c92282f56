"""Tests for RegionPolicyStore.

Focus: write-through-then-commit (memory never ahead of disk), malformed
documents surfacing as errors, and deterministic ordering.
"""

import json

import pytest

from regionguard import (
    ConfigParseError,
    PersistError,
    RegionPolicyStore,
    RegionRule,
    StoreNotLoadedError,
    ValidationError,
)


def test_load_creates_missing_document(regions_path) -> None:
    store = RegionPolicyStore(regions_path)
    assert not regions_path.exists()

    store.load()

    assert regions_path.exists()
    assert json.loads(regions_path.read_text()) == {}
    assert store.list() == []


def test_initialize_if_missing_leaves_existing_document(regions_path) -> None:
    regions_path.write_text('{"Arena": "vip"}')
    store = RegionPolicyStore(regions_path)

    assert store.initialize_if_missing() is False
    assert json.loads(regions_path.read_text()) == {"Arena": "vip"}


def test_list_before_load_is_distinct_from_empty(regions_path) -> None:
    store = RegionPolicyStore(regions_path)

    assert not store.is_loaded
    with pytest.raises(StoreNotLoadedError):
        store.list()


def test_add_then_list_contains_exactly_one_rule(store) -> None:
    store.add("Arena", "vip")

    assert store.list() == [RegionRule("Arena", "vip")]


def test_add_round_trips_through_disk(store, regions_path) -> None:
    store.add("Arena", "vip")
    store.add("Vault", "admins")

    fresh = RegionPolicyStore(regions_path)
    fresh.load()

    assert set(fresh.list()) == set(store.list())


def test_add_is_last_write_wins(store) -> None:
    store.add("Arena", "vip")
    store.add("Arena", "vip")
    assert store.list() == [RegionRule("Arena", "vip")]

    store.add("Arena", "admins")
    assert store.list() == [RegionRule("Arena", "admins")]
    assert store.get("Arena") == "admins"


def test_document_matches_memory_after_add(store, regions_path) -> None:
    """Disk holds exactly the in-memory mapping, pretty-printed."""
    store.add("Vault", "admins")
    store.add("Arena", "vip")

    text = regions_path.read_text()
    assert text == '{\n  "Arena": "vip",\n  "Vault": "admins"\n}\n'
    assert json.loads(text) == {r.region_name: r.required_group for r in store.list()}


@pytest.mark.parametrize("region_name,required_group", [("", "vip"), ("Arena", ""), ("  ", "vip")])
def test_add_rejects_empty_arguments(store, region_name, required_group) -> None:
    with pytest.raises(ValidationError):
        store.add(region_name, required_group)
    assert store.list() == []


def test_list_is_ordered_by_region_name(store) -> None:
    for name in ["Zoo", "Arena", "Mine"]:
        store.add(name, "vip")

    assert [r.region_name for r in store.list()] == ["Arena", "Mine", "Zoo"]


@pytest.mark.parametrize(
    "content",
    [
        "",
        "not json",
        '["Arena", "vip"]',
        '{"Arena": 3}',
        '{"Arena": {"group": "vip"}}',
        '{"": "vip"}',
    ],
)
def test_load_malformed_document_raises(regions_path, content) -> None:
    regions_path.write_text(content)
    store = RegionPolicyStore(regions_path)

    with pytest.raises(ConfigParseError):
        store.load()
    assert not store.is_loaded
    # The bad file is left for the operator to fix
    assert regions_path.read_text() == content


def test_failed_reload_keeps_previous_rules(store, regions_path) -> None:
    store.add("Arena", "vip")
    regions_path.write_text("{broken")

    with pytest.raises(ConfigParseError):
        store.reload()

    assert store.list() == [RegionRule("Arena", "vip")]


def test_reload_picks_up_external_edits(store, regions_path) -> None:
    store.add("Arena", "vip")
    regions_path.write_text('{"Vault": "admins"}')

    store.reload()

    assert store.list() == [RegionRule("Vault", "admins")]


def test_failed_write_does_not_commit(store, monkeypatch) -> None:
    store.add("Arena", "vip")

    def fail_replace(src, dst):
        raise OSError("disk full")

    monkeypatch.setattr("regionguard.storage.policy_store.os.replace", fail_replace)

    with pytest.raises(PersistError):
        store.add("Vault", "admins")
    with pytest.raises(PersistError):
        store.remove("Arena")

    assert store.list() == [RegionRule("Arena", "vip")]


def test_failed_write_cleans_up_temp_file(store, regions_path, monkeypatch) -> None:
    def fail_replace(src, dst):
        raise OSError("disk full")

    monkeypatch.setattr("regionguard.storage.policy_store.os.replace", fail_replace)

    with pytest.raises(PersistError):
        store.add("Arena", "vip")

    assert [p.name for p in regions_path.parent.iterdir()] == ["regions.json"]


def test_add_before_load_does_not_touch_disk(regions_path) -> None:
    regions_path.write_text("{corrupt")
    store = RegionPolicyStore(regions_path)

    with pytest.raises(StoreNotLoadedError):
        store.add("Arena", "vip")
    assert regions_path.read_text() == "{corrupt"


def test_remove(store) -> None:
    store.add("Arena", "vip")

    assert store.remove("Arena") is True
    assert store.remove("Arena") is False
    assert "Arena" not in store
    assert len(store) == 0


def test_list_returns_snapshot(store) -> None:
    store.add("Arena", "vip")
    snapshot = store.list()

    store.add("Vault", "admins")

    assert snapshot == [RegionRule("Arena", "vip")]


def test_custom_indent(regions_path) -> None:
    store = RegionPolicyStore(regions_path, indent=4)
    store.load()
    store.add("Arena", "vip")

    assert regions_path.read_text() == '{\n    "Arena": "vip"\n}\n'


def test_load_accepts_byte_order_mark(regions_path) -> None:
    regions_path.write_bytes('\ufeff{"Arena": "vip"}'.encode("utf-8"))
    store = RegionPolicyStore(regions_path)

    store.load()

    assert store.list() == [RegionRule("Arena", "vip")]


@pytest.mark.parametrize("content", ['{"  ": "vip"}', '{"Arena": " "}', '{"Arena": "\\t\\n"}'])
def test_load_rejects_whitespace_only_names(regions_path, content) -> None:
    regions_path.write_text(content)
    store = RegionPolicyStore(regions_path)

    with pytest.raises(ConfigParseError):
        store.load()
