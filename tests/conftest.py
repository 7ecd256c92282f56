"""Shared test fixtures."""

import sys

import pytest

# Ensure src is in path
sys.path.insert(0, "src")

from regionguard import LocalHost, LocalRegion, RegionGuardSettings, RegionPolicyStore


@pytest.fixture
def regions_path(tmp_path):
    """Region document location inside a per-test directory."""
    return tmp_path / "regions.json"


@pytest.fixture
def store(regions_path):
    """Loaded, empty store backed by a temp file."""
    store = RegionPolicyStore(regions_path)
    store.load()
    return store


@pytest.fixture
def settings(regions_path):
    return RegionGuardSettings(regions_file=regions_path)


@pytest.fixture
def host():
    """Host with spawn at (100, 50), an Arena and a Vault, and a vip group."""
    host = LocalHost(spawn_tile=(100, 50))
    host.add_region(LocalRegion("Arena", x=0, y=0, width=10, height=10))
    host.add_region(LocalRegion("Vault", x=5, y=5, width=10, height=10))
    host.add_group("vip", {"vip"}, parent="default")
    host.add_group("admin", {"regionrestriction.manage"}, parent="vip")
    return host
