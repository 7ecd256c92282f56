"""Tests for RegionGuardSettings."""

from pathlib import Path

import pytest
from pydantic import ValidationError

from regionguard import RegionGuardSettings


def test_defaults(monkeypatch) -> None:
    for var in ["REGIONS_FILE", "MANAGE_PERMISSION", "TILE_SIZE", "JSON_INDENT"]:
        monkeypatch.delenv(f"REGIONGUARD_{var}", raising=False)

    settings = RegionGuardSettings()

    assert settings.regions_file == Path("regions.json")
    assert settings.manage_permission == "regionrestriction.manage"
    assert settings.tile_size == 16
    assert settings.json_indent == 2


def test_environment_overrides(monkeypatch) -> None:
    monkeypatch.setenv("REGIONGUARD_REGIONS_FILE", "/srv/world/regions.json")
    monkeypatch.setenv("REGIONGUARD_TILE_SIZE", "8")

    settings = RegionGuardSettings()

    assert settings.regions_file == Path("/srv/world/regions.json")
    assert settings.tile_size == 8


def test_tile_size_must_be_positive() -> None:
    with pytest.raises(ValidationError):
        RegionGuardSettings(tile_size=0)


@pytest.mark.parametrize(
    "template",
    [
        "{player}, you cannot enter {region}.",
        "Region {0} is closed",
        "Keep out of {region",
        "{region.owner} owns this",
    ],
)
def test_denial_message_rejects_unusable_templates(template) -> None:
    with pytest.raises(ValidationError):
        RegionGuardSettings(denial_message=template)


def test_denial_message_allows_escaped_braces() -> None:
    settings = RegionGuardSettings(denial_message="{{locked}} {region}")

    assert settings.denial_message.format(region="Arena") == "{locked} Arena"
