"""Configuration settings using Pydantic Settings.

Usage:
    from regionguard.config import RegionGuardSettings

    # Load from environment variables (REGIONGUARD_*)
    settings = RegionGuardSettings()

    # Or override with explicit values
    settings = RegionGuardSettings(regions_file="data/regions.json")
"""

from __future__ import annotations

from pathlib import Path

from pydantic import Field, field_validator
from pydantic_settings import BaseSettings, SettingsConfigDict


class RegionGuardSettings(BaseSettings):  # type: ignore[misc]
    """Configuration for the region restriction plugin.

    Attributes:
        regions_file: Path of the persisted region to group mapping.
        manage_permission: Capability required for the admin commands.
        tile_size: Fine position units per tile, used for teleport targets.
        json_indent: Indentation of the pretty-printed region document.
        denial_message: Notice sent on denial; ``{region}`` is substituted.

    Environment Variables:
        REGIONGUARD_REGIONS_FILE
        REGIONGUARD_MANAGE_PERMISSION
        REGIONGUARD_TILE_SIZE
        REGIONGUARD_JSON_INDENT
        REGIONGUARD_DENIAL_MESSAGE
    """

    model_config = SettingsConfigDict(
        env_prefix="REGIONGUARD_",
        env_file=".env",
        env_file_encoding="utf-8",
        extra="ignore",
    )

    regions_file: Path = Path("regions.json")
    manage_permission: str = "regionrestriction.manage"
    tile_size: int = Field(default=16, gt=0)
    json_indent: int = Field(default=2, ge=0)
    denial_message: str = "You are not allowed to enter {region}."

    @field_validator("denial_message")
    @classmethod
    def _check_denial_template(cls, value: str) -> str:
        """Reject templates that would fail when formatted for a region."""
        try:
            value.format(region="x")
        except (KeyError, IndexError, ValueError, AttributeError) as e:
            raise ValueError(
                f"denial_message may only use the {{region}} placeholder: {e!r}"
            ) from e
        return value
