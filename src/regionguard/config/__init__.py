"""Configuration module using Pydantic Settings.

Usage:
    from regionguard.config import RegionGuardSettings

    settings = RegionGuardSettings(tile_size=16)
"""

from regionguard.config.settings import RegionGuardSettings

__all__ = [
    "RegionGuardSettings",
]
