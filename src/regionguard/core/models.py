"""Region rule model.

Usage:
    rule = RegionRule(region_name="Arena", required_group="vip")
"""

from dataclasses import dataclass


@dataclass(frozen=True, slots=True)
class RegionRule:
    """Access rule binding a host region to the permission a player needs.

    Attributes:
        region_name: Name of a region known to the host region subsystem.
        required_group: Permission group or capability the player must hold.
    """

    region_name: str
    required_group: str

    def describe(self) -> str:
        return f"Region: {self.region_name}, Required Group: {self.required_group}"
