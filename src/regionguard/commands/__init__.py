"""Administrative chat commands."""

from regionguard.commands.models import Command, CommandArgs
from regionguard.commands.region_commands import RegionCommands

__all__ = [
    "Command",
    "CommandArgs",
    "RegionCommands",
]
